from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.parsing import extract  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse a saved model response into career suggestions.")
    parser.add_argument("response", help="Path to a text file holding the raw model response ('-' for stdin)")
    parser.add_argument("--profile", help="Optional JSON file with the profile that produced the response")
    parser.add_argument("--count", type=int, default=None, help="Number of careers to return")
    parser.add_argument("--seed", type=int, default=None, help="Seed for padding and backfill randomness")
    args = parser.parse_args()

    if args.response == "-":
        raw_text = sys.stdin.read()
    else:
        raw_text = Path(args.response).read_text(encoding="utf-8")

    profile = None
    if args.profile:
        profile = json.loads(Path(args.profile).read_text(encoding="utf-8"))

    result = extract(raw_text, profile, args.count, rng=random.Random(args.seed))
    print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
