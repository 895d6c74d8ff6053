from __future__ import annotations

import random

from app.core.catalog import catalog_range, get_catalog_value
from app.schemas.prediction import DetailRecord, ProfileInput

from .text import label_key

DEFAULT_SYNTHETIC_RANGE = (72, 90)
_DEFAULT_TEMPLATE = (
    "This career path aligns with {skill} and {interest}. "
    "It suits a {work_style} working style and offers good growth potential."
)
_DEFAULT_FILLERS = {
    "skill": "your current skills",
    "interest": "your interests",
    "work_style": "flexible",
}


def synthetic_description(profile: ProfileInput) -> str:
    template = str(get_catalog_value("synthetic.description", _DEFAULT_TEMPLATE) or _DEFAULT_TEMPLATE)
    defaults = {**_DEFAULT_FILLERS, **(get_catalog_value("synthetic.defaults", {}) or {})}
    fillers = {
        "skill": profile.first_skill() or defaults["skill"],
        "interest": profile.first_interest() or defaults["interest"],
        "work_style": (profile.work_style or "").strip().lower() or defaults["work_style"],
    }
    return template.format(**fillers)


def synthesize_record(label: str, profile: ProfileInput, rng: random.Random) -> DetailRecord:
    low, high = catalog_range("matching.synthetic_range", DEFAULT_SYNTHETIC_RANGE)
    return DetailRecord(
        title=label,
        match=rng.randint(low, high),
        description=synthetic_description(profile),
        synthetic=True,
    )


def reconcile(
    labels: list[str],
    details: list[DetailRecord],
    profile: ProfileInput,
    rng: random.Random,
) -> list[DetailRecord]:
    """One record per label, in label order; unmatched labels get a synthetic record."""
    available: dict[str, DetailRecord] = {}
    for record in details:
        available.setdefault(label_key(record.title), record)

    reconciled: list[DetailRecord] = []
    for label in labels:
        record = available.pop(label_key(label), None)
        if record is None:
            reconciled.append(synthesize_record(label, profile, rng))
        elif record.title != label:
            reconciled.append(record.model_copy(update={"title": label}))
        else:
            reconciled.append(record)
    return reconciled
