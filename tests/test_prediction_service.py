import asyncio
import os
import random
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.catalog import get_catalog_value  # noqa: E402
from app.parsing import build_fallback_result  # noqa: E402
from app.schemas.prediction import ProfileInput  # noqa: E402
from app.services import prediction_service  # noqa: E402
from app.services.prediction_service import predict_professions  # noqa: E402

MODEL_TEXT = (
    "ESTIMATED IQ: 127\n\n"
    "CAREER RECOMMENDATIONS:\n"
    "1. Marine Biologist\n"
    "2. Environmental Consultant\n\n"
    "DETAILED ANALYSIS:\n"
    "Career 1: Marine Biologist (Match: 93%)\n"
    "Growth Potential: steady research funding\n"
    "Career 2: Environmental Consultant (Match: 86%)\n"
    "Salary Range: moderate to high\n"
)


class _FakeClient:
    def __init__(self, text="", delay=0.0, error=None):
        self._text = text
        self._delay = delay
        self._error = error
        self.calls = 0

    async def complete(self, messages):
        self.calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return self._text


class FallbackResultTests(unittest.TestCase):
    def test_static_fallback_uses_catalog(self):
        result = build_fallback_result(5)
        catalog_titles = [entry["title"] for entry in get_catalog_value("fallback.details")]
        self.assertEqual(result.source, "fallback")
        self.assertEqual(result.estimate, 115)
        self.assertEqual(result.labels, catalog_titles[:5])
        self.assertEqual([d.title for d in result.details], result.labels)
        self.assertTrue(all(d.synthetic for d in result.details))

    def test_static_fallback_topped_up_past_catalog_size(self):
        result = build_fallback_result(12, rng=random.Random(1))
        self.assertEqual(len(result.labels), 12)
        self.assertEqual(len(result.details), 12)
        self.assertEqual(len({label.casefold() for label in result.labels}), 12)


class PredictProfessionsTests(unittest.TestCase):
    def _run(self, client, **kwargs):
        with patch.object(prediction_service, "prediction_llm_enabled", return_value=True), patch.object(
            prediction_service, "get_ai_client", return_value=client
        ):
            return asyncio.run(predict_professions(ProfileInput(skills="biology"), **kwargs))

    def test_model_text_is_parsed(self):
        client = _FakeClient(MODEL_TEXT)
        result = self._run(client, target_count=4, rng=random.Random(2))
        self.assertEqual(client.calls, 1)
        self.assertEqual(result.source, "model")
        self.assertEqual(result.estimate, 127)
        self.assertEqual(result.labels[:2], ["Marine Biologist", "Environmental Consultant"])
        self.assertEqual([d.match for d in result.details[:2]], [93, 86])
        self.assertEqual(len(result.details), 4)

    def test_provider_error_returns_static_fallback(self):
        result = self._run(_FakeClient(error=RuntimeError("quota exceeded")), target_count=5)
        self.assertEqual(result.source, "fallback")
        self.assertEqual(len(result.labels), 5)

    def test_empty_text_returns_static_fallback(self):
        result = self._run(_FakeClient("   "), target_count=5)
        self.assertEqual(result.source, "fallback")

    def test_timeout_returns_static_fallback(self):
        fast_settings = SimpleNamespace(ai_timeout_s=0.01, prediction_target_count=5)
        with patch.object(prediction_service, "settings", fast_settings):
            result = self._run(_FakeClient(MODEL_TEXT, delay=0.5))
        self.assertEqual(result.source, "fallback")
        self.assertEqual(len(result.labels), 5)

    def test_disabled_model_skips_the_call(self):
        client = _FakeClient(MODEL_TEXT)
        with patch.dict(os.environ, {"PREDICTION_LLM_ENABLED": "0"}), patch.object(
            prediction_service, "get_ai_client", return_value=client
        ):
            result = asyncio.run(predict_professions(ProfileInput(), target_count=3))
        self.assertEqual(client.calls, 0)
        self.assertEqual(result.source, "fallback")
        self.assertEqual(len(result.labels), 3)

    def test_placeholder_key_counts_as_unconfigured(self):
        env = {"PREDICTION_LLM_ENABLED": "1", "AI_PROVIDER": "gemini", "GOOGLE_AI_API_KEY": "your_key_here"}
        with patch.dict(os.environ, env):
            os.environ.pop("GEMINI_API_KEY", None)
            self.assertFalse(prediction_service.prediction_llm_enabled())


if __name__ == "__main__":
    unittest.main()
