import os
import unittest
from pathlib import Path
from unittest.mock import patch

from vitwise.config import DEFAULT_SLOTS_PATH, Settings


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        s = Settings.from_env({})

        self.assertEqual(s.slots_path, DEFAULT_SLOTS_PATH)
        self.assertIsNone(s.openai_api_key)
        self.assertEqual(s.openai_model, "gpt-4o-mini")
        self.assertFalse(s.allow_no_openai)
        self.assertEqual(s.timeout, 60.0)

    def test_from_env(self) -> None:
        s = Settings.from_env(
            {
                "VITWISE_SLOTS_PATH": "/tmp/slots.json",
                "OPENAI_API_KEY": " sk-abc ",
                "ALLOW_NO_OPENAI": "1",
                "VITWISE_TIMEOUT": "12.5",
            }
        )

        self.assertEqual(s.slots_path, Path("/tmp/slots.json"))
        self.assertEqual(s.openai_api_key, "sk-abc")
        self.assertTrue(s.allow_no_openai)
        self.assertEqual(s.timeout, 12.5)

    def test_bad_timeout_and_empty_key(self) -> None:
        s = Settings.from_env({"VITWISE_TIMEOUT": "soon", "OPENAI_API_KEY": "  "})
        self.assertEqual(s.timeout, 60.0)
        self.assertIsNone(s.openai_api_key)

    def test_reads_process_environment_by_default(self) -> None:
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-from-env"}):
            self.assertEqual(Settings.from_env().openai_api_key, "sk-from-env")
            # an explicit mapping replaces the process environment
            self.assertIsNone(Settings.from_env({}).openai_api_key)


if __name__ == "__main__":
    unittest.main()
