"""
Configuration: packaged data paths and environment-driven settings.

Environment variables:

    VITWISE_SLOTS_PATH     override the packaged slots.json
    VITWISE_COURSES_PATH   override the packaged courses.json
    VITWISE_TIMEOUT        request timeout in seconds (default 60)
    OPENAI_API_KEY         key for the OpenAI recognizer
    OPENAI_MODEL           model name (default gpt-4o-mini)
    ALLOW_NO_OPENAI        "1" lets the tool start without an OpenAI key (dev)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


# PACKAGE_DIR always points to the folder where this file is located
PACKAGE_DIR = Path(__file__).resolve().parent
DATA_DIR = PACKAGE_DIR / "data"

DEFAULT_SLOTS_PATH = DATA_DIR / "slots.json"
DEFAULT_COURSES_PATH = DATA_DIR / "courses.json"


@dataclass(frozen=True)
class Settings:
    slots_path: Path = DEFAULT_SLOTS_PATH
    courses_path: Path = DEFAULT_COURSES_PATH
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    allow_no_openai: bool = False
    timeout: float = 60.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables (os.environ by default).
        Empty values count as unset.
        """
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = (env.get(name) or "").strip()
            return value or None

        try:
            timeout = float(get("VITWISE_TIMEOUT") or 60)
        except ValueError:
            timeout = 60.0

        return cls(
            slots_path=Path(get("VITWISE_SLOTS_PATH") or DEFAULT_SLOTS_PATH),
            courses_path=Path(get("VITWISE_COURSES_PATH") or DEFAULT_COURSES_PATH),
            openai_api_key=get("OPENAI_API_KEY"),
            openai_model=get("OPENAI_MODEL") or "gpt-4o-mini",
            allow_no_openai=get("ALLOW_NO_OPENAI") == "1",
            timeout=timeout,
        )
