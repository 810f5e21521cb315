"""
Recognition (timetable photo -> raw course rows).

Sends the image to an OpenAI vision model with a strict-OCR prompt and
returns the "rows" list exactly as the model printed it. Nothing is
normalized here: "TAA2" must stay "TAA2".

The result is a list of dicts with the keys
courseCode, courseName, slotString, type, venue.
"""

from __future__ import annotations

import base64
import json
import logging
import mimetypes
import re
from pathlib import Path
from typing import Any, Dict, List

import requests

from vitwise.config import Settings
from vitwise.errors import ConfigError, RecognitionError


logger = logging.getLogger(__name__)

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"

_SECRET = re.compile(r"sk-[A-Za-z0-9_-]{8,}")

SYSTEM_PROMPT = (
    "You are performing STRICT OCR extraction from an image. "
    "You MUST return text EXACTLY as printed, including repeated letters, "
    "digits, punctuation, spacing, and capitalization. "
    "Do NOT guess, interpret, fix, shorten, or normalize text. "
    "If a slot is printed as 'TAA2', it MUST be returned as 'TAA2', not 'TA2'. "
    "Do NOT change 'L16' to 'L6', do NOT fix typos, do NOT remove characters. "
    "If uncertain, copy literally.\n\n"
    "Extract ALL timetable rows visible.\n\n"
    "Return ONLY valid JSON in the EXACT format:\n"
    '{ "rows": [ { "courseCode":"", "courseName":"", "slotString":"", "type":"", "venue":"" } ] }\n\n'
    "rules:\n"
    "- courseCode: EXACT text, no normalization\n"
    "- courseName: EXACT text, no paraphrasing\n"
    "- slotString: EXACT text, including repeating characters\n"
    "- type: EXACT text\n"
    "- venue: EXACT text\n\n"
    "The output must contain ONLY JSON with no commentary."
)


def redact_secrets(message: str) -> str:
    """
    Replace anything that looks like an OpenAI key with 'sk-REDACTED'.
    """
    return _SECRET.sub("sk-REDACTED", message)


def require_api_key(settings: Settings) -> None:
    """
    Refuse to run without an OpenAI key unless ALLOW_NO_OPENAI=1.
    """
    if not settings.openai_api_key and not settings.allow_no_openai:
        raise ConfigError("Missing OPENAI_API_KEY (set ALLOW_NO_OPENAI=1 to run without it)")


def _image_data_url(image_path: Path) -> str:
    mime, _ = mimetypes.guess_type(image_path.name)
    encoded = base64.b64encode(image_path.read_bytes()).decode("ascii")
    return f"data:{mime or 'image/jpeg'};base64,{encoded}"


def _build_payload(data_url: str, model: str) -> Dict[str, Any]:
    return {
        "model": model,
        "response_format": {"type": "json_object"},
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Perform STRICT OCR. Return exact text. No corrections."},
                    {"type": "image_url", "image_url": {"url": data_url}},
                ],
            },
        ],
        # Do not let the model explain anything
        "temperature": 0,
        "stop": ["Note:", "Explanation:", "```"],
    }


def parse_rows_json(content: Any) -> List[Dict[str, Any]]:
    """
    Validate the model output and return its "rows" list.
    """
    if not content:
        raise RecognitionError("Missing response content from recognition service")
    if not isinstance(content, str):
        logger.error("Recognition returned non-text content: %.200r", content)
        raise RecognitionError("OCR returned invalid structure")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        logger.error("Recognition returned invalid JSON: %.200s", content)
        raise RecognitionError("OCR returned invalid JSON") from exc

    rows = data.get("rows") if isinstance(data, dict) else None
    if not isinstance(rows, list):
        logger.error("Recognition returned invalid structure: %.200s", content)
        raise RecognitionError("OCR returned invalid structure")

    return rows


def extract_rows(
    image_path: str | Path,
    settings: Settings,
    session: requests.Session | None = None,
) -> List[Dict[str, Any]]:
    """
    Run strict OCR on one timetable image and return the raw rows.
    """
    if not settings.openai_api_key:
        raise ConfigError("OPENAI_API_KEY is required for recognition")

    http = session or requests.Session()
    path = Path(image_path)

    try:
        payload = _build_payload(_image_data_url(path), settings.openai_model)
        resp = http.post(
            OPENAI_CHAT_URL,
            json=payload,
            headers={"Authorization": f"Bearer {settings.openai_api_key}"},
            timeout=settings.timeout,
        )
        resp.raise_for_status()
        body = resp.json()
    except (OSError, requests.RequestException, ValueError) as exc:
        message = redact_secrets(str(exc))
        logger.error("Recognition request failed: %s", message)
        raise RecognitionError(f"OCR failed: {message}") from exc

    try:
        content = body["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        content = None

    rows = parse_rows_json(content)
    logger.info("Recognition returned %d rows for %s", len(rows), path.name)
    return rows
