"""
Thin Gemini REST client shared by the AI collaborators.

One blocking generateContent call per request. Raises GeminiError on any
transport, HTTP or response-shape failure — callers decide the fallback.
"""

import json
import logging
import urllib.error
import urllib.request
from typing import List, Optional

from ..config import settings

logger = logging.getLogger(__name__)

GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "%s:generateContent?key=%s"
)


class GeminiError(Exception):
    """Gemini call failed or returned something unusable."""


def has_api_key() -> bool:
    return bool(settings.GEMINI_API_KEY)


def build_payload(prompt: Optional[str] = None, contents: Optional[List[dict]] = None,
                  use_search: bool = False) -> dict:
    """Build the generateContent request body."""
    if contents is None:
        contents = [{"role": "user", "parts": [{"text": prompt or ""}]}]
    payload = {
        "contents": contents,
        "generationConfig": {"temperature": settings.GEMINI_TEMPERATURE},
    }
    if use_search:
        payload["tools"] = [{"google_search": {}}]
    return payload


def generate_content(prompt: Optional[str] = None, contents: Optional[List[dict]] = None,
                     use_search: bool = False, model: Optional[str] = None) -> dict:
    """
    Call Gemini generateContent and return the raw decoded response.

    Pass either a single prompt or a full `contents` list (chat history).
    """
    api_key = settings.GEMINI_API_KEY
    if not api_key:
        raise GeminiError("GEMINI_API_KEY not configured")

    model = model or settings.GEMINI_MODEL
    logger.debug("Gemini generateContent model=%s search=%s", model, use_search)
    url = GEMINI_URL % (model, api_key)
    data = json.dumps(build_payload(prompt, contents, use_search)).encode("utf-8")

    req = urllib.request.Request(
        url,
        data=data,
        headers={"Content-Type": "application/json"},
        method="POST",
    )

    try:
        with urllib.request.urlopen(req, timeout=settings.GEMINI_TIMEOUT) as response:
            return json.loads(response.read())
    except urllib.error.HTTPError as e:
        error_body = e.read().decode("utf-8", errors="replace")
        raise GeminiError("Gemini API error %s: %s" % (e.code, error_body)) from e
    except (urllib.error.URLError, TimeoutError, json.JSONDecodeError) as e:
        raise GeminiError("Gemini call failed: %s" % e) from e


def response_text(result: dict) -> str:
    """Concatenate the text parts of the first candidate ("" when there are none)."""
    candidates = result.get("candidates") or []
    if not candidates:
        return ""
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))


def grounding_chunks(result: dict) -> list:
    """Google Search grounding chunks of the first candidate."""
    candidates = result.get("candidates") or []
    if not candidates:
        return []
    metadata = candidates[0].get("groundingMetadata") or {}
    return metadata.get("groundingChunks") or []
