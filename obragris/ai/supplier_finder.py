"""
AI supplier search — Gemini with Google Search grounding.

Returns the model's free-text answer plus the cited web sources,
deduplicated by URI.
"""

import logging
from typing import Optional

from ..estimator.registry import resolve_system
from .gemini import GeminiError, generate_content, grounding_chunks, has_api_key, response_text

logger = logging.getLogger(__name__)

NO_RESULTS_TEXT = "No results found."


class SupplierFinder:

    def find_suppliers(self, system, location: str = "") -> Optional[dict]:
        """
        Returns {"text": str, "sources": [{"title", "uri"}]} or None on failure.
        """
        if not has_api_key():
            logger.info("No GEMINI_API_KEY — skipping supplier search")
            return None

        system_name = resolve_system(system).value
        prompt = self._build_prompt(system_name, location)
        try:
            result = generate_content(prompt, use_search=True)
        except GeminiError as e:
            logger.warning("Supplier search failed for %s: %s", system_name, e)
            return None

        return {
            "text": response_text(result) or NO_RESULTS_TEXT,
            "sources": self._extract_sources(grounding_chunks(result)),
        }

    def _build_prompt(self, system_name: str, location: str) -> str:
        location = (location or "").strip()
        where = "in %s" % location if location else "in Argentina"
        return (
            'Find specialized construction material suppliers %s specifically for the system: "%s". '
            "Provide a list of 5 top suppliers with their names, locations, and a brief description."
            % (where, system_name)
        )

    def _extract_sources(self, chunks: list) -> list:
        """Web chunks with both uri and title; the last chunk per uri wins, first-seen order kept."""
        sources = {}
        for chunk in chunks:
            web = chunk.get("web") if isinstance(chunk, dict) else None
            if not web or not web.get("uri") or not web.get("title"):
                continue
            sources[web["uri"]] = {"title": web["title"], "uri": web["uri"]}
        return list(sources.values())
