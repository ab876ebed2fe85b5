"""
AI price lookup — asks Gemini (with Google Search) for current unit prices.

The result is a partial {material_id: price} map. It is never applied here:
callers merge it into their price overrides and re-run the estimate.

Fallback: any failure (no key, HTTP error, unparseable output) returns None.
Never crashes.
"""

import json
import logging
import re
from typing import Dict, List, Optional

from ..config import settings
from .gemini import GeminiError, generate_content, has_api_key, response_text

logger = logging.getLogger(__name__)


class PriceOracle:
    """
    Fetches average market prices for a material list.

    Usage:
        oracle = PriceOracle()
        prices = oracle.fetch_material_prices(materials, "Córdoba")
        if prices:
            overrides.update(prices)
    """

    def fetch_material_prices(self, materials: List[dict],
                              location: str = "") -> Optional[Dict[str, float]]:
        """
        Args:
            materials: MaterialItem dicts from the estimator (id, name, unit, ...)
            location: free-text city/province; empty means national averages

        Returns:
            {material_id: unit_price} for every material Gemini priced, or None.
        """
        if not has_api_key():
            logger.info("No GEMINI_API_KEY — skipping price lookup")
            return None

        location = self.resolve_location(location)
        try:
            prompt = self._build_prompt(materials, location)
            result = generate_content(prompt, use_search=True)
            prices_by_name = self._parse_response(response_text(result))
        except GeminiError as e:
            logger.warning("Price lookup failed for %s: %s", location, e)
            return None

        if prices_by_name is None:
            logger.warning("Price lookup for %s returned no usable JSON", location)
            return None

        return self._match_prices(materials, prices_by_name)

    def resolve_location(self, location: str) -> str:
        location = (location or "").strip()
        return location or settings.DEFAULT_LOCATION

    def _build_prompt(self, materials: List[dict], location: str) -> str:
        material_list = ", ".join("%s (%s)" % (m["name"], m["unit"]) for m in materials)
        return """
Act as a construction cost estimator for %(location)s.
I need the current average market unit price in Argentine Pesos (ARS) for the following materials in %(location)s.

Materials: %(materials)s

Use Google Search to find current prices in this specific location if possible, otherwise use national averages.
Return ONLY a valid JSON object where the keys are the material names provided and the values are the numeric price (no currency symbols).
Example format: { "Hormigón H17 Elaborado": 180000, "Malla Acero Simag (15x15)": 8500 }
""" % {"location": location, "materials": material_list}

    def _parse_response(self, text: str) -> Optional[dict]:
        """Parse the name → price object. Tolerates markdown fences around it."""
        if not text:
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            match = re.search(r'\{[\s\S]*\}', text)
            if not match:
                return None
            try:
                data = json.loads(match.group())
            except json.JSONDecodeError:
                return None

        if not isinstance(data, dict):
            return None
        return data

    def _match_prices(self, materials: List[dict], prices_by_name: dict) -> Dict[str, float]:
        """
        Map names back to ids. A response key matches a material when either
        string contains the other; only real numbers are accepted.
        """
        prices = {}
        for material in materials:
            name = material["name"]
            key = next(
                (k for k in prices_by_name if k in name or name in k),
                None,
            )
            if key is None:
                continue
            value = prices_by_name[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                continue
            prices[material["id"]] = float(value)
        return prices
