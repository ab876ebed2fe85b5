"""
Shared takeoff helpers and the abstract base class for construction-system
calculators.

Input: dimensions dict (the five geometric inputs, already parsed to numbers)
Output: list of MaterialItem dicts for the system's walls, plus the system's
roof structure item
"""

import math
from abc import ABC, abstractmethod

from ..models import Category, ConstructionSystem, DOOR_AREA_M2, INPUT_FIELDS
from .prices import PriceLookup

# Absorbs binary float noise (in cents) before rounding up: 60 × 0.12 = 7.1999…
ROUNDING_TOLERANCE = 1e-9


class TakeoffHelpers:
    """Input parsing, geometry and item building used by every item generator."""

    # Montantes every 40 cm (m)
    STUD_SPACING = 0.40

    def round_up(self, quantity: float) -> float:
        """
        Round UP to 2 decimals, never under-order.
        12.341 → 12.35, 12.34 → 12.34, 12.340000004 → 12.35.
        Non-finite results (overflowing inputs) are rejected.
        """
        cents = quantity * 100
        if not math.isfinite(cents):
            raise ValueError(f"Quantity out of range: {quantity!r}")
        return math.ceil(cents - ROUNDING_TOLERANCE) / 100

    def net_wall_area(self, dims: dict) -> float:
        """Gross wall area minus windows and doors, never below zero."""
        gross = dims["wall_perimeter"] * dims["wall_height"]
        openings = dims["window_area"] + dims["door_count"] * DOOR_AREA_M2
        return max(0.0, gross - openings)

    def stud_count(self, perimeter: float, spacing: float = None) -> int:
        """Studs along the perimeter at the given spacing. Always rounds up."""
        return math.ceil(perimeter / (spacing or self.STUD_SPACING))

    def parse_number(self, value, field: str) -> float:
        """Parse a numeric input. Missing, boolean, non-numeric and non-finite values are rejected."""
        if value is None:
            raise ValueError(f"Missing input field: {field}")
        if isinstance(value, bool):
            raise ValueError(f"Input field {field} is not a number: {value!r}")
        try:
            number = float(value)
        except (ValueError, TypeError):
            raise ValueError(f"Input field {field} is not a number: {value!r}")
        if not math.isfinite(number):
            raise ValueError(f"Input field {field} must be finite: {value!r}")
        return number

    def parse_dimensions(self, inputs: dict) -> dict:
        """
        Validate that all five inputs are present and numeric.
        Negative values are NOT rejected here; they flow through the formulas.
        """
        missing = [f for f in INPUT_FIELDS if f not in inputs]
        if missing:
            raise ValueError(f"Missing input fields: {', '.join(missing)}")
        return {f: self.parse_number(inputs[f], f) for f in INPUT_FIELDS}

    def make_material_item(self, material_id: str, name: str, unit: str,
                           quantity: float, category: Category,
                           prices: PriceLookup) -> dict:
        """Build a MaterialItem dict. Quantity rounded up; price as resolved."""
        return {
            "id": material_id,
            "name": name,
            "unit": unit,
            "quantity": self.round_up(quantity),
            "unit_price": prices.get_price(material_id),
            "category": category.value,
        }


class BaseCalculator(TakeoffHelpers, ABC):
    """All construction-system calculators inherit from this."""

    # Registry key; every concrete calculator sets it
    SYSTEM: ConstructionSystem = None

    # Roof structure emitted by every system calculator
    ROOF_STRUCTURE_ID = "roof_struct_metal"
    ROOF_STRUCTURE_NAME = "Perfil C Galv. 100x50x15x2mm"
    ROOF_STRUCTURE_FACTOR = 1.5     # ml of structure per m² of slab

    @abstractmethod
    def wall_items(self, dims: dict, prices: PriceLookup) -> list:
        """
        Takes the parsed dimensions.
        Returns the Muros block for this system.
        """
        pass

    def roof_structure_item(self, dims: dict, prices: PriceLookup) -> dict:
        """The system's roof framing, first item of the Techo block."""
        return self.make_material_item(
            self.ROOF_STRUCTURE_ID, self.ROOF_STRUCTURE_NAME, "ml",
            dims["plate_area"] * self.ROOF_STRUCTURE_FACTOR,
            Category.TECHO, prices,
        )
