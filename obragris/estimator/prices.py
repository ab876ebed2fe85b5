"""
Unit price lookup with fallback chain:
1. Caller overrides (manual edits in the table, AI-fetched prices)
2. DEFAULT_PRICES from this file (national averages)

All prices in ARS per unit of the material's own unit of measure
(m³, m², ml, kg, unidades). Prices are never rounded.
"""

import logging

logger = logging.getLogger(__name__)

# FALLBACK PRICES — national market averages, ARS
DEFAULT_PRICES = {
    # Platea
    "conc_h17": 180000.0,          # per m³
    "mesh_steel": 8500.0,          # per m²
    "poly_film": 1200.0,           # per m²
    # Mampostería
    "brick_hollow": 950.0,
    "mortar_mix": 350.0,           # per kg
    "plaster_mix": 450.0,          # per kg
    # Paneles SIP
    "sip_panel": 120000.0,
    "sip_screws": 250.0,
    "osb_95": 9500.0,              # per m², SIP and Steel Frame
    # Steel Frame
    "pgc_100": 8500.0,             # per ml
    "pgu_100": 7200.0,             # per ml
    "insul_wall": 6500.0,          # per m², Steel and Wood Frame
    "screw_t1": 45.0,
    # Wood Frame
    "wood_2x4": 4500.0,            # per ml
    "siding_wood": 8500.0,         # per m²
    # Paneles termoaislantes metálicos
    "metal_panel_wall": 65000.0,   # per m²
    "tube_100x100": 18000.0,       # per ml
    "tube_100x50": 12000.0,        # per ml
    "screw_panel": 250.0,
    # Aberturas
    "win_dvh": 250000.0,           # per m²
    "door_ext": 350000.0,
    # Techo
    "roof_struct_metal": 10500.0,  # per ml
    "roof_struct_wood": 7500.0,    # per ml
    "roof_sheet": 22000.0,         # per m²
    "insul_roof": 6500.0,          # per m²
    "screw_roof": 120.0,
}


class PriceLookup:
    """Resolves the applied unit price for a material id."""

    def __init__(self, overrides: dict = None):
        self.overrides = overrides or {}

    def get_price(self, material_id: str) -> float:
        """Override if present (an explicit 0 counts), else default, else 0.0."""
        price, _ = self.get_price_with_source(material_id)
        return price

    def get_price_with_source(self, material_id: str) -> tuple:
        """Returns (price, source) where source is "override", "default" or "missing"."""
        override = self.overrides.get(material_id)
        if override is not None:
            return float(override), "override"
        if material_id in DEFAULT_PRICES:
            return DEFAULT_PRICES[material_id], "default"
        logger.warning("No default price for material %s", material_id)
        return 0.0, "missing"

