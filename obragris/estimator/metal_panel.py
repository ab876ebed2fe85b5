"""
Paneles termoaislantes metálicos calculator.

Polyurethane sandwich panels hung on a structural tube frame:
100x100 columns roughly every 3 m, 100x50 beams top and bottom.
Roof on galvanized C profiles.
"""

import math

from ..models import Category, ConstructionSystem
from .base import BaseCalculator


class MetalPanelCalculator(BaseCalculator):

    SYSTEM = ConstructionSystem.METAL_PANEL

    PANEL_WASTE = 1.05
    COLUMN_SPACING = 3.0
    SCREWS_PER_M2 = 8

    def wall_items(self, dims: dict, prices) -> list:
        perimeter = dims["wall_perimeter"]
        net_area = self.net_wall_area(dims)

        columns = math.ceil(perimeter / self.COLUMN_SPACING)

        return [
            self.make_material_item(
                "metal_panel_wall", "Panel Sándwich Poliuretano (Muro)", "m²",
                net_area * self.PANEL_WASTE, Category.MUROS, prices,
            ),
            self.make_material_item(
                "tube_100x100", "Tubo Estructural 100x100x2.0mm", "ml",
                columns * dims["wall_height"], Category.MUROS, prices,
            ),
            self.make_material_item(
                "tube_100x50", "Tubo Estructural 100x50x2.0mm", "ml",
                perimeter * 2, Category.MUROS, prices,
            ),
            self.make_material_item(
                "screw_panel", "Tornillos para Panel", "unidades",
                net_area * self.SCREWS_PER_M2, Category.MUROS, prices,
            ),
        ]
