"""
Paneles SIP calculator.

Panels are 122 x 244 cm (~2.97 m² each) with 10% waste.
Exterior OSB sheathing over the panels. Roof on timber rafters.
"""

from ..models import Category, ConstructionSystem
from .base import BaseCalculator


class SIPCalculator(BaseCalculator):

    SYSTEM = ConstructionSystem.SIP

    ROOF_STRUCTURE_ID = "roof_struct_wood"
    ROOF_STRUCTURE_NAME = "Tirantes Madera 2\"x6\" (Estructura Techo)"

    PANEL_AREA_M2 = 2.97
    PANEL_WASTE = 1.10
    SCREWS_PER_M2 = 10
    OSB_WASTE = 1.05

    def wall_items(self, dims: dict, prices) -> list:
        net_area = self.net_wall_area(dims)
        return [
            self.make_material_item(
                "sip_panel", "Panel SIP 122x244cm (Espesor std)", "unidades",
                (net_area / self.PANEL_AREA_M2) * self.PANEL_WASTE, Category.MUROS, prices,
            ),
            self.make_material_item(
                "sip_screws", "Tornillos SIP (Caja)", "unidades",
                net_area * self.SCREWS_PER_M2, Category.MUROS, prices,
            ),
            self.make_material_item(
                "osb_95", "Placa OSB 9.5mm (Exterior)", "m²",
                net_area * self.OSB_WASTE, Category.MUROS, prices,
            ),
        ]
