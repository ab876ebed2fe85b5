"""
Steel Frame calculator.

PGC 100 studs every 40 cm, PGU 100 tracks top and bottom plus lintels,
OSB bracing, glass wool and T1 self-drilling screws.
Roof on galvanized C profiles.
"""

from ..models import Category, ConstructionSystem
from .base import BaseCalculator


class SteelFrameCalculator(BaseCalculator):

    SYSTEM = ConstructionSystem.STEEL_FRAME

    PROFILE_WASTE = 1.05
    SHEET_WASTE = 1.05
    T1_SCREWS_PER_M2 = 30

    def wall_items(self, dims: dict, prices) -> list:
        perimeter = dims["wall_perimeter"]
        net_area = self.net_wall_area(dims)

        # Montantes — PGC 100x40
        studs = self.stud_count(perimeter)
        studs_length = studs * dims["wall_height"]

        # Soleras — PGU 100x35: floor + top track, plus lintels approximated from window area
        tracks_length = (perimeter * 2) + (dims["window_area"] * 2)

        return [
            self.make_material_item(
                "pgc_100", "Perfil PGC 100x40x0.9mm (Montantes)", "ml",
                studs_length * self.PROFILE_WASTE, Category.MUROS, prices,
            ),
            self.make_material_item(
                "pgu_100", "Perfil PGU 100x35x0.9mm (Soleras)", "ml",
                tracks_length * self.PROFILE_WASTE, Category.MUROS, prices,
            ),
            self.make_material_item(
                "osb_95", "Placa OSB 9.5mm (Rigidización)", "m²",
                net_area * self.SHEET_WASTE, Category.MUROS, prices,
            ),
            self.make_material_item(
                "insul_wall", "Lana de Vidrio (Muro)", "m²",
                net_area * self.SHEET_WASTE, Category.MUROS, prices,
            ),
            self.make_material_item(
                "screw_t1", "Tornillos T1 Punta Mecha", "unidades",
                net_area * self.T1_SCREWS_PER_M2, Category.MUROS, prices,
            ),
        ]
