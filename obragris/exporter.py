"""
Export formats for a calculation result.

Plain-text budget download, WhatsApp share message/link, and the iframe
snippet for embedding the calculator. Pure string formatting, no I/O.
"""

import html
import urllib.parse
from datetime import date
from typing import Optional

from .estimator.engine import total_cost
from .estimator.registry import resolve_system

RULE = "-" * 48
IFRAME_HEIGHT = 800


def format_ars(amount: float) -> str:
    """es-AR number format: 1.234.567,5 — up to 2 decimals, trailing zeros dropped."""
    text = "{:,.2f}".format(amount)
    integer, decimals = text.split(".")
    integer = integer.replace(",", ".")
    decimals = decimals.rstrip("0")
    return "%s,%s" % (integer, decimals) if decimals else integer


def format_number(value: float) -> str:
    """Inputs and quantities as typed: 60 not 60.0, 2.6 stays 2.6."""
    return ("%f" % value).rstrip("0").rstrip(".") if value != int(value) else str(int(value))


def build_text_report(materials: list, system, inputs: dict, location: str = "",
                      today: Optional[date] = None) -> str:
    """Downloadable .txt budget, one padded line per material."""
    system_name = resolve_system(system).value
    today = today or date.today()

    lines = [
        "ESTIMACIÓN OBRA GRIS - %s" % system_name.upper(),
        RULE,
        "Fecha: %s" % today.strftime("%d/%m/%Y"),
        "Ubicación Referencia: %s" % (location or "General"),
        "Superficie: %s m2" % format_number(inputs["plate_area"]),
        "Perímetro Muros: %s m" % format_number(inputs["wall_perimeter"]),
        RULE,
        "",
    ]
    for m in materials:
        subtotal = m["quantity"] * m["unit_price"]
        lines.append("%s | %.2f %s | $%.2f | Sub: $%.2f" % (
            m["name"].ljust(40), m["quantity"], m["unit"].ljust(5), m["unit_price"], subtotal,
        ))
    lines.append("")
    lines.append(RULE)
    lines.append("COSTO TOTAL ESTIMADO: ARS $%s" % format_ars(total_cost(materials)))
    return "\n".join(lines) + "\n"


def report_filename(system) -> str:
    """presupuesto_<system>.txt — only the first space is replaced, as the web app did."""
    return "presupuesto_%s.txt" % resolve_system(system).value.replace(" ", "_", 1)


def build_whatsapp_message(materials: list, system, inputs: dict, location: str = "") -> str:
    """WhatsApp-flavoured summary (*bold* markers)."""
    lines = ["*Estimación Obra Gris - %s*" % resolve_system(system).value]
    if location:
        lines.append("Ubicación Ref: %s" % location)
    lines.append("")
    lines.append("Superficie: %sm²" % format_number(inputs["plate_area"]))
    lines.append("Altura: %sm" % format_number(inputs["wall_height"]))
    lines.append("")
    lines.append("*Materiales:*")
    for m in materials:
        subtotal = m["quantity"] * m["unit_price"]
        lines.append("- %s: %s %s x $%s = $%s" % (
            m["name"], format_number(m["quantity"]), m["unit"],
            format_ars(m["unit_price"]), format_ars(subtotal),
        ))
    lines.append("")
    lines.append("*TOTAL ESTIMADO: ARS $%s*" % format_ars(total_cost(materials)))
    return "\n".join(lines)


def whatsapp_share_url(text: str) -> str:
    return "https://wa.me/?text=%s" % urllib.parse.quote(text, safe="")


def build_embed_snippet(url: str) -> str:
    return (
        '<iframe src="%s" width="100%%" height="%d" '
        'style="border:none; border-radius: 12px; box-shadow: 0 4px 6px -1px rgba(0, 0, 0, 0.1);" '
        'title="Calculadora de Materiales"></iframe>' % (html.escape(url, quote=True), IFRAME_HEIGHT)
    )
