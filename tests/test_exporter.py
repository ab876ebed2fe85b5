"""
Export tests — text budget, WhatsApp message/link, embed snippet.
"""

import urllib.parse
from datetime import date

from obragris.estimator.engine import estimate
from obragris.exporter import (
    build_embed_snippet, build_text_report, build_whatsapp_message, format_ars,
    format_number, report_filename, whatsapp_share_url,
)
from obragris.models import ConstructionSystem


def test_format_ars_uses_argentine_separators():
    assert format_ars(1296000) == "1.296.000"
    assert format_ars(1234567.5) == "1.234.567,5"
    assert format_ars(0.25) == "0,25"
    assert format_ars(950) == "950"


def test_format_number_drops_trailing_zeros():
    assert format_number(60.0) == "60"
    assert format_number(2.6) == "2.6"
    assert format_number(7.2) == "7.2"


def test_text_report(sample_inputs):
    materials = estimate(sample_inputs, ConstructionSystem.MASONRY)
    text = build_text_report(materials, ConstructionSystem.MASONRY, sample_inputs,
                             "Córdoba", today=date(2025, 3, 14))
    lines = text.splitlines()
    assert lines[0] == "ESTIMACIÓN OBRA GRIS - MAMPOSTERÍA (LADRILLOS)"
    assert "Fecha: 14/03/2025" in lines
    assert "Ubicación Referencia: Córdoba" in lines
    assert "Superficie: 60 m2" in lines
    assert "Perímetro Muros: 40 m" in lines
    assert "Hormigón H17 Elaborado".ljust(40) + " | 7.20 m³    | $180000.00 | Sub: $1296000.00" in lines
    assert lines[-1].startswith("COSTO TOTAL ESTIMADO: ARS $")
    # One line per material
    assert sum(1 for line in lines if " | Sub: $" in line) == len(materials)


def test_text_report_without_location(sample_inputs):
    materials = estimate(sample_inputs, ConstructionSystem.SIP)
    text = build_text_report(materials, "sip", sample_inputs)
    assert "Ubicación Referencia: General" in text


def test_report_filename_replaces_first_space_only():
    assert report_filename(ConstructionSystem.STEEL_FRAME) == "presupuesto_Steel_Frame.txt"
    assert report_filename(ConstructionSystem.METAL_PANEL) == \
        "presupuesto_Paneles_Termoaislantes Metálicos.txt"


def test_whatsapp_message(sample_inputs):
    materials = estimate(sample_inputs, ConstructionSystem.MASONRY)
    text = build_whatsapp_message(materials, ConstructionSystem.MASONRY, sample_inputs, "Rosario")
    lines = text.splitlines()
    assert lines[0] == "*Estimación Obra Gris - Mampostería (Ladrillos)*"
    assert lines[1] == "Ubicación Ref: Rosario"
    assert "Superficie: 60m²" in lines
    assert "Altura: 2.6m" in lines
    assert "- Hormigón H17 Elaborado: 7.2 m³ x $180.000 = $1.296.000" in lines
    assert lines[-1].startswith("*TOTAL ESTIMADO: ARS $")


def test_whatsapp_message_without_location(sample_inputs):
    materials = estimate(sample_inputs, ConstructionSystem.MASONRY)
    text = build_whatsapp_message(materials, ConstructionSystem.MASONRY, sample_inputs)
    assert "Ubicación Ref" not in text


def test_whatsapp_share_url_round_trips():
    text = "*Total*: $1.000\nhola & chau"
    url = whatsapp_share_url(text)
    assert url.startswith("https://wa.me/?text=")
    assert "\n" not in url and " " not in url
    assert urllib.parse.unquote(url.split("text=", 1)[1]) == text


def test_embed_snippet():
    snippet = build_embed_snippet("https://example.com/calc")
    assert snippet.startswith('<iframe src="https://example.com/calc"')
    assert 'width="100%"' in snippet
    assert 'height="800"' in snippet
    assert 'title="Calculadora de Materiales"' in snippet


def test_embed_snippet_escapes_url():
    snippet = build_embed_snippet('https://example.com/?a=1&b="x"><script>')
    assert 'src="https://example.com/?a=1&amp;b=&quot;x&quot;&gt;&lt;script&gt;"' in snippet
    assert "<script>" not in snippet
    assert snippet.count('"') == 10
