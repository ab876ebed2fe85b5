"""
Chat assistant — answers questions about the current estimate.

Read-only consumer of the estimator output. Always returns text: the
fallback messages below are shown to the user as the assistant's reply.
"""

import json
import logging
from typing import List, Optional

from ..estimator.registry import resolve_system
from .gemini import GeminiError, generate_content, has_api_key, response_text

logger = logging.getLogger(__name__)

MISSING_KEY_REPLY = "Error: API Key faltante."
FAILURE_REPLY = "Ocurrió un error al consultar al asistente."
EMPTY_REPLY = "Lo siento, no pude generar una respuesta."

GREETING = (
    "👋 Hola. Soy tu asistente técnico.\n"
    "¿Tenés dudas sobre cómo llenar los campos o sobre algún material de la lista?"
)

SYSTEM_CONTEXT = """
Eres un asistente experto en construcción para una aplicación de cálculo de obra gris en Argentina.

CONTEXTO DE LA APP:
Sistema Constructivo Seleccionado: %(system)s
Inputs del Usuario: %(inputs)s
Materiales Calculados: %(materials)s

TU OBJETIVO:
1. Ayudar al usuario a entender cómo medir sus superficies.
2. Explicar materiales.
3. ACLARACIÓN IMPORTANTE: Si el usuario pregunta por precios, explícale que los precios por defecto son promedios nacionales estimados. Anímalo a usar el botón "Actualizar Precios" indicando su ciudad, o a editar los precios manualmente en la tabla haciendo click en el valor.

Responde de forma concisa, amable y técnica.
"""


def build_system_context(system, inputs: dict, materials: list) -> str:
    summary = [
        {"name": m["name"], "quantity": m["quantity"], "unit": m["unit"], "price": m["unit_price"]}
        for m in materials
    ]
    return SYSTEM_CONTEXT % {
        "system": resolve_system(system).value,
        "inputs": json.dumps(inputs, ensure_ascii=False),
        "materials": json.dumps(summary, ensure_ascii=False),
    }


def build_contents(question: str, context: str, history: Optional[List[dict]] = None) -> list:
    """
    Chat contents for Gemini. The app context rides on the first user turn;
    the greeting and other leading model turns are dropped since Gemini wants
    the conversation to start with the user.
    """
    turns = list(history or [])
    while turns and turns[0]["role"] != "user":
        turns.pop(0)

    contents = [
        {"role": t["role"], "parts": [{"text": t["text"]}]}
        for t in turns
    ]
    contents.append({"role": "user", "parts": [{"text": "PREGUNTA DEL USUARIO: " + question}]})
    first = contents[0]["parts"][0]
    first["text"] = context + "\n\n" + first["text"]
    return contents


def ask_assistant(question: str, context: dict, history: Optional[List[dict]] = None) -> str:
    """
    Args:
        question: the user's message
        context: {"system", "inputs", "materials"} snapshot of the current estimate
        history: prior ChatMessage dicts ({"role": "user"|"model", "text"})
    """
    if not has_api_key():
        return MISSING_KEY_REPLY

    system_context = build_system_context(
        context["system"], context["inputs"], context["materials"],
    )
    try:
        result = generate_content(contents=build_contents(question, system_context, history))
    except GeminiError as e:
        logger.warning("Assistant call failed: %s", e)
        return FAILURE_REPLY

    return response_text(result) or EMPTY_REPLY
