"""Structured-output schema sent alongside the prompt.

OPPORTUNITY_LIST_SCHEMA is plain JSON Schema and is the authoritative wire
contract. Providers enforce it on their side with different dialects, so each
backend converts it with one of the helpers below. Local validation of the
reply goes through the pydantic models, which mirror the same shape.
"""

import copy
from typing import Any

_SCORE = {"type": "number", "minimum": 1, "maximum": 10}

RATING_VALUES = ["Alta", "Media", "Baja"]

OPPORTUNITY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "sector": {
            "type": "string",
            "description": "Categoría amplia de la industria a la que pertenece el negocio.",
        },
        "businessType": {
            "type": "string",
            "description": "Tipo específico de negocio dentro de la industria y el país objetivo.",
        },
        "managerEmail": {
            "type": "string",
            "description": (
                "Correo de una persona concreta (gerente, propietario o director), "
                "p. ej. 'nombre.apellido@empresa.com'. Nunca 'info@' ni 'contacto@'."
            ),
        },
        "urgentNeed": {
            "type": "string",
            "description": "La necesidad empresarial más urgente y crítica de este tipo de negocio.",
        },
        "aiSolutionName": {
            "type": "string",
            "description": "Nombre creativo para la aplicación basada en un LLM.",
        },
        "aiSolutionDescription": {
            "type": "string",
            "description": "Descripción breve de la solución de IA propuesta y sus beneficios.",
        },
        "appCreationPrompt": {
            "type": "string",
            "description": (
                "Prompt detallado para que un desarrollador construya la aplicación: "
                "funcionalidades, rol del LLM y datos del cliente necesarios."
            ),
        },
        "proposalEmail": {
            "type": "object",
            "description": "Correo de propuesta comercial dirigido al gerente.",
            "properties": {
                "subject": {"type": "string", "description": "Asunto conciso y profesional."},
                "body": {
                    "type": "string",
                    "description": "Cuerpo en párrafos cortos con la firma indicada en las instrucciones.",
                },
            },
            "required": ["subject", "body"],
        },
        "acceptanceProbability": {
            "type": "object",
            "description": "Estimación de la probabilidad de que la propuesta sea aceptada.",
            "properties": {
                "rating": {"type": "string", "enum": RATING_VALUES},
                "justification": {
                    "type": "string",
                    "description": "Justificación basada en poder adquisitivo y capacidad de innovación.",
                },
                "score": {**_SCORE, "description": "Puntuación de 1 a 10."},
            },
            "required": ["rating", "justification", "score"],
        },
        "easeOfCreation": {**_SCORE, "description": "Facilidad de crear la aplicación, de 1 a 10."},
        "opportunityForGain": {**_SCORE, "description": "Oportunidad de ganancia, de 1 a 10."},
    },
    "required": [
        "sector",
        "businessType",
        "managerEmail",
        "urgentNeed",
        "aiSolutionName",
        "aiSolutionDescription",
        "appCreationPrompt",
        "proposalEmail",
        "acceptanceProbability",
        "easeOfCreation",
        "opportunityForGain",
    ],
}

OPPORTUNITY_LIST_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": OPPORTUNITY_SCHEMA,
}

# OpenAI structured outputs need an object at the top level
ENVELOPE_KEY = "opportunities"


def to_gemini_schema(schema: dict[str, Any] = OPPORTUNITY_LIST_SCHEMA) -> dict[str, Any]:
    """Gemini's OpenAPI subset: upper-case type names, explicit property ordering."""

    def _convert(node: Any) -> Any:
        if isinstance(node, list):
            return [_convert(n) for n in node]
        if not isinstance(node, dict):
            return node
        out = {k: _convert(v) for k, v in node.items() if k != "properties"}
        if isinstance(node.get("type"), str):
            out["type"] = node["type"].upper()
        if "properties" in node:
            out["properties"] = {k: _convert(v) for k, v in node["properties"].items()}
            out["propertyOrdering"] = list(node["properties"])
        return out

    return _convert(copy.deepcopy(schema))


def to_openai_schema(schema: dict[str, Any] = OPPORTUNITY_LIST_SCHEMA) -> dict[str, Any]:
    """Strict-mode JSON Schema: object envelope, closed objects."""

    def _close(node: Any) -> Any:
        if isinstance(node, list):
            return [_close(n) for n in node]
        if not isinstance(node, dict):
            return node
        out = {k: _close(v) for k, v in node.items()}
        if node.get("type") == "object":
            out["additionalProperties"] = False
        return out

    return _close(
        {
            "type": "object",
            "properties": {ENVELOPE_KEY: copy.deepcopy(schema)},
            "required": [ENVELOPE_KEY],
        }
    )
