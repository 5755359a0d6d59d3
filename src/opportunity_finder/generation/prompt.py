"""Instruction prompt for opportunity generation."""

from opportunity_finder.config import (
    DEFAULT_RESULT_COUNT,
    DEFAULT_SENDER_NAME,
    DEFAULT_SENDER_URL,
)


def build_prompt(
    industry: str,
    country: str,
    *,
    count: int = DEFAULT_RESULT_COUNT,
    sender_name: str = DEFAULT_SENDER_NAME,
    sender_url: str = DEFAULT_SENDER_URL,
) -> str:
    """
    Build the generation instruction. industry and country are embedded verbatim.
    Order: result count, high-acceptance focus, numbered per-item procedure,
    output format.
    """
    return f"""Eres un analista de negocios experto y arquitecto de soluciones de IA especializado en Modelos de Lenguaje Grandes (LLM).
Tu tarea es identificar {count} oportunidades de negocio distintas dentro de la industria '{industry}' en '{country}', enfocándote exclusivamente en aquellas con una probabilidad de aceptación 'Alta'.

Para cada una de las {count} oportunidades, realiza el siguiente análisis:
1. **Sector y tipo de negocio:** Indica el sector amplio y nombra un tipo específico de negocio con los recursos y la mentalidad innovadora para adoptar una solución de IA.
2. **Correo electrónico:** Proporciona la dirección de una persona concreta (gerente, propietario o director), p. ej. 'nombre.apellido@ejemplonegocio.com'. Evita estrictamente direcciones genéricas como 'info@', 'contacto@' o 'ventas@'.
3. **Necesidad urgente:** Identifica el problema empresarial más crítico y urgente de este tipo de negocio, un punto de dolor de alto impacto que justifique invertir en tecnología.
4. **Solución de IA basada en LLM:** Diseña una solución práctica y realizable con tecnologías LLM actuales (chatbots, análisis de texto, generación de contenido, preguntas y respuestas). Considera que el LLM puede necesitar datos privados del cliente (catálogos, historiales, documentos internos). Dale un nombre creativo y una breve descripción.
5. **Prompt de desarrollo:** Escribe un prompt detallado para un desarrollador de software que describa cómo construir la aplicación: rol del LLM, datos del cliente necesarios y funcionalidades clave.
6. **Correo de propuesta:** Crea un objeto con 'subject' y 'body' para un correo persuasivo dirigido al gerente.
   * subject: conciso y relevante, p. ej. "Propuesta de IA para optimizar [Necesidad Urgente] en [Tipo de Negocio]".
   * body: identifica la necesidad urgente, presenta la solución por su nombre, explica los beneficios clave y termina con una llamada a la acción para agendar una reunión. Tono de consultor experto, en párrafos cortos separados por saltos de línea. Finaliza exactamente con esta firma:
     Atentamente,
     {sender_name}
     {sender_url}
7. **Puntuaciones:** Asigna 'easeOfCreation' (facilidad de creación, 1 a 10) y 'opportunityForGain' (oportunidad de ganancia, 1 a 10).
8. **Probabilidad de aceptación:** Asigna la calificación 'Alta', una puntuación 'score' de 1 a 10 y una breve justificación de por qué este negocio tiene el poder adquisitivo y la necesidad de innovación para aceptar la propuesta.

Devuelve toda la salida como un único array JSON válido de {count} objetos conforme al esquema proporcionado. Cada objeto debe tener 'rating' dentro de 'acceptanceProbability' establecido en 'Alta'. No incluyas texto introductorio, formato markdown ni ningún contenido fuera del array JSON."""
