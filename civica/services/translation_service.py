"""
Page-content translation between English and Spanish.

Uses the AI assistant when it is configured. Otherwise, or when the
assistant call fails, common interface phrases are swapped from a static
EN/ES table and everything else is left as written.

Responsibility: Translation with a static phrase-table fallback
"""

from typing import Dict, Optional
import logging
import re

from .assistant import CivicaAssistant
from ..errors import ValidationError
from ..models.assistant import Language, Translation

logger = logging.getLogger(__name__)


EN_TO_ES: Dict[str, str] = {
    "Your Representatives": "Sus Representantes",
    "Recent Bills": "Proyectos de Ley Recientes",
    "Breaking News": "Últimas Noticias",
    "Community Polls": "Encuestas de la Comunidad",
    "Contact": "Contactar",
    "Learn More": "Aprende Más",
    "Party": "Partido",
    "Years in Office": "Años en el Cargo",
    "Bills Sponsored": "Proyectos Patrocinados",
    "Recent Activity": "Actividad Reciente",
    "Vote": "Votar",
    "Results": "Resultados",
    "Healthcare": "Atención Médica",
    "Infrastructure": "Infraestructura",
    "Border Security": "Seguridad Fronteriza",
    "Education": "Educación",
    "Economy": "Economía",
    "Environment": "Medio Ambiente",
    "Share your opinion": "Comparte tu opinión",
    "All": "Todos",
    "State": "Estado",
    "National": "Nacional",
    "No polls available": "No hay encuestas disponibles",
    "There are no active polls": "No hay encuestas activas",
}

ES_TO_EN: Dict[str, str] = {spanish: english for english, spanish in EN_TO_ES.items()}


def _compile(table: Dict[str, str]) -> re.Pattern:
    # Longest phrases first so "Recent Bills" wins over a shorter overlap.
    phrases = sorted(table, key=len, reverse=True)
    return re.compile(
        r"\b(?:" + "|".join(re.escape(p) for p in phrases) + r")\b",
        re.IGNORECASE,
    )


_PATTERNS = {
    "es": (_compile(EN_TO_ES), {k.lower(): v for k, v in EN_TO_ES.items()}),
    "en": (_compile(ES_TO_EN), {k.lower(): v for k, v in ES_TO_EN.items()}),
}


def translate_static(content: str, target_language: Language) -> str:
    """
    Replace known interface phrases, case-insensitively.

    Example: translate_static("Recent Bills", "es") -> "Proyectos de Ley Recientes"
    """
    pattern, lookup = _PATTERNS[target_language]
    return pattern.sub(lambda m: lookup[m.group(0).lower()], content)


class TranslationService:
    """
    Translate page content for the language toggle.

    Example:
        service = TranslationService(assistant)
        result = await service.translate("Community Polls", "es")
        result.translated_content  # "Encuestas de la Comunidad"
    """

    def __init__(self, assistant: Optional[CivicaAssistant] = None):
        self.assistant = assistant

    async def translate(
        self,
        content: str,
        target_language: Language,
        context: Optional[str] = None
    ) -> Translation:
        """
        Translate ``content`` into ``target_language``.

        Raises:
            ValidationError: If content is empty or the language is unsupported
        """
        if not content:
            raise ValidationError("Content and target language are required")
        if target_language not in _PATTERNS:
            raise ValidationError(f"Unsupported language: {target_language}")

        source_language: Language = "en" if target_language == "es" else "es"
        translated = None
        if self.assistant is not None and self.assistant.enabled:
            translated = await self.assistant.translate(content, target_language)
            # The assistant hands back the input when its call fails.
            if translated == content:
                translated = None

        if translated is None:
            if context:
                logger.debug(f"Static translation for context {context!r}")
            translated = translate_static(content, target_language)

        return Translation(
            translated_content=translated,
            source_language=source_language,
            target_language=target_language,
        )
