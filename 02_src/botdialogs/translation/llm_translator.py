"""ITranslator backed by an LLM provider."""

import json

from ..errors import TranslationError
from ..llm import ILLMProvider
from ..logging_config import get_logger
from .translator import TranslationResult

logger = get_logger(__name__)

DETECT_SYSTEM = (
    "Identify the language of the user's text. "
    "Reply with the ISO 639-1 code only, for example: en"
)
TRANSLATE_SYSTEM = (
    "Translate each string in the JSON array from {source} to {target}. "
    "Reply with a JSON array of translated strings of the same length and "
    "nothing else."
)


class LLMTranslator:
    """Detects and translates text by asking an LLM."""

    def __init__(self, llm_provider: ILLMProvider, max_tokens: int = 2048):
        self._llm = llm_provider
        self._max_tokens = max_tokens

    async def detect(self, text: str) -> str:
        try:
            reply = await self._llm.complete(
                messages=[{"role": "user", "content": text}],
                system=DETECT_SYSTEM,
                max_tokens=8,
            )
        except RuntimeError as e:
            raise TranslationError(f"Language detection failed: {e}") from e
        return reply.strip().lower()

    async def translate_array(
        self, texts: list[str], from_language: str, to_language: str
    ) -> list[TranslationResult]:
        try:
            reply = await self._llm.complete(
                messages=[{"role": "user", "content": json.dumps(texts, ensure_ascii=False)}],
                system=TRANSLATE_SYSTEM.format(source=from_language, target=to_language),
                max_tokens=self._max_tokens,
            )
        except RuntimeError as e:
            raise TranslationError(f"Translation failed: {e}") from e

        try:
            translated = json.loads(reply)
        except json.JSONDecodeError as e:
            logger.warning("Unparsable translation reply: %s", reply[:100])
            raise TranslationError("Translator returned invalid JSON") from e

        if not isinstance(translated, list) or len(translated) != len(texts):
            raise TranslationError(
                f"Expected {len(texts)} translations, got {translated!r:.100}"
            )
        return [TranslationResult(translated_text=str(line)) for line in translated]
