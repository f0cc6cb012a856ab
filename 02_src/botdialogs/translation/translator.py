"""Language translation middleware."""

from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, Protocol

from ..awaitables import resolve
from ..errors import TranslationError
from ..logging_config import get_logger
from ..models import ActivityTypes
from ..turn import NextHandler, TurnContext
from .post_process import PostProcessTranslator

logger = get_logger(__name__)

MAX_TEXT_LENGTH = 65536


@dataclass
class TranslationResult:
    """One translated line plus optional word alignment."""

    translated_text: str
    alignment: str | None = None


class ITranslator(Protocol):
    """Translation backend."""

    async def detect(self, text: str) -> str:
        """Return the language code of text."""
        ...

    async def translate_array(
        self, texts: list[str], from_language: str, to_language: str
    ) -> list[TranslationResult]:
        """Translate each text. Results are in input order."""
        ...


class LanguageTranslator:
    """Translates inbound message text into one of the bot's native languages.

    Runs before the bot's logic so dialogs and prompts only ever see text in
    a language the bot understands.
    """

    def __init__(
        self,
        translator: ITranslator,
        native_languages: list[str],
        no_translate_patterns: Iterable[str] = (),
        get_user_language: Callable[[TurnContext], str | None] | None = None,
        set_user_language: Callable[[TurnContext], Awaitable[bool] | bool] | None = None,
    ):
        if not native_languages:
            raise ValueError("native_languages must not be empty")
        self._translator = translator
        self._native_languages = list(native_languages)
        self._post_processor = PostProcessTranslator(no_translate_patterns)
        self._get_user_language = get_user_language
        self._set_user_language = set_user_language

    async def on_turn(self, context: TurnContext, next_handler: NextHandler) -> None:
        request = context.request
        if request.type == ActivityTypes.MESSAGE.value and request.text:
            if self._set_user_language is not None:
                if await resolve(self._set_user_language(context)):
                    await next_handler()
                    return

            source_language = await self._source_language(context)
            target_language = (
                source_language
                if source_language in self._native_languages
                else self._native_languages[0]
            )

            if source_language != target_language:
                await self._translate_request(context, source_language, target_language)

        await next_handler()

    async def _source_language(self, context: TurnContext) -> str:
        if self._get_user_language is not None:
            language = self._get_user_language(context)
            if language:
                return language
        if context.request.locale:
            return context.request.locale
        return await self._translator.detect(context.request.text)

    async def _translate_request(
        self, context: TurnContext, source_language: str, target_language: str
    ) -> None:
        text = context.request.text[:MAX_TEXT_LENGTH]
        lines = text.split("\n")

        results = await self._translator.translate_array(
            lines, source_language, target_language
        )
        if len(results) != len(lines):
            logger.error(
                "Translator returned wrong number of lines",
                extra={"context": {"expected": len(lines), "received": len(results)}},
            )
            raise TranslationError(
                f"Expected {len(lines)} translated lines, got {len(results)}"
            )

        translated = []
        for source_line, result in zip(lines, results):
            line = result.translated_text
            if result.alignment:
                line = self._post_processor.fix_translation(
                    source_line, result.alignment, line
                )
            translated.append(line)

        logger.debug(
            "Message translated",
            extra={"context": {"from": source_language, "to": target_language, "lines": len(lines)}},
        )
        context.request.text = "\n".join(translated)
