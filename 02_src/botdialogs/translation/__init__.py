"""Translation module."""

from .llm_translator import LLMTranslator
from .post_process import PostProcessTranslator
from .translator import ITranslator, LanguageTranslator, TranslationResult

__all__ = [
    "ITranslator",
    "LLMTranslator",
    "LanguageTranslator",
    "PostProcessTranslator",
    "TranslationResult",
]
