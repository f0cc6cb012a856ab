"""Bot dialogs: dialog stack, conversation state and prompt building blocks."""

from .dialogs import Dialog, DialogContext, DialogSet, Waterfall
from .errors import (
    BotDialogsError,
    DialogNotFound,
    MissingKeyFields,
    StateNotLoaded,
    TranslationError,
)
from .llm import ILLMProvider, LLMProvider
from .models import (
    Activity,
    ActivityTypes,
    Attachment,
    ConversationAccount,
    DialogInstance,
    DialogResult,
    InputHints,
)
from .prompts import AttachmentPrompt, TextPrompt
from .state import BotState, ConversationState
from .storage import IStorage, MemoryStorage, SqliteStorage
from .translation import ITranslator, LanguageTranslator, LLMTranslator
from .turn import BotAdapter, Middleware, TestAdapter, TurnContext

__all__ = [
    # Models
    "Activity",
    "ActivityTypes",
    "Attachment",
    "ConversationAccount",
    "DialogInstance",
    "DialogResult",
    "InputHints",
    # Errors
    "BotDialogsError",
    "DialogNotFound",
    "MissingKeyFields",
    "StateNotLoaded",
    "TranslationError",
    # Components
    "IStorage",
    "MemoryStorage",
    "SqliteStorage",
    "TurnContext",
    "Middleware",
    "BotAdapter",
    "TestAdapter",
    "BotState",
    "ConversationState",
    "Dialog",
    "DialogSet",
    "DialogContext",
    "Waterfall",
    "TextPrompt",
    "AttachmentPrompt",
    "ITranslator",
    "LanguageTranslator",
    "LLMTranslator",
    "ILLMProvider",
    "LLMProvider",
]
