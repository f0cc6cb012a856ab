"""State persistence module."""

from .bot_state import BotState, CachedBotState, StorageKeyFactory
from .conversation_state import ConversationState

__all__ = ["BotState", "CachedBotState", "ConversationState", "StorageKeyFactory"]
