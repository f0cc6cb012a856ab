"""ConversationState: state scoped to one conversation on one channel."""

from ..errors import MissingKeyFields
from ..logging_config import get_logger
from ..storage import IStorage
from ..turn import TurnContext
from .bot_state import BotState

logger = get_logger(__name__)

NO_KEY = "ConversationState: channel_id and/or conversation missing from context.request."


class ConversationState(BotState):
    """Reads and writes conversation state under `conversation/{channel}/{id}`.

    When used as middleware the state is read before the bot's logic runs
    and written back once the logic completes.
    """

    def __init__(self, storage: IStorage):
        super().__init__(storage, self._require_storage_key, "conversationState")

    def get_storage_key(self, context: TurnContext) -> str | None:
        """Return the storage key for the turn's conversation, or None."""
        request = context.request
        channel_id = request.channel_id if request else None
        conversation_id = (
            request.conversation.id if request and request.conversation else None
        )
        if channel_id and conversation_id:
            return f"conversation/{channel_id}/{conversation_id}"
        return None

    def _require_storage_key(self, context: TurnContext) -> str:
        key = self.get_storage_key(context)
        if key is None:
            logger.warning(NO_KEY)
            raise MissingKeyFields(NO_KEY)
        return key
