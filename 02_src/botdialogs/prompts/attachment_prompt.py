"""Prompts the user to upload one or more attachments."""

from ..models import Attachment
from ..turn import TurnContext
from .base import Prompt


class AttachmentPrompt(Prompt):
    """Recognizes the reply's attachments, or [] when there are none."""

    def _recognize_raw(self, context: TurnContext) -> list[Attachment]:
        request = context.request
        return list(request.attachments) if request and request.attachments else []
