"""Core data models for bot dialogs."""

from .activity import (
    Activity,
    ActivityTypes,
    Attachment,
    ConversationAccount,
    InputHints,
)
from .dialog import DialogInstance, DialogResult

__all__ = [
    # Activities
    "Activity",
    "ActivityTypes",
    "Attachment",
    "ConversationAccount",
    "InputHints",
    # Dialogs
    "DialogInstance",
    "DialogResult",
]
