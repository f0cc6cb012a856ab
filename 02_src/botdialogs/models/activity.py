"""Activity-related data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActivityTypes(str, Enum):
    """Activity types understood by the turn pipeline."""

    MESSAGE = "message"
    END_OF_CONVERSATION = "endOfConversation"
    TYPING = "typing"


class InputHints(str, Enum):
    """Whether the bot expects a reply after an activity."""

    ACCEPTING_INPUT = "acceptingInput"
    EXPECTING_INPUT = "expectingInput"
    IGNORING_INPUT = "ignoringInput"


@dataclass
class ConversationAccount:
    """The conversation an activity belongs to."""

    id: str
    name: str | None = None


@dataclass
class Attachment:
    """A file or card attached to an activity."""

    content_type: str
    content_url: str | None = None
    content: Any = None
    name: str | None = None


@dataclass
class Activity:
    """A single inbound or outbound exchange with a channel."""

    type: str = ActivityTypes.MESSAGE.value
    text: str | None = None
    locale: str | None = None
    channel_id: str | None = None
    conversation: ConversationAccount | None = None
    attachments: list[Attachment] = field(default_factory=list)
    speak: str | None = None
    input_hint: str | None = None
