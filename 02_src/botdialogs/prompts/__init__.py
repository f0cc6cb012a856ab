"""Prompt primitives."""

from .attachment_prompt import AttachmentPrompt
from .base import Prompt
from .internal import PromptValidator, send_prompt
from .text_prompt import TextPrompt

__all__ = ["AttachmentPrompt", "Prompt", "PromptValidator", "TextPrompt", "send_prompt"]
