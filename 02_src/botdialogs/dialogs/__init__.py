"""Dialogs module."""

from .dialog import Dialog, can_continue, can_resume
from .dialog_context import DialogContext
from .dialog_set import DialogSet
from .waterfall import Waterfall, WaterfallStep

__all__ = [
    "Dialog",
    "DialogContext",
    "DialogSet",
    "Waterfall",
    "WaterfallStep",
    "can_continue",
    "can_resume",
]
