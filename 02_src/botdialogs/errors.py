"""Exception types raised by bot dialogs components."""


class BotDialogsError(Exception):
    """Base class for all library errors."""


class DialogNotFound(BotDialogsError, LookupError):
    """A dialog id on the stack, or passed to begin(), has no registered dialog."""

    def __init__(self, dialog_id: str, operation: str, message: str):
        super().__init__(message)
        self.dialog_id = dialog_id
        self.operation = operation


class MissingKeyFields(BotDialogsError, ValueError):
    """The turn lacks the fields needed to compute a storage key."""


class StateNotLoaded(BotDialogsError, RuntimeError):
    """State was accessed before the state middleware loaded it for the turn."""

    def __init__(self, state_name: str, message: str | None = None):
        super().__init__(
            message
            or f"{state_name}: state not found. Ensure the state middleware is "
            "added to the adapter or read() has been called."
        )
        self.state_name = state_name


class TranslationError(BotDialogsError):
    """Translator backend failed or returned an unusable response."""
