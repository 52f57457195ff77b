"""Exception types raised by the session controller."""


class PromptDirectorError(RuntimeError):
    """Base class for all prompt-director failures."""


class SessionError(PromptDirectorError):
    """Raised when the remote chat call fails at start or continuation time."""


class ConfigurationError(SessionError):
    """Raised when no Gemini credential is available at session start."""


class StateError(PromptDirectorError):
    """Raised when a continuation is requested without an active session."""
