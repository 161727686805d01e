class CauldronError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code = 500
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(CauldronError):
    """User-correctable problem with the submitted request."""

    status_code = 400
    default_message = "Invalid request."


class MissingIntentError(InvalidInputError):
    default_message = "No intention provided."


class BannedTermError(InvalidInputError):
    def __init__(self, term: str):
        self.term = term
        super().__init__(
            f'"{term}" cannot be used in a spell. '
            "Try something gentle instead, like a candle, a stone, a bowl of water, or incense."
        )


class InvalidEmailError(InvalidInputError):
    default_message = "Invalid email address."


class UpstreamError(CauldronError):
    default_message = "OpenAI error"

    def __init__(self, message: str | None = None, *, upstream_status: int | None = None):
        self.upstream_status = upstream_status
        super().__init__(message)


class PersistenceError(CauldronError):
    default_message = "Failed to save."
