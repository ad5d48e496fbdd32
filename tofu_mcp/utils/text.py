"""Text helpers shared by the response formatters."""

DEFAULT_MAX_LENGTH = 50


def truncate(text: str | None, max_length: int = DEFAULT_MAX_LENGTH) -> str | None:
    """
    Shorten text to at most ``max_length`` characters.

    Longer text keeps its first ``max_length - 3`` characters followed by
    "...". Empty or missing text returns None so callers can supply their
    own placeholder.
    """
    if not text:
        return None
    if len(text) <= max_length:
        return text
    return f"{text[: max_length - 3]}..."
