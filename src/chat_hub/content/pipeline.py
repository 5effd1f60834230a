"""Content pipeline: sanitize first, then auto-link."""

from chat_hub.content.autolink import autolink
from chat_hub.content.sanitizer import sanitize


def clean(raw: str | None) -> str:
    """Turn untrusted chat text into stored message content.

    Order matters: linking after sanitizing keeps the anchors the linker
    inserts out of reach of the tag scanner.
    """
    return autolink(sanitize(raw))
