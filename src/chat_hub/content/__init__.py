"""Content pipeline for user-submitted chat text.

Public API:
    clean(raw) -> str
        Sanitizes against the tag allow-list, then auto-links bare
        ``www.`` addresses.
"""

from chat_hub.content.autolink import autolink
from chat_hub.content.pipeline import clean
from chat_hub.content.sanitizer import AllowList, Sanitizer, sanitize

__all__ = [
    "AllowList",
    "Sanitizer",
    "autolink",
    "clean",
    "sanitize",
]
