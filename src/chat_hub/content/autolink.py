"""Wrap bare ``www.`` addresses in anchor markup."""

import re

# A www. token at the start of the text or right after one whitespace character,
# which becomes part of the match. Quotes and angle brackets end the token so a
# token can never break out of the href attribute or swallow adjacent markup.
# This is narrower than a plain \S+ run on purpose; do not widen it back, the
# anchor is emitted without escaping.
BARE_URL_PATTERN = re.compile(r"(?:^|\s)www\.[^\s'\"<>]+")


def _anchor(match: re.Match) -> str:
    token = match.group(0)
    return f"<a href='{token}'>{token}</a>"


def autolink(text: str) -> str:
    """Replace every bare URL token in ``text`` with an anchor element.

    The href and the link text are both the matched span verbatim, including
    the leading whitespace character when there is one:

        >>> autolink("see www.example.com")
        "see<a href=' www.example.com'> www.example.com</a>"
    """
    if not text:
        return ""
    return BARE_URL_PATTERN.sub(_anchor, text)
