"""Allow-list HTML sanitizer for user-submitted chat text.

A single left-to-right pass over the input driven by a small state machine:

    TEXT         copy characters until the next ``<``
    TAG_OPEN     read an optional ``/`` and the tag name (or skip comments)
    IN_TAG       read attributes until the closing ``>``
    SCRIPT_BODY  skip everything up to and including ``</script>``

Allow-listed tags are re-emitted with their permitted attributes only, always
double-quoted. ``script`` elements vanish together with their body. Every other
tag loses its markup but keeps its surrounding text. Markup that never reaches
a ``>`` is dropped up to the end of the input, and so is a stray ``<``: no
``<`` reaches the output except in re-emitted tags. Text and whitespace are copied
untouched.
"""

import re
from dataclasses import dataclass, field
from enum import Enum

# Tag name -> attributes permitted on it
DEFAULT_ALLOWED_TAGS: dict[str, frozenset[str]] = {
    "b": frozenset(),
    "i": frozenset(),
    "u": frozenset(),
    "em": frozenset(),
    "strong": frozenset(),
    "code": frozenset(),
    "br": frozenset(),
    "p": frozenset({"class"}),
    "span": frozenset({"class"}),
    "div": frozenset({"class"}),
}

# Elements removed together with everything they contain
DROP_CONTENT_TAGS = frozenset({"script"})

_TAG_NAME = re.compile(r"[A-Za-z][A-Za-z0-9:-]*")
_ATTR_NAME = re.compile(r"[^\s/>][^\s/>=]*")
_UNQUOTED_VALUE = re.compile(r"[^\s>]*")
_WHITESPACE = re.compile(r"\s*")
_SCRIPT_CLOSE = re.compile(r"</script\b[^>]*>", re.IGNORECASE)


class State(Enum):
    """Tokenizer states."""

    TEXT = "text"
    TAG_OPEN = "tag_open"
    IN_TAG = "in_tag"
    SCRIPT_BODY = "script_body"


@dataclass(frozen=True)
class AllowList:
    """Tags that survive sanitization and the attributes each may keep."""

    tags: dict[str, frozenset[str]] = field(default_factory=lambda: dict(DEFAULT_ALLOWED_TAGS))

    def allows(self, tag: str) -> bool:
        return tag in self.tags

    def attributes_for(self, tag: str) -> frozenset[str]:
        return self.tags.get(tag, frozenset())

    def extend(self, tag: str, attributes: set[str] | frozenset[str] = frozenset()) -> "AllowList":
        """Return a copy that also allows ``tag`` with ``attributes``."""
        tags = dict(self.tags)
        tags[tag.lower()] = tags.get(tag.lower(), frozenset()) | {a.lower() for a in attributes}
        return AllowList(tags=tags)


@dataclass
class _Tag:
    name: str
    closing: bool
    attributes: list[tuple[str, str | None]] = field(default_factory=list)
    self_closing: bool = False


class _Tokenizer:
    """One-shot cursor over a single input string."""

    def __init__(self, text: str, allow_list: AllowList) -> None:
        self.text = text
        self.allow_list = allow_list
        self.pos = 0
        self.out: list[str] = []
        self.tag: _Tag | None = None

    def run(self) -> str:
        handlers = {
            State.TEXT: self._text,
            State.TAG_OPEN: self._tag_open,
            State.IN_TAG: self._in_tag,
            State.SCRIPT_BODY: self._script_body,
        }
        state: State | None = State.TEXT
        while state is not None:
            state = handlers[state]()
        return "".join(self.out)

    def _discard_rest(self) -> None:
        self.pos = len(self.text)

    def _text(self) -> State | None:
        start = self.text.find("<", self.pos)
        if start == -1:
            self.out.append(self.text[self.pos :])
            self._discard_rest()
            return None

        # Every "<" is markup; none is ever copied to the output as text
        self.out.append(self.text[self.pos : start])
        self.pos = start + 1
        return State.TAG_OPEN

    def _tag_open(self) -> State | None:
        text = self.text
        if self.pos >= len(text):
            self._discard_rest()
            return None

        # Comments, doctypes and processing instructions are dropped outright
        if text.startswith("!--", self.pos):
            end = text.find("-->", self.pos + 3)
            if end == -1:
                self._discard_rest()
                return None
            self.pos = end + 3
            return State.TEXT
        if text[self.pos] in "!?":
            end = text.find(">", self.pos)
            if end == -1:
                self._discard_rest()
                return None
            self.pos = end + 1
            return State.TEXT

        closing = text[self.pos] == "/"
        if closing:
            self.pos += 1

        match = _TAG_NAME.match(text, self.pos)
        name = ""
        if match:
            name = match.group(0).lower()
            self.pos = match.end()
        self.tag = _Tag(name=name, closing=closing)
        return State.IN_TAG

    def _in_tag(self) -> State | None:
        text = self.text
        tag = self.tag
        while True:
            self.pos = _WHITESPACE.match(text, self.pos).end()
            if self.pos >= len(text):
                self._discard_rest()
                return None

            char = text[self.pos]
            if char == ">":
                self.pos += 1
                return self._finish_tag()
            if char == "/":
                self.pos += 1
                tag.self_closing = text.startswith(">", self.pos)
                continue

            name_match = _ATTR_NAME.match(text, self.pos)
            attr_name = name_match.group(0).lower()
            self.pos = _WHITESPACE.match(text, name_match.end()).end()

            value: str | None = None
            if text.startswith("=", self.pos):
                self.pos = _WHITESPACE.match(text, self.pos + 1).end()
                quote = text[self.pos : self.pos + 1]
                if quote in ("'", '"'):
                    end = text.find(quote, self.pos + 1)
                    if end == -1:
                        self._discard_rest()
                        return None
                    value = text[self.pos + 1 : end]
                    self.pos = end + 1
                else:
                    value_match = _UNQUOTED_VALUE.match(text, self.pos)
                    value = value_match.group(0)
                    self.pos = value_match.end()

            tag.attributes.append((attr_name, value))

    def _finish_tag(self) -> State:
        tag = self.tag
        self.tag = None

        if tag.name in DROP_CONTENT_TAGS:
            # A stray closing tag has no body to skip
            return State.TEXT if tag.closing else State.SCRIPT_BODY

        if self.allow_list.allows(tag.name):
            self.out.append(self._render(tag))
        return State.TEXT

    def _render(self, tag: _Tag) -> str:
        if tag.closing:
            return f"</{tag.name}>"

        permitted = self.allow_list.attributes_for(tag.name)
        kept: dict[str, str] = {}
        for name, value in tag.attributes:
            if name in permitted and name not in kept:
                kept[name] = (value or "").replace('"', "&quot;")

        attributes = "".join(f' {name}="{value}"' for name, value in kept.items())
        end = "/>" if tag.self_closing else ">"
        return f"<{tag.name}{attributes}{end}"

    def _script_body(self) -> State | None:
        match = _SCRIPT_CLOSE.search(self.text, self.pos)
        if match is None:
            self._discard_rest()
            return None
        self.pos = match.end()
        return State.TEXT


class Sanitizer:
    """Reusable sanitizer bound to one allow-list. Stateless between calls."""

    def __init__(self, allow_list: AllowList | None = None) -> None:
        self.allow_list = allow_list or AllowList()

    def sanitize(self, raw: str | None) -> str:
        if not raw:
            return ""
        return _Tokenizer(raw, self.allow_list).run()


_default = Sanitizer()


def sanitize(raw: str | None) -> str:
    """Strip everything but allow-listed markup from ``raw``. Never raises."""
    return _default.sanitize(raw)
