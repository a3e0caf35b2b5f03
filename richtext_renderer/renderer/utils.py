"""Common helpers shared by renderer implementations."""
from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Dict, Mapping, Optional, Sequence, Tuple

VOID_TAGS = frozenset({"br", "hr", "img"})

MARK_TAGS: Dict[str, str] = {
    "bold": "b",
    "italic": "i",
    "underline": "u",
    "strikethrough": "s",
    "code": "code",
    "superscript": "sup",
    "subscript": "sub",
}


@dataclass(frozen=True, slots=True)
class HtmlElement:
    """Minimal HTML primitive produced by the built-in type renderers."""

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    text: Optional[str] = None

    def to_html(self) -> str:
        return element_html(self.tag, self.attributes, escape(self.text) if self.text else "")


def format_attributes(attributes: Mapping[str, object]) -> str:
    """Serialize attributes, dropping those whose value is None."""
    parts = [f' {name}="{escape(str(value), quote=True)}"' for name, value in attributes.items() if value is not None]
    return "".join(parts)


def element_html(tag: str, attributes: Mapping[str, object], inner_html: str = "") -> str:
    if tag in VOID_TAGS:
        return f"<{tag}{format_attributes(attributes)} />"
    return f"<{tag}{format_attributes(attributes)}>{inner_html}</{tag}>"


def marks_to_tags(marks: Sequence[str]) -> Tuple[str, ...]:
    """Map format variants to wrapping tags; unknown variants are ignored."""
    return tuple(MARK_TAGS[mark] for mark in marks if mark in MARK_TAGS)
