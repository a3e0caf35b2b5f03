"""In-memory representation of rich-text documents before and after resolution."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True, slots=True)
class TextNode:
    """Literal run of text with its format variants."""

    content: str
    marks: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ContainerNode:
    """Structural node (paragraph, header, list, ...) holding ordered children."""

    kind: str
    children: Tuple["RenderedNode", ...] = ()
    attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True, slots=True)
class EmbedReference:
    """Placeholder pointing at a reference record by path or href."""

    path: Optional[str] = None
    href: Optional[str] = None
    fields: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def local_fields(self) -> Dict[str, Any]:
        """Return the node-local fields, including whichever keys are set."""
        values: Dict[str, Any] = dict(self.fields)
        if self.path:
            values["path"] = self.path
        if self.href:
            values["href"] = self.href
        return values


@dataclass(frozen=True, slots=True)
class ResolvedEmbed:
    """Embed replaced by the output of its type renderer."""

    type_name: str
    output: Any = field(hash=False)


@dataclass(frozen=True, slots=True)
class UnresolvedEmbed:
    """Embed that renders nothing (dangling key or unknown type)."""


UNRESOLVED = UnresolvedEmbed()

DocumentNode = TextNode | ContainerNode | EmbedReference
RenderedNode = TextNode | ContainerNode | ResolvedEmbed | UnresolvedEmbed
