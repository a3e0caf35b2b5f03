"""Parse serialized rich-text JSON into document nodes."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from richtext_renderer.model.document_model import ContainerNode, DocumentNode, EmbedReference, TextNode
from richtext_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

NODE_TYPE_KEY = "nodeType"
DOCUMENT_KIND = "document"
TEXT_NODE = "text"
REFERENCE_NODE = "reference"

# data keys that become the lookup key of an embed rather than local fields
_EMBED_KEY_FIELDS = ("path", "href")


class RichTextParseError(ValueError):
    """Raised when a rich-text payload does not follow the node schema."""


class RichTextParser:
    """Transforms the JSON rich-text format into a closed node tree."""

    def parse(self, payload: Any) -> ContainerNode:
        """Parse a root payload (list of nodes or a document node) into a document container."""
        if isinstance(payload, Mapping):
            if payload.get(NODE_TYPE_KEY) != DOCUMENT_KIND:
                raise RichTextParseError(
                    f"Root node must be a {DOCUMENT_KIND!r} node, got {payload.get(NODE_TYPE_KEY)!r}"
                )
            return self._parse_node(payload)  # type: ignore[return-value]
        if isinstance(payload, list):
            return ContainerNode(kind=DOCUMENT_KIND, children=self._parse_children(payload, "$"))
        raise RichTextParseError(f"Unsupported rich-text payload of type {type(payload).__name__}")

    def _parse_children(self, content: Any, location: str) -> Tuple[DocumentNode, ...]:
        if content is None:
            return ()
        if not isinstance(content, list):
            raise RichTextParseError(f"'content' at {location} must be a list")
        return tuple(self._parse_node(child, f"{location}[{index}]") for index, child in enumerate(content))

    def _parse_node(self, node: Any, location: str = "$") -> DocumentNode:
        if not isinstance(node, Mapping):
            raise RichTextParseError(f"Node at {location} must be an object")
        node_type = node.get(NODE_TYPE_KEY)
        if not node_type:
            raise RichTextParseError(f"Node at {location} is missing {NODE_TYPE_KEY!r}")

        if node_type == TEXT_NODE:
            return self._parse_text(node)
        if node_type == REFERENCE_NODE:
            return self._parse_reference(node)
        return ContainerNode(
            kind=node_type,
            children=self._parse_children(node.get("content"), location),
            attributes=self._container_attributes(node),
        )

    @staticmethod
    def _parse_text(node: Mapping[str, Any]) -> TextNode:
        value = node.get("value") or ""
        fmt = node.get("format") or {}
        variants = fmt.get("variants") if isinstance(fmt, Mapping) else None
        if variants is None:
            variants = []
        if not isinstance(variants, list):
            raise RichTextParseError("Text node 'format.variants' must be a list")
        return TextNode(content=str(value), marks=tuple(str(variant) for variant in variants))

    @staticmethod
    def _parse_reference(node: Mapping[str, Any]) -> EmbedReference:
        data = node.get("data") or {}
        if not isinstance(data, Mapping):
            raise RichTextParseError("Reference node 'data' must be an object")
        fields: Dict[str, Any] = {k: v for k, v in data.items() if k not in _EMBED_KEY_FIELDS}
        if "value" in node:
            fields["value"] = node["value"]
        path = data.get("path") or None
        href = data.get("href") or None
        if path is None and href is None:
            LOGGER.warning("Reference node without path or href; it will render nothing")
        return EmbedReference(path=path, href=href, fields=fields)

    @staticmethod
    def _container_attributes(node: Mapping[str, Any]) -> Dict[str, Any]:
        data = node.get("data") or {}
        if not isinstance(data, Mapping):
            raise RichTextParseError(f"Node {node.get(NODE_TYPE_KEY)!r} 'data' must be an object")
        attributes: Dict[str, Any] = dict(data)
        if "style" in node:
            attributes["style"] = node["style"]
        return attributes


def parse_rich_text(payload: Any) -> ContainerNode:
    """Convenience wrapper around :class:`RichTextParser`."""
    return RichTextParser().parse(payload)


def collect_embeds(node: DocumentNode) -> List[EmbedReference]:
    """Return every embed in the tree in document order."""
    if isinstance(node, EmbedReference):
        return [node]
    if isinstance(node, ContainerNode):
        found: List[EmbedReference] = []
        for child in node.children:
            found.extend(collect_embeds(child))  # type: ignore[arg-type]
        return found
    return []
