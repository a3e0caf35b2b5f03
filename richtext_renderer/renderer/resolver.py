"""Walk a document tree and replace embedded references with type-specific renders."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from richtext_renderer.model.document_model import (
    UNRESOLVED,
    ContainerNode,
    DocumentNode,
    EmbedReference,
    RenderedNode,
    ResolvedEmbed,
    TextNode,
)
from richtext_renderer.model.reference_model import ReferenceIndex, ReferenceRecord
from richtext_renderer.renderer.registry import RenderFn
from richtext_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)


def lookup_key(node: EmbedReference) -> Optional[str]:
    """Return the key used to find the node's record; path wins over href."""
    if node.path:
        return node.path
    if node.href:
        return node.href
    return None


def merge_fields(node: EmbedReference, record: ReferenceRecord) -> Dict[str, Any]:
    """Combine node-local fields with record fields, the record winning on collisions."""
    merged = node.local_fields()
    merged.update(record.fields)
    return merged


class ReferenceResolver:
    """Resolves embeds against a reference index using a renderer dispatch table."""

    def __init__(self, renderers: Mapping[str, RenderFn]) -> None:
        self._renderers = renderers

    def resolve(self, root: DocumentNode, index: ReferenceIndex) -> RenderedNode:
        """Return a new tree with every embed replaced by its render or the unresolved sentinel."""
        if isinstance(root, TextNode):
            return root
        if isinstance(root, ContainerNode):
            return ContainerNode(
                kind=root.kind,
                children=tuple(self.resolve(child, index) for child in root.children),  # type: ignore[arg-type]
                attributes=dict(root.attributes),
            )
        if isinstance(root, EmbedReference):
            return self._resolve_embed(root, index)
        raise TypeError(f"Unsupported document node: {type(root).__name__}")

    def _resolve_embed(self, node: EmbedReference, index: ReferenceIndex) -> RenderedNode:
        key = lookup_key(node)
        record = index.get(key)
        if record is None:
            LOGGER.debug("Dangling reference %s", key)
            return UNRESOLVED

        render_fn = self._renderers.get(record.type_name)
        if render_fn is None:
            LOGGER.debug("No renderer for reference type %r at %s", record.type_name, key)
            return UNRESOLVED

        return ResolvedEmbed(type_name=record.type_name, output=render_fn(merge_fields(node, record)))


def resolve(root: DocumentNode, index: ReferenceIndex, type_renderers: Mapping[str, RenderFn]) -> RenderedNode:
    """Functional form of :meth:`ReferenceResolver.resolve`."""
    return ReferenceResolver(type_renderers).resolve(root, index)
