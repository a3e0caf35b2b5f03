"""Render resolved rich-text trees and event views into HTML."""
from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from richtext_renderer.model.document_model import (
    ContainerNode,
    RenderedNode,
    ResolvedEmbed,
    TextNode,
    UnresolvedEmbed,
)
from richtext_renderer.model.event_model import EventRecord, EventView
from richtext_renderer.model.render_options import RenderOptions
from richtext_renderer.renderer.utils import HtmlElement, element_html, marks_to_tags

CONTAINER_TAGS: Dict[str, str] = {
    "document": "div",
    "paragraph": "p",
    "link": "a",
    "unordered-list": "ul",
    "ordered-list": "ol",
    "list-item": "li",
    "line-break": "br",
    "horizontal-rule": "hr",
    "table": "table",
    "table-row": "tr",
    "table-cell": "td",
}
HEADER_STYLES = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
DEFAULT_HEADER_TAG = "h2"
FALLBACK_TAG = "div"


class HtmlRenderer:
    """Structural renderer mapping each rendered node to HTML."""

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        self._options = options or RenderOptions()

    def render(self, node: RenderedNode) -> str:
        if isinstance(node, TextNode):
            return self._render_text(node)
        if isinstance(node, ContainerNode):
            inner = "".join(self.render(child) for child in node.children)
            tag = self._container_tag(node)
            return element_html(tag, self._container_attributes(node), inner)
        if isinstance(node, ResolvedEmbed):
            return self._render_output(node.output)
        if isinstance(node, UnresolvedEmbed):
            return ""
        raise TypeError(f"Unsupported rendered node: {type(node).__name__}")

    def render_page(self, view: EventView) -> str:
        """Wrap an event view in a standalone HTML page."""
        event = view.event
        title = escape(str(event.name or self._options.page_title))
        image = ""
        if event.teasing_image_url:
            image = element_html("img", {"class": "event-detail-teasingImage", "src": event.teasing_image_url, "alt": event.name})
        capacity = escape(str(event.capacity)) if event.capacity is not None else ""
        return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
  <meta charset=\"utf-8\" />
  <title>{title}</title>
</head>
<body>
  <div class=\"event-detail\" itemid=\"{escape(event.path, quote=True)}\">
    <h1 class=\"event-detail-title\">{title}</h1>
    <div class=\"event-detail-info\"><div class=\"event-detail-info-capacity\">{capacity}</div></div>
    <div class=\"event-detail-content\">{image}</div>
    <div class=\"event-detail-description\">{self.render(view.description)}</div>
  </div>
</body>
</html>
"""

    def write_page(self, view: EventView, output_path: Path) -> None:
        output_path.write_text(self.render_page(view), encoding="utf-8")

    def render_list(self, events: Iterable[EventRecord]) -> str:
        """Render events as the list view: linked teasing image, dates and title per item."""
        items = "".join(self._render_list_item(event) for event in events)
        return element_html("div", {"class": "events"}, element_html("ul", {"class": "event-items"}, items))

    def _render_list_item(self, event: EventRecord) -> str:
        image = element_html("img", {"class": "event-item-image", "src": event.teasing_image_url, "alt": event.name})
        link = element_html("a", {"href": self._options.event_route.format(slug=event.slug or "")}, image)
        dates = "".join(
            element_html("div", {"class": "event-item-date"}, escape(value or ""))
            for value in (event.event_start, event.event_end)
        )
        details = element_html("div", {"class": "event-item-details"}, dates)
        title = element_html("div", {"class": "event-item-title"}, escape(event.name))
        return element_html("li", {"class": "event-item"}, link + details + title)

    @staticmethod
    def _render_text(node: TextNode) -> str:
        html = escape(node.content)
        for tag in reversed(marks_to_tags(node.marks)):
            html = f"<{tag}>{html}</{tag}>"
        return html

    @staticmethod
    def _container_tag(node: ContainerNode) -> str:
        if node.kind == "header":
            style = node.attributes.get("style")
            return style if style in HEADER_STYLES else DEFAULT_HEADER_TAG
        return CONTAINER_TAGS.get(node.kind, FALLBACK_TAG)

    @staticmethod
    def _container_attributes(node: ContainerNode) -> Dict[str, Any]:
        if node.kind == "link":
            return {"href": node.attributes.get("href"), "target": node.attributes.get("target")}
        if CONTAINER_TAGS.get(node.kind) is None and node.kind != "header":
            return {"class": node.kind}
        return {}

    @staticmethod
    def _render_output(output: Any) -> str:
        if output is None:
            return ""
        if isinstance(output, HtmlElement):
            return output.to_html()
        return escape(str(output))
