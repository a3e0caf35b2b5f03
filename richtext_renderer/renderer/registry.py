"""Dispatch table mapping reference type names to render functions."""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence

from richtext_renderer.model.render_options import RenderOptions
from richtext_renderer.renderer.utils import HtmlElement
from richtext_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

RenderFn = Callable[[Mapping[str, Any]], Any]

IMAGE_REF_TYPE = "ImageRef"
EVENT_MODEL_TYPE = "EventModel"


class RendererRegistry(Mapping[str, RenderFn]):
    """Pluggable mapping from a reference type name to its renderer."""

    def __init__(self, renderers: Optional[Mapping[str, RenderFn]] = None) -> None:
        self._renderers: Dict[str, RenderFn] = {}
        for type_name, render_fn in (renderers or {}).items():
            self.register(type_name, render_fn)

    def register(self, type_name: str, render_fn: RenderFn) -> None:
        """Register ``render_fn`` for ``type_name``, replacing any previous entry."""
        if not type_name:
            raise ValueError("Renderer type name must be non-empty")
        if not callable(render_fn):
            raise TypeError(f"Renderer for {type_name!r} is not callable")
        if type_name in self._renderers:
            LOGGER.debug("Replacing renderer for %s", type_name)
        self._renderers[type_name] = render_fn

    def renderer(self, type_name: str) -> Callable[[RenderFn], RenderFn]:
        """Decorator form of :meth:`register`."""

        def decorator(render_fn: RenderFn) -> RenderFn:
            self.register(type_name, render_fn)
            return render_fn

        return decorator

    def type_names(self) -> List[str]:
        return sorted(self._renderers)

    def copy(self) -> "RendererRegistry":
        return RendererRegistry(self._renderers)

    def __getitem__(self, type_name: str) -> RenderFn:
        return self._renderers[type_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._renderers)

    def __len__(self) -> int:
        return len(self._renderers)


def asset_renderer(url_fields: Sequence[str] = ("_publishUrl", "_path"), alt: str = "in-line reference") -> RenderFn:
    """Build a renderer that displays an asset as an image from the first URL field present."""

    def render(fields: Mapping[str, Any]) -> HtmlElement:
        for name in url_fields:
            url = fields.get(name)
            if url:
                return HtmlElement("img", {"src": str(url), "alt": alt})
        raise KeyError(f"Asset reference has none of the URL fields {list(url_fields)}")

    return render


def fragment_link_renderer(
    slug_field: str = "slug",
    label_fields: Sequence[str] = ("eventName", "capacity"),
    route: str = "/event:{slug}",
    separator: str = ": ",
) -> RenderFn:
    """Build a renderer that links to a content fragment by its slug."""

    def render(fields: Mapping[str, Any]) -> HtmlElement:
        href = route.format(slug=fields[slug_field])
        label = separator.join(str(fields[name]) for name in label_fields)
        return HtmlElement("a", {"href": href}, label)

    return render


def default_registry(options: Optional[RenderOptions] = None) -> RendererRegistry:
    """Return a registry with the image asset and event fragment renderers."""
    options = options or RenderOptions()
    registry = RendererRegistry()
    registry.register(IMAGE_REF_TYPE, asset_renderer(options.asset_url_fields, options.asset_alt))
    registry.register(
        EVENT_MODEL_TYPE,
        fragment_link_renderer(
            label_fields=options.fragment_label_fields,
            route=options.event_route,
            separator=options.label_separator,
        ),
    )
    return registry
