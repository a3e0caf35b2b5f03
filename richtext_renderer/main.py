"""Entry-point for the event rich-text rendering pipeline."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

from richtext_renderer.model.event_model import EventView
from richtext_renderer.model.reference_model import ReferenceIndex
from richtext_renderer.model.render_options import RenderOptions
from richtext_renderer.parser.response_parser import (
    extract_event,
    extract_event_list,
    extract_references,
    is_event_list_response,
)
from richtext_renderer.parser.richtext_parser import RichTextParser, collect_embeds
from richtext_renderer.renderer.html_renderer import HtmlRenderer
from richtext_renderer.renderer.registry import RenderFn, default_registry
from richtext_renderer.renderer.resolver import ReferenceResolver
from richtext_renderer.utils.debug import DebugDumper
from richtext_renderer.utils.logger import get_logger, set_level

# named explicitly so the logger stays under the package when run with -m
LOGGER = get_logger("richtext_renderer.main")


def build_event_view(
    response: Mapping[str, Any],
    registry: Optional[Mapping[str, RenderFn]] = None,
    options: Optional[RenderOptions] = None,
) -> Optional[EventView]:
    """Parse a detail response, index its references and resolve the event description."""
    event = extract_event(response)
    if event is None:
        return None

    index = ReferenceIndex.build(extract_references(response))
    document = RichTextParser().parse(event.description)
    LOGGER.debug("Resolving %d embeds against %d references", len(collect_embeds(document)), len(index))

    resolver = ReferenceResolver(registry if registry is not None else default_registry(options))
    return EventView(event=event, references=index, description=resolver.resolve(document, index))


def render_event_page(
    response: Mapping[str, Any],
    registry: Optional[Mapping[str, RenderFn]] = None,
    options: Optional[RenderOptions] = None,
) -> Optional[str]:
    """Return the full HTML page for a detail response, or None when it holds no event."""
    view = build_event_view(response, registry, options)
    if view is None:
        return None
    return HtmlRenderer(options).render_page(view)


def render_event_list(response: Mapping[str, Any], options: Optional[RenderOptions] = None) -> str:
    """Return the HTML event list for a paginated list response."""
    events = extract_event_list(response)
    LOGGER.debug("Rendering %d events", len(events))
    return HtmlRenderer(options).render_list(events)


def main(response_file: str, output_dir: Optional[str] = None, *, debug: bool = False) -> int:
    """Run the response → resolved tree → HTML pipeline and return an exit status."""
    response_path = Path(response_file).resolve()
    if not response_path.exists():
        raise FileNotFoundError(f"Response file not found: {response_path}")

    LOGGER.info("Reading response from %s", response_path.name)
    response = json.loads(response_path.read_text(encoding="utf-8"))
    output_path = Path(output_dir).resolve() if output_dir else response_path.with_suffix("")

    if is_event_list_response(response):
        output_path.mkdir(parents=True, exist_ok=True)
        LOGGER.info("Rendering event list into %s", output_path)
        (output_path / "events.html").write_text(render_event_list(response), encoding="utf-8")
        return 0

    view = build_event_view(response)
    if view is None:
        LOGGER.error("Missing data, event could not be rendered.")
        return 1

    output_path.mkdir(parents=True, exist_ok=True)
    LOGGER.info("Rendering %s into %s", view.event.name, output_path)
    HtmlRenderer().write_page(view, output_path / "event.html")

    if debug:
        DebugDumper(output_path / "debug").dump(view)
    return 0


if __name__ == "__main__":  # pragma: no cover
    import argparse

    parser = argparse.ArgumentParser(description="Render an event query response with resolved rich-text references")
    parser.add_argument("response_file", help="Path to the JSON query response")
    parser.add_argument("--output", help="Directory to write generated artifacts")
    parser.add_argument("--debug", action="store_true", help="Dump the resolved tree as JSON")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING, ...)")

    args = parser.parse_args()
    set_level(args.log_level)
    sys.exit(main(args.response_file, args.output, debug=args.debug))
