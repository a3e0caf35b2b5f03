"""Settings shared by the built-in renderers and the page renderer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Configuration for rendering events and their inline references."""

    event_route: str = "/event:{slug}"
    asset_url_fields: Tuple[str, ...] = ("_publishUrl", "_path")
    asset_alt: str = "in-line reference"
    fragment_label_fields: Tuple[str, ...] = ("eventName", "capacity")
    label_separator: str = ": "
    page_title: str = "Event"
