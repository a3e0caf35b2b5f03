"""Event aggregates consumed by the list and detail views."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from richtext_renderer.model.document_model import RenderedNode
from richtext_renderer.model.reference_model import ReferenceIndex


@dataclass(slots=True)
class EventRecord:
    """Event content fragment as returned by the query API."""

    path: str
    name: str
    slug: Optional[str] = None
    description: List[Any] = field(default_factory=list)
    teasing_image_url: Optional[str] = None
    capacity: Optional[str] = None
    event_start: Optional[str] = None
    event_end: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class EventView:
    """Event with its reference index and resolved description tree."""

    event: EventRecord
    references: ReferenceIndex
    description: RenderedNode
