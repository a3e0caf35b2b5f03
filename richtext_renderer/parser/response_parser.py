"""Extract events and reference records from already-fetched query responses."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from richtext_renderer.model.event_model import EventRecord
from richtext_renderer.model.reference_model import PATH_KEY, ReferenceRecord
from richtext_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

EVENT_LIST_KEY = "eventList"
EVENT_PAGINATED_KEY = "eventPaginated"
REFERENCES_KEY = "_references"


class QueryResponseError(RuntimeError):
    """Raised when a query response carries an error list instead of data."""


def _data(response: Mapping[str, Any]) -> Mapping[str, Any]:
    errors = response.get("errors")
    if errors:
        messages = "; ".join(str(err.get("message", err)) if isinstance(err, Mapping) else str(err) for err in errors)
        raise QueryResponseError(messages)
    # accept both the full response envelope and its bare ``data`` member
    data = response.get("data", response)
    return data or {}


def parse_references(items: Optional[Sequence[Mapping[str, Any]]]) -> List[ReferenceRecord]:
    """Convert raw reference dicts into records, skipping those without a path."""
    records: List[ReferenceRecord] = []
    for position, item in enumerate(items or []):
        if not isinstance(item, Mapping) or not item.get(PATH_KEY):
            LOGGER.warning("Skipping reference #%d without %s", position, PATH_KEY)
            continue
        records.append(ReferenceRecord.from_dict(item))
    return records


def extract_references(response: Mapping[str, Any]) -> List[ReferenceRecord]:
    """Return the reference collection of a detail response."""
    event_list = _data(response).get(EVENT_LIST_KEY) or {}
    return parse_references(event_list.get(REFERENCES_KEY))


def extract_event(response: Mapping[str, Any]) -> Optional[EventRecord]:
    """Return the event of a detail response when it holds exactly one item."""
    event_list = _data(response).get(EVENT_LIST_KEY) or {}
    items = event_list.get("items") or []
    if len(items) != 1:
        LOGGER.debug("Expected a single event, found %d", len(items))
        return None
    if not isinstance(items[0], Mapping):
        LOGGER.debug("Event item is not an object")
        return None
    return event_from_dict(items[0])


def extract_event_list(response: Mapping[str, Any]) -> List[EventRecord]:
    """Return the events of a paginated list response that carry the fields a list item needs."""
    paginated = _data(response).get(EVENT_PAGINATED_KEY) or {}
    events: List[EventRecord] = []
    for edge in paginated.get("edges") or []:
        node = edge.get("node") if isinstance(edge, Mapping) else None
        if not isinstance(node, Mapping):
            continue
        if not node.get(PATH_KEY) or not node.get("eventName") or not node.get("teasingImage"):
            LOGGER.debug("Skipping incomplete event entry %s", node.get(PATH_KEY))
            continue
        events.append(event_from_dict(node))
    return events


def is_event_list_response(response: Mapping[str, Any]) -> bool:
    """True when the response is shaped like the paginated list query."""
    return EVENT_PAGINATED_KEY in _data(response)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def event_from_dict(item: Mapping[str, Any]) -> EventRecord:
    description = _mapping(item.get("description"))
    teasing_image = _mapping(item.get("teasingImage"))
    raw: Dict[str, Any] = dict(item)
    return EventRecord(
        path=_text(item.get(PATH_KEY)) or "",
        name=_text(item.get("eventName")) or "",
        slug=_text(item.get("slug")),
        description=description.get("json") or [],
        teasing_image_url=_text(teasing_image.get("_publishUrl")),
        capacity=_text(item.get("capacity")),
        event_start=_text(item.get("eventStart")),
        event_end=_text(item.get("eventEnd")),
        raw=raw,
    )
