"""Helpers to persist resolved trees for debugging."""
from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, Mapping

from richtext_renderer.model.event_model import EventView


class DebugDumper:
    """Writes intermediate artifacts onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, view: EventView) -> Path:
        """Persist the resolved event view as JSON and return the written path."""
        self.directory.mkdir(parents=True, exist_ok=True)
        payload = {
            "event": self.serialize(view.event),
            "references": sorted(view.references.paths()),
            "description": self.serialize(view.description),
        }
        target = self.directory / "event_view.json"
        target.write_text(json.dumps(payload, indent=2, default=str))
        return target

    def serialize(self, value: Any) -> Any:
        # asdict() cannot be used: embed outputs may hold arbitrary objects
        if is_dataclass(value) and not isinstance(value, type):
            data = {"node": type(value).__name__}
            data.update({f.name: self.serialize(getattr(value, f.name)) for f in fields(value)})
            return data
        if isinstance(value, Mapping):
            return {str(k): self.serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self.serialize(v) for v in value]
        return value
