"""Reference records supplied beside a document and the index built from them."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from richtext_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

PATH_KEY = "_path"
TYPENAME_KEY = "__typename"


@dataclass(frozen=True, slots=True)
class ReferenceRecord:
    """Metadata describing an asset or content fragment."""

    path: str
    type_name: str
    fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Reference record requires a non-empty path")

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ReferenceRecord":
        """Build a record from one entry of a response's ``_references`` list."""
        return cls(
            path=payload.get(PATH_KEY) or "",
            type_name=payload.get(TYPENAME_KEY) or "",
            fields=dict(payload),
        )


class ReferenceIndex:
    """Read-only lookup of reference records keyed by their path."""

    def __init__(self, records: Mapping[str, ReferenceRecord]):
        self._records = dict(records)

    @classmethod
    def build(cls, records: Iterable[ReferenceRecord]) -> "ReferenceIndex":
        """Index records by path; a later record replaces an earlier one with the same path."""
        by_path: Dict[str, ReferenceRecord] = {}
        for record in records:
            if record.path in by_path:
                LOGGER.debug("Duplicate reference path %s; keeping the later record", record.path)
            by_path[record.path] = record
        return cls(by_path)

    def get(self, path: Optional[str]) -> Optional[ReferenceRecord]:
        """Return the record registered under ``path`` if any."""
        if not path:
            return None
        return self._records.get(path)

    def paths(self) -> List[str]:
        return list(self._records)

    def __contains__(self, path: object) -> bool:
        return path in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ReferenceRecord]:
        return iter(self._records.values())
