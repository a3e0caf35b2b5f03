"""Tests for reference records and the path index."""
import unittest

from richtext_renderer.model.reference_model import ReferenceIndex, ReferenceRecord


def make_record(path: str, type_name: str = "ImageRef", **fields) -> ReferenceRecord:
    return ReferenceRecord(path=path, type_name=type_name, fields={"_path": path, "__typename": type_name, **fields})


class ReferenceIndexTest(unittest.TestCase):
    """Validate index construction and the last-wins policy."""

    def test_every_record_retrievable_by_path(self) -> None:
        records = [make_record(f"/content/dam/{n}.png") for n in range(5)]
        index = ReferenceIndex.build(records)

        self.assertEqual(len(index), len(records))
        for record in records:
            self.assertIs(index.get(record.path), record)
            self.assertIn(record.path, index)

    def test_duplicate_path_keeps_later_record(self) -> None:
        first = make_record("/content/a", url="first")
        other = make_record("/content/b")
        second = make_record("/content/a", url="second")
        index = ReferenceIndex.build([first, other, second])

        self.assertEqual(len(index), 2)
        self.assertIs(index.get("/content/a"), second)

    def test_empty_input_yields_empty_index(self) -> None:
        index = ReferenceIndex.build([])
        self.assertEqual(len(index), 0)
        self.assertIsNone(index.get("/content/a"))
        self.assertEqual(list(index), [])

    def test_get_with_missing_key(self) -> None:
        index = ReferenceIndex.build([make_record("/content/a")])
        self.assertIsNone(index.get(None))
        self.assertIsNone(index.get(""))
        self.assertEqual(index.paths(), ["/content/a"])


class ReferenceRecordTest(unittest.TestCase):
    def test_from_dict_maps_path_and_typename(self) -> None:
        payload = {"_path": "/content/dam/wknd/event", "__typename": "EventModel", "slug": "ski"}
        record = ReferenceRecord.from_dict(payload)

        self.assertEqual(record.path, "/content/dam/wknd/event")
        self.assertEqual(record.type_name, "EventModel")
        self.assertEqual(record.fields["slug"], "ski")
        self.assertEqual(record.fields["_path"], "/content/dam/wknd/event")

    def test_empty_path_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ReferenceRecord(path="", type_name="ImageRef")
        with self.assertRaises(ValueError):
            ReferenceRecord.from_dict({"__typename": "ImageRef"})


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
