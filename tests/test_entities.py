import unittest
from datetime import datetime, timezone

from domain.entities import Document, HistoryEntry, parse_timestamp
from domain.errors import InvalidDocument


class TestDocumentMapping(unittest.TestCase):
    def test_catalog_record_aliases(self):
        document = Document.from_mapping(
            {
                "id": "dashboard",
                "title": "Dashboard Administrativo",
                "content": "panel control",
                "type": "feature",
                "category": "admin",
                "weight": 5,
                "requireAuth": True,
                "keywords": "gestión estadísticas",
            }
        )
        self.assertEqual(document.kind, "feature")
        self.assertTrue(document.requires_auth)
        self.assertEqual(document.body, "panel control gestión estadísticas")
        self.assertEqual(document.weight, 5)

    def test_last_updated_is_parsed_as_utc(self):
        document = Document.from_mapping({"id": "x", "title": "X", "lastUpdated": "2024-01-02T03:04:05Z"})
        self.assertEqual(document.last_updated, datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))

    def test_missing_id_is_rejected(self):
        with self.assertRaises(InvalidDocument):
            Document.from_mapping({"title": "Sin id"})

    def test_unparseable_timestamp_is_ignored(self):
        self.assertIsNone(parse_timestamp("ayer"))
        self.assertIsNone(parse_timestamp(None))


class TestHistoryEntry(unittest.TestCase):
    def test_serialised_shape(self):
        entry = HistoryEntry(query="beca", frequency=3, first_seen=1.0, last_seen=5.0, last_result_count=2)
        payload = entry.to_dict()
        self.assertEqual(
            payload,
            {"query": "beca", "frequency": 3, "firstSeen": 1.0, "lastSeen": 5.0, "lastResultCount": 2},
        )
        self.assertEqual(HistoryEntry.from_dict(payload), entry)


if __name__ == "__main__":
    unittest.main()
