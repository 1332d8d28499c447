import itertools
import sys
import threading
import unittest
from typing import Sequence

from application.services.history import HistoryTracker
from domain.entities import HistoryEntry
from domain.interfaces import HistoryStorage
from infrastructure.repositories.in_memory_history_storage import InMemoryHistoryStorage


def _ticking_clock():
    counter = itertools.count(1)
    return lambda: float(next(counter))


class BrokenStorage(HistoryStorage):
    def load(self) -> list[HistoryEntry]:
        raise OSError("storage unavailable")

    def save(self, entries: Sequence[HistoryEntry]) -> None:
        raise OSError("storage unavailable")

    def clear(self) -> None:
        raise OSError("storage unavailable")


class TestHistoryTracker(unittest.TestCase):
    def test_repeated_queries_increase_frequency(self):
        history = HistoryTracker(clock=_ticking_clock())
        for count in (2, 4, 1):
            history.record("beca", count)
        self.assertEqual(len(history), 1)
        entry = history.get("BECA")
        assert entry is not None
        self.assertEqual(entry.frequency, 3)
        self.assertEqual(entry.first_seen, 1.0)
        self.assertEqual(entry.last_seen, 3.0)
        self.assertEqual(entry.last_result_count, 1)

    def test_lookup_is_case_insensitive(self):
        history = HistoryTracker()
        history.record("Becas", 1)
        history.record("becas", 1)
        self.assertEqual([entry.query for entry in history.entries()], ["Becas"])

    def test_new_entries_go_first(self):
        history = HistoryTracker(clock=_ticking_clock())
        history.record("uno", 0)
        history.record("dos", 0)
        self.assertEqual([entry.query for entry in history.entries()], ["dos", "uno"])

    def test_cap_drops_oldest(self):
        history = HistoryTracker(clock=_ticking_clock())
        for index in range(60):
            history.record(f"consulta {index}", 0)
        self.assertEqual(len(history), 50)
        remaining = {entry.query for entry in history.entries()}
        for index in range(10):
            self.assertNotIn(f"consulta {index}", remaining)
        self.assertIn("consulta 10", remaining)

    def test_cap_with_identical_timestamps(self):
        history = HistoryTracker(clock=lambda: 100.0)
        for index in range(60):
            history.record(f"consulta {index}", 0)
        remaining = {entry.query for entry in history.entries()}
        self.assertEqual(len(remaining), 50)
        self.assertNotIn("consulta 9", remaining)
        self.assertIn("consulta 59", remaining)

    def test_suggestions_prefer_frequent_queries(self):
        history = HistoryTracker(clock=_ticking_clock())
        history.record("becas deportivas", 1)
        for _ in range(3):
            history.record("beca", 1)
        history.record("biblioteca", 1)
        self.assertEqual(history.suggestions("BEC"), ["beca", "becas deportivas"])
        self.assertEqual(history.suggestions(""), [])

    def test_suggestions_are_capped(self):
        history = HistoryTracker()
        for index in range(12):
            history.record(f"evento {index}", 0)
        self.assertEqual(len(history.suggestions("evento")), 8)

    def test_most_frequent(self):
        history = HistoryTracker()
        for query in ("a1", "b2", "b2", "c3", "c3", "c3"):
            history.record(query, 0)
        self.assertEqual(history.most_frequent(2), [("c3", 3), ("b2", 2)])

    def test_persists_through_storage(self):
        storage = InMemoryHistoryStorage()
        history = HistoryTracker(storage)
        history.record("horarios", 2)
        reloaded = HistoryTracker(storage)
        self.assertEqual([entry.query for entry in reloaded.entries()], ["horarios"])
        reloaded.clear()
        self.assertEqual(storage.load(), [])

    def test_storage_failures_degrade_gracefully(self):
        with self.assertLogs("application.services.history", level="WARNING"):
            history = HistoryTracker(BrokenStorage())
        self.assertEqual(len(history), 0)
        with self.assertLogs("application.services.history", level="WARNING"):
            history.record("beca", 1)
        self.assertEqual(len(history), 1)
        with self.assertLogs("application.services.history", level="WARNING"):
            history.clear()
        self.assertEqual(len(history), 0)

    def test_concurrent_records_keep_entries_unique_and_capped(self):
        history = HistoryTracker()
        errors: list[BaseException] = []
        start = threading.Barrier(8)

        def worker() -> None:
            start.wait()
            try:
                for index in range(80):
                    history.record(f"becas {index}", index)
                    history.record(f"BECAS {index % 5}", 1)
            except Exception as exc:  # pragma: no cover - surfaced by the assertion below
                errors.append(exc)

        interval = sys.getswitchinterval()
        sys.setswitchinterval(1e-6)
        try:
            threads = [threading.Thread(target=worker) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()
        finally:
            sys.setswitchinterval(interval)

        self.assertEqual(errors, [])
        keys = [entry.query.lower() for entry in history.entries()]
        self.assertEqual(len(keys), len(set(keys)))
        self.assertLessEqual(len(history), 50)


if __name__ == "__main__":
    unittest.main()
