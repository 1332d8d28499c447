import unittest

from application.services.index_store import IndexStore
from domain.entities import Document
from domain.errors import InvalidDocument


class TestIndexStore(unittest.TestCase):
    def setUp(self) -> None:
        self.store = IndexStore()
        self.home = Document(id="home", title="Inicio", body="Bachillerato General", category="principal")
        self.grades = Document(
            id="grades",
            title="Calificaciones",
            body="boletas",
            kind="feature",
            category="académico",
        )

    def test_upsert_computes_tokens(self):
        self.store.upsert(self.home)
        stored = self.store.get("home")
        assert stored is not None
        self.assertEqual(stored.tokens, ("inicio", "bachillerato", "general"))
        self.assertEqual(stored.searchable_text, "inicio bachillerato general")
        self.assertEqual(self.home.tokens, ())

    def test_upsert_is_idempotent(self):
        self.store.upsert(self.home)
        self.store.upsert(self.grades)
        before = list(self.store.all())
        self.store.upsert(self.home)
        self.assertEqual(list(self.store.all()), before)
        self.assertEqual(len(self.store), 2)

    def test_replacement_keeps_position_and_retokenizes(self):
        self.store.upsert(self.home)
        self.store.upsert(self.grades)
        self.store.upsert(Document(id="home", title="Portada", body="nuevo"))
        documents = list(self.store.all())
        self.assertEqual([doc.id for doc in documents], ["home", "grades"])
        self.assertEqual(documents[0].tokens, ("portada", "nuevo"))

    def test_empty_id_is_rejected(self):
        with self.assertRaises(InvalidDocument):
            self.store.upsert(Document(id="", title="Sin id"))
        with self.assertRaises(InvalidDocument):
            self.store.upsert(Document(id="   ", title="Sin id"))
        self.assertEqual(len(self.store), 0)

    def test_remove_and_clear(self):
        self.store.upsert(self.home)
        self.store.remove("missing")
        self.store.remove("home")
        self.assertNotIn("home", self.store)
        self.store.upsert(self.grades)
        self.store.clear()
        self.assertEqual(len(self.store), 0)
        self.assertEqual(self.store.available_filters(), {"categories": [], "kinds": []})

    def test_available_filters_follow_contents(self):
        self.store.upsert(self.home)
        self.store.upsert(self.grades)
        self.assertEqual(
            self.store.available_filters(),
            {"categories": ["principal", "académico"], "kinds": ["page", "feature"]},
        )
        self.store.upsert(Document(id="grades", title="Calificaciones", category="principal"))
        self.assertEqual(
            self.store.available_filters(),
            {"categories": ["principal"], "kinds": ["page"]},
        )

    def test_all_is_restartable(self):
        self.store.upsert(self.home)
        self.store.upsert(self.grades)
        first = [doc.id for doc in self.store.all()]
        second = [doc.id for doc in self.store.all()]
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
