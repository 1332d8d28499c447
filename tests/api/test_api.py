import importlib.util
import unittest


@unittest.skipIf(
    importlib.util.find_spec("fastapi") is None or importlib.util.find_spec("httpx") is None,
    "fastapi or httpx not installed",
)
class TestSearchApi(unittest.TestCase):
    def setUp(self) -> None:
        from fastapi.testclient import TestClient

        from infrastructure.config import ContainerConfig, build_default_container
        from ui.api.main import create_app

        container = build_default_container(ContainerConfig(history_backend="memory"))
        self.client_context = TestClient(create_app(container))
        self.client = self.client_context.__enter__()

    def tearDown(self) -> None:
        self.client_context.__exit__(None, None, None)

    def test_search(self):
        response = self.client.get("/search", params={"q": "calificaciones", "snippets": "true"})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["total_matched"], 1)
        self.assertEqual(payload["results"][0]["id"], "grades")
        self.assertIsNotNone(payload["results"][0]["snippet"])

    def test_short_query(self):
        payload = self.client.get("/search", params={"q": "a"}).json()
        self.assertEqual(payload["results"], [])
        self.assertEqual(payload["total_matched"], 0)

    def test_auth_gated_results(self):
        anonymous = self.client.get("/search", params={"q": "dashboard"}).json()
        self.assertEqual(anonymous["total_matched"], 0)
        signed_in = self.client.get("/search", params={"q": "dashboard", "authenticated": "true"}).json()
        self.assertEqual(signed_in["results"][0]["id"], "dashboard")

    def test_suggestions(self):
        payload = self.client.get("/suggestions", params={"q": "portal"}).json()
        self.assertEqual(payload["suggestions"], ["Portal Estudiantes", "Portal Padres"])

    def test_upsert_and_stats(self):
        response = self.client.post(
            "/documents",
            json={"id": "becas", "title": "Becas", "body": "apoyo económico", "category": "servicios"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.client.get("/search", params={"q": "becas"}).json()["results"][0]["id"], "becas")
        stats = self.client.get("/stats").json()
        self.assertEqual(stats["index_size"], 19)
        self.assertEqual(stats["history_size"], 1)

    def test_invalid_document(self):
        response = self.client.post("/documents", json={"id": "", "title": "Sin id"})
        self.assertEqual(response.status_code, 422)

    def test_reindex_and_clear_history(self):
        self.client.get("/search", params={"q": "becas"})
        report = self.client.post("/reindex").json()
        self.assertEqual(report["indexed"], 18)
        self.assertEqual(self.client.delete("/history").status_code, 204)
        self.assertEqual(self.client.get("/stats").json()["history_size"], 0)


@unittest.skipIf(
    importlib.util.find_spec("fastapi") is None or importlib.util.find_spec("httpx") is None,
    "fastapi or httpx not installed",
)
class TestConfiguredResultLimit(unittest.TestCase):
    def setUp(self) -> None:
        from fastapi.testclient import TestClient

        from infrastructure.config import ContainerConfig, build_default_container
        from ui.api.main import create_app

        container = build_default_container(ContainerConfig(history_backend="memory", result_limit=1))
        self.client_context = TestClient(create_app(container))
        self.client = self.client_context.__enter__()

    def tearDown(self) -> None:
        self.client_context.__exit__(None, None, None)

    def test_default_limit_comes_from_config(self):
        payload = self.client.get("/search", params={"q": "portal"}).json()
        self.assertEqual(payload["total_matched"], 2)
        self.assertEqual(len(payload["results"]), 1)

    def test_explicit_limit_overrides_config(self):
        payload = self.client.get("/search", params={"q": "portal", "limit": 5}).json()
        self.assertEqual(len(payload["results"]), 2)


if __name__ == "__main__":
    unittest.main()
