from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from tests.base import QuotesApiTestBase
from quotes_api.main import app
from quotes_api.models.quote import Quote


class QuoteCrudApiTests(QuotesApiTestBase):
    def test_quote_lifecycle_create_read_update_delete(self):
        created = self.client.post("/quotes/create", json={"author": "Twain", "text": "Denial"})
        self.assertEqual(created.status_code, 201)
        body = created.json()
        quote_id = body["id"]
        self.assertIsInstance(quote_id, int)
        self.assertEqual(body["author"], "Twain")
        self.assertEqual(body["text"], "Denial")
        self.assertEqual(body["length"], 6)

        fetched = self.client.get(f"/quotes/{quote_id}")
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json(), body)

        updated = self.client.patch(f"/quotes/update/{quote_id}", json={"text": "Denial ain't just a river"})
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json()["author"], "Twain")
        self.assertEqual(updated.json()["text"], "Denial ain't just a river")
        # Length is a snapshot taken at creation.
        self.assertEqual(updated.json()["length"], 6)

        deleted = self.client.delete(f"/quotes/delete/{quote_id}")
        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(deleted.content, b"")

        missing = self.client.get(f"/quotes/{quote_id}")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["detail"], f"Quote with id {quote_id} not found")

    def test_create_sets_length_to_character_count(self):
        text = "Être ou ne pas être"
        response = self.client.post("/quotes/create", json={"author": "Hamlet", "text": text})
        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["length"], len(text))

        with self.SessionLocal() as db:
            row = db.get(Quote, response.json()["id"])
            self.assertEqual(row.length, len(text))

    def test_create_rejects_missing_or_empty_fields(self):
        for payload in ({"author": "Twain"}, {"text": "Denial"}, {"author": "", "text": "Denial"}, {}):
            response = self.client.post("/quotes/create", json=payload)
            self.assertEqual(response.status_code, 400, payload)
            self.assertEqual(response.json()["detail"], "Error: quote was not created")

        with self.SessionLocal() as db:
            self.assertEqual(db.query(Quote).count(), 0)

    def test_create_rejects_non_json_body(self):
        response = self.client.post(
            "/quotes/create",
            content="not json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)

    def test_update_with_only_author_keeps_text(self):
        quote_id = self._seed("Wilde", "Be yourself")
        response = self.client.patch(f"/quotes/update/{quote_id}", json={"author": "Oscar Wilde"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["author"], "Oscar Wilde")
        self.assertEqual(response.json()["text"], "Be yourself")

    def test_update_ignores_empty_fields(self):
        quote_id = self._seed("Wilde", "Be yourself")
        response = self.client.patch(f"/quotes/update/{quote_id}", json={"author": "", "text": ""})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["author"], "Wilde")
        self.assertEqual(response.json()["text"], "Be yourself")

    def test_unknown_id_returns_404_for_read_update_and_delete(self):
        self.assertEqual(self.client.get("/quotes/999").status_code, 404)

        updated = self.client.patch("/quotes/update/999", json={"text": "nothing"})
        self.assertEqual(updated.status_code, 404)
        self.assertEqual(updated.json()["detail"], "Quote not found")

        deleted = self.client.delete("/quotes/delete/999")
        self.assertEqual(deleted.status_code, 404)
        self.assertEqual(deleted.json()["detail"], "Quote not found")

    def test_non_integer_id_is_a_bad_request(self):
        response = self.client.get("/quotes/abc")
        self.assertEqual(response.status_code, 400)

    def test_persistence_failure_on_create_returns_generic_500(self):
        boom = OperationalError("INSERT INTO quotes", {}, Exception("disk I/O error"))
        with patch("quotes_api.services.quote_repository.insert", side_effect=boom):
            response = self.client.post("/quotes/create", json={"author": "Twain", "text": "Denial"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Server Error")
        self.assertNotIn("disk", response.text)

    def test_persistence_failure_on_delete_returns_500(self):
        quote_id = self._seed("Twain", "Denial")
        boom = OperationalError("DELETE FROM quotes", {}, Exception("database is locked"))
        with patch("quotes_api.services.quote_repository.remove", side_effect=boom):
            response = self.client.delete(f"/quotes/delete/{quote_id}")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Server Error")

    def test_persistence_failure_on_update_returns_500(self):
        quote_id = self._seed("Twain", "Denial")
        boom = OperationalError("UPDATE quotes", {}, Exception("database is locked"))
        with patch("quotes_api.services.quote_repository.update", side_effect=boom):
            response = self.client.patch(f"/quotes/update/{quote_id}", json={"text": "Denial ain't just a river"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Server Error")
        self.assertNotIn("locked", response.text)

    def test_unexpected_error_returns_500_with_request_headers(self):
        client = TestClient(app, raise_server_exceptions=False)
        try:
            with patch("quotes_api.services.quote_repository.find_by_id", side_effect=RuntimeError("boom")):
                response = client.get("/quotes/1", headers={"X-Request-ID": "crash-1"})
        finally:
            client.close()
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "Server Error"})
        self.assertEqual(response.headers.get("x-request-id"), "crash-1")
        self.assertEqual(response.headers.get("cache-control"), "no-store")
        self.assertNotIn("boom", response.text)

    def test_update_without_body_on_unknown_id_returns_404(self):
        response = self.client.patch("/quotes/update/999")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "Quote not found")

    def test_update_without_body_leaves_quote_unchanged(self):
        quote_id = self._seed("Twain", "Denial")
        response = self.client.patch(f"/quotes/update/{quote_id}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"id": quote_id, "author": "Twain", "text": "Denial", "length": 6})


class RandomQuoteApiTests(QuotesApiTestBase):
    def test_empty_store_returns_null_body(self):
        response = self.client.get("/quotes")
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json())

    def test_author_filter_returns_only_that_author(self):
        self._seed("Twain", "Denial")
        self._seed("Twain", "Get started")
        self._seed("Wilde", "Be yourself")
        for _ in range(10):
            response = self.client.get("/quotes", params={"author": "Twain"})
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()["author"], "Twain")

    def test_both_filters_return_matching_quote(self):
        self._seed("Twain", "Denial")
        self._seed("Twain", "The secret of getting ahead is getting started.")
        self._seed("Wilde", "Be")
        for _ in range(10):
            response = self.client.get("/quotes", params={"author": "Twain", "maxLength": 10})
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()["text"], "Denial")

    def test_max_length_filter_alone(self):
        self._seed("Twain", "The secret of getting ahead is getting started.")
        self._seed("Wilde", "Be")
        for _ in range(10):
            response = self.client.get("/quotes", params={"maxLength": 5})
            self.assertEqual(response.json()["text"], "Be")

    def test_non_integer_max_length_is_a_bad_request(self):
        response = self.client.get("/quotes", params={"maxLength": "short"})
        self.assertEqual(response.status_code, 400)

    def test_unfiltered_draw_never_reaches_the_newest_id(self):
        # The id draw covers [0, max_id), so a lone quote with id 1 is never picked.
        self._seed("Twain", "Denial")
        for _ in range(5):
            response = self.client.get("/quotes")
            self.assertEqual(response.status_code, 200)
            self.assertIsNone(response.json())
