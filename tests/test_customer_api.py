"""Integration tests for the customer endpoints via the API.

Uses the Flask test client with an in-memory SQLite database.
"""

import json

from crm.domain.exceptions import StorageError


def _post_json(client, url, data):
    """Helper to POST JSON and return the parsed response."""
    resp = client.post(url, data=json.dumps(data), content_type="application/json")
    return resp.status_code, resp.get_json()


def _create(client, name="Alice", email="alice@example.com", password="secret"):
    status, body = _post_json(client, "/customers", {
        "name": name,
        "email": email,
        "password": password,
    })
    assert status == 201
    return body


class BrokenCustomerService:
    @staticmethod
    def get_customers():
        err = StorageError("list customers", Exception("relation does not exist"))
        raise err.wrap("could not list customers")

    @staticmethod
    def create_customer(*_args):
        raise StorageError("create customer", Exception("connection refused"))


class TestCreateCustomer:
    def test_returns_created_resource(self, client):
        body = _create(client)
        assert set(body) == {"id", "name", "email"}
        assert body["name"] == "Alice"
        assert body["email"] == "alice@example.com"
        assert isinstance(body["id"], int)

    def test_malformed_json_is_400_and_creates_no_row(self, client):
        resp = client.post("/customers", data="{not json", content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json()["error_code"] == "VALIDATION_ERROR"
        assert client.get("/customer").get_json() == []

    def test_json_body_without_content_type_is_accepted(self, client):
        resp = client.post("/customers", data=json.dumps({
            "name": "A", "email": "a@example.com", "password": "pw",
        }))
        assert resp.status_code == 201
        assert resp.get_json()["email"] == "a@example.com"

    def test_json_body_with_form_content_type_is_accepted(self, client):
        resp = client.post(
            "/customers",
            data=json.dumps({"name": "B", "email": "b@example.com", "password": "pw"}),
            content_type="application/x-www-form-urlencoded",
        )
        assert resp.status_code == 201
        assert [c["email"] for c in client.get("/customer").get_json()] == ["b@example.com"]

    def test_missing_fields_are_400(self, client):
        status, body = _post_json(client, "/customers", {"name": "Alice"})
        assert status == 400
        fields = {tuple(d["loc"]) for d in body["details"]}
        assert ("email",) in fields
        assert ("password",) in fields

    def test_non_object_body_is_400(self, client):
        status, _ = _post_json(client, "/customers", ["Alice"])
        assert status == 400

    def test_duplicate_email_is_500_without_leaking(self, client):
        _create(client)
        status, body = _post_json(client, "/customers", {
            "name": "Impostor",
            "email": "alice@example.com",
            "password": "pw",
        })
        assert status == 500
        assert body["message"] == "could not create customer"
        assert body["error_code"] == "STORAGE_ERROR"
        assert len(client.get("/customer").get_json()) == 1

    def test_storage_failure_is_500(self, app, client, monkeypatch):
        monkeypatch.setitem(app.extensions, "customer_service", BrokenCustomerService())
        status, body = _post_json(client, "/customers", {
            "name": "A", "email": "a@example.com", "password": "pw",
        })
        assert status == 500
        assert body["message"] == "could not create customer"

    def test_non_post_method_is_405(self, client):
        assert client.get("/customers").status_code == 405
        assert client.put("/customers", json={}).status_code == 405


class TestListCustomers:
    def test_lists_all_in_id_order_with_passwords(self, client):
        first = _create(client, "A", "a@example.com", "pw-a")
        second = _create(client, "B", "b@example.com", "pw-b")

        resp = client.get("/customer")
        assert resp.status_code == 200
        body = resp.get_json()
        assert [c["id"] for c in body] == [first["id"], second["id"]]
        assert body[0]["password"] == "pw-a"
        assert {"created_at", "updated_at"} <= set(body[0])

    def test_deleted_customers_are_not_listed(self, client):
        _create(client, "A", "a@example.com")
        _create(client, "B", "b@example.com")
        client.delete("/customers/email/a@example.com")
        assert [c["email"] for c in client.get("/customer").get_json()] == ["b@example.com"]

    def test_failure_embeds_error_text(self, app, client, monkeypatch):
        monkeypatch.setitem(app.extensions, "customer_service", BrokenCustomerService())
        resp = client.get("/customer")
        assert resp.status_code == 500
        message = resp.get_json()["message"]
        assert message.startswith("failed to fetch customers: could not list customers")
        assert "relation does not exist" in message

    def test_failure_text_hidden_when_details_disabled(self, app, client, monkeypatch):
        monkeypatch.setitem(app.extensions, "customer_service", BrokenCustomerService())
        monkeypatch.setitem(app.config, "EXPOSE_ERROR_DETAILS", False)
        resp = client.get("/customer")
        assert resp.status_code == 500
        assert resp.get_json()["message"] == "failed to fetch customers"

    def test_non_get_method_is_405(self, client):
        assert client.post("/customer", json={}).status_code == 405
        assert client.delete("/customer").status_code == 405


class TestCustomerById:
    def test_get(self, client):
        created = _create(client)
        resp = client.get(f"/customers/{created['id']}")
        assert resp.status_code == 200
        assert resp.get_json()["email"] == "alice@example.com"

    def test_get_missing_is_404(self, client):
        resp = client.get("/customers/9999")
        assert resp.status_code == 404
        assert resp.get_json()["error_code"] == "RESOURCE_NOT_FOUND"

    def test_update(self, client):
        created = _create(client)
        resp = client.put(f"/customers/{created['id']}", json={
            "name": "Alicia",
            "email": "alicia@example.com",
            "password": "new-secret",
        })
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["id"] == created["id"]
        assert body["name"] == "Alicia"
        assert body["updated_at"] >= body["created_at"]

    def test_update_missing_is_404_and_changes_nothing(self, client):
        _create(client)
        resp = client.put("/customers/9999", json={
            "name": "X", "email": "x@example.com", "password": "pw",
        })
        assert resp.status_code == 404
        listed = client.get("/customer").get_json()
        assert [c["email"] for c in listed] == ["alice@example.com"]

    def test_update_without_content_type(self, client):
        created = _create(client)
        resp = client.put(f"/customers/{created['id']}", data=json.dumps({
            "name": "Alicia", "email": "alice@example.com", "password": "pw",
        }))
        assert resp.status_code == 200
        assert resp.get_json()["name"] == "Alicia"

    def test_update_malformed_body_is_400(self, client):
        created = _create(client)
        resp = client.put(
            f"/customers/{created['id']}", data="nope", content_type="application/json",
        )
        assert resp.status_code == 400


class TestCustomerByEmail:
    def test_get(self, client):
        created = _create(client)
        resp = client.get("/customers/email/alice@example.com")
        assert resp.status_code == 200
        assert resp.get_json()["id"] == created["id"]

    def test_get_missing_is_404(self, client):
        assert client.get("/customers/email/nobody@example.com").status_code == 404

    def test_delete_removes_only_that_customer(self, client):
        _create(client, "A", "a@example.com")
        _create(client, "B", "b@example.com")

        resp = client.delete("/customers/email/a@example.com")
        assert resp.status_code == 204
        assert client.get("/customers/email/a@example.com").status_code == 404
        assert client.get("/customers/email/b@example.com").status_code == 200

    def test_delete_missing_is_404(self, client):
        _create(client)
        resp = client.delete("/customers/email/nobody@example.com")
        assert resp.status_code == 404
        assert len(client.get("/customer").get_json()) == 1
