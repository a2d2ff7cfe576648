from conftest import DISPATCHER, FIELD, parse_ts


class TestCustomers:
    """Customer CRUD over HTTP"""

    def test_crud_flow(self, client):
        created = client.post(
            "/api/customers",
            json={"name": "Jane Doe", "email": "jane@example.com", "type": "Commercial", "tags": ["vip", "repeat"]},
        )
        assert created.status_code == 201
        customer = created.json()
        assert customer["totalSpent"] == "0.00"
        assert customer["tags"] == ["vip", "repeat"]
        assert customer["type"] == "Commercial"

        fetched = client.get(f"/api/customers/{customer['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["email"] == "jane@example.com"

        patched = client.patch(f"/api/customers/{customer['id']}", json={"city": "Denver"})
        assert patched.status_code == 200
        assert patched.json()["city"] == "Denver"
        assert patched.json()["email"] == "jane@example.com"
        assert parse_ts(patched.json()["updatedAt"]) > parse_ts(customer["updatedAt"])

        deleted = client.delete(f"/api/customers/{customer['id']}")
        assert deleted.status_code == 204
        assert deleted.content == b""
        assert client.get(f"/api/customers/{customer['id']}").status_code == 404

    def test_defaults(self, client):
        customer = client.post("/api/customers", json={"name": "Sam"}).json()
        assert customer["type"] == "Residential"
        assert customer["tags"] == []
        assert customer["email"] is None

    def test_total_spent_ignored_on_create(self, client):
        customer = client.post("/api/customers", json={"name": "Sam", "totalSpent": "999.00"}).json()
        assert customer["totalSpent"] == "0.00"

    def test_total_spent_patchable(self, client):
        customer = client.post("/api/customers", json={"name": "Sam"}).json()
        patched = client.patch(f"/api/customers/{customer['id']}", json={"totalSpent": 1450.5})
        assert patched.json()["totalSpent"] == "1450.50"

    def test_explicit_null_clears_optional(self, client):
        customer = client.post("/api/customers", json={"name": "Sam", "phone": "555-0100"}).json()
        patched = client.patch(f"/api/customers/{customer['id']}", json={"phone": None})
        assert patched.json()["phone"] is None

    def test_null_required_field_rejected(self, client):
        customer = client.post("/api/customers", json={"name": "Sam"}).json()
        response = client.patch(f"/api/customers/{customer['id']}", json={"name": None})
        assert response.status_code == 400
        assert "name" in response.json()["error"]

    def test_missing_name(self, client):
        response = client.post("/api/customers", json={"email": "x@example.com"})
        assert response.status_code == 400
        assert response.json()["error"] == 'Validation error: Field required at "name"'

    def test_unknown_type(self, client):
        assert client.post("/api/customers", json={"name": "Sam", "type": "Alien"}).status_code == 400

    def test_not_found(self, client):
        assert client.get("/api/customers/999").json() == {"error": "Customer not found"}
        assert client.patch("/api/customers/999", json={"city": "X"}).status_code == 404
        assert client.delete("/api/customers/999").status_code == 404

    def test_customer_jobs(self, client):
        customer = client.post("/api/customers", json={"name": "Sam"}).json()
        client.post("/api/jobs", json={
            "customerId": customer["id"], "customerName": "Sam", "address": "1 Main St",
            "date": "2024-05-01T09:00:00", "type": "Full Truck Load",
        })
        client.post("/api/jobs", json={
            "customerName": "Other", "address": "2 Main St",
            "date": "2024-05-02T09:00:00", "type": "Garage Cleanout",
        })
        jobs = client.get(f"/api/customers/{customer['id']}/jobs").json()
        assert [j["customerName"] for j in jobs] == ["Sam"]

        # Jobs survive their customer
        client.delete(f"/api/customers/{customer['id']}")
        assert len(client.get(f"/api/customers/{customer['id']}/jobs").json()) == 1


class TestProtectedCoreRoutes:
    def test_open_by_default(self, client):
        assert client.get("/api/customers").status_code == 200

    def test_role_gate_when_enabled(self, client, monkeypatch):
        from junkcrm.core.config import settings

        monkeypatch.setattr(settings, "PROTECT_CORE_ROUTES", True)
        assert client.get("/api/customers").status_code == 401
        assert client.get("/api/customers", headers=FIELD).status_code == 200
        assert client.post("/api/customers", json={"name": "Sam"}, headers=FIELD).status_code == 403
        assert client.post("/api/customers", json={"name": "Sam"}, headers=DISPATCHER).status_code == 201
