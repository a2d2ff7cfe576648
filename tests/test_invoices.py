from conftest import ADMIN, DISPATCHER, FIELD

INVOICE = {"customerName": "Jane Doe", "jobTitle": "Garage cleanout", "amount": "1450"}


def _invoice(client):
    response = client.post("/api/invoices", json=INVOICE, headers=DISPATCHER)
    assert response.status_code == 201
    return response.json()


class TestInvoices:
    def test_create(self, client):
        invoice = _invoice(client)
        assert invoice["amount"] == "1450.00"
        assert invoice["status"] == "Draft"
        assert invoice["issuedAt"]

    def test_field_is_read_only(self, client):
        _invoice(client)
        assert len(client.get("/api/invoices", headers=FIELD).json()) == 1
        assert client.post("/api/invoices", json=INVOICE, headers=FIELD).status_code == 403

    def test_amount_required(self, client):
        response = client.post("/api/invoices", json={"customerName": "Jane"}, headers=DISPATCHER)
        assert response.status_code == 400

    def test_only_admin_deletes(self, client):
        invoice = _invoice(client)
        response = client.delete(f"/api/invoices/{invoice['id']}", headers=DISPATCHER)
        assert response.status_code == 403
        assert response.json() == {"error": "Requires role: admin"}
        assert client.delete(f"/api/invoices/{invoice['id']}", headers=ADMIN).status_code == 204
        assert client.delete(f"/api/invoices/{invoice['id']}", headers=ADMIN).status_code == 404

    def test_paid_notifies(self, client):
        invoice = _invoice(client)
        client.patch(f"/api/invoices/{invoice['id']}", json={"status": "Sent"}, headers=DISPATCHER)
        paid = client.patch(f"/api/invoices/{invoice['id']}", json={"status": "Paid"}, headers=DISPATCHER)
        assert paid.json()["status"] == "Paid"

        notifications = client.get("/api/notifications", headers=FIELD).json()
        assert len(notifications) == 1
        assert notifications[0]["title"] == "Invoice paid"
        assert notifications[0]["message"] == "Jane Doe paid $1,450.00"
        assert notifications[0]["type"] == "success"

    def test_no_overdue_automation(self, client):
        response = client.post(
            "/api/invoices",
            json={**INVOICE, "status": "Sent", "dueDate": "2000-01-01T00:00:00"},
            headers=DISPATCHER,
        )
        invoice_id = response.json()["id"]
        assert client.get(f"/api/invoices/{invoice_id}", headers=FIELD).json()["status"] == "Sent"
