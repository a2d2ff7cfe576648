from datetime import datetime, timezone

from conftest import parse_ts

JOB = {
    "customerName": "Jane Doe",
    "address": "12 Elm St",
    "date": "2024-06-01T10:00:00",
    "type": "1/2 Truck Load",
}


class TestJobs:
    def test_create_defaults(self, client):
        response = client.post("/api/jobs", json=JOB)
        assert response.status_code == 201
        job = response.json()
        assert job["status"] == "Pending"
        assert job["price"] is None
        assert job["customerId"] is None

    def test_price_is_money_string(self, client):
        job = client.post("/api/jobs", json={**JOB, "price": "450"}).json()
        assert job["price"] == "450.00"

    def test_date_offset_converted_to_utc(self, client):
        job = client.post("/api/jobs", json={**JOB, "date": "2024-06-01T10:00:00-06:00"}).json()
        assert parse_ts(job["date"]) == datetime(2024, 6, 1, 16, 0, tzinfo=timezone.utc)

        patched = client.patch(f"/api/jobs/{job['id']}", json={"date": "2024-06-02T09:00:00"}).json()
        assert parse_ts(patched["date"]) == datetime(2024, 6, 2, 9, 0, tzinfo=timezone.utc)

    def test_listed_by_date(self, client):
        client.post("/api/jobs", json={**JOB, "date": "2024-06-01T10:00:00", "notes": "early"})
        client.post("/api/jobs", json={**JOB, "date": "2024-07-01T10:00:00", "notes": "late"})
        assert [j["notes"] for j in client.get("/api/jobs").json()] == ["late", "early"]

    def test_filter_by_customer(self, client):
        client.post("/api/jobs", json={**JOB, "customerId": 7})
        client.post("/api/jobs", json={**JOB, "customerId": 8})
        jobs = client.get("/api/jobs", params={"customerId": 7}).json()
        assert [j["customerId"] for j in jobs] == [7]

    def test_status_update(self, client):
        job = client.post("/api/jobs", json=JOB).json()
        patched = client.patch(f"/api/jobs/{job['id']}", json={"status": "In Progress"})
        assert patched.status_code == 200
        assert patched.json()["status"] == "In Progress"
        assert patched.json()["address"] == "12 Elm St"

    def test_invalid_status(self, client):
        job = client.post("/api/jobs", json=JOB).json()
        assert client.patch(f"/api/jobs/{job['id']}", json={"status": "Done"}).status_code == 400

    def test_missing_fields_reported_together(self, client):
        response = client.post("/api/jobs", json={"customerName": "Jane"})
        error = response.json()["error"]
        assert response.status_code == 400
        for field in ("address", "date", "type"):
            assert f'"{field}"' in error

    def test_delete(self, client):
        job = client.post("/api/jobs", json=JOB).json()
        assert client.delete(f"/api/jobs/{job['id']}").status_code == 204
        assert client.get(f"/api/jobs/{job['id']}").status_code == 404
