import json
import logging

from junkcrm.api.errors import format_validation_errors
from junkcrm.core.logging import JsonFormatter


class TestValidationMessages:
    def test_single_error(self):
        errors = [{"loc": ("body", "name"), "msg": "Field required"}]
        assert format_validation_errors(errors) == 'Validation error: Field required at "name"'

    def test_nested_location_and_multiple_errors(self):
        errors = [
            {"loc": ("body", "tags", 1), "msg": "Input should be a valid string"},
            {"loc": ("query", "start"), "msg": "Input should be a valid datetime"},
        ]
        assert format_validation_errors(errors) == (
            'Validation error: Input should be a valid string at "tags.1"; '
            'Input should be a valid datetime at "start"'
        )

    def test_whole_body_error(self):
        errors = [{"loc": ("body",), "msg": "JSON decode error"}]
        assert format_validation_errors(errors) == "Validation error: JSON decode error"


class TestHTTPErrors:
    def test_unknown_route(self, client):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_malformed_json(self, client):
        response = client.post(
            "/api/customers", content="{not json", headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"].startswith("Validation error")

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestJsonLogging:
    def test_extras_are_included(self):
        record = logging.LogRecord("junkcrm.test", logging.INFO, __file__, 1, "Raised %s", ("alert",), None)
        record.notification_id = 7
        payload = json.loads(JsonFormatter().format(record))
        assert payload["message"] == "Raised alert"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "junkcrm.test"
        assert payload["notification_id"] == 7
