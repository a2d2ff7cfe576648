import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from junkcrm.core.config import Settings
from junkcrm.main import app
from junkcrm.services.sms import (
    LoggingSMSGateway,
    SMSDeliveryError,
    SMSGateway,
    get_sms_gateway,
)


class RecordingGateway(SMSGateway):
    def __init__(self):
        self.sent = []

    def send(self, phone, message):
        self.sent.append((phone, message))
        return "SM123"


class FailingGateway(SMSGateway):
    def send(self, phone, message):
        raise SMSDeliveryError("carrier rejected")


class TestSendSMS:
    def test_sends_through_gateway(self, client):
        gateway = RecordingGateway()
        app.dependency_overrides[get_sms_gateway] = lambda: gateway

        response = client.post("/api/send-sms", json={"phone": "+15125550100", "message": "Crew is 20 minutes out"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "SMS sent successfully"}
        assert gateway.sent == [("+15125550100", "Crew is 20 minutes out")]

    def test_blank_message_rejected(self, client):
        response = client.post("/api/send-sms", json={"phone": "+15125550100", "message": "   "})
        assert response.status_code == 400
        assert '"message"' in response.json()["error"]

    def test_missing_phone(self, client):
        assert client.post("/api/send-sms", json={"message": "hi"}).status_code == 400

    def test_provider_failure(self, client):
        app.dependency_overrides[get_sms_gateway] = FailingGateway
        response = client.post("/api/send-sms", json={"phone": "+15125550100", "message": "hi"})
        assert response.status_code == 502
        assert response.json() == {"error": "SMS delivery failed"}

    def test_logs_without_credentials(self, client, caplog):
        assert isinstance(get_sms_gateway(), LoggingSMSGateway)
        with caplog.at_level("INFO", logger="junkcrm.services.sms"):
            response = client.post("/api/send-sms", json={"phone": "5125550100", "message": "hi"})
        assert response.status_code == 200
        assert "SMS to 5125550100" in caplog.text


class TestGatewayContract:
    def test_base_gateway_is_abstract(self):
        with pytest.raises(TypeError):
            SMSGateway()

    def test_gateway_without_send_is_rejected(self):
        class SilentGateway(SMSGateway):
            pass

        with pytest.raises(TypeError):
            SilentGateway()


class TestTwilioSettings:
    def test_sender_must_be_e164(self):
        with pytest.raises(ValidationError, match="E.164"):
            Settings(_env_file=None, TWILIO_FROM_NUMBER="5125550100")

    def test_e164_sender_accepted(self):
        settings = Settings(
            _env_file=None,
            TWILIO_ACCOUNT_SID="AC" + "0" * 32,
            TWILIO_AUTH_TOKEN="token",
            TWILIO_FROM_NUMBER="+15125550100",
        )
        assert settings.sms_configured

    def test_twilio_gateway_keeps_sender(self):
        pytest.importorskip("twilio")
        from junkcrm.services.sms import TwilioSMSGateway

        gateway = TwilioSMSGateway("AC" + "0" * 32, "token", "+15125550100")
        assert gateway.from_number == "+15125550100"


class TestServerErrors:
    def test_unexpected_error_is_enveloped(self):
        def broken_gateway():
            raise RuntimeError("boom")

        app.dependency_overrides[get_sms_gateway] = broken_gateway
        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/api/send-sms", json={"phone": "+15125550100", "message": "hi"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
