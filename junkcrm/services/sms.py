"""
SMS Gateway Module

Outbound text messages to customers ("crew is 20 minutes out", quote links).
Without Twilio credentials the gateway only logs the message, which is what
development and test setups use.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from junkcrm.core.config import settings

logger = logging.getLogger(__name__)


class SMSDeliveryError(RuntimeError):
    """Raised when the provider rejects or fails to send a message."""


class SMSGateway(ABC):
    @abstractmethod
    def send(self, phone: str, message: str) -> Optional[str]:
        """Send a message and return the provider's message id, if any."""


class LoggingSMSGateway(SMSGateway):
    def send(self, phone: str, message: str) -> Optional[str]:
        logger.info("SMS to %s: %s", phone, message, extra={"sms_provider": "log"})
        return None


class TwilioSMSGateway(SMSGateway):
    """
    Sends through Twilio's REST API.

    The twilio package is only needed when credentials are configured.
    """
    def __init__(self, account_sid: str, auth_token: str, from_number: str):
        from twilio.rest import Client

        self.client = Client(account_sid, auth_token)
        self.from_number = from_number

    def send(self, phone: str, message: str) -> Optional[str]:
        from twilio.base.exceptions import TwilioRestException

        try:
            result = self.client.messages.create(to=phone, from_=self.from_number, body=message)
        except TwilioRestException as e:
            logger.error("Twilio rejected SMS to %s: %s", phone, e)
            raise SMSDeliveryError(str(e)) from e
        logger.info("SMS sent to %s via Twilio", phone, extra={"sms_provider": "twilio", "sid": result.sid})
        return result.sid


def get_sms_gateway() -> SMSGateway:
    if settings.sms_configured:
        return TwilioSMSGateway(
            settings.TWILIO_ACCOUNT_SID,
            settings.TWILIO_AUTH_TOKEN,
            settings.TWILIO_FROM_NUMBER,
        )
    return LoggingSMSGateway()
