"""
SMS Endpoint Module

Hands a text message to the configured SMS gateway. Without provider
credentials the message is only logged.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from junkcrm.schemas.sms import SMSRequest, SMSResponse
from junkcrm.services.sms import SMSDeliveryError, SMSGateway, get_sms_gateway

router = APIRouter()


@router.post("/send-sms", response_model=SMSResponse)
def send_sms(
    sms_in: SMSRequest,
    gateway: SMSGateway = Depends(get_sms_gateway),
):
    """
    Send a text message to a customer.

    Raises:
        HTTPException 400: If phone or message is missing or blank
        HTTPException 502: If the SMS provider fails to send
    """
    try:
        gateway.send(sms_in.phone, sms_in.message)
    except SMSDeliveryError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="SMS delivery failed")
    return {"success": True, "message": "SMS sent successfully"}
