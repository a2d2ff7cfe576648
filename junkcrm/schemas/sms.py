from pydantic import BaseModel, ConfigDict, Field


class SMSRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    phone: str = Field(min_length=1)
    message: str = Field(min_length=1)


class SMSResponse(BaseModel):
    success: bool
    message: str
