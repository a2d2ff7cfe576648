from pydantic import BaseModel, ConfigDict
from junkcrm.models.user import UserRole


# Properties to return to client (never the password hash)
class UserRead(BaseModel):
    id: str
    username: str
    role: UserRole

    model_config = ConfigDict(from_attributes=True)


# Admin-only role change
class UserRoleUpdate(BaseModel):
    role: UserRole
