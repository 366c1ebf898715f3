from pydantic import BaseModel, Field
from typing import Optional


# ---- Requests ----
class PortalSessionRequest(BaseModel):
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    return_url: Optional[str] = Field(default=None, alias="returnUrl")

    class Config:
        populate_by_name = True


# ---- Responses ----
class PortalSessionResponse(BaseModel):
    url: str
