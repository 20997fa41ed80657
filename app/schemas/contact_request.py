from pydantic import BaseModel, Field, field_validator
from typing import Optional


class ContactAgentRequest(BaseModel):
    # Both optional so a missing ID is reported as 400, not a validation error
    agent_id: Optional[str] = Field(None, alias="agentId", description="Agent being contacted")
    property_id: Optional[str] = Field(None, alias="propertyId", description="Property the client is asking about")

    @field_validator("agent_id", "property_id", mode="before")
    def coerce_id(cls, v):
        # Numeric IDs from JSON are looked up like any other ID
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    class Config:
        populate_by_name = True


class ContactRequestResponse(BaseModel):
    id: str
    client_id: str
    agent_id: str
    property_id: str
    status: str
    notes: str
    created_at: str
    updated_at: str

    class Config:
        from_attributes = True


class ContactAgentResponse(BaseModel):
    success: bool = True
    message: str
    contact_request: ContactRequestResponse
