from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, Field, EmailStr

# "" is accepted and means "no email", not an invalid one
OptionalEmail = Optional[Union[Literal[""], EmailStr]]

class CustomerCreate(BaseModel):
    """Input schema to create a customer."""
    first_name: str = Field(..., min_length=1, max_length=120)
    last_name: str = Field(..., min_length=1, max_length=120)
    email: OptionalEmail = None
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=200)
    notes: Optional[str] = Field(None, max_length=1000)

    model_config = {
        "json_schema_extra": {
            "example": {
                "first_name": "John",
                "last_name": "Doe",
                "email": "john@example.com",
                "phone": "+1234567890",
                "address": "123 Main St",
                "notes": "Prefers email contact",
            }
        }
    }

    def to_row(self) -> Dict[str, Any]:
        data = self.model_dump()
        data["email"] = data["email"] or None
        return data

class CustomerUpdate(BaseModel):
    """
    Partial update schema for a customer.

    Only fields present in the request are applied and an explicit null
    counts as absent. Clearing a text field takes an empty string.
    """
    first_name: Optional[str] = Field(None, min_length=1, max_length=120)
    last_name: Optional[str] = Field(None, min_length=1, max_length=120)
    email: OptionalEmail = None
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=200)
    notes: Optional[str] = Field(None, max_length=1000)

    def changes(self) -> Dict[str, Any]:
        data = {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}
        if data.get("email") == "":
            data["email"] = None
        return data
