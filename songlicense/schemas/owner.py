from pydantic import BaseModel, Field
from typing import List
from .fields import Id

class Owner(BaseModel):
    id: Id
    name: str
    email: str
    auth_key: str
    song_ids: List[int] = []
    license_ids: List[int] = []

    class Config:
        from_attributes = True

class ReturnOwner(BaseModel):
    """Public view of an Owner, without the auth key or reference lists."""
    id: Id
    name: str
    email: str

    class Config:
        from_attributes = True

class OwnerPayload(BaseModel):
    name: str = Field(..., min_length=2)
    email: str
    auth_key: str
