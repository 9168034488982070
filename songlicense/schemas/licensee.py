from pydantic import BaseModel, Field
from typing import List
from .fields import Id

class Licensee(BaseModel):
    id: Id
    name: str
    email: str
    licenses: List[int] = []

    class Config:
        from_attributes = True

class LicenseePayload(BaseModel):
    name: str = Field(..., min_length=2)
    email: str
