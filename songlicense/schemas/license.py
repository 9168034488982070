from pydantic import BaseModel
from .fields import Id, U32

class License(BaseModel):
    id: Id
    song_id: Id
    owner_id: Id
    licensee_id: Id
    approved: bool = False
    price: U32 = 0
    start_date: str
    end_date: str

    class Config:
        from_attributes = True

class LicensePayload(BaseModel):
    song_id: Id
    licensee_id: Id
    start_date: str
    end_date: str

class ProtectedPayload(BaseModel):
    auth_key: str
    license_id: Id

class ApprovePayload(BaseModel):
    auth_key: str
    license_id: Id
    cost: U32
