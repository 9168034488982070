#!/usr/bin/env python
"""
    Song Schemas for Songlicense,
    the stored Song record and the payloads that create or update one.

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""

from pydantic import BaseModel, Field
from .fields import Id, U32

class Song(BaseModel):
    id: Id
    title: str
    artist: str
    owner_id: Id
    year: U32
    genre: str
    price: U32

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "title": "Blue in Green",
                "artist": "Miles Davis",
                "owner_id": 0,
                "year": 1959,
                "genre": "Jazz",
                "price": 250
            }
        }

class SongPayload(BaseModel):
    title: str = Field(..., min_length=2)
    artist: str
    owner_id: Id
    year: U32
    genre: str
    price: U32

class UpdateSongPayload(BaseModel):
    auth_key: str
    id: Id
    title: str = Field(..., min_length=2)
    artist: str
    year: U32
    genre: str
    price: U32
