#!/usr/bin/env python

"""
    API routes for Songlicense,
    songs, owners, licenses and licensees.

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from datetime import datetime, timezone
from functools import wraps
from typing import Optional
from fastapi import (
    APIRouter,
    Body,
    Depends,
    Header,
    Request,
)
from fastapi.responses import JSONResponse
from sqlalchemy import text
from songlicense.core.api import LicensingAPI
from songlicense.core.exceptions import (
    LicensingAPIError,
    NotFoundError,
    InvalidPayloadError,
    UnauthorizedError,
    AlreadyApprovedError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    NotFoundError: 404,
    InvalidPayloadError: 400,
    UnauthorizedError: 401,
    AlreadyApprovedError: 409,
}

router = APIRouter()

def get_api(request: Request) -> LicensingAPI:
    return request.app.state.api

def tagged_errors(func):
    """
    Decorator turns a LicensingAPIError raised by the wrapped route into
    a JSON body tagged with the error kind
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except LicensingAPIError as e:
            logger.info(f"{func.__name__} failed: {e.kind}: {e.message}")
            return JSONResponse(
                status_code=ERROR_STATUS.get(type(e), 400),
                content=e.to_dict()
            )
    return wrapper

@router.get("/health")
async def health_check(api: LicensingAPI = Depends(get_api)):
    checks = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {}
    }
    try:
        api.db.execute(text("SELECT 1"))
        checks["services"]["database"] = "ok"
    except Exception as e:
        api.db.rollback()
        checks["services"]["database"] = f"error: {str(e)}"
        checks["status"] = "unhealthy"
    return checks

@router.get("/songs")
@tagged_errors
async def get_all_songs(api: LicensingAPI = Depends(get_api)):
    return api.get_all_songs()

@router.get("/songs/search")
@tagged_errors
async def search_songs(query: str, api: LicensingAPI = Depends(get_api)):
    return api.search_song_title_genre_year(query)

@router.get("/songs/{song_id}")
@tagged_errors
async def get_song(song_id: int, api: LicensingAPI = Depends(get_api)):
    return api.get_song(song_id)

@router.post("/songs")
@tagged_errors
async def create_song(payload: dict = Body(...), api: LicensingAPI = Depends(get_api)):
    return api.create_song(payload)

@router.get("/songs/{song_id}/owner")
@tagged_errors
async def get_song_owner(song_id: int, api: LicensingAPI = Depends(get_api)):
    return api.get_song_owner(song_id)

@router.put("/songs/{song_id}")
@tagged_errors
async def update_song(song_id: int, payload: dict = Body(...), api: LicensingAPI = Depends(get_api)):
    return api.update_song({**payload, "id": song_id})

@router.delete("/songs/{song_id}")
@tagged_errors
async def delete_song(
        song_id: int,
        auth_key: Optional[str] = Header(None, alias="X-Auth-Key"),
        api: LicensingAPI = Depends(get_api)):
    if auth_key is None:
        raise InvalidPayloadError("X-Auth-Key header is required to delete a song")
    return api.delete_song(auth_key, song_id)

@router.post("/owners")
@tagged_errors
async def create_owner(payload: dict = Body(...), api: LicensingAPI = Depends(get_api)):
    return api.create_owner(payload)

@router.get("/owners/{owner_id}/licenses")
@tagged_errors
async def get_owner_license_requests(owner_id: int, api: LicensingAPI = Depends(get_api)):
    return api.get_owner_license_requests(owner_id)

@router.get("/licenses/{license_id}")
@tagged_errors
async def get_license(license_id: int, api: LicensingAPI = Depends(get_api)):
    return api.get_license(license_id)

@router.post("/licenses")
@tagged_errors
async def create_license_request(payload: dict = Body(...), api: LicensingAPI = Depends(get_api)):
    return api.create_license_request(payload)

@router.post("/licenses/{license_id}/approve")
@tagged_errors
async def approve_license(license_id: int, payload: dict = Body(...), api: LicensingAPI = Depends(get_api)):
    return api.approve_license({**payload, "license_id": license_id})

@router.post("/licenses/{license_id}/revoke")
@tagged_errors
async def revoke_license(license_id: int, payload: dict = Body(...), api: LicensingAPI = Depends(get_api)):
    return api.revoke_license({**payload, "license_id": license_id})

@router.get("/licensees/{licensee_id}")
@tagged_errors
async def get_licensee(licensee_id: int, api: LicensingAPI = Depends(get_api)):
    return api.get_licensee(licensee_id)

@router.post("/licensees")
@tagged_errors
async def create_licensee(payload: dict = Body(...), api: LicensingAPI = Depends(get_api)):
    return api.create_licensee(payload)

@router.get("/licensees/{licensee_id}/licenses")
@tagged_errors
async def get_licensee_licenses(licensee_id: int, api: LicensingAPI = Depends(get_api)):
    return api.get_licensee_licenses(licensee_id)
