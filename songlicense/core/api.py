#!/usr/bin/env python

"""
    Command and query service for Songlicense.

    `LicensingAPI` owns the application state (the four entity stores
    and the id allocator of one database session) and orchestrates them
    together with the `RelationshipMaintainer`. Commands run one at a
    time under a lock; inside a command each store write commits on its
    own, so a command that fails half way leaves its earlier writes in
    place.

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
import threading
from functools import wraps
from typing import List, Mapping, Type, TypeVar, Union
from pydantic import BaseModel, ValidationError
from songlicense.core.stores import Stores, IdAllocator
from songlicense.core.relationships import RelationshipMaintainer
from songlicense.core.exceptions import (
    NotFoundError,
    InvalidPayloadError,
    UnauthorizedError,
    AlreadyApprovedError,
)
from songlicense.schemas import (
    Song, SongPayload, UpdateSongPayload,
    Owner, ReturnOwner, OwnerPayload,
    License, LicensePayload, ProtectedPayload, ApprovePayload,
    Licensee, LicenseePayload,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)


def parse_payload(schema: Type[P], payload: Union[P, Mapping]) -> P:
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise InvalidPayloadError(str(e))


def serialized(func):
    """Runs the wrapped command while holding the service lock."""
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return func(self, *args, **kwargs)
    return wrapper


class LicensingAPI:

    def __init__(self, db):
        self.db = db
        self.stores = Stores(db)
        self.ids = IdAllocator(db)
        self.relationships = RelationshipMaintainer(self.stores)
        self._lock = threading.RLock()

    def _song(self, id: int) -> Song:
        if song := self.stores.songs.get(id):
            return song
        raise NotFoundError(f"song id:{id} could not be found")

    def _owner(self, id: int) -> Owner:
        if owner := self.stores.owners.get(id):
            return owner
        raise NotFoundError(f"owner id:{id} could not be found")

    def _license(self, id: int) -> License:
        if license := self.stores.licenses.get(id):
            return license
        raise NotFoundError(f"license id:{id} could not be found")

    def _licensee(self, id: int) -> Licensee:
        if licensee := self.stores.licensees.get(id):
            return licensee
        raise NotFoundError(f"licensee id:{id} could not be found")

    # Songs

    @serialized
    def get_all_songs(self) -> List[Song]:
        if songs := self.stores.songs.values():
            return songs
        raise NotFoundError("no licensable songs could be found")

    @serialized
    def get_song(self, id: int) -> Song:
        return self._song(id)

    @serialized
    def create_song(self, payload) -> Song:
        payload = parse_payload(SongPayload, payload)
        self._owner(payload.owner_id)

        id = self.ids.next_id()
        song = Song(id=id, **payload.model_dump())
        self.relationships.attach_song(song.owner_id, id)
        if self.stores.songs.put(id, song) is not None:
            raise InvalidPayloadError(f"song title:{payload.title} could not be created")
        logger.info(f"song id:{id} created for owner id:{song.owner_id}")
        return song

    @serialized
    def get_song_owner(self, id: int) -> ReturnOwner:
        song = self._song(id)
        return ReturnOwner.model_validate(self._owner(song.owner_id).model_dump())

    @serialized
    def search_song_title_genre_year(self, query: str) -> List[Song]:
        """Songs whose title, genre or decimal year contains `query`,
        ignoring case.
        """
        needle = query.lower()
        matches = [
            song for song in self.stores.songs.values()
            if needle in song.title.lower()
            or needle in str(song.year).lower()
            or needle in song.genre.lower()
        ]
        if matches:
            return matches
        raise NotFoundError(f"no songs could be found with title:{query}")

    @serialized
    def update_song(self, payload) -> Song:
        payload = parse_payload(UpdateSongPayload, payload)
        song = self._song(payload.id)
        owner = self._owner(song.owner_id)
        if owner.auth_key != payload.auth_key:
            raise UnauthorizedError(
                f"auth key:{payload.auth_key} is invalid, only song owner can update")

        updated = song.model_copy(update=payload.model_dump(exclude={"auth_key", "id"}))
        if self.stores.songs.put(payload.id, updated) is None:
            raise InvalidPayloadError(
                f"song title:{payload.title} id: {payload.id} could not be updated")
        logger.info(f"song id:{payload.id} updated")
        return updated

    @serialized
    def delete_song(self, auth_key: str, id: int) -> Song:
        song = self._song(id)
        owner = self._owner(song.owner_id)
        if owner.auth_key != auth_key:
            raise InvalidPayloadError(
                f"auth key:{auth_key} is invalid, only song owner can delete")

        self.relationships.detach_song(id)
        if (removed := self.stores.songs.remove(id)) is None:
            raise InvalidPayloadError(f"song id:{id} could not be deleted")
        logger.info(f"song id:{id} deleted")
        return removed

    # Owners

    @serialized
    def create_owner(self, payload) -> Owner:
        payload = parse_payload(OwnerPayload, payload)
        id = self.ids.next_id()
        owner = Owner(id=id, **payload.model_dump())
        if self.stores.owners.put(id, owner) is not None:
            raise InvalidPayloadError(f"owner name:{payload.name} could not be created")
        logger.info(f"owner id:{id} created")
        return owner

    @serialized
    def get_owner_license_requests(self, owner_id: int) -> List[License]:
        if licenses := [l for l in self.stores.licenses.values() if l.owner_id == owner_id]:
            return licenses
        raise NotFoundError(f"no licenses could be found for owner id:{owner_id}")

    # Licenses

    @serialized
    def get_license(self, id: int) -> License:
        return self._license(id)

    @serialized
    def create_license_request(self, payload) -> License:
        payload = parse_payload(LicensePayload, payload)
        try:
            self._licensee(payload.licensee_id)
        except NotFoundError:
            raise NotFoundError(
                f"licensee id:{payload.licensee_id} could not be found, add them first") from None
        song = self._song(payload.song_id)

        id = self.ids.next_id()
        license = License(
            id=id,
            song_id=song.id,
            owner_id=song.owner_id,
            licensee_id=payload.licensee_id,
            approved=False,
            price=0,
            start_date=payload.start_date,
            end_date=payload.end_date,
        )
        if self.stores.licenses.put(id, license) is not None:
            raise InvalidPayloadError(f"license id:{id} could not be created")
        logger.info(f"license id:{id} requested by licensee id:{payload.licensee_id}")
        return license

    def _authorize(self, license: License, auth_key: str, action: str) -> Owner:
        owner = self._owner(license.owner_id)
        if owner.auth_key != auth_key:
            raise UnauthorizedError(
                f"auth key:{auth_key} is invalid, only song owner can {action}")
        return owner

    @serialized
    def approve_license(self, payload) -> License:
        payload = parse_payload(ApprovePayload, payload)
        license = self._license(payload.license_id)
        self._authorize(license, payload.auth_key, "approve")
        if license.approved:
            raise AlreadyApprovedError(
                f"license id:{payload.license_id} has already been approved")
        self._song(license.song_id)

        approved = license.model_copy(update={"approved": True, "price": payload.cost})
        self.relationships.attach_license(license.owner_id, license.licensee_id, license.id)
        if self.stores.licenses.put(license.id, approved) is None:
            raise InvalidPayloadError(f"license id:{license.id} could not be approved")
        logger.info(f"license id:{license.id} approved at {payload.cost}")
        return approved

    @serialized
    def revoke_license(self, payload) -> License:
        """Unlists an approved license from both parties. The negotiated
        price is kept on the record.
        """
        payload = parse_payload(ProtectedPayload, payload)
        license = self._license(payload.license_id)
        self._authorize(license, payload.auth_key, "revoke")

        revoked = license.model_copy(update={"approved": False})
        self.relationships.detach_license(license.owner_id, license.licensee_id, license.id)
        if self.stores.licenses.put(license.id, revoked) is None:
            raise InvalidPayloadError(f"license id:{license.id} could not be revoked")
        logger.info(f"license id:{license.id} revoked")
        return revoked

    # Licensees

    @serialized
    def get_licensee(self, id: int) -> Licensee:
        return self._licensee(id)

    @serialized
    def create_licensee(self, payload) -> Licensee:
        payload = parse_payload(LicenseePayload, payload)
        id = self.ids.next_id()
        licensee = Licensee(id=id, **payload.model_dump())
        if self.stores.licensees.put(id, licensee) is not None:
            raise InvalidPayloadError(f"licensee name:{payload.name} could not be created")
        logger.info(f"licensee id:{id} created")
        return licensee

    @serialized
    def get_licensee_licenses(self, licensee_id: int) -> List[License]:
        if licenses := [l for l in self.stores.licenses.values() if l.licensee_id == licensee_id]:
            return licenses
        raise NotFoundError(f"no licenses could be found for licensee id:{licensee_id}")
