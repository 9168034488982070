#!/usr/bin/env python

"""
    Reverse reference maintenance for Songlicense.

    Owners keep the ids of their songs and of their approved licenses,
    licensees keep the ids of their approved licenses. The authoritative
    facts live on Song.owner_id and on License.owner_id/licensee_id; the
    lists here are a denormalization the storage layer cannot enforce.

    Every operation is a sequence of independent store writes. When a
    step fails the steps before it stay committed and the error goes
    straight back to the calling command.

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from songlicense.core.exceptions import NotFoundError
from songlicense.core.stores import Stores

logger = logging.getLogger(__name__)


def _remove_first(ids, value):
    """Removes the first occurrence of `value` from `ids` in place.
    Returns False when it is absent.
    """
    for i, id in enumerate(ids):
        if id == value:
            del ids[i]
            return True
    return False


class RelationshipMaintainer:

    def __init__(self, stores: Stores):
        self.stores = stores

    def _owner(self, owner_id):
        if owner := self.stores.owners.get(owner_id):
            return owner
        raise NotFoundError(f"owner id:{owner_id} could not be found")

    def _licensee(self, licensee_id):
        if licensee := self.stores.licensees.get(licensee_id):
            return licensee
        raise NotFoundError(f"licensee id:{licensee_id} could not be found")

    def _song(self, song_id):
        if song := self.stores.songs.get(song_id):
            return song
        raise NotFoundError(f"song id:{song_id} could not be found")

    def attach_song(self, owner_id: int, song_id: int):
        owner = self._owner(owner_id)
        owner.song_ids.append(song_id)
        self.stores.owners.put(owner_id, owner)

    def add_license_to_owner(self, owner_id: int, license_id: int):
        owner = self._owner(owner_id)
        owner.license_ids.append(license_id)
        self.stores.owners.put(owner_id, owner)

    def add_license_to_licensee(self, licensee_id: int, license_id: int):
        licensee = self._licensee(licensee_id)
        licensee.licenses.append(license_id)
        self.stores.licensees.put(licensee_id, licensee)

    def remove_license_from_owner(self, owner_id: int, license_id: int):
        owner = self._owner(owner_id)
        if not _remove_first(owner.license_ids, license_id):
            raise NotFoundError(
                f"license id:{license_id} could not be found in owner id:{owner_id}")
        self.stores.owners.put(owner_id, owner)

    def remove_license_from_licensee(self, licensee_id: int, license_id: int):
        licensee = self._licensee(licensee_id)
        if not _remove_first(licensee.licenses, license_id):
            raise NotFoundError(
                f"license id:{license_id} could not be found in licensee id:{licensee_id}")
        self.stores.licensees.put(licensee_id, licensee)

    def attach_license(self, owner_id: int, licensee_id: int, license_id: int):
        """Lists an approved license on both parties, owner first."""
        self.add_license_to_owner(owner_id, license_id)
        try:
            self.add_license_to_licensee(licensee_id, license_id)
        except Exception:
            logger.warning(
                f"license id:{license_id} attached to owner id:{owner_id} "
                f"but not to licensee id:{licensee_id}")
            raise

    def detach_license(self, owner_id: int, licensee_id: int, license_id: int):
        """Unlists a license from both parties, owner first. Both lists must
        hold the id, which is only true while the license is approved.
        """
        self.remove_license_from_owner(owner_id, license_id)
        try:
            self.remove_license_from_licensee(licensee_id, license_id)
        except Exception:
            logger.warning(
                f"license id:{license_id} detached from owner id:{owner_id} "
                f"but not from licensee id:{licensee_id}")
            raise

    def detach_song(self, song_id: int):
        """Unlists a song from its owner, then unlists every approved license
        on that song from both parties and marks it unapproved.

        Requests that were never approved are not on any list and are left
        as they are. License records are kept either way.
        """
        song = self._song(song_id)
        owner = self._owner(song.owner_id)
        if not _remove_first(owner.song_ids, song_id):
            raise NotFoundError(
                f"song id:{song_id} could not be found in owner id:{owner.id}")
        self.stores.owners.put(owner.id, owner)

        # full scan, there is no song -> licenses index
        for license_id, license in self.stores.licenses.iterate():
            if license.song_id != song_id or not license.approved:
                continue
            self.detach_license(license.owner_id, license.licensee_id, license_id)
            license.approved = False
            self.stores.licenses.put(license_id, license)
            logger.info(f"license id:{license_id} revoked by deletion of song id:{song_id}")
