#!/usr/bin/env python

"""
    Entity stores and the shared id allocator for Songlicense.

    Each store is an ordered key-value table over one SQLAlchemy model.
    Values go in and come out as pydantic schema instances, so anything
    read from a store is a detached snapshot of the row. Every write is
    committed on its own; a command made of several writes is therefore
    not atomic.

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""

import logging
from typing import Generic, List, Optional, Tuple, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from songlicense.core import models
from songlicense.core.exceptions import InvalidPayloadError
from songlicense.schemas import Song, Owner, License, Licensee
from songlicense.schemas.fields import MAX_ID

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


class EntityStore(Generic[E]):

    def __init__(self, db, model, schema: Type[E]):
        self.db = db
        self.model = model
        self.schema = schema

    def _row(self, id: int):
        if not 0 <= id <= MAX_ID:
            return None
        return self.db.get(self.model, id)

    def _commit(self, action: str, id: int):
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{self.model.__tablename__} id:{id} could not be {action}: {e}")
            raise InvalidPayloadError(
                f"{self.model.__tablename__} id:{id} could not be {action}")

    def get(self, id: int) -> Optional[E]:
        row = self._row(id)
        return self.schema.model_validate(row) if row is not None else None

    def put(self, id: int, entity: E) -> Optional[E]:
        """Stores `entity` under `id` and returns the value it replaced,
        or None when the key was new.
        """
        previous = self.get(id)
        values = entity.model_dump()
        values["id"] = id
        self.db.merge(self.model(**values))
        self._commit("stored", id)
        return previous

    def remove(self, id: int) -> Optional[E]:
        row = self._row(id)
        if row is None:
            return None
        previous = self.schema.model_validate(row)
        self.db.delete(row)
        self._commit("removed", id)
        return previous

    def iterate(self) -> List[Tuple[int, E]]:
        """A fresh snapshot of every (id, entity) pair in ascending id order."""
        return [(row.id, self.schema.model_validate(row))
                for row in self.model.scan(self.db)]

    def values(self) -> List[E]:
        return [entity for _, entity in self.iterate()]


class IdAllocator:
    """Single counter shared by every entity kind. Issues the stored value
    and persists its successor, so the first id handed out is 0.
    """

    COUNTER_KEY = 0

    def __init__(self, db):
        self.db = db

    def next_id(self) -> int:
        counter = self.db.get(models.IdCounter, self.COUNTER_KEY)
        if counter is None:
            counter = models.IdCounter(id=self.COUNTER_KEY, value=0)
            self.db.add(counter)
        issued = counter.value
        if issued >= MAX_ID:
            raise RuntimeError("Cannot increment Ids: counter exhausted")
        counter.value = issued + 1
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return issued


class Stores:
    """The four entity tables of one database session."""

    def __init__(self, db):
        self.songs: EntityStore[Song] = EntityStore(db, models.Song, Song)
        self.owners: EntityStore[Owner] = EntityStore(db, models.Owner, Owner)
        self.licenses: EntityStore[License] = EntityStore(db, models.License, License)
        self.licensees: EntityStore[Licensee] = EntityStore(db, models.Licensee, Licensee)
