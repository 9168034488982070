#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
    tests.test_relationships
    ~~~~~~~~~~~~~~~~~~~~~~~~

    This module tests the upkeep of the owner and licensee reference lists.

    :copyright: (c) 2015 by Authors.
    :license: see LICENSE for more details.
"""

import os
os.environ["TESTING"] = "true"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from songlicense.core.db import Base
from songlicense.core import models  # noqa: F401
from songlicense.core.exceptions import NotFoundError
from songlicense.core.relationships import RelationshipMaintainer
from songlicense.core.stores import Stores
from songlicense.schemas import Song, Owner, License, Licensee

@pytest.fixture
def stores():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()
    try:
        yield Stores(session)
    finally:
        session.close()
        Base.metadata.drop_all(engine)

@pytest.fixture
def maintainer(stores):
    return RelationshipMaintainer(stores)

@pytest.fixture
def catalog(stores):
    """Owner 1 with song 2, licensee 3, approved license 4 and pending license 5."""
    stores.owners.put(1, Owner(id=1, name="Ann", email="ann@example.com", auth_key="k1",
                               song_ids=[2], license_ids=[4]))
    stores.songs.put(2, Song(id=2, title="Blue in Green", artist="Miles Davis", owner_id=1,
                             year=1959, genre="Jazz", price=250))
    stores.licensees.put(3, Licensee(id=3, name="Studio", email="s@example.com", licenses=[4]))
    stores.licenses.put(4, License(id=4, song_id=2, owner_id=1, licensee_id=3, approved=True,
                                   price=100, start_date="2026-01-01", end_date="2026-12-31"))
    stores.licenses.put(5, License(id=5, song_id=2, owner_id=1, licensee_id=3,
                                   start_date="2026-01-01", end_date="2026-06-30"))
    return stores

def test_attach_song_appends_to_owner(maintainer, catalog):
    maintainer.attach_song(1, 9)
    assert catalog.owners.get(1).song_ids == [2, 9]

def test_attach_song_to_missing_owner(maintainer, catalog):
    with pytest.raises(NotFoundError) as excinfo:
        maintainer.attach_song(99, 9)
    assert "owner id:99 could not be found" in str(excinfo.value)

def test_attach_license_lists_on_both_parties(maintainer, catalog):
    maintainer.attach_license(1, 3, 5)
    assert catalog.owners.get(1).license_ids == [4, 5]
    assert catalog.licensees.get(3).licenses == [4, 5]

def test_attach_license_is_not_rolled_back_when_licensee_is_missing(maintainer, catalog):
    with pytest.raises(NotFoundError):
        maintainer.attach_license(1, 99, 5)
    # the owner step was already written
    assert catalog.owners.get(1).license_ids == [4, 5]

def test_attach_license_to_missing_owner_touches_nothing(maintainer, catalog):
    with pytest.raises(NotFoundError):
        maintainer.attach_license(99, 3, 5)
    assert catalog.licensees.get(3).licenses == [4]

def test_detach_license_removes_from_both_lists(maintainer, catalog):
    maintainer.detach_license(1, 3, 4)
    assert catalog.owners.get(1).license_ids == []
    assert catalog.licensees.get(3).licenses == []

def test_detach_license_removes_only_first_occurrence(maintainer, catalog):
    maintainer.attach_license(1, 3, 4)
    maintainer.detach_license(1, 3, 4)
    assert catalog.owners.get(1).license_ids == [4]
    assert catalog.licensees.get(3).licenses == [4]

def test_detach_unlisted_license(maintainer, catalog):
    with pytest.raises(NotFoundError) as excinfo:
        maintainer.detach_license(1, 3, 5)
    assert "license id:5 could not be found in owner id:1" in str(excinfo.value)
    assert catalog.licensees.get(3).licenses == [4]

def test_detach_song_cascades_to_approved_licenses(maintainer, catalog):
    maintainer.detach_song(2)

    assert catalog.owners.get(1).song_ids == []
    assert catalog.owners.get(1).license_ids == []
    assert catalog.licensees.get(3).licenses == []
    assert catalog.licenses.get(4).approved is False
    assert catalog.licenses.get(4).price == 100
    # pending requests were never listed and are kept as they are
    assert catalog.licenses.get(5).approved is False
    # the song record itself is removed by the caller
    assert catalog.songs.get(2) is not None

def test_detach_song_leaves_other_songs_licenses_alone(maintainer, catalog):
    catalog.songs.put(6, Song(id=6, title="So What", artist="Miles Davis", owner_id=1,
                              year=1959, genre="Jazz", price=300))
    catalog.owners.put(1, catalog.owners.get(1).model_copy(
        update={"song_ids": [2, 6], "license_ids": [4, 7]}))
    catalog.licensees.put(3, catalog.licensees.get(3).model_copy(update={"licenses": [4, 7]}))
    catalog.licenses.put(7, License(id=7, song_id=6, owner_id=1, licensee_id=3, approved=True,
                                    price=50, start_date="2026-01-01", end_date="2026-12-31"))

    maintainer.detach_song(2)

    assert catalog.owners.get(1).song_ids == [6]
    assert catalog.owners.get(1).license_ids == [7]
    assert catalog.licensees.get(3).licenses == [7]
    assert catalog.licenses.get(7).approved is True

def test_detach_missing_song(maintainer, catalog):
    with pytest.raises(NotFoundError):
        maintainer.detach_song(99)
