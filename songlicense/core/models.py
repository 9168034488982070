#!/usr/bin/env python

"""
    Storage tables for Songlicense,
    one key-value table per entity kind plus the id counter.

    Rows are keyed by the id handed out by the shared allocator, so no
    table autoincrements and none declares foreign keys. The reverse
    reference lists kept on owners and licensees are plain JSON arrays;
    keeping them consistent is the job of `songlicense.core.relationships`.

    :copyright: (c) 2015 by AUTHORS
    :license: see LICENSE for more details
"""

from sqlalchemy import Column, String, Boolean, BigInteger, Integer, JSON
from songlicense.core.db import Base


class Song(Base):
    __tablename__ = 'songs'

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    title = Column(String, nullable=False)
    artist = Column(String, nullable=False, default='')
    owner_id = Column(BigInteger, nullable=False)
    year = Column(Integer, nullable=False, default=0)
    genre = Column(String, nullable=False, default='')
    price = Column(BigInteger, nullable=False, default=0)


class Owner(Base):
    __tablename__ = 'owners'

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, default='')
    auth_key = Column(String, nullable=False)
    song_ids = Column(JSON, nullable=False, default=list)
    license_ids = Column(JSON, nullable=False, default=list)


class License(Base):
    __tablename__ = 'licenses'

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    song_id = Column(BigInteger, nullable=False)
    owner_id = Column(BigInteger, nullable=False)
    licensee_id = Column(BigInteger, nullable=False)
    approved = Column(Boolean, default=False, nullable=False)
    price = Column(BigInteger, nullable=False, default=0)
    start_date = Column(String, nullable=False, default='')
    end_date = Column(String, nullable=False, default='')


class Licensee(Base):
    __tablename__ = 'licensees'

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, default='')
    licenses = Column(JSON, nullable=False, default=list)


class IdCounter(Base):
    __tablename__ = 'id_counter'

    id = Column(Integer, primary_key=True, autoincrement=False)
    value = Column(BigInteger, nullable=False, default=0)
