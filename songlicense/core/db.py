import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import scoped_session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from songlicense.configs import DB_URI, DEBUG

logger = logging.getLogger(__name__)
# SQLite connections are shared with the worker threads uvicorn hands requests to
engine_kwargs = {'echo': DEBUG}
if DB_URI.startswith('sqlite'):
    engine_kwargs['connect_args'] = {'check_same_thread': False}
    if ':memory:' in DB_URI:
        engine_kwargs['poolclass'] = StaticPool
engine = create_engine(DB_URI, **engine_kwargs)
session = scoped_session(sessionmaker(
    bind=engine, autocommit=False, autoflush=False))

class SonglicenseBase:
    @classmethod
    def scan(cls, db):
        """Every row of the table in ascending id order."""
        return db.query(cls).order_by(cls.id).all()

Base = declarative_base(cls=SonglicenseBase)

def init(engine_to_init=engine):
    # models register their tables on Base at import time
    from songlicense.core import models  # noqa: F401
    Base.metadata.create_all(bind=engine_to_init)
    logger.info(f"Database tables ready on {engine_to_init.url}")
    return session
