# backend/tests/factories/base.py

from factory.alchemy import SQLAlchemyModelFactory

_factory_session = {"session": None}


def bind_factory_session(session):
    """Point every factory at the session of the running test."""
    _factory_session["session"] = session


def get_factory_session():
    session = _factory_session["session"]
    if session is None:
        raise RuntimeError("Factories need the db_session fixture")
    return session


class BaseFactory(SQLAlchemyModelFactory):
    """Base factory with session management for all test factories."""

    class Meta:
        abstract = True
        sqlalchemy_session_factory = get_factory_session
        sqlalchemy_session_persistence = "commit"
