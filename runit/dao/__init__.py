# runit/dao/__init__.py
from .base import Store
from .sqlalchemy_store import SqlAlchemyStore

__all__ = ["SqlAlchemyStore", "Store"]
