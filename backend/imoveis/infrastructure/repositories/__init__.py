"""Repositórios de leitura."""
from .interface import PropertyRepository, DISTINCT_FIELDS
from .sqlalchemy_repository import SqlAlchemyPropertyRepository

__all__ = [
    "PropertyRepository",
    "DISTINCT_FIELDS",
    "SqlAlchemyPropertyRepository",
]
