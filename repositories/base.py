"""
Base repository for the data access layer.
Keeps SQL out of the services; every repository works on the request's Session.
"""

from abc import ABC
from typing import Generic, TypeVar, Optional, List, Type

from sqlalchemy import select
from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Common CRUD operations keyed by the model's integer primary key.

    Writes only flush; the calling service decides when to commit so that a
    multi-step operation stays in one transaction.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Get entity by primary key, or None"""
        return self.db.get(self.model, entity_id)

    def get_by_ids(self, entity_ids: List[int]) -> List[ModelType]:
        """Get entities whose primary key is in entity_ids"""
        if not entity_ids:
            return []
        pk = self.model.__mapper__.primary_key[0]
        return list(self.db.scalars(select(self.model).where(pk.in_(entity_ids))))

    def add(self, entity: ModelType) -> ModelType:
        """Stage a new entity and flush so its id is populated"""
        self.db.add(entity)
        self.db.flush()
        return entity

    def remove(self, entity: ModelType) -> None:
        self.db.delete(entity)
        self.db.flush()

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None
