"""
Base Repository - generic persistence operations shared by every entity repository
"""
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from hrm.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """CRUD over a single mapped model.

    Repositories only flush; committing is left to the calling service so
    that one business operation maps to one transaction.
    """

    def __init__(self, model: Type[ModelT]):
        self.model = model
        self.pk = model.__mapper__.primary_key[0]

    def get_by_id(self, db: Session, obj_id: int) -> Optional[ModelT]:
        return db.query(self.model).filter(self.pk == obj_id).first()

    def get_all(self, db: Session) -> List[ModelT]:
        return db.query(self.model).order_by(self.pk).all()

    def exists(self, db: Session, obj_id: int) -> bool:
        return db.query(self.pk).filter(self.pk == obj_id).first() is not None

    def add(self, db: Session, obj: ModelT) -> ModelT:
        db.add(obj)
        db.flush()
        return obj

    def delete(self, db: Session, obj: ModelT) -> None:
        db.delete(obj)
        db.flush()
