from typing import Any, Generic, Iterable, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel

PydanticType = TypeVar("PydanticType", bound=BaseModel)


class BaseRepository(Generic[PydanticType]):
    """Generic in-memory repository over an ordered list of records.

    Records are immutable; updates replace the stored record in place and keep
    its position. Every record is expected to expose an ``id`` attribute.
    """

    def __init__(self, records: Optional[Iterable[PydanticType]] = None):
        self.records: List[PydanticType] = list(records or [])

    def get_by_id(self, id: UUID) -> Optional[PydanticType]:
        """Get a single record by ID."""
        return next((r for r in self.records if self._id_of(r) == id), None)

    def index_of(self, id: UUID) -> Optional[int]:
        return next(
            (i for i, r in enumerate(self.records) if self._id_of(r) == id), None
        )

    def create(self, pydantic_model: PydanticType) -> PydanticType:
        """Append a new record."""
        self.records.append(pydantic_model)
        return pydantic_model

    def insert_first(self, pydantic_model: PydanticType) -> PydanticType:
        """Insert a new record at the front."""
        self.records.insert(0, pydantic_model)
        return pydantic_model

    def update(self, pydantic_model: PydanticType) -> Optional[PydanticType]:
        """Replace an existing record, keeping its position."""
        index = self.index_of(self._id_of(pydantic_model))
        if index is None:
            return None
        self.records[index] = pydantic_model
        return pydantic_model

    def delete(self, id: UUID) -> bool:
        """Delete a record by ID."""
        index = self.index_of(id)
        if index is None:
            return False
        del self.records[index]
        return True

    def get_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> List[PydanticType]:
        """Get all records with pagination."""
        end = None if limit is None else offset + limit
        return list(self.records[offset:end])

    def replace_all(self, records: Iterable[PydanticType]) -> None:
        self.records = list(records)

    def __len__(self) -> int:
        return len(self.records)

    @staticmethod
    def _id_of(record: Any) -> UUID:
        return record.id
