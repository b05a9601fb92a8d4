"""
Generic row operations shared by the model-specific CRUD classes.

None of these methods commit: the calling service owns the transaction.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from mentorhub.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """Create, fetch and delete rows of one mapped class."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values) -> ModelT:
        """
        Add a row and flush it.

        The flush populates generated keys and defaults and surfaces
        unique-index violations as IntegrityError.
        """
        row = self.model(**values)
        session.add(row)
        await session.flush()
        return row

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        return await session.get(self.model, id)

    async def delete_by_id(self, session: AsyncSession, id: UUID) -> bool:
        """Delete by primary key; False when no row matched."""
        result = await session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0
