"""PostgreSQL implementation of Counter repository."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.error import StorageError
from board.domain.model import Counter
from board.domain.repository import CounterRepository
from board.domain.value import CounterName
from board.persistence.mappers import row_to_counter
from board.persistence.tables import counters_table


class PostgresCounterRepository(CounterRepository):
    """PostgreSQL implementation of CounterRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_name(self, name: CounterName) -> Optional[Counter]:
        """Find a counter by name."""
        stmt = select(counters_table).where(counters_table.c.name == name.root)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Counter lookup failed", name=name.root, error=str(e))
            raise StorageError("find_by_name") from e
        row = result.fetchone()
        return row_to_counter(row._asdict()) if row else None

    async def increment(self, name: CounterName) -> Counter:
        """Upsert-and-increment in a single statement."""
        stmt = (
            insert(counters_table)
            .values(name=name.root, value=1)
            .on_conflict_do_update(
                index_elements=[counters_table.c.name],
                set_={"value": counters_table.c.value + 1},
            )
            .returning(counters_table.c.name, counters_table.c.value)
        )
        try:
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        except SQLAlchemyError as e:
            logfire.error("Counter increment failed", name=name.root, error=str(e))
            raise StorageError("increment") from e
        return row_to_counter(row._asdict())
