from datetime import datetime

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.entity.personal_info_entity import (
    PERSONAL_INFO_SINGLETON_KEY,
    PersonalInfoEntity,
)

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class PersonalInfoRepository:
    """
    Repository for the personal info singleton (zero or one row).
    """

    async def get_personal_info(
        self, session: AsyncSession
    ) -> PersonalInfoEntity | None:
        """
        Retrieve the personal info record.

        Args:
            session (AsyncSession): The active async database session.

        Returns:
            PersonalInfoEntity | None: The single record, or None if it has
            never been written.
        """
        result = await session.execute(
            select(PersonalInfoEntity).where(
                PersonalInfoEntity.singleton_key == PERSONAL_INFO_SINGLETON_KEY
            )
        )

        return result.scalars().one_or_none()

    async def upsert_personal_info(
        self, session: AsyncSession, values: dict, timestamp: datetime
    ) -> PersonalInfoEntity:
        """
        Insert the personal info record, or overwrite it in place if it exists.

        The write is a single INSERT ... ON CONFLICT (singleton_key) DO UPDATE
        statement, so two concurrent callers can never both insert: the
        loser of the race hits the unique constraint and turns into an update.
        On update, `id` and `created_at` keep their stored values.

        Args:
            session (AsyncSession): The active async database session.
            values (dict): Business fields to write (name, email, ...).
            timestamp (datetime): Value for `updated_at`, and for `created_at`
                when the row is inserted.

        Returns:
            PersonalInfoEntity: The stored record after the write.
        """
        insert = self._insert_for(session)

        stmt = insert(PersonalInfoEntity).values(
            singleton_key=PERSONAL_INFO_SINGLETON_KEY,
            created_at=timestamp,
            updated_at=timestamp,
            **values,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[PersonalInfoEntity.singleton_key],
            set_={**values, "updated_at": timestamp},
        )

        result = await session.execute(
            stmt.returning(PersonalInfoEntity),
            execution_options={"populate_existing": True},
        )

        return result.scalars().one()

    def _insert_for(self, session: AsyncSession):
        dialect_name = session.get_bind().dialect.name
        try:
            return _INSERT_BY_DIALECT[dialect_name]
        except KeyError:
            raise RuntimeError(
                f"Personal info upsert is not supported on '{dialect_name}'"
            ) from None
