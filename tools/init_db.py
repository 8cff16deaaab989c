import argparse
import asyncio
import importlib
import pkgutil

from sqlalchemy.exc import OperationalError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

import portfolio.entity
from portfolio.common.base import Base
from portfolio.common.database import Database
from portfolio.common.logger import get_logger

logger = get_logger()


def load_all_entities():
    """
    Automatically scan and import all modules under portfolio.entity.

    Importing these modules ensures that all SQLAlchemy model classes
    and their associated Table objects are registered into Base.metadata.

    This allows SQLAlchemy to correctly create all tables when
    Base.metadata.create_all() is executed.
    """
    package = portfolio.entity
    prefix = package.__name__ + "."  # e.g. "portfolio.entity."

    for _, name, _ in pkgutil.iter_modules(package.__path__, prefix):
        logger.info("Auto importing model: %s", name)
        importlib.import_module(name)


@retry(
    reraise=True,
    retry=retry_if_exception_type(OperationalError),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=3),
)
async def _create_schema(engine, reset: bool):
    # The database container may still be starting; connection failures are retried.
    async with engine.begin() as conn:
        if reset:
            logger.info("Dropping all portfolio tables...")
            await conn.run_sync(Base.metadata.drop_all)

        logger.info("Creating all tables from Base.metadata...")
        await conn.run_sync(Base.metadata.create_all)


async def init_database(database_url: str | None = None, reset: bool = False):
    """
    Create every portfolio table (and PostgreSQL enum type) that does not exist yet.

    Args:
        database_url (str | None): SQLAlchemy async URL; defaults to DATABASE_URL.
        reset (bool): Drop all portfolio tables first. Destroys existing data.
    """
    load_all_entities()

    db = Database(database_url, echo=False)
    try:
        await _create_schema(db.get_engine(), reset)
    finally:
        await db.close()

    logger.info("Database initialization complete.")


def main():
    parser = argparse.ArgumentParser(description="Create the portfolio database schema.")
    parser.add_argument("--database-url", default=None)
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop existing portfolio tables before creating them",
    )
    args = parser.parse_args()

    asyncio.run(init_database(args.database_url, reset=args.reset))


if __name__ == "__main__":
    main()
