# admin_api/database.py

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from admin_api.core.config import LocalDatabaseConfig, RemoteDatabaseConfig
from admin_api.core.exceptions import DataAccessError

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Thin wrapper around a pooled AsyncEngine.

    Each call to execute() checks out one connection, runs one statement in
    its own transaction and hands the connection back to the pool, whether
    the statement succeeded or not.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_config(
        cls,
        config: Union[RemoteDatabaseConfig, LocalDatabaseConfig],
        **engine_options: Any,
    ) -> "Database":
        engine = create_async_engine(
            config.sqlalchemy_url(),
            connect_args=config.connect_args(),
            pool_pre_ping=True,
            **engine_options,
        )
        logger.info(f"Using {config.describe()}")
        return cls(engine)

    async def execute(
        self,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Run a parameterized statement and return its rows as dicts.

        Statements that return nothing give an empty list.

        Raises:
            DataAccessError: on any driver, pool or connection failure
        """
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(sql), dict(params or {}))
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings().all()]
        except (SQLAlchemyError, OSError) as e:
            raise DataAccessError(str(e)) from e

    async def dispose(self) -> None:
        await self.engine.dispose()
