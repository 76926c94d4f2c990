# This project was developed with assistance from AI tools.
"""Atomic persistence of a built application graph.

One call, one session, one transaction. Nodes are inserted in graph order and
flushed one at a time so each parent's primary key exists before its children
are built. Any failure rolls the whole graph back.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .graph_builder import EntityGraph, EntityNode

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Base class for failures while storing application data."""


class TransactionFailure(PersistenceError):
    """The save transaction was rolled back; nothing from the call was stored."""


class ApplicationWriter:
    """Writes ``EntityGraph``s through a caller-owned session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def write(self, graph: EntityGraph) -> int:
        """Insert every node and commit. Returns the LoanApplication id."""
        if not len(graph):
            raise PersistenceError("Cannot write an empty application graph")

        ids: list[int] = []
        async with self.session_factory() as session:
            try:
                for node in graph:
                    ids.append(await self._insert(session, node, ids))
                await session.commit()
            except Exception as exc:
                try:
                    await session.rollback()
                except SQLAlchemyError:
                    logger.exception("Rollback failed; connection is discarded with the session")
                logger.warning(
                    "Application save rolled back after %d of %d rows: %s",
                    len(ids),
                    len(graph),
                    exc,
                )
                raise TransactionFailure("Application transaction rolled back") from exc

        logger.info("Application %s saved (%d rows)", ids[0], len(ids))
        return ids[0]

    @staticmethod
    async def _insert(session: AsyncSession, node: EntityNode, ids: list[int]) -> int:
        values = dict(node.values)
        for column, ref in node.refs.items():
            values[column] = ids[ref.index]
        instance = node.model(**values)
        session.add(instance)
        await session.flush()
        return instance.id
