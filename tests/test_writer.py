# This project was developed with assistance from AI tools.
"""Tests for the application writer, using a mocked session."""

import itertools
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from portal_api.services.graph_builder import EntityGraph, build_application_graph
from portal_api.services.writer import ApplicationWriter, PersistenceError, TransactionFailure
from portal_db.models import ApplicationBorrower, Borrower, Liability, LoanApplication

from .forms import JANE_DOE_FORM
from .personas import JANE_USER_ID


def _make_session_factory(first_id: int = 100):
    """Session factory whose session assigns sequential ids on add()."""
    added: list = []
    counter = itertools.count(first_id)

    def track_add(obj):
        obj.id = next(counter)
        added.append(obj)

    session = AsyncMock()
    session.add = MagicMock(side_effect=track_add)

    factory = MagicMock()
    factory.return_value.__aenter__.return_value = session
    factory.return_value.__aexit__.return_value = False
    return factory, session, added


async def test_write_returns_application_id():
    factory, session, _ = _make_session_factory(first_id=42)
    graph = build_application_graph(JANE_DOE_FORM, JANE_USER_ID)

    app_id = await ApplicationWriter(factory).write(graph)

    assert app_id == 42
    session.commit.assert_awaited_once()
    session.rollback.assert_not_awaited()


async def test_write_inserts_in_graph_order_with_resolved_parent_ids():
    factory, session, added = _make_session_factory(first_id=1)
    graph = build_application_graph(JANE_DOE_FORM, JANE_USER_ID)

    await ApplicationWriter(factory).write(graph)

    assert [type(obj) for obj in added] == [node.model for node in graph]
    app, borrower, link, liability = added[:4]
    assert isinstance(app, LoanApplication)
    assert isinstance(borrower, Borrower)
    assert isinstance(link, ApplicationBorrower)
    assert (link.application_id, link.borrower_id) == (app.id, borrower.id)
    assert isinstance(liability, Liability)
    assert liability.borrower_id == borrower.id
    assert session.flush.await_count == len(graph)


async def test_failure_rolls_back_and_raises_transaction_failure():
    factory, session, _ = _make_session_factory()
    cause = IntegrityError("INSERT", {}, Exception("constraint"))
    session.flush.side_effect = [None, None, None, cause]
    graph = build_application_graph(JANE_DOE_FORM, JANE_USER_ID)

    with pytest.raises(TransactionFailure) as exc_info:
        await ApplicationWriter(factory).write(graph)

    assert exc_info.value.__cause__ is cause
    session.rollback.assert_awaited_once()
    session.commit.assert_not_awaited()


async def test_commit_failure_rolls_back():
    factory, session, _ = _make_session_factory()
    session.commit.side_effect = RuntimeError("connection lost")
    graph = build_application_graph(JANE_DOE_FORM, JANE_USER_ID)

    with pytest.raises(TransactionFailure):
        await ApplicationWriter(factory).write(graph)

    session.rollback.assert_awaited_once()


async def test_failed_rollback_still_raises_transaction_failure(caplog):
    """A dropped connection breaks the rollback too; callers still get TransactionFailure."""
    factory, session, _ = _make_session_factory()
    cause = OperationalError("INSERT", {}, Exception("server closed the connection"))
    session.flush.side_effect = cause
    session.rollback.side_effect = OperationalError("ROLLBACK", {}, Exception("no connection"))
    graph = build_application_graph(JANE_DOE_FORM, JANE_USER_ID)

    with pytest.raises(TransactionFailure) as exc_info:
        await ApplicationWriter(factory).write(graph)

    assert exc_info.value.__cause__ is cause
    session.rollback.assert_awaited_once()
    assert "Rollback failed" in caplog.text


def test_transaction_failure_is_a_persistence_error():
    assert issubclass(TransactionFailure, PersistenceError)


async def test_empty_graph_is_rejected():
    factory, _, _ = _make_session_factory()

    with pytest.raises(PersistenceError, match="empty"):
        await ApplicationWriter(factory).write(EntityGraph())

    factory.assert_not_called()
