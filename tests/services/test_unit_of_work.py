from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from firegear.core.exceptions import InfrastructureError, NotFoundError
from firegear.infra.unit_of_work import SqlAlchemyUnitOfWork


class FakeSession:
    def __init__(self, *, fail_commit: bool = False):
        self.fail_commit = fail_commit
        self.committed = False
        self.rolled_back = False
        self.closed = False

    async def commit(self) -> None:
        if self.fail_commit:
            raise OperationalError("COMMIT", {}, Exception("connection reset"))
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_commits_on_success():
    session = FakeSession()
    async with SqlAlchemyUnitOfWork(lambda: session):
        pass
    assert session.committed and session.closed
    assert not session.rolled_back


@pytest.mark.asyncio
async def test_domain_errors_roll_back_and_propagate():
    session = FakeSession()
    with pytest.raises(NotFoundError):
        async with SqlAlchemyUnitOfWork(lambda: session):
            raise NotFoundError("Equipment not found")
    assert session.rolled_back and not session.committed


@pytest.mark.asyncio
async def test_database_errors_become_infrastructure_errors():
    session = FakeSession()
    with pytest.raises(InfrastructureError):
        async with SqlAlchemyUnitOfWork(lambda: session):
            raise SQLAlchemyError("db error")
    assert session.rolled_back and session.closed


@pytest.mark.asyncio
async def test_failed_commit_becomes_infrastructure_error():
    session = FakeSession(fail_commit=True)
    with pytest.raises(InfrastructureError):
        async with SqlAlchemyUnitOfWork(lambda: session):
            pass
    assert session.closed
