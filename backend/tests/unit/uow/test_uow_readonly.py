"""
Unit tests for SQLAlchemyReadOnlyUnitOfWork.

The write guards are plain SQLAlchemy event hooks, so they are exercised on
SQLite too; only ``SET TRANSACTION READ ONLY`` is dialect-specific.
"""

import pytest
from catalog.models.user import User
from catalog.uow import (
    SQLAlchemyReadOnlyUnitOfWork as ROuow,
)
from catalog.uow import (
    SQLAlchemyUnitOfWork as RWuow,
)
from sqlalchemy import text

from tests.factories.user import UserFactory


class TestSQLAlchemyReadOnlyUnitOfWork:
    def test_blocks_orm_flush_writes(self, app, db, session):
        """
        Ensure that attempting to flush ORM changes inside the RO UoW raises.
        """
        with ROuow() as uow, pytest.raises(RuntimeError, match="ORM flush blocked"):
            user = UserFactory.build()  # not persisted
            uow.session.add(user)
            uow.session.flush()

    def test_blocks_core_dml(self, app, db, session):
        """
        Ensure that raw SQL DML is blocked inside the RO UoW.
        """
        email = UserFactory.build().email
        with ROuow() as uow, pytest.raises(RuntimeError, match="SQL statement blocked"):
            uow.session.execute(text("INSERT INTO users (email) VALUES (:email)"), {"email": email})

    def test_allows_reads(self, app, db, session):
        """
        Read operations should work normally within RO UoW.
        """
        with RWuow() as uow:
            uow.session.add(UserFactory.build())

        with ROuow() as uow:
            count = uow.session.query(User).count()
            assert count >= 1

    def test_disallows_commit(self, app, db, session):
        """
        RO UoW must reject commit() by design.
        """
        with ROuow() as uow, pytest.raises(RuntimeError, match="does not allow commit"):
            uow.commit()

    def test_guards_are_removed_on_exit(self, app, db, session):
        with ROuow():
            pass

        with RWuow() as uow:
            uow.users.add(UserFactory.build())
