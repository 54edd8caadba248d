"""Tests for session_scope (villa_kernel/db/engine.py)."""

import pytest
from sqlalchemy import func, select

from tests.conftest import TEST_COMPANY_ID
from villa_kernel.db.engine import (
    create_tables,
    drop_tables,
    init_engine_from_url,
    reset_engine,
    session_scope,
)
from villa_kernel.models import SupplierModel


@pytest.fixture
def database():
    init_engine_from_url("sqlite://")
    create_tables()
    yield
    try:
        drop_tables()
    finally:
        reset_engine()


def _supplier_count() -> int:
    with session_scope() as session:
        return session.scalar(select(func.count()).select_from(SupplierModel))


class TestSessionScope:
    def test_commits_on_normal_exit(self, database):
        with session_scope() as session:
            session.add(SupplierModel(company_id=TEST_COMPANY_ID, name="Acme Cement"))

        assert _supplier_count() == 1

    def test_rolls_back_and_reraises(self, database, captured_logs):
        with pytest.raises(RuntimeError):
            with session_scope() as session:
                session.add(SupplierModel(company_id=TEST_COMPANY_ID, name="Acme Cement"))
                session.flush()
                raise RuntimeError("report failed")

        assert _supplier_count() == 0
        assert any(r["message"] == "session_rolled_back" for r in captured_logs())

    def test_requires_initialized_engine(self):
        reset_engine()

        with pytest.raises(RuntimeError):
            with session_scope():
                pass
