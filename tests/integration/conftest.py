import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from claimcheck.config.settings import Settings
from claimcheck.database.connection import build_conninfo, close_pool, get_connection, init_pool

CREATE_CLAIM_INTAKE_RECORDS = """
CREATE TABLE IF NOT EXISTS claim_intake_records (
    id BIGSERIAL PRIMARY KEY,
    provider TEXT NOT NULL,
    status TEXT NOT NULL,
    requested_amount NUMERIC(14, 2) NOT NULL,
    currency VARCHAR(3) NOT NULL,
    observations TEXT NOT NULL,
    created_at TIMESTAMPTZ NOT NULL
)
"""


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "claimcheck_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        with psycopg.connect(build_conninfo(test_settings), connect_timeout=3) as probe:
            probe.execute(CREATE_CLAIM_INTAKE_RECORDS)
        init_pool(test_settings)
    except Exception as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run these tests")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup() -> Generator[list[int], None, None]:
    record_ids: list[int] = []
    yield record_ids
    if not record_ids:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM claim_intake_records WHERE id = ANY(%s)", (record_ids,))
        conn.commit()
