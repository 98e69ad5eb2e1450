"""Fixtures for the SQL repository tests.

Every test runs against SQLite. When ``SCOUTS_TEST_ENABLE_POSTGRES`` is set
the tests run a second time against a PostgreSQL started with Testcontainers.
"""

import pytest
from sqlmodel.pool import StaticPool

from scouts.core.database import (
    Base,
    SqlRepoBundle,
    build_sql_repos,
    create_all,
    create_engine,
    create_sessionmaker,
)
from scouts.core.models.domain import Group


@pytest.fixture(scope="session")
def postgres_container(test_config):
    """Start a PostgreSQL container for the test session."""
    if not test_config.enable_postgres_tests:
        pytest.skip("PostgreSQL tests are disabled (set SCOUTS_TEST_ENABLE_POSTGRES=true)")
    from testcontainers.postgres import PostgresContainer

    container = PostgresContainer("postgres:16-alpine")
    container.start()
    yield container
    container.stop()


@pytest.fixture(params=["sqlite", "postgres"])
async def db_engine(request):
    """Create a database engine with an empty schema."""
    if request.param == "sqlite":
        engine = create_engine(
            "sqlite+aiosqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        container = request.getfixturevalue("postgres_container")
        engine = create_engine(container.get_connection_url())
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    await create_all(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def repos(db_engine) -> SqlRepoBundle:
    """Create the repository bundle on the test database."""
    return build_sql_repos(session_factory=create_sessionmaker(db_engine))


@pytest.fixture
async def wolves(repos: SqlRepoBundle) -> Group:
    return await repos.groups.create(Group(name="Wolves"))


@pytest.fixture
async def rovers(repos: SqlRepoBundle) -> Group:
    return await repos.groups.create(Group(name="Rovers"))
