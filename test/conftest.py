from __future__ import annotations

import os
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, Optional

import httpx
import pytest
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load dotenv files early so fixtures can read test configuration via os.getenv
try:  # pragma: no cover
    from dotenv import load_dotenv

    TEST_ROOT = Path(__file__).resolve().parent
    load_dotenv(TEST_ROOT / ".env", override=False)
except ImportError:
    pass

# The application builds its engine from settings at import time.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SCOUTS_LOG_LEVEL", "DEBUG")

from scouts.core.models.domain import Contact, Event, Group, Registration, RegistrationStatus, Scout  # noqa: E402


class TestSettings(BaseSettings):
    """
    Test environment settings.

    Bound from environment variables and ``test/.env``.
    """

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite+aiosqlite:///:memory:",
        alias="SCOUTS_TEST_DATABASE_URL",
        description="Database URL for repository tests (defaults to in-memory SQLite)",
    )
    enable_postgres_tests: bool = Field(
        default=False,
        alias="SCOUTS_TEST_ENABLE_POSTGRES",
        description="Run the PostgreSQL tests (requires Docker for Testcontainers)",
    )


@pytest.fixture(scope="session")
def test_config() -> TestSettings:
    """Fixture providing test configuration from the Pydantic settings model."""
    return TestSettings()


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://localhost",
        "http://127.0.0.1",
        "http://test",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_async = httpx._client.AsyncClient.request

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if any(url_str.startswith(p) for p in allowed_prefixes):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


# =====================================================================
# Domain object builders
# =====================================================================


@pytest.fixture
def make_contact() -> Callable[..., Contact]:
    def _make(**overrides) -> Contact:
        values = {
            "name": "Anna Muster",
            "phone_number": "+49 170 1234567",
            "email": "anna@example.org",
            "relationship": "mother",
        }
        values.update(overrides)
        return Contact(**values)

    return _make


@pytest.fixture
def make_scout(make_contact) -> Callable[..., Scout]:
    def _make(groups: Optional[list[Group]] = None, **overrides) -> Scout:
        values = {
            "name": "Max Muster",
            "birth_date": date(2012, 5, 17),
            "address": "Hauptstr. 1, 12345 Musterstadt",
            "phone_number": "+49 30 123456",
            "health_insurance": "AOK",
            "allergy_info": "peanuts",
            "vaccination_info": "tetanus 2021",
            "contacts": [make_contact()],
            "last_updated": date(2025, 1, 15),
            "groups": groups or [],
        }
        values.update(overrides)
        return Scout(**values)

    return _make


@pytest.fixture
def make_event() -> Callable[..., Event]:
    def _make(groups: Optional[list[Group]] = None, **overrides) -> Event:
        values = {
            "name": "Summer Camp",
            "start_date": date(2025, 7, 1),
            "end_date": date(2025, 7, 14),
            "meeting_point": "Train station",
            "location": "Lake Camp",
            "cost": "120 EUR",
            "additional_info": "Bring a sleeping bag",
            "participating_groups": groups or [],
        }
        values.update(overrides)
        return Event(**values)

    return _make


@pytest.fixture
def make_registration() -> Callable[..., Registration]:
    def _make(scout: Scout, event: Event, **overrides) -> Registration:
        values = {
            "scout": scout,
            "event": event,
            "note": "vegetarian",
            "status": RegistrationStatus.PENDING,
            "registration_date": datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc),
            "account_id": "account-1",
        }
        values.update(overrides)
        return Registration(**values)

    return _make
