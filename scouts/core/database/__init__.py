"""
Centralized database layer.

- ``entities``: SQLModel table definitions
- ``repositories``: persistence ports and their SQL implementations
- ``utils``: engine/session helpers and the repository bundle
- ``session``: the application-wide engine built from settings
"""

from .base import Base
from .utils import (
    SqlRepoBundle,
    build_sql_repos,
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "SqlRepoBundle",
    "build_sql_repos",
    "create_all",
    "create_engine",
    "create_sessionmaker",
]
