from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone

import pytest

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("RESOURCE_STORE", "memory")
os.environ.setdefault("STORAGE_PATH", tempfile.mkdtemp(prefix="ca-stub-tests-"))

from core.repository import InMemoryResourceRepository  # noqa: E402
from core.schemas import MatchStatus, ResourceRecord  # noqa: E402


CREATED = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


def make_resource(resource_id: str, friendly_name: str | None = None, **overrides) -> ResourceRecord:
    values = {
        "resource_id": resource_id,
        "name": f"Resource {resource_id}",
        "description": "Registered during a test run",
        "match_status": MatchStatus.FULL_MATCH,
        "resource_scopes": ["energy-consumption-read"],
        "rpt": f"rpt-{resource_id}",
        "pat": f"pat-{resource_id}",
        "friendly_name": friendly_name,
        "created_at": CREATED,
    }
    values.update(overrides)
    return ResourceRecord(**values)


@pytest.fixture
def repository() -> InMemoryResourceRepository:
    return InMemoryResourceRepository()


@pytest.fixture
def resource_factory():
    return make_resource
