"""
Resource repository for the CA stub

Exposes the operations the test helpers need over stored resources:
- find_by_resource_id / find_all for reads
- delete_all for bulk cleanup of a chosen subset
- count as a cheap connectivity probe
- save for seeding fixtures

Backends:
- NdbResourceRepository → Google Datastore (emulator in development)
- InMemoryResourceRepository → process memory (RESOURCE_STORE=memory)
"""
import threading
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from google.cloud import ndb

from core.config import config, logger
from core.models.base import ndb_context_manager
from core.models.registered_resource import RegisteredResource
from core.schemas import ResourceRecord


class ResourceRepository:
    """Contract shared by all resource stores."""

    def find_by_resource_id(self, resource_id: str) -> Optional[ResourceRecord]:
        raise NotImplementedError

    def find_all(self) -> List[ResourceRecord]:
        raise NotImplementedError

    def delete_all(self, resources: Iterable[ResourceRecord]) -> None:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def save(self, resource: ResourceRecord) -> ResourceRecord:
        raise NotImplementedError


class NdbResourceRepository(ResourceRepository):
    """Resources stored as RegisteredResource entities in Datastore."""

    @ndb_context_manager
    def find_by_resource_id(self, resource_id: str) -> Optional[ResourceRecord]:
        entity = RegisteredResource.get(resource_id)
        return entity.to_record() if entity else None

    @ndb_context_manager
    def find_all(self) -> List[ResourceRecord]:
        return [entity.to_record() for entity in RegisteredResource.query().fetch()]

    @ndb_context_manager
    def delete_all(self, resources: Iterable[ResourceRecord]) -> None:
        keys = [ndb.Key(RegisteredResource, resource.resource_id) for resource in resources]
        if keys:
            ndb.delete_multi(keys)

    @ndb_context_manager
    def count(self) -> int:
        return RegisteredResource.query().count()

    @ndb_context_manager
    def save(self, resource: ResourceRecord) -> ResourceRecord:
        existing = RegisteredResource.get(resource.resource_id)
        if existing is not None and resource.created_at is None:
            resource = resource.model_copy(update={"created_at": existing.created_at})
        entity = RegisteredResource.from_record(resource)
        entity.save()
        return entity.to_record()


class InMemoryResourceRepository(ResourceRepository):
    """Resources kept in a dict keyed by resource ID, in insertion order."""

    def __init__(self, resources: Optional[Iterable[ResourceRecord]] = None):
        self._lock = threading.Lock()
        self._resources: Dict[str, ResourceRecord] = {}
        for resource in resources or []:
            self.save(resource)

    def find_by_resource_id(self, resource_id: str) -> Optional[ResourceRecord]:
        with self._lock:
            return self._resources.get(resource_id)

    def find_all(self) -> List[ResourceRecord]:
        with self._lock:
            return list(self._resources.values())

    def delete_all(self, resources: Iterable[ResourceRecord]) -> None:
        with self._lock:
            for resource in resources:
                self._resources.pop(resource.resource_id, None)

    def count(self) -> int:
        with self._lock:
            return len(self._resources)

    def save(self, resource: ResourceRecord) -> ResourceRecord:
        now = datetime.now(timezone.utc)
        with self._lock:
            existing = self._resources.get(resource.resource_id)
            created_at = resource.created_at or (existing.created_at if existing else None) or now
            stored = resource.model_copy(update={"created_at": created_at, "updated_at": now})
            self._resources[resource.resource_id] = stored
        return stored


def build_resource_repository() -> ResourceRepository:
    """Returns the repository for the configured RESOURCE_STORE."""
    if config.use_memory_store:
        logger.info("Using in-memory resource store")
        return InMemoryResourceRepository()
    if config.RESOURCE_STORE != 'ndb':
        raise ValueError(f"Unknown RESOURCE_STORE: {config.RESOURCE_STORE}")
    logger.info("Using NDB resource store")
    return NdbResourceRepository()
