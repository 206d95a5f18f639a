"""
Seeds the pre-registered fixture resources into the configured resource store.
Fixtures carry a friendly name, so test cleanup leaves them in place.
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.config import logger
from core.repository import build_resource_repository
from core.schemas import MatchStatus, ResourceRecord

FIXTURE_RESOURCES = [
    ResourceRecord(
        resource_id="7f3c1f0e-2a4d-4c59-9a51-0f6f2a1e0001",
        name="Energy consumption data",
        description="Half-hourly consumption readings",
        match_status=MatchStatus.FULL_MATCH,
        resource_scopes=["energy-consumption-read"],
        pat="pat-fixture-energy-consumption",
        friendly_name="default-energy-consumption",
    ),
    ResourceRecord(
        resource_id="7f3c1f0e-2a4d-4c59-9a51-0f6f2a1e0002",
        name="Customer account details",
        description="Account holder name and supply address",
        match_status=MatchStatus.PARTIAL_MATCH,
        resource_scopes=["account-read", "address-read"],
        pat="pat-fixture-account-details",
        friendly_name="default-account-details",
    ),
]


def seed(repository=None):
    repository = repository or build_resource_repository()
    for resource in FIXTURE_RESOURCES:
        repository.save(resource)
        logger.info(f"Seeded fixture resource {resource.resource_id} ({resource.friendly_name})")
    return len(FIXTURE_RESOURCES)


if __name__ == "__main__":
    print(f"Seeded {seed()} fixture resources")
