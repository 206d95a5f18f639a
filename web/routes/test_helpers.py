"""
Test helper routes for the CA stub.

These endpoints expose internal data that is useful for test scenarios but is
not part of the standard CA API, so they are only mounted outside production.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from core.config import logger, SERVICE_NAME
from core.exceptions import NotFoundError
from core.repository import ResourceRepository
from core.schemas import (
    DeleteResourcesResponse, HealthResponse, ResourceDetail,
    ResourceListResponse, ResourceSummary, is_dynamic_resource
)

test_helpers_router = APIRouter()

DELETED_MESSAGE = "Deleted all dynamically created resources"


def get_resource_repository(request: Request) -> ResourceRepository:
    """Returns the repository the application was started with."""
    return request.app.state.resource_repository


@test_helpers_router.get("/rpt-token/{resource_id}", response_model=ResourceDetail)
def get_rpt_token(resource_id: str, repository: ResourceRepository = Depends(get_resource_repository)):
    """
    Returns the RPT token and details of a registered resource.
    The RPT is generated internally when the resource is registered.
    """
    resource = repository.find_by_resource_id(resource_id)
    if resource is None:
        logger.info(f"RPT lookup miss for resource ID: {resource_id}")
        raise NotFoundError(f"Resource not found with ID: {resource_id}")
    return ResourceDetail.from_record(resource)


@test_helpers_router.get("/resources", response_model=ResourceListResponse)
def list_resources(repository: ResourceRepository = Depends(get_resource_repository)):
    """Lists every registered resource, fixtures included."""
    resources = repository.find_all()
    return ResourceListResponse(
        count=len(resources),
        resources=[ResourceSummary.from_record(resource) for resource in resources]
    )


@test_helpers_router.delete("/resources", response_model=DeleteResourcesResponse)
def delete_dynamic_resources(repository: ResourceRepository = Depends(get_resource_repository)):
    """
    Deletes resources created during test runs.
    Pre-seeded fixtures carry a friendly name and are left in place.
    """
    dynamic_resources = [resource for resource in repository.find_all() if is_dynamic_resource(resource)]
    repository.delete_all(dynamic_resources)
    logger.info(f"Deleted {len(dynamic_resources)} dynamic resources")
    return DeleteResourcesResponse(deleted_count=len(dynamic_resources), message=DELETED_MESSAGE)


@test_helpers_router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
def health(repository: ResourceRepository = Depends(get_resource_repository)):
    """Health check that also probes the resource store."""
    health_status = HealthResponse(
        status="UP",
        service=SERVICE_NAME,
        timestamp=datetime.now(timezone.utc).isoformat()
    )
    try:
        health_status.resource_count = repository.count()
        health_status.database = "UP"
    except Exception as e:
        logger.warning(f"Resource store health probe failed: {e!r}")
        health_status.database = "DOWN"
        health_status.database_error = str(e) or type(e).__name__
        return JSONResponse(
            status_code=503,
            content=health_status.model_dump(by_alias=True, exclude_none=True)
        )
    return health_status
