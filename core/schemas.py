"""
Pydantic schemas for stored resources and API output.
ResourceRecord is the store-independent view of a registered resource; the
response models keep the camelCase field names test consumers rely on.
"""
from enum import Enum
from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional


class MatchStatus(str, Enum):
    FULL_MATCH = "FULL_MATCH"
    PARTIAL_MATCH = "PARTIAL_MATCH"
    NO_MATCH = "NO_MATCH"


class ResourceRecord(BaseModel):
    resource_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    match_status: Optional[MatchStatus] = None
    resource_scopes: List[str] = []
    rpt: Optional[str] = None
    pat: Optional[str] = None
    friendly_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


def is_dynamic_resource(resource: ResourceRecord) -> bool:
    """A resource without a non-blank friendly name was created by a test run."""
    return resource.friendly_name is None or not resource.friendly_name.strip()


class ResourceDetail(BaseModel):
    resource_id: str = Field(alias="resourceId")
    rpt_token: Optional[str] = Field(default=None, alias="rptToken")
    name: Optional[str] = None
    description: Optional[str] = None
    match_status: Optional[MatchStatus] = Field(default=None, alias="matchStatus")
    resource_scopes: List[str] = Field(default=[], alias="resourceScopes")
    pat_token: Optional[str] = Field(default=None, alias="patToken")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True

    @classmethod
    def from_record(cls, resource: ResourceRecord):
        return cls(
            resource_id=resource.resource_id,
            rpt_token=resource.rpt,
            name=resource.name,
            description=resource.description,
            match_status=resource.match_status,
            resource_scopes=resource.resource_scopes,
            pat_token=resource.pat,
            created_at=resource.created_at,
            updated_at=resource.updated_at,
        )


class ResourceSummary(BaseModel):
    resource_id: str = Field(alias="resourceId")
    rpt_token: Optional[str] = Field(default=None, alias="rptToken")
    name: Optional[str] = None
    description: Optional[str] = None
    match_status: Optional[MatchStatus] = Field(default=None, alias="matchStatus")
    resource_scopes: List[str] = Field(default=[], alias="resourceScopes")
    friendly_name: Optional[str] = Field(default=None, alias="friendlyName")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    class Config:
        populate_by_name = True

    @classmethod
    def from_record(cls, resource: ResourceRecord):
        return cls(
            resource_id=resource.resource_id,
            rpt_token=resource.rpt,
            name=resource.name,
            description=resource.description,
            match_status=resource.match_status,
            resource_scopes=resource.resource_scopes,
            friendly_name=resource.friendly_name,
            created_at=resource.created_at,
            updated_at=resource.updated_at,
        )


class ResourceListResponse(BaseModel):
    count: int
    resources: List[ResourceSummary]


class DeleteResourcesResponse(BaseModel):
    deleted_count: int = Field(alias="deletedCount")
    message: str

    class Config:
        populate_by_name = True


class HealthResponse(BaseModel):
    status: str = "UP"
    service: str
    timestamp: str
    database: Optional[str] = None
    resource_count: Optional[int] = Field(default=None, alias="resourceCount")
    database_error: Optional[str] = Field(default=None, alias="databaseError")

    class Config:
        populate_by_name = True
