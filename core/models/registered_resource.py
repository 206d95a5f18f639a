"""
RegisteredResource model for the CA stub (NDB version).
"""
from google.cloud import ndb
from .base import BaseModel
from core.schemas import MatchStatus, ResourceRecord


class RegisteredResource(BaseModel):
    """A protected resource registered through the CA stub."""
    name = ndb.StringProperty()
    description = ndb.TextProperty()
    match_status = ndb.StringProperty(choices=[status.value for status in MatchStatus])
    resource_scopes = ndb.StringProperty(repeated=True)
    rpt = ndb.TextProperty()
    pat = ndb.TextProperty()
    friendly_name = ndb.StringProperty()

    @property
    def resource_id(self):
        return self.key.id() if self.key else None

    @classmethod
    def get(cls, resource_id):
        """Retrieves a resource by its ID."""
        if not resource_id:
            return None
        return ndb.Key(cls, resource_id).get()

    @classmethod
    def from_record(cls, record: ResourceRecord):
        return cls(
            key=ndb.Key(cls, record.resource_id),
            name=record.name,
            description=record.description,
            match_status=record.match_status.value if record.match_status else None,
            resource_scopes=list(record.resource_scopes),
            rpt=record.rpt,
            pat=record.pat,
            friendly_name=record.friendly_name,
            created_at=record.created_at,
        )

    def to_record(self) -> ResourceRecord:
        return ResourceRecord.model_validate(self)
