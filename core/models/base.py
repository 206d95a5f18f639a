"""
Base model and NDB context management for the CA stub.
"""
from datetime import timezone
from functools import wraps
from google.cloud import ndb
from core.config import config, GOOGLE_CLOUD_PROJECT
import os

_client = None


def ndb_context_manager(func):
    """
    Decorator that runs the wrapped call inside an NDB context.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        client = get_ndb_client()
        with client.context():
            return func(*args, **kwargs)
    return wrapper


def get_ndb_client():
    """
    Returns the NDB client configured for the current environment.
    """
    global _client
    if _client is not None:
        return _client
    if not config.is_development:
        _client = ndb.Client()
    else:
        emulator_host = os.getenv('DATASTORE_EMULATOR_HOST')
        if not emulator_host:
            raise RuntimeError("DATASTORE_EMULATOR_HOST is not set for development.")
        _client = ndb.Client(project=GOOGLE_CLOUD_PROJECT)
    return _client


class BaseModel(ndb.Model):
    """Base model with timestamps maintained by the datastore."""
    created_at = ndb.DateTimeProperty(auto_now_add=True, tzinfo=timezone.utc)
    updated_at = ndb.DateTimeProperty(auto_now=True, tzinfo=timezone.utc)

    def save(self):
        self.put()
