"""
CA Stub Configuration System
Environment-aware configuration supporting development, staging, and production modes
"""
import os
import logging


class EnvironmentConfig:
    """Centralized environment configuration"""

    def __init__(self):
        self.ENVIRONMENT = os.getenv('ENVIRONMENT', 'development').lower()
        self.RESOURCE_STORE = os.getenv('RESOURCE_STORE', 'ndb').lower()
        self._test_helpers_override = os.getenv('ENABLE_TEST_HELPERS')
        print(f"[CAStub] Initializing with ENVIRONMENT={self.ENVIRONMENT}")
        print(f"  RESOURCE_STORE: {self.RESOURCE_STORE}")
        print(f"  DATASTORE_EMULATOR_HOST: {os.getenv('DATASTORE_EMULATOR_HOST', 'Not set')}")

    @property
    def is_development(self):
        return self.ENVIRONMENT == 'development'

    @property
    def is_staging(self):
        return self.ENVIRONMENT == 'staging'

    @property
    def use_memory_store(self):
        """Keep resources in process memory instead of Datastore"""
        return self.RESOURCE_STORE == 'memory'

    @property
    def enable_test_helpers(self):
        """Expose /test-helpers in development and staging unless overridden"""
        if self._test_helpers_override is not None:
            return self._test_helpers_override.lower() == 'true'
        return self.is_development or self.is_staging

    @property
    def debug_mode(self):
        """Enable debug mode in development"""
        return self.is_development


# Global instance
config = EnvironmentConfig()

# Storage configuration
STORAGE_PATH = os.environ.get('STORAGE_PATH', os.path.join(os.path.dirname(os.path.dirname(__file__)), 'storage'))
LOGS_DIR = os.path.join(STORAGE_PATH, "logs")
LOG_FILE = os.path.join(LOGS_DIR, "ca-stub.log")

os.makedirs(LOGS_DIR, exist_ok=True)

# Setup logging
logger = logging.getLogger("ca_stub")
logger.setLevel(logging.DEBUG if config.debug_mode else logging.INFO)

# Console handler
c_handler = logging.StreamHandler()
c_handler.setLevel(logging.DEBUG if config.debug_mode else logging.INFO)

# File handler
f_handler = logging.FileHandler(LOG_FILE)
f_handler.setLevel(logging.INFO)

# Formatter
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
c_handler.setFormatter(formatter)
f_handler.setFormatter(formatter)

logger.addHandler(c_handler)
logger.addHandler(f_handler)

# Google Cloud configuration
GOOGLE_CLOUD_PROJECT = os.environ.get('GOOGLE_CLOUD_PROJECT', 'ca-stub-dev')

# Application configuration
APP_NAME = os.environ.get('APP_NAME', 'CA Stub')
SERVICE_NAME = os.environ.get('SERVICE_NAME', 'Consent & Authorisation Stub')
PORT = int(os.environ.get('PORT', 8080))

logger.info(f"CA Stub configuration initialized - Environment: {config.ENVIRONMENT}")
logger.info(f"Resource store: {config.RESOURCE_STORE}")
logger.info(f"Test helpers: {'Enabled' if config.enable_test_helpers else 'Disabled'}")
logger.info(f"Debug mode: {'Enabled' if config.debug_mode else 'Disabled'}")
