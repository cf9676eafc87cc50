import logging

from supabase import Client, create_client

from bh_studio.agent.errors import ServiceNotConfiguredError
from bh_studio.core.config import settings

logger = logging.getLogger(__name__)

_supabase_instance: Client | None = None


def get_supabase() -> Client:
    """Lazily creates the service-role BaaS client (database RPCs, tables and storage)."""
    global _supabase_instance
    if _supabase_instance is None:
        if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_ROLE_KEY:
            logger.error("SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY are not configured")
            raise ServiceNotConfiguredError("Database service not configured")
        _supabase_instance = create_client(settings.SUPABASE_URL, settings.SUPABASE_SERVICE_ROLE_KEY)
        logger.info("Supabase client initialized.")
    return _supabase_instance
