import logging
from typing import Annotated

from fastapi import Depends

from bh_studio.agent.errors import ServiceNotConfiguredError
from bh_studio.agent.generation_log import GenerationLogger
from bh_studio.core.config import settings
from bh_studio.core.db import get_supabase
from bh_studio.gems.costs import GemCostCache, fetch_gem_costs
from bh_studio.gems.wallet import GemWallet

logger = logging.getLogger(__name__)


def get_generation_logger() -> GenerationLogger | None:
    """Generation logging is optional: without BaaS credentials tools still run, unlogged."""
    try:
        return GenerationLogger(get_supabase())
    except ServiceNotConfiguredError:
        logger.warning("Generation logging disabled: database service not configured")
        return None


_gem_cost_cache_instance: GemCostCache | None = None


def get_gem_cost_cache() -> GemCostCache:
    global _gem_cost_cache_instance
    if _gem_cost_cache_instance is None:
        _gem_cost_cache_instance = GemCostCache(
            fetch=lambda: fetch_gem_costs(get_supabase()),
            ttl_seconds=settings.GEM_COST_CACHE_TTL_SECONDS,
        )
    return _gem_cost_cache_instance


def get_gem_wallet(costs: Annotated[GemCostCache, Depends(get_gem_cost_cache)]) -> GemWallet:
    return GemWallet(get_supabase(), costs)


GenerationLoggerDep = Annotated[GenerationLogger | None, Depends(get_generation_logger)]
GemCostCacheDep = Annotated[GemCostCache, Depends(get_gem_cost_cache)]
GemWalletDep = Annotated[GemWallet, Depends(get_gem_wallet)]
