import logging
import threading
import time
from collections.abc import Callable

from supabase import Client

logger = logging.getLogger(__name__)

# Fallback gem prices when `feature_gem_costs` has no row for a feature.
DEFAULT_GEM_COSTS: dict[str, int] = {
    "dress-change": 15,
    "apply-makeup": 15,
    "generate-character-image": 15,
    "pose-transfer": 15,
    "full-look-transfer": 15,
    "face-swap": 15,
    "cinematic-transform": 15,
    "extract-dress-to-dummy": 15,
    "generate-background": 15,
    "enhance-photo": 12,
    "apply-branding": 12,
    "remove-people-from-image": 12,
    "generate-caption": 1,
    "extract-image-prompt": 1,
    "refine-prompt": 1,
}

UNKNOWN_FEATURE_COST = 1

FEATURE_CATEGORIES: dict[str, dict] = {
    "high-impact": {
        "label": "High-Impact Features",
        "cost": 15,
        "features": [key for key, cost in DEFAULT_GEM_COSTS.items() if cost == 15],
    },
    "studio-utility": {
        "label": "Studio Utility Features",
        "cost": 12,
        "features": [key for key, cost in DEFAULT_GEM_COSTS.items() if cost == 12],
    },
    "quick-tools": {
        "label": "Quick Tools",
        "cost": 1,
        "features": [key for key, cost in DEFAULT_GEM_COSTS.items() if cost == 1],
    },
}


def get_default_gem_cost(feature_key: str) -> int:
    return DEFAULT_GEM_COSTS.get(feature_key, UNKNOWN_FEATURE_COST)


def fetch_gem_costs(client: Client) -> dict[str, int]:
    """Read the whole `feature_gem_costs` table into {feature_key: gem_cost}."""
    response = client.table("feature_gem_costs").select("feature_key, gem_cost").execute()
    return {row["feature_key"]: int(row["gem_cost"]) for row in (response.data or [])}


class GemCostCache:
    """
    Read-through cache over the gem cost table.

    The whole table is fetched at once and kept for `ttl_seconds`. A key that
    is missing from the table, or a failed fetch, resolves to the default
    price. Failed fetches are not cached.
    """

    def __init__(
        self,
        fetch: Callable[[], dict[str, int]],
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetch = fetch
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._costs: dict[str, int] | None = None
        self._fetched_at: float | None = None

    def _fresh_costs(self) -> dict[str, int] | None:
        """The cached table if it is within its TTL, read from a single snapshot."""
        costs, fetched_at = self._costs, self._fetched_at
        if costs is None or fetched_at is None:
            return None
        if (self._clock() - fetched_at) >= self.ttl_seconds:
            return None
        return costs

    @property
    def is_fresh(self) -> bool:
        return self._fresh_costs() is not None

    def _costs_table(self) -> dict[str, int]:
        costs = self._fresh_costs()
        if costs is not None:
            return costs
        return self._load()

    def _load(self) -> dict[str, int]:
        with self._lock:
            costs = self._fresh_costs()
            if costs is not None:
                return costs
            try:
                costs = self._fetch()
            except Exception as e:
                logger.error("Error fetching gem costs from DB: %s", e)
                return {}
            self._costs = costs
            self._fetched_at = self._clock()
            logger.info("Cached %s gem costs", len(costs))
            return costs

    def get(self, feature_key: str) -> int:
        cost = self._costs_table().get(feature_key)
        if cost is None:
            return get_default_gem_cost(feature_key)
        return cost

    def all(self) -> dict[str, int]:
        """Defaults overlaid with the database values."""
        return {**DEFAULT_GEM_COSTS, **self._costs_table()}

    def invalidate(self) -> None:
        """Drop the cached table and its timestamp; the next lookup re-fetches."""
        with self._lock:
            self._costs = None
            self._fetched_at = None
