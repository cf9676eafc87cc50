import logging
from datetime import datetime

from pydantic import BaseModel
from supabase import Client

from bh_studio.gems.costs import GemCostCache

logger = logging.getLogger(__name__)

# `deduct_gems` returns this instead of a balance when the user cannot afford the feature.
INSUFFICIENT_GEMS = -1


class GemBalance(BaseModel):
    gems_balance: int = 0
    subscription_type: str | None = None
    subscription_expires_at: datetime | None = None


class GemCheck(BaseModel):
    feature_key: str
    cost: int
    balance: int
    sufficient: bool
    shortage: int


class DeductionResult(BaseModel):
    success: bool
    new_balance: int
    cost: int


class GemWallet:
    """Gem balance lookups, low-balance gating and deductions through the database RPCs."""

    def __init__(self, client: Client, costs: GemCostCache):
        self.client = client
        self.costs = costs

    def get_balance(self, user_id: str) -> GemBalance:
        """The user's wallet; an unreadable wallet reads as empty."""
        try:
            response = self.client.rpc("get_user_gems", {"p_user_id": user_id}).execute()
        except Exception as e:
            logger.error("Error fetching gems for user %s: %s", user_id, e)
            return GemBalance()
        rows = response.data or []
        if not rows:
            return GemBalance()
        row = rows[0]
        return GemBalance(
            gems_balance=row.get("gems_balance") or 0,
            subscription_type=row.get("subscription_type"),
            subscription_expires_at=row.get("subscription_expires_at"),
        )

    def check(self, user_id: str, feature_key: str) -> GemCheck:
        cost = self.costs.get(feature_key)
        balance = self.get_balance(user_id).gems_balance
        return GemCheck(
            feature_key=feature_key,
            cost=cost,
            balance=balance,
            sufficient=balance >= cost,
            shortage=max(cost - balance, 0),
        )

    def deduct(self, user_id: str, feature_key: str) -> DeductionResult:
        cost = self.costs.get(feature_key)
        try:
            response = self.client.rpc(
                "deduct_gems",
                {"p_user_id": user_id, "p_feature_name": feature_key, "p_gem_cost": cost},
            ).execute()
        except Exception as e:
            logger.error("Error deducting gems for %s (user %s): %s", feature_key, user_id, e)
            current = self.get_balance(user_id).gems_balance
            return DeductionResult(success=False, new_balance=current, cost=cost)
        new_balance = response.data
        if new_balance is None or new_balance == INSUFFICIENT_GEMS:
            logger.info("Insufficient gems for %s (user %s, cost %s)", feature_key, user_id, cost)
            current = self.get_balance(user_id).gems_balance
            return DeductionResult(success=False, new_balance=current, cost=cost)
        logger.info("Deducted %s gems for %s (user %s)", cost, feature_key, user_id)
        return DeductionResult(success=True, new_balance=int(new_balance), cost=cost)
