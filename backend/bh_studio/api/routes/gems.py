from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from bh_studio.api.deps import GemCostCacheDep, GemWalletDep
from bh_studio.gems.costs import FEATURE_CATEGORIES
from bh_studio.gems.pricing import GEM_PRICING, PricingCatalog
from bh_studio.gems.wallet import DeductionResult, GemBalance, GemCheck

router = APIRouter()


class GemCostTable(BaseModel):
    costs: dict[str, int]
    categories: dict[str, dict[str, Any]]


class FeatureCost(BaseModel):
    feature_key: str
    gem_cost: int


class Message(BaseModel):
    message: str


@router.get("/costs", response_model=GemCostTable)
def read_gem_costs(costs: GemCostCacheDep) -> Any:
    return GemCostTable(costs=costs.all(), categories=FEATURE_CATEGORIES)


@router.get("/costs/{feature_key}", response_model=FeatureCost)
def read_feature_cost(feature_key: str, costs: GemCostCacheDep) -> Any:
    return FeatureCost(feature_key=feature_key, gem_cost=costs.get(feature_key))


@router.post("/costs/invalidate", response_model=Message)
def invalidate_gem_costs(costs: GemCostCacheDep) -> Any:
    costs.invalidate()
    return Message(message="Gem cost cache cleared")


@router.get("/pricing", response_model=PricingCatalog)
def read_pricing() -> Any:
    return GEM_PRICING


@router.get("/{user_id}", response_model=GemBalance)
def read_balance(user_id: str, wallet: GemWalletDep) -> Any:
    return wallet.get_balance(user_id)


@router.get("/{user_id}/check/{feature_key}", response_model=GemCheck)
def check_gems(user_id: str, feature_key: str, wallet: GemWalletDep) -> Any:
    """Whether the user can afford the feature, and by how much they fall short."""
    return wallet.check(user_id, feature_key)


@router.post("/{user_id}/deduct/{feature_key}", response_model=DeductionResult)
def deduct_gems(user_id: str, feature_key: str, wallet: GemWalletDep) -> Any:
    return wallet.deduct(user_id, feature_key)
