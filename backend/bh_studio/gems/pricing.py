from pydantic import BaseModel


class PricingPackage(BaseModel):
    id: str
    name: str
    price: int  # BDT
    gems: int
    description: str
    badge: str | None = None
    valid_days: int | None = None
    highlighted: bool = False


class PricingCatalog(BaseModel):
    subscriptions: list[PricingPackage]
    topups: list[PricingPackage]


GEM_PRICING = PricingCatalog(
    subscriptions=[
        PricingPackage(
            id="weekly-spark",
            name="Weekly Spark",
            price=149,
            gems=250,
            valid_days=7,
            description="Perfect for trying out all features",
        ),
        PricingPackage(
            id="monthly-elite",
            name="Monthly Elite",
            price=499,
            gems=1125,
            valid_days=30,
            description="Best value for power users",
            badge="BEST VALUE",
            highlighted=True,
        ),
    ],
    topups=[
        PricingPackage(
            id="micro",
            name="Micro Power-Up",
            price=50,
            gems=100,
            description="Quick boost for small projects",
        ),
        PricingPackage(
            id="pro",
            name="Pro Power-Up",
            price=100,
            gems=225,
            description="More gems, better value",
            badge="POPULAR",
        ),
    ],
)
