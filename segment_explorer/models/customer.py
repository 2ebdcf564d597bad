"""Customer record model as delivered by the clustering service."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class CustomerRecord:
    """One customer's attributes plus the cluster label assigned upstream.

    ``review_rating`` and ``previous_purchases`` are carried through but not
    aggregated.
    """

    age: int
    purchase_amount: Decimal  # USD
    category: str
    location: str
    cluster: int
    review_rating: float = 0.0
    previous_purchases: int = 0
    gender: str = ""
    season: str = ""
    subscription_status: str = ""
    shipping_type: str = ""
    discount_applied: str = ""
    promo_code_used: str = ""
    payment_method: str = ""
    frequency_of_purchases: str = ""


@dataclass(frozen=True)
class QuarantinedRecord:
    """Upstream object rejected at ingestion."""

    index: int  # position in the upstream payload
    payload: Any
    reason: str
