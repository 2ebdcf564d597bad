"""Pytest configuration and fixtures."""

from decimal import Decimal
from typing import Any, Callable

import pytest

from segment_explorer.models import CustomerRecord
from segment_explorer.store import RecordStore


def make_record(
    cluster: int = 0,
    purchase_amount: str | int = "50.00",
    age: int = 30,
    category: str = "Clothing",
    location: str = "Texas",
    **kwargs: Any,
) -> CustomerRecord:
    """Build a record with sensible defaults."""
    return CustomerRecord(
        age=age,
        purchase_amount=Decimal(str(purchase_amount)),
        category=category,
        location=location,
        cluster=cluster,
        **kwargs,
    )


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def record_factory() -> Callable[..., CustomerRecord]:
    """Factory for customer records."""
    return make_record


@pytest.fixture
def scenario_store() -> RecordStore:
    """Three records in cluster 0 (10, 20, 30) and two in cluster 1 (100, 200)."""
    return RecordStore(
        records=(
            make_record(cluster=0, purchase_amount=10, age=20, category="Clothing", location="Texas"),
            make_record(cluster=1, purchase_amount=100, age=50, category="Footwear", location="Ohio"),
            make_record(cluster=0, purchase_amount=20, age=30, category="Footwear", location="Ohio"),
            make_record(cluster=1, purchase_amount=200, age=60, category="Footwear", location="Texas"),
            make_record(cluster=0, purchase_amount=30, age=40, category="Clothing", location="Maine"),
        )
    )


@pytest.fixture
def wire_record() -> dict[str, Any]:
    """A single record as delivered by the clustering service."""
    return {
        "Age": 55,
        "Purchase Amount (USD)": 53.5,
        "Review Rating": 3.1,
        "Previous Purchases": 14,
        "Gender": "Male",
        "Category": "Clothing",
        "Season": "Winter",
        "Subscription Status": "Yes",
        "Shipping Type": "Express",
        "Discount Applied": "Yes",
        "Promo Code Used": "Yes",
        "Payment Method": "Venmo",
        "Frequency of Purchases": "Fortnightly",
        "Location": "Kentucky",
        "cluster": 2,
    }
