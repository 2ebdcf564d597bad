"""Generator for already-clustered customer records."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator

from segment_explorer.generators.base import BaseGenerator
from segment_explorer.models.customer import CustomerRecord
from segment_explorer.serialization import record_to_dict


@dataclass(frozen=True)
class ClusterProfile:
    """Centre of a synthetic segment."""

    mean_age: float
    mean_purchase: float
    category_weights: tuple[float, float, float, float]


class CustomerRecordGenerator(BaseGenerator):
    """Generate customer records with a cluster label already attached.

    Each cluster draws age, purchase amount and category around its own
    profile so the segments differ visibly in the summary statistics.
    """

    CATEGORIES = ["Clothing", "Footwear", "Outerwear", "Accessories"]
    GENDERS = ["Male", "Female"]
    SEASONS = ["Winter", "Spring", "Summer", "Fall"]
    SHIPPING_TYPES = [
        "Express",
        "Free Shipping",
        "Next Day Air",
        "Standard",
        "2-Day Shipping",
        "Store Pickup",
    ]
    PAYMENT_METHODS = ["Venmo", "Cash", "Credit Card", "PayPal", "Debit Card", "Bank Transfer"]
    FREQUENCIES = [
        "Weekly",
        "Fortnightly",
        "Bi-Weekly",
        "Monthly",
        "Quarterly",
        "Every 3 Months",
        "Annually",
    ]

    PROFILES = [
        ClusterProfile(mean_age=28, mean_purchase=35, category_weights=(0.50, 0.20, 0.10, 0.20)),
        ClusterProfile(mean_age=45, mean_purchase=80, category_weights=(0.30, 0.15, 0.35, 0.20)),
        ClusterProfile(mean_age=60, mean_purchase=55, category_weights=(0.25, 0.35, 0.10, 0.30)),
        ClusterProfile(mean_age=36, mean_purchase=95, category_weights=(0.20, 0.20, 0.15, 0.45)),
    ]

    def __init__(self, seed: int | None = None, n_clusters: int = 4) -> None:
        if n_clusters < 1:
            raise ValueError(f"n_clusters must be >= 1, got {n_clusters}")
        super().__init__(seed)
        self.n_clusters = n_clusters

    def generate(self) -> CustomerRecord:
        """Generate a single record.

        Returns
        -------
        CustomerRecord
            Generated record.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[CustomerRecord]:
        """Generate multiple records.

        Parameters
        ----------
        count : int
            Number of records to generate.

        Yields
        ------
        CustomerRecord
            Generated records.
        """
        for _ in range(count):
            yield self._generate_one()

    def generate_payload(self, count: int) -> list[dict[str, Any]]:
        """Generate records in the clustering service wire format."""
        return [record_to_dict(record) for record in self.generate_batch(count)]

    def _generate_one(self) -> CustomerRecord:
        cluster = self.random.randrange(self.n_clusters)
        profile = self.PROFILES[cluster % len(self.PROFILES)]

        age = int(min(70, max(18, self.random.gauss(profile.mean_age, 6))))
        purchase = min(100.0, max(20.0, self.random.gauss(profile.mean_purchase, 12)))
        subscribed = self.random.random() < 0.27
        discounted = subscribed or self.random.random() < 0.15

        return CustomerRecord(
            age=age,
            purchase_amount=Decimal(str(round(purchase, 2))),
            category=self.random.choices(self.CATEGORIES, weights=profile.category_weights, k=1)[0],
            location=self.fake.state(),
            cluster=cluster,
            review_rating=round(self.random.uniform(2.5, 5.0), 1),
            previous_purchases=self.random.randint(1, 50),
            gender=self.random.choice(self.GENDERS),
            season=self.random.choice(self.SEASONS),
            subscription_status="Yes" if subscribed else "No",
            shipping_type=self.random.choice(self.SHIPPING_TYPES),
            discount_applied="Yes" if discounted else "No",
            promo_code_used="Yes" if discounted else "No",
            payment_method=self.random.choice(self.PAYMENT_METHODS),
            frequency_of_purchases=self.random.choice(self.FREQUENCIES),
        )
