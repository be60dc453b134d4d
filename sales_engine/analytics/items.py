"""SalesAnalyst item and catalogue methods."""
from __future__ import annotations

import math
from collections import Counter
from decimal import Decimal
from typing import List

from sales_engine.analytics.stats import average, ratio, sample_std_dev
from sales_engine.models import Item, Merchant
from sales_engine.validators import validate_month_name


class ItemsMixin:

    def _item_counts(self) -> Counter:
        """Number of items per merchant_id."""
        return Counter(item.merchant_id for item in self.items.all())

    # ── Items per merchant ──

    def average_items_per_merchant(self) -> Decimal:
        """Total items divided by total merchants, 2 places."""
        return ratio(len(self.items), len(self.merchants))

    def array_of_items_per_merchant(self) -> List[int]:
        """Item count for each merchant, in merchant order."""
        counts = self._item_counts()
        return [counts[merchant.id] for merchant in self.merchants.all()]

    def average_items_per_merchant_standard_deviation(self) -> Decimal:
        return sample_std_dev(self.array_of_items_per_merchant())

    def avg_plus_std_dev(self) -> int:
        """Average plus one standard deviation, truncated."""
        return math.floor(
            self.average_items_per_merchant()
            + self.average_items_per_merchant_standard_deviation()
        )

    def merchants_with_high_item_count(self) -> List[Merchant]:
        """Merchants whose item count exceeds avg_plus_std_dev."""
        threshold = self.avg_plus_std_dev()
        counts = self._item_counts()
        return [m for m in self.merchants.all() if counts[m.id] > threshold]

    def merchants_with_only_one_item(self) -> List[Merchant]:
        counts = self._item_counts()
        return [m for m in self.merchants.all() if counts[m.id] == 1]

    def merchants_with_only_one_item_registered_in_month(self, month_name: str) -> List[Merchant]:
        """
        Single-item merchants whose item was created in the named month.

        Any year matches. Raises ValidationError for an unknown month name.
        """
        month = validate_month_name(month_name, "month_name")
        result = []
        for merchant in self.merchants_with_only_one_item():
            item = self.items.find_all_by_merchant_id(merchant.id)[0]
            if item.created_at is not None and item.created_at.month == month:
                result.append(merchant)
        return result

    # ── Prices ──

    def average_item_price_for_merchant(self, merchant_id: int) -> Decimal:
        """Mean unit price of a merchant's items; 0.00 for no items."""
        return average([item.unit_price for item in self.items.find_all_by_merchant_id(merchant_id)])

    def average_average_price_per_merchant(self) -> Decimal:
        """Mean over all merchants of average_item_price_for_merchant."""
        return average([
            self.average_item_price_for_merchant(merchant.id)
            for merchant in self.merchants.all()
        ])

    def array_of_items_price(self) -> List[Decimal]:
        return [item.unit_price for item in self.items.all()]

    def average_item_price(self) -> Decimal:
        return average(self.array_of_items_price())

    def average_item_price_std_dev(self) -> Decimal:
        return sample_std_dev(self.array_of_items_price())

    def golden_items(self) -> List[Item]:
        """Items priced more than golden_items_sigma deviations above the mean."""
        sigma = self.analytics_config.golden_items_sigma
        threshold = self.average_item_price() + sigma * self.average_item_price_std_dev()
        return [item for item in self.items.all() if item.unit_price > threshold]
