"""Item repository: catalogue lookups by name, description, price and merchant."""
from typing import Any, List

from sales_engine.models import Item, to_price
from sales_engine.repositories.base import Repository, NameSearchMixin
from sales_engine.schemas import ItemCreate, ItemUpdate


class ItemRepository(NameSearchMixin, Repository[Item]):
    model = Item
    create_schema = ItemCreate
    update_schema = ItemUpdate

    def find_all_with_description(self, fragment: str) -> List[Item]:
        """All items whose description contains fragment (case-sensitive)."""
        return [item for item in self._all if fragment in item.description]

    def find_all_by_price(self, price: Any) -> List[Item]:
        """All items priced exactly at price; a non-numeric price matches nothing."""
        try:
            target = to_price(price)
        except ValueError:
            return []
        return [item for item in self._all if item.unit_price == target]

    def find_all_by_price_in_range(self, low: Any, high: Any) -> List[Item]:
        """All items with low <= unit_price <= high, in insertion order."""
        try:
            low_price, high_price = to_price(low), to_price(high)
        except ValueError:
            return []
        return [item for item in self._all if low_price <= item.unit_price <= high_price]

    def find_all_by_merchant_id(self, merchant_id: int) -> List[Item]:
        return self._find_all_by("merchant_id", merchant_id)
