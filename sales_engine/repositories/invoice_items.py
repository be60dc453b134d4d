"""Invoice line item repository."""
from typing import List

from sales_engine.models import InvoiceItem
from sales_engine.repositories.base import Repository
from sales_engine.schemas import InvoiceItemCreate, InvoiceItemUpdate


class InvoiceItemRepository(Repository[InvoiceItem]):
    model = InvoiceItem
    create_schema = InvoiceItemCreate
    update_schema = InvoiceItemUpdate

    def find_all_by_item_id(self, item_id: int) -> List[InvoiceItem]:
        return self._find_all_by("item_id", item_id)

    def find_all_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        return self._find_all_by("invoice_id", invoice_id)
