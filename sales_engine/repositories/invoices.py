"""Invoice repository: lookups by customer, merchant and status."""
from typing import Any, List

from sales_engine.models import Invoice, InvoiceStatus
from sales_engine.repositories.base import Repository
from sales_engine.schemas import InvoiceCreate, InvoiceUpdate


class InvoiceRepository(Repository[Invoice]):
    model = Invoice
    create_schema = InvoiceCreate
    update_schema = InvoiceUpdate

    def find_all_by_customer_id(self, customer_id: int) -> List[Invoice]:
        return self._find_all_by("customer_id", customer_id)

    def find_all_by_merchant_id(self, merchant_id: int) -> List[Invoice]:
        return self._find_all_by("merchant_id", merchant_id)

    def find_all_by_status(self, status: Any) -> List[Invoice]:
        """All invoices with status; an unknown status matches nothing."""
        try:
            target = InvoiceStatus.parse(status)
        except ValueError:
            return []
        return self._find_all_by("status", target)
