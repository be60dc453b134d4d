"""
Sales analytics over the six shared repositories.

Domain-specific query methods are organized into mixins:
- ItemsMixin: item counts, price statistics, golden items
- InvoicesMixin: invoice counts, weekdays, status, payment state
- RevenueMixin: revenue, quantities sold, top earners

Every method reads the repositories as they are at call time. Callers may
create, update or delete records between calls and see the change on the
next call.
"""
from typing import Optional

from sales_engine.analytics import ItemsMixin, InvoicesMixin, RevenueMixin
from sales_engine.config import AnalyticsConfig, config
from sales_engine.repositories import (
    CustomerRepository,
    InvoiceItemRepository,
    InvoiceRepository,
    ItemRepository,
    MerchantRepository,
    TransactionRepository,
)


class SalesAnalyst(ItemsMixin, InvoicesMixin, RevenueMixin):
    """
    Read-only analytics engine over injected repositories.

    The repositories are shared with the caller, not owned: the analyst
    never mutates them.
    """

    def __init__(
        self,
        items: ItemRepository,
        merchants: MerchantRepository,
        invoices: InvoiceRepository,
        customers: CustomerRepository,
        invoice_items: InvoiceItemRepository,
        transactions: TransactionRepository,
        analytics_config: Optional[AnalyticsConfig] = None,
    ):
        self.items = items
        self.merchants = merchants
        self.invoices = invoices
        self.customers = customers
        self.invoice_items = invoice_items
        self.transactions = transactions
        self.analytics_config = analytics_config or config.analytics

    def __repr__(self) -> str:
        return (
            f"<SalesAnalyst items={len(self.items)} merchants={len(self.merchants)} "
            f"invoices={len(self.invoices)}>"
        )
