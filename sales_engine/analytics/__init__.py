"""
SalesAnalyst query mixins.

- ItemsMixin: items per merchant, prices, golden items, single-item merchants
- InvoicesMixin: invoices per merchant, weekdays, status shares, payment state
- RevenueMixin: revenue per merchant/date, quantities and best sellers
"""
from sales_engine.analytics.items import ItemsMixin
from sales_engine.analytics.invoices import InvoicesMixin
from sales_engine.analytics.revenue import RevenueMixin

__all__ = [
    "ItemsMixin",
    "InvoicesMixin",
    "RevenueMixin",
]
