"""
Sales engine: in-memory repositories and sales analytics.

This package contains:
- models: Item, Merchant, Invoice, InvoiceItem, Transaction, Customer
- repositories: in-memory stores with lookups and CRUD
- sales_analyst: statistics and revenue queries across repositories
- engine: SalesEngine holding the repositories, CSV loading
- exceptions / validators / config / observability
"""

# Import in dependency order
from sales_engine.exceptions import (
    SalesEngineError,
    DataLoadError,
    ValidationError,
)

from sales_engine.models import (
    InvoiceStatus,
    TransactionResult,
    Item,
    Merchant,
    Invoice,
    InvoiceItem,
    Transaction,
    Customer,
)

from sales_engine.repositories import (
    Repository,
    ItemRepository,
    MerchantRepository,
    InvoiceRepository,
    InvoiceItemRepository,
    TransactionRepository,
    CustomerRepository,
)

from sales_engine.sales_analyst import SalesAnalyst
from sales_engine.engine import SalesEngine
from sales_engine.config import config

__all__ = [
    # Exceptions
    "SalesEngineError",
    "DataLoadError",
    "ValidationError",
    # Models
    "InvoiceStatus",
    "TransactionResult",
    "Item",
    "Merchant",
    "Invoice",
    "InvoiceItem",
    "Transaction",
    "Customer",
    # Repositories
    "Repository",
    "ItemRepository",
    "MerchantRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
    "TransactionRepository",
    "CustomerRepository",
    # Analytics
    "SalesAnalyst",
    "SalesEngine",
    # Config
    "config",
]
