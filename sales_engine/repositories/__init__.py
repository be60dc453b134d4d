"""
In-memory repository layer.

- Repository: generic ordered store with id generation and CRUD
- ItemRepository, MerchantRepository, InvoiceRepository,
  InvoiceItemRepository, TransactionRepository, CustomerRepository:
  per-record repositories with foreign key, status and text lookups
"""
from sales_engine.repositories.base import Repository, NameSearchMixin
from sales_engine.repositories.items import ItemRepository
from sales_engine.repositories.merchants import MerchantRepository
from sales_engine.repositories.invoices import InvoiceRepository
from sales_engine.repositories.invoice_items import InvoiceItemRepository
from sales_engine.repositories.transactions import TransactionRepository
from sales_engine.repositories.customers import CustomerRepository

__all__ = [
    "Repository",
    "NameSearchMixin",
    "ItemRepository",
    "MerchantRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
    "TransactionRepository",
    "CustomerRepository",
]
