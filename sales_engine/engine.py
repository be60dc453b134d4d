"""
SalesEngine: the six repositories plus the CSV entry point.

Usage:
    from sales_engine import SalesEngine

    se = SalesEngine.from_csv({
        "items": "./data/items.csv",
        "merchants": "./data/merchants.csv",
    })
    sa = se.analyst
    sa.average_items_per_merchant()
"""
from pathlib import Path
from typing import Dict, Mapping, Optional, Type, Union

from sales_engine.config import DataConfig, config
from sales_engine.exceptions import ValidationError
from sales_engine.loader import load_repository
from sales_engine.observability import get_logger
from sales_engine.repositories import (
    CustomerRepository,
    InvoiceItemRepository,
    InvoiceRepository,
    ItemRepository,
    MerchantRepository,
    Repository,
    TransactionRepository,
)
from sales_engine.sales_analyst import SalesAnalyst

logger = get_logger(__name__)

REPOSITORY_CLASSES: Dict[str, Type[Repository]] = {
    "items": ItemRepository,
    "merchants": MerchantRepository,
    "invoices": InvoiceRepository,
    "invoice_items": InvoiceItemRepository,
    "transactions": TransactionRepository,
    "customers": CustomerRepository,
}


class SalesEngine:
    """Holds one repository per record type."""

    def __init__(
        self,
        items: Optional[ItemRepository] = None,
        merchants: Optional[MerchantRepository] = None,
        invoices: Optional[InvoiceRepository] = None,
        invoice_items: Optional[InvoiceItemRepository] = None,
        transactions: Optional[TransactionRepository] = None,
        customers: Optional[CustomerRepository] = None,
    ):
        self.items = items if items is not None else ItemRepository()
        self.merchants = merchants if merchants is not None else MerchantRepository()
        self.invoices = invoices if invoices is not None else InvoiceRepository()
        self.invoice_items = invoice_items if invoice_items is not None else InvoiceItemRepository()
        self.transactions = transactions if transactions is not None else TransactionRepository()
        self.customers = customers if customers is not None else CustomerRepository()

    @classmethod
    def from_csv(
        cls,
        paths: Optional[Mapping[str, Union[str, Path]]] = None,
        data_config: Optional[DataConfig] = None,
    ) -> "SalesEngine":
        """
        Load repositories from CSV files.

        Args:
            paths: Repository key (items, merchants, invoices, invoice_items,
                   transactions, customers) to CSV path
            data_config: Where to look for keys missing from paths
                         (default: config.data)

        A key missing from paths is loaded from the configured data
        directory if the file exists there, otherwise it starts empty.

        Raises:
            ValidationError: If paths contains an unknown key
            DataLoadError: If a given file is missing or malformed
        """
        paths = dict(paths or {})
        data_config = data_config or config.data

        unknown = sorted(set(paths) - set(REPOSITORY_CLASSES))
        if unknown:
            raise ValidationError(
                "paths",
                f"Unknown keys, expected some of: {', '.join(REPOSITORY_CLASSES)}",
                unknown
            )

        repositories = {}
        for key, repository_cls in REPOSITORY_CLASSES.items():
            if key in paths:
                repositories[key] = load_repository(repository_cls, paths[key])
                continue

            default_path = data_config.path_for(key)
            if default_path.exists():
                repositories[key] = load_repository(repository_cls, default_path)
            else:
                logger.warning(f"No {key} file at {default_path}, starting empty")
                repositories[key] = repository_cls()

        return cls(**repositories)

    @property
    def analyst(self) -> SalesAnalyst:
        """A SalesAnalyst sharing this engine's repositories."""
        return SalesAnalyst(
            self.items,
            self.merchants,
            self.invoices,
            self.customers,
            self.invoice_items,
            self.transactions,
        )

    def __repr__(self) -> str:
        sizes = ", ".join(f"{key}={len(getattr(self, key))}" for key in REPOSITORY_CLASSES)
        return f"<SalesEngine {sizes}>"
