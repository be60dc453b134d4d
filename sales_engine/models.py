"""
Domain models for merchant sales data.

Provides dataclasses for Items, Merchants, Invoices, InvoiceItems,
Transactions and Customers. These records are shared by every repository
and by the SalesAnalyst; repositories mutate them in place.

Prices are always ``decimal.Decimal``. Floats are converted through their
string form so that sums over thousands of line items never drift.
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, List, Dict, Any


# Fractional digits kept for every stored price
PRICE_SCALE = Decimal("0.0001")


# ═══════════════════════════════════════════════════════════════════════════════
# ENUMS
# ═══════════════════════════════════════════════════════════════════════════════

class InvoiceStatus(str, Enum):
    """Invoice lifecycle status."""
    PENDING = "pending"
    SHIPPED = "shipped"
    RETURNED = "returned"

    @classmethod
    def parse(cls, value: Any) -> "InvoiceStatus":
        """Parse an enum member or a case-insensitive status string."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    @classmethod
    def values(cls) -> List[str]:
        """Get list of valid status strings."""
        return [member.value for member in cls]


class TransactionResult(str, Enum):
    """Outcome of a credit card transaction."""
    SUCCESS = "success"
    FAILED = "failed"

    @classmethod
    def parse(cls, value: Any) -> "TransactionResult":
        """Parse an enum member or a case-insensitive result string."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


# ═══════════════════════════════════════════════════════════════════════════════
# COERCION HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def to_price(value: Any) -> Decimal:
    """
    Convert a price to a fixed-point Decimal.

    Accepts Decimal, int, float or numeric string. Floats go through
    ``repr`` so 12.99 becomes Decimal("12.99"), not its binary expansion.

    Raises:
        ValueError: If the value is not numeric
    """
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, float):
        price = Decimal(repr(value))
    else:
        try:
            price = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid price: {value!r}")

    if not price.is_finite():
        raise ValueError(f"Invalid price: {value!r}")

    return price.quantize(PRICE_SCALE)


def price_from_cents(value: Any) -> Decimal:
    """Convert a price given in cents (e.g. "1099") to dollars (10.99)."""
    return to_price(to_price(value) / 100)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a timestamp from the source files.

    Accepts ``YYYY-MM-DD``, ``YYYY-MM-DD HH:MM:SS`` and either of those with
    a trailing `` UTC``. Result is a naive datetime.

    Raises:
        ValueError: If the string is not a recognised timestamp
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    text = str(value).strip()
    if text.endswith(" UTC"):
        text = text[:-4]
    return datetime.fromisoformat(text)


# ═══════════════════════════════════════════════════════════════════════════════
# DATACLASSES
# ═══════════════════════════════════════════════════════════════════════════════
#
# eq=False keeps identity semantics: two records with the same fields are
# still different rows, and records can be used as mapping keys.

@dataclass(eq=False)
class Item:
    """Product offered by a merchant."""
    id: int
    name: str
    description: str
    unit_price: Decimal
    merchant_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.unit_price = to_price(self.unit_price)
        if self.updated_at is None:
            self.updated_at = self.created_at

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Item":
        """Create Item from a CSV row (unit_price in cents)."""
        return cls(
            id=int(row["id"]),
            name=row.get("name", ""),
            description=row.get("description", ""),
            unit_price=price_from_cents(row["unit_price"]),
            merchant_id=int(row["merchant_id"]),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )

    @property
    def unit_price_to_dollars(self) -> float:
        """Unit price as a float, for display only."""
        return float(self.unit_price)


@dataclass(eq=False)
class Merchant:
    """Merchant selling items through invoices."""
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Merchant":
        """Create Merchant from a CSV row."""
        return cls(
            id=int(row["id"]),
            name=row.get("name", ""),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )


@dataclass(eq=False)
class Invoice:
    """Invoice issued by a merchant to a customer."""
    id: int
    customer_id: int
    merchant_id: int
    status: InvoiceStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.status = InvoiceStatus.parse(self.status)
        if self.updated_at is None:
            self.updated_at = self.created_at

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Invoice":
        """Create Invoice from a CSV row."""
        return cls(
            id=int(row["id"]),
            customer_id=int(row["customer_id"]),
            merchant_id=int(row["merchant_id"]),
            status=row["status"],
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )


@dataclass(eq=False)
class InvoiceItem:
    """Line item of an invoice, priced at the time of sale."""
    id: int
    item_id: int
    invoice_id: int
    quantity: int
    unit_price: Decimal
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.quantity = int(self.quantity)
        if self.quantity < 0:
            raise ValueError(f"Invalid quantity: {self.quantity}")
        self.unit_price = to_price(self.unit_price)
        if self.updated_at is None:
            self.updated_at = self.created_at

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "InvoiceItem":
        """Create InvoiceItem from a CSV row (unit_price in cents)."""
        return cls(
            id=int(row["id"]),
            item_id=int(row["item_id"]),
            invoice_id=int(row["invoice_id"]),
            quantity=int(row["quantity"]),
            unit_price=price_from_cents(row["unit_price"]),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )

    @property
    def total(self) -> Decimal:
        """Calculate line total."""
        return self.unit_price * self.quantity


@dataclass(eq=False)
class Transaction:
    """Credit card payment attempt for an invoice."""
    id: int
    invoice_id: int
    credit_card_number: str
    credit_card_expiration_date: str
    result: TransactionResult
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.result = TransactionResult.parse(self.result)
        if self.updated_at is None:
            self.updated_at = self.created_at

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Transaction":
        """Create Transaction from a CSV row."""
        return cls(
            id=int(row["id"]),
            invoice_id=int(row["invoice_id"]),
            credit_card_number=str(row.get("credit_card_number", "")),
            credit_card_expiration_date=str(row.get("credit_card_expiration_date", "")),
            result=row["result"],
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )

    @property
    def is_success(self) -> bool:
        """Check if the payment went through."""
        return self.result == TransactionResult.SUCCESS


@dataclass(eq=False)
class Customer:
    """Customer placing invoices."""
    id: int
    first_name: str
    last_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Customer":
        """Create Customer from a CSV row."""
        return cls(
            id=int(row["id"]),
            first_name=row.get("first_name", ""),
            last_name=row.get("last_name", ""),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )

    @property
    def full_name(self) -> str:
        """Get customer's full name."""
        parts = [self.first_name, self.last_name]
        return " ".join(p for p in parts if p) or "Unknown"
