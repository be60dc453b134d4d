"""
Pydantic models for repository ``create`` and ``update`` calls.

``*Create`` models list the caller-supplied fields of a new record; all of
them are required. ``*Update`` models make every mutable field optional and
only fields the caller actually sets are applied.

``id``, ``created_at`` and ``updated_at`` are not fields of either kind and
unknown keys are ignored, so callers never set them.
"""
from decimal import Decimal
from typing import Annotated, Optional, Any, Dict

from pydantic import BaseModel, BeforeValidator, Field

from sales_engine.models import InvoiceStatus, TransactionResult, to_price

# Field types accepting the same loose input as the record dataclasses
Price = Annotated[Decimal, BeforeValidator(to_price)]
Status = Annotated[InvoiceStatus, BeforeValidator(InvoiceStatus.parse)]
Result = Annotated[TransactionResult, BeforeValidator(TransactionResult.parse)]


class CreateModel(BaseModel):
    """Base for new-record attributes."""

    def values(self) -> Dict[str, Any]:
        """Constructor keyword arguments for the record."""
        return self.model_dump()


class UpdateModel(BaseModel):
    """Base for partial updates."""

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly set by the caller, excluding None."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# ═══════════════════════════════════════════════════════════════════════════════
# CREATE
# ═══════════════════════════════════════════════════════════════════════════════

class ItemCreate(CreateModel):
    name: str
    description: str
    unit_price: Price
    merchant_id: int


class MerchantCreate(CreateModel):
    name: str


class InvoiceCreate(CreateModel):
    customer_id: int
    merchant_id: int
    status: Status


class InvoiceItemCreate(CreateModel):
    item_id: int
    invoice_id: int
    quantity: int = Field(ge=0)
    unit_price: Price


class TransactionCreate(CreateModel):
    invoice_id: int
    credit_card_number: str
    credit_card_expiration_date: str
    result: Result


class CustomerCreate(CreateModel):
    first_name: str
    last_name: str


# ═══════════════════════════════════════════════════════════════════════════════
# UPDATE
# ═══════════════════════════════════════════════════════════════════════════════

class ItemUpdate(UpdateModel):
    """Mutable fields of an Item."""
    name: Optional[str] = None
    description: Optional[str] = None
    unit_price: Optional[Price] = None


class MerchantUpdate(UpdateModel):
    """Mutable fields of a Merchant."""
    name: Optional[str] = None


class InvoiceUpdate(UpdateModel):
    """Mutable fields of an Invoice."""
    status: Optional[Status] = None


class InvoiceItemUpdate(UpdateModel):
    """Mutable fields of an InvoiceItem."""
    quantity: Optional[int] = Field(None, ge=0)
    unit_price: Optional[Price] = None


class TransactionUpdate(UpdateModel):
    """Mutable fields of a Transaction."""
    credit_card_number: Optional[str] = None
    credit_card_expiration_date: Optional[str] = None
    result: Optional[Result] = None


class CustomerUpdate(UpdateModel):
    """Mutable fields of a Customer."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
