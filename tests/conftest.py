"""
Pytest configuration and shared fixtures.

The ``analyst`` fixture is a small hand-checked data set:

    merchant  items (price)                  invoices (status, paid?)
    1         1 (10), 2 (20), 3 (30)         1 shipped paid, 2 pending unpaid, 6 shipped paid
    2         4 (40), 5 (50)                 3 shipped paid, 4 returned unpaid
    3         6 (400)                        5 shipped paid
    4         -                              -
"""
import pytest
from datetime import datetime
from decimal import Decimal
from typing import List

from sales_engine.models import Customer, Invoice, InvoiceItem, Item, Merchant, Transaction
from sales_engine.repositories import (
    CustomerRepository,
    InvoiceItemRepository,
    InvoiceRepository,
    ItemRepository,
    MerchantRepository,
    TransactionRepository,
)
from sales_engine.sales_analyst import SalesAnalyst


CREATED = datetime(2012, 3, 27, 14, 54, 9)


def make_item(id: int, name: str, price: str, merchant_id: int,
              description: str = "", created_at: datetime = CREATED) -> Item:
    return Item(
        id=id,
        name=name,
        description=description,
        unit_price=Decimal(price),
        merchant_id=merchant_id,
        created_at=created_at,
        updated_at=created_at,
    )


@pytest.fixture
def catalogue_items() -> List[Item]:
    """Five items priced 10.99 .. 29.99 across merchants 2, 7, 3, 9, 9."""
    return [
        make_item(1, "Pencil", "10.99", 2, "You can use it to write things"),
        make_item(2, "Pen", "12.99", 7, "You can use it to permanently write things"),
        make_item(3, "Stapler", "19.99", 3, "Attaches pieces of paper together"),
        make_item(4, "Keyboard", "29.99", 9, "Allows text input to a computer"),
        make_item(5, "Mouse", "23.99", 9, "Moves the cursor around"),
    ]


@pytest.fixture
def item_repo() -> ItemRepository:
    return ItemRepository()


@pytest.fixture
def merchants() -> List[Merchant]:
    return [
        Merchant(id=1, name="Shopin1901", created_at=datetime(2010, 12, 10)),
        Merchant(id=2, name="Candisart", created_at=datetime(2009, 5, 30)),
        Merchant(id=3, name="MiniatureBikez", created_at=datetime(2010, 3, 30)),
        Merchant(id=4, name="Keckenbauer", created_at=datetime(2010, 7, 15)),
    ]


@pytest.fixture
def items() -> List[Item]:
    return [
        make_item(1, "Pencil", "10.00", 1, created_at=datetime(2016, 1, 5)),
        make_item(2, "Pen", "20.00", 1, created_at=datetime(2016, 1, 6)),
        make_item(3, "Stapler", "30.00", 1, created_at=datetime(2016, 2, 7)),
        make_item(4, "Keyboard", "40.00", 2, created_at=datetime(2016, 3, 8)),
        make_item(5, "Mouse", "50.00", 2, created_at=datetime(2016, 3, 9)),
        make_item(6, "Bicycle", "400.00", 3, created_at=datetime(2016, 3, 10)),
    ]


@pytest.fixture
def invoices() -> List[Invoice]:
    # 2024-01-01 is a Monday
    return [
        Invoice(id=1, customer_id=1, merchant_id=1, status="shipped", created_at=datetime(2024, 1, 1, 10, 0)),
        Invoice(id=2, customer_id=1, merchant_id=1, status="pending", created_at=datetime(2024, 1, 2, 11, 0)),
        Invoice(id=3, customer_id=2, merchant_id=2, status="shipped", created_at=datetime(2024, 1, 8, 9, 30)),
        Invoice(id=4, customer_id=2, merchant_id=2, status="returned", created_at=datetime(2024, 1, 3, 12, 0)),
        Invoice(id=5, customer_id=3, merchant_id=3, status="shipped", created_at=datetime(2024, 1, 8, 18, 0)),
        Invoice(id=6, customer_id=3, merchant_id=1, status="shipped", created_at=datetime(2024, 1, 9, 8, 15)),
    ]


@pytest.fixture
def invoice_items() -> List[InvoiceItem]:
    return [
        InvoiceItem(id=1, item_id=1, invoice_id=1, quantity=2, unit_price=Decimal("10.00"), created_at=CREATED),
        InvoiceItem(id=2, item_id=2, invoice_id=1, quantity=1, unit_price=Decimal("20.00"), created_at=CREATED),
        InvoiceItem(id=3, item_id=3, invoice_id=2, quantity=5, unit_price=Decimal("30.00"), created_at=CREATED),
        InvoiceItem(id=4, item_id=4, invoice_id=3, quantity=3, unit_price=Decimal("40.00"), created_at=CREATED),
        InvoiceItem(id=5, item_id=5, invoice_id=4, quantity=4, unit_price=Decimal("50.00"), created_at=CREATED),
        InvoiceItem(id=6, item_id=6, invoice_id=5, quantity=1, unit_price=Decimal("400.00"), created_at=CREATED),
        # Sold below the current catalogue price
        InvoiceItem(id=7, item_id=1, invoice_id=6, quantity=3, unit_price=Decimal("9.50"), created_at=CREATED),
        # Item 99 is not in the item repository
        InvoiceItem(id=8, item_id=99, invoice_id=6, quantity=1, unit_price=Decimal("5.00"), created_at=CREATED),
    ]


@pytest.fixture
def transactions() -> List[Transaction]:
    def txn(id, invoice_id, result):
        return Transaction(
            id=id,
            invoice_id=invoice_id,
            credit_card_number="4068631943231473",
            credit_card_expiration_date="0217",
            result=result,
            created_at=CREATED,
        )

    return [
        txn(1, 1, "success"),
        txn(2, 2, "failed"),
        txn(3, 3, "failed"),
        txn(4, 3, "success"),
        txn(5, 4, "failed"),
        txn(6, 5, "success"),
        txn(7, 6, "success"),
    ]


@pytest.fixture
def customers() -> List[Customer]:
    return [
        Customer(id=1, first_name="Joey", last_name="Ondricka", created_at=CREATED),
        Customer(id=2, first_name="Cecelia", last_name="Osinski", created_at=CREATED),
        Customer(id=3, first_name="Mariah", last_name="Toy", created_at=CREATED),
    ]


@pytest.fixture
def analyst(items, merchants, invoices, customers, invoice_items, transactions) -> SalesAnalyst:
    """SalesAnalyst over the hand-checked data set."""
    return SalesAnalyst(
        ItemRepository(items),
        MerchantRepository(merchants),
        InvoiceRepository(invoices),
        CustomerRepository(customers),
        InvoiceItemRepository(invoice_items),
        TransactionRepository(transactions),
    )


@pytest.fixture
def empty_analyst() -> SalesAnalyst:
    return SalesAnalyst(
        ItemRepository(),
        MerchantRepository(),
        InvoiceRepository(),
        CustomerRepository(),
        InvoiceItemRepository(),
        TransactionRepository(),
    )
