"""SalesAnalyst invoice count, weekday and payment status methods."""
from __future__ import annotations

from collections import Counter
from decimal import Decimal
from typing import Any, Dict, List, Set

from sales_engine.analytics.stats import average, ratio, sample_std_dev, total
from sales_engine.models import Merchant
from sales_engine.observability import timed
from sales_engine.validators import validate_invoice_status

# Calendar order, independent of the process locale
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class InvoicesMixin:

    def _successful_invoice_ids(self) -> Set[int]:
        """Ids of invoices with at least one successful transaction."""
        return {t.invoice_id for t in self.transactions.all() if t.is_success}

    # ── Invoices per merchant ──

    def invoices_for_each_of_the_merchants(self) -> List[int]:
        """Invoice count for each merchant, in merchant order."""
        counts = Counter(invoice.merchant_id for invoice in self.invoices.all())
        return [counts[merchant.id] for merchant in self.merchants.all()]

    def average_invoices_per_merchant(self) -> Decimal:
        return average(self.invoices_for_each_of_the_merchants())

    def average_invoices_per_merchant_standard_deviation(self) -> Decimal:
        return sample_std_dev(self.invoices_for_each_of_the_merchants())

    def _invoice_count_bounds(self):
        spread = self.analytics_config.invoice_count_sigma * self.average_invoices_per_merchant_standard_deviation()
        mean = self.average_invoices_per_merchant()
        return mean - spread, mean + spread

    def top_merchants_by_invoice_count(self) -> List[Merchant]:
        """Merchants with invoice count strictly above mean + 2 sigma."""
        _, upper = self._invoice_count_bounds()
        merchants = self.merchants.all()
        counts = self.invoices_for_each_of_the_merchants()
        return [m for m, count in zip(merchants, counts) if count > upper]

    def bottom_merchants_by_invoice_count(self) -> List[Merchant]:
        """Merchants with invoice count strictly below mean - 2 sigma."""
        lower, _ = self._invoice_count_bounds()
        merchants = self.merchants.all()
        counts = self.invoices_for_each_of_the_merchants()
        return [m for m, count in zip(merchants, counts) if count < lower]

    # ── Weekdays ──

    def invoice_days(self) -> Dict[str, int]:
        """Invoice count per weekday name, weekdays without invoices omitted."""
        counts = Counter(
            invoice.created_at.weekday()
            for invoice in self.invoices.all()
            if invoice.created_at is not None
        )
        return {WEEKDAY_NAMES[day]: counts[day] for day in range(7) if counts[day]}

    def max_invoices_in_a_day(self) -> int:
        return max(self.invoice_days().values(), default=0)

    def top_days_by_invoice_count(self) -> List[str]:
        """All weekday names sharing the highest invoice count."""
        days = self.invoice_days()
        if not days:
            return []
        top = max(days.values())
        return [day for day, count in days.items() if count == top]

    # ── Status and payment ──

    def invoice_status(self, status: Any) -> Decimal:
        """
        Percentage of invoices with status, 2 places.

        Raises:
            ValidationError: If status is not pending, shipped or returned
        """
        target = validate_invoice_status(status)
        invoices = self.invoices.all()
        matching = sum(1 for invoice in invoices if invoice.status == target)
        return ratio(100 * matching, len(invoices))

    def invoice_paid_in_full(self, invoice_id: int) -> bool:
        """True if the invoice exists and has a successful transaction."""
        if self.invoices.find_by_id(invoice_id) is None:
            return False
        return any(t.is_success for t in self.transactions.find_all_by_invoice_id(invoice_id))

    def invoice_total(self, invoice_id: int) -> Decimal:
        """Sum of unit_price * quantity over the invoice's line items."""
        if self.invoices.find_by_id(invoice_id) is None:
            return total([])
        return total(line.total for line in self.invoice_items.find_all_by_invoice_id(invoice_id))

    def merchant_paid_in_full(self, merchant_id: int) -> bool:
        """True if every invoice of the merchant is paid; True for no invoices."""
        return all(
            self.invoice_paid_in_full(invoice.id)
            for invoice in self.invoices.find_all_by_merchant_id(merchant_id)
        )

    @timed()
    def merchants_with_pending_invoices(self) -> List[Merchant]:
        """Merchants with at least one invoice lacking a successful transaction."""
        paid = self._successful_invoice_ids()
        pending = {invoice.merchant_id for invoice in self.invoices.all() if invoice.id not in paid}
        return [merchant for merchant in self.merchants.all() if merchant.id in pending]
