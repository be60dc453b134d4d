"""Transaction repository: lookups by invoice, card and result."""
from typing import Any, List

from sales_engine.models import Transaction, TransactionResult
from sales_engine.repositories.base import Repository
from sales_engine.schemas import TransactionCreate, TransactionUpdate


class TransactionRepository(Repository[Transaction]):
    model = Transaction
    create_schema = TransactionCreate
    update_schema = TransactionUpdate

    def find_all_by_invoice_id(self, invoice_id: int) -> List[Transaction]:
        return self._find_all_by("invoice_id", invoice_id)

    def find_all_by_credit_card_number(self, credit_card_number: str) -> List[Transaction]:
        return self._find_all_by("credit_card_number", str(credit_card_number))

    def find_all_by_result(self, result: Any) -> List[Transaction]:
        """All transactions with result; an unknown result matches nothing."""
        try:
            target = TransactionResult.parse(result)
        except ValueError:
            return []
        return self._find_all_by("result", target)
