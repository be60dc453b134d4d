"""Customer repository: case-insensitive name fragment search."""
from typing import List

from sales_engine.models import Customer
from sales_engine.repositories.base import Repository
from sales_engine.schemas import CustomerCreate, CustomerUpdate


class CustomerRepository(Repository[Customer]):
    model = Customer
    create_schema = CustomerCreate
    update_schema = CustomerUpdate

    def find_all_by_first_name(self, fragment: str) -> List[Customer]:
        needle = fragment.lower()
        return [customer for customer in self._all if needle in customer.first_name.lower()]

    def find_all_by_last_name(self, fragment: str) -> List[Customer]:
        needle = fragment.lower()
        return [customer for customer in self._all if needle in customer.last_name.lower()]
