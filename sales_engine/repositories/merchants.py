"""Merchant repository."""
from sales_engine.models import Merchant
from sales_engine.repositories.base import Repository, NameSearchMixin
from sales_engine.schemas import MerchantCreate, MerchantUpdate


class MerchantRepository(NameSearchMixin, Repository[Merchant]):
    model = Merchant
    create_schema = MerchantCreate
    update_schema = MerchantUpdate
