"""
Base repository with in-memory storage, id generation and CRUD.

All domain repositories inherit from this class.
"""
from datetime import datetime
from typing import Any, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import ValidationError as PydanticValidationError

from sales_engine.exceptions import ValidationError
from sales_engine.observability import get_logger
from sales_engine.schemas import CreateModel, UpdateModel

logger = get_logger(__name__)

T = TypeVar("T")

def _now() -> datetime:
    return datetime.now()


class Repository(Generic[T]):
    """
    Ordered in-memory store of one record type.

    Subclasses set ``model`` (the record dataclass), ``create_schema`` and
    ``update_schema`` (its pydantic create and partial-update models).

    Usage:
        class ItemRepository(Repository[Item]):
            model = Item
            create_schema = ItemCreate
            update_schema = ItemUpdate

            def find_all_by_merchant_id(self, merchant_id: int) -> List[Item]:
                return self._find_all_by("merchant_id", merchant_id)

    Lookups never raise: a missing record is None or an empty list, and
    update/delete of a missing id do nothing.
    """

    model: Type[T]
    create_schema: Type[CreateModel]
    update_schema: Type[UpdateModel]

    def __init__(self, records: Optional[Iterable[T]] = None):
        self._all: List[T] = list(records or [])

    def __len__(self) -> int:
        return len(self._all)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._all))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {len(self._all)} rows>"

    def all(self) -> List[T]:
        """All records in insertion order."""
        return list(self._all)

    def add_to_repo(self, record: T) -> None:
        """Append a pre-built record as is."""
        self._all.append(record)

    def find_by_id(self, id: int) -> Optional[T]:
        """Find the record with matching id."""
        for record in self._all:
            if record.id == id:
                return record
        return None

    def max_id(self) -> int:
        """Next id to assign: highest existing id + 1, or 1 when empty."""
        return max((record.id for record in self._all), default=0) + 1

    def create(self, attributes: Union[Mapping[str, Any], CreateModel]) -> T:
        """
        Build a record from attributes and append it.

        The id is generated with max_id() and both timestamps are set to now;
        any id/created_at/updated_at in attributes is ignored, as are keys
        that are not fields of create_schema.

        Raises:
            ValidationError: If a required field is missing or a value is invalid
        """
        if isinstance(attributes, CreateModel):
            values = attributes.values()
        else:
            values = self._validate(self.create_schema, attributes).values()

        now = _now()
        try:
            record = self.model(id=self.max_id(), created_at=now, updated_at=now, **values)
        except (TypeError, ValueError) as e:
            raise ValidationError(self.model.__name__, str(e)) from e

        self._all.append(record)
        logger.debug(f"Created {self.model.__name__} {record.id}")
        return record

    def update(self, id: int, attributes: Union[Mapping[str, Any], UpdateModel]) -> Optional[T]:
        """
        Overwrite the provided fields of a record and refresh updated_at.

        Returns the updated record, or None if no record has this id.

        Raises:
            ValidationError: If an attribute value is invalid
        """
        record = self.find_by_id(id)
        if record is None:
            return None

        for key, value in self._parse_changes(attributes).items():
            setattr(record, key, value)
        record.updated_at = _now()
        return record

    def delete(self, id: int) -> None:
        """Remove the first record with matching id, if any."""
        for index, record in enumerate(self._all):
            if record.id == id:
                del self._all[index]
                logger.debug(f"Deleted {self.model.__name__} {id}")
                return

    def _parse_changes(self, attributes: Union[Mapping[str, Any], UpdateModel]) -> Dict[str, Any]:
        if isinstance(attributes, UpdateModel):
            return attributes.changes()
        return self._validate(self.update_schema, attributes).changes()

    def _validate(self, schema, attributes: Mapping[str, Any]):
        """Run attributes through a pydantic schema, raising our ValidationError."""
        try:
            return schema.model_validate(dict(attributes))
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or self.model.__name__
            value = None if error["type"] == "missing" else error.get("input")
            raise ValidationError(field, error["msg"], value) from e

    def _find_all_by(self, attribute: str, value: Any) -> List[T]:
        """All records whose attribute equals value, in insertion order."""
        return [record for record in self._all if getattr(record, attribute) == value]


class NameSearchMixin:
    """Name lookups for repositories of records with a ``name`` field."""

    def find_by_name(self, name: str) -> Optional[T]:
        """First record whose name matches exactly, ignoring case."""
        needle = name.lower()
        for record in self._all:
            if record.name.lower() == needle:
                return record
        return None

    def find_all_by_name(self, fragment: str) -> List[T]:
        """All records whose name contains fragment, ignoring case."""
        needle = fragment.lower()
        return [record for record in self._all if needle in record.name.lower()]
