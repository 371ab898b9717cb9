import copy
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from hotel_engine.utils.custom_exceptions import StorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")
Item = Dict[str, Any]


def _encode_decimal(value):
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonRecordStore(Generic[T]):
    """ID-keyed collection of records backed by one JSON array document.

    The whole collection is mirrored in memory. Reads are served from the
    mirror and always hand out copies. Every mutation rewrites the entire
    document before it returns; the mirror is only replaced once the write
    has succeeded.
    """

    def __init__(
        self,
        path: Path,
        id_of: Callable[[T], str],
        to_item: Callable[[T], Item],
        from_item: Callable[[Item], T],
    ):
        self.path = Path(path)
        self.id_of = id_of
        self.to_item = to_item
        self.from_item = from_item
        self._records: List[T] = self._load()

    def _load(self) -> List[T]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as err:
            logger.error(f"Error reading {self.path}: {err}")
            raise StorageError(f"Failed to load data from {self.path}") from err

        if not raw.strip():
            return []

        try:
            items = json.loads(raw, parse_float=Decimal)
            if not isinstance(items, list):
                raise ValueError("document root must be a JSON array")
            return [self.from_item(item) for item in items]
        except (ValueError, KeyError, TypeError, ArithmeticError) as err:
            logger.error(f"Malformed document {self.path}: {err}")
            raise StorageError(f"Failed to load data from {self.path}") from err

    def _persist(self, records: List[T]):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            document = json.dumps(
                [self.to_item(record) for record in records],
                indent=2,
                default=_encode_decimal,
            )
            self.path.write_text(document, encoding="utf-8")
        except (OSError, TypeError, ValueError) as err:
            logger.error(f"Error writing {self.path}: {err}")
            raise StorageError(f"Failed to save data to {self.path}") from err

    def refresh(self):
        self._records = self._load()

    def flush(self):
        self._persist(self._records)

    def find_all(self) -> List[T]:
        return copy.deepcopy(self._records)

    def find_by_id(self, record_id: str) -> Optional[T]:
        for record in self._records:
            if self.id_of(record) == record_id:
                return copy.deepcopy(record)
        return None

    def save(self, record: T) -> T:
        record_id = self.id_of(record)
        updated = [r for r in self._records if self.id_of(r) != record_id]
        updated.append(copy.deepcopy(record))
        self._persist(updated)
        self._records = updated
        return record

    def delete(self, record_id: str) -> bool:
        for index, record in enumerate(self._records):
            if self.id_of(record) == record_id:
                updated = self._records[:index] + self._records[index + 1:]
                self._persist(updated)
                self._records = updated
                return True
        return False

    def exists_by_id(self, record_id: str) -> bool:
        return any(self.id_of(record) == record_id for record in self._records)

    def count(self) -> int:
        return len(self._records)

    def _find_where(self, predicate: Callable[[T], bool]) -> List[T]:
        return [copy.deepcopy(r) for r in self._records if predicate(r)]
