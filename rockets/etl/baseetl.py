import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

import httpx

from rockets.config import HTTP_TIMEOUT_SECONDS, is_remote
from rockets.dataaccess import InMemoryRepository

T = TypeVar("T")

logger = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 50


class CatalogError(ValueError):
    """Raised when a raw catalog record cannot become a model."""
    pass


def require_text(raw: dict, key: str) -> str:
    value = raw.get(key)
    if value is None or not str(value).strip():
        raise CatalogError(f"{raw.get('id')}: {key} cannot be null or empty")
    value = str(value)
    if len(value) > MAX_TEXT_LENGTH:
        raise CatalogError(
            f"{raw.get('id')}: {key} length cannot exceed {MAX_TEXT_LENGTH} characters"
        )
    return value


class BaseETL(ABC, Generic[T]):
    name: str
    kind: type

    def __init__(
        self,
        repository: InMemoryRepository,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.repository = repository
        self.transport = transport

    def extract(self, source: str) -> list[dict]:
        if is_remote(source):
            # Fetch Data from API (synchronously)
            with httpx.Client(
                transport=self.transport, timeout=HTTP_TIMEOUT_SECONDS
            ) as client:
                response = client.get(source)
                response.raise_for_status()
                data = response.json()
        else:
            with open(Path(source), encoding="utf-8") as f:
                data = json.load(f)

        logger.info("Extracted %s records from %s", self.name, source)

        # Ensure the return is always a List[Dict]
        if isinstance(data, dict):
            return [data]
        elif isinstance(data, list):
            return data
        else:
            raise TypeError(f"Unexpected response type: {type(data)}")

    @abstractmethod
    def transform(self, raw_data: list[dict]) -> list[T]:
        """Clean and transform the raw data"""
        pass

    def load(self, transformed_data: list[T]) -> None:
        """Replace the repository snapshot of this record kind"""
        self.repository.replace_all(self.kind, transformed_data)

    def resolve(self, kind: type, record_id: str | None, owner: dict, key: str):
        record = self.repository.get(kind, record_id) if record_id else None
        if record is None:
            raise CatalogError(
                f"{owner.get('id')}: {key} {record_id!r} does not match any "
                f"loaded {kind.__name__}"
            )
        return record
