from rockets.dataaccess.repository import (
    RECORD_KINDS,
    InMemoryRepository,
    Repository,
)

__all__ = ["RECORD_KINDS", "InMemoryRepository", "Repository"]
