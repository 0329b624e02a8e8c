"""Tests for the in-memory record store."""

import pytest

from rockets.dataaccess import InMemoryRepository
from rockets.models import Launch, LaunchServiceProvider
from tests.helpers import make_launch, make_provider, make_rocket


class TestInMemoryRepository:
    def test_starts_empty(self):
        assert InMemoryRepository().load_all(Launch) == []

    def test_load_all_returns_a_copy(self):
        repository = InMemoryRepository()
        repository.replace_all(Launch, [make_launch("1", make_rocket())])

        snapshot = repository.load_all(Launch)
        snapshot.clear()

        assert len(repository.load_all(Launch)) == 1

    def test_snapshot_unaffected_by_later_replace(self):
        repository = InMemoryRepository()
        repository.replace_all(Launch, [make_launch("1", make_rocket())])
        snapshot = repository.load_all(Launch)

        repository.replace_all(Launch, [])

        assert [l.id for l in snapshot] == ["1"]

    def test_get_by_id(self):
        repository = InMemoryRepository()
        provider = make_provider(id="spacex")
        repository.replace_all(LaunchServiceProvider, [provider])

        assert repository.get(LaunchServiceProvider, "spacex") is provider
        assert repository.get(LaunchServiceProvider, "ula") is None

    def test_unknown_kind(self):
        with pytest.raises(KeyError, match="Unknown record kind: str"):
            InMemoryRepository().load_all(str)
