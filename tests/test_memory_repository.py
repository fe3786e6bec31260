from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from catrest.core.errors import NotFoundError
from catrest.domain.cats import Cat
from catrest.repositories import InMemoryCatRepository


def test_empty_store_lists_nothing(memory_repo):
    assert memory_repo.list_all() == []
    assert memory_repo.count() == 0


def test_create_assigns_increasing_ids_in_insertion_order(memory_repo):
    first = memory_repo.create(Cat(name="Whiskers", breed="Tabby", snack="Tuna"))
    second = memory_repo.create(Cat(name="Mittens", breed="Siamese", snack="Chicken"))
    assert (first.id, second.id) == (1, 2)
    assert memory_repo.list_all() == [first, second]
    assert memory_repo.get_by_id(2) == second


def test_create_ignores_caller_supplied_id(memory_repo):
    stored = memory_repo.create(Cat(name="Whiskers", breed="Tabby", snack="Tuna", id=42))
    assert stored.id == 1
    with pytest.raises(NotFoundError):
        memory_repo.get_by_id(42)


def test_unknown_id_raises_not_found(memory_repo):
    memory_repo.create(Cat(name="Whiskers", breed="Tabby", snack="Tuna"))
    with pytest.raises(NotFoundError):
        memory_repo.get_by_id(2)


def test_instances_do_not_share_state(memory_repo):
    memory_repo.create(Cat(name="Whiskers", breed="Tabby", snack="Tuna"))
    other = InMemoryCatRepository()
    assert other.list_all() == []
    assert other.create(Cat(name="Mittens", breed="Siamese", snack="Chicken")).id == 1


def test_concurrent_creates_get_distinct_ids(memory_repo):
    def _create(i: int) -> int:
        return memory_repo.create(Cat(name=f"cat-{i}", breed="Mixed", snack="Kibble")).id

    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(_create, range(500)))

    assert len(set(ids)) == 500
    assert sorted(ids) == list(range(1, 501))
    assert memory_repo.count() == 500
