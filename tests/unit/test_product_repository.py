import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from catalog.core.config import IdPolicy
from catalog.domain.models import Product, ProductCreate
from catalog.domain.ports import ProductNotFoundError
from catalog.repositories.product_repository import InMemoryProductRepository
from catalog.repositories.seed import SEED_PRODUCTS


def _make_create(name: str = "Widget", price: float = 9.5, product_id: int | None = None) -> ProductCreate:
    return ProductCreate(
        id=product_id,
        name=name,
        price=price,
        description=f"{name} description",
        image=f"https://example.com/{name.lower()}.png",
    )


@pytest.fixture
def repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()


# ---------------------------------------------------------------------------
# list / get
# ---------------------------------------------------------------------------


def test_empty_store_lists_nothing(repo: InMemoryProductRepository) -> None:
    assert repo.list() == []
    assert len(repo) == 0


def test_seeded_store_keeps_order() -> None:
    repo = InMemoryProductRepository(products=SEED_PRODUCTS)
    assert [p.id for p in repo.list()] == list(range(1, 11))
    assert repo.get(1).name == "Smart Thermostat"


def test_duplicate_seed_ids_are_rejected() -> None:
    product = SEED_PRODUCTS[0]
    with pytest.raises(ValueError, match="Duplicate product id 1"):
        InMemoryProductRepository(products=[product, product])


def test_list_is_idempotent(repo: InMemoryProductRepository) -> None:
    repo.insert(_make_create("A"))
    repo.insert(_make_create("B"))
    assert repo.list() == repo.list()


def test_list_returns_snapshot(repo: InMemoryProductRepository) -> None:
    repo.insert(_make_create("A"))
    snapshot = repo.list()
    repo.insert(_make_create("B"))
    assert len(snapshot) == 1
    assert len(repo.list()) == 2


def test_get_missing_raises_not_found(repo: InMemoryProductRepository) -> None:
    with pytest.raises(ProductNotFoundError) as exc_info:
        repo.get(42)
    assert exc_info.value.product_id == 42


def test_find_by_id_returns_none_when_missing(repo: InMemoryProductRepository) -> None:
    assert repo.find_by_id(1) is None


# ---------------------------------------------------------------------------
# insert
# ---------------------------------------------------------------------------


def test_insert_round_trip(repo: InMemoryProductRepository) -> None:
    candidate = _make_create("Lamp", price=12.25)
    stored = repo.insert(candidate)

    fetched = repo.get(stored.id)
    assert fetched == stored
    assert fetched.model_dump(exclude={"id"}) == candidate.model_dump(exclude={"id"})


def test_insert_overwrites_client_id(repo: InMemoryProductRepository) -> None:
    stored = repo.insert(_make_create("Lamp", product_id=999))
    assert stored.id == 1
    assert repo.find_by_id(999) is None


def test_insert_continues_after_seed() -> None:
    repo = InMemoryProductRepository(products=SEED_PRODUCTS)
    assert repo.insert(_make_create()).id == 11


# ---------------------------------------------------------------------------
# replace
# ---------------------------------------------------------------------------


def test_replace_changes_fields_but_not_identity(repo: InMemoryProductRepository) -> None:
    repo.insert(_make_create("A"))
    second = repo.insert(_make_create("B"))
    repo.insert(_make_create("C"))

    replacement = Product(
        id=second.id, name="B2", price=0.5, description="new", image="https://example.com/b2.png"
    )
    result = repo.replace(replacement)

    assert result == replacement
    assert len(repo) == 3
    # position is preserved
    assert [p.name for p in repo.list()] == ["A", "B2", "C"]


def test_replace_missing_raises_not_found(repo: InMemoryProductRepository) -> None:
    repo.insert(_make_create("A"))
    with pytest.raises(ProductNotFoundError):
        repo.replace(Product(id=7, name="X", price=1.0, description="", image=""))
    assert [p.name for p in repo.list()] == ["A"]


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------


def test_delete_removes_exactly_one(repo: InMemoryProductRepository) -> None:
    first = repo.insert(_make_create("A"))
    repo.insert(_make_create("B"))

    repo.delete(first.id)

    assert len(repo) == 1
    with pytest.raises(ProductNotFoundError):
        repo.get(first.id)
    assert [p.name for p in repo.list()] == ["B"]


def test_delete_missing_raises_not_found(repo: InMemoryProductRepository) -> None:
    with pytest.raises(ProductNotFoundError):
        repo.delete(1)


# ---------------------------------------------------------------------------
# Id assignment policies
# ---------------------------------------------------------------------------


def test_monotonic_policy_never_reuses_ids() -> None:
    repo = InMemoryProductRepository(id_policy=IdPolicy.MONOTONIC)
    assert repo.insert(_make_create("A")).id == 1
    assert repo.insert(_make_create("B")).id == 2
    repo.delete(1)
    assert repo.insert(_make_create("C")).id == 3


def test_monotonic_policy_after_deleting_last() -> None:
    repo = InMemoryProductRepository(id_policy=IdPolicy.MONOTONIC)
    repo.insert(_make_create("A"))
    repo.insert(_make_create("B"))
    repo.delete(2)
    assert repo.insert(_make_create("C")).id == 3


def test_length_policy_reuses_id_of_deleted_last_record() -> None:
    repo = InMemoryProductRepository(id_policy=IdPolicy.LENGTH)
    assert repo.insert(_make_create("A")).id == 1
    assert repo.insert(_make_create("B")).id == 2
    repo.delete(2)
    assert repo.insert(_make_create("C")).id == 2


def test_length_policy_skips_ids_still_in_use() -> None:
    repo = InMemoryProductRepository(id_policy=IdPolicy.LENGTH)
    repo.insert(_make_create("A"))
    repo.insert(_make_create("B"))
    repo.delete(1)
    # count + 1 == 2 is still held by B
    assert repo.insert(_make_create("C")).id == 3
    assert sorted(p.id for p in repo.list()) == [2, 3]


@pytest.mark.parametrize("policy", list(IdPolicy))
def test_ids_stay_unique_under_random_operations(policy: IdPolicy) -> None:
    rng = random.Random(1234)
    repo = InMemoryProductRepository(products=SEED_PRODUCTS, id_policy=policy)

    for step in range(500):
        ids = [p.id for p in repo.list()]
        if ids and rng.random() < 0.4:
            repo.delete(rng.choice(ids))
        else:
            repo.insert(_make_create(f"P{step}"))
        ids = [p.id for p in repo.list()]
        assert len(ids) == len(set(ids))


def test_concurrent_inserts_get_distinct_ids() -> None:
    repo = InMemoryProductRepository()

    def insert_many(worker: int) -> list[int]:
        return [repo.insert(_make_create(f"W{worker}-{i}")).id for i in range(50)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(insert_many, range(8)))

    ids = [pid for batch in results for pid in batch]
    assert sorted(ids) == list(range(1, 401))
    assert len(repo) == 400
