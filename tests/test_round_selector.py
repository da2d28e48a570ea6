import pytest

from flag_quiz.core.errors import InsufficientCatalogError
from flag_quiz.core.services.round_selector import select_round


@pytest.mark.parametrize("n", [1, 3, 10, 30])
def test_select_round_returns_n_distinct_catalog_countries(world_countries, rng, n):
    selected = select_round(world_countries, n, rng=rng)

    assert len(selected) == n
    assert len({c.name for c in selected}) == n
    assert all(c in world_countries for c in selected)


def test_default_source_is_used_without_rng(five_countries):
    selected = select_round(five_countries, 3)

    assert len({c.name for c in selected}) == 3


def test_order_follows_draws_not_catalog(world_countries, rng):
    orders = {tuple(c.name for c in select_round(world_countries, 5, rng=rng)) for _ in range(20)}

    assert len(orders) > 1


def test_too_many_rounds_fails_before_drawing(five_countries):
    class ExplodingRandom:
        def randrange(self, _stop):
            raise AssertionError("draw loop must not run")

    with pytest.raises(InsufficientCatalogError):
        select_round(five_countries, 6, rng=ExplodingRandom())


def test_zero_rounds_is_rejected(five_countries):
    with pytest.raises(ValueError):
        select_round(five_countries, 0)
