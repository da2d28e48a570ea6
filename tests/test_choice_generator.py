import pytest

from flag_quiz.core.errors import InsufficientCatalogError
from flag_quiz.core.models import Country
from flag_quiz.core.services.choice_generator import generate_choices, max_choice_count

# Chi-square critical value for 3 degrees of freedom at p = 0.001.
CHI_SQUARE_CRITICAL_DF3 = 16.266


def test_choices_contain_correct_once_without_duplicates(five_countries, rng):
    correct = five_countries[0]
    for _ in range(200):
        choices = generate_choices(five_countries, correct, 4, rng=rng)

        names = [c.name for c in choices]
        assert len(names) == 4
        assert names.count("A") == 1
        assert len(set(names)) == 4
        assert all(c in five_countries for c in choices)


def test_catalog_is_not_mutated(world_countries, rng):
    before = list(world_countries)

    generate_choices(world_countries, world_countries[3], 4, rng=rng)

    assert world_countries == before


def test_correct_position_is_uniform(world_countries, rng):
    trials = 4000
    k = 4
    correct = world_countries[0]
    counts = [0] * k
    for _ in range(trials):
        choices = generate_choices(world_countries, correct, k, rng=rng)
        counts[choices.index(correct)] += 1

    expected = trials / k
    chi_square = sum((observed - expected) ** 2 / expected for observed in counts)
    assert chi_square < CHI_SQUARE_CRITICAL_DF3, counts


def test_distractors_vary_between_calls(world_countries, rng):
    correct = world_countries[0]
    slates = {
        frozenset(c.name for c in generate_choices(world_countries, correct, 4, rng=rng))
        for _ in range(50)
    }

    assert len(slates) > 10


@pytest.mark.parametrize("k", [5, 6])
def test_too_many_choices_raise(five_countries, k):
    with pytest.raises(InsufficientCatalogError):
        generate_choices(five_countries, five_countries[0], k)


def test_correct_must_be_in_catalog(five_countries):
    with pytest.raises(ValueError):
        generate_choices(five_countries, Country("Z", "flags/z.svg"), 4)


@pytest.mark.parametrize("catalog_size, expected", [(0, 0), (1, 0), (2, 1), (5, 4), (30, 29)])
def test_max_choice_count_keeps_one_country_spare(catalog_size, expected):
    assert max_choice_count(catalog_size) == expected


def test_largest_allowed_slate_is_accepted(five_countries, rng):
    choices = generate_choices(five_countries, five_countries[2], max_choice_count(5), rng=rng)

    assert len(choices) == 4
