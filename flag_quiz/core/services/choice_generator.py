"""Building the answer choices shown under a flag."""

from __future__ import annotations

from collections.abc import Sequence
import random
import secrets

from flag_quiz.core.errors import InsufficientCatalogError
from flag_quiz.core.models import Country


def max_choice_count(catalog_size: int) -> int:
    """Largest slate a catalog of this size supports.

    One country is always held back so a shuffle can leave the correct answer
    out of the first k entries.
    """
    return max(0, catalog_size - 1)


def generate_choices(
    catalog: Sequence[Country],
    correct: Country,
    k: int,
    rng: random.Random | None = None,
) -> list[Country]:
    """Return ``k`` countries containing ``correct`` exactly once.

    The catalog is reshuffled until its first ``k`` entries do not include the
    correct country, then one uniformly chosen slot is replaced by it. The
    distractors are therefore unrelated to catalog order and the position of
    the correct answer is uniform over the slots.
    """
    if k < 1:
        raise ValueError("At least one choice is required.")
    if correct not in catalog:
        raise ValueError(f"'{correct.name}' is not part of the catalog.")
    if k > max_choice_count(len(catalog)):
        raise InsufficientCatalogError(k, max_choice_count(len(catalog)), what="choices")

    rng = rng or secrets.SystemRandom()
    shuffled = list(catalog)
    while True:
        rng.shuffle(shuffled)
        choices = shuffled[:k]
        if correct not in choices:
            break

    choices[rng.randrange(k)] = correct
    return choices
