"""Drawing the flags for one quiz session."""

from __future__ import annotations

from collections.abc import Sequence
import random
import secrets

from flag_quiz.core.errors import InsufficientCatalogError
from flag_quiz.core.models import Country


def select_round(
    catalog: Sequence[Country],
    n: int,
    rng: random.Random | None = None,
) -> list[Country]:
    """Return ``n`` distinct countries in the order they were drawn.

    Countries are drawn one at a time with a uniformly random index and kept
    only if they were not drawn before. ``rng`` defaults to a
    cryptographically strong source.
    """
    if n < 1:
        raise ValueError("A quiz needs at least one flag.")
    if n > len(catalog):
        raise InsufficientCatalogError(n, len(catalog), what="flags")

    rng = rng or secrets.SystemRandom()
    selected: list[Country] = []
    selected_names: set[str] = set()
    while len(selected) < n:
        candidate = catalog[rng.randrange(len(catalog))]
        if candidate.name not in selected_names:
            selected_names.add(candidate.name)
            selected.append(candidate)
    return selected
