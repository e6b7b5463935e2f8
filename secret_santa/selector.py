"""Uniform random selection of one pairing."""

import random
from collections.abc import Sequence

from secret_santa.types import Pairing


def pick_pairing(
    solutions: Sequence[Pairing],
    participants: Sequence[str],
    rng: random.Random | None = None,
) -> list[tuple[str, str]] | None:
    """Pick one pairing uniformly at random and render it in participant order.

    Args:
        solutions: Every valid pairing.
        participants: Participant IDs in their original input order.
        rng: Random source; a freshly seeded ``random.Random`` when omitted.

    Returns:
        ``(giver, receiver)`` pairs in participant order, or None when there is
        no valid pairing to choose from.
    """
    if not solutions:
        return None

    if rng is None:
        rng = random.Random()

    selected = solutions[rng.randrange(len(solutions))]
    return [(giver, selected[giver]) for giver in participants]
