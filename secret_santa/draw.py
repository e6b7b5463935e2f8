"""Draw orchestration: index, enumerate, pick."""

import random
from collections.abc import Iterable, Sequence

from loguru import logger

from secret_santa.exclusions import (
    ExclusionLike,
    build_exclusion_index,
    validate_participants,
)
from secret_santa.search import enumerate_pairings
from secret_santa.selector import pick_pairing
from secret_santa.types import DrawResult, DrawStatus, Pairing


class SecretSantaDraw:
    """
    One Secret Santa draw over a fixed set of participants and exclusions.

    Keeps the exclusion index and the full solution set around so callers
    (e.g. the dashboard) can inspect them after drawing.

    Attributes:
        participants: Participant IDs in input order
        exclusion_index: Giver -> forbidden receivers
    """

    def __init__(
        self,
        participants: Sequence[str],
        exclusions: Iterable[ExclusionLike] = (),
    ):
        """
        Validate inputs and build the exclusion index.

        Raises:
            DuplicateParticipantError: If a participant is listed twice
        """
        validate_participants(participants)

        self.participants = list(participants)
        self.exclusion_index = build_exclusion_index(self.participants, exclusions)
        self._solutions: list[Pairing] | None = None

    @property
    def solutions(self) -> list[Pairing]:
        """Every valid pairing, enumerated on first access."""
        if self._solutions is None:
            self._solutions = enumerate_pairings(self.participants, self.exclusion_index)
        return self._solutions

    def run(self, rng: random.Random | None = None) -> DrawResult:
        """Enumerate all pairings and pick one of them."""
        solutions = self.solutions
        pairs = pick_pairing(solutions, self.participants, rng=rng)

        if pairs is None:
            logger.info("No valid pairing for {n} participants", n=len(self.participants))
            return DrawResult(
                status=DrawStatus.NO_VALID_PAIRING,
                solution_count=0,
                pairs=[],
                solutions=solutions,
            )

        logger.info(
            "Selected one of {count} pairings for {n} participants",
            count=len(solutions),
            n=len(self.participants),
        )
        return DrawResult(
            status=DrawStatus.FOUND,
            solution_count=len(solutions),
            pairs=pairs,
            solutions=solutions,
        )


def run_draw(
    participants: Sequence[str],
    exclusions: Iterable[ExclusionLike] = (),
    rng: random.Random | None = None,
) -> DrawResult:
    """
    Run a complete Secret Santa draw.

    Parameters:
        participants: Participant IDs, in the order the result should list givers
        exclusions: Exclusion objects or (giver, receiver) tuples
        rng: Random source for the selection; entropy-seeded when omitted

    Returns:
        DrawResult with the solution count and the selected pairs
    """
    return SecretSantaDraw(participants, exclusions).run(rng=rng)
