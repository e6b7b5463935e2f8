"""Exclusion index construction and participant validation."""

from collections import Counter
from collections.abc import Iterable, Sequence

from loguru import logger

from secret_santa.types import Exclusion

ExclusionLike = Exclusion | tuple[str, str]


class DuplicateParticipantError(ValueError):
    """Raised when the participant list names someone more than once."""


def validate_participants(participants: Sequence[str]) -> None:
    """Reject participant lists with duplicate identifiers.

    Raises:
        DuplicateParticipantError: If any identifier appears more than once.
    """
    counts = Counter(participants)
    duplicates = sorted(p for p, count in counts.items() if count > 1)
    if duplicates:
        raise DuplicateParticipantError(
            f"Duplicate participants: {', '.join(duplicates)}"
        )


def _as_pair(rule: ExclusionLike) -> tuple[str, str]:
    if isinstance(rule, Exclusion):
        return rule.giver, rule.receiver
    giver, receiver = rule
    return giver, receiver


def build_exclusion_index(
    participants: Sequence[str], exclusions: Iterable[ExclusionLike]
) -> dict[str, set[str]]:
    """Build giver -> forbidden receivers for every participant.

    Every participant gets an entry, possibly empty. Rules whose giver is not a
    participant are dropped. Receivers are not checked against the participant
    list; one that is unknown can never be matched.

    Args:
        participants: Participant identifiers.
        exclusions: ``Exclusion`` objects or ``(giver, receiver)`` tuples.

    Returns:
        Mapping of each participant to the set of receivers they may not draw.
    """
    index: dict[str, set[str]] = {participant: set() for participant in participants}

    for rule in exclusions:
        giver, receiver = _as_pair(rule)
        if giver not in index:
            logger.debug("Ignoring exclusion for unknown giver {giver}", giver=giver)
            continue
        if receiver not in index:
            logger.warning(
                "Exclusion {giver} -> {receiver} names an unknown receiver",
                giver=giver,
                receiver=receiver,
            )
        index[giver].add(receiver)

    return index
