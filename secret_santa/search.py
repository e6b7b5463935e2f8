"""Backtracking search over every valid giver -> receiver assignment."""

from collections.abc import Mapping, Sequence

from loguru import logger

from secret_santa.types import Pairing


class PairingSearch:
    """
    Exhaustive enumerator of valid Secret Santa pairings.

    Givers are processed in participant order, one position per recursion
    level. At each level every still-available receiver is tried, skipping the
    giver themself and anyone in the giver's forbidden set. A complete
    assignment is valid by construction and is copied into the results.

    The search visits up to (n-1)! leaves, so it is only practical for small
    groups.

    Attributes:
        participants: Ordered participant IDs (givers and receivers)
        exclusion_index: Giver -> set of forbidden receivers, one entry per participant
    """

    def __init__(
        self,
        participants: Sequence[str],
        exclusion_index: Mapping[str, set[str]],
    ):
        self.participants = list(participants)
        self.exclusion_index = exclusion_index

        # Search state (reset on every enumerate call)
        self._current: Pairing = {}
        self._available: dict[str, bool] = {}
        self._solutions: list[Pairing] = []

    def _search(self, giver_index: int) -> None:
        if giver_index == len(self.participants):
            self._solutions.append(dict(self._current))
            return

        giver = self.participants[giver_index]
        forbidden = self.exclusion_index[giver]

        for receiver, is_available in self._available.items():
            if not is_available:
                continue
            if receiver == giver or receiver in forbidden:
                continue

            self._current[giver] = receiver
            self._available[receiver] = False

            self._search(giver_index + 1)

            self._available[receiver] = True
            del self._current[giver]

    def enumerate(self) -> list[Pairing]:
        """
        Find every valid pairing.

        Returns:
            All pairings in traversal order; empty if none exist. An empty
            participant list has exactly one (empty) pairing.
        """
        self._current = {}
        self._available = {participant: True for participant in self.participants}
        self._solutions = []

        self._search(0)

        logger.debug(
            "Enumerated {count} pairings for {n} participants",
            count=len(self._solutions),
            n=len(self.participants),
        )
        return self._solutions


def enumerate_pairings(
    participants: Sequence[str],
    exclusion_index: Mapping[str, set[str]],
) -> list[Pairing]:
    """
    Enumerate every valid pairing of participants.

    Thin wrapper around PairingSearch.

    Parameters:
        participants: Ordered participant IDs
        exclusion_index: Giver -> forbidden receivers, as built by build_exclusion_index

    Returns:
        List of giver -> receiver mappings
    """
    return PairingSearch(participants, exclusion_index).enumerate()
