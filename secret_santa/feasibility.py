"""ILP feasibility check: does any valid pairing exist at all?"""

from collections.abc import Mapping, Sequence

from loguru import logger
from pulp import PULP_CBC_CMD, LpMaximize, LpProblem, LpVariable, lpSum
from pulp.constants import LpStatusInfeasible, LpStatusOptimal

from secret_santa.types import FeasibilityStatus


def _allowed_pairs(
    participants: Sequence[str], exclusion_index: Mapping[str, set[str]]
) -> list[tuple[int, int]]:
    """Index pairs (giver, receiver) that a pairing may use."""
    return [
        (g, r)
        for g, giver in enumerate(participants)
        for r, receiver in enumerate(participants)
        if g != r and receiver not in exclusion_index.get(giver, set())
    ]


def check_feasibility(
    participants: Sequence[str],
    exclusion_index: Mapping[str, set[str]],
) -> FeasibilityStatus:
    """
    Decide whether at least one valid pairing exists, without enumerating.

    The draw is an assignment problem: one binary variable per allowed
    (giver, receiver) pair, each giver gives exactly once and each participant
    receives exactly once.

    Parameters:
        participants: Ordered participant IDs
        exclusion_index: Giver -> forbidden receivers

    Returns:
        FeasibilityStatus of the model
    """
    n = len(participants)
    if n == 0:
        return FeasibilityStatus.FEASIBLE

    pairs = _allowed_pairs(participants, exclusion_index)

    # Someone with no allowed partner on either side makes the model trivially infeasible
    givers = {g for g, _ in pairs}
    receivers = {r for _, r in pairs}
    if len(givers) < n or len(receivers) < n:
        logger.info("Feasibility: a participant has no allowed partner")
        return FeasibilityStatus.INFEASIBLE

    model = LpProblem("Secret-Santa-Feasibility", LpMaximize)

    # Index-based names; participant IDs may not be valid LP identifiers
    x = {(g, r): LpVariable(f"x_{g}_{r}", cat="Binary") for g, r in pairs}

    model += lpSum(x.values())

    for g in range(n):
        model += lpSum(x[g, r] for gg, r in pairs if gg == g) == 1
    for r in range(n):
        model += lpSum(x[g, r] for g, rr in pairs if rr == r) == 1

    status_code = model.solve(PULP_CBC_CMD(msg=False))

    status_map = {
        LpStatusOptimal: FeasibilityStatus.FEASIBLE,
        LpStatusInfeasible: FeasibilityStatus.INFEASIBLE,
    }
    status = status_map.get(status_code, FeasibilityStatus.NOT_SOLVED)
    logger.info("Feasibility: {status}", status=status.value)
    return status
