"""Type definitions for the Secret Santa draw."""

from dataclasses import dataclass, field
from enum import Enum

Pairing = dict[str, str]  # giver -> receiver


class DrawStatus(Enum):
    """Outcome of a draw."""

    FOUND = "Found"
    NO_VALID_PAIRING = "No Valid Pairing"


class FeasibilityStatus(Enum):
    """Status of the ILP feasibility check."""

    FEASIBLE = "Feasible"
    INFEASIBLE = "Infeasible"
    NOT_SOLVED = "Not Solved"


@dataclass(frozen=True)
class Exclusion:
    """A giver that must not be assigned the receiver."""

    giver: str
    receiver: str


@dataclass
class SantaConfig:
    """Participants and exclusion rules for one draw."""

    participants: list[str]
    exclusions: list[Exclusion] = field(default_factory=list)


@dataclass
class DrawResult:
    """Complete result of a draw."""

    status: DrawStatus
    solution_count: int
    pairs: list[tuple[str, str]]  # in participant order
    solutions: list[Pairing] = field(default_factory=list, repr=False)
