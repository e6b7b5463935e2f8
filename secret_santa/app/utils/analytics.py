"""Analytics functions for exclusion rules and solution sets."""

from collections import Counter

import pandas as pd
import streamlit as st

from secret_santa.types import DrawResult


@st.cache_data
def calculate_exclusion_matrix(
    participants: list[str], exclusion_index: dict[str, set[str]]
) -> pd.DataFrame:
    """Giver x receiver matrix: 1 where the pair is forbidden (self included)."""
    rows = {
        giver: [
            int(receiver == giver or receiver in exclusion_index.get(giver, set()))
            for receiver in participants
        ]
        for giver in participants
    }
    return pd.DataFrame.from_dict(rows, orient="index", columns=participants)


@st.cache_data
def calculate_allowed_receivers(
    participants: list[str], exclusion_index: dict[str, set[str]]
) -> pd.DataFrame:
    """Count how many receivers each giver may still draw."""
    forbidden = {
        giver: {giver} | (exclusion_index.get(giver, set()) & set(participants))
        for giver in participants
    }
    df = pd.DataFrame(
        [(giver, len(participants) - len(forbidden[giver])) for giver in participants],
        columns=["Giver", "Allowed Receivers"],
    )
    return df.sort_values("Allowed Receivers").reset_index(drop=True)


@st.cache_data
def calculate_pair_frequency(
    participants: list[str], solutions: list[dict[str, str]]
) -> pd.DataFrame:
    """Share of all valid pairings in which each giver draws each receiver."""
    counts: Counter[tuple[str, str]] = Counter()
    for pairing in solutions:
        counts.update(pairing.items())

    total = len(solutions) or 1
    rows = {
        giver: [counts[giver, receiver] / total for receiver in participants]
        for giver in participants
    }
    return pd.DataFrame.from_dict(rows, orient="index", columns=participants)


def get_pairing_csv(result: DrawResult) -> str:
    """Generate CSV content for the selected pairing."""
    df = pd.DataFrame(result.pairs, columns=["giver", "receiver"])
    return df.to_csv(index=False)
