"""Draw Controls UI component."""

import random

import streamlit as st

from secret_santa.draw import SecretSantaDraw
from secret_santa.feasibility import check_feasibility
from secret_santa.types import FeasibilityStatus

# Enumeration is factorial in the group size
LARGE_GROUP_WARNING = 10


def render_draw_controls(draw: SecretSantaDraw) -> None:
    """Render the draw settings and run buttons."""
    st.header("⚙️ Draw Settings")

    col1, col2, col3 = st.columns(3)

    with col1:
        seed = st.number_input(
            "Random Seed",
            min_value=0,
            max_value=9999,
            value=0,
            help="Set to 0 for a fresh random draw, or a positive number for a reproducible one.",
        )

    if len(draw.participants) > LARGE_GROUP_WARNING:
        st.warning(
            f"{len(draw.participants)} participants: enumerating every pairing may "
            "take a very long time. Check feasibility first."
        )

    with col2:
        if st.button("🔍 Check Feasibility"):
            with st.spinner("Solving feasibility model..."):
                status = check_feasibility(draw.participants, draw.exclusion_index)
            if status == FeasibilityStatus.FEASIBLE:
                st.success(f"Feasibility: **{status.value}**")
            else:
                st.error(f"Feasibility: **{status.value}**")

    with col3:
        if st.button("🎁 Run Draw", type="primary"):
            with st.spinner("Enumerating every valid pairing..."):
                rng = random.Random(seed) if seed > 0 else None
                st.session_state.result = draw.run(rng=rng)
