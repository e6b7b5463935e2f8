"""Config Explorer UI component."""

import pandas as pd
import streamlit as st

from secret_santa.app.utils.analytics import (
    calculate_allowed_receivers,
    calculate_exclusion_matrix,
)
from secret_santa.app.utils.visualizations import (
    create_allowed_receivers_chart,
    create_exclusion_heatmap,
)
from secret_santa.types import SantaConfig


def render_explorer(config: SantaConfig, exclusion_index: dict[str, set[str]]) -> None:
    """Render the config explorer section with multiple tabs."""
    st.header("📋 Config Explorer")

    participants = config.participants
    if not participants:
        st.warning("The config lists no participants.")
        return

    explorer_tabs = st.tabs(
        ["Participants", "Exclusions", "Allowed Receivers", "Exclusion Matrix"]
    )

    with explorer_tabs[0]:
        st.subheader("Participants")
        st.dataframe(
            pd.DataFrame({"Participant": participants}),
            use_container_width=True,
            hide_index=True,
        )

    with explorer_tabs[1]:
        st.subheader("Exclusion Rules")
        if config.exclusions:
            exclusions_df = pd.DataFrame(
                [(rule.giver, rule.receiver) for rule in config.exclusions],
                columns=["Giver", "Must Not Draw"],
            )
            st.dataframe(exclusions_df, use_container_width=True, hide_index=True)

            unknown = sorted(
                {rule.receiver for rule in config.exclusions} - set(participants)
            )
            if unknown:
                st.warning(f"Exclusions name unknown receivers: {', '.join(unknown)}")
        else:
            st.info("No exclusion rules; anyone may draw anyone but themself.")

    with explorer_tabs[2]:
        st.subheader("Allowed Receivers")
        allowed_df = calculate_allowed_receivers(participants, exclusion_index)

        col1, col2 = st.columns([1, 2])

        with col1:
            st.dataframe(allowed_df, use_container_width=True, hide_index=True)

        with col2:
            fig = create_allowed_receivers_chart(allowed_df)
            st.plotly_chart(fig, use_container_width=True)

        locked_out = allowed_df[allowed_df["Allowed Receivers"] == 0]["Giver"].tolist()
        if locked_out:
            st.error(f"No one left to draw for: {', '.join(locked_out)}")

    with explorer_tabs[3]:
        st.subheader("Exclusion Matrix")
        st.markdown("Red cells are pairs that can never be drawn, including self-pairs.")
        matrix_df = calculate_exclusion_matrix(participants, exclusion_index)
        fig = create_exclusion_heatmap(matrix_df)
        st.plotly_chart(fig, use_container_width=True)
