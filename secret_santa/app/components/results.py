"""Results Dashboard UI component."""

import pandas as pd
import streamlit as st

from secret_santa.app.utils.analytics import calculate_pair_frequency, get_pairing_csv
from secret_santa.app.utils.visualizations import create_pair_probability_heatmap
from secret_santa.types import DrawResult, DrawStatus


def render_results_dashboard(result: DrawResult, participants: list[str]) -> None:
    """Render the results dashboard with the selected pairing and detail tabs."""
    st.header("📈 Results")

    if result.status == DrawStatus.FOUND:
        st.success(f"✅ Draw Status: **{result.status.value}**")
    else:
        st.error(f"❌ Draw Status: **{result.status.value}**")

    col1, col2 = st.columns(2)

    with col1:
        st.metric("Valid Pairings", result.solution_count)

    with col2:
        st.metric("Participants", len(participants))

    if result.status == DrawStatus.NO_VALID_PAIRING:
        st.warning("No valid pairings could be found with these rules. Try removing exclusions.")
        return

    result_tabs = st.tabs(["Selected Pairing", "Giver Lookup", "Pair Probabilities"])

    with result_tabs[0]:
        st.subheader("Selected Pairing")
        pairs_df = pd.DataFrame(result.pairs, columns=["Giver", "Receiver"])
        st.dataframe(pairs_df, use_container_width=True, hide_index=True)

    with result_tabs[1]:
        _render_giver_lookup_tab(result, participants)

    with result_tabs[2]:
        st.subheader("Pair Probabilities")
        st.markdown(
            "Each cell is the share of all valid pairings in which the giver draws "
            "the receiver; every draw is uniform over those pairings."
        )
        frequency_df = calculate_pair_frequency(participants, result.solutions)
        fig = create_pair_probability_heatmap(frequency_df)
        st.plotly_chart(fig, use_container_width=True)

    st.header("📥 Download Pairing")

    st.download_button(
        label="Download Pairing CSV",
        data=get_pairing_csv(result),
        file_name="secret_santa_pairing.csv",
        mime="text/csv",
    )


def _render_giver_lookup_tab(result: DrawResult, participants: list[str]) -> None:
    """Render the Giver Lookup tab."""
    st.subheader("Giver Lookup")

    selected = st.selectbox("Select a giver", participants, key="giver_lookup")

    if selected:
        receiver = dict(result.pairs).get(selected)
        st.write(f"**{selected}** 🎁 --> **{receiver}**")
