"""Streamlit app for the Secret Santa draw."""

import tempfile
from pathlib import Path

import streamlit as st

from secret_santa.app.components.draw_controls import render_draw_controls
from secret_santa.app.components.explorer import render_explorer
from secret_santa.app.components.results import render_results_dashboard
from secret_santa.data_loader import load_config
from secret_santa.draw import SecretSantaDraw


def main():
    st.set_page_config(page_title="Secret Santa Draw", page_icon="🎁", layout="wide")

    st.title("🎁 Secret Santa Draw")
    st.markdown("Draw giver → receiver pairings uniformly among all that respect the exclusions.")

    # Initialize session state
    if "result" not in st.session_state:
        st.session_state.result = None
    if "config" not in st.session_state:
        st.session_state.config = None

    # --- File Upload Section ---
    st.header("📁 Upload Config")

    uploaded_file = st.file_uploader(
        "Upload a JSON or CSV config",
        type=["json", "csv"],
        help=(
            'JSON: {"participants": [...], "exclusions": [{"giver": ..., "receiver": ...}]}. '
            "CSV: participant as first column, excluded receivers after it."
        ),
    )

    if uploaded_file is not None:
        # Save to temp file for load_config
        suffix = Path(uploaded_file.name).suffix
        with tempfile.NamedTemporaryFile(delete=False, suffix=suffix, mode="wb") as tmp:
            tmp.write(uploaded_file.getvalue())
            tmp_path = tmp.name

        try:
            config = load_config(tmp_path)
        except ValueError as e:
            st.error(f"Error loading config: {e}")
            st.session_state.config = None
        else:
            if config != st.session_state.config:
                st.session_state.result = None
            st.session_state.config = config
            st.success(
                f"Loaded: **{len(config.participants)}** participants, "
                f"**{len(config.exclusions)}** exclusion rules"
            )

    config = st.session_state.config
    if config is None:
        st.info("Upload a config file to get started.")
        return

    draw = SecretSantaDraw(config.participants, config.exclusions)

    # --- Render Components ---
    render_explorer(config, draw.exclusion_index)

    render_draw_controls(draw)

    # --- Results Dashboard ---
    if st.session_state.result is not None:
        render_results_dashboard(st.session_state.result, config.participants)


if __name__ == "__main__":
    main()
