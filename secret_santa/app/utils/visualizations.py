"""Visualization functions for creating Plotly charts."""

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st


@st.cache_data
def create_exclusion_heatmap(matrix_df: pd.DataFrame) -> go.Figure:
    """Create a heatmap of forbidden giver -> receiver pairs."""
    fig = px.imshow(
        matrix_df,
        labels=dict(x="Receiver", y="Giver", color="Forbidden"),
        aspect="auto",
        color_continuous_scale="Reds",
        zmin=0,
        zmax=1,
    )
    fig.update_layout(title="Exclusion Matrix", coloraxis_showscale=False)
    return fig


@st.cache_data
def create_allowed_receivers_chart(allowed_df: pd.DataFrame) -> go.Figure:
    """Create a bar chart of allowed receivers per giver, most constrained first."""
    fig = px.bar(
        allowed_df,
        x="Giver",
        y="Allowed Receivers",
        title="Allowed Receivers per Giver",
        color="Allowed Receivers",
        color_continuous_scale="RdYlGn",
    )
    fig.add_hline(
        y=1.0, line_dash="dash", line_color="red", annotation_text="Only one choice"
    )
    return fig


@st.cache_data
def create_pair_probability_heatmap(frequency_df: pd.DataFrame) -> go.Figure:
    """Create a heatmap of how likely each giver is to draw each receiver."""
    fig = px.imshow(
        frequency_df,
        labels=dict(x="Receiver", y="Giver", color="Probability"),
        aspect="auto",
        color_continuous_scale="Greens",
        zmin=0,
        zmax=1,
        text_auto=".0%",
    )
    fig.update_layout(title="Pair Probability Across All Valid Pairings")
    return fig
