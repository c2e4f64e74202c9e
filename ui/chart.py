import plotly.graph_objects as go
import streamlit as st

from payoff.calculators import Projection
from payoff.presets import SERIES_COLORS


def build_payoff_figure(projection: Projection) -> go.Figure:
    fig = go.Figure()
    for idx, s in enumerate(projection.series):
        fig.add_trace(
            go.Scatter(
                x=projection.labels,
                y=s.data,
                mode="lines+markers",
                name=s.name,
                line=dict(color=SERIES_COLORS[idx % len(SERIES_COLORS)]),
            )
        )
    fig.update_layout(
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
        xaxis_title="Month",
        yaxis_title="Principal ($)",
    )
    fig.update_yaxes(rangemode="tozero", tickprefix="$")
    return fig


def render_payoff_chart(projection: Projection) -> None:
    st.plotly_chart(build_payoff_figure(projection), use_container_width=True)
