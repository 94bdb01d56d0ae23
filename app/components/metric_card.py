"""Metric card rows shared by the Dashboard, Insurance and Analytics pages."""

from typing import Optional, Sequence, Tuple

import streamlit as st

# (title, value, subtitle)
Card = Tuple[str, str, Optional[str]]


def render_metric_row(cards: Sequence[Card]):
    """Render a row of st.metric cards with optional captions.

    Args:
        cards: (title, formatted value, subtitle or None) per column.
    """
    cols = st.columns(len(cards))
    for col, (title, value, subtitle) in zip(cols, cards):
        with col:
            st.metric(title, value)
            if subtitle:
                st.caption(subtitle)
