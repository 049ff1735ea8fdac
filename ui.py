import math

import streamlit as st

def inject_css():
    try:
        with open("assets/styles.css", "r", encoding="utf-8") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)
    except OSError:
        pass

def header(title: str, subtitle: str = ""):
    st.markdown(f"## {title}")
    if subtitle:
        st.caption(subtitle)

def helptext(text: str):
    st.caption(text)

def format_currency(value: float) -> str:
    """$1,234.56 style, two decimals, sign in front."""
    if math.isnan(value):
        return "$nan"
    value = round(value, 2)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"

def delta_label(delta: float) -> str:
    return "Surplus" if delta >= 0 else "Deficit"

def kpi_card(col, caption: str, value: str, note: str = ""):
    extra = f"<div class='caption'>{note}</div>" if note else ""
    col.markdown(
        f"<div class='card'><div class='caption'>{caption}</div>"
        f"<div class='kpi'>{value}</div>{extra}</div>",
        unsafe_allow_html=True,
    )
