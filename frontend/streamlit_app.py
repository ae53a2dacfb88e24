import streamlit as st
from dataclasses import dataclass
from typing import Callable, Dict, List

from utils import API_BASE_URL
from modules import display_home_page, display_poco_conversion_page

st.set_page_config(page_title="SQL to POCO", layout="wide")


@dataclass
class Page:
    title: str
    render: Callable[[], None]


# Registry of available pages – add/remove entries as needed
PAGES: List[Page] = [
    Page("Home", display_home_page),
    Page("Generate Data Objects", display_poco_conversion_page),
]

# Utility: map title -> Page for quick lookup
_PAGE_MAP: Dict[str, Page] = {p.title: p for p in PAGES}


def _render_sidebar():
    """Render sidebar navigation dynamically from the PAGES registry."""
    for page in PAGES:
        btn_key = f"nav_btn_{page.title.replace(' ', '_').lower()}"
        btn_type = "primary" if st.session_state.current_page == page.title else "secondary"
        if st.sidebar.button(page.title, key=btn_key, type=btn_type, use_container_width=True):
            st.session_state.current_page = page.title
            st.rerun()
    st.sidebar.caption(f"API: {API_BASE_URL}")


# ------------------------------------------------------------------
# Main application dispatch
# ------------------------------------------------------------------

if 'current_page' not in st.session_state or st.session_state.current_page not in _PAGE_MAP:
    st.session_state.current_page = "Home"

_render_sidebar()
_PAGE_MAP[st.session_state.current_page].render()
