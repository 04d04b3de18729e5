"""
UI utility functions for consistent component rendering across pages.
"""

import streamlit as st

from src.app_config import DEFAULT_CONFIG_PATH, get_db_path, load_config
from src.design_system import (
    get_colors,
    get_empty_state_html,
    get_metric_card_html,
)
from src.workout_db import WorkoutDB


@st.cache_resource
def get_app_config(config_path=DEFAULT_CONFIG_PATH):
    """Config loaded once per server process; a missing file means defaults."""
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return {}


def get_workout_db():
    """
    Open the session store for this script run.

    Returns:
        WorkoutDB: Store with the schema initialized
    """
    db = WorkoutDB(get_db_path(get_app_config()))
    db.init_schema()
    return db


def current_user():
    """Signed-in user dict from session state, or None."""
    return st.session_state.get('user')


def render_page_header(title, subtitle=None, title_icon=""):
    """
    Render standardized page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle text
        title_icon: Optional emoji/icon before title
    """
    icon_text = f"{title_icon} " if title_icon else ""
    st.markdown(
        f'<div class="main-header">{icon_text}{title}</div>',
        unsafe_allow_html=True
    )
    if subtitle:
        st.markdown(
            f'<div class="sub-header">{subtitle}</div>',
            unsafe_allow_html=True
        )


def metric_card(label, value, icon=""):
    colors = get_colors()
    st.markdown(get_metric_card_html(label, value, icon, colors), unsafe_allow_html=True)


def empty_state(icon, title, description):
    """
    Render consistent empty state component.

    Args:
        icon: Emoji icon
        title: Empty state title
        description: Empty state description
    """
    colors = get_colors()
    html = get_empty_state_html(icon, title, description, colors)
    st.markdown(html, unsafe_allow_html=True)


def action_button(label, page_name, icon="", accent=False, **kwargs):
    """
    Navigation button that switches the current page.

    Args:
        label: Button label
        page_name: Target page
        icon: Optional icon
        accent: Whether to use accent color
        **kwargs: Additional button parameters
    """
    button_text = f"{icon} {label}".strip() if icon else label

    if accent and 'type' not in kwargs:
        kwargs['type'] = 'primary'

    if st.button(button_text, **kwargs):
        st.session_state.current_page = page_name
        st.rerun()
        return True
    return False
