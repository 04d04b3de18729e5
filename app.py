#!/usr/bin/env python3
"""
Zeus Fitness - Streamlit Web Interface
Main entry point for the web application.
"""

import importlib
import os
import sys

import streamlit as st
from dotenv import load_dotenv

# Ensure pages directory is in Python path
sys.path.insert(0, os.path.dirname(__file__))

# Only reload modules in development mode (set DEV_MODE=1 in environment)
DEV_MODE = os.environ.get('DEV_MODE', '0') == '1'

load_dotenv()

try:
    import pages

    home = importlib.import_module('pages.home')
    start_workout = importlib.import_module('pages.start_workout')
    workout_history = importlib.import_module('pages.workout_history')
    profile = importlib.import_module('pages.profile')

    if DEV_MODE:
        importlib.reload(home)
        importlib.reload(start_workout)
        importlib.reload(workout_history)
        importlib.reload(profile)
except ImportError as e:
    st.error(f"Critical error loading pages: {e}")
    st.code(f"Python path: {sys.path}")
    st.stop()

from src.ui_utils import get_app_config, get_workout_db
from src.workout_db import AuthError

APP_TITLE = (get_app_config().get('app', {}) or {}).get('title', 'Zeus Fitness')

st.set_page_config(
    page_title=f"⚡ {APP_TITLE}",
    page_icon="⚡",
    layout="centered",
    initial_sidebar_state="expanded"
)

PAGES = {
    'home': ("🏠 Home", home),
    'start_workout': ("⚡ Start Workout", start_workout),
    'history': ("📋 History", workout_history),
    'profile': ("👤 Profile", profile),
}


def check_login():
    """Returns True once a user has signed in during this browser session."""
    if st.session_state.get('user'):
        return True

    st.markdown(f"## ⚡ {APP_TITLE}")
    sign_in_tab, sign_up_tab = st.tabs(["Sign in", "Sign up"])

    with sign_in_tab:
        email = st.text_input("Email", key="sign_in_email")
        password = st.text_input("Password", type="password", key="sign_in_password")
        if st.button("Sign in", type="primary"):
            db = get_workout_db()
            try:
                st.session_state.user = db.sign_in(email, password)
            except AuthError as e:
                st.error(str(e))
            else:
                st.rerun()
            finally:
                db.close()

    with sign_up_tab:
        email = st.text_input("Email", key="sign_up_email")
        password = st.text_input("Password", type="password", key="sign_up_password")
        if st.button("Create account"):
            db = get_workout_db()
            try:
                db.sign_up(email, password)
            except AuthError as e:
                st.error(str(e))
            else:
                st.success("Account created. You can sign in now.")
            finally:
                db.close()

    return False


if not check_login():
    st.stop()

# Initialize session state
if 'current_page' not in st.session_state:
    st.session_state.current_page = 'home'
if 'dark_mode' not in st.session_state:
    st.session_state.dark_mode = False

if st.session_state.dark_mode:
    st.markdown('<div data-theme="dark" style="display:none;"></div>', unsafe_allow_html=True)

st.markdown("""
    <style>
    .main-header {
        font-size: 2rem;
        font-weight: 700;
        margin-bottom: 0.5rem;
    }

    .sub-header {
        font-size: 1rem;
        color: #6E6E73;
        margin-bottom: 1.5rem;
    }

    @media (max-width: 768px) {
        .main-header {
            font-size: 1.5rem;
        }

        .stButton button {
            width: 100% !important;
        }
    }
    </style>
""", unsafe_allow_html=True)

with st.sidebar:
    st.markdown(f"# ⚡ {APP_TITLE}")
    st.markdown("---")

    for page_key, (label, _module) in PAGES.items():
        if st.button(label, use_container_width=True, key=f"nav_{page_key}",
                     type="primary" if st.session_state.current_page == page_key else "secondary"):
            st.session_state.current_page = page_key
            st.rerun()

    st.markdown("---")
    if st.button("Sign out", use_container_width=True):
        for key in ('user', 'draft_workout', 'selected_exercise'):
            st.session_state.pop(key, None)
        st.rerun()

PAGES.get(st.session_state.current_page, PAGES['home'])[1].show()
