"""
Profile page - Display name and theme preference
"""

import streamlit as st

from src.ui_utils import current_user, get_workout_db, render_page_header


def show():
    """Render the profile page"""
    render_page_header("Profile", "How you appear around the app", "👤")

    user = current_user()
    db = get_workout_db()
    try:
        profile = db.get_profile(user['id'])

        st.caption(f"Signed in as {user['email']}")
        name = st.text_input("Display name", value=profile.get('display_name') or "")

        if st.button("Save", type="primary"):
            try:
                saved = db.save_display_name(user['id'], name)
            except ValueError as e:
                st.error(str(e))
            else:
                st.success(f"Saved. Hi, {saved}!")
    finally:
        db.close()

    st.markdown("---")
    st.toggle("Dark mode", key="dark_mode")
