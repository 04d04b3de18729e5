"""
Home page - Training totals and the current day streak
"""

import streamlit as st

from src.analytics import WorkoutAnalytics
from src.design_system import get_colors, get_streak_card_html
from src.ui_utils import (
    action_button,
    current_user,
    empty_state,
    get_workout_db,
    metric_card,
    render_page_header,
)


def format_volume(total_weight):
    """Format lifted volume, switching to tonnes past 10,000 kg."""
    total_weight = total_weight or 0
    if total_weight >= 10000:
        return f"{total_weight / 1000:,.1f} t"
    return f"{total_weight:,.0f} kg"


def greeting_name(profile, user):
    """Display name from the profile, else the part of the email before '@'."""
    name = (profile or {}).get('display_name')
    if name:
        return name
    email = (user or {}).get('email') or ''
    return email.split('@')[0] or 'Athlete'


def show():
    """Render the home dashboard"""
    user = current_user()
    db = get_workout_db()

    try:
        profile = db.get_profile(user['id'])
        render_page_header(
            f"Welcome back, {greeting_name(profile, user)}",
            "Your training at a glance",
        )

        analytics = WorkoutAnalytics(db)
        analytics.load_historical_data(user['id'])
    finally:
        db.close()

    if not analytics.historical_data:
        empty_state("🏋️", "No Workouts Yet", "Generate and save your first workout to start tracking.")
        action_button("Start Workout", "start_workout", icon="⚡", accent=True)
        return

    stats = analytics.get_stats()
    streak = analytics.get_streak()

    st.markdown(get_streak_card_html(streak, get_colors()), unsafe_allow_html=True)
    st.markdown("")

    c1, c2, c3 = st.columns(3)
    with c1:
        metric_card("Exercises", f"{stats['totalExercises']:,}", icon="💪")
    with c2:
        metric_card("Sets", f"{stats['totalSets']:,}", icon="🔁")
    with c3:
        metric_card("Volume", format_volume(stats['totalWeight']), icon="🏋️")

    st.markdown("---")
    st.caption(f"{len(analytics.historical_data)} workouts saved")
    action_button("Start Workout", "start_workout", icon="⚡", accent=True)
