"""
Workout History page - Past sessions by split, personal records, CSV export
"""

import streamlit as st

from src.analytics import group_by_split, personal_records
from src.design_system import get_colors, get_record_card_html
from src.history_export import EXPORT_FILENAME, history_to_csv
from src.ui_utils import current_user, empty_state, get_workout_db, render_page_header
from src.workout_records import parse_workout, session_date
from src.workout_splits import split_label


def summarize_session(session):
    """One-line label for a session expander: date, variant and exercise count."""
    parsed = parse_workout(session)
    day = session_date(session)
    date_label = day.strftime("%d/%m/%Y") if day else "No date"
    count = len(parsed.entries)
    label = f"{date_label} — {count} exercise{'s' if count != 1 else ''}"
    if parsed.variant:
        label += f" (Variant {parsed.variant})"
    return label


def show():
    """Render the workout history page"""
    render_page_header("Workout History", "Every saved session and your best lifts", "📋")

    user = current_user()
    db = get_workout_db()
    try:
        history = db.fetch_sessions(user['id'])
    finally:
        db.close()

    if not history:
        empty_state("", "No Workout History", "Saved workouts will show up here.")
        return

    col_prs, col_export = st.columns([3, 1])
    with col_export:
        st.download_button(
            "Export CSV",
            data=history_to_csv(history),
            file_name=EXPORT_FILENAME,
            mime="text/csv",
            use_container_width=True,
        )

    with col_prs:
        with st.expander("🏆 Personal Records"):
            records = personal_records(history)
            if not records:
                st.caption("Log weights on your sets to start setting records.")
            colors = get_colors()
            for name in sorted(records, key=str.lower):
                st.markdown(get_record_card_html(records[name], colors), unsafe_allow_html=True)

    st.markdown("---")

    for split, sessions in group_by_split(history).items():
        with st.expander(f"**{split_label(split)}** ({len(sessions)})"):
            for session in sessions:
                st.markdown(f"**{summarize_session(session)}**")
                for entry in parse_workout(session).entries:
                    if entry.sets:
                        sets_text = ", ".join(f"{s.weight} kg × {s.reps}" for s in entry.sets)
                    else:
                        sets_text = f"{entry.set_count} sets"
                    st.markdown(f"- {entry.exercise or 'Unnamed exercise'}: {sets_text}")
