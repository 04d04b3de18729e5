"""
Start Workout page - Generate a split workout, edit it, and save it
"""

import streamlit as st

from src.analytics import WorkoutAnalytics, list_exercise_names
from src.app_config import generation_defaults, get_api_key
from src.draft_workout import DraftWorkout
from src.progression_rules import format_next_target, format_overload_hint
from src.ui_utils import current_user, get_app_config, get_workout_db, render_page_header
from src.workout_generator import WorkoutGenerationError, WorkoutGenerator
from src.workout_splits import DEFAULT_SPLIT, WORKOUT_SPLITS, choose_variant, split_label


DRAFT_KEY = 'draft_workout'
REVISION_KEY = 'draft_revision'


def should_start_generation(clicked, in_progress, has_user=True):
    """Only one generation at a time, and only for a signed-in user."""
    return bool(clicked and has_user and not in_progress)


def _bump_revision():
    # Widget keys embed the revision so reordered rows never inherit stale inputs
    st.session_state[REVISION_KEY] = st.session_state.get(REVISION_KEY, 0) + 1


def _generate(user, split, config):
    api_key = get_api_key(config)
    if not api_key:
        st.session_state.start_workout_message = "⚠️ Workout generation is not configured (missing API key)."
        return

    db = get_workout_db()
    try:
        variant = choose_variant(db.last_session(user['id']), split)
    finally:
        db.close()

    defaults = generation_defaults(config)
    generator = WorkoutGenerator(api_key=api_key, config=config)
    try:
        generated = generator.generate_workout(
            user_id=user['id'],
            workout_type=split,
            variant=variant,
            level=defaults['level'],
            equipment=defaults['equipment'],
            duration=defaults['duration'],
        )
    except (WorkoutGenerationError, ValueError):
        st.session_state.start_workout_message = "⚠️ Workout generation failed. Please try again."
        return

    st.session_state[DRAFT_KEY] = DraftWorkout.from_generated(generated)
    _bump_revision()


def _save(user, draft):
    db = get_workout_db()
    try:
        db.append_session(user['id'], draft.to_payload())
    except ValueError as e:
        st.error(f"Failed to save workout: {e}")
        return
    finally:
        db.close()

    st.session_state[DRAFT_KEY] = None
    st.session_state.start_workout_message = "Workout saved ✅"
    _bump_revision()
    st.rerun()


def _pick_exercise():
    st.session_state.selected_exercise = st.session_state.get('history_picker')


def render_exercise_history(exercise_name, analytics):
    """Last five sets and best set for one exercise"""
    summary = analytics.get_exercise_history(exercise_name, limit=5)

    with st.container(border=True):
        col_title, col_close = st.columns([5, 1])
        col_title.markdown(f"**{exercise_name} History**")
        if col_close.button("✕", key="close_exercise_history"):
            st.session_state.selected_exercise = None
            st.rerun()

        if not summary['recent']:
            st.caption("No history yet.")
            return

        st.markdown("**Last 5 Sets**")
        for item in summary['recent']:
            date_label = item['date'].strftime("%d/%m/%Y") if item['date'] else "Unknown date"
            st.markdown(f"- {date_label} — {item['weight']} kg × {item['reps']} reps")

        best = summary['best']
        st.markdown(f"**🏆 Best:** {best['weight']} kg × {best['reps']} reps")


def render_draft(draft, analytics):
    """Editable list of exercises and sets"""
    revision = st.session_state.get(REVISION_KEY, 0)

    st.markdown(f"### {split_label(draft.day)} Workout · Variant {draft.variant}")

    for idx, ex in enumerate(list(draft.exercises)):
        with st.container(border=True):
            col_name, col_up, col_down, col_remove = st.columns([6, 1, 1, 1])
            if col_name.button(ex['exercise'], key=f"hist_{revision}_{idx}"):
                st.session_state.selected_exercise = ex['exercise']

            if col_up.button("↑", key=f"up_{revision}_{idx}", disabled=idx == 0):
                draft.move_exercise(idx, idx - 1)
                _bump_revision()
                st.rerun()
            if col_down.button("↓", key=f"down_{revision}_{idx}", disabled=idx == len(draft.exercises) - 1):
                draft.move_exercise(idx, idx + 1)
                _bump_revision()
                st.rerun()
            if col_remove.button("🗑", key=f"remove_{revision}_{idx}"):
                draft.remove_exercise(idx)
                _bump_revision()
                st.rerun()

            best = analytics.get_best_effort(ex['exercise'])
            hint = format_overload_hint(best)
            if hint:
                last_line, advice = hint.split("\n", 1)
                st.caption(f"🔁 {last_line}")
                st.caption(f"👉 {advice}")
                st.caption(f"🎯 {format_next_target(best)}")

            for s_idx, set_entry in enumerate(list(ex['sets'])):
                c_weight, c_reps, c_delete = st.columns([3, 3, 1])
                weight = c_weight.number_input(
                    "Weight (kg)",
                    min_value=0.0,
                    step=2.5,
                    value=float(set_entry['weight']),
                    key=f"w_{revision}_{idx}_{s_idx}",
                )
                reps = c_reps.number_input(
                    "Reps",
                    min_value=0,
                    step=1,
                    value=int(set_entry['reps']),
                    key=f"r_{revision}_{idx}_{s_idx}",
                )
                draft.update_set(idx, s_idx, 'weight', weight)
                draft.update_set(idx, s_idx, 'reps', reps)

                if c_delete.button("❌", key=f"del_{revision}_{idx}_{s_idx}"):
                    draft.delete_set(idx, s_idx)
                    _bump_revision()
                    st.rerun()

            if st.button("➕ Add Set", key=f"add_set_{revision}_{idx}"):
                draft.add_set(idx)
                _bump_revision()
                st.rerun()

    col_input, col_add = st.columns([4, 1])
    custom_name = col_input.text_input(
        "Custom exercise",
        placeholder="Exercise name",
        key=f"custom_exercise_{revision}",
    )
    if col_add.button("➕ Add", key=f"add_exercise_{revision}"):
        if draft.add_exercise(custom_name):
            _bump_revision()
            st.rerun()
        else:
            st.warning("Enter an exercise name first.")


def show():
    """Render the start workout page"""
    render_page_header("Start Workout", "Pick a split and let the coach build your session", "⚡")

    user = current_user()
    config = get_app_config()

    if 'generation_in_progress' not in st.session_state:
        st.session_state.generation_in_progress = False

    message = st.session_state.pop('start_workout_message', None)
    if message:
        st.info(message)

    split_keys = list(WORKOUT_SPLITS.keys())
    split = st.selectbox(
        "Split",
        split_keys,
        index=split_keys.index(DEFAULT_SPLIT),
        format_func=split_label,
    )

    clicked = st.button(
        "Generate Workout",
        type="primary",
        disabled=st.session_state.generation_in_progress,
        use_container_width=True,
    )
    if should_start_generation(clicked, st.session_state.generation_in_progress, has_user=bool(user)):
        st.session_state.generation_in_progress = True
        try:
            with st.spinner("Generating your workout..."):
                _generate(user, split, config)
        finally:
            st.session_state.generation_in_progress = False
        st.rerun()

    db = get_workout_db()
    try:
        analytics = WorkoutAnalytics(db)
        analytics.load_historical_data(user['id'])
    finally:
        db.close()

    draft = st.session_state.get(DRAFT_KEY)
    if draft is not None:
        render_draft(draft, analytics)
        if st.button("Save Workout", type="primary", disabled=draft.is_empty(), use_container_width=True):
            _save(user, draft)

    names = list_exercise_names(analytics.historical_data)
    if names:
        with st.expander("📈 Exercise history"):
            st.selectbox(
                "Exercise",
                names,
                index=None,
                placeholder="Pick an exercise",
                key="history_picker",
                on_change=_pick_exercise,
            )

    selected = st.session_state.get('selected_exercise')
    if selected:
        render_exercise_history(selected, analytics)
