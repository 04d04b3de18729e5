"""
Progressive overload targets derived from logged history.
"""

from src.workout_records import iter_logged_sets, to_number


WEIGHT_STEP_KG = 2.5
REP_STEP = 1


def _matches(exercise_name, target):
    return exercise_name.lower() == target.lower()


def best_effort(sessions, exercise_name):
    """
    Return the best historical set for an exercise.

    Sets are ranked by weight, then reps. Matching on the exercise name is
    case-insensitive and exact.

    Args:
        sessions: Session rows for one user
        exercise_name: Exercise to look up

    Returns:
        ``{"weight": ..., "reps": ...}`` or None when the exercise has no sets
    """
    if not sessions or not isinstance(exercise_name, str):
        return None

    best = None
    for session in sessions:
        for name, set_entry in iter_logged_sets(session):
            if not _matches(name, exercise_name):
                continue
            candidate = (set_entry.weight, set_entry.reps)
            if best is None or candidate > best:
                best = candidate

    if best is None:
        return None
    return {"weight": best[0], "reps": best[1]}


def suggest_next_target(best, weight_step=WEIGHT_STEP_KG, rep_step=REP_STEP):
    """Return the two overload options for the next session: more weight or one more rep."""
    if not best:
        return None

    weight = to_number(best.get("weight"))
    reps = to_number(best.get("reps"))
    return {
        "heavier": {"weight": to_number(weight + weight_step), "reps": reps},
        "more_reps": {"weight": weight, "reps": to_number(reps + rep_step)},
    }


def _format_number(value):
    value = to_number(value)
    return f"{value:g}" if isinstance(value, float) else str(value)


def format_overload_hint(best, weight_step=WEIGHT_STEP_KG, rep_step=REP_STEP):
    """Render the hint shown under an exercise in the draft editor."""
    if not best:
        return None

    last = f"Last time: {_format_number(best.get('weight'))} kg × {_format_number(best.get('reps'))} reps"
    advice = f"Try +{_format_number(weight_step)} kg or +{_format_number(rep_step)} rep"
    return f"{last}\n{advice}"


def format_next_target(best, weight_step=WEIGHT_STEP_KG, rep_step=REP_STEP):
    """One-line goal for the next session, e.g. "Next: 42.5 kg × 8 or 40 kg × 9"."""
    target = suggest_next_target(best, weight_step=weight_step, rep_step=rep_step)
    if target is None:
        return None

    options = [
        f"{_format_number(option['weight'])} kg × {_format_number(option['reps'])}"
        for option in (target["heavier"], target["more_reps"])
    ]
    return f"Next: {options[0]} or {options[1]}"
