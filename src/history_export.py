"""
CSV export of saved workout history.
"""

import pandas as pd

from src.workout_records import normalize, parse_workout, session_date


EXPORT_FILENAME = "zeus-fitness-workout-history.csv"
EXPORT_COLUMNS = ["Date", "Split", "Exercise", "Set", "Reps", "Weight (kg)"]


def _raw_sets(session):
    """Yield (exercise, set_number, raw_set) straight from the stored payload."""
    for entry in normalize(session):
        if not isinstance(entry, dict) or not isinstance(entry.get("sets"), list):
            continue
        for index, raw_set in enumerate(entry["sets"], start=1):
            if isinstance(raw_set, dict):
                yield entry.get("exercise", ""), index, raw_set


def build_history_rows(sessions):
    """One row per logged set, sessions in the order given."""
    rows = []
    for session in sessions or []:
        day = session_date(session)
        date_label = day.strftime("%d/%m/%Y") if day else ""
        split = parse_workout(session).day

        for exercise, index, raw_set in _raw_sets(session):
            reps = raw_set.get("reps")
            weight = raw_set.get("weight")
            rows.append([
                date_label,
                split,
                exercise,
                index,
                "" if reps is None else reps,
                "" if weight is None else weight,
            ])
    return rows


def history_to_csv(sessions):
    """Render the history as CSV text with a header row."""
    frame = pd.DataFrame(build_history_rows(sessions), columns=EXPORT_COLUMNS)
    return frame.to_csv(index=False)
