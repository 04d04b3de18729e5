"""
Analytics over a user's saved workout sessions.

Every function here is a pure read over a list of session rows as returned by
``WorkoutDB.fetch_sessions``; malformed rows contribute nothing.
"""

from datetime import datetime

from src.progression_rules import best_effort
from src.streak import compute_streak
from src.workout_records import (
    SHAPE_GENERATED,
    SHAPE_LOGGED,
    iter_logged_sets,
    parse_workout,
    session_datetime,
    to_number,
)


def personal_records(sessions):
    """
    Heaviest set ever logged per exercise.

    Names are matched case-insensitively; the result is keyed by the casing
    first seen in the history. The first set to reach the max weight keeps
    the record, its reps are not maximized separately.

    Returns:
        Dict of exercise name -> {"exercise", "weight", "reps"}
    """
    records = {}
    display_names = {}

    for session in sessions or []:
        for name, set_entry in iter_logged_sets(session):
            key = name.lower()
            display = display_names.setdefault(key, name)
            current = records.get(display)
            if current is None or set_entry.weight > current["weight"]:
                records[display] = {
                    "exercise": display,
                    "weight": set_entry.weight,
                    "reps": set_entry.reps,
                }

    return records


def aggregate_stats(sessions):
    """
    Dashboard counters across all sessions.

    Generated plans count their declared sets and carry no weight; logged
    workouts count each set and add weight x reps to the total. A saved
    draft whose generated entry holds a list of sets counts the list length.
    """
    total_exercises = 0
    total_sets = 0
    total_weight = 0

    for session in sessions or []:
        parsed = parse_workout(session)

        if parsed.shape == SHAPE_GENERATED:
            for entry in parsed.generated:
                total_exercises += 1
                total_sets += to_number(entry.set_count)

        elif parsed.shape == SHAPE_LOGGED:
            for entry in parsed.logged:
                total_exercises += 1
                total_sets += entry.set_count
                for set_entry in entry.sets:
                    total_weight += set_entry.weight * set_entry.reps

    return {
        "totalExercises": total_exercises,
        "totalSets": total_sets,
        "totalWeight": total_weight,
    }


def exercise_history(sessions, exercise_name, limit=5):
    """
    Chronological sets for one exercise plus its best set.

    Args:
        sessions: Session rows for one user
        exercise_name: Exercise to look up (case-insensitive)
        limit: Number of most recent sets to return

    Returns:
        {"recent": [{"date", "weight", "reps"}], "best": {"weight", "reps"}}
    """
    target = (exercise_name or "").lower()
    entries = []

    for session in sessions or []:
        moment = session_datetime(session)
        for name, set_entry in iter_logged_sets(session):
            if name.lower() != target:
                continue
            entries.append({
                "date": moment.date() if moment else None,
                "weight": set_entry.weight,
                "reps": set_entry.reps,
                "_sort": moment or datetime.min,
            })

    # Stable sort keeps set order within a session
    entries.sort(key=lambda item: item["_sort"])
    for item in entries:
        del item["_sort"]

    best = {"weight": 0, "reps": 0}
    for item in entries:
        if (item["weight"], item["reps"]) > (best["weight"], best["reps"]):
            best = {"weight": item["weight"], "reps": item["reps"]}

    recent = entries[-limit:] if limit and limit > 0 else []
    return {"recent": recent, "best": best}


def group_by_split(sessions):
    """Group sessions by lower-cased split name, keeping input order."""
    grouped = {}
    for session in sessions or []:
        day = parse_workout(session).day
        split = day.lower() if day else "other"
        grouped.setdefault(split, []).append(session)
    return grouped


def list_exercise_names(sessions):
    """Distinct exercise names across history, sorted case-insensitively."""
    names = {}
    for session in sessions or []:
        for entry in parse_workout(session).entries:
            if not entry.exercise:
                continue
            names.setdefault(entry.exercise.lower(), entry.exercise)
    return sorted(names.values(), key=str.lower)


class WorkoutAnalytics:
    """Analyze one user's workout history for the dashboard and history views."""

    def __init__(self, workout_db):
        """
        Initialize analytics with a session store.

        Args:
            workout_db: WorkoutDB instance
        """
        self.workout_db = workout_db
        self.historical_data = None

    def load_historical_data(self, user_id, limit=None):
        """
        Load the user's sessions, newest first.

        Returns:
            List of session dicts
        """
        self.historical_data = self.workout_db.fetch_sessions(user_id, limit=limit)
        return self.historical_data

    def get_stats(self):
        return aggregate_stats(self.historical_data or [])

    def get_streak(self, today=None):
        return compute_streak(self.historical_data or [], today=today)

    def get_personal_records(self):
        return personal_records(self.historical_data or [])

    def get_best_effort(self, exercise_name):
        return best_effort(self.historical_data or [], exercise_name)

    def get_exercise_history(self, exercise_name, limit=5):
        return exercise_history(self.historical_data or [], exercise_name, limit=limit)

    def get_sessions_by_split(self):
        return group_by_split(self.historical_data or [])
