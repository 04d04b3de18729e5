"""
Normalization of stored workout sessions.

Two payload shapes live in the same ``workout`` column:

- generated: ``{"day": "legs", "variant": "A", "workout": [...]}``
- logged:    ``{"loggedWorkout": [...]}``

Everything downstream reads sessions through this module so the shape is
detected in one place.
"""

import json
import math
from dataclasses import dataclass, field
from datetime import date, datetime


SHAPE_GENERATED = "generated"
SHAPE_LOGGED = "logged"
SHAPE_EMPTY = "empty"


@dataclass(frozen=True)
class SetEntry:
    reps: float = 0
    weight: float = 0


@dataclass(frozen=True)
class GeneratedExerciseEntry:
    """Exercise from an AI-origin plan; ``set_count`` is the declared number of sets."""

    exercise: str
    set_count: float = 0
    sets: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class LoggedExerciseEntry:
    exercise: str
    set_count: int = 0
    sets: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class ParsedWorkout:
    shape: str
    day: str = ""
    variant: str = ""
    generated: tuple = field(default_factory=tuple)
    logged: tuple = field(default_factory=tuple)

    @property
    def entries(self):
        return self.generated if self.shape == SHAPE_GENERATED else self.logged


EMPTY_WORKOUT = ParsedWorkout(shape=SHAPE_EMPTY)


def to_number(value):
    """
    Coerce a stored reps/weight/sets value to a number.

    Strings, None and garbage all map to 0 instead of raising, so older rows
    with hand-typed values never break an aggregate. Booleans count as 1/0.
    Digit-group underscores ("1_000") are not numbers.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)

    text = str(value).strip()
    if "_" in text:
        return 0
    try:
        number = float(text)
    except (TypeError, ValueError):
        return 0

    if math.isnan(number) or math.isinf(number):
        return 0
    if number.is_integer():
        return int(number)
    return number


def _payload(session):
    """Return the decoded ``workout`` dict of a session row, or None."""
    if not isinstance(session, dict):
        return None

    payload = session.get("workout")
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (TypeError, ValueError):
            return None

    return payload if isinstance(payload, dict) else None


def normalize(session):
    """
    Return the raw exercise entry list of a session.

    ``workout.workout`` wins over ``workout.loggedWorkout``; a session with
    neither array yields an empty list.
    """
    payload = _payload(session)
    if payload is None:
        return []

    if isinstance(payload.get("workout"), list):
        return payload["workout"]
    if isinstance(payload.get("loggedWorkout"), list):
        return payload["loggedWorkout"]
    return []


def _exercise_name(entry):
    if not isinstance(entry, dict):
        return ""
    name = entry.get("exercise")
    return name if isinstance(name, str) else ""


def _set_entries(raw_sets):
    if not isinstance(raw_sets, list):
        return ()
    return tuple(
        SetEntry(reps=to_number(s.get("reps")), weight=to_number(s.get("weight")))
        for s in raw_sets
        if isinstance(s, dict)
    )


def _raw_sets(entry):
    return entry.get("sets") if isinstance(entry, dict) else None


def parse_workout(session):
    """
    Parse a session row into a ParsedWorkout tagged by shape.

    Every item of the exercise array becomes an entry, named or not, so the
    counters see the same exercises the stored row holds. Unnamed entries
    carry ``exercise == ""`` and never reach per-exercise lookups.
    ``set_count`` counts every item of a ``sets`` list while ``sets`` keeps
    only the dict items.
    """
    payload = _payload(session)
    if payload is None:
        return EMPTY_WORKOUT

    if isinstance(payload.get("workout"), list):
        entries = []
        for raw in payload["workout"]:
            raw_sets = _raw_sets(raw)
            if isinstance(raw_sets, list):
                # Saved drafts already expanded the count into concrete sets
                count = len(raw_sets)
            else:
                count = to_number(raw_sets)
            entries.append(GeneratedExerciseEntry(_exercise_name(raw), count, _set_entries(raw_sets)))

        return ParsedWorkout(
            shape=SHAPE_GENERATED,
            day=str(payload.get("day") or ""),
            variant=str(payload.get("variant") or ""),
            generated=tuple(entries),
        )

    if isinstance(payload.get("loggedWorkout"), list):
        entries = []
        for raw in payload["loggedWorkout"]:
            raw_sets = _raw_sets(raw)
            count = len(raw_sets) if isinstance(raw_sets, list) else 0
            entries.append(LoggedExerciseEntry(_exercise_name(raw), count, _set_entries(raw_sets)))
        return ParsedWorkout(shape=SHAPE_LOGGED, logged=tuple(entries))

    return EMPTY_WORKOUT


def iter_logged_sets(session):
    """Yield ``(exercise_name, SetEntry)`` for every concrete set of a named exercise."""
    for entry in parse_workout(session).entries:
        if not entry.exercise:
            continue
        for set_entry in entry.sets:
            yield entry.exercise, set_entry


def session_datetime(session):
    """Return ``created_at`` as a naive local datetime, or None when unusable."""
    if not isinstance(session, dict):
        return None

    value = session.get("created_at")
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def session_date(session):
    """Return the local calendar date a session was completed on."""
    moment = session_datetime(session)
    return moment.date() if moment else None
