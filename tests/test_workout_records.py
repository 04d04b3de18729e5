"""Tests for session normalization and numeric coercion."""

import unittest
from datetime import date, datetime

from src.workout_records import (
    SHAPE_EMPTY,
    SHAPE_GENERATED,
    SHAPE_LOGGED,
    GeneratedExerciseEntry,
    SetEntry,
    iter_logged_sets,
    normalize,
    parse_workout,
    session_date,
    to_number,
)


class ToNumberTests(unittest.TestCase):
    def test_numeric_strings_are_parsed(self):
        self.assertEqual(to_number("12"), 12)
        self.assertEqual(to_number(" 42.5 "), 42.5)
        self.assertIsInstance(to_number("40.0"), int)

    def test_garbage_maps_to_zero(self):
        for value in (None, "", "abc", "12kg", "1_000", [], {}, False, float("nan"), float("inf")):
            self.assertEqual(to_number(value), 0, value)

    def test_booleans_count_as_one_and_zero(self):
        self.assertEqual(to_number(True), 1)
        self.assertEqual(to_number(False), 0)


class NormalizeTests(unittest.TestCase):
    def test_generated_array_is_returned(self):
        entries = [{"exercise": "Squat", "sets": "3"}]
        session = {"workout": {"day": "legs", "variant": "A", "workout": entries}}
        self.assertIs(normalize(session), entries)

    def test_logged_array_is_used_when_generated_missing(self):
        entries = [{"exercise": "Bench Press", "sets": []}]
        self.assertIs(normalize({"workout": {"loggedWorkout": entries}}), entries)

    def test_generated_wins_when_both_present(self):
        session = {"workout": {"workout": [{"exercise": "A"}], "loggedWorkout": [{"exercise": "B"}]}}
        self.assertEqual(normalize(session), [{"exercise": "A"}])

    def test_missing_or_malformed_payload_is_empty(self):
        for session in (
            {},
            {"workout": None},
            {"workout": "not json"},
            {"workout": {"workout": "oops"}},
            {"workout": {"loggedWorkout": {"exercise": "x"}}},
            None,
            "row",
        ):
            self.assertEqual(normalize(session), [], session)

    def test_json_string_payload_is_decoded(self):
        session = {"workout": '{"loggedWorkout": [{"exercise": "Row", "sets": []}]}'}
        self.assertEqual(normalize(session), [{"exercise": "Row", "sets": []}])


class ParseWorkoutTests(unittest.TestCase):
    def test_generated_shape_keeps_declared_set_count(self):
        parsed = parse_workout({
            "workout": {
                "day": "push",
                "variant": "B",
                "workout": [{"exercise": "Bench Press", "sets": "4", "reps": "8"}],
            }
        })
        self.assertEqual(parsed.shape, SHAPE_GENERATED)
        self.assertEqual(parsed.day, "push")
        self.assertEqual(parsed.variant, "B")
        self.assertEqual(parsed.generated[0].set_count, 4)
        self.assertEqual(parsed.generated[0].sets, ())

    def test_saved_draft_counts_concrete_sets(self):
        parsed = parse_workout({
            "workout": {
                "day": "legs",
                "workout": [{"exercise": "Squat", "sets": [{"reps": 5, "weight": "100"}, {"reps": "5", "weight": 110}]}],
            }
        })
        entry = parsed.generated[0]
        self.assertEqual(entry.set_count, 2)
        self.assertEqual(entry.sets, (SetEntry(5, 100), SetEntry(5, 110)))

    def test_logged_shape_keeps_every_entry_and_dict_sets(self):
        parsed = parse_workout({
            "workout": {
                "loggedWorkout": [
                    {"exercise": "Deadlift", "sets": [{"reps": "x", "weight": 140}, "junk"]},
                    {"exercise": "", "sets": [{"reps": 1, "weight": 1}]},
                    {"exercise": "Curl", "sets": "3"},
                    "not a dict",
                ]
            }
        })
        self.assertEqual(parsed.shape, SHAPE_LOGGED)
        self.assertEqual([e.exercise for e in parsed.logged], ["Deadlift", "", "Curl", ""])
        self.assertEqual([e.set_count for e in parsed.logged], [2, 1, 0, 0])
        self.assertEqual(parsed.logged[0].sets, (SetEntry(0, 140),))
        self.assertEqual(parsed.logged[2].sets, ())

    def test_unnamed_generated_entry_keeps_declared_sets(self):
        parsed = parse_workout({"workout": {"workout": [{"sets": "3"}]}})
        self.assertEqual(parsed.generated, (GeneratedExerciseEntry("", 3),))

    def test_unnamed_entries_yield_no_sets(self):
        session = {"workout": {"loggedWorkout": [{"sets": [{"reps": 5, "weight": 80}]}]}}
        self.assertEqual(list(iter_logged_sets(session)), [])

    def test_empty_shape_for_unusable_rows(self):
        self.assertEqual(parse_workout({"workout": {}}).shape, SHAPE_EMPTY)
        self.assertEqual(parse_workout({"workout": {}}).entries, ())

    def test_iter_logged_sets_yields_name_and_set(self):
        session = {"workout": {"loggedWorkout": [{"exercise": "Row", "sets": [{"reps": 8, "weight": 60}]}]}}
        self.assertEqual(list(iter_logged_sets(session)), [("Row", SetEntry(8, 60))])


class SessionDateTests(unittest.TestCase):
    def test_accepts_naive_iso_string(self):
        self.assertEqual(session_date({"created_at": "2026-03-14T18:30:00"}), date(2026, 3, 14))

    def test_accepts_datetime_and_date(self):
        self.assertEqual(session_date({"created_at": datetime(2026, 3, 14, 7, 0)}), date(2026, 3, 14))
        self.assertEqual(session_date({"created_at": date(2026, 3, 14)}), date(2026, 3, 14))

    def test_aware_timestamp_is_converted_to_local_date(self):
        aware = datetime.fromisoformat("2026-03-14T12:00:00+00:00")
        expected = aware.astimezone().date()
        self.assertEqual(session_date({"created_at": "2026-03-14T12:00:00Z"}), expected)

    def test_unparsable_values_are_none(self):
        for value in (None, "", "yesterday", 12345):
            self.assertIsNone(session_date({"created_at": value}), value)


if __name__ == "__main__":
    unittest.main()
