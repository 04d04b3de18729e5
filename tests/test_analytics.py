import unittest
from datetime import date
from unittest.mock import MagicMock

from src.analytics import (
    WorkoutAnalytics,
    aggregate_stats,
    exercise_history,
    group_by_split,
    list_exercise_names,
    personal_records,
)


def _session(created_at, payload):
    return {"id": 1, "user_id": 1, "created_at": created_at, "workout": payload}


class PersonalRecordTests(unittest.TestCase):
    def test_heaviest_set_wins_across_sessions(self):
        sessions = [
            _session("2026-03-01T10:00:00", {"workout": [{"exercise": "Squat", "sets": [{"weight": 100, "reps": 5}]}]}),
            _session("2026-03-03T10:00:00", {"workout": [{"exercise": "Squat", "sets": [{"weight": 120, "reps": 3}]}]}),
        ]
        records = personal_records(sessions)
        self.assertEqual(records, {"Squat": {"exercise": "Squat", "weight": 120, "reps": 3}})

    def test_first_set_at_max_weight_keeps_the_record(self):
        sessions = [
            _session("2026-03-01", {"workout": [{"exercise": "Row", "sets": [
                {"weight": 60, "reps": 8},
                {"weight": 60, "reps": 12},
            ]}]}),
        ]
        self.assertEqual(personal_records(sessions)["Row"]["reps"], 8)

    def test_names_fold_to_first_seen_casing(self):
        sessions = [
            _session("2026-03-01", {"loggedWorkout": [{"exercise": "Bench Press", "sets": [{"weight": 60, "reps": 5}]}]}),
            _session("2026-03-02", {"workout": [{"exercise": "bench press", "sets": [{"weight": "70", "reps": "4"}]}]}),
        ]
        records = personal_records(sessions)
        self.assertEqual(list(records), ["Bench Press"])
        self.assertEqual(records["Bench Press"], {"exercise": "Bench Press", "weight": 70, "reps": 4})

    def test_exercises_without_sets_contribute_nothing(self):
        sessions = [
            _session("2026-03-01", {"workout": [{"exercise": "Squat", "sets": "3"}]}),
            _session("2026-03-01", {"loggedWorkout": [{"exercise": "Curl", "sets": None}]}),
            _session("2026-03-01", None),
        ]
        self.assertEqual(personal_records(sessions), {})


class AggregateStatsTests(unittest.TestCase):
    def test_generated_plan_counts_declared_sets_without_weight(self):
        sessions = [_session("2026-03-01", {
            "day": "push",
            "variant": "A",
            "workout": [
                {"exercise": "Bench Press", "sets": "3", "reps": "10"},
                {"exercise": "Dips", "sets": "3", "reps": "12"},
            ],
        })]
        self.assertEqual(
            aggregate_stats(sessions),
            {"totalExercises": 2, "totalSets": 6, "totalWeight": 0},
        )

    def test_logged_workout_counts_each_set_and_volume(self):
        sessions = [_session("2026-03-01", {"loggedWorkout": [
            {"exercise": "Squat", "sets": [{"weight": 100, "reps": 5}, {"weight": "110", "reps": "3"}]},
            {"exercise": "Lunge", "sets": "broken"},
        ]})]
        self.assertEqual(
            aggregate_stats(sessions),
            {"totalExercises": 2, "totalSets": 2, "totalWeight": 830},
        )

    def test_contributions_add_up_and_bad_rows_are_ignored(self):
        sessions = [
            _session("2026-03-01", {"workout": [{"exercise": "Row", "sets": "4"}]}),
            _session("2026-03-02", {"loggedWorkout": [{"exercise": "Curl", "sets": [{"weight": 10, "reps": 10}]}]}),
            _session("2026-03-03", {"something": "else"}),
            _session("2026-03-03", "garbage"),
        ]
        self.assertEqual(
            aggregate_stats(sessions),
            {"totalExercises": 2, "totalSets": 5, "totalWeight": 100},
        )

    def test_unnamed_and_non_dict_items_still_count(self):
        sessions = [
            _session("2026-03-01", {"workout": [{"sets": "3"}]}),
            _session("2026-03-02", {"loggedWorkout": [
                {"sets": [{"weight": 20, "reps": 10}]},
                {"exercise": "Row", "sets": [{"weight": 50, "reps": 10}, "junk"]},
            ]}),
        ]
        self.assertEqual(
            aggregate_stats(sessions),
            {"totalExercises": 3, "totalSets": 6, "totalWeight": 700},
        )

    def test_saved_draft_counts_its_list_of_sets(self):
        sessions = [_session("2026-03-01", {"day": "legs", "variant": "A", "workout": [
            {"exercise": "Squat", "sets": [{"weight": 100, "reps": 5}, {"weight": 100, "reps": 5}]},
        ]})]
        self.assertEqual(
            aggregate_stats(sessions),
            {"totalExercises": 1, "totalSets": 2, "totalWeight": 0},
        )

    def test_empty_history(self):
        self.assertEqual(aggregate_stats([]), {"totalExercises": 0, "totalSets": 0, "totalWeight": 0})

    def test_repeated_calls_are_identical(self):
        sessions = [_session("2026-03-01", {"workout": [{"exercise": "Row", "sets": [{"weight": 50, "reps": 10}]}]})]
        self.assertEqual(aggregate_stats(sessions), aggregate_stats(sessions))
        self.assertEqual(personal_records(sessions), personal_records(sessions))


class ExerciseHistoryTests(unittest.TestCase):
    def test_recent_sets_are_chronological_and_limited(self):
        sessions = [
            _session("2026-03-05T09:00:00", {"workout": [{"exercise": "Squat", "sets": [
                {"weight": 110, "reps": 5}, {"weight": 115, "reps": 3},
            ]}]}),
            _session("2026-03-01T09:00:00", {"workout": [{"exercise": "squat", "sets": [
                {"weight": 100, "reps": 5}, {"weight": 100, "reps": 6}, {"weight": 105, "reps": 4},
                {"weight": 90, "reps": 10},
            ]}]}),
        ]
        summary = exercise_history(sessions, "Squat", limit=5)

        self.assertEqual([item["weight"] for item in summary["recent"]], [100, 105, 90, 110, 115])
        self.assertEqual(summary["recent"][-1]["date"], date(2026, 3, 5))
        self.assertEqual(summary["best"], {"weight": 115, "reps": 3})

    def test_unknown_exercise(self):
        summary = exercise_history([], "Squat")
        self.assertEqual(summary, {"recent": [], "best": {"weight": 0, "reps": 0}})


class GroupingTests(unittest.TestCase):
    def test_group_by_split_preserves_order_and_uses_other(self):
        newest = _session("2026-03-03", {"day": "Push", "workout": []})
        middle = _session("2026-03-02", {"loggedWorkout": []})
        oldest = _session("2026-03-01", {"day": "push", "workout": []})

        grouped = group_by_split([newest, middle, oldest])

        self.assertEqual(list(grouped), ["push", "other"])
        self.assertEqual(grouped["push"], [newest, oldest])
        self.assertEqual(grouped["other"], [middle])

    def test_list_exercise_names_dedupes_case_insensitively(self):
        sessions = [
            _session("2026-03-01", {"workout": [{"exercise": "squat", "sets": "3"}, {"exercise": "Bench Press"}, {"sets": "2"}]}),
            _session("2026-03-02", {"loggedWorkout": [{"exercise": "Squat", "sets": []}]}),
        ]
        self.assertEqual(list_exercise_names(sessions), ["Bench Press", "squat"])


class WorkoutAnalyticsTests(unittest.TestCase):
    def test_loads_once_and_delegates(self):
        db = MagicMock()
        db.fetch_sessions.return_value = [
            _session("2026-03-14T10:00:00", {"day": "legs", "variant": "A", "workout": [
                {"exercise": "Squat", "sets": [{"weight": 100, "reps": 5}]},
            ]}),
        ]
        analytics = WorkoutAnalytics(db)
        analytics.load_historical_data(7)

        db.fetch_sessions.assert_called_once_with(7, limit=None)
        self.assertEqual(analytics.get_stats()["totalExercises"], 1)
        self.assertEqual(analytics.get_streak(today=date(2026, 3, 14)), 1)
        self.assertEqual(analytics.get_best_effort("squat"), {"weight": 100, "reps": 5})
        self.assertIn("Squat", analytics.get_personal_records())
        self.assertEqual(list(analytics.get_sessions_by_split()), ["legs"])
        self.assertEqual(analytics.get_exercise_history("SQUAT")["best"], {"weight": 100, "reps": 5})
        self.assertEqual(analytics.get_exercise_history("Squat", limit=1)["recent"][0]["date"], date(2026, 3, 14))

    def test_methods_tolerate_unloaded_history(self):
        analytics = WorkoutAnalytics(workout_db=None)
        self.assertEqual(analytics.get_stats()["totalSets"], 0)
        self.assertEqual(analytics.get_streak(), 0)
        self.assertIsNone(analytics.get_best_effort("Squat"))
        self.assertEqual(analytics.get_exercise_history("Squat")["recent"], [])


if __name__ == "__main__":
    unittest.main()
