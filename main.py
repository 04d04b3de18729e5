#!/usr/bin/env python3
"""
Zeus Fitness command-line tool.

Generate and save workouts and print training stats without the web UI.
"""

import argparse
import getpass
import os
import sys

from dotenv import load_dotenv

from src.analytics import WorkoutAnalytics
from src.app_config import generation_defaults, get_api_key, get_db_path, load_config
from src.draft_workout import DraftWorkout
from src.history_export import EXPORT_FILENAME, history_to_csv
from src.progression_rules import best_effort, format_next_target, format_overload_hint
from src.workout_db import AuthError, WorkoutDB
from src.workout_generator import WorkoutGenerationError, WorkoutGenerator
from src.workout_splits import WORKOUT_SPLITS, choose_variant, split_label


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Zeus Fitness workout tracker")
    parser.add_argument(
        "--config",
        default=os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yaml"),
        help="Path to config.yaml (default: config.yaml next to this script)",
    )
    parser.add_argument("--email", help="Account email (prompted if omitted)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("signup", help="Create an account")

    generate = subparsers.add_parser("generate", help="Generate a workout for a split")
    generate.add_argument("split", choices=sorted(WORKOUT_SPLITS.keys()))
    generate.add_argument("--save", action="store_true", help="Save the generated workout to history")

    subparsers.add_parser("stats", help="Print totals and the current day streak")
    subparsers.add_parser("records", help="Print personal records")

    export = subparsers.add_parser("export", help="Export history as CSV")
    export.add_argument("--output", default=EXPORT_FILENAME, help=f"Output file (default: {EXPORT_FILENAME})")

    return parser.parse_args(argv)


def sign_in(db, email):
    email = email or input("Email: ").strip()
    password = getpass.getpass("Password: ")
    return db.sign_in(email, password)


def print_workout(draft, history):
    print("\n" + "=" * 60)
    print(f"{split_label(draft.day).upper()} WORKOUT (Variant {draft.variant})")
    print("=" * 60)
    for ex in draft.exercises:
        reps = ex['sets'][0]['reps'] if ex['sets'] else 0
        print(f"\n  {ex['exercise']}: {len(ex['sets'])} x {reps}")
        best = best_effort(history, ex['exercise'])
        hint = format_overload_hint(best)
        if hint:
            for line in hint.splitlines():
                print(f"    {line}")
            print(f"    {format_next_target(best)}")


def cmd_generate(db, user, args, config):
    api_key = get_api_key(config)
    if not api_key:
        api_key_env = (config.get('claude', {}) or {}).get('api_key_env', 'ANTHROPIC_API_KEY')
        print(f"\n❌ Error: {api_key_env} not found in environment variables!")
        print("Copy .env.example to .env and add your Anthropic API key.")
        return 1

    history = db.fetch_sessions(user['id'])
    variant = choose_variant(history[0] if history else None, args.split)
    defaults = generation_defaults(config)

    print(f"\n🤖 Generating a {split_label(args.split)} workout (variant {variant})...")
    generator = WorkoutGenerator(api_key=api_key, config=config)
    try:
        generated = generator.generate_workout(
            user_id=user['id'],
            workout_type=args.split,
            variant=variant,
            level=defaults['level'],
            equipment=defaults['equipment'],
            duration=defaults['duration'],
        )
    except WorkoutGenerationError as e:
        print(f"\n❌ {e}. Please try again.")
        return 1

    draft = DraftWorkout.from_generated(generated)
    print_workout(draft, history)

    if args.save:
        session_id = db.append_session(user['id'], draft.to_payload())
        print(f"\n✓ Workout saved (#{session_id})")
    return 0


def cmd_stats(db, user):
    analytics = WorkoutAnalytics(db)
    analytics.load_historical_data(user['id'])
    stats = analytics.get_stats()

    print(f"Workouts saved:  {len(analytics.historical_data)}")
    print(f"Exercises:       {stats['totalExercises']}")
    print(f"Sets:            {stats['totalSets']}")
    print(f"Volume (kg):     {stats['totalWeight']}")
    print(f"Day streak:      {analytics.get_streak()}")
    return 0


def cmd_records(db, user):
    analytics = WorkoutAnalytics(db)
    analytics.load_historical_data(user['id'])
    records = analytics.get_personal_records()
    if not records:
        print("No personal records yet.")
        return 0

    for name in sorted(records, key=str.lower):
        record = records[name]
        print(f"🏆 {name}: {record['weight']} kg × {record['reps']}")
    return 0


def cmd_export(db, user, output):
    history = db.fetch_sessions(user['id'])
    if not history:
        print("No workout history to export")
        return 1

    with open(output, "w", encoding="utf-8", newline="") as f:
        f.write(history_to_csv(history))
    print(f"✓ History exported to: {output}")
    return 0


def main(argv=None):
    """Main application flow."""
    args = parse_args(argv)
    load_dotenv()

    try:
        config = load_config(args.config)
    except FileNotFoundError:
        print(f"Error: {args.config} not found!")
        return 1

    db = WorkoutDB(get_db_path(config))
    db.init_schema()

    try:
        if args.command == "signup":
            email = args.email or input("Email: ").strip()
            password = getpass.getpass("Password: ")
            user_id = db.sign_up(email, password)
            print(f"✓ Account created (#{user_id})")
            return 0

        user = sign_in(db, args.email)

        if args.command == "generate":
            return cmd_generate(db, user, args, config)
        if args.command == "stats":
            return cmd_stats(db, user)
        if args.command == "records":
            return cmd_records(db, user)
        if args.command == "export":
            return cmd_export(db, user, args.output)
        return 1
    except AuthError as e:
        print(f"\n❌ {e}")
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nExiting...")
        sys.exit(0)
