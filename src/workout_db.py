"""
SQLite persistence for users, profiles and saved workout sessions.
"""

import hashlib
import hmac
import json
import os
import secrets
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone


PBKDF2_ITERATIONS = 200_000
MIN_PASSWORD_LENGTH = 6


class AuthError(Exception):
    """Raised when sign-up or sign-in fails."""


def _hash_password(password, salt):
    return hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), bytes.fromhex(salt), PBKDF2_ITERATIONS
    ).hex()


def _utc_now():
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


class WorkoutDB:
    """Small SQLite wrapper for workout history storage."""

    def __init__(self, db_path):
        self.db_path = db_path
        parent = os.path.dirname(db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        self.conn = sqlite3.connect(db_path)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA foreign_keys = ON")

    def close(self):
        self.conn.close()

    @contextmanager
    def transaction(self):
        """Context manager for atomic write operations."""
        try:
            yield
            self.conn.commit()
        except Exception:
            self.conn.rollback()
            raise

    def init_schema(self):
        """Create core schema if it does not already exist."""
        self.conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                email TEXT NOT NULL UNIQUE,
                password_hash TEXT NOT NULL,
                salt TEXT NOT NULL,
                created_at TEXT NOT NULL DEFAULT (datetime('now'))
            );

            CREATE TABLE IF NOT EXISTS profiles (
                user_id INTEGER PRIMARY KEY,
                display_name TEXT,
                updated_at TEXT NOT NULL DEFAULT (datetime('now')),
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );

            CREATE TABLE IF NOT EXISTS workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                workout_json TEXT NOT NULL,
                created_at TEXT NOT NULL,
                FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
            );

            CREATE INDEX IF NOT EXISTS idx_workouts_user_created
                ON workouts(user_id, created_at);
            """
        )
        self.conn.commit()

    # ── Authentication ─────────────────────────────────────────────────

    def sign_up(self, email, password):
        """Create a user account and return its id."""
        email = (email or "").strip().lower()
        if not email:
            raise AuthError("Email is required")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise AuthError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        salt = secrets.token_hex(16)
        try:
            with self.transaction():
                cursor = self.conn.execute(
                    "INSERT INTO users (email, password_hash, salt) VALUES (?, ?, ?)",
                    (email, _hash_password(password, salt), salt),
                )
        except sqlite3.IntegrityError as exc:
            raise AuthError("User already registered") from exc
        return int(cursor.lastrowid)

    def sign_in(self, email, password):
        """Return ``{id, email}`` for valid credentials, raise AuthError otherwise."""
        email = (email or "").strip().lower()
        row = self.conn.execute(
            "SELECT id, email, password_hash, salt FROM users WHERE email = ?",
            (email,),
        ).fetchone()
        if row is None or not password:
            raise AuthError("Invalid login credentials")

        if not hmac.compare_digest(row["password_hash"], _hash_password(password, row["salt"])):
            raise AuthError("Invalid login credentials")
        return {"id": int(row["id"]), "email": row["email"]}

    # ── Profiles ───────────────────────────────────────────────────────

    def get_profile(self, user_id):
        row = self.conn.execute(
            "SELECT user_id, display_name FROM profiles WHERE user_id = ?",
            (user_id,),
        ).fetchone()
        if row is None:
            return {"user_id": user_id, "display_name": None}
        return {"user_id": int(row["user_id"]), "display_name": row["display_name"]}

    def save_display_name(self, user_id, display_name):
        """Insert or update the user's display name."""
        name = (display_name or "").strip()
        if not name:
            raise ValueError("Display name cannot be empty")

        with self.transaction():
            self.conn.execute(
                """
                INSERT INTO profiles (user_id, display_name, updated_at)
                VALUES (?, ?, datetime('now'))
                ON CONFLICT(user_id) DO UPDATE SET
                    display_name = excluded.display_name,
                    updated_at = datetime('now')
                """,
                (user_id, name),
            )
        return name

    # ── Workout sessions ───────────────────────────────────────────────

    def append_session(self, user_id, workout, created_at=None):
        """
        Store one completed workout and return its id.

        Sessions are append-only; there is no update or delete path.
        """
        if not isinstance(workout, dict):
            raise ValueError("Workout payload must be a dict")

        if isinstance(created_at, datetime):
            created_at = created_at.isoformat(timespec="seconds")

        with self.transaction():
            cursor = self.conn.execute(
                "INSERT INTO workouts (user_id, workout_json, created_at) VALUES (?, ?, ?)",
                (user_id, json.dumps(workout), created_at or _utc_now()),
            )
        return int(cursor.lastrowid)

    def fetch_sessions(self, user_id, limit=None):
        """Return the user's sessions newest first as plain dicts."""
        query = """
            SELECT id, user_id, workout_json, created_at
            FROM workouts
            WHERE user_id = ?
            ORDER BY created_at DESC, id DESC
        """
        params = [user_id]
        if limit:
            query += " LIMIT ?"
            params.append(int(limit))

        sessions = []
        for row in self.conn.execute(query, params).fetchall():
            try:
                workout = json.loads(row["workout_json"])
            except (TypeError, ValueError):
                workout = None
            sessions.append({
                "id": int(row["id"]),
                "user_id": int(row["user_id"]),
                "created_at": row["created_at"],
                "workout": workout,
            })
        return sessions

    def last_session(self, user_id):
        sessions = self.fetch_sessions(user_id, limit=1)
        return sessions[0] if sessions else None
