from __future__ import annotations

import os
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Any

from app.core.config import settings

_conn: sqlite3.Connection | None = None
_conn_lock = threading.Lock()


class GuestLimitReached(Exception):
    def __init__(self, guest_id: str, predictions_count: int, limit: int):
        super().__init__(f"Guest '{guest_id}' used {predictions_count} of {limit} predictions.")
        self.guest_id = guest_id
        self.predictions_count = predictions_count
        self.limit = limit


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _get_connection() -> sqlite3.Connection:
    global _conn
    with _conn_lock:
        if _conn is not None:
            return _conn

        db_path = settings.guest_db_path
        directory = os.path.dirname(db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        _conn = sqlite3.connect(
            db_path,
            check_same_thread=False,
            timeout=5,
            isolation_level=None,
        )
        _conn.execute("PRAGMA journal_mode=WAL;")
        _conn.execute("PRAGMA synchronous=NORMAL;")
        _conn.execute("PRAGMA busy_timeout=5000;")
        _conn.execute(
            """
            CREATE TABLE IF NOT EXISTS guests (
                guest_id TEXT PRIMARY KEY,
                predictions_count INTEGER NOT NULL DEFAULT 0,
                created_at TEXT NOT NULL,
                last_active TEXT NOT NULL
            );
            """
        )
        return _conn


def init_guest_store() -> None:
    _get_connection()


def get_guest(guest_id: str) -> dict[str, Any] | None:
    conn = _get_connection()
    with _conn_lock:
        row = conn.execute(
            "SELECT guest_id, predictions_count, created_at, last_active FROM guests WHERE guest_id = ?",
            (guest_id,),
        ).fetchone()
    if row is None:
        return None
    return {
        "guest_id": row[0],
        "predictions_count": int(row[1] or 0),
        "created_at": row[2],
        "last_active": row[3],
    }


def ensure_guest(guest_id: str) -> dict[str, Any]:
    conn = _get_connection()
    now = _utc_now()
    with _conn_lock:
        conn.execute(
            """
            INSERT OR IGNORE INTO guests (guest_id, predictions_count, created_at, last_active)
            VALUES (?, 0, ?, ?)
            """,
            (guest_id, now, now),
        )
    return get_guest(guest_id) or {
        "guest_id": guest_id,
        "predictions_count": 0,
        "created_at": now,
        "last_active": now,
    }


def register_guest_prediction(guest_id: str, limit: int) -> int:
    """Count one prediction for the guest and return the new total.

    Raises GuestLimitReached once the guest already used `limit` predictions.
    """
    conn = _get_connection()
    now = _utc_now()

    with _conn_lock:
        cursor = conn.cursor()
        cursor.execute("BEGIN IMMEDIATE")
        try:
            row = cursor.execute(
                "SELECT predictions_count FROM guests WHERE guest_id = ?",
                (guest_id,),
            ).fetchone()
            count = int(row[0] or 0) if row else 0
            if count >= limit:
                conn.rollback()
                raise GuestLimitReached(guest_id, count, limit)

            if row is None:
                cursor.execute(
                    """
                    INSERT INTO guests (guest_id, predictions_count, created_at, last_active)
                    VALUES (?, 1, ?, ?)
                    """,
                    (guest_id, now, now),
                )
            else:
                cursor.execute(
                    "UPDATE guests SET predictions_count = ?, last_active = ? WHERE guest_id = ?",
                    (count + 1, now, guest_id),
                )
            conn.commit()
            return count + 1
        except GuestLimitReached:
            raise
        except Exception:
            conn.rollback()
            raise


def clear_guest_records() -> None:
    conn = _get_connection()
    with _conn_lock:
        conn.execute("DELETE FROM guests")
