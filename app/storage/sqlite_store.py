from __future__ import annotations

import json
import os
import sqlite3
import threading
import uuid
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from app.schemas import (
    CareerCreate,
    CareerRecord,
    JournalEntry,
    JournalEntryCreate,
    PersonalityAssessment,
    RecommendationWithCareer,
    ScoredCareer,
    TraitVector,
    User,
    UserUpsert,
)

from .provider import StoreError

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        email TEXT UNIQUE,
        first_name TEXT,
        last_name TEXT,
        profile_image_url TEXT,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS personality_assessments (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL UNIQUE,
        openness REAL NOT NULL,
        conscientiousness REAL NOT NULL,
        extraversion REAL NOT NULL,
        agreeableness REAL NOT NULL,
        neuroticism REAL NOT NULL,
        completed_at TEXT NOT NULL
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS journal_entries (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        mood TEXT,
        enjoyed TEXT,
        challenges TEXT,
        learned TEXT,
        keywords_json TEXT,
        themes_json TEXT,
        skills_json TEXT,
        created_at TEXT NOT NULL
    );
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_journal_entries_user_created
    ON journal_entries (user_id, created_at);
    """,
    """
    CREATE TABLE IF NOT EXISTS careers (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT NOT NULL,
        salary_min INTEGER,
        salary_max INTEGER,
        growth_rate REAL,
        education_level TEXT,
        remote_work INTEGER NOT NULL DEFAULT 0,
        skills_json TEXT NOT NULL,
        interests_json TEXT NOT NULL,
        personality_vector_json TEXT,
        roadmap_year1 TEXT,
        roadmap_year2 TEXT,
        roadmap_year3 TEXT,
        icon_class TEXT,
        color_scheme TEXT
    );
    """,
    """
    CREATE TABLE IF NOT EXISTS career_recommendations (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        career_id TEXT NOT NULL REFERENCES careers (id),
        match_score REAL NOT NULL,
        rank INTEGER NOT NULL,
        generated_at TEXT NOT NULL,
        UNIQUE (user_id, career_id)
    );
    """,
)

_CAREER_COLUMNS = (
    "id, title, description, salary_min, salary_max, growth_rate, education_level, remote_work, "
    "skills_json, interests_json, personality_vector_json, roadmap_year1, roadmap_year2, roadmap_year3, "
    "icon_class, color_scheme"
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _load_list(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    return [str(item) for item in json.loads(raw)]


def _row_to_dict(cursor: sqlite3.Cursor, row: tuple) -> dict[str, Any]:
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


def _career_from_row(row: dict[str, Any]) -> CareerRecord:
    vector_raw = row.get("personality_vector_json")
    return CareerRecord(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        salary_min=row["salary_min"],
        salary_max=row["salary_max"],
        growth_rate=row["growth_rate"],
        education_level=row["education_level"],
        remote_work=bool(row["remote_work"]),
        skills=_load_list(row["skills_json"]) or [],
        interests=_load_list(row["interests_json"]) or [],
        personality_vector=TraitVector(**json.loads(vector_raw)) if vector_raw else None,
        roadmap_year1=row["roadmap_year1"],
        roadmap_year2=row["roadmap_year2"],
        roadmap_year3=row["roadmap_year3"],
        icon_class=row["icon_class"],
        color_scheme=row["color_scheme"],
    )


def _entry_from_row(row: dict[str, Any]) -> JournalEntry:
    return JournalEntry(
        id=row["id"],
        user_id=row["user_id"],
        mood=row["mood"],
        enjoyed=row["enjoyed"],
        challenges=row["challenges"],
        learned=row["learned"],
        keywords=_load_list(row["keywords_json"]),
        themes=_load_list(row["themes_json"]),
        skills=_load_list(row["skills_json"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class SQLiteCareerStore:
    """CareerStore backed by a single shared SQLite connection."""

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path
        self._lock = threading.Lock()

        directory = os.path.dirname(db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        self._conn = sqlite3.connect(
            db_path,
            check_same_thread=False,
            timeout=5,
            isolation_level=None,
        )
        self._conn.execute("PRAGMA journal_mode=WAL;")
        self._conn.execute("PRAGMA synchronous=NORMAL;")
        self._conn.execute("PRAGMA busy_timeout=5000;")
        self._conn.execute("PRAGMA foreign_keys=ON;")
        for statement in _SCHEMA:
            self._conn.execute(statement)

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Cursor]:
        with self._lock:
            cursor = self._conn.cursor()
            cursor.execute("BEGIN IMMEDIATE")
            try:
                yield cursor
                self._conn.commit()
            except sqlite3.Error as exc:
                self._conn.rollback()
                raise StoreError(f"Database write failed: {exc}") from exc
            except Exception:
                self._conn.rollback()
                raise

    def _fetch_all(self, query: str, params: tuple = ()) -> list[dict[str, Any]]:
        with self._lock:
            cur = self._conn.execute(query, params)
            rows = cur.fetchall()
            return [_row_to_dict(cur, row) for row in rows]

    def _fetch_one(self, query: str, params: tuple = ()) -> dict[str, Any] | None:
        rows = self._fetch_all(query, params)
        return rows[0] if rows else None

    # Users

    def upsert_user(self, user: UserUpsert) -> User:
        now_iso = _utc_now().isoformat()
        with self._transaction() as cur:
            cur.execute(
                """
                INSERT INTO users (id, email, first_name, last_name, profile_image_url, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT (id) DO UPDATE SET
                    email = excluded.email,
                    first_name = excluded.first_name,
                    last_name = excluded.last_name,
                    profile_image_url = excluded.profile_image_url,
                    updated_at = excluded.updated_at
                """,
                (user.id, user.email, user.first_name, user.last_name, user.profile_image_url, now_iso, now_iso),
            )
        stored = self.get_user(user.id)
        if stored is None:
            raise StoreError(f"User '{user.id}' vanished after upsert.")
        return stored

    def get_user(self, user_id: str) -> User | None:
        row = self._fetch_one("SELECT * FROM users WHERE id = ?", (user_id,))
        if not row:
            return None
        return User(
            id=row["id"],
            email=row["email"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            profile_image_url=row["profile_image_url"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    # Personality assessments

    def save_personality_assessment(self, user_id: str, traits: TraitVector) -> PersonalityAssessment:
        assessment = PersonalityAssessment(
            id=_new_id(),
            user_id=user_id,
            completed_at=_utc_now(),
            **traits.model_dump(),
        )
        with self._transaction() as cur:
            cur.execute("DELETE FROM personality_assessments WHERE user_id = ?", (user_id,))
            cur.execute(
                """
                INSERT INTO personality_assessments (
                    id, user_id, openness, conscientiousness, extraversion, agreeableness, neuroticism, completed_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    assessment.id,
                    user_id,
                    assessment.openness,
                    assessment.conscientiousness,
                    assessment.extraversion,
                    assessment.agreeableness,
                    assessment.neuroticism,
                    assessment.completed_at.isoformat(),
                ),
            )
        return assessment

    def get_personality_assessment(self, user_id: str) -> PersonalityAssessment | None:
        row = self._fetch_one("SELECT * FROM personality_assessments WHERE user_id = ?", (user_id,))
        if not row:
            return None
        return PersonalityAssessment(
            id=row["id"],
            user_id=row["user_id"],
            openness=row["openness"],
            conscientiousness=row["conscientiousness"],
            extraversion=row["extraversion"],
            agreeableness=row["agreeableness"],
            neuroticism=row["neuroticism"],
            completed_at=datetime.fromisoformat(row["completed_at"]),
        )

    # Journal entries

    def create_journal_entry(self, user_id: str, entry: JournalEntryCreate) -> JournalEntry:
        created = JournalEntry(
            id=_new_id(),
            user_id=user_id,
            mood=entry.mood,
            enjoyed=entry.enjoyed,
            challenges=entry.challenges,
            learned=entry.learned,
            created_at=_utc_now(),
        )
        with self._transaction() as cur:
            cur.execute(
                """
                INSERT INTO journal_entries (id, user_id, mood, enjoyed, challenges, learned, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    created.id,
                    user_id,
                    created.mood,
                    created.enjoyed,
                    created.challenges,
                    created.learned,
                    created.created_at.isoformat(),
                ),
            )
        return created

    def get_journal_entries(self, user_id: str, limit: int = 10) -> list[JournalEntry]:
        rows = self._fetch_all(
            """
            SELECT * FROM journal_entries
            WHERE user_id = ?
            ORDER BY created_at DESC, rowid DESC
            LIMIT ?
            """,
            (user_id, max(0, int(limit))),
        )
        return [_entry_from_row(row) for row in rows]

    def update_journal_entry_analysis(
        self,
        entry_id: str,
        keywords: Sequence[str],
        themes: Sequence[str],
        skills: Sequence[str],
    ) -> None:
        with self._transaction() as cur:
            cur.execute(
                """
                UPDATE journal_entries
                SET keywords_json = ?, themes_json = ?, skills_json = ?
                WHERE id = ?
                """,
                (
                    json.dumps(list(keywords), ensure_ascii=False),
                    json.dumps(list(themes), ensure_ascii=False),
                    json.dumps(list(skills), ensure_ascii=False),
                    entry_id,
                ),
            )

    # Careers

    def get_all_careers(self) -> list[CareerRecord]:
        rows = self._fetch_all(f"SELECT {_CAREER_COLUMNS} FROM careers ORDER BY rowid")
        return [_career_from_row(row) for row in rows]

    def get_career_by_id(self, career_id: str) -> CareerRecord | None:
        row = self._fetch_one(f"SELECT {_CAREER_COLUMNS} FROM careers WHERE id = ?", (career_id,))
        return _career_from_row(row) if row else None

    def create_career(self, career: CareerCreate) -> CareerRecord:
        with self._transaction() as cur:
            return self._insert_career(cur, career)

    def seed_catalog(self, careers: Sequence[CareerCreate]) -> int:
        """Insert the whole catalog in one transaction, only if no careers exist yet."""
        with self._transaction() as cur:
            (count,) = cur.execute("SELECT COUNT(*) FROM careers").fetchone()
            if count:
                return 0
            for career in careers:
                self._insert_career(cur, career)
        return len(careers)

    def _insert_career(self, cur: sqlite3.Cursor, career: CareerCreate) -> CareerRecord:
        record = CareerRecord(id=_new_id(), **career.model_dump())
        vector = record.personality_vector.model_dump() if record.personality_vector else None
        cur.execute(
            f"""
            INSERT INTO careers ({_CAREER_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                record.id,
                record.title,
                record.description,
                record.salary_min,
                record.salary_max,
                record.growth_rate,
                record.education_level,
                1 if record.remote_work else 0,
                json.dumps(record.skills, ensure_ascii=False),
                json.dumps(record.interests, ensure_ascii=False),
                json.dumps(vector) if vector is not None else None,
                record.roadmap_year1,
                record.roadmap_year2,
                record.roadmap_year3,
                record.icon_class,
                record.color_scheme,
            ),
        )
        return record

    # Recommendations

    def save_career_recommendations(self, user_id: str, recommendations: Sequence[ScoredCareer]) -> None:
        generated_at = _utc_now().isoformat()
        with self._transaction() as cur:
            cur.execute("DELETE FROM career_recommendations WHERE user_id = ?", (user_id,))
            cur.executemany(
                """
                INSERT INTO career_recommendations (id, user_id, career_id, match_score, rank, generated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    (_new_id(), user_id, rec.career_id, rec.match_score, rank, generated_at)
                    for rank, rec in enumerate(recommendations)
                ],
            )

    def get_career_recommendations(self, user_id: str) -> list[RecommendationWithCareer]:
        rows = self._fetch_all(
            f"""
            SELECT r.id AS rec_id, r.user_id, r.career_id, r.match_score, r.generated_at,
                   {", ".join(f"c.{col.strip()}" for col in _CAREER_COLUMNS.split(","))}
            FROM career_recommendations r
            JOIN careers c ON c.id = r.career_id
            WHERE r.user_id = ?
            ORDER BY r.match_score DESC, r.rank ASC
            """,
            (user_id,),
        )
        return [
            RecommendationWithCareer(
                id=row["rec_id"],
                user_id=row["user_id"],
                career_id=row["career_id"],
                match_score=row["match_score"],
                generated_at=datetime.fromisoformat(row["generated_at"]),
                career=_career_from_row(row),
            )
            for row in rows
        ]
