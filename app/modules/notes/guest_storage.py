"""
File-backed notes for visitors without an account.

Each guest id owns one JSON file holding its notes, newest first. Writes go
through a temporary file and ``os.replace`` so a crash never leaves a
half-written list behind.
"""

import json
import logging
import os
import random
import re
import string
import threading
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.config import settings
from app.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

GuestNote = Dict[str, Any]

_GUEST_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
_ID_ALPHABET = string.ascii_lowercase + string.digits


def _new_note_id() -> str:
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"guest_{int(time.time() * 1000)}_{suffix}"


def _timestamp_after(previous: Optional[str]) -> str:
    now = datetime.now(timezone.utc)
    if previous:
        last = datetime.fromisoformat(previous)
        if now <= last:
            now = last + timedelta(microseconds=1)
    return now.isoformat(timespec="microseconds")


class GuestNoteStorage:
    def __init__(self, guest_id: str, directory: Optional[str] = None):
        if not guest_id or not _GUEST_ID_RE.match(guest_id):
            raise ValidationError(
                "Invalid guest id",
                message="X-Guest-Id must be 1-64 letters, digits, '-' or '_'",
            )
        self.guest_id = guest_id
        self.directory = Path(directory or settings.guest_storage_dir)
        self.path = self.directory / f"{guest_id}.json"
        self._lock = threading.Lock()

    def _read(self) -> List[GuestNote]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                notes = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading guest notes for {self.guest_id}: {e}")
            return []
        return notes if isinstance(notes, list) else []

    def _write(self, notes: List[GuestNote]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".json.tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(notes, f, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def get_notes(self) -> List[GuestNote]:
        with self._lock:
            return self._read()

    def save_note(self, title: str, content: Optional[str] = None) -> GuestNote:
        with self._lock:
            notes = self._read()
            created = datetime.now(timezone.utc).isoformat(timespec="microseconds")
            note = {
                "id": _new_note_id(),
                "title": title,
                "content": content,
                "created_at": created,
                "updated_at": created,
            }
            notes.insert(0, note)
            self._write(notes)
        return note

    def update_note(self, note_id: str, title: Optional[str] = None, content: Optional[str] = None) -> Optional[GuestNote]:
        """Apply the given fields. Returns None when the note does not exist."""
        with self._lock:
            notes = self._read()
            for index, note in enumerate(notes):
                if note.get("id") != note_id:
                    continue
                updated = dict(note)
                if title is not None:
                    updated["title"] = title
                if content is not None:
                    updated["content"] = content
                updated["updated_at"] = _timestamp_after(note.get("updated_at"))
                notes[index] = updated
                self._write(notes)
                return updated
        return None

    def delete_note(self, note_id: str) -> bool:
        with self._lock:
            notes = self._read()
            remaining = [note for note in notes if note.get("id") != note_id]
            if len(remaining) == len(notes):
                return False
            self._write(remaining)
        return True

    def clear_all_notes(self) -> None:
        with self._lock:
            try:
                self.path.unlink()
            except FileNotFoundError:
                pass
