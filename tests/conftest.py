import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SUPABASE_URL", "http://supabase.test")
os.environ.setdefault("SUPABASE_ANON_KEY", "anon-key")
os.environ.setdefault("GROQ_API_KEY", "test-groq-key")

import itertools
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.core.llm import get_llm_client
from app.database.supabase_client import get_service_supabase, get_supabase
from app.main import app
from app.modules.auth.service import clear_auth_cache
from app.modules.notifications.emailjs import get_email_client
from app.modules.scraper.fetcher import FetchError, get_page_fetcher
from app.modules.transcripts.routes import get_transcript_service


class FakeQuery:
    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.filters = []
        self.action = "select"
        self.payload = None
        self.columns = "*"
        self.order_by = None
        self.row_limit = None

    def select(self, columns="*"):
        self.columns = columns
        return self

    def insert(self, payload):
        self.action, self.payload = "insert", payload
        return self

    def update(self, payload):
        self.action, self.payload = "update", payload
        return self

    def upsert(self, payload, on_conflict="id"):
        self.action, self.payload = "upsert", payload
        self.on_conflict = on_conflict
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column, values):
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def _matches(self, row):
        return all(f(row) for f in self.filters)

    def _project(self, row):
        if self.columns == "*":
            return dict(row)
        keys = [c.strip() for c in self.columns.split(",")]
        return {k: row.get(k) for k in keys}

    def execute(self):
        rows = self.db.tables.setdefault(self.table, [])
        self.db.calls.append((self.table, self.action))

        if self.action == "insert":
            row = {"id": self.db.next_id(), "created_at": self.db.now(), **self.payload}
            rows.append(row)
            return SimpleNamespace(data=[dict(row)])

        if self.action == "upsert":
            key = self.on_conflict
            for row in rows:
                if row.get(key) == self.payload.get(key):
                    row.update(self.payload)
                    return SimpleNamespace(data=[dict(row)])
            row = dict(self.payload)
            rows.append(row)
            return SimpleNamespace(data=[dict(row)])

        matched = [row for row in rows if self._matches(row)]
        if self.action == "update":
            for row in matched:
                row.update(self.payload)
            return SimpleNamespace(data=[dict(row) for row in matched])
        if self.action == "delete":
            self.db.tables[self.table] = [row for row in rows if not self._matches(row)]
            return SimpleNamespace(data=[dict(row) for row in matched])

        if self.order_by:
            column, desc = self.order_by
            matched.sort(key=lambda row: row.get(column) or "", reverse=desc)
        if self.row_limit is not None:
            matched = matched[:self.row_limit]
        return SimpleNamespace(data=[self._project(row) for row in matched])


class FakeAuth:
    def __init__(self):
        self.tokens = {}
        self.lookups = 0

    def get_user(self, jwt=None):
        self.lookups += 1
        user = self.tokens.get(jwt)
        if user is None:
            raise Exception("invalid JWT: token is expired")
        return SimpleNamespace(user=user)

    def sign_out(self):
        return None


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.calls = []
        self.auth = FakeAuth()
        self._ids = itertools.count(1)
        self._clock = itertools.count(1)

    def next_id(self):
        return f"id-{next(self._ids)}"

    def now(self):
        return f"2024-01-01T00:00:{next(self._clock):02d}+00:00"

    def table(self, name):
        return FakeQuery(self, name)

    def add_user(self, token, user_id, email="user@example.com"):
        self.auth.tokens[token] = SimpleNamespace(id=user_id, email=email, user_metadata={})


class FakeLLM:
    """Returns queued replies in order; records every prompt"""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []
        self.configured = True

    async def complete(self, prompt, system="", max_tokens=512, temperature=0.3):
        self.calls.append({
            "prompt": prompt,
            "system": system,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        if not self.replies:
            return ""
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeFetcher:
    def __init__(self, pages=None):
        self.pages = pages or {}
        self.requested = []

    async def fetch_html(self, url, referer=None):
        self.requested.append(url)
        page = self.pages.get(url)
        if page is None:
            raise FetchError("HTTP 404: Not Found", status=404)
        return page


class FakeTranscripts:
    def __init__(self, transcript=None, summary="Video summary"):
        self.transcript = transcript
        self.summary = summary
        self.requested = []

    async def fetch_transcript(self, video_id):
        self.requested.append(video_id)
        return self.transcript

    async def summarize_transcript(self, transcript, video_id):
        return self.summary


class FakeEmail:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    async def send(self, service_id, template_id, params):
        from app.core.exceptions import UpstreamServiceError

        if self.fail:
            raise UpstreamServiceError("Email delivery failed")
        self.sent.append((service_id, template_id, params))


@pytest.fixture
def db():
    return FakeSupabase()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def transcripts():
    return FakeTranscripts()


@pytest.fixture
def email():
    return FakeEmail()


@pytest.fixture
def client(db, llm, fetcher, transcripts, email, tmp_path, monkeypatch):
    from app.config import settings

    monkeypatch.setattr(settings, "guest_storage_dir", str(tmp_path / "guest_notes"))
    clear_auth_cache()
    app.dependency_overrides[get_supabase] = lambda: db
    app.dependency_overrides[get_service_supabase] = lambda: db
    app.dependency_overrides[get_llm_client] = lambda: llm
    app.dependency_overrides[get_page_fetcher] = lambda: fetcher
    app.dependency_overrides[get_transcript_service] = lambda: transcripts
    app.dependency_overrides[get_email_client] = lambda: email
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    clear_auth_cache()
