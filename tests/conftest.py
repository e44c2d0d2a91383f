"""Shared pytest fixtures: in-memory database, manual clock, sample users."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.models import Collection, Company, UserRecord, init_db


class FakeHandle:
    def __init__(self, clock, due, callback):
        self.clock = clock
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualClock:
    """Deterministic stand-in for the event loop's ``call_later``."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def schedule(self, delay, callback):
        handle = FakeHandle(self, self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def advance_to(self, t):
        """Move time forward to *t*, firing due callbacks in order."""
        while True:
            due = [h for h in self.handles if not h.cancelled and h.due <= t]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self.handles.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = t

    def advance(self, seconds):
        self.advance_to(self.now + seconds)

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


def make_user(user_id, name, company="Acme", email=None, phone="555-0100"):
    return UserRecord(
        id=user_id,
        name=name,
        email=email or f"{name.split()[0].lower()}@example.com",
        phone=phone,
        company=Company(name=company),
    )


def make_collection(names, companies=None):
    companies = companies or ["Acme"] * len(names)
    return Collection.ready(
        make_user(i + 1, name, company) for i, (name, company) in enumerate(zip(names, companies))
    )


@pytest.fixture
def users():
    return make_collection(
        ["Leanne Graham", "Ervin Howell", "Clementine Bauch", "Patricia Lebsack",
         "Chelsey Dietrich", "Dennis Schulist", "Kurtis Weissnat", "Nicholas Runolfsdottir",
         "Glenna Reichert", "Clementina DuBuque", "Alice Cooper", "Alina Stone"],
        ["Romaguera-Crona", "Deckow-Crist", "Romaguera-Jacobson", "Robel-Corkery",
         "Keebler LLC", "Considine-Lockman", "Johns Group", "Abernathy Group",
         "Yost and Sons", "Hoeger LLC", "Acme", "Acme"],
    )


@pytest.fixture
def raw_users():
    """JSON payload in the shape the remote directory returns."""
    return [
        {
            "id": 1,
            "name": "Leanne Graham",
            "username": "Bret",
            "email": "Sincere@april.biz",
            "phone": "1-770-736-8031 x56442",
            "company": {"name": "Romaguera-Crona", "bs": "harness real-time e-markets"},
        },
        {
            "id": 2,
            "name": "Ervin Howell",
            "username": "Antonette",
            "email": "Shanna@melissa.tv",
            "phone": "010-692-6593 x09125",
            "company": {"name": "Deckow-Crist"},
        },
    ]
