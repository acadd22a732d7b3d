import os
import sys
from datetime import date, datetime, time

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# --- path to backend ---
BASE_DIR = os.path.dirname(os.path.dirname(__file__))
BACKEND_DIR = os.path.join(BASE_DIR, "backend")
sys.path.insert(0, BACKEND_DIR)

from database import Base, init_db  # noqa: E402
from repository import BookingRepository  # noqa: E402
from seed import seed  # noqa: E402

ADMIN_ID = 1
STANDARD_ID_2 = 2
STANDARD_ID_3 = 3
PARKING_1 = 1
PARKING_2 = 2

# ------------------ engine ------------------
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def start_of_today() -> datetime:
    return datetime.combine(date.today(), time.min)


# ------------------ fixtures ------------------
@pytest.fixture(autouse=True)
def seeded_db():
    init_db(bind=engine)
    with TestingSessionLocal() as db:
        seed(db)
    yield
    # fresh tables for every test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_booking():
    """Insert a booking straight into the database, skipping every check."""
    def _make(owner_id, parking_id, start, end):
        with TestingSessionLocal() as session:
            booking = BookingRepository(session).insert_booking(owner_id, parking_id, start, end)
            return booking.id
    return _make
