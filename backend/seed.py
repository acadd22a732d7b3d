import logging

from sqlalchemy.orm import Session

from models import Parking, Role, User

logger = logging.getLogger(__name__)

USERS = [
    ("FName-1", "LName-1", "email-1@example.com", Role.ADMIN),
    ("FName-2", "LName-2", "email-2@example.com", Role.STANDARD),
    ("FName-3", "LName-3", "email-3@example.com", Role.STANDARD),
    ("FName-4", "LName-4", "email-4@example.com", Role.STANDARD),
    ("FName-5", "LName-5", "email-5@example.com", Role.STANDARD),
]

PARKINGS = ["Parking 1", "Parking 2", "Parking 3"]


def seed(db: Session) -> bool:
    """Insert the fixture users and parkings. Does nothing if users exist."""
    if db.query(User).first() is not None:
        logger.info("Users already present, skipping seed")
        return False

    for first_name, last_name, email, role in USERS:
        db.add(User(first_name=first_name, last_name=last_name, email=email, role=role.value))
    db.flush()
    for name in PARKINGS:
        db.add(Parking(name=name))
    db.commit()

    logger.info("Seeded %d users and %d parkings", len(USERS), len(PARKINGS))
    return True


if __name__ == "__main__":
    from database import SessionLocal, init_db

    logging.basicConfig(level=logging.INFO)
    init_db()
    with SessionLocal() as db:
        seed(db)
