import logging

from jobly.services.passwords import hash_password

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "password"

USERS = [
    ("Alice Smith", "alice@example.com", "employer"),
    ("Bob Johnson", "bob@example.com", "candidate"),
    ("Charlie Brown", "charlie@example.com", "employer"),
    ("David Lee", "david@example.com", "candidate"),
]


def seed(handle):
    logger.info("Seeding users...")

    hashed_password = hash_password(DEFAULT_PASSWORD)
    for name, email, role in USERS:
        handle.execute(
            "INSERT INTO users (name, email, password, role) VALUES (?, ?, ?, ?)",
            (name, email, hashed_password, role),
        )

    logger.info("Users seeded: %d", len(USERS))
