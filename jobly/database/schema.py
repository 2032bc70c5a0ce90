import logging

from jobly.database.seed.seed_all import seed_all

logger = logging.getLogger(__name__)

ROLES = ("candidate", "employer", "admin")
APPLICATION_STATUSES = ("applied", "reviewed", "accepted", "rejected")


def _one_of(values):
    return ", ".join(f"'{value}'" for value in values)


SCHEMA = f"""
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT,
    email TEXT NOT NULL UNIQUE,
    password TEXT NOT NULL,
    role TEXT NOT NULL CHECK(role IN ({_one_of(ROLES)}))
);

CREATE TABLE IF NOT EXISTS jobs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT,
    company TEXT,
    location TEXT,
    salary TEXT,
    description TEXT,
    type TEXT,
    posted_by INTEGER,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY(posted_by) REFERENCES users(id)
);

CREATE TABLE IF NOT EXISTS applications (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    job_id INTEGER NOT NULL,
    user_id INTEGER NOT NULL,
    status TEXT NOT NULL DEFAULT 'applied'
        CHECK(status IN ({_one_of(APPLICATION_STATUSES)})),
    applied_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    UNIQUE(job_id, user_id),
    FOREIGN KEY(job_id) REFERENCES jobs(id),
    FOREIGN KEY(user_id) REFERENCES users(id)
);
"""


def ensure_schema(handle):
    """Create the tables that are missing.

    Returns True when the handle did not come from an existing file, which is
    the only signal used to decide whether to seed.
    """
    handle.executescript(SCHEMA)
    logger.info("Database schema ensured.")
    return not handle.existed


def initialize(handle):
    """Ensure the schema and seed a freshly created database.

    A file that exists but whose tables were emptied is not reseeded.
    Returns True when seed rows were inserted.
    """
    fresh = ensure_schema(handle)
    if not fresh:
        return False
    seed_all(handle)
    # the live database now has content; a second initialize must not reseed
    handle.existed = True
    return True
