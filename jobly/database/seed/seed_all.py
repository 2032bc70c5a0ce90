import logging

from jobly.database.seed.seed_users import seed as seed_users
from jobly.database.seed.seed_jobs import seed as seed_jobs

logger = logging.getLogger(__name__)


def seed_all(handle):
    """Insert the demonstration rows in one transaction."""
    logger.info("Seeding initial data...")
    with handle.transaction():
        seed_users(handle)
        seed_jobs(handle)
    logger.info("Initial data seeded successfully.")
