"""
Data-access operations. Every function takes the database handle as its first
argument and runs fixed, parameterized statements against it.
"""
import logging

from jobly.errors import ConstraintViolationError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

JOB_FIELDS = ("title", "company", "location", "salary", "description", "type")
JOB_POSTER_ROLES = ("employer", "admin")


# ==================== USERS ====================

def create_user(handle, name, email, hashed_password, role):
    """Insert a user and return its id. Duplicate email -> ConstraintViolationError."""
    return handle.insert(
        "INSERT INTO users (name, email, password, role) VALUES (?, ?, ?, ?)",
        (name, email, hashed_password, role),
    )


def get_user_by_email(handle, email):
    return handle.query_one("SELECT * FROM users WHERE email = ?", (email,))


# ==================== JOBS ====================

def list_jobs(handle):
    """All jobs, newest first. Ties on created_at fall back to insertion order."""
    return handle.query("SELECT * FROM jobs ORDER BY created_at DESC, id DESC")


def get_job_by_id(handle, job_id):
    return handle.query_one("SELECT * FROM jobs WHERE id = ?", (job_id,))


def create_job(handle, fields, caller):
    """Post a job on behalf of ``caller``; only employers and admins may."""
    if caller["role"] not in JOB_POSTER_ROLES:
        raise ForbiddenError("Only employers can post jobs")

    values = tuple(fields.get(name) for name in JOB_FIELDS)
    job_id = handle.insert(
        "INSERT INTO jobs (title, company, location, salary, description, type, posted_by) "
        "VALUES (?, ?, ?, ?, ?, ?, ?)",
        (*values, caller["id"]),
    )
    logger.info("Job %s posted by user %s", job_id, caller["id"])
    return job_id


# ==================== APPLICATIONS ====================

def apply_to_job(handle, job_id, caller):
    """Record an application by a candidate. One application per (job, user)."""
    if caller["role"] != "candidate":
        raise ForbiddenError("Only candidates can apply")

    with handle.transaction():
        if get_job_by_id(handle, job_id) is None:
            raise NotFoundError("Job not found")
        try:
            application_id = handle.insert(
                "INSERT INTO applications (job_id, user_id) VALUES (?, ?)",
                (job_id, caller["id"]),
            )
        except ConstraintViolationError as e:
            logger.info("Duplicate application: job %s, user %s", job_id, caller["id"])
            raise ConstraintViolationError("Already applied to this job") from e
    return application_id


def list_applications_for_user(handle, user_id):
    """Applications of one user joined with the job title and company."""
    return handle.query(
        """
        SELECT a.*, j.title, j.company
        FROM applications a
        JOIN jobs j ON a.job_id = j.id
        WHERE a.user_id = ?
        ORDER BY a.applied_at DESC, a.id DESC
        """,
        (user_id,),
    )
