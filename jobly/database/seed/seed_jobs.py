import logging

logger = logging.getLogger(__name__)

# (title, company, location, salary, description, type, poster email)
JOBS = [
    (
        "Frontend Developer", "Tech Solutions Inc.", "New York, NY", "$90,000 - $110,000",
        "We are looking for a skilled Frontend Developer to join our dynamic team. "
        "Experience with React, Vue, or Angular is a plus.",
        "Full-time", "alice@example.com",
    ),
    (
        "Senior Software Engineer", "Global Innovations", "San Francisco, CA", "$130,000 - $160,000",
        "Seeking a Senior Software Engineer with strong backend experience in Node.js and Python. "
        "Must have experience with distributed systems.",
        "Full-time", "alice@example.com",
    ),
    (
        "UI/UX Designer", "Creative Minds Studio", "Remote", "$75,000 - $95,000",
        "Passionate UI/UX Designer needed to craft intuitive and beautiful user interfaces. "
        "Portfolio required.",
        "Remote", "charlie@example.com",
    ),
    (
        "Backend Developer", "DataFlow Systems", "Austin, TX", "$100,000 - $120,000",
        "Join our team as a Backend Developer focusing on API development and database management. "
        "Node.js and SQL experience preferred.",
        "Full-time", "charlie@example.com",
    ),
    (
        "Fullstack Software Developer", "Innovate Corp", "Seattle, WA", "$110,000 - $140,000",
        "We need a versatile Fullstack Software Developer proficient in both frontend (React) "
        "and backend (Node.js) technologies.",
        "Full-time", "alice@example.com",
    ),
    (
        "DevOps Engineer", "Cloud Solutions Ltd.", "Remote", "$120,000 - $150,000",
        "Experienced DevOps Engineer to manage CI/CD pipelines, cloud infrastructure (AWS/Azure), "
        "and automation tools.",
        "Remote", "charlie@example.com",
    ),
    (
        "Data Scientist", "Quant Analytics", "Boston, MA", "$100,000 - $130,000",
        "Seeking a Data Scientist with strong statistical modeling and machine learning skills. "
        "Python and R experience required.",
        "Full-time", "alice@example.com",
    ),
    (
        "Mobile App Developer", "AppGenius", "Los Angeles, CA", "$95,000 - $125,000",
        "Develop cutting-edge mobile applications for iOS and Android. "
        "Experience with React Native or Flutter is a plus.",
        "Full-time", "charlie@example.com",
    ),
]


def seed(handle):
    logger.info("Seeding jobs...")

    poster_ids = {}
    for *fields, email in JOBS:
        if email not in poster_ids:
            row = handle.query_one("SELECT id FROM users WHERE email = ?", (email,))
            poster_ids[email] = row["id"]
        handle.execute(
            "INSERT INTO jobs (title, company, location, salary, description, type, posted_by) "
            "VALUES (?, ?, ?, ?, ?, ?, ?)",
            (*fields, poster_ids[email]),
        )

    logger.info("Jobs seeded: %d", len(JOBS))
