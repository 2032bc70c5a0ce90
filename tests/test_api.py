"""
Tests for the job and application endpoints
"""
from .conftest import bearer, login

NEW_JOB = {
    "title": "Site Reliability Engineer",
    "company": "Uptime Co.",
    "location": "Remote",
    "salary": "$140,000",
    "description": "Keep things running.",
    "type": "Full-time",
}


class TestListJobs:
    def test_seeded_jobs(self, client):
        response = client.get("/api/jobs")
        assert response.status_code == 200
        jobs = response.get_json()
        assert len(jobs) == 8
        assert {"id", "title", "company", "posted_by", "created_at"} <= set(jobs[0])

    def test_newest_first(self, client):
        token = login(client, "alice@example.com")
        client.post("/api/jobs", json=NEW_JOB, headers=bearer(token))

        jobs = client.get("/api/jobs").get_json()
        assert jobs[0]["title"] == NEW_JOB["title"]
        stamps = [(j["created_at"], j["id"]) for j in jobs]
        assert stamps == sorted(stamps, reverse=True)

    def test_empty_table(self, client, handle):
        handle.execute("DELETE FROM jobs")
        assert client.get("/api/jobs").get_json() == []


class TestCreateJob:
    def test_employer_posts(self, client, handle):
        token = login(client, "alice@example.com")
        response = client.post("/api/jobs", json=NEW_JOB, headers=bearer(token))
        assert response.status_code == 201

        job_id = response.get_json()["id"]
        row = handle.query_one("SELECT * FROM jobs WHERE id = ?", (job_id,))
        alice = handle.query_one("SELECT id FROM users WHERE email = ?", ("alice@example.com",))
        assert row["posted_by"] == alice["id"]
        assert row["title"] == NEW_JOB["title"]

    def test_admin_posts(self, client):
        client.post("/api/register", json={
            "name": "Root", "email": "root@example.com", "password": "pw", "role": "admin",
        })
        token = login(client, "root@example.com", "pw")
        assert client.post("/api/jobs", json=NEW_JOB, headers=bearer(token)).status_code == 201

    def test_candidate_is_forbidden(self, client, handle):
        token = login(client, "bob@example.com")
        response = client.post("/api/jobs", json=NEW_JOB, headers=bearer(token))
        assert response.status_code == 403
        assert handle.query("SELECT * FROM jobs WHERE title = ?", (NEW_JOB["title"],)) == []

    def test_no_token(self, client):
        response = client.post("/api/jobs", json=NEW_JOB)
        assert response.status_code == 401

    def test_bad_token(self, client):
        response = client.post("/api/jobs", json=NEW_JOB, headers=bearer("garbage"))
        assert response.status_code == 403

    def test_missing_title(self, client):
        token = login(client, "charlie@example.com")
        response = client.post("/api/jobs", json={"company": "Nameless"}, headers=bearer(token))
        assert response.status_code == 400


class TestApplications:
    def test_apply_and_list(self, client):
        token = login(client, "bob@example.com")
        jobs = client.get("/api/jobs").get_json()
        job = jobs[0]

        response = client.post(f"/api/apply/{job['id']}", headers=bearer(token))
        assert response.status_code == 201
        assert response.get_json() == {"message": "Application submitted"}

        mine = client.get("/api/my-applications", headers=bearer(token)).get_json()
        assert len(mine) == 1
        assert mine[0]["job_id"] == job["id"]
        assert mine[0]["title"] == job["title"]
        assert mine[0]["company"] == job["company"]
        assert mine[0]["status"] == "applied"

    def test_duplicate_application(self, client, handle):
        token = login(client, "bob@example.com")
        job_id = client.get("/api/jobs").get_json()[0]["id"]

        assert client.post(f"/api/apply/{job_id}", headers=bearer(token)).status_code == 201
        response = client.post(f"/api/apply/{job_id}", headers=bearer(token))
        assert response.status_code == 400

        bob = handle.query_one("SELECT id FROM users WHERE email = ?", ("bob@example.com",))
        rows = handle.query(
            "SELECT * FROM applications WHERE job_id = ? AND user_id = ?", (job_id, bob["id"])
        )
        assert len(rows) == 1

    def test_employer_cannot_apply(self, client, handle):
        token = login(client, "alice@example.com")
        job_id = client.get("/api/jobs").get_json()[0]["id"]
        response = client.post(f"/api/apply/{job_id}", headers=bearer(token))
        assert response.status_code == 403
        assert handle.query("SELECT * FROM applications") == []

    def test_unknown_job(self, client, handle):
        token = login(client, "bob@example.com")
        response = client.post("/api/apply/9999", headers=bearer(token))
        assert response.status_code == 404
        assert handle.query("SELECT * FROM applications") == []

    def test_applications_are_per_user(self, client):
        bob = login(client, "bob@example.com")
        david = login(client, "david@example.com")
        job_id = client.get("/api/jobs").get_json()[0]["id"]
        client.post(f"/api/apply/{job_id}", headers=bearer(bob))

        assert client.get("/api/my-applications", headers=bearer(david)).get_json() == []
        assert len(client.get("/api/my-applications", headers=bearer(bob)).get_json()) == 1

    def test_my_applications_requires_token(self, client):
        assert client.get("/api/my-applications").status_code == 401
