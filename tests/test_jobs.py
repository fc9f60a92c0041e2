"""
채용공고 API 테스트

실행 방법:
    uv sync --all-extras  # dev 의존성 설치
    pytest tests/test_jobs.py -v
"""
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import asyncpg
import pytest


@pytest.fixture
def mock_jobs_data():
    """테스트용 채용공고 데이터"""
    return [
        {
            "id": 1,
            "title": "Conservator, furniture",
            "salary": 110000,
            "equity": Decimal("0"),
            "company_handle": "bauer-gallagher",
        },
        {
            "id": 2,
            "title": "Consulting civil engineer",
            "salary": 60000,
            "equity": Decimal("0.05"),
            "company_handle": "edwards-lee-reese",
        },
    ]


class TestGetJobs:
    """GET /jobs 테스트"""

    def test_get_jobs_success(self, client, conn, mock_jobs_data):
        with patch("db.repositories.jobs.find_all", new_callable=AsyncMock,
                   return_value=mock_jobs_data) as mock_find:
            response = client.get("/jobs")

        assert response.status_code == 200
        data = response.json()
        assert [j["id"] for j in data["jobs"]] == [1, 2]
        assert data["jobs"][1]["equity"] == "0.05"
        mock_find.assert_awaited_once_with(conn, title=None, min_salary=None, has_equity=None)

    def test_get_jobs_with_filters(self, client, conn):
        with patch("db.repositories.jobs.find_all", new_callable=AsyncMock, return_value=[]) as mock_find:
            response = client.get("/jobs?title=eng&min_salary=50000&has_equity=true")

        assert response.status_code == 200
        assert response.json() == {"jobs": []}
        mock_find.assert_awaited_once_with(conn, title="eng", min_salary=50000, has_equity=True)

    def test_get_jobs_negative_salary(self, client):
        response = client.get("/jobs?min_salary=-1")
        assert response.status_code == 422

    def test_get_jobs_invalid_has_equity(self, client):
        response = client.get("/jobs?has_equity=maybe")
        assert response.status_code == 422

    def test_get_jobs_min_salary_out_of_int4_range(self, client):
        with patch("db.repositories.jobs.find_all", new_callable=AsyncMock) as mock_find:
            response = client.get("/jobs?min_salary=3000000000")

        assert response.status_code == 422
        mock_find.assert_not_awaited()


class TestGetJob:
    """GET /jobs/{job_id} 테스트"""

    def test_get_job_success(self, client, mock_jobs_data):
        with patch("db.repositories.jobs.get", new_callable=AsyncMock, return_value=mock_jobs_data[0]):
            response = client.get("/jobs/1")

        assert response.status_code == 200
        assert response.json()["job"]["title"] == "Conservator, furniture"

    def test_get_job_not_found(self, client):
        with patch("db.repositories.jobs.get", new_callable=AsyncMock, return_value=None):
            response = client.get("/jobs/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "No job: 999"

    def test_get_job_invalid_id(self, client):
        response = client.get("/jobs/0")
        assert response.status_code == 422

    def test_get_job_id_out_of_int4_range(self, client):
        with patch("db.repositories.jobs.get", new_callable=AsyncMock) as mock_get:
            response = client.get("/jobs/99999999999")

        assert response.status_code == 422
        mock_get.assert_not_awaited()


class TestCreateJob:
    """POST /jobs 테스트"""

    new_job = {
        "title": "New job",
        "salary": 100,
        "equity": "0.1",
        "company_handle": "bauer-gallagher",
    }

    def test_create_job_success(self, client, admin_headers):
        created = {"id": 10, **self.new_job, "equity": Decimal("0.1")}
        with patch("db.repositories.jobs.title_exists", new_callable=AsyncMock, return_value=False), \
                patch("db.repositories.jobs.create", new_callable=AsyncMock, return_value=created) as mock_create:
            response = client.post("/jobs", json=self.new_job, headers=admin_headers)

        assert response.status_code == 201
        assert response.json()["job"]["id"] == 10
        assert mock_create.await_args.kwargs["equity"] == Decimal("0.1")

    def test_create_job_duplicate_title(self, client, admin_headers):
        with patch("db.repositories.jobs.title_exists", new_callable=AsyncMock, return_value=True):
            response = client.post("/jobs", json=self.new_job, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate job: New job"

    def test_create_job_unknown_company(self, client, admin_headers):
        with patch("db.repositories.jobs.title_exists", new_callable=AsyncMock, return_value=False), \
                patch("db.repositories.jobs.create", new_callable=AsyncMock,
                      side_effect=asyncpg.ForeignKeyViolationError("fk")):
            response = client.post("/jobs", json=self.new_job, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No company: bauer-gallagher"

    def test_create_job_equity_out_of_range(self, client, admin_headers):
        response = client.post("/jobs", json={**self.new_job, "equity": 1.5}, headers=admin_headers)
        assert response.status_code == 422

    def test_create_job_salary_out_of_int4_range(self, client, admin_headers):
        body = {"title": "Big", "salary": 2**31, "company_handle": "bauer-gallagher"}
        response = client.post("/jobs", json=body, headers=admin_headers)
        assert response.status_code == 422

    def test_create_job_non_admin(self, client, user_headers):
        response = client.post("/jobs", json=self.new_job, headers=user_headers)
        assert response.status_code == 401

    def test_create_job_anonymous(self, client):
        response = client.post("/jobs", json=self.new_job)
        assert response.status_code == 401


class TestUpdateJob:
    """PATCH /jobs/{job_id} 테스트"""

    def test_update_job_passes_only_sent_fields(self, client, conn, admin_headers, mock_jobs_data):
        updated = {**mock_jobs_data[0], "salary": 120000}
        with patch("db.repositories.jobs.update", new_callable=AsyncMock, return_value=updated) as mock_update:
            response = client.patch("/jobs/1", json={"salary": 120000}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["job"]["salary"] == 120000
        mock_update.assert_awaited_once_with(conn, 1, {"salary": 120000})

    def test_update_job_empty_body(self, client, admin_headers):
        """빈 body -> SET 절 생성 단계에서 400"""
        response = client.patch("/jobs/1", json={}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "No data supplied"

    def test_update_job_not_found(self, client, admin_headers):
        with patch("db.repositories.jobs.title_exists", new_callable=AsyncMock, return_value=False), \
                patch("db.repositories.jobs.update", new_callable=AsyncMock, return_value=None):
            response = client.patch("/jobs/999", json={"title": "x"}, headers=admin_headers)

        assert response.status_code == 404

    def test_update_job_duplicate_title(self, client, conn, admin_headers):
        """다른 공고가 이미 쓰는 제목으로 변경 -> 400, update는 실행하지 않음"""
        with patch("db.repositories.jobs.title_exists", new_callable=AsyncMock,
                   return_value=True) as mock_exists, \
                patch("db.repositories.jobs.update", new_callable=AsyncMock) as mock_update:
            response = client.patch("/jobs/1", json={"title": "Information officer"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate job: Information officer"
        mock_exists.assert_awaited_once_with(conn, "Information officer", exclude_id=1)
        mock_update.assert_not_awaited()

    def test_update_job_without_title_skips_duplicate_check(self, client, admin_headers, mock_jobs_data):
        with patch("db.repositories.jobs.title_exists", new_callable=AsyncMock) as mock_exists, \
                patch("db.repositories.jobs.update", new_callable=AsyncMock, return_value=mock_jobs_data[0]):
            response = client.patch("/jobs/1", json={"salary": 1}, headers=admin_headers)

        assert response.status_code == 200
        mock_exists.assert_not_awaited()

    def test_update_job_company_handle_forbidden(self, client, admin_headers):
        response = client.patch("/jobs/1", json={"company_handle": "other"}, headers=admin_headers)
        assert response.status_code == 422

    def test_update_job_null_title(self, client, admin_headers):
        response = client.patch("/jobs/1", json={"title": None}, headers=admin_headers)
        assert response.status_code == 422

    def test_update_job_non_admin(self, client, user_headers):
        response = client.patch("/jobs/1", json={"salary": 1}, headers=user_headers)
        assert response.status_code == 401


class TestDeleteJob:
    """DELETE /jobs/{job_id} 테스트"""

    def test_delete_job_success(self, client, admin_headers):
        with patch("db.repositories.jobs.remove", new_callable=AsyncMock, return_value=1):
            response = client.delete("/jobs/1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": 1}

    def test_delete_job_not_found(self, client, admin_headers):
        with patch("db.repositories.jobs.remove", new_callable=AsyncMock, return_value=None):
            response = client.delete("/jobs/999", headers=admin_headers)

        assert response.status_code == 404

    def test_delete_job_anonymous(self, client):
        response = client.delete("/jobs/1")
        assert response.status_code == 401
