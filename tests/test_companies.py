"""회사 API 테스트"""
from unittest.mock import AsyncMock, patch

from utils.errors import InvalidInputError, NotFoundError


class TestCreateCompany:
    """POST /companies 테스트"""

    new_company = {
        "handle": "new",
        "name": "New",
        "logoUrl": "http://new.img",
        "description": "DescNew",
        "numEmployees": 10,
    }

    def test_ok_for_admin(self, client, admin_headers):
        with patch("repositories.companies.create", new_callable=AsyncMock,
                   return_value=self.new_company) as mock_create:
            response = client.post("/companies", json=self.new_company, headers=admin_headers)

        assert response.status_code == 201
        assert response.json() == {"company": self.new_company}
        assert mock_create.call_args.kwargs == {
            "handle": "new",
            "name": "New",
            "description": "DescNew",
            "num_employees": 10,
            "logo_url": "http://new.img",
        }

    def test_unauth_for_non_admin(self, client, user_headers):
        response = client.post("/companies", json=self.new_company, headers=user_headers)
        assert response.status_code == 401

    def test_bad_request_with_missing_data(self, client, admin_headers):
        response = client.post("/companies", json={"handle": "new", "numEmployees": 10}, headers=admin_headers)
        assert response.status_code == 400

    def test_bad_request_with_invalid_data(self, client, admin_headers):
        response = client.post(
            "/companies", json={**self.new_company, "numEmployees": -1}, headers=admin_headers
        )
        assert response.status_code == 400

    def test_duplicate(self, client, admin_headers):
        with patch("repositories.companies.create", new_callable=AsyncMock,
                   side_effect=InvalidInputError("Duplicate company: new")):
            response = client.post("/companies", json=self.new_company, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Duplicate company: new"


class TestGetCompanies:
    """GET /companies 테스트"""

    def test_ok_for_anon(self, client, company_rows):
        with patch("repositories.companies.find_all", new_callable=AsyncMock, return_value=company_rows):
            response = client.get("/companies")

        assert response.status_code == 200
        assert response.json() == {"companies": company_rows}

    def test_filters(self, client, company_rows):
        with patch("repositories.companies.find_all", new_callable=AsyncMock,
                   return_value=company_rows[:1]) as mock_find:
            response = client.get("/companies", params={"nameLike": "c", "minEmployees": "1", "maxEmployees": "2"})

        assert response.status_code == 200
        assert mock_find.call_args.kwargs == {"name_like": "c", "min_employees": 1, "max_employees": 2}

    def test_min_greater_than_max(self, client):
        with patch("repositories.companies.find_all", new_callable=AsyncMock,
                   side_effect=InvalidInputError("minEmployees cannot be greater than maxEmployees")):
            response = client.get("/companies", params={"minEmployees": "5", "maxEmployees": "1"})

        assert response.status_code == 400


class TestGetSingleCompany:
    """GET /companies/{handle} 테스트"""

    def test_works_with_jobs(self, client, company_rows):
        detail = {**company_rows[0], "jobs": [{"id": 1, "title": "J1", "salary": 1, "equity": "0.1"}]}
        with patch("repositories.companies.get", new_callable=AsyncMock, return_value=detail):
            response = client.get("/companies/c1")

        assert response.status_code == 200
        assert response.json() == {"company": detail}

    def test_not_found(self, client):
        with patch("repositories.companies.get", new_callable=AsyncMock, side_effect=NotFoundError("No company: nope")):
            response = client.get("/companies/nope")

        assert response.status_code == 404


class TestUpdateCompany:
    """PATCH /companies/{handle} 테스트"""

    def test_works_for_admin(self, client, admin_headers, company_rows):
        updated = {**company_rows[0], "name": "C1-new", "numEmployees": 5}
        with patch("repositories.companies.update", new_callable=AsyncMock, return_value=updated) as mock_update:
            response = client.patch(
                "/companies/c1", json={"name": "C1-new", "numEmployees": 5}, headers=admin_headers
            )

        assert response.status_code == 200
        assert response.json() == {"company": updated}
        # 요청 필드명(camelCase) 그대로 repository로 전달
        assert mock_update.call_args.args == ("c1", {"name": "C1-new", "numEmployees": 5})

    def test_handle_change_rejected(self, client, admin_headers):
        response = client.patch("/companies/c1", json={"handle": "c1-new"}, headers=admin_headers)
        assert response.status_code == 400

    def test_unauth_for_anon(self, client):
        response = client.patch("/companies/c1", json={"name": "C1-new"})
        assert response.status_code == 401


class TestDeleteCompany:
    """DELETE /companies/{handle} 테스트"""

    def test_works_for_admin(self, client, admin_headers):
        with patch("repositories.companies.remove", new_callable=AsyncMock, return_value=None):
            response = client.delete("/companies/c1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"deleted": "c1"}

    def test_unauth_for_non_admin(self, client, user_headers):
        response = client.delete("/companies/c1", headers=user_headers)
        assert response.status_code == 401

    def test_not_found(self, client, admin_headers):
        with patch("repositories.companies.remove", new_callable=AsyncMock,
                   side_effect=NotFoundError("No company: nope")):
            response = client.delete("/companies/nope", headers=admin_headers)

        assert response.status_code == 404
