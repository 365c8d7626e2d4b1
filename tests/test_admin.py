"""
Integration tests for admin endpoints.

Tests:
- Admin provisioning and role gating
- Admin management (list, read, update, delete, password)
- System statistics
"""

import uuid

import pytest

from jobify.core.security import verify_password
from jobify.models import Admin
from tests.conftest import API, auth_headers


def get_admin_headers(client):
    """Helper to log in as the superadmin fixture through the API"""
    response = client.post(
        f"{API}/auth/login/admin",
        json={"email": "a@x.com", "password": "secret123"}
    )
    token = response.json()["accessToken"]
    return {"Authorization": f"Bearer {token}"}


class TestAdminProvisioning:
    """Test POST /admins"""

    def test_superadmin_creates_moderator(self, client, superadmin):
        headers = get_admin_headers(client)

        response = client.post(
            f"{API}/admins",
            headers=headers,
            json={"name": "New Mod", "email": "newmod@x.com", "password": "modpass1", "role": "moderator"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["role"] == "moderator"
        assert data["email"] == "newmod@x.com"
        assert "password" not in data
        assert "hashed_password" not in data

        # The new admin can log in
        login = client.post(
            f"{API}/auth/login/admin",
            json={"email": "newmod@x.com", "password": "modpass1"}
        )
        assert login.status_code == 200
        assert login.json()["user"]["role"] == "moderator"

    def test_create_duplicate_email_conflicts(self, client, superadmin):
        headers = get_admin_headers(client)

        response = client.post(
            f"{API}/admins",
            headers=headers,
            json={"name": "Dup", "email": "a@x.com", "password": "secret123"}
        )

        assert response.status_code == 409
        assert response.json() == {"detail": "Email already exists"}

    def test_create_requires_authentication(self, client):
        response = client.post(
            f"{API}/admins",
            json={"name": "Sneaky", "email": "sneaky@x.com", "password": "secret123", "role": "superadmin"}
        )
        assert response.status_code == 401

    def test_moderator_cannot_create_admin(self, client, moderator):
        response = client.post(
            f"{API}/admins",
            headers=auth_headers(moderator),
            json={"name": "Sneaky", "email": "sneaky@x.com", "password": "secret123"}
        )
        assert response.status_code == 403


class TestAdminManagement:
    """Test admin list, read, update and delete"""

    def test_list_admins(self, client, superadmin, moderator):
        response = client.get(f"{API}/admins", headers=auth_headers(superadmin))

        assert response.status_code == 200
        emails = {a["email"] for a in response.json()}
        assert emails == {"a@x.com", "mod@x.com"}

    def test_list_admins_pagination(self, client, superadmin, moderator):
        response = client.get(f"{API}/admins?skip=0&limit=1", headers=auth_headers(superadmin))
        assert len(response.json()) == 1

    def test_read_admin(self, client, superadmin, moderator):
        response = client.get(f"{API}/admins/{moderator.id}", headers=auth_headers(superadmin))

        assert response.status_code == 200
        assert response.json()["name"] == "Moderator"

    def test_read_missing_admin(self, client, superadmin):
        response = client.get(f"{API}/admins/{uuid.uuid4()}", headers=auth_headers(superadmin))

        assert response.status_code == 404
        assert response.json() == {"detail": "Admin not found"}

    def test_promote_moderator(self, client, superadmin, moderator):
        response = client.patch(
            f"{API}/admins/{moderator.id}",
            headers=auth_headers(superadmin),
            json={"role": "superadmin"}
        )

        assert response.status_code == 200
        assert response.json()["role"] == "superadmin"

    def test_update_email_conflict(self, client, superadmin, moderator):
        response = client.patch(
            f"{API}/admins/{moderator.id}",
            headers=auth_headers(superadmin),
            json={"email": "a@x.com"}
        )
        assert response.status_code == 409

    def test_change_admin_password(self, client, db_session, superadmin, moderator):
        response = client.patch(
            f"{API}/admins/{moderator.id}/password",
            headers=auth_headers(superadmin),
            json={"new_password": "brandnew1"}
        )

        assert response.status_code == 204
        db_session.refresh(moderator)
        assert verify_password("brandnew1", moderator.hashed_password)

    def test_delete_admin(self, client, db_session, superadmin, moderator):
        moderator_id = moderator.id
        response = client.delete(f"{API}/admins/{moderator_id}", headers=auth_headers(superadmin))

        assert response.status_code == 200
        db_session.expire_all()
        assert db_session.query(Admin).filter(Admin.id == moderator_id).first() is None

        # Deleted admin can no longer log in
        login = client.post(
            f"{API}/auth/login/admin",
            json={"email": "mod@x.com", "password": "modpass123"}
        )
        assert login.status_code == 401

    def test_delete_missing_admin(self, client, superadmin):
        response = client.delete(f"{API}/admins/{uuid.uuid4()}", headers=auth_headers(superadmin))
        assert response.status_code == 404


class TestSystemStats:
    """Test GET /admins/system-stats"""

    def test_moderator_can_read_stats(self, client, moderator, user, company):
        response = client.get(f"{API}/admins/system-stats", headers=auth_headers(moderator))

        assert response.status_code == 200
        assert response.json() == {
            "total_users": 1,
            "total_companies": 1,
            "total_admins": 1,
        }

    def test_superadmin_can_read_stats(self, client, superadmin):
        response = client.get(f"{API}/admins/system-stats", headers=auth_headers(superadmin))
        assert response.status_code == 200

    def test_company_cannot_read_stats(self, client, company):
        response = client.get(f"{API}/admins/system-stats", headers=auth_headers(company))
        assert response.status_code == 403


class TestCreateAdminScript:
    """Test the out-of-band admin provisioning script"""

    def test_bootstrap_superadmin_can_log_in(self, client, monkeypatch):
        import create_admin
        from jobify.models import AdminRole
        from tests.conftest import TestingSessionLocal

        monkeypatch.setattr(create_admin, "SessionLocal", TestingSessionLocal)
        answers = iter(["rootpass1", "rootpass1"])
        monkeypatch.setattr(create_admin.getpass, "getpass", lambda prompt="": next(answers))

        assert create_admin.main(["root@x.com", "Root"]) == 0

        response = client.post(
            f"{API}/auth/login/admin",
            json={"email": "root@x.com", "password": "rootpass1"}
        )
        assert response.status_code == 200
        assert response.json()["user"]["role"] == AdminRole.SUPERADMIN.value

    def test_duplicate_email_reported(self, client, superadmin, monkeypatch):
        import create_admin
        from jobify.core.exceptions import ConflictError
        from jobify.models import AdminRole
        from tests.conftest import TestingSessionLocal

        monkeypatch.setattr(create_admin, "SessionLocal", TestingSessionLocal)

        with pytest.raises(ConflictError):
            create_admin.create_admin("a@x.com", "Again", "secret123", AdminRole.MODERATOR)

    def test_mixed_case_domain_can_log_in(self, client, monkeypatch):
        import create_admin
        from tests.conftest import TestingSessionLocal

        monkeypatch.setattr(create_admin, "SessionLocal", TestingSessionLocal)
        answers = iter(["rootpass1", "rootpass1"])
        monkeypatch.setattr(create_admin.getpass, "getpass", lambda prompt="": next(answers))

        assert create_admin.main(["Root@Example.COM", "Root"]) == 0

        # Stored the way EmailStr normalizes it, so the typed address still matches
        response = client.post(
            f"{API}/auth/login/admin",
            json={"email": "Root@Example.COM", "password": "rootpass1"}
        )
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "Root@example.com"

    def test_short_password_rejected(self, client, db_session, monkeypatch, capsys):
        import create_admin
        from tests.conftest import TestingSessionLocal

        monkeypatch.setattr(create_admin, "SessionLocal", TestingSessionLocal)
        answers = iter(["12345", "12345"])
        monkeypatch.setattr(create_admin.getpass, "getpass", lambda prompt="": next(answers))

        assert create_admin.main(["root@x.com", "Root"]) == 1
        assert "password" in capsys.readouterr().out
        assert db_session.query(Admin).count() == 0
