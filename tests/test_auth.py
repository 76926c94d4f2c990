# This project was developed with assistance from AI tools.
"""Tests for JWT authentication middleware."""

import time

import jwt
import pytest
from fastapi import Depends, FastAPI, HTTPException
from fastapi.testclient import TestClient

from portal_api.core.config import settings
from portal_api.middleware.auth import CurrentUser, _resolve_role, require_roles
from portal_api.schemas.auth import TokenPayload
from portal_db.enums import UserRole

SECRET = "test-secret-with-at-least-32-bytes!!"


def _token(claims: dict, secret: str = SECRET) -> str:
    payload = {"exp": int(time.time()) + 300, **claims}
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def enforced_auth(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_DISABLED", False)
    monkeypatch.setattr(settings, "AUTH_SECRET", SECRET)


@pytest.fixture
def me_client():
    app = FastAPI()

    @app.get("/me")
    async def me(user: CurrentUser):
        return {"user_id": user.user_id, "role": user.role.value, "email": user.email}

    return TestClient(app)


# ---------------------------------------------------------------------------
# AUTH_DISABLED bypass
# ---------------------------------------------------------------------------


def test_auth_disabled_returns_dev_admin(monkeypatch, me_client):
    """When AUTH_DISABLED=true, any request gets a dev admin user."""
    monkeypatch.setattr(settings, "AUTH_DISABLED", True)

    resp = me_client.get("/me")
    assert resp.status_code == 200
    body = resp.json()
    assert body["user_id"] == "dev-user"
    assert body["role"] == "admin"


# ---------------------------------------------------------------------------
# Token validation
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("enforced_auth")
def test_missing_token_returns_401(me_client):
    resp = me_client.get("/me")
    assert resp.status_code == 401
    assert "Missing authentication token" in resp.json()["detail"]
    assert resp.headers["www-authenticate"] == "Bearer"


@pytest.mark.usefixtures("enforced_auth")
def test_valid_token_yields_user(me_client):
    token = _token({"sub": "jane-doe-001", "role": "borrower", "email": "jane@example.com"})

    resp = me_client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 200
    assert resp.json() == {
        "user_id": "jane-doe-001",
        "role": "borrower",
        "email": "jane@example.com",
    }


@pytest.mark.usefixtures("enforced_auth")
def test_role_defaults_to_borrower(me_client):
    token = _token({"sub": "jane-doe-001"})

    resp = me_client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert resp.json()["role"] == "borrower"


@pytest.mark.usefixtures("enforced_auth")
def test_expired_token_returns_401(me_client):
    token = _token({"sub": "jane-doe-001", "exp": int(time.time()) - 60})

    resp = me_client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Token has expired"


@pytest.mark.usefixtures("enforced_auth")
def test_wrong_signature_returns_401(me_client):
    token = _token({"sub": "jane-doe-001"}, secret="some-other-secret-also-32-bytes-long")

    resp = me_client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid token"


@pytest.mark.usefixtures("enforced_auth")
def test_token_without_subject_is_invalid(me_client):
    token = jwt.encode({"exp": int(time.time()) + 300}, SECRET, algorithm="HS256")

    resp = me_client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401


@pytest.mark.usefixtures("enforced_auth")
def test_unknown_role_returns_403(me_client):
    token = _token({"sub": "jane-doe-001", "role": "ceo"})

    resp = me_client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 403
    assert "No recognized role assigned" in resp.json()["detail"]


# ---------------------------------------------------------------------------
# Role resolution
# ---------------------------------------------------------------------------


def test_resolve_role_picks_known_role():
    assert _resolve_role(TokenPayload(sub="u", role="loan_officer")) == UserRole.LOAN_OFFICER


def test_resolve_role_unknown_raises_forbidden():
    with pytest.raises(HTTPException) as exc_info:
        _resolve_role(TokenPayload(sub="u", role="uma_authorization"))
    assert exc_info.value.status_code == 403


# ---------------------------------------------------------------------------
# require_roles dependency
# ---------------------------------------------------------------------------


def test_require_roles_rejects_wrong_role(monkeypatch):
    """require_roles returns 403 when user's role is not in allowed set."""
    monkeypatch.setattr(settings, "AUTH_DISABLED", True)

    app = FastAPI()

    check_officer = require_roles(UserRole.LOAN_OFFICER)

    @app.get("/lo-only", dependencies=[Depends(check_officer)])
    async def lo_only(user: CurrentUser):
        return {"ok": True}

    test_client = TestClient(app)
    # dev-user is admin, not loan officer
    resp = test_client.get("/lo-only")
    assert resp.status_code == 403
    assert "Insufficient permissions" in resp.json()["detail"]


def test_require_roles_allows_listed_role(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_DISABLED", True)

    app = FastAPI()

    @app.get("/admin-only", dependencies=[Depends(require_roles(UserRole.ADMIN))])
    async def admin_only():
        return {"ok": True}

    resp = TestClient(app).get("/admin-only")
    assert resp.status_code == 200
