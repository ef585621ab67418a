from datetime import timedelta

import pytest

from api_service.errors import InvalidToken, Unauthenticated
from api_service.security import Identity, TokenVerifier, identity_from_header

verifier = TokenVerifier("test-secret")


def test_issue_then_verify():
    token = verifier.issue("u1")
    assert verifier.verify(token) == Identity(user_id="u1")


def test_expired_token_rejected():
    token = verifier.issue("u1", expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidToken):
        verifier.verify(token)


def test_token_signed_with_other_secret_rejected():
    token = TokenVerifier("other-secret").issue("u1")
    with pytest.raises(InvalidToken):
        verifier.verify(token)


def test_missing_header():
    with pytest.raises(Unauthenticated) as exc:
        identity_from_header(None, verifier)
    assert exc.value.message == "No token, authorization denied"


@pytest.mark.parametrize("header", ["Bearer garbage", "Token abc", "Bearer ", verifier.issue("u1")])
def test_malformed_header(header):
    with pytest.raises(InvalidToken) as exc:
        identity_from_header(header, verifier)
    assert exc.value.message == "Token is not valid"


def test_protected_route_without_token(client):
    r = client.post("/questions", json={"problemStatement": "P"})
    assert r.status_code == 401
    assert r.json() == {"message": "No token, authorization denied"}


def test_protected_route_with_garbage_token(client):
    r = client.delete("/questions/abc", headers={"Authorization": "Bearer nope"})
    assert r.status_code == 401
    assert r.json() == {"message": "Token is not valid"}
    assert r.headers["www-authenticate"] == "Bearer"


def test_protected_route_with_expired_token(client, login_as):
    user = login_as()
    token = client.app.state.token_verifier.issue(user["userId"], expires_delta=timedelta(seconds=-5))
    r = client.post("/questions", json={"problemStatement": "P"}, headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["message"] == "Token is not valid"
