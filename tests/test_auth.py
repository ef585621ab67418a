from api_service.auth import pwd_context
from api_service.repositories import UserRepository


def test_register_ok(client):
    r = client.post("/api/register", json={"username": "alice", "email": "a@x.com", "password": "pw123"})
    assert r.status_code == 201
    assert r.json() == {"message": "User registered successfully"}


def test_register_duplicate_email(client):
    client.post("/api/register", json={"username": "alice", "email": "a@x.com", "password": "pw123"})
    r = client.post("/api/register", json={"username": "bob", "email": "a@x.com", "password": "other"})
    assert r.status_code == 400
    assert r.json()["message"] == "User with that email already exists"


def test_register_duplicate_username(client):
    client.post("/api/register", json={"username": "alice", "email": "a@x.com", "password": "pw123"})
    r = client.post("/api/register", json={"username": "alice", "email": "b@x.com", "password": "pw123"})
    assert r.status_code == 400
    assert r.json()["message"] == "Username is already taken"


def test_register_email_checked_before_username(client):
    client.post("/api/register", json={"username": "alice", "email": "a@x.com", "password": "pw123"})
    r = client.post("/api/register", json={"username": "alice", "email": "a@x.com", "password": "pw123"})
    assert r.json()["message"] == "User with that email already exists"


def test_password_is_stored_hashed(client):
    client.post("/api/register", json={"username": "alice", "email": "a@x.com", "password": "pw123"})

    user_id = client.post("/api/login", json={"email": "a@x.com", "password": "pw123"}).json()["userId"]

    async def load():
        async with client.app.state.async_session() as session:
            return await UserRepository(session).get(user_id)

    user = client.portal.call(load)
    assert user.hashed_password != "pw123"
    assert pwd_context.verify("pw123", user.hashed_password)


def test_login_ok(client):
    client.post("/api/register", json={"username": "alice", "email": "a@x.com", "password": "pw123"})
    r = client.post("/api/login", json={"email": "a@x.com", "password": "pw123"})
    assert r.status_code == 200
    body = r.json()
    assert set(body) == {"token", "email", "username", "userId"}
    assert body["email"] == "a@x.com"
    assert body["username"] == "alice"


def test_login_wrong_password(client):
    client.post("/api/register", json={"username": "x", "email": "x@x.com", "password": "right"})
    r = client.post("/api/login", json={"email": "x@x.com", "password": "wrong"})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid credentials"}


def test_login_unknown_email_looks_the_same(client):
    client.post("/api/register", json={"username": "x", "email": "x@x.com", "password": "right"})
    wrong_pw = client.post("/api/login", json={"email": "x@x.com", "password": "wrong"})
    unknown = client.post("/api/login", json={"email": "nobody@x.com", "password": "right"})
    assert unknown.status_code == wrong_pw.status_code
    assert unknown.json() == wrong_pw.json()
