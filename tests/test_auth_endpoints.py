from fastapi.testclient import TestClient


class TestSignup:
    def test_signup_returns_token_and_user(self, client: TestClient):
        response = client.post("/api/signup", json={"username": "maria", "password": "s3cret"})
        assert response.status_code == 201, f"Signup falló: {response.json()}"

        body = response.json()
        assert body["token"]
        assert body["user"]["username"] == "maria"
        assert body["user"]["role"] == "customer"
        assert "password" not in response.text
        assert "passwordHash" not in body["user"]

        me = client.get("/api/me", headers={"Authorization": f"Bearer {body['token']}"})
        assert me.status_code == 200
        assert me.json()["id"] == body["user"]["id"]

    def test_username_is_trimmed(self, client: TestClient):
        response = client.post("/api/signup", json={"username": "  maria  ", "password": "x"})
        assert response.status_code == 201
        assert response.json()["user"]["username"] == "maria"

    def test_duplicate_username(self, client: TestClient):
        response = client.post("/api/signup", json={"username": "demo", "password": "other"})
        assert response.status_code == 409
        assert response.json() == {"error": "User already exists", "code": "USERNAME_TAKEN"}

    def test_blank_fields(self, client: TestClient):
        assert client.post("/api/signup", json={"username": "   ", "password": "x"}).status_code == 400
        assert client.post("/api/signup", json={"username": "new", "password": ""}).status_code == 400
        assert client.post("/api/signup", json={"username": "new"}).status_code == 400


class TestLogin:
    def test_seeded_users_can_log_in(self, client: TestClient):
        for username, password in [("aarav", "shah"), ("demo", "password")]:
            response = client.post("/api/login", json={"username": username, "password": password})
            assert response.status_code == 200
            assert response.json()["user"]["username"] == username

    def test_tokens_are_unique_per_login(self, client: TestClient):
        credentials = {"username": "demo", "password": "password"}
        first = client.post("/api/login", json=credentials).json()["token"]
        second = client.post("/api/login", json=credentials).json()["token"]
        assert first != second

    def test_wrong_password(self, client: TestClient):
        response = client.post("/api/login", json={"username": "demo", "password": "nope"})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"

    def test_unknown_user(self, client: TestClient):
        response = client.post("/api/login", json={"username": "ghost", "password": "x"})
        assert response.status_code == 401

    def test_missing_password(self, client: TestClient):
        assert client.post("/api/login", json={"username": "demo"}).status_code == 400


class TestSessions:
    def test_unknown_token(self, client: TestClient):
        response = client.get("/api/reservations", headers={"Authorization": "Bearer bogus"})
        assert response.status_code == 401

    def test_missing_token(self, client: TestClient):
        assert client.get("/api/reservations").status_code == 401

    def test_session_expires(self, client: TestClient, demo_headers, fake_clock):
        assert client.get("/api/reservations", headers=demo_headers).status_code == 200

        fake_clock.advance(hours=25)
        assert client.get("/api/reservations", headers=demo_headers).status_code == 401

    def test_logout_revokes_token(self, client: TestClient, demo_headers):
        assert client.post("/api/logout", headers=demo_headers).status_code == 204
        assert client.get("/api/reservations", headers=demo_headers).status_code == 401

    def test_logout_requires_token(self, client: TestClient):
        assert client.post("/api/logout").status_code == 401
