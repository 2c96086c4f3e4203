from conftest import register


def test_register_logs_in_and_redirects_to_profile(client, settings):
    r = register(client)
    assert r.status_code == 303
    assert r.headers["location"] == "/user"
    assert settings.cookie_name in r.cookies

    r = client.get("/user")
    assert r.status_code == 200
    body = r.json()
    assert body["user"] == "user profile page placeholder"
    assert body["userInfo"]["username"] == "ada"
    assert "password" not in body["userInfo"]


def test_duplicate_registration_is_a_server_error_without_session(client, settings):
    assert register(client).status_code == 303
    client.cookies.clear()

    r = register(client)
    assert r.status_code == 500
    assert r.json()["status"] == "error"
    assert settings.cookie_name not in r.cookies
    assert client.get("/user", follow_redirects=False).status_code == 303


def test_registration_validation_error(client):
    r = client.post("/auth/register", data={"username": "", "password": ""}, follow_redirects=False)
    assert r.status_code == 400
    assert r.json()["error"] == "validation_error"


def test_login_after_register(client, settings):
    register(client, username="grace", password="cobol-1959")
    client.get("/auth/logout", follow_redirects=False)
    assert client.get("/user", follow_redirects=False).status_code == 303

    r = client.post("/auth/login", data={"username": "grace", "password": "cobol-1959"}, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/user"
    assert client.get("/user").json()["userInfo"]["username"] == "grace"


def test_bad_login_flashes_once(client):
    register(client)
    client.get("/auth/logout")

    r = client.post("/auth/login", data={"username": "ada", "password": "wrong"}, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/auth/login"

    page = client.get("/auth/login")
    assert page.status_code == 200
    assert "Invalid username or password." in page.text

    again = client.get("/auth/login")
    assert "Invalid username or password." not in again.text


def test_logout_always_ends_anonymous(client):
    # Anonymous logout is harmless.
    r = client.get("/auth/logout", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/"

    register(client)
    assert client.get("/user", follow_redirects=False).status_code == 200
    client.get("/auth/logout", follow_redirects=False)
    r = client.get("/user", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/auth/login"


def test_login_and_register_pages_redirect_logged_in_users(logged_in_client):
    for path in ("/auth/login", "/auth/register"):
        r = logged_in_client.get(path, follow_redirects=False)
        assert r.status_code == 303
        assert r.headers["location"] == "/user"


def test_forged_session_cookie_is_ignored(client, settings):
    client.cookies.set(settings.cookie_name, "forged.token.value")
    r = client.get("/user", follow_redirects=False)
    assert r.status_code == 303
