import logging

from portal.store import get_credential_store, get_session_store

from conftest import cookie_header, session_cookie_from


def test_login_page_renders_form(client):
    resp = client.get("/login")
    assert resp.status_code == 200
    assert 'name="password"' in resp.get_data(as_text=True)


def test_login_with_default_password_sets_cookie(client, login):
    resp, token = login()
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/")
    assert token is not None and len(token) == 32

    cookie = resp.headers["Set-Cookie"]
    assert "HttpOnly" in cookie
    assert "Path=/" in cookie
    assert "Max-Age=86400" in cookie


def test_login_wrong_password_rerenders_form(app, client, login, caplog):
    caplog.set_level(logging.INFO, logger="portal")
    resp, token = login("wrong")
    assert resp.status_code == 200
    assert token is None
    assert "Hibás felhasználónév vagy jelszó." in resp.get_data(as_text=True)
    assert "login_failed user=admin" in caplog.text
    assert "wrong" not in caplog.text

    with app.app_context():
        assert get_credential_store().get("admin") == "123456"
    assert len(app.extensions["portal"]["kv"]) == 1  # csak a seedelt jelszó


def test_login_without_password_fails(client):
    resp = client.post("/login", data={"username": "admin"})
    assert resp.status_code == 200
    assert session_cookie_from(resp) is None


def test_login_with_non_form_body_shows_format_error(client):
    resp = client.post("/login", data='{"password": "123456"}', content_type="application/json")
    assert resp.status_code == 200
    assert session_cookie_from(resp) is None
    assert "Hibás bejelentkezési kérés." in resp.get_data(as_text=True)


def test_login_empty_username_defaults_to_admin(app, client, login):
    resp, token = login(username="")
    assert resp.status_code == 302
    with app.app_context():
        assert get_session_store().validate(token).username == "admin"


def test_home_requires_session(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")


def test_home_rejects_unknown_token(client):
    resp = client.get("/", headers=cookie_header("f" * 32))
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")


def test_home_shows_identity_and_refreshes_cookie(client, login):
    _, token = login()
    resp = client.get("/", headers=cookie_header(token))
    assert resp.status_code == 200
    assert "admin" in resp.get_data(as_text=True)
    assert session_cookie_from(resp) == token
    assert "Max-Age=86400" in resp.headers["Set-Cookie"]


def test_cookie_header_with_other_pairs_and_spaces(client, login):
    _, token = login()
    resp = client.get("/", headers={"Cookie": f"theme=dark;  session={token} ; x=a=b"})
    assert resp.status_code == 200


def test_logout_invalidates_and_clears_cookie(client, login):
    _, token = login()
    resp = client.get("/logout", headers=cookie_header(token))
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/login")
    assert "Max-Age=0" in resp.headers["Set-Cookie"]
    assert session_cookie_from(resp) == ""

    assert client.get("/", headers=cookie_header(token)).status_code == 302


def test_logout_is_idempotent(client, login):
    assert client.get("/logout").status_code == 302
    assert client.post("/logout", headers=cookie_header("0" * 32)).status_code == 302

    _, token = login()
    client.get("/logout", headers=cookie_header(token))
    assert client.get("/logout", headers=cookie_header(token)).status_code == 302


def test_login_page_does_not_require_session(client):
    assert client.get("/login", headers=cookie_header("bogus")).status_code == 200


def test_favicon_is_not_found(client):
    assert client.get("/favicon.ico").status_code == 404


def test_unknown_username_cannot_use_default_password(app, client, login):
    resp, token = login("123456", username="intruder")
    assert resp.status_code == 200
    assert token is None
    with app.app_context():
        assert get_credential_store().get("intruder") is None


def test_unknown_username_rejected_after_password_change(client, login):
    _, admin = login()
    resp = client.post(
        "/api/change-password",
        json={"currentPassword": "123456", "newPassword": "abcdef"},
        headers=cookie_header(admin),
    )
    assert resp.status_code == 200

    resp, token = login("123456", username="intruder")
    assert resp.status_code == 200
    assert token is None
    assert "Hibás felhasználónév vagy jelszó." in resp.get_data(as_text=True)


def test_any_other_path_requires_session(client):
    for method in (client.get, client.post):
        resp = method("/dashboard")
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/login")

    resp = client.get("/some/nested/page")
    assert resp.status_code == 302


def test_any_other_path_renders_home_with_session(client, login):
    _, token = login()
    resp = client.get("/dashboard", headers=cookie_header(token))
    assert resp.status_code == 200
    assert "admin" in resp.get_data(as_text=True)
    assert session_cookie_from(resp) == token


def test_favicon_wins_over_catch_all(client):
    assert client.post("/favicon.ico").status_code == 404
