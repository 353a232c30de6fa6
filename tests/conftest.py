from datetime import datetime, timedelta, timezone

import pytest

from portal import create_app


class FakeClock:
    def __init__(self):
        self.now = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app(clock):
    return create_app(
        {"TESTING": True, "LOG_PATH": "", "SESSION_SWEEP_INTERVAL_SECONDS": 0},
        clock=clock,
    )


@pytest.fixture
def client(app):
    # cookie-kat kézzel küldjük, hogy minden teszt pontosan lássa a tokent
    return app.test_client(use_cookies=False)


def session_cookie_from(resp):
    for header in resp.headers.getlist("Set-Cookie"):
        name, _, rest = header.partition("=")
        if name == "session":
            return rest.split(";", 1)[0]
    return None


def cookie_header(token):
    return {"Cookie": f"session={token}"}


@pytest.fixture
def login(client):
    def _login(password="123456", username=None):
        data = {"password": password}
        if username is not None:
            data["username"] = username
        resp = client.post("/login", data=data)
        return resp, session_cookie_from(resp)
    return _login
