import logging
from functools import wraps
from typing import Optional
from flask import Blueprint, abort, current_app, g, redirect, render_template, request, url_for
from werkzeug.exceptions import BadRequest, RequestEntityTooLarge
from .store import Session, get_credential_store, get_session_store

logger = logging.getLogger("portal")
auth_bp = Blueprint("auth", __name__)

FORM_MIMETYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

MSG_INVALID_CREDENTIALS = "Hibás felhasználónév vagy jelszó."
MSG_BAD_LOGIN_REQUEST = "Hibás bejelentkezési kérés."


# Munkamenet token kiolvasása a cookie-ból
def session_token() -> Optional[str]:
    return request.cookies.get(current_app.config["SESSION_COOKIE"]) or None


# Aktuális munkamenet lekérése (kérésenként egyszer validálunk, ez meg is hosszabbítja)
def current_session() -> Optional[Session]:
    if "auth_session" not in g:
        token = session_token()
        g.auth_session = get_session_store().validate(token) if token else None
    return g.auth_session


# Oldalak: hiányzó munkamenet esetén átirányítás login oldalra
def login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_session():
            return redirect(url_for("auth.login_page"))
        return view(*args, **kwargs)
    return wrapped


# API: hiányzó munkamenet esetén 401
def api_login_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not current_session():
            abort(401)
        return view(*args, **kwargs)
    return wrapped


def set_session_cookie(resp, s: Session):
    ttl_seconds = int(get_session_store().ttl.total_seconds())
    resp.set_cookie(current_app.config["SESSION_COOKIE"], s.token,
                    max_age=ttl_seconds, path="/", httponly=True)
    return resp


def clear_session_cookie(resp):
    resp.set_cookie(current_app.config["SESSION_COOKIE"], "",
                    max_age=0, path="/", httponly=True)
    return resp


# Login oldal megjelenítése
@auth_bp.get("/login")
def login_page():
    return render_template("login.html", msg=None)


# Login kérés kezelése
@auth_bp.post("/login")
def do_login():
    if request.mimetype not in FORM_MIMETYPES:
        logger.info(f"login_bad_request mimetype={request.mimetype or '-'}")
        return render_template("login.html", msg=MSG_BAD_LOGIN_REQUEST)
    try:
        username = request.form.get("username") or current_app.config["DEFAULT_USERNAME"]
        password = request.form.get("password")
    except (BadRequest, RequestEntityTooLarge):
        logger.info("login_bad_request unparseable_form")
        return render_template("login.html", msg=MSG_BAD_LOGIN_REQUEST)

    # Sima egyezés-vizsgálat, hash nélkül; ismeretlen felhasználónál nincs tárolt jelszó
    stored = get_credential_store().get(username)
    if stored is None or password is None or stored != password:
        logger.info(f"login_failed user={username}")
        return render_template("login.html", msg=MSG_INVALID_CREDENTIALS)

    s = get_session_store().create(username)
    logger.info(f"login_ok user={username}")
    return set_session_cookie(redirect(url_for("views.home_page")), s)


# Kijelentkezés kérés kezelése
@auth_bp.route("/logout", methods=["GET", "POST"])
def do_logout():
    token = session_token()
    if token:
        get_session_store().invalidate(token)
        logger.info("logout_ok")
    return clear_session_cookie(redirect(url_for("auth.login_page")))
