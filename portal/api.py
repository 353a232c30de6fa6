import logging
from flask import Blueprint, abort, jsonify, request
from .auth import api_login_required, current_session
from .catalog import ADS, FRIENDS, MENUS, cards_for_menu
from .store import get_credential_store

logger = logging.getLogger("portal")
api_bp = Blueprint("api", __name__)

MSG_WRONG_PASSWORD = "A jelenlegi jelszó hibás."
MSG_PASSWORD_CHANGED = "A jelszó sikeresen módosítva."
MSG_BAD_REQUEST = "Hibás kérésformátum."

# Hitelesítés nélkül is elérhető (fenntartott) útvonalak
PUBLIC_PATHS = {"login"}


@api_bp.after_request
def add_cors_headers(resp):
    resp.headers["Access-Control-Allow-Origin"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
    resp.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
    return resp


@api_bp.errorhandler(401)
def unauthorized(_e):
    return jsonify({"error": "Unauthorized"}), 401


@api_bp.errorhandler(404)
def not_found(_e):
    return jsonify({"error": "Not found"}), 404


def _failure(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


# Jelszócsere: a többi munkamenetet nem érvényteleníti
@api_bp.post("/change-password")
def change_password():
    s = current_session()
    if not s:
        abort(401)

    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        logger.info(f"password_change_bad_request user={s.username}")
        return _failure(MSG_BAD_REQUEST, 400)

    credentials = get_credential_store()
    stored = credentials.get(s.username)
    if stored is None:
        stored = credentials.default_secret
    if stored != payload.get("currentPassword"):
        logger.info(f"password_change_rejected user={s.username}")
        return _failure(MSG_WRONG_PASSWORD, 401)

    new_password = payload.get("newPassword")
    if not isinstance(new_password, str):
        logger.info(f"password_change_bad_request user={s.username}")
        return _failure(MSG_BAD_REQUEST, 400)

    credentials.set(s.username, new_password)
    logger.info(f"password_changed user={s.username}")
    return jsonify({"success": True, "message": MSG_PASSWORD_CHANGED})


@api_bp.get("/menus")
@api_login_required
def api_menus():
    return jsonify(MENUS)


@api_bp.get("/cards")
@api_login_required
def api_cards():
    return jsonify(cards_for_menu(request.args.get("menuId")))


@api_bp.get("/ads")
@api_login_required
def api_ads():
    return jsonify(ADS)


@api_bp.get("/friends")
@api_login_required
def api_friends():
    return jsonify(FRIENDS)


# Ismeretlen API útvonal: előbb a hitelesítés, utána 404
@api_bp.route("/<path:subpath>", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def api_fallback(subpath):
    if subpath not in PUBLIC_PATHS and not current_session():
        abort(401)
    abort(404)
