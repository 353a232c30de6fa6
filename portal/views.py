from flask import Blueprint, make_response, render_template
from .auth import current_session, login_required, set_session_cookie

views_bp = Blueprint("views", __name__)

# Home oldal megjelenítése; minden más (nem API) útvonal is ide fut, a cookie lejárata is megújul
@views_bp.route("/", methods=["GET", "POST"])
@views_bp.route("/<path:subpath>", methods=["GET", "POST"])
@login_required
def home_page(subpath=None):
    s = current_session()
    resp = make_response(render_template("home.html", username=s.username))
    return set_session_cookie(resp, s)


@views_bp.route("/favicon.ico", methods=["GET", "POST"])
def favicon():
    return "", 404
