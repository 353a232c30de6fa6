import os
import logging
from datetime import timedelta
from flask import Flask
from .config import Config
from .kv import InMemoryKeyValueStore
from .store import CredentialStore, SessionStore, now
from .auth import auth_bp
from .api import api_bp
from .views import views_bp
from .maintenance import start_maintenance_thread

# Logging beállítása
def _setup_logging(log_path: str):
    logger = logging.getLogger("portal")
    logger.setLevel(logging.INFO)
    if not log_path:
        return logger
    log_path = os.path.abspath(log_path)
    if any(getattr(h, "baseFilename", None) == log_path for h in logger.handlers):
        return logger
    os.makedirs(os.path.dirname(log_path), exist_ok=True)
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    fh.setFormatter(fmt)
    logger.addHandler(fh)
    return logger

# Flask app létrehozása; a tárolók itt jönnek létre és az appon keresztül érhetők el
def create_app(overrides=None, kv=None, clock=now):
    app = Flask(__name__, template_folder="../templates")
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # Logging
    _setup_logging(app.config["LOG_PATH"])

    # Tárolók (alapból memóriában, nincs megosztva a példányok között)
    if kv is None:
        kv = InMemoryKeyValueStore(clock=clock)
    ttl = timedelta(hours=app.config["SESSION_TTL_HOURS"])
    app.extensions["portal"] = {
        "kv": kv,
        "sessions": SessionStore(kv, ttl, clock=clock),
        "credentials": CredentialStore(kv, app.config["DEFAULT_USERNAME"], app.config["DEFAULT_PASSWORD"]),
    }

    # Blueprintek (saját fájlokban definiáltak)
    app.register_blueprint(auth_bp)
    app.register_blueprint(views_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    # Karbantartó thread (maintenance.py)
    if not app.testing:
        start_maintenance_thread(app)

    return app
