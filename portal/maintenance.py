import atexit
import logging
import threading
from .store import get_session_store

logger = logging.getLogger("portal")
_stop_event = threading.Event()


# Lejárt munkamenetek törlése (ugyanaz a hatás, mint a lusta lejáratnak)
def sweep_expired_sessions(app) -> int:
    with app.app_context():
        removed = get_session_store().purge_expired()
    if removed:
        logger.info(f"sessions_swept count={removed}")
    return removed


# Karbantartó loop
def _maintenance_loop(app, interval: int):
    while not _stop_event.wait(interval):
        try:
            sweep_expired_sessions(app)
        except Exception as e:
            logger.exception(f"session_sweep_exception err={e}")


# Karbantartó thread indítása
def start_maintenance_thread(app):
    interval = app.config["SESSION_SWEEP_INTERVAL_SECONDS"]
    if interval <= 0:
        return None

    t = threading.Thread(target=_maintenance_loop, args=(app, interval), name="maintenance", daemon=True)
    t.start()

    @atexit.register
    def _cleanup():
        _stop_event.set()

    return t
