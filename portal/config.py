import os

class Config:
    # Alapértelmezett belépési adatok (első lekéréskor kerülnek a tárolóba)
    DEFAULT_USERNAME = os.environ.get("DEFAULT_USERNAME", "admin")
    DEFAULT_PASSWORD = os.environ.get("DEFAULT_PASSWORD", "123456")

    # Munkamenet
    SESSION_TTL_HOURS = int(os.environ.get("SESSION_TTL_HOURS", "24"))
    SESSION_COOKIE = os.environ.get("SESSION_COOKIE", "session")

    # Fenntartva egy későbbi kizárási logikához; jelenleg semmi nem olvassa
    MAX_LOGIN_ATTEMPTS = int(os.environ.get("MAX_LOGIN_ATTEMPTS", "5"))

    # Lejárt munkamenetek takarítása (0 = kikapcsolva)
    SESSION_SWEEP_INTERVAL_SECONDS = int(os.environ.get("SESSION_SWEEP_INTERVAL_SECONDS", "60"))

    LOG_PATH = os.environ.get("LOG_PATH", "logs/app.log")
