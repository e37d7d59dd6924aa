import os


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


SERVICE_NAME = os.getenv("SERVICE_NAME", "catalog_service")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./catalog.db")
DATABASE_ECHO = _flag("DATABASE_ECHO", "0")
CREATE_TABLES = _flag("CREATE_TABLES", "1")

# start-up readiness probe
DB_CONNECT_ATTEMPTS = int(os.getenv("DB_CONNECT_ATTEMPTS", "30"))
DB_CONNECT_WAIT = float(os.getenv("DB_CONNECT_WAIT", "2"))
