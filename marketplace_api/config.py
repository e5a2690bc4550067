# marketplace_api/config.py
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./database.sqlite3")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
