import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_admin"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, the app applies database/schema.sql on startup (CREATE IF NOT EXISTS)
# and creates the bootstrap administrator below when missing.
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
ADMIN_CODE = os.getenv("ADMIN_CODE", "admin")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Administrator")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin1234")
