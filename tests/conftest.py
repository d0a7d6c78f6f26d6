"""Test environment: required settings must exist before wastetrack is imported."""

import os

os.environ["APP_ENV"] = "test"
os.environ["JWT_SECRET"] = "test-secret-0123456789abcdef0123456789abcdef"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RECORDS_TIMEZONE"] = "America/Cancun"
os.environ.pop("FALLBACK_USERS_ENABLED", None)
