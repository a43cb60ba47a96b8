"""Test package. Keeps bcrypt fast and the default engine off disk before app modules load settings."""

import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_AUTO_CREATE", "false")
