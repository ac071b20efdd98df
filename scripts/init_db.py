"""Helper to initialize the database schema using SQLAlchemy models.

Usage (from repo root):
python3 scripts/init_db.py

Creates the tables defined in temfy/models.py on the database configured by
DATABASE_URL or the DB_* variables. Redis is not contacted.
"""

import os
import sys

# ensure repo root is on path
HERE = os.path.dirname(os.path.dirname(__file__))
if HERE not in sys.path:
    sys.path.insert(0, HERE)

from temfy.config import settings
from temfy.database import Database


if __name__ == "__main__":
    print("Initializing DB (this will create tables defined in temfy.models)")
    database = Database.from_settings(settings)
    try:
        database.create_all()
    finally:
        database.dispose()
    print("Done.")
