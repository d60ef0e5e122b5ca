"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points the
application at a throwaway database before any settings are loaded.
"""

import os
import sys
from pathlib import Path

# Settings are read at import time; keep the suite off any real database.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["STATIC_DIR"] = str(Path(__file__).parent / "no-frontend-bundle")

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from test_fixtures import engine, db_session, client  # noqa: E402,F401
