"""
Shared pytest configuration.
Settings are read at import time, so the test environment is set before the package loads.
"""

import os
import tempfile

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("UPLOAD_DIR", os.path.join(tempfile.gettempdir(), "taskmanager-test-uploads"))
