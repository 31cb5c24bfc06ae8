"""Root conftest: shared test configuration."""

import os

# Keep tests away from any real catalog file and from JSON log noise
os.environ.setdefault("DATA_FILE", os.path.join(os.path.dirname(__file__), "unused-books.json"))
os.environ.setdefault("CREATE_MISSING_DATA_FILE", "false")
os.environ.setdefault("LOG_FORMAT", "text")
