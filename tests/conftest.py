"""Root conftest — shared test configuration."""

import os

# Settings are read when postboard.main is imported
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("CALLER_IDENTITY_HEADER", "X-Caller-Identity")
os.environ.setdefault("POSTS_BY_CALLER", "false")
