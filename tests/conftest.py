"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up real credentials or a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("STUDENT_PASSWORD", "student-test-password")
os.environ.setdefault("ASSISTANT_PASSWORD", "assistant-test-password")
os.environ.setdefault("LOG_FORMAT", "text")
