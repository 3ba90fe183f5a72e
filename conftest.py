"""Pytest configuration for the test suite."""
import os

# Keep test runs from writing log files under backend/logs
os.environ.setdefault("LOG_TO_FILE", "false")


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "api: tests that go through the FastAPI app."
    )
