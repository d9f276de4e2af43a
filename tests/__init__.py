"""Test suite for slideheaders.

This package contains all automated tests for slideheaders, organized to
mirror the source code structure.

Running Tests:
    pytest                                  # Run all tests
    pytest -v                               # Verbose output
    pytest tests/test_headers_footers.py    # Run specific file
    pytest -s                               # Don't capture output (for debugging)
    pytest -k "later_revision"              # Run tests with matching pattern in function name

Coverage:
    pytest --cov=slideheaders --cov-report=html
    # Then open htmlcov/index.html

Notes:
    - Monkeypatch for changing values (env vars, log directory)
    - Aim for testing behavior, not implementation details
"""
