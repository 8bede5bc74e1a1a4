"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_LAAKHAY_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_LAAKHAY_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def d42_credentials() -> dict[str, str]:
    """Device42 instance to list against, from D42_URL / D42_USERNAME / D42_PASSWORD."""
    missing = [name for name in ("D42_URL", "D42_USERNAME", "D42_PASSWORD") if not os.environ.get(name)]
    if missing:
        pytest.skip(f"Missing environment: {', '.join(missing)}")
    return {
        "url": os.environ["D42_URL"],
        "username": os.environ["D42_USERNAME"],
        "password": os.environ["D42_PASSWORD"],
    }
