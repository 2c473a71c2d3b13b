"""
Pytest configuration and fixtures for page loader tests
"""

from pathlib import Path

import pytest
import responses

FIXTURES_DIR = Path(__file__).parent / "fixtures"

PAGE_URL = "https://ru.hexlet.io/courses"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(64))


def read_fixture(name, mode="rb"):
    path = FIXTURES_DIR / name
    if mode == "rb":
        return path.read_bytes()
    return path.read_text(encoding="utf-8")


@pytest.fixture
def mocked_responses():
    """Activate responses; any request without a registered stub fails to connect."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def hexlet_site(mocked_responses):
    """Register the courses page and every same-origin asset it references."""
    assets = {
        "png": PNG_BYTES,
        "css": read_fixture("application.css"),
        "js": read_fixture("runtime.js"),
        "canonical": read_fixture("canonical.html"),
    }
    mocked_responses.get(
        PAGE_URL,
        body=read_fixture("before.html"),
        content_type="text/html; charset=utf-8",
    )
    mocked_responses.get(
        PAGE_URL,
        body=assets["canonical"],
        content_type="text/html; charset=utf-8",
    )
    mocked_responses.get(
        "https://ru.hexlet.io/assets/professions/nodejs.png",
        body=assets["png"],
        content_type="image/png",
    )
    mocked_responses.get(
        "https://ru.hexlet.io/assets/application.css",
        body=assets["css"],
        content_type="text/css",
    )
    mocked_responses.get(
        "https://ru.hexlet.io/packs/js/runtime.js",
        body=assets["js"],
        content_type="application/javascript",
    )
    return assets
