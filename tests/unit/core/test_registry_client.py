"""Tests for RegistryClient fetching, caching and lookup."""

from pathlib import Path

import pytest

from ignix.core.config import IgnixConfig
from ignix.core.errors import RegistryUnavailableError
from ignix.core.registry.client import RegistryClient
from ignix.core.registry.types import AssetKind
from ignix.core.user_feedback import SuppressedFeedback
from tests.fakes.http import FakeHttpClient
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.registry_builders import (
    COMPONENT_REGISTRY_URL,
    TEMPLATE_REGISTRY_URL,
    THEME_REGISTRY_URL,
    entry,
    registry_http,
)


def _client(
    http: FakeHttpClient, feedback: FakeUserFeedback | None = None
) -> RegistryClient:
    config = IgnixConfig.for_test(
        Path("/project"),
        registry_url=COMPONENT_REGISTRY_URL,
        template_url=TEMPLATE_REGISTRY_URL,
        theme_url=THEME_REGISTRY_URL,
    )
    return RegistryClient(http, config, feedback if feedback is not None else FakeUserFeedback())


def test_manifest_is_fetched_at_most_once() -> None:
    """Repeated lookups and listings reuse the cached manifest."""
    http = registry_http(components={"button": entry("Button")})
    client = _client(http)

    client.fetch_component_manifest()
    client.get_component("button")
    client.list_components()
    client.get_component("missing")

    assert http.requests.count(COMPONENT_REGISTRY_URL) == 1


def test_manifests_are_cached_independently() -> None:
    """Component, template and theme manifests each come from their own URL."""
    http = registry_http(
        components={"button": entry("Button")},
        templates={"hero": entry("Hero", id="hero", main_type="template")},
        themes={"ocean": entry("Ocean", id="ocean", main_type="theme")},
    )
    client = _client(http)

    assert client.get_component("button") is not None
    assert client.get_template("hero") is not None
    assert client.get_theme("ocean") is not None
    assert client.get_template("button") is None

    assert http.requests == [COMPONENT_REGISTRY_URL, TEMPLATE_REGISTRY_URL, THEME_REGISTRY_URL]


def test_get_component_is_case_insensitive() -> None:
    """Lookup matches name or id regardless of case."""
    http = registry_http(components={"button": entry("Button", id="btn")})
    client = _client(http)

    assert client.get_component("BUTTON") == client.get_component("btn")


def test_fetch_failure_raises_registry_unavailable() -> None:
    """Connectivity failures are fatal and not retried."""
    http = FakeHttpClient(failing_urls={COMPONENT_REGISTRY_URL})
    feedback = FakeUserFeedback()
    client = _client(http, feedback)

    with pytest.raises(RegistryUnavailableError, match="Could not connect to the component"):
        client.list_components()

    assert http.requests == [COMPONENT_REGISTRY_URL]
    assert feedback.messages_at("error") == ["Failed to fetch component registry."]


def test_unparsable_manifest_raises_registry_unavailable() -> None:
    """A registry with the wrong shape is treated like an unreachable one."""
    http = FakeHttpClient(responses={COMPONENT_REGISTRY_URL: {"unexpected": True}})
    client = _client(http)

    with pytest.raises(RegistryUnavailableError) as exc_info:
        client.fetch_manifest(AssetKind.COMPONENT)

    assert exc_info.value.url == COMPONENT_REGISTRY_URL


def test_interactive_fetch_shows_spinner_and_success() -> None:
    """The fetch is wrapped in a status spinner followed by a success line."""
    http = registry_http()
    feedback = FakeUserFeedback()
    client = _client(http, feedback)

    client.fetch_template_manifest()

    assert feedback.messages == [
        ("status", "Fetching template registry..."),
        ("success", "Template registry fetched."),
    ]


def test_silent_feedback_writes_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    """With suppressed feedback the client produces no output at all."""
    http = registry_http(components={"button": entry("Button")})
    config = IgnixConfig.for_test(Path("/project"), registry_url=COMPONENT_REGISTRY_URL)
    client = RegistryClient(http, config, SuppressedFeedback())

    client.list_components()

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_theme_and_template_listings_come_from_their_own_manifests() -> None:
    http = registry_http(
        components={"button": entry("Button")},
        templates={"hero": entry("Hero", id="hero", main_type="template")},
        themes={"ocean": entry("Ocean", id="ocean", main_type="theme")},
    )
    client = _client(http)

    themes = client.list_themes()
    templates = client.list_templates()
    manifest = client.fetch_theme_manifest()
    client.list_themes()

    assert [e.name for e in themes] == ["Ocean"]
    assert [e.name for e in templates] == ["Hero"]
    assert manifest.kind is AssetKind.THEME
    assert http.requests == [THEME_REGISTRY_URL, TEMPLATE_REGISTRY_URL]
