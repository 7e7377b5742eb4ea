"""Tests for static environment settings loading."""

from __future__ import annotations

import pytest

from shelfmark.config import SettingsValidationError, load_settings


def test_load_settings_uses_defaults_when_env_absent() -> None:
    """Ensure static settings resolve to default values when env vars are missing."""
    settings = load_settings({})

    if settings.bind != "127.0.0.1":
        raise AssertionError
    if settings.port != 8080:  # noqa: PLR2004
        raise AssertionError
    if settings.log_level != "INFO":
        raise AssertionError
    if settings.duplicate_threshold != 0.7:  # noqa: PLR2004
        raise AssertionError
    if settings.cluster_method != "hybrid":
        raise AssertionError
    if (settings.min_cluster_size, settings.max_clusters) != (3, 20):
        raise AssertionError
    if settings.request_timeout_seconds is not None:
        raise AssertionError
    if settings.cors_allow_origins != ():
        raise AssertionError


def test_load_settings_reads_overrides() -> None:
    """Ensure every env var is parsed and normalized."""
    settings = load_settings(
        {
            "SHELFMARK_LOG_LEVEL": "debug",
            "SHELFMARK_BIND": " 0.0.0.0 ",
            "SHELFMARK_PORT": "9000",
            "SHELFMARK_DUPLICATE_THRESHOLD": "0.85",
            "SHELFMARK_CLUSTER_METHOD": "Semantic",
            "SHELFMARK_MIN_CLUSTER_SIZE": "4",
            "SHELFMARK_MAX_CLUSTERS": "8",
            "SHELFMARK_REQUEST_TIMEOUT_SECONDS": "2.5",
            "SHELFMARK_CORS_ALLOW_ORIGINS": "https://a.example, ,https://b.example",
        },
    )

    if settings.log_level != "DEBUG":
        raise AssertionError
    if (settings.bind, settings.port) != ("0.0.0.0", 9000):  # noqa: S104
        raise AssertionError
    if settings.duplicate_threshold != 0.85:  # noqa: PLR2004
        raise AssertionError
    if settings.cluster_method != "semantic":
        raise AssertionError
    if (settings.min_cluster_size, settings.max_clusters) != (4, 8):
        raise AssertionError
    if settings.request_timeout_seconds != 2.5:  # noqa: PLR2004
        raise AssertionError
    if settings.cors_allow_origins != ("https://a.example", "https://b.example"):
        raise AssertionError


def test_blank_timeout_means_no_deadline() -> None:
    """A blank timeout value disables request deadlines."""
    settings = load_settings({"SHELFMARK_REQUEST_TIMEOUT_SECONDS": "  "})

    if settings.request_timeout_seconds is not None:
        raise AssertionError


@pytest.mark.parametrize(
    ("env", "message"),
    [
        (
            {"SHELFMARK_CLUSTER_METHOD": "kmeans"},
            (
                "Invalid SHELFMARK_CLUSTER_METHOD: 'kmeans'. "
                "Allowed values: domain, hybrid, semantic."
            ),
        ),
        (
            {"SHELFMARK_LOG_LEVEL": "verbose"},
            (
                "Invalid SHELFMARK_LOG_LEVEL: 'verbose'. "
                "Allowed values: CRITICAL, DEBUG, ERROR, INFO, WARNING."
            ),
        ),
    ],
)
def test_load_settings_rejects_invalid_choices(
    env: dict[str, str],
    message: str,
) -> None:
    """Ensure invalid method/log level fail with deterministic validation text."""
    with pytest.raises(SettingsValidationError, match=message):
        _ = load_settings(env)


@pytest.mark.parametrize(
    ("env", "env_var"),
    [
        ({"SHELFMARK_PORT": "70000"}, "SHELFMARK_PORT"),
        ({"SHELFMARK_PORT": "http"}, "SHELFMARK_PORT"),
        ({"SHELFMARK_DUPLICATE_THRESHOLD": "1.2"}, "SHELFMARK_DUPLICATE_THRESHOLD"),
        ({"SHELFMARK_DUPLICATE_THRESHOLD": "high"}, "SHELFMARK_DUPLICATE_THRESHOLD"),
        ({"SHELFMARK_MIN_CLUSTER_SIZE": "0"}, "SHELFMARK_MIN_CLUSTER_SIZE"),
        ({"SHELFMARK_MAX_CLUSTERS": "-3"}, "SHELFMARK_MAX_CLUSTERS"),
        (
            {"SHELFMARK_REQUEST_TIMEOUT_SECONDS": "0"},
            "SHELFMARK_REQUEST_TIMEOUT_SECONDS",
        ),
        (
            {"SHELFMARK_REQUEST_TIMEOUT_SECONDS": "inf"},
            "SHELFMARK_REQUEST_TIMEOUT_SECONDS",
        ),
    ],
)
def test_load_settings_rejects_invalid_numbers(
    env: dict[str, str],
    env_var: str,
) -> None:
    """Ensure out-of-range or unparsable numbers name the offending env var."""
    with pytest.raises(SettingsValidationError, match=f"Invalid {env_var}:"):
        _ = load_settings(env)


def test_empty_bind_is_rejected() -> None:
    """A whitespace-only bind address is a configuration error."""
    with pytest.raises(SettingsValidationError, match="value cannot be empty"):
        _ = load_settings({"SHELFMARK_BIND": "   "})
