"""Typed application settings loaded from static environment variables."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shelfmark.cluster import CLUSTERING_METHODS, ClusteringMethod, resolve_method

if TYPE_CHECKING:
    from collections.abc import Mapping

LogLevel = str

ENV_LOG_LEVEL = "SHELFMARK_LOG_LEVEL"
ENV_BIND = "SHELFMARK_BIND"
ENV_PORT = "SHELFMARK_PORT"
ENV_DUPLICATE_THRESHOLD = "SHELFMARK_DUPLICATE_THRESHOLD"
ENV_CLUSTER_METHOD = "SHELFMARK_CLUSTER_METHOD"
ENV_MIN_CLUSTER_SIZE = "SHELFMARK_MIN_CLUSTER_SIZE"
ENV_MAX_CLUSTERS = "SHELFMARK_MAX_CLUSTERS"
ENV_REQUEST_TIMEOUT_SECONDS = "SHELFMARK_REQUEST_TIMEOUT_SECONDS"
ENV_CORS_ALLOW_ORIGINS = "SHELFMARK_CORS_ALLOW_ORIGINS"

DEFAULT_LOG_LEVEL: LogLevel = "INFO"
DEFAULT_BIND = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_DUPLICATE_THRESHOLD = 0.7
DEFAULT_CLUSTER_METHOD: ClusteringMethod = "hybrid"
DEFAULT_MIN_CLUSTER_SIZE = 3
DEFAULT_MAX_CLUSTERS = 20

MAX_PORT = 65535
VALID_LOG_LEVELS: frozenset[LogLevel] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
)


class SettingsValidationError(ValueError):
    """Raised when static settings env vars contain invalid values."""

    @classmethod
    def for_empty_value(cls, env_var: str) -> SettingsValidationError:
        """Build error for empty non-optional env var values."""
        message = f"Invalid {env_var}: value cannot be empty."
        return cls(message)

    @classmethod
    def for_invalid_choice(
        cls,
        env_var: str,
        value: str,
        allowed_values: str,
    ) -> SettingsValidationError:
        """Build error for enum-like env vars with fixed allowlists."""
        message = f"Invalid {env_var}: {value!r}. Allowed values: {allowed_values}."
        return cls(message)

    @classmethod
    def for_invalid_number(
        cls,
        env_var: str,
        value: str,
        expected: str,
    ) -> SettingsValidationError:
        """Build error for numeric env vars that fail parsing or range checks."""
        message = f"Invalid {env_var}: {value!r}. Expected {expected}."
        return cls(message)


@dataclass(frozen=True, slots=True)
class AppSettings:
    """Resolved static configuration values for process startup."""

    log_level: LogLevel
    bind: str
    port: int
    duplicate_threshold: float
    cluster_method: ClusteringMethod
    min_cluster_size: int
    max_clusters: int
    request_timeout_seconds: float | None
    cors_allow_origins: tuple[str, ...]


def load_settings(environ: Mapping[str, str] | None = None) -> AppSettings:
    """Load and validate static settings from process environment."""
    env = os.environ if environ is None else environ

    return AppSettings(
        log_level=_read_log_level(env),
        bind=_read_bind(env),
        port=_read_positive_int(env, ENV_PORT, DEFAULT_PORT, maximum=MAX_PORT),
        duplicate_threshold=_read_duplicate_threshold(env),
        cluster_method=_read_cluster_method(env),
        min_cluster_size=_read_positive_int(
            env,
            ENV_MIN_CLUSTER_SIZE,
            DEFAULT_MIN_CLUSTER_SIZE,
        ),
        max_clusters=_read_positive_int(env, ENV_MAX_CLUSTERS, DEFAULT_MAX_CLUSTERS),
        request_timeout_seconds=_read_request_timeout(env),
        cors_allow_origins=_read_cors_allow_origins(env),
    )


def _read_log_level(environ: Mapping[str, str]) -> LogLevel:
    raw = environ.get(ENV_LOG_LEVEL)
    if raw is None:
        return DEFAULT_LOG_LEVEL
    value = raw.strip().upper()
    if value in VALID_LOG_LEVELS:
        return value
    allowed = ", ".join(sorted(VALID_LOG_LEVELS))
    raise SettingsValidationError.for_invalid_choice(ENV_LOG_LEVEL, raw, allowed)


def _read_bind(environ: Mapping[str, str]) -> str:
    raw = environ.get(ENV_BIND)
    if raw is None:
        return DEFAULT_BIND
    value = raw.strip()
    if not value:
        raise SettingsValidationError.for_empty_value(ENV_BIND)
    return value


def _read_duplicate_threshold(environ: Mapping[str, str]) -> float:
    raw = environ.get(ENV_DUPLICATE_THRESHOLD)
    if raw is None:
        return DEFAULT_DUPLICATE_THRESHOLD
    expected = "a number within [0, 1]"
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise SettingsValidationError.for_invalid_number(
            ENV_DUPLICATE_THRESHOLD,
            raw,
            expected,
        ) from exc
    if not 0.0 <= value <= 1.0:
        raise SettingsValidationError.for_invalid_number(
            ENV_DUPLICATE_THRESHOLD,
            raw,
            expected,
        )
    return value


def _read_cluster_method(environ: Mapping[str, str]) -> ClusteringMethod:
    raw = environ.get(ENV_CLUSTER_METHOD)
    if raw is None:
        return DEFAULT_CLUSTER_METHOD
    value = raw.strip().lower()
    if value in CLUSTERING_METHODS:
        return resolve_method(value)
    allowed = ", ".join(sorted(CLUSTERING_METHODS))
    raise SettingsValidationError.for_invalid_choice(ENV_CLUSTER_METHOD, raw, allowed)


def _read_positive_int(
    environ: Mapping[str, str],
    env_var: str,
    default: int,
    *,
    maximum: int | None = None,
) -> int:
    raw = environ.get(env_var)
    if raw is None:
        return default
    expected = "a positive integer"
    if maximum is not None:
        expected = f"an integer within [1, {maximum}]"
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise SettingsValidationError.for_invalid_number(
            env_var,
            raw,
            expected,
        ) from exc
    if value < 1 or (maximum is not None and value > maximum):
        raise SettingsValidationError.for_invalid_number(env_var, raw, expected)
    return value


def _read_request_timeout(environ: Mapping[str, str]) -> float | None:
    raw = environ.get(ENV_REQUEST_TIMEOUT_SECONDS)
    if raw is None or not raw.strip():
        return None
    expected = "a positive number of seconds"
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise SettingsValidationError.for_invalid_number(
            ENV_REQUEST_TIMEOUT_SECONDS,
            raw,
            expected,
        ) from exc
    if not math.isfinite(value) or value <= 0:
        raise SettingsValidationError.for_invalid_number(
            ENV_REQUEST_TIMEOUT_SECONDS,
            raw,
            expected,
        )
    return value


def _read_cors_allow_origins(environ: Mapping[str, str]) -> tuple[str, ...]:
    raw = environ.get(ENV_CORS_ALLOW_ORIGINS)
    if raw is None:
        return ()
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())
