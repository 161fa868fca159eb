"""Config validation and diagnostic reporting for httptrace."""

from __future__ import annotations

from typing import Any

import httpx

from httptrace.config import Config, TraceSettings

_TRACES_PATH = "/v1/traces"

# Identity fields that fall back to a shared default when unset
_IDENTITY_FIELDS = {
    "service_name": "spans will be reported under the default service name",
    "service_version": "spans will carry the default service version",
}


def check_endpoint(endpoint: str) -> tuple[list[str], list[str]]:
    """Return (errors, warnings) for an OTLP/HTTP traces endpoint."""
    errors: list[str] = []
    warnings: list[str] = []
    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as e:
        return [f"OTLP endpoint '{endpoint}' is not a valid URL: {e}"], []

    if url.scheme not in ("http", "https"):
        errors.append(
            f"OTLP endpoint '{endpoint}' must use http or https"
        )
    elif not url.host:
        errors.append(f"OTLP endpoint '{endpoint}' has no host")
    elif not url.path.endswith(_TRACES_PATH):
        warnings.append(
            f"OTLP endpoint '{endpoint}' does not end with '{_TRACES_PATH}';"
            " the exporter posts to the URL as given"
        )
    return errors, warnings


def check_config(config: Config) -> dict[str, Any]:
    """Validate config and return a diagnostic report.

    Returns a dict with:
        service_name, service_version, otlp_endpoint: The resolved values
        errors: List of critical errors
        warnings: List of warnings
    """
    tracing = config.tracing
    settings = TraceSettings.resolve(
        tracing.service_name, tracing.service_version, tracing.otlp_endpoint
    )
    errors: list[dict[str, str]] = []
    warnings: list[dict[str, str]] = []

    for name, consequence in _IDENTITY_FIELDS.items():
        if not getattr(tracing, name):
            warnings.append({"field": name, "message": consequence})

    endpoint_errors, endpoint_warnings = check_endpoint(settings.otlp_endpoint)
    errors.extend(
        {"field": "otlp_endpoint", "message": message}
        for message in endpoint_errors
    )
    warnings.extend(
        {"field": "otlp_endpoint", "message": message}
        for message in endpoint_warnings
    )

    return {
        "service_name": settings.service_name,
        "service_version": settings.service_version,
        "otlp_endpoint": settings.otlp_endpoint,
        "errors": errors,
        "warnings": warnings,
    }
