import os
from dataclasses import dataclass, field
from typing import Literal

import yaml

from .exceptions import ConfigurationError

DEFAULT_SERVICE_NAME = "n8n-http-node"
DEFAULT_SERVICE_VERSION = "1.0"
DEFAULT_OTLP_ENDPOINT = "http://localhost:4318/v1/traces"
DEFAULT_TRACER_NAME = "n8n-http-tracer"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class TraceSettings:
    """Service identity and export target for one traced request.

    Built once per run by :meth:`resolve`; nothing downstream applies
    defaults on its own.
    """

    service_name: str
    service_version: str
    otlp_endpoint: str
    tracer_name: str

    @classmethod
    def resolve(
        cls,
        service_name: str | None = None,
        service_version: str | None = None,
        otlp_endpoint: str | None = None,
    ) -> "TraceSettings":
        """Apply the documented fallbacks to optional identity values.

        Empty strings count as absent. The tracer is named after the service
        only when a service name was actually given.
        """
        return cls(
            service_name=service_name or DEFAULT_SERVICE_NAME,
            service_version=service_version or DEFAULT_SERVICE_VERSION,
            otlp_endpoint=otlp_endpoint or DEFAULT_OTLP_ENDPOINT,
            tracer_name=service_name or DEFAULT_TRACER_NAME,
        )


@dataclass
class TraceConfig:
    service_name: str | None = None
    service_version: str | None = None
    otlp_endpoint: str | None = None


@dataclass
class Config:
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    tracing: TraceConfig = field(default_factory=TraceConfig)

    def __post_init__(self):
        # value checking
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")
        # type checking
        if self.tracing is None:
            self.tracing = TraceConfig()
        elif isinstance(self.tracing, dict):
            self.tracing = TraceConfig(**self.tracing)


def load_config(config_path: str | None = None) -> Config:
    """Load the YAML configuration.

    An explicitly requested file must exist. When no path is given, the
    ``HTTPTRACE_CONFIG`` variable or ``config.yaml`` is tried and the
    defaults apply if neither file is present.
    """
    explicit = config_path is not None or "HTTPTRACE_CONFIG" in os.environ
    config_path = config_path or os.getenv("HTTPTRACE_CONFIG", "config.yaml")
    if not os.path.exists(config_path):
        if explicit:
            raise ConfigurationError(
                f"Config file not found: {config_path}",
                "Check the --config-path option or HTTPTRACE_CONFIG.",
            )
        return Config()
    with open(config_path) as f:
        config_data = yaml.safe_load(f) or {}
    try:
        return Config(**config_data)
    except Exception as e:
        raise ConfigurationError(f"Error loading config: {e}") from e
