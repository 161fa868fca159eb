from .config import Config, TraceConfig, TraceSettings, load_config
from .exceptions import (
    ConfigurationError,
    HttptraceError,
    InvalidInputError,
    ValidationError,
)
from .models import HttpMethod, RequestDescriptor
from .node import HttpTraceExporterNode
from .otel import HttpTraceExporter, create_trace_provider

__all__ = [
    # Config
    "Config",
    "TraceConfig",
    "TraceSettings",
    "load_config",
    # Models
    "HttpMethod",
    "RequestDescriptor",
    # Tracing
    "HttpTraceExporter",
    "HttpTraceExporterNode",
    "create_trace_provider",
    # Errors
    "HttptraceError",
    "ConfigurationError",
    "ValidationError",
    "InvalidInputError",
]
