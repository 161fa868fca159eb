"""Tests for the doctor config validation command."""

from unittest.mock import patch

from click.testing import CliRunner

from httptrace.__main__ import cli
from httptrace.config import Config, TraceConfig
from httptrace.doctor import check_config, check_endpoint


class TestCheckEndpoint:
    def test_valid_endpoint(self):
        assert check_endpoint("http://tempo:4318/v1/traces") == ([], [])

    def test_non_http_scheme_is_error(self):
        errors, warnings = check_endpoint("grpc://tempo:4317")
        assert len(errors) == 1
        assert "http or https" in errors[0]
        assert warnings == []

    def test_relative_url_is_error(self):
        errors, _ = check_endpoint("tempo:4318")
        assert errors

    def test_missing_traces_path_is_warning(self):
        errors, warnings = check_endpoint("http://tempo:4318")
        assert errors == []
        assert "/v1/traces" in warnings[0]


class TestCheckConfig:
    def _make_config(self, **tracing):
        return Config(log_level="INFO", tracing=TraceConfig(**tracing))

    def test_fully_configured(self):
        result = check_config(
            self._make_config(
                service_name="billing",
                service_version="2.1",
                otlp_endpoint="https://tempo.example.com/v1/traces",
            )
        )
        assert result["errors"] == []
        assert result["warnings"] == []
        assert result["service_name"] == "billing"
        assert result["otlp_endpoint"] == "https://tempo.example.com/v1/traces"

    def test_defaults_reported_as_warnings(self):
        result = check_config(self._make_config())
        assert result["errors"] == []
        assert [w["field"] for w in result["warnings"]] == [
            "service_name",
            "service_version",
        ]
        assert result["service_name"] == "n8n-http-node"
        assert result["service_version"] == "1.0"
        assert result["otlp_endpoint"] == "http://localhost:4318/v1/traces"

    def test_bad_endpoint_reported_as_error(self):
        result = check_config(
            self._make_config(
                service_name="billing",
                service_version="2.1",
                otlp_endpoint="ftp://collector/v1/traces",
            )
        )
        assert [e["field"] for e in result["errors"]] == ["otlp_endpoint"]


class TestDoctorCommand:
    def _write_config(self, tmp_path, endpoint):
        path = tmp_path / "config.yaml"
        path.write_text(
            "tracing:\n"
            "  service_name: billing\n"
            "  service_version: '2.1'\n"
            f"  otlp_endpoint: {endpoint}\n"
        )
        return str(path)

    def test_valid_config(self, tmp_path):
        path = self._write_config(tmp_path, "http://tempo:4318/v1/traces")
        with patch("httptrace.__main__.init_logger"):
            result = CliRunner().invoke(cli, ["doctor", "-c", path])
        assert result.exit_code == 0
        assert "Service: billing 2.1" in result.output
        assert "Configuration OK" in result.output

    def test_invalid_endpoint_fails(self, tmp_path):
        path = self._write_config(tmp_path, "grpc://tempo:4317")
        with patch("httptrace.__main__.init_logger"):
            result = CliRunner().invoke(cli, ["doctor", "-c", path])
        assert result.exit_code == 1
        assert "ERROR [otlp_endpoint]" in result.output
