"""Tests for the request and batch commands."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from httptrace.__main__ import cli
from httptrace.models import RequestDescriptor


@pytest.fixture(autouse=True)
def quiet_logger():
    with patch("httptrace.__main__.init_logger"):
        yield


@pytest.fixture
def executor_cls():
    with patch("httptrace.__main__.HttpTraceExporter") as mock_cls:
        mock_cls.return_value.run = AsyncMock(return_value=None)
        yield mock_cls


class TestRequestCommand:
    def test_request_with_options(self, executor_cls):
        result = CliRunner().invoke(
            cli,
            [
                "request",
                "-u",
                "https://api.example.com/users",
                "-m",
                "post",
                "-b",
                '{"name": "John"}',
                "--service-name",
                "user-service",
                "--service-version",
                "3.0",
                "--otlp-endpoint",
                "http://tempo:4318/v1/traces",
            ],
        )
        assert result.exit_code == 0, result.output
        executor_cls.return_value.run.assert_awaited_once_with(
            "user-service",
            "3.0",
            "http://tempo:4318/v1/traces",
            [RequestDescriptor("https://api.example.com/users", "POST", {"name": "John"})],
        )
        assert json.loads(result.output) == {
            "url": "https://api.example.com/users",
            "method": "POST",
        }

    def test_config_values_fill_missing_options(self, executor_cls, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "tracing:\n"
            "  service_name: billing\n"
            "  otlp_endpoint: http://jaeger:4318/v1/traces\n"
        )
        result = CliRunner().invoke(
            cli,
            ["request", "-c", str(path), "-u", "https://api.example.com"],
        )
        assert result.exit_code == 0, result.output
        executor_cls.return_value.run.assert_awaited_once_with(
            "billing",
            None,
            "http://jaeger:4318/v1/traces",
            [RequestDescriptor("https://api.example.com")],
        )

    def test_invalid_body(self, executor_cls):
        result = CliRunner().invoke(
            cli, ["request", "-u", "https://api.example.com", "-b", "{oops"]
        )
        assert result.exit_code == 2
        assert "not valid JSON" in result.output
        executor_cls.return_value.run.assert_not_called()

    def test_executor_error_exits(self, executor_cls):
        executor_cls.return_value.run.side_effect = RuntimeError("flush failed")
        result = CliRunner().invoke(
            cli, ["request", "-u", "https://api.example.com"]
        )
        assert result.exit_code == 1


class TestBatchCommand:
    @pytest.fixture
    def node_cls(self):
        with patch("httptrace.__main__.HttpTraceExporterNode") as mock_cls:
            yield mock_cls

    def test_items_are_traced(self, node_cls, tmp_path):
        node_cls.return_value.execute = AsyncMock(
            return_value=[
                {"url": "https://a.example", "method": "GET", "success": True},
                {"url": "https://b.example", "method": "POST", "success": True},
            ]
        )
        items = tmp_path / "items.yaml"
        items.write_text(
            "- url: https://a.example\n"
            "- url: https://b.example\n"
            "  method: POST\n"
            "  serviceName: orders\n"
        )
        config = tmp_path / "config.yaml"
        config.write_text("tracing:\n  service_name: billing\n")

        result = CliRunner().invoke(
            cli, ["batch", "-c", str(config), str(items)]
        )

        assert result.exit_code == 0, result.output
        (items_arg,), _ = node_cls.return_value.execute.await_args
        assert items_arg == [
            {"serviceName": "billing", "url": "https://a.example"},
            {"serviceName": "orders", "url": "https://b.example", "method": "POST"},
        ]
        lines = [json.loads(line) for line in result.output.splitlines()]
        assert [line["url"] for line in lines] == [
            "https://a.example",
            "https://b.example",
        ]

    def test_items_file_must_be_a_list(self, node_cls, tmp_path):
        items = tmp_path / "items.yaml"
        items.write_text("url: https://a.example\n")
        result = CliRunner().invoke(cli, ["batch", str(items)])
        assert result.exit_code == 1
        node_cls.return_value.execute.assert_not_called()
