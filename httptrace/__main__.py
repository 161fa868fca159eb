import asyncio
import json

import click
import yaml

from httptrace.config import Config, load_config
from httptrace.doctor import check_config
from httptrace.error_handler import handle_error
from httptrace.exceptions import ValidationError
from httptrace.log import init_logger, logger
from httptrace.models import HttpMethod, RequestDescriptor
from httptrace.node import HttpTraceExporterNode
from httptrace.otel import HttpTraceExporter

config_option = click.option(
    "-c",
    "--config-path",
    "config_path",
    type=click.Path(exists=True),
    required=False,
    help="Path to configuration file",
)


def _parse_body(ctx, param, value: str | None):
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Body is not valid JSON: {e}") from e


def _setup(config_path: str | None) -> Config:
    config = load_config(config_path)
    init_logger(config)
    return config


@click.group()
def cli():
    pass


@cli.command()
@config_option
@click.option("-u", "--url", type=str, required=True, help="The request URL")
@click.option(
    "-m",
    "--method",
    type=click.Choice([m.value for m in HttpMethod], case_sensitive=False),
    default="GET",
    show_default=True,
    help="The HTTP method",
)
@click.option(
    "-b",
    "--body",
    type=str,
    callback=_parse_body,
    required=False,
    help="JSON request body",
)
@click.option("--otlp-endpoint", type=str, required=False, help="OTLP/HTTP traces URL")
@click.option("--service-name", type=str, required=False, help="The service name")
@click.option(
    "--service-version", type=str, required=False, help="The service version"
)
def request(
    config_path: str | None,
    url: str,
    method: str,
    body,
    otlp_endpoint: str | None,
    service_name: str | None,
    service_version: str | None,
):
    """
    Send one HTTP request and export a span describing it.
    """
    try:
        config = _setup(config_path)
        tracing = config.tracing
        descriptor = RequestDescriptor(url=url, method=method, body=body)
        asyncio.run(
            HttpTraceExporter().run(
                service_name or tracing.service_name,
                service_version or tracing.service_version,
                otlp_endpoint or tracing.otlp_endpoint,
                [descriptor],
            )
        )
        click.echo(json.dumps({"url": url, "method": descriptor.method.value}))
    except Exception as e:
        handle_error(e, exit_on_error=True)


@cli.command()
@config_option
@click.argument("items_file", type=click.Path(exists=True))
def batch(config_path: str | None, items_file: str):
    """
    Trace every item of a YAML or JSON list of request parameters.
    """
    try:
        config = _setup(config_path)
        with open(items_file) as f:
            items = yaml.safe_load(f) or []
        if not isinstance(items, list):
            raise ValidationError(
                f"{items_file} must contain a list of items",
                "Each item is a mapping such as {url: ..., method: GET}.",
            )
        tracing = config.tracing
        defaults = {
            "otlpEndpoint": tracing.otlp_endpoint,
            "serviceName": tracing.service_name,
            "serviceVersion": tracing.service_version,
        }
        items = [
            {**{k: v for k, v in defaults.items() if v}, **item}
            for item in items
        ]
        logger.info(f"Tracing {len(items)} item(s) from {items_file}")
        results = asyncio.run(HttpTraceExporterNode().execute(items))
        for result in results:
            click.echo(json.dumps(result))
    except Exception as e:
        handle_error(e, exit_on_error=True)


@cli.command()
@config_option
def doctor(config_path: str | None):
    """
    Check the tracing configuration and report problems.
    """
    try:
        config = _setup(config_path)
    except Exception as e:
        handle_error(e, exit_on_error=True)
    report = check_config(config)

    click.echo(f"Service: {report['service_name']} {report['service_version']}")
    click.echo(f"OTLP endpoint: {report['otlp_endpoint']}")
    for error in report["errors"]:
        click.echo(f"ERROR [{error['field']}]: {error['message']}")
    for warning in report["warnings"]:
        click.echo(f"WARNING [{warning['field']}]: {warning['message']}")
    if report["errors"]:
        raise SystemExit(1)
    click.echo("Configuration OK")


if __name__ == "__main__":
    cli()
