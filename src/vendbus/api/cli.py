"""vendbus command line interface.

Commands:
  vendbus simulate   publish randomly generated sale/refill events
  vendbus apply      publish explicitly described events
"""

from __future__ import annotations

import json

import click

from vendbus import __version__
from vendbus.application.generator import EventGenerator
from vendbus.application.parsing import parse_event
from vendbus.config import configure_logging, load_settings
from vendbus.config.settings import Settings
from vendbus.container import Container, create_container
from vendbus.core.exceptions import ConfigurationError, EventParseError
from vendbus.domain.events import MachineEvent


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _parse_events(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[MachineEvent]:
    events = []
    for value in values:
        try:
            events.append(parse_event(value))
        except EventParseError as e:
            raise click.BadParameter(e.message, ctx=ctx, param=param) from e
    return events


def _report(container: Container, published: int, as_json: bool) -> None:
    snapshots = container.snapshots()
    alerts = container.alerts()

    if as_json:
        data = {
            "published": published,
            "delivered": container.bus.delivered,
            "machines": [snapshot.model_dump() for snapshot in snapshots],
            "alerts": [
                {"type": alert.type.value, "machine_id": alert.machine_id}
                for alert in alerts
            ],
        }
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Published {published} events ({container.bus.delivered} deliveries).")
    for snapshot in snapshots:
        flag = " (LOW)" if snapshot.low_stock else ""
        click.echo(f"  Machine {snapshot.id}: stock {snapshot.stock_level}{flag}")
    if alerts:
        click.echo("Alerts:")
        for alert in alerts:
            click.echo(f"  {alert}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(__version__, prog_name="vendbus")
@click.option("--threshold", type=int, default=None, help="Inclusive low-stock threshold.")
@click.option("--stock", type=int, default=None, help="Starting stock level per machine.")
@click.option(
    "--machine", "machine_ids", multiple=True, help="Machine id (repeatable)."
)
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, ...).")
@click.pass_context
def cli(
    ctx: click.Context,
    threshold: int | None,
    stock: int | None,
    machine_ids: tuple[str, ...],
    log_level: str | None,
) -> None:
    """Vending machine publish/subscribe bus."""
    try:
        settings = load_settings(
            low_stock_threshold=threshold,
            default_stock_level=stock,
            machine_ids=list(machine_ids) or None,
            log_level=log_level,
        )
        configure_logging(settings.log_level, settings.log_json)
    except ConfigurationError as e:
        errors = "; ".join(e.details.get("errors", [])) or e.message
        raise click.UsageError(errors, ctx=ctx) from e
    ctx.obj = settings


@cli.command()
@click.option("--events", "-n", "count", default=5, show_default=True, help="Number of events.")
@click.option("--seed", type=int, default=None, help="Random seed for a reproducible run.")
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
@click.pass_obj
def simulate(settings: Settings, count: int, seed: int | None, as_json: bool) -> None:
    """Publish randomly generated sale and refill events."""
    container = create_container(settings)
    generator = EventGenerator(settings.machine_ids, seed=seed)
    published = container.publish_all(generator.generate(count))
    _report(container, published, as_json)


@cli.command()
@click.argument("events", nargs=-1, required=True, callback=_parse_events)
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
@click.pass_obj
def apply(settings: Settings, events: list[MachineEvent], as_json: bool) -> None:
    """Publish EVENTS in order, e.g. sale:001:3 refill:001:5."""
    container = create_container(settings)
    published = container.publish_all(events)
    _report(container, published, as_json)


def main() -> None:
    """Entry point for the vendbus script."""
    cli()


if __name__ == "__main__":
    main()
