"""Command-line entry point for running the labs.

Installed as the ``llm-labs`` script and also runnable as ``python -m llm_labs``.
"""

import click

from llm_labs.console import ConsoleReporter
from llm_labs.core.errors import ConfigurationError
from llm_labs.core.logging import LogContext, get_logger, setup_logging
from llm_labs.labs import LABS

logger = get_logger(__name__)


@click.group()
def cli() -> None:
    """LLM Labs: paced, narrated chat-completion demos."""
    setup_logging()


@cli.command("list")
def list_labs() -> None:
    """List the available labs."""
    for lab in LABS.values():
        click.echo(f"{lab.id:<20} {lab.title}")


@cli.command()
@click.argument("lab_id", type=click.Choice(sorted(LABS)))
@click.option(
    "--delay-ms",
    type=click.IntRange(min=0),
    default=None,
    help="Pause after each log line (defaults to LOG_DELAY_MS).",
)
@click.option("--model", default=None, help="Model to use (defaults to OPENAI_MODEL).")
def run(lab_id: str, delay_ms: int | None, model: str | None) -> None:
    """Run one lab."""
    lab = LABS[lab_id]
    reporter = ConsoleReporter(delay_ms=delay_ms)
    kwargs = {"model": model} if model else {}

    with LogContext(lab=lab_id):
        logger.info("lab_started")
        try:
            lab.main(reporter=reporter, **kwargs)
        except ConfigurationError as e:
            click.echo(e.message, err=True)
            raise SystemExit(1) from None
        logger.info("lab_finished")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
