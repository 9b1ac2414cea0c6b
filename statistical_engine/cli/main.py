"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from statistical_engine.cli.commands.dataset import generate
from statistical_engine.cli.commands.distribution import distribution
from statistical_engine.cli.commands.hypothesis import ttest_one, ttest_two
from statistical_engine.cli.commands.regression import regress
from statistical_engine.exceptions import ConfigValidationError
from statistical_engine.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Statistical Engine CLI")


app.command(name="distribution")(distribution)
app.command(name="ttest-one")(ttest_one)
app.command(name="ttest-two")(ttest_two)
app.command(name="regress")(regress)
app.command(name="generate")(generate)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigValidationError as exc:
        log.error(str(exc))
        sys.exit(1)
    except KeyboardInterrupt:
        log.info("Shutdown requested")
        sys.exit(130)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    main()
