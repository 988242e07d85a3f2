"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from circular_sampling.cli.commands.dump import dump
from circular_sampling.cli.commands.prepare import prepare
from circular_sampling.cli.commands.sumcheck import sumcheck
from circular_sampling.cli.commands.sweep import sweep
from circular_sampling.exceptions import (
    ConfigValidationError,
    ExportError,
    MomentDomainError,
    ValidationNotConvergedError,
)
from circular_sampling.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Validated complex-normal sampling CLI")


app.command()(prepare)
app.command()(sweep)
app.command()(dump)
app.command()(sumcheck)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigValidationError as exc:
        log.error(str(exc))
        raise SystemExit(1)
    except MomentDomainError as exc:
        log.error(f"Moment computation failed: {exc}")
        raise SystemExit(2)
    except ValidationNotConvergedError as exc:
        log.error(f"Distribution validation did not converge: {exc}")
        raise SystemExit(3)
    except ExportError as exc:
        log.error(f"Export failed: {exc}")
        raise SystemExit(4)
    except KeyboardInterrupt:
        log.info("Shutdown requested.")
        raise SystemExit(130)
    except Exception:
        log.exception("Unhandled exception")
        raise SystemExit(255)


if __name__ == "__main__":
    # Use sys.exit to ensure proper exit code propagation under raw python invocation
    sys.exit(main())
