"""Command-line interface for flowlint."""

import logging
import sys

import click

from .config import ValidationOptions, load_options
from .output.formatter import format_validation_result
from .schema.errors import SchemaLoadError, SchemaValidationError
from .validators.errors import ValidationTimeout
from .validators.runner import validate_file

# Maps CLI toggle names to ValidationOptions fields
_TOGGLES = {
    "reachability": "check_reachability",
    "dead_ends": "check_dead_ends",
    "cycles": "check_cycles",
    "gateways": "check_gateway_consistency",
    "events": "check_event_consistency",
    "flows": "check_flow_consistency",
}


def _echo_schema_error(prefix: str, e: SchemaValidationError) -> None:
    click.echo(f"{prefix}: {e}", err=True)
    for err in e.errors:
        click.echo(f"  - {err['loc']}: {err['msg']}", err=True)


@click.group()
@click.version_option()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
def main(log_level: str):
    """flowlint: static validation of process definitions."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("ir_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML file with validation options",
)
@click.option(
    "--skip",
    type=click.Choice(sorted(_TOGGLES)),
    multiple=True,
    help="Disable a check (repeatable)",
)
@click.option(
    "--bpmn-compliance/--no-bpmn-compliance",
    "strict_bpmn_compliance",
    default=None,
    help="Run the extra required-attribute and reference checks",
)
@click.option(
    "--max-complexity",
    type=float,
    default=None,
    help="Warn when the complexity score exceeds this value",
)
@click.option(
    "--timeout-ms",
    type=float,
    default=None,
    help="Abort validation after this many milliseconds",
)
def validate(
    ir_file: str,
    output_format: str,
    strict: bool,
    config_file: str | None,
    skip: tuple[str, ...],
    strict_bpmn_compliance: bool | None,
    max_complexity: float | None,
    timeout_ms: float | None,
):
    """Validate a process IR document.

    IR_FILE is the path to a YAML or JSON document with a top-level
    ``definitions`` mapping.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File, schema or option error
      3 - Validation timed out
    """
    try:
        options = load_options(config_file) if config_file else ValidationOptions()
        overrides = {_TOGGLES[name]: False for name in skip}
        options = options.with_overrides(
            strict_bpmn_compliance=strict_bpmn_compliance,
            max_complexity_score=max_complexity,
            timeout_ms=timeout_ms,
            **overrides,
        )
        result = validate_file(ir_file, options)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        _echo_schema_error("Schema validation error", e)
        sys.exit(2)
    except ValidationTimeout as e:
        click.echo(f"Timeout: {e}", err=True)
        sys.exit(3)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


if __name__ == "__main__":
    main()
