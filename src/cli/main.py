"""spannerly command line interface.

Thin layer over `core.services.toolbox`: parse arguments, run the tool,
render the `ToolOutcome` (Rich panel or JSON) and map failures to exit
code 1.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console

from adapters.json_exporter import export_outcome_json, render_outcome_json
from cli import doctor
from cli.ui_components import build_outcome_panel, build_tokens_table, build_variants_table
from core.config import AppSettings
from core.domain.case_variant import CaseVariant, DistanceDirection
from core.domain.models import ToolOutcome
from core.log import configure_logging
from core.services.toolbox import run_case, run_decode, run_distance, run_encode, run_tokenize

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Text case, Base64 and distance tools.")
base64_app = typer.Typer(no_args_is_help=True, help="Standard Base64 encode/decode.")
distance_app = typer.Typer(no_args_is_help=True, help="Miles <-> kilometers.")

app.add_typer(base64_app, name="base64")
app.add_typer(distance_app, name="distance")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_JSON_OPTION = typer.Option(False, "--json", help="Print the result as JSON.")
_OUTPUT_OPTION = typer.Option(None, "--output", "-o", help="Also write the result as JSON to this file.")


def _emit(outcome: ToolOutcome, *, as_json: bool, output: Path | None) -> None:
    settings = AppSettings()

    if output is not None:
        path = export_outcome_json(outcome=outcome, output_path=output, indent=settings.json_indent)
        logger.info("Wrote %s", path)

    if as_json:
        typer.echo(render_outcome_json(outcome, indent=settings.json_indent), nl=False)
    elif outcome.ok:
        typer.echo(outcome.output)
    else:
        _err_console.print(build_outcome_panel(outcome))

    if not outcome.ok:
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    settings = AppSettings()
    configure_logging(settings.log_level, verbose=verbose)


@app.command()
def case(
    text: str = typer.Argument(..., help="Text to convert."),
    to: str = typer.Option(None, "--to", "-t", help="Target case variant (value or label)."),
    as_json: bool = _JSON_OPTION,
    output: Path = _OUTPUT_OPTION,
) -> None:
    """Convert TEXT to another case."""

    if to is None:
        variant = AppSettings().default_case_variant
    else:
        try:
            variant = CaseVariant.parse(to)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--to") from exc

    _emit(run_case(text, variant), as_json=as_json, output=output)


@app.command()
def tokens(
    text: str = typer.Argument(..., help="Text to split into words."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Show how TEXT is split into words."""

    outcome = run_tokenize(text)
    if as_json:
        _emit(outcome, as_json=True, output=None)
        return
    _console.print(build_tokens_table(outcome.output or []))


@app.command()
def variants() -> None:
    """List the supported case variants."""

    _console.print(build_variants_table())


@base64_app.command("encode")
def base64_encode(
    text: str = typer.Argument(..., help="Text to encode."),
    as_json: bool = _JSON_OPTION,
    output: Path = _OUTPUT_OPTION,
) -> None:
    """Encode TEXT (UTF-8) as standard Base64."""

    _emit(run_encode(text), as_json=as_json, output=output)


@base64_app.command("decode")
def base64_decode(
    encoded: str = typer.Argument(..., help="Base64 to decode."),
    as_json: bool = _JSON_OPTION,
    output: Path = _OUTPUT_OPTION,
) -> None:
    """Decode strict standard Base64 back to text."""

    _emit(run_decode(encoded), as_json=as_json, output=output)


def _distance(value: float, direction: DistanceDirection, as_json: bool, output: Path | None) -> None:
    _emit(run_distance(value, direction), as_json=as_json, output=output)


@distance_app.command("miles-to-km")
def distance_miles_to_km(
    value: float = typer.Argument(..., help="Distance in miles."),
    as_json: bool = _JSON_OPTION,
    output: Path = _OUTPUT_OPTION,
) -> None:
    """Convert miles to kilometers (4 decimal places)."""

    _distance(value, DistanceDirection.MILES_TO_KM, as_json, output)


@distance_app.command("km-to-miles")
def distance_km_to_miles(
    value: float = typer.Argument(..., help="Distance in kilometers."),
    as_json: bool = _JSON_OPTION,
    output: Path = _OUTPUT_OPTION,
) -> None:
    """Convert kilometers to miles."""

    _distance(value, DistanceDirection.KM_TO_MILES, as_json, output)


def run() -> None:
    app()
