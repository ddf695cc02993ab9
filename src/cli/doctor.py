"""Doctor command: self-checks and user configuration."""

from __future__ import annotations

from typing import Callable

import typer
from rich.console import Console
from rich.table import Table

from cli.ui_components import print_banner
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.case_variant import CaseVariant
from core.domain.errors import DecodeError, ValidationError
from core.services import (
    convert_case,
    decode_base64,
    encode_base64,
    km_to_miles,
    miles_to_km,
)

app = typer.Typer(no_args_is_help=True, help="Self-checks and configuration.")

_console = Console()


def _expect(actual: Callable[[], object], expected: object) -> tuple[bool, str]:
    try:
        value = actual()
    except Exception as exc:
        return False, f"raised {type(exc).__name__}: {exc}"
    return value == expected, repr(value)


def _expect_close(actual: Callable[[], float], expected: float, tolerance: float = 1e-4) -> tuple[bool, str]:
    try:
        value = actual()
    except Exception as exc:
        return False, f"raised {type(exc).__name__}: {exc}"
    return abs(value - expected) <= tolerance, repr(value)


def _expect_error(actual: Callable[[], object], error: type[Exception], message: str | None = None) -> tuple[bool, str]:
    try:
        value = actual()
    except error as exc:
        if message is not None and str(exc) != message:
            return False, f"wrong message: {exc}"
        return True, f"{error.__name__}: {exc}"
    except Exception as exc:
        return False, f"raised {type(exc).__name__}: {exc}"
    return False, f"returned {value!r}"


def reference_checks() -> list[tuple[str, bool, str]]:
    """Run the known-good scenarios of every tool."""

    checks: list[tuple[str, Callable[[], tuple[bool, str]]]] = [
        ("camel", lambda: _expect(lambda: convert_case("hello world test", CaseVariant.CAMEL), "helloWorldTest")),
        ("snake", lambda: _expect(lambda: convert_case("hello world test", CaseVariant.SNAKE), "hello_world_test")),
        ("kebab", lambda: _expect(lambda: convert_case("hello world test", CaseVariant.KEBAB), "hello-world-test")),
        ("lower", lambda: _expect(lambda: convert_case("HELLO WORLD TEST", CaseVariant.LOWER), "hello world test")),
        ("base64 encode", lambda: _expect(lambda: encode_base64("Hello, World!"), "SGVsbG8sIFdvcmxkIQ==")),
        ("base64 decode", lambda: _expect(lambda: decode_base64("SGVsbG8sIFdvcmxkIQ=="), "Hello, World!")),
        ("base64 strict", lambda: _expect_error(lambda: decode_base64("invalid-base64!"), DecodeError)),
        ("1 mi", lambda: _expect(lambda: miles_to_km(1), 1.6093)),
        ("10 mi", lambda: _expect(lambda: miles_to_km(10), 16.0934)),
        ("16.0934 km", lambda: _expect_close(lambda: km_to_miles(16.0934), 10)),
        (
            "negative mi",
            lambda: _expect_error(lambda: miles_to_km(-1), ValidationError, "Miles cannot be negative"),
        ),
        (
            "negative km",
            lambda: _expect_error(lambda: km_to_miles(-1), ValidationError, "Kilometers cannot be negative"),
        ),
    ]
    results: list[tuple[str, bool, str]] = []
    for name, check in checks:
        ok, detail = check()
        results.append((name, ok, detail))
    return results


@app.command()
def run() -> None:
    """Run the reference scenarios and show a pass/fail table."""

    print_banner(_console)
    settings = AppSettings()

    table = Table(title="spannerly Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Default case", "OK", settings.default_case_variant.label())
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    failures = 0
    for name, ok, detail in reference_checks():
        failures += 0 if ok else 1
        table.add_row(name, "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        _console.print(f"\n[red]{failures} check(s) failed.[/red]")
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup(
    variant: str = typer.Option(
        None,
        "--variant",
        help="Default case variant (value or label, e.g. 'snake' or 'snake_case').",
    ),
) -> None:
    """Store the default case variant in the user config .env."""

    if variant is None:
        variant = typer.prompt(
            "Default case variant",
            default=CaseVariant.default().value,
            show_default=True,
        )

    try:
        chosen = CaseVariant.parse(variant)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars({"SPANNERLY_DEFAULT_CASE_VARIANT": chosen.value})
    _console.print(f"[green]Saved default case variant ({chosen.label()}) to:[/green] {env_path}")
