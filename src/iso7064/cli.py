from __future__ import annotations

import sys
import logging
import pathlib
from typing import NoReturn, Optional, Tuple

import typer
import structlog
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_config, Iso7064Config
from .engine.batch import BatchResult, verify_path
from .engine.dispatch import calculate_check_digit, verify_check_digit
from .engine.resolver import InvalidCharacterSet
from .schemes import all_schemes, get_scheme

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="iso7064: ISO 7064 check digit calculator")

EXIT_INVALID = 1
EXIT_USAGE = 2


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"iso7064 {__version__}")
        raise typer.Exit()


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=EXIT_USAGE)


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .iso7064.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
        log.info("verbose_enabled")
    try:
        cfg = load_config(config) if config else Iso7064Config()
    except (OSError, yaml.YAMLError, ValidationError) as e:
        _fail(f"Invalid config {config}: {e}")
    if config:
        log.info("config_loaded", path=str(config))
    ctx.obj = {"config": cfg}


def _select(
    cfg: Iso7064Config, scheme: Optional[str], charset: Optional[str], double: Optional[bool]
) -> Tuple[str, bool, str]:
    """
    Pick (charset, double_digit, label) for a command.

    --scheme wins; then --charset/--double (unset parts fall back to the
    config defaults); then the config defaults as a whole.
    """
    try:
        if scheme:
            s = get_scheme(scheme)
            return s.charset, s.double_digit, s.name
        if charset is None and double is None:
            cs, dd = cfg.resolve_alphabet()
            label = cfg.defaults.scheme or cfg.defaults.charset
            return cs, dd, label
        name = charset or cfg.defaults.charset
        dd = cfg.defaults.double_digit if double is None else double
        return cfg.charset_named(name), dd, name
    except KeyError as e:
        _fail(str(e.args[0]))


def _scheme_opt():
    return typer.Option(None, "--scheme", "-s", help="Named scheme, e.g. mod97-10 (see `schemes`)")


def _charset_opt():
    return typer.Option(None, "--charset", "-c", help="Charset name: numeric, hex, alpha, alphanumeric, ...")


def _double_opt():
    return typer.Option(None, "--double/--single", help="Two check characters instead of one")


@app.command()
def calculate(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Identifier without check digits"),
    scheme: Optional[str] = _scheme_opt(),
    charset: Optional[str] = _charset_opt(),
    double: Optional[bool] = _double_opt(),
):
    """Print VALUE with its check character(s) appended."""
    cs, dd, label = _select(ctx.obj["config"], scheme, charset, double)
    try:
        out = calculate_check_digit(value, cs, dd)
    except InvalidCharacterSet as e:
        _fail(str(e))
    if out is None:
        console.print(f"[red]{escape(repr(value))} cannot be written in charset {label}[/red]")
        raise typer.Exit(code=EXIT_INVALID)
    console.print(out, markup=False, highlight=False)


@app.command()
def verify(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Identifier including check digits"),
    scheme: Optional[str] = _scheme_opt(),
    charset: Optional[str] = _charset_opt(),
    double: Optional[bool] = _double_opt(),
):
    """Check the trailing check character(s) of VALUE."""
    cs, dd, _ = _select(ctx.obj["config"], scheme, charset, double)
    try:
        ok = verify_check_digit(value, cs, dd)
    except InvalidCharacterSet as e:
        _fail(str(e))
    if ok:
        console.print("[green]VALID[/green]")
    else:
        console.print("[red]INVALID[/red]")
        raise typer.Exit(code=EXIT_INVALID)


@app.command()
def scan(
    ctx: typer.Context,
    src: pathlib.Path = typer.Argument(..., exists=True, dir_okay=False, help="File with one identifier per line"),
    scheme: Optional[str] = _scheme_opt(),
    charset: Optional[str] = _charset_opt(),
    double: Optional[bool] = _double_opt(),
    report: Optional[pathlib.Path] = typer.Option(None, "--report", help="Write HTML report to this path"),
):
    """Verify every identifier in a file."""
    cs, dd, label = _select(ctx.obj["config"], scheme, charset, double)
    try:
        result: BatchResult = verify_path(src, cs, dd)
    except InvalidCharacterSet as e:
        _fail(str(e))
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {src}: {e}")
    log.info("batch_verified", path=str(src), total=result.total, invalid=result.invalid)

    console.print(f"Checked {result.total} identifiers: {result.valid} valid, {result.invalid} invalid")
    if result.invalid:
        table = Table()
        table.add_column("Line", justify="right")
        table.add_column("Value", no_wrap=True)
        table.add_column("Expected", no_wrap=True)
        for f in result.findings:
            if not f.valid:
                table.add_row(str(f.line), escape(f.value), escape(f.expected or "-"))
        console.print(table)
    if report:
        from .reporting.html import write_report
        write_report(result, report, source=str(src), scheme=label)
        console.print(f"[green]Report written:[/green] {report}")
    if not result.ok:
        raise typer.Exit(code=EXIT_INVALID)


@app.command()
def schemes():
    """List the named ISO 7064 schemes."""
    table = Table()
    table.add_column("Name", no_wrap=True)
    table.add_column("Radix", justify="right")
    table.add_column("Modulus", justify="right")
    table.add_column("Family")
    table.add_column("Digits", justify="right")
    table.add_column("Description")
    for name, s in all_schemes().items():
        radix, modulus = s.parameters
        table.add_row(name, str(radix), str(modulus), s.family, str(s.check_length), s.description)
    console.print(table)
