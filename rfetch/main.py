"""
rfetch — entry point.

CLI flags, configuration resolution, gathering and display.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from rfetch import tdl
from rfetch import config as config_mod
from rfetch.errors import ConfigError, RFetchError
from rfetch.logging_setup import configure_logging
from rfetch.system_info import gather
from rfetch.themes import list_builtin, load_builtin
from rfetch.ui.display import display
from rfetch.ui.theme import APP_NAME, APP_VERSION, RFETCH_THEME


# ── Consoles (stdout: theme listing; stderr: errors, warnings) ──────────────

console = Console(theme=RFETCH_THEME)
err_console = Console(theme=RFETCH_THEME, stderr=True)


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name=APP_NAME, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(APP_VERSION, "-V", "--version", prog_name=APP_NAME)
# Sources
@click.option("-c", "--config", "config_path", metavar="FILE", default=None,
              help="Path to config file (default: config.toml in the platform config directory).")
@click.option("-t", "--theme", metavar="THEME", default=None,
              help="Built-in theme name or path to a theme file (JSON, TOML or YAML).")
# Theme helpers
@click.option("--list-themes", is_flag=True, default=False, help="List built-in themes and exit.")
@click.option(
    "--generate-template",
    type=click.Choice(["json", "toml", "yaml", "yml"], case_sensitive=False),
    default=None,
    help="Print a starter theme document in FORMAT and exit.",
)
# Overrides
@click.option(
    "-l", "--logo",
    type=click.Choice(["auto", "ascii", "small", "none"], case_sensitive=False),
    default=None,
    help="Logo style.",
)
@click.option(
    "--color",
    type=click.Choice(["auto", "always", "never"], case_sensitive=False),
    default=None,
    help="When to use colors (default: from config, normally auto).",
)
@click.option("-j", "--json", "as_json", is_flag=True, default=False, help="Output system information as JSON.")
@click.option("-m", "--minimal", is_flag=True, default=False, help="Show only the essentials, small logo.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show every optional field.")
# Misc
@click.option("--clr", is_flag=True, default=False, help="Clear the screen before printing.")
@click.option("--init-config", is_flag=True, default=False,
              help="Write the default configuration file and exit.")
@click.option("--debug", is_flag=True, default=False, help="Log diagnostic detail to stderr.")
def cli(
    config_path: Optional[str],
    theme: Optional[str],
    list_themes: bool,
    generate_template: Optional[str],
    logo: Optional[str],
    color: Optional[str],
    as_json: bool,
    minimal: bool,
    verbose: bool,
    clr: bool,
    init_config: bool,
    debug: bool,
) -> None:
    """Fast, themeable system information for the terminal."""
    configure_logging(debug)

    try:
        _run(
            config_path=config_path,
            theme=theme,
            list_themes=list_themes,
            generate_template=generate_template,
            logo=logo,
            color=color,
            as_json=as_json,
            minimal=minimal,
            verbose=verbose,
            clr=clr,
            init_config=init_config,
        )
    except RFetchError as e:
        err_console.print(f"[error]Error:[/error] {escape(str(e))}")
        raise SystemExit(1)


def _run(
    config_path: Optional[str],
    theme: Optional[str],
    list_themes: bool,
    generate_template: Optional[str],
    logo: Optional[str],
    color: Optional[str],
    as_json: bool,
    minimal: bool,
    verbose: bool,
    clr: bool,
    init_config: bool,
) -> None:
    # ── Short-circuit modes ───────────────────────────────────────────────────
    if generate_template:
        click.echo(tdl.generate_template(generate_template))
        return

    if list_themes:
        _print_theme_list()
        return

    if init_config:
        _write_default_config(config_path)
        return

    # ── Resolve → gather → display ────────────────────────────────────────────
    cfg, active_theme, warnings = config_mod.resolve(
        config_path=config_path,
        theme=theme,
        logo=logo,
        color=color,
        as_json=as_json,
        minimal=minimal,
        verbose=verbose,
    )
    for warning in warnings:
        err_console.print(f"[warning]Warning:[/warning] {escape(warning)}")

    if clr:
        click.clear()

    info = gather(cfg)
    display(cfg, info, active_theme)


def _print_theme_list() -> None:
    console.print("[brand]Available themes:[/brand]", highlight=False)
    for name in list_builtin():
        builtin = load_builtin(name)
        description = builtin.description if builtin else ""
        console.print(
            f"  [theme_name]{name}[/theme_name] [dim]- {escape(description)}[/dim]",
            highlight=False,
        )


def _write_default_config(config_path: Optional[str]) -> None:
    target = Path(config_path) if config_path else config_mod.default_config_path()
    if target.exists():
        raise ConfigError(f"{target} already exists; remove it first to regenerate")
    written = config_mod.save(config_mod.defaults(), target)
    click.echo(f"Wrote default configuration to {written}")


if __name__ == "__main__":
    cli()
