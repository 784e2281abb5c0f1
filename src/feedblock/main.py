import typer

from feedblock import __version__
from feedblock.logging_config import setup_logging
from feedblock.cli import limits
from feedblock.cli.config import CLIConfig

app = typer.Typer()


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: tables and colors (also via FEEDBLOCK_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
):
    """
    feedblock: feed block resource limits for content clusters

    Machine mode is DEFAULT (pure data, no formatting).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)
        setup_logging(level="DEBUG" if verbose else "INFO", suppress_console=False, force=True)
    else:
        CLIConfig.set_machine_mode(True)
        # Machine mode - keep stderr quiet unless asked
        setup_logging(level="DEBUG", suppress_console=not verbose, force=True)


@app.command()
def version():
    """
    Prints the current version of feedblock.
    """
    typer.echo(f"feedblock v{__version__}")


app.add_typer(limits.app, name="limits", help="Resource limit commands (derive, from-xml, defaults)")

# Top-level aliases for the limits commands
app.command(name="derive")(limits.derive)
app.command(name="from-xml")(limits.from_xml)
app.command(name="defaults")(limits.defaults)


if __name__ == "__main__":
    app()
