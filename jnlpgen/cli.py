import sys
from pathlib import Path
from typing import Optional

import typer

from jnlpgen.bundle.loader import load_bundle
from jnlpgen.config import GeneratorConfig
from jnlpgen.errors import JnlpError
from jnlpgen.logger import setup_logger
from jnlpgen.writer.jnlp import render_jnlp, write_jnlp


app = typer.Typer(
    name="jnlpgen",
    help="jnlpgen: generate JNLP descriptors from bundle descriptions",
    add_completion=False,
)

@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log warnings and errors",
    ),
):

    setup_logger(verbose=verbose, quiet=quiet)

@app.command()
def build(
    description: Path = typer.Argument(
        ...,
        help="Bundle description file (.toml or .json)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="JNLP file to write (defaults to the description's output)",
    ),
    indent: int = typer.Option(
        4,
        "--indent",
        help="Spaces per nesting level",
    ),
    compact: bool = typer.Option(
        False,
        "--compact",
        help="Write the document on a single line",
    ),
):

    try:
        config = GeneratorConfig(
            description=description,
            output=output,
            indent=indent,
            compact=compact,
        )

        typer.echo(f"Loading bundle description: {config.description}")
        bundle = load_bundle(config.description)
        if config.output is not None:
            bundle.output = config.output

        typer.echo("Writing JNLP file")
        path = write_jnlp(bundle, indent=config.indent_string())

        typer.echo("Build complete!")
        typer.echo(f"JNLP file written to: {path}")

    except JnlpError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        sys.exit(exc.exit_code)

    except Exception:
        typer.secho(
            "Internal error occurred. Run with --verbose for details.",
            fg=typer.colors.RED,
            err=True,
        )
        raise

@app.command()
def check(
    description: Path = typer.Argument(
        ...,
        help="Bundle description file (.toml or .json)",
    ),
):

    try:
        config = GeneratorConfig(description=description)
        bundle = load_bundle(config.description)
        document = render_jnlp(bundle)

        typer.echo(
            f"{config.description}: valid {bundle.kind} bundle "
            f"({len(document)} bytes)"
        )

    except JnlpError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        sys.exit(exc.exit_code)

    except Exception:
        typer.secho(
            "Internal error occurred. Run with --verbose for details.",
            fg=typer.colors.RED,
            err=True,
        )
        raise

def run_cli() -> None:
    app()


if __name__ == "__main__":
    run_cli()
