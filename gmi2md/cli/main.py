"""Main CLI entry point for the gmi2md command.

This module provides the Typer application that reads a Gemtext document
from a file or standard input, converts it, and writes the Markdown to
standard output. It uses options on the main command rather than
subcommands.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from gmi2md import __version__
from gmi2md.cli.errors import CLIError, InputDecodeError, InputReadError
from gmi2md.cli.models import ExitCode
from gmi2md.cli.output import OutputHandler
from gmi2md.converter import GemtextConverter

app = typer.Typer(
    name="gmi2md",
    help="""Convert Gemtext documents to Markdown.

EXAMPLES:
  gmi2md < page.gmi > page.md         # Convert standard input
  gmi2md page.gmi > page.md           # Convert a file
  gmi2md page.gmi -v 1                # Also print a summary to stderr""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

# Module logger
logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'gmi2md' namespace logger to avoid affecting
    third-party libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("gmi2md")
    app_logger.setLevel(level)

    # Drop handlers from a previous invocation in the same process
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        # Timestamped filename in local time
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"gmi2md_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _read_input(file: Optional[str]) -> str:
    """Read the whole input and decode it as UTF-8.

    Args:
        file: Path to the input file, or None / "-" for standard input

    Returns:
        Decoded input text

    Raises:
        InputReadError: If the file cannot be read
        InputDecodeError: If the input is not valid UTF-8
    """
    if file is None or file == STDIN_SOURCE:
        source = "<stdin>"
        data = sys.stdin.buffer.read()
    else:
        source = file
        try:
            data = Path(file).read_bytes()
        except FileNotFoundError:
            raise InputReadError(file, "File not found")
        except IsADirectoryError:
            raise InputReadError(file, "Is a directory")
        except PermissionError:
            raise InputReadError(file, "Permission denied")
        except OSError as e:
            raise InputReadError(file, str(e))

    logger.debug(f"Read {len(data)} byte(s) from {source}")

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputDecodeError(source, e.start, e.reason)


def _run_convert(
    file: Optional[str],
    logdir: Optional[str],
    verbosity: int,
    no_color: bool,
) -> None:
    """Run the conversion and write the result to standard output.

    Args:
        file: Optional input file (standard input when omitted)
        logdir: Directory for log files
        verbosity: Verbosity level
        no_color: Whether to disable colored output
    """
    _configure_logging(verbosity, logdir)

    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    source = "<stdin>" if file in (None, STDIN_SOURCE) else file

    try:
        output.info(f"Converting {source}")
        text = _read_input(file)

        converter = GemtextConverter()
        result = converter.convert_document(text)

        # Bytes are written verbatim, no trailing newline added
        typer.echo(result.markdown.encode("utf-8"), nl=False)

        output.print_summary(result)
        raise typer.Exit(ExitCode.SUCCESS)

    except CLIError as e:
        logger.error(f"Conversion failed: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.INPUT_ERROR)

    except typer.Exit:
        raise

    except Exception as e:
        logger.exception("Unexpected error during conversion")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


def _version_callback(value: bool) -> None:
    """Print the version and exit before any other parameter is processed."""
    if value:
        typer.echo(f"gmi2md version {__version__}")
        raise typer.Exit()


@app.command()
def main_command(
    file: Optional[str] = typer.Argument(
        None,
        help="Gemtext file to convert (reads standard input when omitted or '-')",
        metavar="FILE",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=warnings only, 1=info and summary, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Convert a Gemtext document to Markdown.

    \b
    The Markdown is written to standard output. Messages, warnings and the
    optional summary are written to standard error.

    \b
    EXAMPLES:
      gmi2md < page.gmi > page.md
      gmi2md page.gmi > page.md
      cat page.gmi | gmi2md - -v 1
    """
    _run_convert(file, logdir, verbosity, no_color)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m gmi2md.cli.main
if __name__ == "__main__":
    main()
