"""Command-line front door for showfileinfo.

Walks the argument tokens once, reporting on every file or folder named and
stopping early for help requests or unrecognized options. Then prints the
run summary and maps the outcome to an exit status.
"""

from __future__ import annotations

import enum
import locale
import logging
import sys
from typing import Sequence, TextIO

from .config import Settings, load_settings
from .inspector import EntryInspector, RunTotals
from .options import TokenKind, UnrecognizedOptionError

COPYRIGHT_NOTICE = "Copyright (c) 2022 by Keith Fenske.  Apache License or GNU GPL."
PROGRAM_TITLE = "Show Standard Information About Files"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class ExitStatus(enum.IntEnum):
    FAILURE = -1
    UNKNOWN = 0
    SUCCESS = 1


def show_help(err: TextIO) -> None:
    """Print the usage summary to ``err``."""
    err.write(
        "\n"
        f"{PROGRAM_TITLE}\n"
        "\n"
        "  showfileinfo  [options]  fileOrFolderNames\n"
        "\n"
        "This is a console application.  You may give options on the command line:\n"
        "\n"
        "  -? = -help = show summary of command-line syntax\n"
        "\n"
        f"{COPYRIGHT_NOTICE}\n"
    )


def configure_logging(level: int, err: TextIO) -> None:
    """Route package log records to ``err`` at ``level``."""
    package_logger = logging.getLogger("showfileinfo")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    handler = logging.StreamHandler(err)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def adopt_host_numeric_locale() -> None:
    """Use the host's ``LC_NUMERIC`` for digit grouping; keep "C" if it is unusable."""
    try:
        locale.setlocale(locale.LC_NUMERIC, "")
    except locale.Error as exc:
        logger.debug("could not adopt host numeric locale: %s", exc)


def run(
    argv: Sequence[str],
    settings: Settings,
    out: TextIO,
    err: TextIO,
    totals: RunTotals | None = None,
) -> ExitStatus:
    """Process ``argv`` (without the program name) and return the exit status.

    ``totals`` is filled in as entries are found; callers that want to look at
    the counts afterwards can pass their own instance.
    """
    if totals is None:
        totals = RunTotals()
    inspector = EntryInspector(
        out,
        utc_pattern=settings.utc_pattern,
        local_pattern=settings.local_pattern,
        dst_pattern=settings.dst_pattern,
        local_tz=settings.local_tz,
    )

    for token in argv:
        try:
            kind = settings.option_syntax.classify(token)
        except UnrecognizedOptionError as exc:
            err.write(f"\n{exc}\n")
            show_help(err)
            return ExitStatus.FAILURE

        if kind is TokenKind.EMPTY:
            continue
        if kind is TokenKind.HELP:
            show_help(err)
            return ExitStatus.UNKNOWN

        found = inspector.inspect(token, totals)
        logger.debug("%s: %s", token, found.value)

    if totals.found_anything():
        out.write(f"\n{totals.summary()}\n")
        return ExitStatus.SUCCESS

    show_help(err)
    return ExitStatus.UNKNOWN


def main(argv: Sequence[str] | None = None) -> None:
    """Run against ``sys.argv`` (or ``argv``) and exit with the run's status."""
    if argv is None:
        argv = sys.argv[1:]
    settings = load_settings()
    configure_logging(settings.log_level, sys.stderr)
    adopt_host_numeric_locale()
    status = run(argv, settings, sys.stdout, sys.stderr)
    sys.stdout.flush()
    raise SystemExit(int(status))


if __name__ == "__main__":
    main()
