"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    setter.py                                                                                            *
*        Project: datestamp                                                                                            *
*        Version: 0.1.0                                                                                                *
*        Created: 2025-11-06                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2025 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-17     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************
    Push a file's "Date Modified" and Finder "Date Added" to a future instant (macOS).

    Date Modified is always set. Date Added is best-effort: recent macOS releases usually refuse
    to change it, which is reported but not treated as an error. Spotlight is forced to re-index
    the file so mdls reflects the change, and the indexed Date Added is compared to the target.

    Example:
        >>> datestamp notes.txt
        >>> datestamp notes.txt --date 2035-11-06T14:29:09Z
        >>> python -m datestamp.setter notes.txt --no-added
"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from pathlib import Path
from pydantic import Field, PrivateAttr, ValidationError
from datestamp import setup_logging
from datestamp.added import select_writer
from datestamp.config import SetterConfig, load_environment
from datestamp.exceptions import AppError, TargetNotFoundError, UsageError
from datestamp.lib.script import Script
from datestamp.lib.types import Outcome, WARN
from datestamp.spotlight import DATE_ADDED, DATE_MODIFIED, SpotlightIndex, Verification
from datestamp.target import TargetInstant, to_iso

logger = logging.getLogger(__name__)

REQUIRED_TOOLS = ('mdls', 'mdimport')

class TimestampSetter(Script):
    """
    Runs the whole pipeline against one file:

        validate -> resolve target -> Date Modified -> Date Added + verify -> report

    Validation problems raise an AppError. After that, each step returns an Outcome, and only a
    FATAL outcome stops the run.
    """
    config : SetterConfig
    index : SpotlightIndex = Field(default_factory=SpotlightIndex)

    _target : TargetInstant | None = PrivateAttr(default=None)

    @property
    def file(self) -> Path:
        return self.config.file

    @property
    def target(self) -> TargetInstant:
        if not self._target:
            self._target = TargetInstant.resolve(self.config.date)
        return self._target

    def validate(self) -> None:
        if self.config.date is not None and not self.config.date:
            raise UsageError("--date requires an ISO8601 UTC like 2035-11-06T14:29:09Z")

        self.require(*REQUIRED_TOOLS)

        if not self.file.exists():
            raise TargetNotFoundError(f"'{self.file}' not found")

        # Parse now so a bad date aborts before anything is written
        self._target = TargetInstant.resolve(self.config.date)

    def announce(self) -> None:
        print(f"Target (UTC):  {self.target.iso}")
        print(f"Target epoch:  {self.target.epoch}")
        print(f"File:          {self.file}")
        print("")

    def write_modified(self) -> Outcome:
        """
        Set mtime to the target, keeping atime, then ask Spotlight to notice.
        """
        outcome = Outcome.ok()
        try:
            stat = os.stat(self.file)
            os.utime(self.file, ns=(stat.st_atime_ns, self.target.epoch * 1_000_000_000))
        except OSError as e:
            logger.debug("utime failed: %s", e)
            outcome = Outcome.warning(f"Date Modified could not be set: {e.strerror or e}")

        self.index.refresh(self.file)
        return outcome

    def write_added(self) -> Outcome:
        if not self.config.try_added:
            return Outcome.skipped("Skipping Date Added per --no-added")

        writer = select_writer(self.config.backend, self.config.cache_dir)
        try:
            writer.prepare()
        except AppError as e:
            return Outcome.fatal(str(e))

        if not (outcome := writer.write(self.file, self.target.epoch)).is_ok:
            return outcome

        self.index.refresh(self.file)
        raw = self.index.query(self.file, DATE_ADDED)
        return Verification.check(raw, self.target, self.config.tolerance).outcome()

    def report(self) -> None:
        try:
            actual = int(os.stat(self.file).st_mtime)
        except OSError as e:
            logger.warning("Unable to stat %s: %s", self.file, e)
            return

        if actual != self.target.epoch:
            print(f"{WARN} Date Modified was clamped to {to_iso(actual)}.")

        print("")
        print("Spotlight (mdls):")
        for line in self.index.listing(self.file, DATE_ADDED, DATE_MODIFIED):
            print(f"  {line}")
        print("")
        print("Filesystem (stat):")
        print(f"  mtime (epoch): {actual}")
        print(f"  mtime (UTC) : {to_iso(actual)}")

    def run(self) -> int:
        """
        Returns:
            The process exit code.
        """
        self.validate()
        self.announce()

        for step in (self.write_modified, self.write_added):
            outcome = step()
            if outcome.is_fatal:
                fail(outcome.message)
                return 1
            if line := outcome.render():
                print(line)

        self.report()
        return 0

class ArgumentParser(argparse.ArgumentParser):

    def error(self, message : str):
        # Usage problems are fatal errors like any other, reported with exit status 1
        raise UsageError(f"{message}\n{self.format_usage().strip()}")

def build_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="datestamp",
        description="Set a file's Date Modified and (best-effort) Date Added to a target date. Default: now + 10 years."
    )
    parser.add_argument("file", type=Path, help="The file to change.")
    parser.add_argument(
        "--date", nargs="?", const="",
        help="Target instant in UTC, formatted YYYY-MM-DDTHH:MM:SSZ."
    )
    parser.add_argument("--no-added", dest="try_added", action="store_false", help="Do not try to set Date Added.")
    parser.add_argument(
        "--backend", choices=["auto", "native", "helper"], default="auto",
        help="How to write Date Added (default: auto)."
    )
    parser.add_argument("--tolerance", type=int, default=None, help="Seconds of drift accepted when verifying Date Added (default: 2).")
    parser.add_argument("--cache-dir", type=Path, default=None, help="Where to keep the compiled helper.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging.")
    return parser

def fail(message : str) -> None:
    print(f"Error: {message}", file=sys.stderr)

def main(argv : list[str] | None = None) -> int:
    load_environment()
    try:
        args = build_arg_parser().parse_args(argv)

        try:
            config = SetterConfig(
                file=args.file,
                date=args.date,
                try_added=args.try_added,
                backend=args.backend,
                tolerance=args.tolerance,
                cache_dir=args.cache_dir,
                verbose=args.verbose,
            )
        except ValidationError as ve:
            raise UsageError(f"Invalid configuration: {ve}") from ve

        setup_logging(config.verbose)
        return TimestampSetter(config=config).run()

    except AppError as e:
        fail(str(e))
        return 1

    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130

if __name__ == "__main__":
    raise SystemExit(main())
