"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    spotlight.py                                                                                         *
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
    Thin wrapper around Spotlight's command line tools.

        mdls -raw -name kMDItemDateAdded <file>     ->  "2025-11-06 14:44:30 +0000" or "(null)"
        mdimport -f <file>                          ->  force a re-index, output ignored
"""
from __future__ import annotations
import logging
import subprocess
from datetime import datetime
from enum import Enum
from pathlib import Path
from pydantic import BaseModel
from datestamp.config import DEFAULT_TOLERANCE
from datestamp.lib.script import Script
from datestamp.lib.types import Outcome
from datestamp.target import TargetInstant

logger = logging.getLogger(__name__)

DATE_ADDED = 'kMDItemDateAdded'
DATE_MODIFIED = 'kMDItemContentModificationDate'

INDEX_DATE_FORMAT = '%Y-%m-%d %H:%M:%S %z'
NULL_VALUE = '(null)'

def parse_index_date(raw : str) -> int | None:
    """
    Convert a Spotlight date (e.g. 2025-11-06 14:44:30 +0000) to epoch seconds.

    Returns:
        The epoch, or None if the value is not in Spotlight's format.
    """
    try:
        return int(datetime.strptime(raw.strip(), INDEX_DATE_FORMAT).timestamp())
    except ValueError:
        return None

class SpotlightIndex(Script):

    def refresh(self, path : Path) -> bool:
        """
        Force Spotlight to re-read the file's metadata. Failures are ignored.
        """
        return self.attempt(['mdimport', '-f', str(path)])

    def query(self, path : Path, name : str) -> str:
        """
        Read one raw attribute from the index.

        Returns:
            The raw value, or an empty string if mdls failed.
        """
        try:
            result = self.subprocess(
                ['mdls', '-raw', '-name', name, str(path)],
                capture_output=True, text=True
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug("mdls failed for %s: %s", name, e)
            return ''

        return result.stdout.strip()

    def listing(self, path : Path, *names : str) -> list[str]:
        """
        The "name = value" lines mdls prints for several attributes at once.
        """
        command = ['mdls']
        for name in names:
            command += ['-name', name]
        command.append(str(path))

        try:
            result = self.subprocess(command, capture_output=True, text=True)
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug("mdls listing failed: %s", e)
            return []

        return [line for line in result.stdout.splitlines() if line.strip()]

class Agreement(Enum):
    AGREES = 'agrees'
    MISMATCH = 'mismatch'
    EMPTY = 'empty'
    UNPARSEABLE = 'unparseable'

class Verification(BaseModel):
    """
    How the indexed Date Added compares to the target instant.
    """
    agreement : Agreement
    raw : str = ''
    difference : int | None = None

    @classmethod
    def check(cls, raw : str | None, target : TargetInstant, tolerance : int = DEFAULT_TOLERANCE) -> Verification:
        if not raw or raw.strip() == NULL_VALUE:
            return cls(agreement=Agreement.EMPTY, raw=raw or '')

        if (epoch := parse_index_date(raw)) is None:
            return cls(agreement=Agreement.UNPARSEABLE, raw=raw)

        difference = target.difference(epoch)
        agreement = Agreement.AGREES if difference <= tolerance else Agreement.MISMATCH
        return cls(agreement=agreement, raw=raw, difference=difference)

    def outcome(self) -> Outcome:
        match self.agreement:
            case Agreement.AGREES:
                return Outcome.ok("Date Added set (Spotlight agrees).")
            case Agreement.MISMATCH:
                return Outcome.warning(f"Date Added write returned success, but Spotlight shows '{self.raw}'.")
            case Agreement.UNPARSEABLE:
                return Outcome.warning(f"Date Added write returned success, but could not parse Spotlight value: {self.raw}")
            case _:
                return Outcome.warning("Date Added write returned success, but Spotlight returned empty/null.")
