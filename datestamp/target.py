"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    target.py                                                                                            *
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
*********************************************************************************************************************"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from pydantic import BaseModel
from datestamp.exceptions import DateParseError

logger = logging.getLogger(__name__)

ISO_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

# Far enough ahead to be obviously "future", close enough to stay below 2038.
DEFAULT_YEARS_AHEAD = 10

def to_iso(epoch : int) -> str:
    return datetime.fromtimestamp(epoch, tz=timezone.utc).strftime(ISO_FORMAT)

def parse_iso(value : str) -> int:
    """
    Convert a UTC ISO-8601 string (YYYY-MM-DDTHH:MM:SSZ) to epoch seconds.

    Raises:
        DateParseError: If the value does not match the format.
    """
    try:
        parsed = datetime.strptime(value, ISO_FORMAT)
    except (TypeError, ValueError) as e:
        raise DateParseError(f"Failed to parse target ISO datetime: {value}") from e

    return int(parsed.replace(tzinfo=timezone.utc).timestamp())

def add_years(moment : datetime, years : int) -> datetime:
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        # Feb 29 into a non-leap year rolls over to Mar 1, as mktime normalises it
        return moment.replace(year=moment.year + years, month=3, day=1)

class TargetInstant(BaseModel):
    """
    The UTC instant that both Date Modified and Date Added are pushed to.
    """
    iso : str
    epoch : int

    @classmethod
    def resolve(cls, value : str | None = None, now : datetime | None = None) -> TargetInstant:
        """
        Build the target from an explicit ISO string, or default to now + 10 years.

        Args:
            value: A UTC ISO-8601 string such as 2035-11-06T14:29:09Z.
            now: Override the current time. Used by tests.

        Returns:
            A TargetInstant whose iso and epoch describe the same second.
        """
        if not value:
            now = now or datetime.now(timezone.utc)
            value = add_years(now.astimezone(timezone.utc), DEFAULT_YEARS_AHEAD).strftime(ISO_FORMAT)
            logger.debug("No target date given; defaulting to %s", value)

        return cls(iso=value, epoch=parse_iso(value))

    def difference(self, epoch : int) -> int:
        """
        Absolute distance in seconds between this target and another epoch.
        """
        return abs(epoch - self.epoch)
