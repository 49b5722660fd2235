"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    types.py                                                                                             *
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
from enum import Enum
from pydantic import BaseModel

# Report markers
CHECK = '✔'
WARN = '⚠'


class Status(Enum):
    OK = 'ok'
    WARNING = 'warning'
    SKIPPED = 'skipped'
    FATAL = 'fatal'

class Outcome(BaseModel):
    """
    The tagged result of a single step of the timestamp pipeline.

    Only FATAL outcomes stop the pipeline. Everything else is reported and the next step runs.
    """
    status : Status
    message : str = ''

    @classmethod
    def ok(cls, message : str = '') -> Outcome:
        return cls(status=Status.OK, message=message)

    @classmethod
    def warning(cls, message : str) -> Outcome:
        return cls(status=Status.WARNING, message=message)

    @classmethod
    def skipped(cls, message : str) -> Outcome:
        return cls(status=Status.SKIPPED, message=message)

    @classmethod
    def fatal(cls, message : str) -> Outcome:
        return cls(status=Status.FATAL, message=message)

    @property
    def is_ok(self) -> bool:
        return self.status == Status.OK

    @property
    def is_fatal(self) -> bool:
        return self.status == Status.FATAL

    def render(self) -> str:
        """
        Format the outcome as a single report line.
        """
        match self.status:
            case Status.OK:
                return f'{CHECK} {self.message}' if self.message else ''
            case Status.WARNING:
                return f'{WARN} {self.message}'
            case _:
                return self.message
