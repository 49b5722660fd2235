"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    base.py                                                                                              *
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
from abc import abstractmethod
import logging
from pathlib import Path
from datestamp.lib.script import Script
from datestamp.lib.types import Outcome

logger = logging.getLogger(__name__)

REFUSED = "Date Added could not be set (OS refused)."

class AddedTimeWriter(Script):
    """
    Sets Finder's "Date Added" (ATTR_CMN_ADDEDTIME) on a single file.

    Recent macOS releases often reject this with EPERM or EINVAL. That is an expected result,
    so writers report it as a warning outcome instead of raising.
    """

    @classmethod
    def available(cls) -> bool:
        return True

    def prepare(self) -> None:
        """
        Do any one-time setup the writer needs. Raises an AppError if the writer cannot work at all.
        """

    @abstractmethod
    def write(self, path : Path, epoch : int) -> Outcome:
        raise NotImplementedError(f"Subclass {self.__class__.__name__} does not implement 'write' method.")
