"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    script.py                                                                                            *
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
from abc import ABC
import subprocess
import shutil
import logging
from pydantic import BaseModel, ConfigDict
from datestamp.exceptions import MissingToolError

logger = logging.getLogger(__name__)

class Script(BaseModel, ABC):

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def subprocess(cls, command : list[str] | str, **kwargs) -> subprocess.CompletedProcess:
        # default check=True
        if 'check' not in kwargs:
            kwargs['check'] = True

        # default timeout=60
        if 'timeout' not in kwargs:
            kwargs['timeout'] = 60

        if isinstance(command, str):
            command = command.split()

        logger.debug("Running: %s", ' '.join(str(part) for part in command))

        try:
            return subprocess.run(command, **kwargs)
        except FileNotFoundError as e:
            logger.debug("Command '%s' not found. Trying to locate it with shutil.", command)

            # Try to locate the command with shutil
            if not (exe := shutil.which(command[0])):
                raise FileNotFoundError(f"Command '{command[0]}' not found.") from e

        command[0] = exe
        return subprocess.run(command, **kwargs)

    @classmethod
    def attempt(cls, command : list[str], **kwargs) -> bool:
        """
        Run a command whose failure does not matter, discarding its output.

        Returns:
            True if the command ran and exited cleanly.
        """
        kwargs.setdefault('stdout', subprocess.DEVNULL)
        kwargs.setdefault('stderr', subprocess.DEVNULL)
        try:
            cls.subprocess(command, **kwargs)
            return True
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug("Ignoring failure of %s: %s", command[0], e)
            return False

    @classmethod
    def require(cls, *commands : str) -> None:
        """
        Make sure each command is on the PATH.

        Raises:
            MissingToolError: naming the first command that could not be found.
        """
        for command in commands:
            if not shutil.which(command):
                raise MissingToolError(f"{command} is required")
