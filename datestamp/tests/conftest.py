"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    conftest.py                                                                                          *
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
import shutil
import subprocess
from pathlib import Path
import pytest
from datestamp.added.helper import HELPER_NAME
from datestamp.lib.script import Script

INDEX_LISTING = (
    "kMDItemContentModificationDate = 2035-11-06 14:29:09 +0000\n"
    "kMDItemDateAdded               = (null)\n"
)

class FakeTools:
    """
    Stands in for mdls, mdimport, cc and the compiled helper. Records every command it sees.
    """

    def __init__(self):
        self.calls : list[list[str]] = []
        self.missing : set[str] = set()
        self.date_added = '(null)'
        self.helper_returncode = 0
        self.compile_fails = False

    def which(self, name : str) -> str | None:
        if name in self.missing:
            return None
        return f'/usr/bin/{name}'

    def ran(self, name : str) -> bool:
        return any(Path(call[0]).name.startswith(name) for call in self.calls)

    def __call__(self, command, **kwargs) -> subprocess.CompletedProcess:
        command = [str(part) for part in command]
        self.calls.append(command)
        name = Path(command[0]).name

        if name == 'mdls':
            stdout = self.date_added if '-raw' in command else INDEX_LISTING
            return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr='')

        if name == 'cc':
            if self.compile_fails:
                raise subprocess.CalledProcessError(1, command)
            executable = Path(command[command.index('-o') + 1])
            executable.write_text('#!/bin/sh\nexit 0\n')
            executable.chmod(0o755)
            return subprocess.CompletedProcess(command, 0)

        if name.startswith(HELPER_NAME):
            return subprocess.CompletedProcess(command, self.helper_returncode)

        return subprocess.CompletedProcess(command, 0, stdout='', stderr='')

@pytest.fixture
def tools(monkeypatch) -> FakeTools:
    fake = FakeTools()
    monkeypatch.setattr(Script, 'subprocess', classmethod(lambda cls, command, **kwargs: fake(command, **kwargs)))
    monkeypatch.setattr(shutil, 'which', fake.which)
    return fake

@pytest.fixture
def target_file(tmp_path : Path) -> Path:
    path = tmp_path / 'notes.txt'
    path.write_text('test')
    return path
