"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    config.py                                                                                            *
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
import os
import logging
from pathlib import Path
from typing import Literal
from dotenv import load_dotenv
from pydantic import BaseModel, Field, NonNegativeInt, field_validator

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 2
DEFAULT_CACHE_DIR = Path.home() / '.cache' / 'rubicon_set_future_file_added_date'

Backend = Literal['auto', 'native', 'helper']

def load_environment() -> None:
    """
    Pull DATESTAMP_* settings from a .env file, if one exists. Real environment variables win.
    """
    load_dotenv(override=False)

def default_tolerance() -> int:
    if not (value := os.getenv('DATESTAMP_TOLERANCE')):
        return DEFAULT_TOLERANCE
    return int(value)

def default_cache_dir() -> Path:
    if not (value := os.getenv('DATESTAMP_CACHE_DIR')):
        return DEFAULT_CACHE_DIR
    return Path(value).expanduser()

class SetterConfig(BaseModel):
    """Configuration for a single run of the timestamp setter."""
    file: Path = Field(..., description="The file whose timestamps will be changed.")
    date: str | None = Field(None, description="Target instant as YYYY-MM-DDTHH:MM:SSZ. Default: now + 10 years.")
    try_added: bool = Field(True, description="If False, never attempt to set Date Added.")
    backend: Backend = Field('auto', description="How to write Date Added: in-process, compiled helper, or whichever is available.")
    tolerance: NonNegativeInt = Field(default_factory=default_tolerance, description="Seconds of drift accepted when verifying Date Added.")
    cache_dir: Path = Field(default_factory=default_cache_dir, description="Where the compiled helper is kept.")
    verbose: bool = Field(False, description="Enable debug logging.")

    @field_validator('cache_dir', mode='before')
    def validate_cache_dir(cls, value):
        if value is None:
            return default_cache_dir()
        return Path(value).expanduser()

    @field_validator('tolerance', mode='before')
    def validate_tolerance(cls, value):
        if value is None:
            return default_tolerance()
        return value
