"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    __init__.py                                                                                          *
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
from pathlib import Path
from datestamp.added.base import AddedTimeWriter
from datestamp.added.helper import HelperArtifact
from datestamp.added.native import NativeWriter
from datestamp.config import Backend, DEFAULT_CACHE_DIR

logger = logging.getLogger(__name__)

def select_writer(backend : Backend = 'auto', cache_dir : Path = DEFAULT_CACHE_DIR) -> AddedTimeWriter:
    """
    Pick the Date Added writer for this machine.

    'auto' prefers calling setattrlist in-process, and only falls back to compiling the
    C helper when the running Python cannot reach it.
    """
    if backend == 'native' or (backend == 'auto' and NativeWriter.available()):
        logger.debug("Writing Date Added in-process")
        return NativeWriter()

    logger.debug("Writing Date Added with the compiled helper")
    return HelperArtifact(cache_dir=cache_dir)
