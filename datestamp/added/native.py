"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    native.py                                                                                            *
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
    In-process Date Added writer, calling setattrlist(2) from libc through ctypes.

    Only macOS exports setattrlist, so this writer reports itself unavailable everywhere else.
"""
from __future__ import annotations
import ctypes
import ctypes.util
import logging
import os
from functools import lru_cache
from pathlib import Path
from datestamp.added.base import AddedTimeWriter, REFUSED
from datestamp.lib.types import Outcome

logger = logging.getLogger(__name__)

ATTR_BIT_MAP_COUNT = 5
ATTR_CMN_ADDEDTIME = 0x10000000

class AttrList(ctypes.Structure):
    _fields_ = [
        ('bitmapcount', ctypes.c_ushort),
        ('reserved', ctypes.c_uint16),
        ('commonattr', ctypes.c_uint32),
        ('volattr', ctypes.c_uint32),
        ('dirattr', ctypes.c_uint32),
        ('fileattr', ctypes.c_uint32),
        ('forkattr', ctypes.c_uint32),
    ]

class AddedTimeBuffer(ctypes.Structure):
    # struct timespec, packed on 4 byte boundaries as the kernel expects
    _pack_ = 4
    _fields_ = [
        ('tv_sec', ctypes.c_int64),
        ('tv_nsec', ctypes.c_long),
    ]

@lru_cache(maxsize=1)
def load_libc() -> ctypes.CDLL | None:
    if not (name := ctypes.util.find_library('c')):
        return None
    try:
        return ctypes.CDLL(name, use_errno=True)
    except OSError as e:
        logger.debug("Unable to load libc (%s): %s", name, e)
        return None

class NativeWriter(AddedTimeWriter):

    @classmethod
    def available(cls) -> bool:
        libc = load_libc()
        return libc is not None and hasattr(libc, 'setattrlist')

    def write(self, path : Path, epoch : int) -> Outcome:
        if not (libc := load_libc()) or not hasattr(libc, 'setattrlist'):
            logger.warning("setattrlist is not available on this platform")
            return Outcome.warning(REFUSED)

        setattrlist = libc.setattrlist
        setattrlist.argtypes = [ctypes.c_char_p, ctypes.POINTER(AttrList), ctypes.c_void_p, ctypes.c_size_t, ctypes.c_ulong]
        setattrlist.restype = ctypes.c_int

        # ctypes zeroes the rest of the request
        request = AttrList(bitmapcount=ATTR_BIT_MAP_COUNT, commonattr=ATTR_CMN_ADDEDTIME)
        buffer = AddedTimeBuffer(tv_sec=epoch, tv_nsec=0)

        result = setattrlist(
            os.fsencode(path),
            ctypes.byref(request),
            ctypes.byref(buffer),
            ctypes.sizeof(buffer),
            0,
        )
        if result != 0:
            errno = ctypes.get_errno()
            logger.warning("setattrlist(ATTR_CMN_ADDEDTIME) failed: %s", os.strerror(errno))
            return Outcome.warning(REFUSED)

        return Outcome.ok()
