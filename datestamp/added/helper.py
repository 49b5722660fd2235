"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    helper.py                                                                                            *
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
    Date Added writer backed by a tiny C program, compiled on first use and cached.

    The binary name carries a hash of the C source, so editing HELPER_SOURCE produces a fresh
    build instead of silently reusing a stale binary. A binary that already exists for the
    current source is never rebuilt.

    Helper exit codes:
        0   Date Added was set
        1   setattrlist refused, or the SDK lacks ATTR_CMN_ADDEDTIME
        2   bad arguments
"""
from __future__ import annotations
import logging
import os
import subprocess
from pathlib import Path
import xxhash
from datestamp.added.base import AddedTimeWriter, REFUSED
from datestamp.config import DEFAULT_CACHE_DIR
from datestamp.exceptions import HelperBuildError, MissingToolError
from datestamp.lib.types import Outcome

logger = logging.getLogger(__name__)

HELPER_NAME = 'rubicon_set_added_date_v2'
COMPILER = 'cc'
COMPILER_FLAGS = ['-O2', '-Wall', '-Wextra', '-framework', 'CoreServices']

HELPER_SOURCE = r'''#include <CoreServices/CoreServices.h>
#include <sys/attr.h>
#include <sys/stat.h>
#include <time.h>
#include <stdio.h>
#include <string.h>
#include <stdlib.h>
#include <errno.h>

/* Set Finder "Date Added" (ATTR_CMN_ADDEDTIME).
 * Usage: rubicon_set_added_date_v2 <path> <unix_epoch_seconds>
 */
int main(int argc, char *argv[]) {
    if (argc != 3) {
        fprintf(stderr, "Usage: %s <path> <unix_epoch_seconds>\n", argv[0]);
        return 2;
    }
    const char *path = argv[1];
    char *end = NULL;
    errno = 0;
    long long epoch = strtoll(argv[2], &end, 10);
    if (errno != 0 || end == argv[2] || *end != '\0') {
        fprintf(stderr, "Invalid epoch seconds: %s\n", argv[2]);
        return 2;
    }

    struct attrlist request;
    memset(&request, 0, sizeof(request));
    request.bitmapcount = ATTR_BIT_MAP_COUNT;
#ifdef ATTR_CMN_ADDEDTIME
    request.commonattr = ATTR_CMN_ADDEDTIME;
#else
    fprintf(stderr, "This SDK does not define ATTR_CMN_ADDEDTIME\n");
    return 1;
#endif

    struct {
        struct timespec added;
    } __attribute__((aligned(4), packed)) reqbuf;

    reqbuf.added.tv_sec = (time_t)epoch;
    reqbuf.added.tv_nsec = 0;

    if (setattrlist(path, &request, &reqbuf, sizeof(reqbuf), 0) != 0) {
        perror("setattrlist(ATTR_CMN_ADDEDTIME) failed");
        return 1;
    }
    return 0;
}
'''

def source_hash(source : str = HELPER_SOURCE) -> str:
    return xxhash.xxh64(source.encode('utf-8')).hexdigest()[:12]

class HelperArtifact(AddedTimeWriter):
    """
    The compiled helper and its source, kept in cache_dir.
    """
    cache_dir : Path = DEFAULT_CACHE_DIR
    source : str = HELPER_SOURCE

    @property
    def name(self) -> str:
        return f'{HELPER_NAME}-{source_hash(self.source)}'

    @property
    def executable(self) -> Path:
        return self.cache_dir / self.name

    @property
    def source_file(self) -> Path:
        return self.cache_dir / f'{self.name}.c'

    def is_built(self) -> bool:
        return self.executable.is_file() and os.access(self.executable, os.X_OK)

    def ensure(self) -> Path:
        """
        Build the helper unless a usable binary is already cached.

        Raises:
            MissingToolError: If there is no C compiler.
            HelperBuildError: If the cache cannot be written, or compilation fails.
        """
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise HelperBuildError(f"cannot prepare helper cache {self.cache_dir}: {e.strerror or e}") from e

        if self.is_built():
            logger.debug("Using cached helper: %s", self.executable)
            return self.executable

        try:
            self.require(COMPILER)
        except MissingToolError as e:
            raise MissingToolError("C compiler (cc) required; install Xcode Command Line Tools") from e

        try:
            self.source_file.write_text(self.source, encoding='utf-8')
        except OSError as e:
            raise HelperBuildError(f"cannot write helper source {self.source_file}: {e.strerror or e}") from e

        logger.debug("Compiling helper %s", self.executable)
        try:
            self.subprocess([COMPILER, *COMPILER_FLAGS, '-o', str(self.executable), str(self.source_file)])
        except (subprocess.SubprocessError, OSError) as e:
            raise HelperBuildError("compile failed") from e

        return self.executable

    def prepare(self) -> None:
        self.ensure()

    def write(self, path : Path, epoch : int) -> Outcome:
        try:
            # Let the helper's own error text reach the terminal
            result = self.subprocess([str(self.executable), str(path), str(epoch)], check=False)
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug("Helper failed to run: %s", e)
            return Outcome.warning(REFUSED)

        if result.returncode != 0:
            logger.debug("Helper exited with %s", result.returncode)
            return Outcome.warning(REFUSED)

        return Outcome.ok()
