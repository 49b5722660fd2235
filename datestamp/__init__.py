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
import colorlog
import logging

SUPPRESS_INFO = True

def setup_logging(verbose : bool = False) -> logging.Logger:
	level = logging.DEBUG if verbose else logging.INFO
	logging.basicConfig(level=level)

	# Info messages are user-facing, so we drop the level name for them
	class CustomFormatter(colorlog.ColoredFormatter):

		def format(self, record):
			if SUPPRESS_INFO and record.levelno == logging.INFO:
				self._style._fmt = '%(message)s'
			else:
				self._style._fmt = '(%(log_color)s%(levelname)s%(reset)s) %(message)s'
			return super().format(record)

	handler = colorlog.StreamHandler()
	handler.setFormatter(CustomFormatter(
	    # Initial format string (will be overridden in the formatter)
	    '',
	    log_colors={
	        'DEBUG': 'green',
	        'INFO': 'blue',
	        'WARNING': 'yellow',
	        'ERROR': 'red',
	        'CRITICAL': 'red,bg_white',
	    }))

	root_logger = logging.getLogger()
	root_logger.handlers = []  # Clear existing handlers
	root_logger.addHandler(handler)
	root_logger.setLevel(level)

	return root_logger
