"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    test_spotlight.py                                                                                    *
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
import subprocess
from pathlib import Path
import pytest
from datestamp.lib.script import Script
from datestamp.lib.types import Status
from datestamp.spotlight import (
    DATE_ADDED,
    DATE_MODIFIED,
    Agreement,
    SpotlightIndex,
    Verification,
    parse_index_date,
)
from datestamp.target import TargetInstant

TARGET = TargetInstant.resolve('2035-11-06T14:29:09Z')

def test_parse_index_date():
    assert parse_index_date('2035-11-06 14:29:09 +0000') == TARGET.epoch
    assert parse_index_date('2035-11-06 15:29:09 +0100') == TARGET.epoch
    assert parse_index_date('2035-11-06T14:29:09Z') is None

@pytest.mark.parametrize(
    "raw,agreement",
    [
        ('2035-11-06 14:29:09 +0000', Agreement.AGREES),
        ('2035-11-06 14:29:11 +0000', Agreement.AGREES),
        ('2035-11-06 14:29:07 +0000', Agreement.AGREES),
        ('2035-11-06 14:29:12 +0000', Agreement.MISMATCH),
        ('2035-11-06 14:29:06 +0000', Agreement.MISMATCH),
        ('2025-11-06 14:44:30 +0000', Agreement.MISMATCH),
    ],
)
def test_tolerance_boundary(raw, agreement):
    assert Verification.check(raw, TARGET).agreement == agreement

def test_tolerance_is_configurable():
    raw = '2035-11-06 14:29:14 +0000'
    assert Verification.check(raw, TARGET, tolerance=2).agreement == Agreement.MISMATCH
    assert Verification.check(raw, TARGET, tolerance=5).agreement == Agreement.AGREES

@pytest.mark.parametrize("raw", ['', None, '(null)', '(null)\n'])
def test_empty_values(raw):
    verification = Verification.check(raw, TARGET)
    assert verification.agreement == Agreement.EMPTY
    assert verification.outcome().message.endswith("Spotlight returned empty/null.")

def test_unparseable_value_is_echoed():
    verification = Verification.check('yesterday', TARGET)
    assert verification.agreement == Agreement.UNPARSEABLE
    outcome = verification.outcome()
    assert outcome.status == Status.WARNING
    assert outcome.render() == '⚠ Date Added write returned success, but could not parse Spotlight value: yesterday'

def test_outcome_text():
    assert Verification.check('2035-11-06 14:29:09 +0000', TARGET).outcome().render() == '✔ Date Added set (Spotlight agrees).'
    mismatch = Verification.check('2025-11-06 14:44:30 +0000', TARGET).outcome()
    assert mismatch.render() == "⚠ Date Added write returned success, but Spotlight shows '2025-11-06 14:44:30 +0000'."

def test_query_and_listing(tools, target_file: Path):
    tools.date_added = '2035-11-06 14:29:09 +0000\n'
    index = SpotlightIndex()

    assert index.query(target_file, DATE_ADDED) == '2035-11-06 14:29:09 +0000'
    assert tools.calls[-1] == ['mdls', '-raw', '-name', DATE_ADDED, str(target_file)]

    lines = index.listing(target_file, DATE_ADDED, DATE_MODIFIED)
    assert tools.calls[-1] == ['mdls', '-name', DATE_ADDED, '-name', DATE_MODIFIED, str(target_file)]
    assert len(lines) == 2

def test_failures_are_swallowed(monkeypatch, target_file: Path):
    def broken(cls, command, **kwargs):
        raise subprocess.CalledProcessError(1, command)

    monkeypatch.setattr(Script, 'subprocess', classmethod(broken))
    index = SpotlightIndex()

    assert index.refresh(target_file) is False
    assert index.query(target_file, DATE_ADDED) == ''
    assert index.listing(target_file, DATE_ADDED) == []
