# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Tests for the logging module."""

import logging
import math

import pytest

from frequenz.refdate import ReferenceDate, _reference_date
from frequenz.refdate.logging import get_public_logger


@pytest.mark.parametrize(
    "module_name, expected_logger_name",
    [
        ("frequenz.refdate", "frequenz.refdate"),
        ("frequenz.refdate._reference_date", "frequenz.refdate"),
        ("frequenz.refdate._clock", "frequenz.refdate"),
        ("frequenz.refdate.request", "frequenz.refdate.request"),
        ("frequenz._priv.refdate", "frequenz"),
        ("_priv.some.pub", "root"),
        ("_priv", "root"),
    ],
)
def test_get_public_logger(module_name: str, expected_logger_name: str) -> None:
    """Test that the logger name is as expected."""
    logger = get_public_logger(module_name)
    assert logger.name == expected_logger_name


def test_reference_date_logs_as_package() -> None:
    """Test that the private date module logs through the package logger."""
    # pylint: disable-next=protected-access
    assert _reference_date._logger is logging.getLogger("frequenz.refdate")


def test_non_finite_offset_record(caplog: pytest.LogCaptureFixture) -> None:
    """Test the record emitted for non-finite offsets, and only for those."""
    caplog.set_level(logging.DEBUG, logger="frequenz.refdate")

    ReferenceDate.from_offset(1.5)
    assert not caplog.records

    ReferenceDate.from_offset(-math.inf)
    [record] = caplog.records
    assert record.name == "frequenz.refdate"
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == (
        "Creating a ReferenceDate with a non-finite offset: -inf"
    )


def test_non_finite_offset_silent_by_default(caplog: pytest.LogCaptureFixture) -> None:
    """Test that the package logger doesn't emit debug records unless asked to."""
    caplog.set_level(logging.INFO, logger="frequenz.refdate")
    ReferenceDate.from_offset(math.nan)
    assert not caplog.records
