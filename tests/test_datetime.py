# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Tests for the datetime module."""

from datetime import datetime, timedelta, timezone

from frequenz.refdate.datetime import EPOCH_DELTA_SECONDS, REFERENCE_EPOCH, UNIX_EPOCH


def test_epochs() -> None:
    """Test the epochs are the expected instants in UTC."""
    assert UNIX_EPOCH == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert REFERENCE_EPOCH == datetime(2001, 1, 1, tzinfo=timezone.utc)


def test_epoch_delta() -> None:
    """Test the delta is 31 years of 365 days plus 8 leap days."""
    assert EPOCH_DELTA_SECONDS == 978307200.0
    assert EPOCH_DELTA_SECONDS == ((31 * 365) + 8) * 24 * 60 * 60
    assert REFERENCE_EPOCH - UNIX_EPOCH == timedelta(seconds=EPOCH_DELTA_SECONDS)
