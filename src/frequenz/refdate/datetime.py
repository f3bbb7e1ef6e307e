# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Epochs used to anchor reference dates."""

from datetime import datetime, timedelta, timezone

EPOCH_DELTA_SECONDS: float = 978307200.0
"""Seconds between the UNIX epoch and the reference epoch.

This is 31 years of 365 days plus 8 leap days, ignoring leap seconds.
"""

UNIX_EPOCH = datetime.fromtimestamp(0.0, tz=timezone.utc)
"""The UNIX epoch (in UTC)."""

REFERENCE_EPOCH = UNIX_EPOCH + timedelta(seconds=EPOCH_DELTA_SECONDS)
"""The reference epoch, 1 January 2001 00:00:00 (in UTC)."""
