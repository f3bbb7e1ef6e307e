# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Dates measured as float offsets from the 1 January 2001 reference epoch.

The package provides the following classes, protocols and constants:

- [ReferenceDate][frequenz.refdate.ReferenceDate]: An immutable point in time, stored
  as seconds from the reference epoch.
- [DateLike][frequenz.refdate.DateLike]: A protocol with the operations every date
  value provides.
- [RequestDescriptor][frequenz.refdate.RequestDescriptor]: A protocol describing a
  request to a URL with a timeout.
- [EPOCH_DELTA_SECONDS][frequenz.refdate.EPOCH_DELTA_SECONDS]: The seconds between
  the UNIX epoch and the reference epoch.
"""

from ._reference_date import ReferenceDate
from .datetime import EPOCH_DELTA_SECONDS, REFERENCE_EPOCH, UNIX_EPOCH
from .request import RequestDescriptor
from .typing import DateLike, Seconds

__all__ = [
    "DateLike",
    "EPOCH_DELTA_SECONDS",
    "REFERENCE_EPOCH",
    "ReferenceDate",
    "RequestDescriptor",
    "Seconds",
    "UNIX_EPOCH",
]
