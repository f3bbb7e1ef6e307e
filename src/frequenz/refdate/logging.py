# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Logging tools."""

import logging


def get_public_logger(module_name: str) -> logging.Logger:
    """Get a logger for the public module containing the given module name.

    Private modules (those starting with `_`, and everything nested inside them)
    log through the logger of the closest public parent, so users only need to
    configure the loggers of modules they can actually import.

    Example:
        * `frequenz.refdate` -> `frequenz.refdate`
        * `frequenz.refdate._reference_date` -> `frequenz.refdate`
        * `frequenz.refdate._a._b.c` -> `frequenz.refdate`
        * `_private` -> `root`

    Args:
        module_name: The fully qualified name of the module to get the logger for
            (normally `__name__`).

    Returns:
        The logger for the public module containing the given module name.
    """
    public_parts: list[str] = []
    for part in module_name.split("."):
        if part.startswith("_"):
            break
        public_parts.append(part)
    return logging.getLogger(".".join(public_parts))
