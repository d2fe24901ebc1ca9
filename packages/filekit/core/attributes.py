"""Filesystem attributes passed through create/save."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

POSIX_PERMISSIONS = "posix_permissions"
MODIFICATION_DATE = "modification_date"


def apply_attributes(path: Path, attributes: Mapping[str, Any] | None) -> None:
    """
    Apply attributes to an existing filesystem entry.

    Recognised keys are ``posix_permissions`` (int mode) and
    ``modification_date`` (datetime or POSIX timestamp). Other keys are
    ignored.

    Args:
        path: Entry to update
        attributes: Attribute mapping, or None for no-op

    Raises:
        OSError: If the OS rejects a change
        ValueError: If a value has an unusable type or is out of range
    """
    if not attributes:
        return

    for key, value in attributes.items():
        try:
            if key == POSIX_PERMISSIONS:
                os.chmod(path, int(value))
            elif key == MODIFICATION_DATE:
                timestamp = value.timestamp() if isinstance(value, datetime) else float(value)
                os.utime(path, (timestamp, timestamp))
            else:
                logger.debug(f"Ignoring unsupported attribute {key!r} for {path}")
        except (TypeError, OverflowError) as e:
            raise ValueError(f"Invalid value for attribute {key!r}: {value!r}") from e
