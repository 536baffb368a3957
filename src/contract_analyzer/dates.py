"""
Deadline date normalization.

Every deadline is rewritten to YYYY-MM-DD. Unrecognized values become None
instead of raising, since a missing deadline is useful to show the user.
"""

import logging
from typing import Any, Optional

from .models import DEADLINE_FIELDS, DeadlineSet

logger = logging.getLogger(__name__)


def normalize_date(value: Any) -> Optional[str]:
    """
    Normalize a single date value.

    - MM/DD/YYYY -> YYYY-MM-DD (month and day zero-padded, no range checks)
    - anything containing a dash is assumed to be YYYY-MM-DD already
    - everything else -> None

    A DD-MM-YYYY value also contains a dash and is therefore passed through
    untouched.
    """
    if not isinstance(value, str):
        return None

    if '/' in value:
        parts = value.split('/')
        if len(parts) != 3:
            logger.warning(f"Could not normalize date: {value}")
            return None
        month, day, year = parts
        return f"{year}-{month.zfill(2)}-{day.zfill(2)}"

    if '-' in value:
        return value

    if value:
        logger.warning(f"Could not normalize date: {value}")
    return None


def normalize(deadlines: DeadlineSet) -> DeadlineSet:
    """Normalize all ten deadlines in place and return the same set."""
    for attr in DEADLINE_FIELDS.values():
        setattr(deadlines, attr, normalize_date(getattr(deadlines, attr, None)))
    return deadlines
