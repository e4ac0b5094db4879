"""Record lifecycle shared by every marketplace record.

Records are never physically removed.  Retiring a record keeps it for
history while making it invisible to every repository lookup.
"""

from __future__ import annotations

from enum import Enum


class RecordState(Enum):
    ACTIVE = "active"
    RETIRED = "retired"
