"""Exit-code contract for every CLI command.

Code  Meaning
----  -------
  0   Success — template built / rendered, recipe valid
  1   Violation — recipe does not satisfy the recipe schema
  2   Error — usage error, missing file, unusable input
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
