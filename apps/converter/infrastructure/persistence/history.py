"""
Append-only conversion history.

One line per conversion, newest at the bottom. The file is never read,
rotated or truncated by this module. The handle is opened and closed on
every append; concurrent writers would need their own serialization.
"""

import logging
import os
from pathlib import Path

from apps.converter.domain.models import ConversionRecord

logger = logging.getLogger(__name__)


class HistoryLog:

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    def append(self, line: str) -> bool:
        """
        Append a single line and make sure it reached the disk.

        A write failure is logged and reported through the return value;
        it never raises, since the user has already been shown the result.

        Returns:
            True if the line was written and synced, False otherwise
        """
        try:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(line.rstrip("\n") + "\n")
                fh.flush()
                os.fsync(fh.fileno())
        except OSError as e:
            logger.warning("Failed to append to history file %s: %s", self.path, e)
            return False
        return True

    def append_record(self, record: ConversionRecord) -> bool:
        try:
            line = record.to_line()
        except ArithmeticError as e:
            logger.warning("Could not render conversion record %r: %s", record, e)
            return False
        return self.append(line)
