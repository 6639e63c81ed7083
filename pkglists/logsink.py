from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from pkglists.constants import TIMESTAMP_FORMAT
from pkglists.output import console


def timestamp(now: datetime | None = None) -> str:
    """Local time as YYYY-MM-DD HH:MM:SS."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


@dataclass
class LogSink:
    """Append-only run log, mirrored to the console.

    One instance is created per run and handed to everything that logs.
    The file is never truncated or rotated.
    """

    path: Path
    echo: bool = True

    def log(self, message: str) -> str:
        """Write a timestamped line to the console and the log file."""
        line = f'[{timestamp()}] {message}'
        if self.echo:
            console.print(line, markup=False, highlight=False, soft_wrap=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(line + '\n')
        return line
