import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from pkglists.errors import CommandFailure
from pkglists.logsink import LogSink


@dataclass
class CommandRunner:
    """Run argv lists, or only log them in dry-run mode."""

    sink: LogSink
    dry_run: bool = False

    def run(self, cmd: list[str], cwd: Path | None = None):
        """Run a command and raise CommandFailure on a non-zero exit."""
        shown = shlex.join(cmd)
        if cwd is not None:
            shown = f'{shown}  (in {cwd})'

        if self.dry_run:
            self.sink.log(f'[DRY-RUN] {shown}')
            return

        self.sink.log(f'Running: {shown}')
        try:
            result = subprocess.run(cmd, cwd=cwd)
        except FileNotFoundError as e:
            raise CommandFailure(cmd, 127) from e
        if result.returncode != 0:
            raise CommandFailure(cmd, result.returncode)

    def has(self, program: str) -> bool:
        """Check if a program is on PATH."""
        return shutil.which(program) is not None
