import shlex


class InstallerError(Exception):
    """Base class for failures that end an install run."""


class ConfigError(InstallerError):
    """Config file is missing, malformed or names an unsupported helper."""


class UserAbort(InstallerError):
    """A confirmation prompt was declined."""


class MissingToolFatal(InstallerError):
    """The AUR helper is absent and could not be bootstrapped."""


class CommandFailure(InstallerError):
    """An external command exited non-zero."""

    def __init__(self, argv: list[str], returncode: int):
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f'Command failed (exit {returncode}): {shlex.join(self.argv)}')


class ListReadError(InstallerError):
    """A package list file exists but cannot be read or decoded."""
