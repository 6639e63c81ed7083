from dataclasses import dataclass
from enum import Enum
from typing import Callable

import typer

from pkglists.bootstrap import bootstrap_aur_helper, get_available_aur_helper
from pkglists.constants import DEFAULT_AUR_HELPER
from pkglists.errors import InstallerError, UserAbort
from pkglists.logsink import LogSink
from pkglists.output import added, confirm, header, info, warning
from pkglists.packages import install_aur_packages, install_packages, upgrade_system
from pkglists.plan import InstallPlan
from pkglists.runner import CommandRunner


class ExecutionMode(str, Enum):
    INTERACTIVE = 'interactive'
    ASSUME_YES = 'assume-yes'
    DRY_RUN = 'dry-run'

    @classmethod
    def from_flags(cls, yes: bool, dry_run: bool) -> 'ExecutionMode':
        """Dry run wins over --yes; both skip prompts."""
        if dry_run:
            return cls.DRY_RUN
        if yes:
            return cls.ASSUME_YES
        return cls.INTERACTIVE

    @property
    def auto_confirm(self) -> bool:
        return self is not ExecutionMode.INTERACTIVE


class Status(str, Enum):
    DONE = 'done'
    ABORTED = 'aborted'
    FAILED = 'failed'


@dataclass(frozen=True)
class RunResult:
    status: Status
    message: str = ''

    @property
    def exit_code(self) -> int:
        return 0 if self.status is Status.DONE else 1


@dataclass
class Executor:
    """Carry an InstallPlan through confirm, pacman, bootstrap and AUR stages.

    Stages run in a fixed order and stop at the first failure. Failures are
    reported through the returned RunResult; the caller picks the exit code.
    """

    sink: LogSink
    mode: ExecutionMode
    aur_helper: str = DEFAULT_AUR_HELPER
    prompt: Callable[[str], bool] = confirm

    def __post_init__(self):
        self.runner = CommandRunner(self.sink, dry_run=self.mode is ExecutionMode.DRY_RUN)

    def run(self, plan: InstallPlan) -> RunResult:
        if plan.is_empty:
            self.sink.log('Nothing to install.')
            return RunResult(Status.DONE, 'Nothing to install')

        try:
            self.show_plan(plan)
            self.require_confirmation('Proceed with installation?')
            self.install_primary(list(plan.primary))
            self.ensure_aur_helper(list(plan.secondary))
            self.install_secondary(list(plan.secondary))
        except UserAbort as e:
            self.sink.log(f'Aborted: {e}')
            return RunResult(Status.ABORTED, str(e))
        except InstallerError as e:
            self.sink.log(f'Failed: {e}')
            return RunResult(Status.FAILED, str(e))

        self.sink.log('Installation complete.')
        return RunResult(Status.DONE)

    def show_plan(self, plan: InstallPlan):
        """Print the reconciled plan."""
        header('Pacman packages:')
        for pkg in plan.primary:
            added(pkg)
        if not plan.primary:
            info('  (none)')

        header(f'{self.aur_helper} packages:')
        for pkg in plan.secondary:
            added(pkg)
        if not plan.secondary:
            info('  (none)')
        info('')

        for pkg in plan.shadowed:
            self.sink.log(f'Skipping {pkg} (already in pacman list)')

    def require_confirmation(self, question: str):
        """Raise UserAbort unless the question is answered yes."""
        if self.mode.auto_confirm:
            self.sink.log(f'Auto-confirmed: {question}')
            return
        try:
            answered = self.prompt(question)
        except (typer.Abort, EOFError, KeyboardInterrupt) as e:
            raise UserAbort(f'No answer: {question}') from e
        if not answered:
            raise UserAbort(f'Declined: {question}')

    def install_primary(self, packages: list[str]):
        if not packages:
            self.sink.log('No pacman packages found; skipping system update and pacman install.')
            return
        self.sink.log('Updating system...')
        upgrade_system(self.runner)
        self.sink.log(f'Installing {len(packages)} pacman packages...')
        install_packages(self.runner, packages)

    def ensure_aur_helper(self, packages: list[str]):
        if not packages:
            return
        helper = self.aur_helper
        if self.runner.has(helper):
            self.sink.log(f'{helper} already installed.')
            return

        available = get_available_aur_helper(self.runner)
        if available:
            warning(f'{helper} not found, but {available} is available.')
        self.sink.log(f'{helper} not found; installing from AUR.')
        self.require_confirmation(f'{helper} not found. Clone and build {helper} now?')
        bootstrap_aur_helper(self.runner, helper)

    def install_secondary(self, packages: list[str]):
        if not packages:
            self.sink.log(f'No {self.aur_helper} packages found; skipping {self.aur_helper} step.')
            return
        self.sink.log(f'Installing {len(packages)} {self.aur_helper} packages...')
        install_aur_packages(self.runner, self.aur_helper, packages)
