import tempfile
from pathlib import Path

from pkglists.constants import AUR_URL, SUPPORTED_HELPERS
from pkglists.errors import CommandFailure, MissingToolFatal
from pkglists.output import info, success
from pkglists.packages import install_packages
from pkglists.runner import CommandRunner


def get_available_aur_helper(runner: CommandRunner) -> str | None:
    """Get first available AUR helper, or None."""
    for helper in SUPPORTED_HELPERS:
        if runner.has(helper):
            return helper
    return None


def bootstrap_aur_helper(runner: CommandRunner, helper: str = 'paru'):
    """Build and install an AUR helper from its AUR recipe.

    Supports: paru, yay

    Raises MissingToolFatal if any step fails or the helper is still not
    on PATH afterwards.
    """
    if helper not in SUPPORTED_HELPERS:
        raise MissingToolFatal(f'Unsupported AUR helper: {helper}. Supported: {", ".join(SUPPORTED_HELPERS)}')

    manual = f'Install {helper} manually (see {AUR_URL}/packages/{helper}) and re-run.'

    info(f'Bootstrapping {helper}...')
    try:
        install_packages(runner, ['base-devel', 'git'])

        with tempfile.TemporaryDirectory() as tmpdir:
            repo_url = f'{AUR_URL}/{helper}.git'
            clone_path = Path(tmpdir) / helper

            runner.run(['git', 'clone', '--depth=1', repo_url, str(clone_path)])
            runner.run(['makepkg', '-si', '--noconfirm'], cwd=clone_path)
    except CommandFailure as e:
        raise MissingToolFatal(f'Failed to bootstrap {helper}: {e}. {manual}') from e

    if runner.dry_run:
        return

    if not runner.has(helper):
        raise MissingToolFatal(f'{helper} still not found after bootstrap. {manual}')
    success(f'{helper} installed successfully')
