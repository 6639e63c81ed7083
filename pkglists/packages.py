from pkglists.runner import CommandRunner


def upgrade_system(runner: CommandRunner):
    """Full system sync and upgrade."""
    runner.run(['sudo', 'pacman', '-Syu', '--noconfirm'])


def install_packages(runner: CommandRunner, packages: list[str]):
    """Install repo packages with pacman, skipping ones already up to date."""
    if not packages:
        return
    runner.run(['sudo', 'pacman', '-S', '--needed', '--noconfirm'] + list(packages))


def install_aur_packages(runner: CommandRunner, helper: str, packages: list[str]):
    """Install packages through the AUR helper, skipping ones already up to date."""
    if not packages:
        return
    runner.run([helper, '-S', '--needed', '--noconfirm'] + list(packages))
