from pathlib import Path

import typer

from pkglists import __version__
from pkglists.config import load_settings
from pkglists.errors import InstallerError
from pkglists.executor import ExecutionMode, Executor, Status
from pkglists.lists import Source, read_package_list
from pkglists.logsink import LogSink
from pkglists.output import error, info, success, warning
from pkglists.plan import reconcile

app = typer.Typer(
    name='pkglists',
    help='Install pacman and AUR package lists',
    add_completion=False,
    context_settings={
        'help_option_names': ['--help', '-h'],
    },
)


def version_callback(value: bool):
    if value:
        typer.echo(f'pkglists {__version__}')
        raise typer.Exit()


@app.command()
def install(
    yes: bool = typer.Option(False, '--yes', '-y', help='Skip confirmation prompts'),
    dry_run: bool = typer.Option(False, '--dry-run', '-n', help='Print commands instead of running them'),
    base_dir: Path | None = typer.Option(
        None, '--dir', '-d', help='Directory holding packages/ and the log (default: current directory)'
    ),
    config_file: Path | None = typer.Option(None, '--config', '-c', help='Config file'),
    version: bool = typer.Option(
        False, '--version', '-v', callback=version_callback, is_eager=True, help='Show version'
    ),
):
    """Install everything in pacman-packages.txt and paru-packages.txt."""
    try:
        settings = load_settings(base_dir, config_file)
    except InstallerError as e:
        error(str(e))
        raise typer.Exit(1)

    sink = LogSink(settings.log_file)
    sink.log('Starting package installer.')

    try:
        primary = read_package_list(settings.primary_list, Source.PRIMARY, sink)
        secondary = read_package_list(settings.secondary_list, Source.SECONDARY, sink)
    except InstallerError as e:
        sink.log(f'Failed: {e}')
        error(str(e))
        raise typer.Exit(1)
    plan = reconcile(primary, secondary)

    if plan.is_empty:
        info(f'No packages found in {settings.primary_list} or {settings.secondary_list}. Exiting.')
        return

    mode = ExecutionMode.from_flags(yes, dry_run)
    result = Executor(sink, mode, aur_helper=settings.aur_helper).run(plan)

    if result.status is Status.ABORTED:
        warning('Aborting.')
    elif result.status is Status.FAILED:
        error(result.message)
    elif mode is ExecutionMode.DRY_RUN:
        warning('Dry run - no changes made')
    else:
        success('Installation complete')

    info(f'Check {settings.log_file} for detailed logs.')
    if result.exit_code:
        raise typer.Exit(result.exit_code)


def main():
    try:
        app()
    except SystemExit as e:
        # Usage errors exit 2; unknown options are reported as a plain failure
        if e.code == 2:
            raise SystemExit(1) from e
        raise


if __name__ == '__main__':
    main()
