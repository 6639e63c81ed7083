import typer
from rich.console import Console
from rich.markup import escape

console = Console()

# Messages carry package names and paths verbatim, so they are always escaped
# and only the fixed decorations below are rich markup.


def info(msg: str):
    console.print(escape(msg))


def success(msg: str):
    console.print(f'[green]✓[/green] {escape(msg)}')


def warning(msg: str):
    console.print(f'[yellow]![/yellow] {escape(msg)}')


def error(msg: str):
    console.print(f'[red]✗[/red] {escape(msg)}')


def added(msg: str):
    console.print(f'[green]  + {escape(msg)}[/green]')


def header(msg: str):
    console.print(f'\n[bold]{escape(msg)}[/bold]')


def confirm(question: str) -> bool:
    """Ask a yes/no question. Only answers starting with 'y' count as yes."""
    answer = typer.prompt(f'{question} [y/N]', default='', show_default=False)
    return answer.strip().lower().startswith('y')
