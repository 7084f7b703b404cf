import click

from .commands.elements import list_elements_command
from .commands.expand import expand_command
from .commands.process import process_command


@click.group()
def app() -> None:
    pass


app.add_command(process_command, name="process")
app.add_command(list_elements_command, name="elements")
app.add_command(expand_command, name="expand")
__all__ = ["app"]
