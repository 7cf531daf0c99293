"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .allocate import allocate_command, validate_command
from .init import init_command
from .roster import roster_app
from .submit import submit_command

app = typer.Typer(
    name="artalloc",
    help="Article Allocator - split daily article lists across the team",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("allocate")(allocate_command)
app.command("validate")(validate_command)
app.command("submit")(submit_command)
app.add_typer(roster_app, name="roster", help="Manage the team roster")


if __name__ == "__main__":
    app()
