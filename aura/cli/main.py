"""Main CLI application using Cyclopts."""

import cyclopts

from aura.cli.commands.migrate import migrate
from aura.cli.commands.serve import serve

app = cyclopts.App(
    name="aura",
    help="Aura - release tracking for container-image applications",
)

app.command(serve, name="serve")
app.command(migrate, name="migrate")


if __name__ == "__main__":
    app()
