import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from eyeblink.cli.commands.evaluate import evaluate_command
from eyeblink.cli.commands.preview import preview_command, timeline_command

app = typer.Typer(help="Eye-blink vignette effect.")

app.command(name="evaluate")(evaluate_command)
app.command(name="preview")(preview_command)
app.command(name="timeline")(timeline_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
