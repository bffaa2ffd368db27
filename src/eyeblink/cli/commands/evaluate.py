from typing import Annotated

import typer

from eyeblink.blink.evaluator import evaluate
from eyeblink.cli.commands.options import (BlinkModeOption, HeightOption,
                                           TimeOption, WidthOption,
                                           resolve_configuration)

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 64


def evaluate_command(
    x: Annotated[float, typer.Argument(help="Pixel x coordinate.")],
    y: Annotated[float, typer.Argument(help="Pixel y coordinate.")],
    width: WidthOption = DEFAULT_WIDTH,
    height: HeightOption = DEFAULT_HEIGHT,
    time: TimeOption = 0.0,
    blink_mode: BlinkModeOption = None,
) -> None:
    """Print the blink intensity of a single pixel."""

    configuration = resolve_configuration(blink_mode)
    intensity = evaluate((x, y), (width, height), time, configuration)
    typer.echo(f"{intensity:.6f}")
