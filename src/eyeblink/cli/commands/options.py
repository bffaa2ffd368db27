from dataclasses import replace
from typing import Annotated, Optional

import typer

from eyeblink.blink.config import BlinkConfiguration
from eyeblink.utilities.env import BlinkMode

BlinkModeOption = Annotated[
    Optional[BlinkMode],
    typer.Option("--blink-mode", help="Override EYEBLINK_BLINK_MODE."),
]
TimeOption = Annotated[float, typer.Option("--time", help="Elapsed time in seconds.")]
WidthOption = Annotated[int, typer.Option("--width", min=1, help="Frame width in pixels.")]
HeightOption = Annotated[
    int, typer.Option("--height", min=1, help="Frame height in pixels.")
]


def resolve_configuration(blink_mode: BlinkMode | None) -> BlinkConfiguration:
    configuration = BlinkConfiguration.from_env()
    if blink_mode is not None:
        configuration = replace(configuration, blink_mode=blink_mode)
    return configuration
