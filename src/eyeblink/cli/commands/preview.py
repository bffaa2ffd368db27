from typing import Annotated

import numpy as np
import typer

from eyeblink.blink.evaluator import BlinkIntensityEvaluator
from eyeblink.cli.commands.options import (BlinkModeOption, HeightOption,
                                           TimeOption, WidthOption,
                                           resolve_configuration)
from eyeblink.utilities.logging import get_logger

logger = get_logger(__name__)

# Darkest to brightest.
ASCII_RAMP = " .:-=+*#%@"
DEFAULT_WIDTH = 48
DEFAULT_HEIGHT = 20
DEFAULT_FPS = 30.0
CENTER_FRAME_SIZE = 2


def render_ascii(field: np.ndarray, ramp: str = ASCII_RAMP) -> str:
    indices = np.clip(np.rint(field * (len(ramp) - 1)), 0, len(ramp) - 1).astype(int)
    return "\n".join("".join(ramp[i] for i in row) for row in indices)


def preview_command(
    width: WidthOption = DEFAULT_WIDTH,
    height: HeightOption = DEFAULT_HEIGHT,
    time: TimeOption = np.pi / 2,
    blink_mode: BlinkModeOption = None,
) -> None:
    """Print an ASCII intensity map of one frame."""

    configuration = resolve_configuration(blink_mode)
    evaluator = BlinkIntensityEvaluator.from_configuration(configuration)
    field = evaluator.evaluate_field((width, height), time)
    logger.debug("Preview mean intensity %.4f", float(field.mean()))
    typer.echo(render_ascii(field))


def timeline_command(
    frames: Annotated[int, typer.Option("--frames", min=1)] = 96,
    fps: Annotated[float, typer.Option("--fps", min=0.001)] = DEFAULT_FPS,
    blink_mode: BlinkModeOption = None,
) -> None:
    """Print the frame-center intensity for consecutive frames."""

    configuration = resolve_configuration(blink_mode)
    evaluator = BlinkIntensityEvaluator.from_configuration(configuration)
    # (1, 1) on a 2x2 frame normalizes to the exact center.
    center = (CENTER_FRAME_SIZE / 2, CENTER_FRAME_SIZE / 2)
    resolution = (CENTER_FRAME_SIZE, CENTER_FRAME_SIZE)
    for frame in range(frames):
        time = frame / fps
        intensity = evaluator.evaluate(center, resolution, time)
        typer.echo(f"{frame:5d} {time:8.3f}s {intensity:.6f}")
