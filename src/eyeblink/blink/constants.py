# Per-axis parabola peak is coefficient / 4, so the mask tops out at 0.975.
VIGNETTE_COEFFICIENT = 3.9

from eyeblink.utilities.env.blink import DEFAULT_BLINK_SPEED as DEFAULT_BLINK_SPEED
from eyeblink.utilities.env.blink import \
    DEFAULT_WAVE_EPSILON as DEFAULT_WAVE_EPSILON

SHARP_BLINK_AMPLITUDE = 32.0
SMOOTH_BLINK_AMPLITUDE = 64.0

# Output coverage written alongside the composited color.
OUTPUT_COVERAGE = 0.0

WHITE = (1.0, 1.0, 1.0)
