from eyeblink.utilities.env.enums import BackgroundMode, BlinkMode
from eyeblink.utilities.env.parsing import _env_enum, _env_positive_float

DEFAULT_BLINK_SPEED = 1.0
# Floor applied to the blink wave before it is used as an exponent divisor.
DEFAULT_WAVE_EPSILON = 1e-4
DEFAULT_BACKGROUND_MODE = BackgroundMode.WHITE_FILL
DEFAULT_BLINK_MODE = BlinkMode.SHARP


class BlinkEnvConfiguration:
    @classmethod
    def background_mode(cls) -> BackgroundMode:
        return _env_enum(
            "EYEBLINK_BACKGROUND_MODE", BackgroundMode, default=DEFAULT_BACKGROUND_MODE
        )

    @classmethod
    def blink_mode(cls) -> BlinkMode:
        return _env_enum("EYEBLINK_BLINK_MODE", BlinkMode, default=DEFAULT_BLINK_MODE)

    @classmethod
    def blink_speed(cls) -> float:
        return _env_positive_float("EYEBLINK_BLINK_SPEED", default=DEFAULT_BLINK_SPEED)

    @classmethod
    def wave_epsilon(cls) -> float:
        return _env_positive_float(
            "EYEBLINK_WAVE_EPSILON", default=DEFAULT_WAVE_EPSILON
        )
