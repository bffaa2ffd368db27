from enum import StrEnum


class BackgroundMode(StrEnum):
    TEXTURED = "textured"
    WHITE_FILL = "white_fill"


class BlinkMode(StrEnum):
    SHARP = "sharp"
    SMOOTH = "smooth"
