"""Environment configuration helpers."""

from eyeblink.utilities.env.config import Configuration as Configuration
from eyeblink.utilities.env.enums import BackgroundMode as BackgroundMode
from eyeblink.utilities.env.enums import BlinkMode as BlinkMode
