"""Animated eye-blink vignette: intensity evaluation and compositing."""

from eyeblink.blink.background import BackgroundSource as BackgroundSource
from eyeblink.blink.background import \
    TexturedBackground as TexturedBackground
from eyeblink.blink.background import \
    WhiteFillBackground as WhiteFillBackground
from eyeblink.blink.compositor import composite as composite
from eyeblink.blink.compositor import composite_rgba as composite_rgba
from eyeblink.blink.config import BlinkConfiguration as BlinkConfiguration
from eyeblink.blink.effect import BlinkEffect as BlinkEffect
from eyeblink.blink.evaluator import \
    BlinkIntensityEvaluator as BlinkIntensityEvaluator
from eyeblink.blink.evaluator import FrameContext as FrameContext
from eyeblink.blink.evaluator import evaluate as evaluate
from eyeblink.blink.waves import BlinkWaveFunction as BlinkWaveFunction
from eyeblink.blink.waves import SharpBlinkWave as SharpBlinkWave
from eyeblink.blink.waves import SmoothBlinkWave as SmoothBlinkWave
