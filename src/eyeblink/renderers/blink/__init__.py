from eyeblink.renderers.blink.provider import \
    BlinkStateProvider as BlinkStateProvider
from eyeblink.renderers.blink.renderer import BlinkRenderer as BlinkRenderer
from eyeblink.renderers.blink.state import BlinkState as BlinkState
