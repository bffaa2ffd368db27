from eyeblink.utilities.env.blink import BlinkEnvConfiguration


class Configuration(BlinkEnvConfiguration):
    """Aggregate environment configuration helpers."""
