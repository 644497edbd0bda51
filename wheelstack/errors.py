class WheelStackError(Exception):
    """Base class for wheelstack errors."""


class ContractViolation(WheelStackError):
    """A caller broke a fixed contract (e.g. a color table that is not 360 long)."""


class ConfigError(WheelStackError, ValueError):
    """Malformed wheel configuration."""
