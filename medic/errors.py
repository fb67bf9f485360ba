"""Exception types raised by medic."""


class MedicError(Exception):
    """Base class for medic errors."""
    pass


class ConfigError(MedicError):
    """Configuration loading or validation error."""
    pass


class ReportWriteError(MedicError):
    """The output sink rejected the rendered report."""
    pass
