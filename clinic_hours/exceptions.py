"""Custom exceptions for the clinic-hours scraper."""


class ClinicHoursError(Exception):
    """Base exception for all clinic-hours errors."""
    pass


class ConfigurationError(ClinicHoursError):
    """Raised when configuration is invalid or incomplete."""
    pass


class InputFileError(ClinicHoursError):
    """Raised when the input CSV cannot be read."""
    pass


class NoInputError(ClinicHoursError):
    """Raised when the input CSV yields no clinic names."""
    pass
