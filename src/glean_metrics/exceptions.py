"""
Custom exception classes for glean-metrics.

Only metric definition and configuration loading raise. Recording and
reading a metric never do.
"""


class GleanError(Exception):
    """Base exception for all glean-metrics errors."""
    pass


class ConfigLoadError(GleanError):
    """Error loading a configuration file."""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        self.message = message
        super().__init__(f"Error loading {file_name}: {message}")


class SchemaValidationError(GleanError):
    """Invalid entry in a metrics definition file."""

    def __init__(self, file_name: str, field_path: str, message: str):
        self.file_name = file_name
        self.field_path = field_path
        self.message = message
        super().__init__(
            f"Schema validation error in {file_name} at {field_path}: {message}"
        )
