"""Exception hierarchy for LeakScan."""

from typing import Optional, Dict, Any


class LeakScanError(Exception):
    """Base exception for all LeakScan errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None
    ):
        """
        Initialize exception with context.

        Args:
            message: Error message
            details: Additional error details
            suggestion: Suggested fix for the user
        """
        self.message = message
        self.details = details or {}
        self.suggestion = suggestion
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format complete error message."""
        parts = [self.message]

        if self.details:
            parts.append("\nDetails:")
            for key, value in self.details.items():
                parts.append(f"  {key}: {value}")

        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")

        return "\n".join(parts)


# Scan errors
class ScanError(LeakScanError):
    """Error during scanning operation."""
    pass


class InvalidTargetError(ScanError):
    """Scan root does not exist."""
    pass


class PatternError(ScanError):
    """A detector pattern failed to compile."""

    def __init__(self, label: str, pattern: str, error: Exception):
        self.label = label
        self.pattern = pattern
        super().__init__(
            f"Regex error in detector '{label}': {error}",
            details={"pattern": pattern},
        )


class FileAccessError(ScanError):
    """A file could not be opened, read, or resolved."""

    def __init__(self, path: str, error: Exception):
        self.path = path
        super().__init__(f"Cannot read {path}: {error}")


# Configuration errors
class ConfigError(LeakScanError):
    """Configuration-related error."""
    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration value."""
    pass


class MissingConfigError(ConfigError):
    """Required configuration is missing."""
    pass


# Output errors
class OutputError(LeakScanError):
    """Output generation error."""
    pass


class UnsupportedFormatError(OutputError):
    """Requested output format has no reporter."""
    pass


class ReportError(OutputError):
    """Report file could not be created or written."""
    pass
