"""Custom exceptions for the activity summary analyzer."""


class ActivityAnalyzerError(Exception):
    """Base exception for all activity summary analyzer errors."""

    pass


class ConfigurationError(ActivityAnalyzerError):
    """Raised when there is a configuration error."""

    pass


class InputMissingError(ActivityAnalyzerError):
    """Raised when an analysis is requested without any input text or file."""

    pass


class NoRecordsFoundError(ActivityAnalyzerError):
    """Raised when the input contains no activity summary records."""

    pass


class ParsingError(ActivityAnalyzerError):
    """Raised when export parsing fails."""

    pass


class MalformedFragmentError(ParsingError):
    """Raised when the extracted record fragment is not well-formed XML."""

    pass


class EmptyAggregationSetError(ActivityAnalyzerError):
    """Raised when there are no records left to aggregate."""

    pass


class ValidationError(ActivityAnalyzerError):
    """Raised when input validation fails."""

    pass
