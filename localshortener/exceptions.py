class LocalShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:localshortener_error'


class ShortcodeGenerationError(LocalShortenerError):
    """Raised when no collision-free shortcode is found within the retry budget."""

    error_code = 'app:shortcode_generation_error'


class ConfigurationError(LocalShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
