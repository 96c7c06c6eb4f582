from pranalyzer.core.exceptions.errors import (
    CommentPostError,
    ConfigurationError,
    InvalidPRNumberError,
    MissingCredentialError,
    PRAnalyzerError,
    PRFetchError,
    ProviderAuthenticationError,
    ProviderError,
    ProviderNotFoundError,
    ProviderRateLimitError,
    RuleConfigurationError,
)

__all__ = [
    "PRAnalyzerError",
    "ConfigurationError",
    "MissingCredentialError",
    "RuleConfigurationError",
    "InvalidPRNumberError",
    "ProviderError",
    "ProviderAuthenticationError",
    "ProviderRateLimitError",
    "ProviderNotFoundError",
    "PRFetchError",
    "CommentPostError",
]
