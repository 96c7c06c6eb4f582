from datetime import datetime


class PRAnalyzerError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(PRAnalyzerError):
    pass


class MissingCredentialError(ConfigurationError):
    def __init__(self, message: str, variable: str) -> None:
        self.variable = variable
        super().__init__(message)


class RuleConfigurationError(ConfigurationError):
    pass


class InvalidPRNumberError(PRAnalyzerError):
    def __init__(self, message: str, pr_number: object) -> None:
        self.pr_number = pr_number
        super().__init__(message)


class ProviderError(PRAnalyzerError):
    pass


class ProviderAuthenticationError(ProviderError):
    pass


class ProviderRateLimitError(ProviderError):
    def __init__(self, message: str, retry_after: datetime) -> None:
        self.retry_after = retry_after
        super().__init__(message)


class ProviderNotFoundError(ProviderError):
    def __init__(self, message: str, resource: str) -> None:
        self.resource = resource
        super().__init__(message)


class PRFetchError(ProviderError):
    def __init__(self, message: str, pr_ref: str) -> None:
        self.pr_ref = pr_ref
        super().__init__(message)


class CommentPostError(ProviderError):
    def __init__(self, message: str, pr_ref: str) -> None:
        self.pr_ref = pr_ref
        super().__init__(message)
