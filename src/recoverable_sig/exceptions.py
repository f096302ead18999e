class RecoverableSignatureError(Exception):
    """Base exception for recoverable signature operations."""

    pass


class BackendError(RecoverableSignatureError):
    """Curve backend failed to initialize or to pass its self-test."""

    def __init__(self, message: str, backend: str | None = None):
        super().__init__(message)
        self.backend = backend


class ConfigurationError(RecoverableSignatureError):
    """A signer setting was rejected."""

    def __init__(self, message: str, setting: str | None = None):
        super().__init__(message)
        self.setting = setting
