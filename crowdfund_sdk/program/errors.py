"""Custom exceptions for the crowdfunding program module."""


class CrowdfundError(Exception):
    """Base exception for all Crowdfund SDK errors."""

    pass


class InvalidDiscriminatorError(CrowdfundError):
    """Raised when account data has an invalid discriminator."""

    def __init__(self, expected: bytes, actual: bytes):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid discriminator: expected {expected!r}, got {actual!r}"
        )


class AccountNotFoundError(CrowdfundError):
    """Raised when an account is not found on-chain."""

    def __init__(self, address: str):
        self.address = address
        super().__init__(f"Account not found: {address}")


class InvalidAccountDataError(CrowdfundError):
    """Raised when account data cannot be deserialized."""

    def __init__(self, message: str):
        super().__init__(f"Invalid account data: {message}")


class AddressDerivationError(CrowdfundError):
    """Raised when no program address can be derived for the given seeds."""

    def __init__(self, message: str):
        super().__init__(f"Address derivation failed: {message}")
