"""Custom exceptions for AASX packages."""

from typing import Optional


ERR_INVALID_FORMAT = "invalid package format"
ERR_NO_ORIGIN_PART = "no origin part found"
ERR_PART_NOT_FOUND = "part not found"
ERR_PRECONDITION_VIOLATION = "precondition violation"
ERR_POSTCONDITION_VIOLATION = "postcondition violation"


class AasxPackageError(Exception):
    """Base exception for AASX package errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidFormatError(AasxPackageError):
    """Exception raised when the archive or its embedded XML cannot be read."""

    def __init__(self, details: Optional[str] = None):
        super().__init__(ERR_INVALID_FORMAT, details)


class NoOriginPartError(AasxPackageError):
    """Exception raised when a readable archive declares no origin part."""

    def __init__(self, details: Optional[str] = None):
        super().__init__(ERR_NO_ORIGIN_PART, details)


class PartNotFoundError(AasxPackageError, KeyError):
    """Exception raised when a part that must exist is missing."""

    def __init__(self, path: str):
        super().__init__(ERR_PART_NOT_FOUND, path)
        self.path = path


class PackageIntegrityError(AasxPackageError):
    """Exception raised when a relationship points to a part that does not exist."""

    def __init__(self, message: str, target: Optional[str] = None):
        super().__init__(message, target)
        self.target = target


class InvalidPartURIError(AasxPackageError, ValueError):
    """Exception raised for URIs that do not name a part."""

    pass


class PackageClosedError(AasxPackageError):
    """Exception raised when a closed package is used."""

    pass


class ContractViolation(AasxPackageError, AssertionError):
    """Base exception for failed contract checks."""

    pass


class PreconditionViolation(ContractViolation):
    """Exception raised when a caller breaks an operation's precondition."""

    def __init__(self, message: str):
        super().__init__(ERR_PRECONDITION_VIOLATION, message)


class PostconditionViolation(ContractViolation):
    """Exception raised when an operation fails to establish its postcondition."""

    def __init__(self, message: str):
        super().__init__(ERR_POSTCONDITION_VIOLATION, message)
