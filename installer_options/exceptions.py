"""Custom exceptions for installer option validation.

Every failure in this package is an input-validation failure: a string the
user typed or a value the UI assembled does not satisfy the rules of the
option it is meant for. Nothing here is retried and nothing is fatal; the
caller is expected to keep the user on the current screen.

Exception Hierarchy:
    OptionsError (base)
        ├── CidrAddressParseError
        │   ├── NoDelimiterError
        │   ├── InvalidAddrError
        │   └── InvalidMaskError
        └── OptionsValidationError
            ├── InvalidEmailError
            ├── InvalidHostnameError
            ├── EmptyPasswordError
            └── NoDisksError

Usage:
    from installer_options.exceptions import InvalidMaskError

    try:
        address = CidrAddress.from_str(text)
    except InvalidMaskError as error:
        if error.cause is None:
            ...  # mask parsed but is out of range
"""

from __future__ import annotations


class OptionsError(Exception):
    """Base exception for all installer option errors."""


class CidrAddressParseError(OptionsError, ValueError):
    """Base exception for CIDR address construction and parsing."""

    def __init__(self, message: str, cause: ValueError | None = None):
        self.cause = cause
        super().__init__(message)


class NoDelimiterError(CidrAddressParseError):
    """CIDR string has no '/' between address and mask."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Missing '/' delimiter in CIDR address: {text!r}")


class InvalidAddrError(CidrAddressParseError):
    """Address part is not a valid IP address literal."""

    def __init__(self, addr: str, cause: ValueError):
        self.addr = addr
        super().__init__(f"Invalid IP address {addr!r}: {cause}", cause)


class InvalidMaskError(CidrAddressParseError):
    """Mask could not be parsed, or parsed but is out of range.

    ``cause`` holds the underlying parse error when the mask text was not a
    number, and is ``None`` when the number itself is unacceptable.
    """

    def __init__(self, mask: object, cause: ValueError | None = None):
        self.mask = mask
        if cause is None:
            message = f"Invalid network mask {mask!r}: must be between 0 and 32"
        else:
            message = f"Invalid network mask {mask!r}: {cause}"
        super().__init__(message, cause)


class OptionsValidationError(OptionsError, ValueError):
    """Base exception for option values rejected before installation."""


class InvalidEmailError(OptionsValidationError):
    """Administrator email address is malformed."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Invalid email address: {email!r}")


class InvalidHostnameError(OptionsValidationError):
    """Hostname is not a fully qualified domain name."""

    def __init__(self, fqdn: str, reason: str):
        self.fqdn = fqdn
        self.reason = reason
        super().__init__(f"Invalid hostname {fqdn!r}: {reason}")


class EmptyPasswordError(OptionsValidationError):
    """Root password was never supplied."""

    def __init__(self):
        super().__init__("Root password must not be empty")


class NoDisksError(OptionsValidationError):
    """No disk is available or selected for the boot disk layout."""

    def __init__(self, reason: str = "no disks available"):
        self.reason = reason
        super().__init__(f"Cannot build boot disk layout: {reason}")
