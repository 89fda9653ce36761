"""Validation functions for free-text installer options.

The UI hands over whatever the user typed. These checks run before the
configuration is handed to the install step:
- Administrator email must be a syntactically valid address
- Hostname must be a fully qualified domain name
- Root password must have been supplied

All validation functions raise specific exceptions from the exceptions module
rather than returning boolean values, making error handling more explicit.

Example:
    from installer_options.validation import validate_email

    try:
        validate_email(text)
    except InvalidEmailError:
        # Keep the user on the password screen
        pass
"""

from __future__ import annotations

import re

from .exceptions import EmptyPasswordError, InvalidEmailError, InvalidHostnameError
from .logging import LoggerFactory


# WHATWG "valid e-mail address" production
# https://html.spec.whatwg.org/multipage/input.html#valid-e-mail-address
EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

HOSTNAME_LABEL_RE = re.compile(r"^[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$")
MAX_FQDN_LENGTH = 253

log = LoggerFactory.for_system()


def is_valid_email(email: str) -> bool:
    return EMAIL_RE.fullmatch(email) is not None


def validate_email(email: str) -> None:
    """Validate the administrator email address.

    Raises:
        InvalidEmailError: If the address does not match EMAIL_RE
    """
    if not is_valid_email(email):
        log.debug(f"Rejected email address {email!r}")
        raise InvalidEmailError(email)


def validate_fqdn(fqdn: str) -> None:
    """Validate that a hostname is fully qualified.

    A trailing dot is accepted. At least two labels are required so that a
    domain is always present.

    Raises:
        InvalidHostnameError: If the hostname is not an FQDN
    """
    name = fqdn[:-1] if fqdn.endswith(".") else fqdn
    if not name:
        raise InvalidHostnameError(fqdn, "hostname is empty")
    if len(name) > MAX_FQDN_LENGTH:
        raise InvalidHostnameError(
            fqdn, f"longer than {MAX_FQDN_LENGTH} characters"
        )

    labels = name.split(".")
    if len(labels) < 2:
        raise InvalidHostnameError(fqdn, "missing domain part")
    for label in labels:
        if HOSTNAME_LABEL_RE.fullmatch(label) is None:
            log.debug(f"Rejected hostname label {label!r} in {fqdn!r}")
            raise InvalidHostnameError(fqdn, f"invalid label {label!r}")


def validate_root_password(password: str) -> None:
    """Validate that a root password was supplied.

    Raises:
        EmptyPasswordError: If the password is empty
    """
    if not password:
        raise EmptyPasswordError()
