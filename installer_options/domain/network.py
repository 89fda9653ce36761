"""Network address types for the installer options.

``CidrAddress`` is the only place where user-entered network text is turned
into a typed value. Parsing follows ``"<address>/<mask>"`` and formatting
produces exactly the same shape, so any value rendered by ``str()`` parses
back to an equal value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address, ip_address
from typing import Union

from ..exceptions import (
    CidrAddressParseError,
    InvalidAddrError,
    InvalidMaskError,
    NoDelimiterError,
)
from ..logging import LoggerFactory


IPAddress = Union[IPv4Address, IPv6Address]

# IPv4 upper bound, applied to IPv6 addresses as well until longer
# prefixes are confirmed to be wanted.
MAX_MASK = 32

UNSPECIFIED_IPV4 = IPv4Address("0.0.0.0")

_MASK_RE = re.compile(r"\+?[0-9]+")

log = LoggerFactory.for_network()


def _ip_address(text: str) -> IPAddress:
    addr = ip_address(text)
    # Zone IDs ("fe80::1%eth0") are not part of an address literal.
    if getattr(addr, "scope_id", None) is not None:
        raise ValueError(f"{text!r} has a zone ID, which is not allowed")
    return addr


def _parse_mask(text: str) -> int:
    try:
        if _MASK_RE.fullmatch(text) is None:
            if not text:
                raise ValueError("cannot parse mask from empty string")
            raise ValueError(f"invalid digit found in {text!r}")
        return int(text)
    except ValueError as error:
        raise InvalidMaskError(text, error) from error


@dataclass(frozen=True)
class CidrAddress:
    """An IP address together with a network prefix length.

    The mask is bounded to 0..32 at construction, regardless of the address
    family.
    """

    addr: IPAddress
    mask: int

    def __post_init__(self) -> None:
        if isinstance(self.addr, str):
            try:
                addr = _ip_address(self.addr)
            except ValueError as error:
                raise InvalidAddrError(self.addr, error) from error
            object.__setattr__(self, "addr", addr)
        elif not isinstance(self.addr, (IPv4Address, IPv6Address)):
            raise TypeError(
                f"CIDR address needs an IP address or string, "
                f"got {type(self.addr).__name__}"
            )
        if not 0 <= self.mask <= MAX_MASK:
            raise InvalidMaskError(self.mask)

    @classmethod
    def new(cls, addr: IPAddress | str, mask: int) -> CidrAddress:
        """Build from an explicit address and mask.

        Raises:
            InvalidMaskError: If mask is outside 0..32 (``cause`` is None)
            InvalidAddrError: If addr is a string that is not an IP literal
            TypeError: If addr is neither an address object nor a string
        """
        return cls(addr, mask)

    @classmethod
    def unspecified(cls) -> CidrAddress:
        """``0.0.0.0/0``, used as placeholder until a real address is known."""
        return cls(UNSPECIFIED_IPV4, 0)

    @classmethod
    def from_str(cls, text: str) -> CidrAddress:
        """Parse ``"<address>/<mask>"``.

        The string is split on the first '/'. The mask is checked before the
        address, so a string with both parts wrong reports the mask.

        Raises:
            NoDelimiterError: If there is no '/'
            InvalidMaskError: If the mask is not a decimal number (``cause``
                set) or is greater than 32 (``cause`` is None)
            InvalidAddrError: If the address part is not an IP literal
        """
        try:
            address = cls._parse(text)
        except CidrAddressParseError as error:
            log.debug(f"Rejected CIDR address {text!r}: {error}")
            raise
        log.trace(f"Parsed CIDR address {address}")
        return address

    parse = from_str

    @classmethod
    def _parse(cls, text: str) -> CidrAddress:
        addr_text, delimiter, mask_text = text.partition("/")
        if not delimiter:
            raise NoDelimiterError(text)

        mask = _parse_mask(mask_text)
        if mask > MAX_MASK:
            raise InvalidMaskError(mask)

        try:
            addr = _ip_address(addr_text)
        except ValueError as error:
            raise InvalidAddrError(addr_text, error) from error

        return cls(addr, mask)

    def __str__(self) -> str:
        return f"{self.addr}/{self.mask}"
