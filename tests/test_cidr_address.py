"""Tests for CidrAddress parsing, construction and formatting."""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address, ip_address

import pytest

from installer_options.domain import CidrAddress
from installer_options.exceptions import (
    CidrAddressParseError,
    InvalidAddrError,
    InvalidMaskError,
    NoDelimiterError,
)


class TestCidrAddressNew:
    """Test explicit construction from address and mask."""

    def test_new_ipv4(self):
        """Test building an IPv4 address with a valid mask."""
        cidr = CidrAddress.new(IPv4Address("192.168.1.10"), 24)

        assert cidr.addr == IPv4Address("192.168.1.10")
        assert cidr.mask == 24

    @pytest.mark.parametrize("mask", [0, 1, 16, 31, 32])
    def test_new_accepts_mask_bounds(self, mask):
        """Test masks from 0 through 32 are accepted."""
        assert CidrAddress.new(IPv4Address("10.0.0.1"), mask).mask == mask

    @pytest.mark.parametrize("mask", [33, 64, 128, 1000])
    def test_new_rejects_mask_above_32(self, mask):
        """Test masks above 32 fail with the range error, not a parse error."""
        with pytest.raises(InvalidMaskError) as exc_info:
            CidrAddress.new(IPv4Address("10.0.0.1"), mask)

        assert exc_info.value.cause is None

    def test_new_rejects_negative_mask(self):
        """Test a negative mask is rejected."""
        with pytest.raises(InvalidMaskError):
            CidrAddress.new(IPv4Address("10.0.0.1"), -1)

    def test_new_accepts_ipv6_with_small_mask(self):
        """Test IPv6 addresses are accepted when the mask is within 32."""
        cidr = CidrAddress.new(IPv6Address("2001:db8::1"), 32)

        assert cidr.addr == IPv6Address("2001:db8::1")
        assert str(cidr) == "2001:db8::1/32"

    def test_new_caps_ipv6_mask_at_32(self):
        """Test the 32 cap applies to IPv6 as well."""
        with pytest.raises(InvalidMaskError):
            CidrAddress.new(IPv6Address("2001:db8::1"), 64)

    def test_new_coerces_string_address(self):
        """Test a string address is converted to an address object."""
        cidr = CidrAddress.new("172.16.0.1", 12)

        assert cidr.addr == IPv4Address("172.16.0.1")

    def test_new_rejects_invalid_string_address(self):
        """Test an invalid string address fails with the address error."""
        with pytest.raises(InvalidAddrError):
            CidrAddress.new("not-an-ip", 12)

    def test_new_rejects_zone_id_string(self):
        """Test a string address with a zone ID fails with the address error."""
        with pytest.raises(InvalidAddrError) as exc_info:
            CidrAddress.new("fe80::1%eth0", 16)

        assert isinstance(exc_info.value.cause, ValueError)

    @pytest.mark.parametrize("addr", [167772161, None, b"\n\x00\x00\x01"])
    def test_new_rejects_non_address_types(self, addr):
        """Test values that are neither address objects nor strings."""
        with pytest.raises(TypeError, match="IP address or string"):
            CidrAddress.new(addr, 8)

    def test_unspecified(self):
        """Test the placeholder address renders as 0.0.0.0/0."""
        assert str(CidrAddress.unspecified()) == "0.0.0.0/0"

    def test_is_immutable(self):
        """Test address and mask cannot be reassigned."""
        cidr = CidrAddress.new(IPv4Address("10.0.0.1"), 8)

        with pytest.raises(AttributeError):
            cidr.mask = 16  # type: ignore[misc]


class TestCidrAddressParse:
    """Test parsing of "<address>/<mask>" strings."""

    @pytest.mark.parametrize(
        "text",
        [
            "0.0.0.0/0",
            "192.168.100.2/24",
            "10.0.0.1/8",
            "255.255.255.255/32",
            "172.16.5.4/1",
        ],
    )
    def test_round_trip_ipv4(self, text):
        """Test parsing then formatting reproduces the input exactly."""
        assert str(CidrAddress.from_str(text)) == text

    def test_round_trip_all_masks(self):
        """Test every IPv4 mask survives a parse/format cycle."""
        for mask in range(33):
            text = f"198.51.100.7/{mask}"
            assert str(CidrAddress.from_str(text)) == text

    def test_parse_fields(self):
        """Test parsed address and mask are exposed."""
        cidr = CidrAddress.from_str("192.168.1.1/16")

        assert cidr.addr == ip_address("192.168.1.1")
        assert cidr.mask == 16

    def test_parse_alias(self):
        """Test parse is the same operation as from_str."""
        assert CidrAddress.parse("10.1.2.3/8") == CidrAddress.from_str("10.1.2.3/8")

    def test_parse_ipv6(self):
        """Test an IPv6 address with a mask within bounds."""
        cidr = CidrAddress.from_str("fd00::1/16")

        assert cidr.addr == IPv6Address("fd00::1")
        assert str(cidr) == "fd00::1/16"

    @pytest.mark.parametrize(
        "text", ["", "192.168.1.1", "not an address", "10.0.0.1 24", "::1"]
    )
    def test_missing_delimiter(self, text):
        """Test any string without '/' fails with the delimiter error."""
        with pytest.raises(NoDelimiterError):
            CidrAddress.from_str(text)

    def test_malformed_address(self):
        """Test a bad address with a good mask reports the address."""
        with pytest.raises(InvalidAddrError) as exc_info:
            CidrAddress.from_str("not-an-ip/24")

        assert isinstance(exc_info.value.cause, ValueError)
        assert exc_info.value.__cause__ is exc_info.value.cause
        assert exc_info.value.addr == "not-an-ip"

    def test_out_of_range_octet(self):
        """Test an IPv4 literal with an octet above 255 is rejected."""
        with pytest.raises(InvalidAddrError):
            CidrAddress.from_str("256.1.1.1/24")

    @pytest.mark.parametrize("mask", [33, 48, 64, 128, 99999])
    def test_mask_above_32(self, mask):
        """Test numeric masks above 32 fail without a wrapped cause."""
        with pytest.raises(InvalidMaskError) as exc_info:
            CidrAddress.from_str(f"10.0.0.1/{mask}")

        assert exc_info.value.cause is None
        assert exc_info.value.mask == mask

    def test_mask_with_leading_plus(self):
        """Test a leading '+' on the mask is accepted like an unsigned integer."""
        cidr = CidrAddress.from_str("10.0.0.1/+8")

        assert cidr.mask == 8
        assert str(cidr) == "10.0.0.1/8"

    def test_plus_mask_above_32(self):
        """Test a signed mask above 32 still fails with the range error."""
        with pytest.raises(InvalidMaskError) as exc_info:
            CidrAddress.from_str("10.0.0.1/+33")

        assert exc_info.value.cause is None

    @pytest.mark.parametrize("text", ["fe80::1%eth0/16", "fe80::1%1/32"])
    def test_zone_id_rejected(self, text):
        """Test IPv6 addresses with a zone ID are not address literals."""
        with pytest.raises(InvalidAddrError) as exc_info:
            CidrAddress.from_str(text)

        assert isinstance(exc_info.value.cause, ValueError)

    @pytest.mark.parametrize(
        "mask_text", ["", "abc", "-1", "++8", "+", " 8", "8 ", "2.5"]
    )
    def test_unparsable_mask(self, mask_text):
        """Test non-numeric masks fail with the wrapped parse error."""
        with pytest.raises(InvalidMaskError) as exc_info:
            CidrAddress.from_str(f"10.0.0.1/{mask_text}")

        assert isinstance(exc_info.value.cause, ValueError)

    def test_mask_checked_before_address(self):
        """Test a string with both parts invalid reports the mask."""
        with pytest.raises(InvalidMaskError):
            CidrAddress.from_str("not-an-ip/99")

    def test_splits_on_first_delimiter(self):
        """Test extra slashes end up in the mask part."""
        with pytest.raises(InvalidMaskError) as exc_info:
            CidrAddress.from_str("10.0.0.1/24/8")

        assert exc_info.value.cause is not None

    def test_errors_share_base_class(self):
        """Test all parse failures can be caught together."""
        for text in ("10.0.0.1", "bogus/8", "10.0.0.1/40"):
            with pytest.raises(CidrAddressParseError):
                CidrAddress.from_str(text)

    def test_errors_are_value_errors(self):
        """Test parse failures are also ValueError for generic handlers."""
        with pytest.raises(ValueError):
            CidrAddress.from_str("10.0.0.1/x")


class TestCidrAddressEquality:
    """Test value semantics."""

    def test_equal_values(self):
        """Test equal address and mask compare equal and hash alike."""
        first = CidrAddress.from_str("10.0.0.1/8")
        second = CidrAddress.new(IPv4Address("10.0.0.1"), 8)

        assert first == second
        assert hash(first) == hash(second)

    def test_different_mask(self):
        """Test a different mask makes values unequal."""
        assert CidrAddress.from_str("10.0.0.1/8") != CidrAddress.from_str(
            "10.0.0.1/16"
        )
