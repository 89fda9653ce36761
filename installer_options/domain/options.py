"""Option groups collected by the installer UI and their summary.

Each group has a ``defaults()`` constructor; the placeholder values come from
``installer_options.config.settings`` so a deployment can change them
without touching code.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Iterable, NamedTuple

from ..config import settings
from ..exceptions import NoDisksError
from ..logging import LoggerFactory
from ..validation import validate_email, validate_fqdn, validate_root_password
from .models import BootdiskOptions, Disk
from .network import UNSPECIFIED_IPV4, CidrAddress, IPAddress


log = LoggerFactory.for_system()
summary_log = LoggerFactory.for_summary()


class SummaryOption(NamedTuple):
    """One (label, value) row of the confirmation screen."""

    label: str
    value: str


@dataclass
class TimezoneOptions:
    timezone: str  # IANA zone name, e.g. "Europe/Vienna"
    kb_layout: str  # e.g. "en_US"

    @classmethod
    def defaults(cls) -> TimezoneOptions:
        return cls(
            timezone=settings.get_str("timezone"),
            kb_layout=settings.get_str("kb_layout"),
        )


@dataclass
class PasswordOptions:
    email: str
    root_password: str

    @classmethod
    def defaults(cls) -> PasswordOptions:
        """Placeholder email and an empty password the UI has to fill in."""
        return cls(email=settings.get_str("email"), root_password="")

    def validate(self) -> None:
        """
        Raises:
            InvalidEmailError: If email is malformed
            EmptyPasswordError: If no root password was entered
        """
        validate_email(self.email)
        validate_root_password(self.root_password)


@dataclass
class NetworkOptions:
    ifname: str
    fqdn: str
    address: CidrAddress
    gateway: IPAddress
    dns_server: IPAddress

    @classmethod
    def defaults(cls) -> NetworkOptions:
        # Placeholders until the network is detected.
        return cls(
            ifname=settings.get_str("ifname"),
            fqdn=settings.get_str("fqdn"),
            address=CidrAddress.unspecified(),
            gateway=UNSPECIFIED_IPV4,
            dns_server=UNSPECIFIED_IPV4,
        )

    def validate(self) -> None:
        """
        Raises:
            InvalidHostnameError: If fqdn is not fully qualified
        """
        validate_fqdn(self.fqdn)


@dataclass
class InstallerOptions:
    """Everything the install step needs, as chosen by the user."""

    bootdisk: BootdiskOptions
    timezone: TimezoneOptions
    password: PasswordOptions
    network: NetworkOptions

    @classmethod
    def defaults_from(cls, disks: Iterable[Disk]) -> InstallerOptions:
        """Fully defaulted configuration for the discovered disks.

        Raises:
            NoDisksError: If no disk was discovered
        """
        return cls(
            bootdisk=BootdiskOptions.defaults_from(disks),
            timezone=TimezoneOptions.defaults(),
            password=PasswordOptions.defaults(),
            network=NetworkOptions.defaults(),
        )

    def clone(self) -> InstallerOptions:
        """Deep copy, so an edited draft never touches the committed options."""
        return copy.deepcopy(self)

    def validate(self) -> None:
        """Check every group before the configuration is handed to install.

        Raises:
            NoDisksError: If the layout selects no disk
            OptionsValidationError: From the group validators
        """
        if not self.bootdisk.selected_disks():
            raise NoDisksError("no disk selected for the boot disk layout")
        self.password.validate()
        self.network.validate()
        log.debug("Installer options validated")

    def to_summary(self) -> list[SummaryOption]:
        """Flatten the configuration into rows for the confirmation screen.

        The row order is fixed; snapshot tests of the UI depend on it.
        """
        bootdisks = ", ".join(disk.path for disk in self.bootdisk.selected_disks())
        summary = [
            SummaryOption("Bootdisk filesystem", str(self.bootdisk.fstype)),
            SummaryOption("Bootdisks", bootdisks),
            SummaryOption("Timezone", self.timezone.timezone),
            SummaryOption("Keyboard layout", self.timezone.kb_layout),
            SummaryOption("Administator email:", self.password.email),
            SummaryOption("Management interface:", self.network.ifname),
            SummaryOption("Hostname:", self.network.fqdn),
            SummaryOption("Host IP (CIDR):", str(self.network.address)),
            SummaryOption("Gateway", str(self.network.gateway)),
            SummaryOption("DNS:", str(self.network.dns_server)),
        ]
        summary_log.debug(f"Built summary with {len(summary)} rows")
        return summary
