"""Domain models for installer options.

Value objects for the boot disk layout, network, locale and credentials the
user picks before installation, and the summary built from them.
"""

from __future__ import annotations

from .models import (
    DEFAULT_SWAP_SIZE,
    FS_TYPES,
    MIB,
    AdvancedBootdiskOptions,
    BootdiskLayout,
    BootdiskOptions,
    Disk,
    FsType,
    LvmBootdiskOptions,
)
from .network import CidrAddress
from .options import (
    InstallerOptions,
    NetworkOptions,
    PasswordOptions,
    SummaryOption,
    TimezoneOptions,
)


__all__ = [
    "DEFAULT_SWAP_SIZE",
    "FS_TYPES",
    "MIB",
    "AdvancedBootdiskOptions",
    "BootdiskLayout",
    "BootdiskOptions",
    "CidrAddress",
    "Disk",
    "FsType",
    "InstallerOptions",
    "LvmBootdiskOptions",
    "NetworkOptions",
    "PasswordOptions",
    "SummaryOption",
    "TimezoneOptions",
]
