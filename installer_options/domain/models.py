"""Boot disk domain model for the installer.

Disks come from the discovery step of the surrounding installer; this module
only describes them and derives a starting layout from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Union

from ..exceptions import NoDisksError
from ..logging import LoggerFactory


MIB = 1024 * 1024

# Placeholder until swap can be sized from installed memory.
DEFAULT_SWAP_SIZE = 4 * MIB

# Disks above this size reserve a fixed amount of free space in the volume
# group; smaller ones reserve an eighth of the disk.
LVM_FREE_THRESHOLD = 128 * MIB
LVM_FREE_FIXED = 16 * MIB
LVM_FREE_DIVISOR = 8

log = LoggerFactory.for_disk()


# ==============================================================================
# Disk Domain
# ==============================================================================


@dataclass(frozen=True)
class Disk:
    """A storage device offered for installation."""

    path: str  # e.g., "/dev/sda"
    size: int  # Total size in bytes

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"Disk size must not be negative: {self.size}")

    def __str__(self) -> str:
        return f"{self.path} ({self.size} B)"

    @classmethod
    def from_lsblk_dict(cls, device: dict[str, Any]) -> Disk:
        """Convert an lsblk device dict to a Disk.

        Args:
            device: Device dict from ``lsblk --bytes --json`` with keys
                path (or name) and size

        Raises:
            KeyError: If neither path nor name is present
            ValueError: If size cannot be converted to int
        """
        path = device.get("path") or f"/dev/{device['name']}"
        return cls(path=path, size=int(device.get("size") or 0))


class FsType(Enum):
    """Filesystem for the root volume."""

    EXT4 = "ext4"
    XFS = "XFS"

    @classmethod
    def default(cls) -> FsType:
        return cls.EXT4

    def __str__(self) -> str:
        return self.value


FS_TYPES = (FsType.EXT4, FsType.XFS)


# ==============================================================================
# Boot Disk Layouts
# ==============================================================================


@dataclass
class LvmBootdiskOptions:
    """Sizing for a single-disk LVM layout, in bytes.

    ``max_root_size`` and ``max_data_size`` use 0 to mean "no explicit cap,
    take what is left", not "zero capacity". Anything reading them has to
    check for 0 first; ``has_root_cap``/``has_data_cap`` do that.
    """

    disk: Disk
    total_size: int
    swap_size: int
    max_root_size: int
    max_data_size: int
    min_lvm_free: int

    @classmethod
    def defaults_from(cls, disk: Disk) -> LvmBootdiskOptions:
        """Derive a safe starting layout that uses the whole disk."""
        if disk.size > LVM_FREE_THRESHOLD:
            min_lvm_free = LVM_FREE_FIXED
        else:
            min_lvm_free = disk.size // LVM_FREE_DIVISOR

        options = cls(
            disk=disk,
            total_size=disk.size,
            swap_size=DEFAULT_SWAP_SIZE,
            max_root_size=0,
            max_data_size=0,
            min_lvm_free=min_lvm_free,
        )
        log.debug(
            f"LVM defaults for {disk}: swap={options.swap_size} "
            f"min_lvm_free={options.min_lvm_free}"
        )
        return options

    @property
    def has_root_cap(self) -> bool:
        return self.max_root_size != 0

    @property
    def has_data_cap(self) -> bool:
        return self.max_data_size != 0


class BootdiskLayout(Enum):
    """Kind of boot disk layout."""

    LVM = "lvm"


# Payload types per layout; extend together with BootdiskLayout.
LayoutOptions = Union[LvmBootdiskOptions]

_LAYOUT_PAYLOADS = {
    BootdiskLayout.LVM: LvmBootdiskOptions,
}


@dataclass
class AdvancedBootdiskOptions:
    """The chosen boot disk layout, tagged by kind.

    Code that only needs the disks in use should go through
    ``selected_disks()`` and never look at the payload.
    """

    layout: BootdiskLayout
    options: LayoutOptions

    def __post_init__(self) -> None:
        expected = _LAYOUT_PAYLOADS.get(self.layout)
        if expected is None:
            raise TypeError(f"Unknown boot disk layout: {self.layout!r}")
        if not isinstance(self.options, expected):
            raise TypeError(
                f"{self.layout.name} layout needs {expected.__name__}, "
                f"got {type(self.options).__name__}"
            )

    @classmethod
    def lvm(cls, options: LvmBootdiskOptions) -> AdvancedBootdiskOptions:
        return cls(layout=BootdiskLayout.LVM, options=options)

    def selected_disks(self) -> Iterator[Disk]:
        """Yield the disks used by this layout, in order."""
        if self.layout is BootdiskLayout.LVM:
            yield self.options.disk
            return
        raise ValueError(f"Unknown boot disk layout: {self.layout}")


@dataclass
class BootdiskOptions:
    """Candidate disks plus the filesystem and layout chosen for them.

    ``disks`` is the whole candidate pool; the layout in ``advanced`` uses a
    subset of it.
    """

    disks: list[Disk]
    fstype: FsType
    advanced: AdvancedBootdiskOptions

    @classmethod
    def defaults_from(cls, disks: Iterable[Disk]) -> BootdiskOptions:
        """Default layout: LVM on the first candidate disk, ext4.

        Raises:
            NoDisksError: If ``disks`` is empty
        """
        disks = list(disks)
        if not disks:
            raise NoDisksError()
        return cls(
            disks=disks,
            fstype=FsType.default(),
            advanced=AdvancedBootdiskOptions.lvm(
                LvmBootdiskOptions.defaults_from(disks[0])
            ),
        )

    def selected_disks(self) -> list[Disk]:
        return list(self.advanced.selected_disks())
