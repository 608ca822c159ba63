#
# Copyright 2024 jnikit Project Authors. All rights reserved.
# Use of this source code is governed by a MIT-style
# license that can be found at
#
# https://opensource.org/license/MIT
#
# The above copyright notice and this permission
# notice shall be included in all copies or
# substantial portions of the Software.

"""
Target machine model for native (JNI) library variants.

A target machine is an (operating system family, architecture) pair that
describes the output of a native compilation, independent of the host the
build is running on.
"""

from dataclasses import dataclass
from enum import Enum


class UnknownPlatformError(RuntimeError):
    """Raised when an operating system family is not one of the known ones."""

    def __init__(self, family):
        self.family = str(family)
        super().__init__(f"Unknown operating system family '{self.family}'.")


class OperatingSystemFamily(Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    UNKNOWN = "unknown"

    @property
    def is_windows(self) -> bool:
        return self is OperatingSystemFamily.WINDOWS

    @property
    def is_linux(self) -> bool:
        return self is OperatingSystemFamily.LINUX

    @property
    def is_macos(self) -> bool:
        return self is OperatingSystemFamily.MACOS

    @classmethod
    def named(cls, name: str) -> "OperatingSystemFamily":
        """
        Parse a family name such as "linux", "osx" or "Windows".

        Unrecognized names map to UNKNOWN rather than raising, so the
        failure surfaces where the family is actually used.
        """
        key = (name or "").strip().lower()
        key = _FAMILY_ALIASES.get(key, key)
        for family in cls:
            if family.value == key:
                return family
        return cls.UNKNOWN

    def __str__(self):
        return self.value


_FAMILY_ALIASES = {
    "win": "windows",
    "osx": "macos",
    "mac": "macos",
    "darwin": "macos",
}


class MachineArchitecture:
    X86 = "x86"
    X86_64 = "x86-64"

    _32BIT_NAMES = ("x86", "i386", "i486", "i586", "i686")

    @classmethod
    def named(cls, name: str) -> "Architecture":
        key = (name or "").strip().lower()
        return Architecture(key, key in cls._32BIT_NAMES)


@dataclass(frozen=True)
class Architecture:
    name: str
    is_32bit: bool

    @property
    def is_64bit(self) -> bool:
        return not self.is_32bit

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class TargetMachine:
    """An operating system family paired with a machine architecture."""

    operating_system_family: OperatingSystemFamily
    architecture: Architecture

    @classmethod
    def of(cls, family: str, arch: str) -> "TargetMachine":
        return cls(OperatingSystemFamily.named(family), MachineArchitecture.named(arch))

    @classmethod
    def parse(cls, text: str) -> "TargetMachine":
        """
        Parse a "<os>-<arch>" string, e.g. "linux-x86-64" or "windows-x86".

        Only the first "-" separates the family, architecture names may
        contain dashes themselves.
        """
        family, sep, arch = (text or "").strip().partition("-")
        if not sep:
            arch = MachineArchitecture.X86_64
        return cls.of(family, arch)

    def __str__(self):
        return f"{self.operating_system_family}-{self.architecture}"
