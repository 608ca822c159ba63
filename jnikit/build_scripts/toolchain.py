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
Native toolchains, lazy providers and compile steps.

The active toolchain of a compile step is only known when the step runs,
so it is carried as a Provider and resolved on demand. Compiler arguments
are an additive list that may hold such providers alongside plain values.
"""

import os
import platform
from typing import Any, Callable, Iterable, List, Optional

from ..utils.cmd.cmd_util import exec_probe


class NativeToolChain:
    """Base class of native compiler toolchains."""

    display_name = "native"

    def __init__(self, name: Optional[str] = None):
        self.name = name or self.display_name

    def __eq__(self, other):
        return type(self) is type(other) and self.name == other.name

    def __hash__(self):
        return hash((type(self), self.name))

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"


class Gcc(NativeToolChain):
    display_name = "gcc"


class Clang(NativeToolChain):
    display_name = "clang"


class VisualCpp(NativeToolChain):
    display_name = "visualCpp"


class UnknownToolChain(NativeToolChain):
    display_name = "unknown"


TOOLCHAIN_NAMES = {
    "gcc": Gcc,
    "mingw": Gcc,
    "clang": Clang,
    "appleclang": Clang,
    "msvc": VisualCpp,
    "visualcpp": VisualCpp,
    "cl": VisualCpp,
}


def toolchain_named(name: str) -> NativeToolChain:
    """Map a toolchain name from configuration or the command line to an instance."""
    key = (name or "").strip().lower()
    klass = TOOLCHAIN_NAMES.get(key)
    if klass is None:
        return UnknownToolChain(name)
    return klass(key)


class Provider:
    """A value computed lazily from a zero-argument callable."""

    def __init__(self, supplier: Callable[[], Any]):
        self._supplier = supplier

    @classmethod
    def of(cls, value) -> "Provider":
        return cls(lambda: value)

    def get(self):
        return self._supplier()

    def map(self, transformer: Callable[[Any], Any]) -> "Provider":
        return Provider(lambda: transformer(self.get()))

    def __repr__(self):
        return "Provider(<deferred>)"


class CompilerArgs:
    """
    Additive argument list of a compile step.

    Contributions are kept in order; providers are only resolved by get().
    """

    def __init__(self):
        self._contributions = []

    def add(self, arg: str):
        self._contributions.append([arg])

    def add_all(self, args):
        if isinstance(args, Provider):
            self._contributions.append(args)
        else:
            self._contributions.append(list(args))

    def get(self) -> List[str]:
        result = []
        for contribution in self._contributions:
            if isinstance(contribution, Provider):
                result.extend(contribution.get())
            else:
                result.extend(contribution)
        return result

    def __iter__(self):
        return iter(self.get())

    def __len__(self):
        return len(self.get())


class SourceCompile:
    """A native compile step whose toolchain is supplied lazily."""

    def __init__(self, name: str, tool_chain: Provider, compiler_args: Iterable[str] = ()):
        self.name = name
        self.tool_chain = tool_chain
        self.compiler_args = CompilerArgs()
        for arg in compiler_args:
            self.compiler_args.add(arg)

    def __repr__(self):
        return f"SourceCompile(name={self.name!r})"


def default_compiler_command() -> str:
    cc = os.environ.get("CC")
    if cc:
        return cc
    return "cl" if platform.system().lower() == "windows" else "cc"


def classify_version_output(output: str) -> Optional[NativeToolChain]:
    text = output or ""
    lowered = text.lower()
    if "microsoft" in lowered:
        return VisualCpp("msvc")
    # Apple's cc reports "Apple clang", so test clang before gcc
    if "clang" in lowered:
        return Clang("clang")
    if "gcc" in lowered or "free software foundation" in lowered:
        return Gcc("gcc")
    return None


def detect_toolchain(cc: Optional[str] = None) -> NativeToolChain:
    """
    Detect the host compiler's toolchain family from its version banner.

    Args:
        cc: Compiler command, defaults to $CC, then "cl" on Windows or "cc".

    Returns:
        A Gcc, Clang or VisualCpp instance, or UnknownToolChain when the
        compiler can not be run or its banner is not recognized.
    """
    command = cc or default_compiler_command()
    # cl prints its banner without arguments, and rejects --version
    args = [command] if os.path.basename(command).lower() in ("cl", "cl.exe") else [command, "--version"]
    err_code, output = exec_probe(args)
    toolchain = classify_version_output(output)
    if toolchain is None:
        if err_code != 0:
            print(f"   ⚠️  Warning: failed to run '{' '.join(args)}' ({err_code})")
        return UnknownToolChain(command)
    return toolchain


def host_tool_chain(cc: Optional[str] = None) -> Provider:
    """Provider that detects the host toolchain each time it is resolved."""
    return Provider(lambda: detect_toolchain(cc))
