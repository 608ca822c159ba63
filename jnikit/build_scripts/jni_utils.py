#!/usr/bin/env python3
# -- coding: utf-8 --
#
# jni_utils.py
# jnikit
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
Helpers for building JNI libraries across platforms.

This module provides the small mappings a JNI build script needs:
- Dependency notations ("group:name:version") and their registration
- Variant names of target machines ("linux-x86-64")
- Whether a target machine is the host the build runs on
- Shared library file names per operating system
- Optimization flags for the active native toolchain
"""

import os
import platform
from typing import Optional

from .dependency_manager import (
    Action,
    DependencyDescriptor,
    JniLibraryDependencies,
    ModuleDependency,
    ModuleDependencyCapabilitiesHandler,
)
from .target_machine import (
    MachineArchitecture,
    OperatingSystemFamily,
    TargetMachine,
    UnknownPlatformError,
)
from .toolchain import Clang, Gcc, Provider, SourceCompile, VisualCpp

HOST_OS_ENV = "JNIKIT_HOST_OS"

# Host system names as the JVM reports them in "os.name"
JVM_OS_NAMES = {
    "darwin": "Mac OS X",
}


def dependency_notation(dependency: DependencyDescriptor) -> str:
    return f"{dependency.group}:{dependency.name}:{dependency.version_constraint}"


def jvm_lib_implementation(dependencies: JniLibraryDependencies, notation: Provider) -> ModuleDependency:
    return dependencies.jvm_implementation(notation.map(dependency_notation).get())


def native_lib_implementation(
    dependencies: JniLibraryDependencies,
    notation: Provider,
    action: Optional[Action] = None,
) -> ModuleDependency:
    return dependencies.native_implementation(notation.map(dependency_notation).get(), action)


def require_lib_capability(handler: ModuleDependencyCapabilitiesHandler, notation: Provider):
    handler.require_capabilities(dependency_notation(notation.get()))


def os_family(target: TargetMachine) -> str:
    family = target.operating_system_family
    if family.is_windows:
        return OperatingSystemFamily.WINDOWS.value
    elif family.is_linux:
        return OperatingSystemFamily.LINUX.value
    elif family.is_macos:
        return OperatingSystemFamily.MACOS.value
    raise UnknownPlatformError(family)


def architecture_string(target: TargetMachine) -> str:
    if target.architecture.is_32bit:
        return MachineArchitecture.X86
    return MachineArchitecture.X86_64


def variant_name(target: TargetMachine) -> str:
    return f"{os_family(target)}-{architecture_string(target)}"


def host_os_name() -> str:
    """
    Name of the host operating system, read on every call.

    $JNIKIT_HOST_OS overrides the detected name. macOS is reported the way
    the JVM does ("Mac OS X") so that it contains the "macos" token once
    spaces are removed.
    """
    override = os.environ.get(HOST_OS_ENV)
    if override:
        return override
    system = platform.system()
    return JVM_OS_NAMES.get(system.lower(), system)


def targets_host(target: TargetMachine, os_name: Optional[str] = None) -> bool:
    """
    Check whether target describes the machine this build is running on.

    Args:
        target: Target machine to check.
        os_name: Host OS name to compare with, read from the host if None.

    Returns:
        bool: True if the host OS name contains the target's family token.
    """
    if os_name is None:
        os_name = host_os_name()
    os_name = os_name.lower().replace(" ", "")
    family = target.operating_system_family
    if family.is_windows and OperatingSystemFamily.WINDOWS.value in os_name:
        return True
    elif family.is_linux and OperatingSystemFamily.LINUX.value in os_name:
        return True
    elif family.is_macos and OperatingSystemFamily.MACOS.value in os_name:
        return True
    return False


def library_file_name_for(project, family: OperatingSystemFamily) -> str:
    """
    Get the shared library file name for a project on a platform.

    Args:
        project: Project with a "name" attribute, or the name itself.
        family: Operating system family of the target.

    Returns:
        str: "name.dll", "libname.so" or "libname.dylib"
    """
    name = getattr(project, "name", project)
    if family.is_windows:
        return f"{name}.dll"
    elif family.is_linux:
        return f"lib{name}.so"
    elif family.is_macos:
        return f"lib{name}.dylib"
    raise UnknownPlatformError(family)


def optimization_flags(tool_chain) -> list:
    if isinstance(tool_chain, (Gcc, Clang)):
        return ["-O2"]
    elif isinstance(tool_chain, VisualCpp):
        return ["/O2"]
    return []


def optimized_binary(compile_step: SourceCompile):
    """Append the toolchain's -O2 equivalent, resolved when the arguments are read."""
    compile_step.compiler_args.add_all(compile_step.tool_chain.map(optimization_flags))
