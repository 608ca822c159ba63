#!/usr/bin/env python3
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
Dependency model for jnikit

Describes external module dependencies the way a Gradle version catalog does,
and the handlers a JNI library registers them with:
- Version catalogs (gradle/libs.versions.toml) with [versions] and [libraries]
- JVM-side and native-side implementation buckets
- Required capabilities of a module dependency
"""

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from .build_config import tomllib
from .toolchain import Provider


class DependencyError(Exception):
    """Exception raised for dependency-related errors"""
    pass


@dataclass(frozen=True)
class DependencyDescriptor:
    """A module coordinate with its required version."""
    group: str
    name: str
    version_constraint: str = ""


@dataclass
class ModuleDependency:
    """A dependency registered with a handler, configurable by an action."""
    notation: str
    transitive: bool = True
    excludes: List[Dict[str, str]] = field(default_factory=list)
    capabilities: List[str] = field(default_factory=list)

    def exclude(self, group: Optional[str] = None, module: Optional[str] = None):
        rule = {}
        if group:
            rule["group"] = group
        if module:
            rule["module"] = module
        self.excludes.append(rule)
        return self

    def require_capability(self, notation: str):
        self.capabilities.append(notation)
        return self


Action = Callable[[ModuleDependency], Any]


class JniLibraryDependencies:
    """JVM and native implementation dependencies of a JNI library."""

    def __init__(self):
        self.jvm: List[ModuleDependency] = []
        self.native: List[ModuleDependency] = []

    @staticmethod
    def _register(bucket: List[ModuleDependency], notation: str, action: Optional[Action]) -> ModuleDependency:
        dependency = ModuleDependency(notation)
        if action is not None:
            action(dependency)
        bucket.append(dependency)
        return dependency

    def jvm_implementation(self, notation: str, action: Optional[Action] = None) -> ModuleDependency:
        return self._register(self.jvm, notation, action)

    def native_implementation(self, notation: str, action: Optional[Action] = None) -> ModuleDependency:
        return self._register(self.native, notation, action)

    def __repr__(self):
        return f"JniLibraryDependencies(jvm={len(self.jvm)}, native={len(self.native)})"


class ModuleDependencyCapabilitiesHandler:
    """Collects the capabilities a module dependency requires."""

    def __init__(self):
        self.required: List[str] = []

    def require_capabilities(self, *notations: str):
        self.required.extend(notations)


def normalize_alias(alias: str) -> str:
    """Catalog aliases treat '-', '_' and '.' as the same separator."""
    return re.sub(r"[-_.]", ".", alias.strip().lower())


class VersionCatalog:
    """
    A Gradle-style version catalog.

    Library entries may be written as:
        foo = "group:name:1.0"
        foo = { module = "group:name", version = "1.0" }
        foo = { group = "group", name = "name", version.ref = "foo" }
    and a version may also be a table with "require" or "strictly".
    """

    def __init__(self, data: Dict[str, Any], source: str = "<memory>"):
        self.source = source
        self.versions = {
            normalize_alias(k): v for k, v in data.get("versions", {}).items()
        }
        self._libraries = {
            normalize_alias(k): (k, v) for k, v in data.get("libraries", {}).items()
        }

    @classmethod
    def load(cls, path) -> "VersionCatalog":
        path = Path(path)
        if not path.is_file():
            raise DependencyError(f"Version catalog not found: {path}")
        if tomllib is None:
            raise DependencyError("tomllib not available. Install 'tomli' for Python < 3.11")
        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise DependencyError(f"Failed to parse version catalog {path}: {e}") from e
        return cls(data, str(path))

    def aliases(self) -> List[str]:
        return [original for original, _ in self._libraries.values()]

    def _resolve_version(self, alias: str, spec: Any) -> str:
        if isinstance(spec, dict):
            if "ref" in spec:
                ref = normalize_alias(spec["ref"])
                if ref not in self.versions:
                    raise DependencyError(
                        f"Library '{alias}' references unknown version '{spec['ref']}' in {self.source}"
                    )
                return self._resolve_version(alias, self.versions[ref])
            for key in ("strictly", "require", "prefer"):
                if key in spec:
                    return str(spec[key])
            return ""
        return "" if spec is None else str(spec)

    def descriptor(self, alias: str) -> DependencyDescriptor:
        key = normalize_alias(alias)
        if key not in self._libraries:
            raise DependencyError(f"Unknown library alias '{alias}' in {self.source}")
        original, spec = self._libraries[key]

        if isinstance(spec, str):
            parts = spec.split(":")
            if len(parts) != 3:
                raise DependencyError(
                    f"Library '{original}' must be 'group:name:version', got '{spec}'"
                )
            return DependencyDescriptor(parts[0], parts[1], parts[2])

        if not isinstance(spec, dict):
            raise DependencyError(f"Invalid library specification type for '{original}': {type(spec)}")

        if "module" in spec:
            group, sep, name = spec["module"].partition(":")
            if not sep:
                raise DependencyError(f"Library '{original}' module must be 'group:name'")
        elif "group" in spec and "name" in spec:
            group, name = spec["group"], spec["name"]
        else:
            raise DependencyError(f"Unknown library specification for '{original}': {spec}")

        # a dotted "version.ref" key arrives as {"version": {"ref": ...}}
        return DependencyDescriptor(group, name, self._resolve_version(original, spec.get("version")))

    def library(self, alias: str) -> Provider:
        """Deferred descriptor for alias; unknown aliases fail on get()."""
        return Provider(lambda: self.descriptor(alias))

    def __repr__(self):
        return f"VersionCatalog(source={self.source}, libraries={len(self._libraries)})"
