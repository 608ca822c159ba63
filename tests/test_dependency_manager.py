from __future__ import annotations

from pathlib import Path

import pytest

import _testutil  # noqa: F401

from jnikit.build_scripts.dependency_manager import (
    DependencyDescriptor,
    DependencyError,
    JniLibraryDependencies,
    VersionCatalog,
)

CATALOG = """
[versions]
nativeutils = "1.2.0"

[libraries]
plain = "com.example:plain:1.0"
nativeutils = { module = "com.github.weisj:native-utils", version.ref = "nativeutils" }
jawt = { group = "org.example", name = "jawt", version = "2.0" }
strict-lib = { module = "a:b", version = { strictly = "3.0" } }
no-version = { module = "a:unversioned" }
broken-ref = { module = "a:c", version.ref = "missing" }
"""


def _write_catalog(tmp_path: Path) -> Path:
    p = tmp_path / "libs.versions.toml"
    p.write_text(CATALOG, encoding="utf-8")
    return p


def test_catalog_library_forms(tmp_path: Path) -> None:
    catalog = VersionCatalog.load(_write_catalog(tmp_path))

    assert catalog.descriptor("plain") == DependencyDescriptor("com.example", "plain", "1.0")
    assert catalog.descriptor("nativeutils") == DependencyDescriptor(
        "com.github.weisj", "native-utils", "1.2.0"
    )
    assert catalog.descriptor("jawt") == DependencyDescriptor("org.example", "jawt", "2.0")
    assert catalog.descriptor("strict-lib").version_constraint == "3.0"
    assert catalog.descriptor("no-version").version_constraint == ""


def test_catalog_alias_separators_are_equivalent(tmp_path: Path) -> None:
    catalog = VersionCatalog.load(_write_catalog(tmp_path))
    assert catalog.descriptor("strict_lib") == catalog.descriptor("strict.lib")
    assert "strict-lib" in catalog.aliases()


def test_unknown_alias_fails_on_get(tmp_path: Path) -> None:
    catalog = VersionCatalog.load(_write_catalog(tmp_path))
    provider = catalog.library("does-not-exist")
    with pytest.raises(DependencyError, match="does-not-exist"):
        provider.get()


def test_unknown_version_ref(tmp_path: Path) -> None:
    catalog = VersionCatalog.load(_write_catalog(tmp_path))
    with pytest.raises(DependencyError, match="missing"):
        catalog.descriptor("broken-ref")


def test_missing_catalog(tmp_path: Path) -> None:
    with pytest.raises(DependencyError, match="not found"):
        VersionCatalog.load(tmp_path / "nope.toml")


def test_malformed_string_notation() -> None:
    catalog = VersionCatalog({"libraries": {"bad": "only:two"}})
    with pytest.raises(DependencyError):
        catalog.descriptor("bad")


def test_action_configures_registered_dependency() -> None:
    deps = JniLibraryDependencies()

    def configure(dep):
        dep.transitive = False
        dep.require_capability("g:n-linux:1.0")

    dep = deps.native_implementation("g:n:1.0", configure)
    assert deps.native == [dep]
    assert deps.jvm == []
    assert dep.transitive is False
    assert dep.capabilities == ["g:n-linux:1.0"]


def test_version_ref_in_inline_table() -> None:
    catalog = VersionCatalog(
        {
            "versions": {"jni": "4.0"},
            "libraries": {"jni-lib": {"group": "g", "name": "n", "version": {"ref": "jni"}}},
        }
    )
    assert catalog.descriptor("jni-lib") == DependencyDescriptor("g", "n", "4.0")
