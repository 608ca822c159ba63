from __future__ import annotations

import os
from pathlib import Path

import pytest

import _testutil  # noqa: F401

from jnikit.build_scripts.build_config import (
    DEFAULT_TARGETS,
    get_catalog_path,
    load_jnikit_config,
)


def test_defaults_when_config_missing(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    config = load_jnikit_config(str(tmp_path))
    assert config["PROJECT_NAME"] == tmp_path.name
    assert config["TARGETS"] == DEFAULT_TARGETS
    assert config["TOOLCHAIN"] == "auto"
    assert config["JVM_DEPENDENCIES"] == []
    assert "JNIKIT.toml not found" in capsys.readouterr().out


def test_config_values(tmp_path: Path) -> None:
    (tmp_path / "JNIKIT.toml").write_text(
        """
[project]
name = "foo"

[jni]
targets = ["linux-x86"]
catalog = "libs.toml"
toolchain = "gcc"

[dependencies]
jvm = ["a"]
native = ["b", "c"]
capabilities = ["d"]
""",
        encoding="utf-8",
    )
    config = load_jnikit_config(str(tmp_path))
    assert config["PROJECT_NAME"] == "foo"
    assert config["TARGETS"] == ["linux-x86"]
    assert config["TOOLCHAIN"] == "gcc"
    assert config["JVM_DEPENDENCIES"] == ["a"]
    assert config["NATIVE_DEPENDENCIES"] == ["b", "c"]
    assert config["CAPABILITIES"] == ["d"]
    assert get_catalog_path(config) == os.path.join(str(tmp_path), "libs.toml")


def test_unparsable_config_raises(tmp_path: Path) -> None:
    (tmp_path / "JNIKIT.toml").write_text("[project\nname = ", encoding="utf-8")
    with pytest.raises(Exception):
        load_jnikit_config(str(tmp_path))
