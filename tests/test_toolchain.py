from __future__ import annotations

import pytest

import _testutil  # noqa: F401

from jnikit.build_scripts import toolchain
from jnikit.build_scripts.toolchain import (
    Clang,
    CompilerArgs,
    Gcc,
    Provider,
    UnknownToolChain,
    VisualCpp,
    detect_toolchain,
    host_tool_chain,
    toolchain_named,
)


@pytest.mark.parametrize(
    "name, klass",
    [("gcc", Gcc), ("mingw", Gcc), ("Clang", Clang), ("msvc", VisualCpp), ("cl", VisualCpp)],
)
def test_toolchain_named(name: str, klass: type) -> None:
    assert isinstance(toolchain_named(name), klass)


def test_toolchain_named_unknown() -> None:
    tc = toolchain_named("icc")
    assert isinstance(tc, UnknownToolChain)
    assert tc.name == "icc"


def test_provider_map_is_lazy() -> None:
    seen = []
    provider = Provider(lambda: seen.append("x") or 2).map(lambda v: v * 3)
    assert seen == []
    assert provider.get() == 6
    assert seen == ["x"]


def test_compiler_args_keep_order() -> None:
    args = CompilerArgs()
    args.add("-g")
    args.add_all(Provider.of(["-O2"]))
    args.add_all(["-Wall", "-fPIC"])
    assert args.get() == ["-g", "-O2", "-Wall", "-fPIC"]
    assert len(args) == 4


@pytest.mark.parametrize(
    "banner, klass",
    [
        ("gcc (Ubuntu 13.2.0-4ubuntu3) 13.2.0\nCopyright (C) 2023 Free Software Foundation, Inc.", Gcc),
        ("Apple clang version 15.0.0 (clang-1500.3.9.4)\nTarget: arm64-apple-darwin23.4.0", Clang),
        ("Microsoft (R) C/C++ Optimizing Compiler Version 19.38.33133 for x64", VisualCpp),
    ],
)
def test_detect_toolchain_from_banner(monkeypatch: pytest.MonkeyPatch, banner: str, klass: type) -> None:
    monkeypatch.setattr(toolchain, "exec_probe", lambda args: (0, banner))
    assert isinstance(detect_toolchain("cc"), klass)


def test_detect_toolchain_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(toolchain, "exec_probe", lambda args: (127, "No such file or directory"))
    tc = detect_toolchain("missing-cc")
    assert isinstance(tc, UnknownToolChain)
    assert tc.name == "missing-cc"


def test_detect_toolchain_uses_cc_env(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = []

    def fake_probe(args):
        seen.append(args)
        return 0, "clang version 17.0.6"

    monkeypatch.setenv("CC", "clang-17")
    monkeypatch.setattr(toolchain, "exec_probe", fake_probe)
    assert isinstance(detect_toolchain(), Clang)
    assert seen == [["clang-17", "--version"]]


def test_host_tool_chain_defers_detection(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = []

    def fake_probe(args):
        seen.append(args)
        return 0, "gcc (GCC) 14.1.1"

    monkeypatch.setattr(toolchain, "exec_probe", fake_probe)
    provider = host_tool_chain("gcc")
    assert seen == []
    assert isinstance(provider.get(), Gcc)
    assert seen == [["gcc", "--version"]]
