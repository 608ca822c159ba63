#!/usr/bin/env python3
# -- coding: utf-8 --
#
# build_config.py
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
Project configuration loaded from JNIKIT.toml.

Example:

    [project]
    name = "darklaf-native"

    [jni]
    targets = ["windows-x86-64", "windows-x86", "linux-x86-64", "macos-x86-64"]
    catalog = "gradle/libs.versions.toml"
    toolchain = "auto"

    [dependencies]
    jvm = ["nativeutils"]
    native = ["jawt"]
    capabilities = []
"""

import os
import sys

if sys.version_info >= (3, 11, 0, "alpha", 7):
    import tomllib
else:
    # For Python < 3.11, try to import tomli as fallback
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None

CONFIG_FILE_NAME = "JNIKIT.toml"

DEFAULT_TARGETS = ["windows-x86-64", "linux-x86-64", "macos-x86-64"]
DEFAULT_CATALOG = "gradle/libs.versions.toml"
DEFAULT_TOOLCHAIN = "auto"


def default_config(project_dir):
    return {
        "PROJECT_DIR": project_dir,
        "PROJECT_NAME": os.path.basename(os.path.abspath(project_dir)),
        "TARGETS": list(DEFAULT_TARGETS),
        "CATALOG": DEFAULT_CATALOG,
        "TOOLCHAIN": DEFAULT_TOOLCHAIN,
        "JVM_DEPENDENCIES": [],
        "NATIVE_DEPENDENCIES": [],
        "CAPABILITIES": [],
    }


def load_jnikit_config(project_dir=None):
    """
    Load configuration from JNIKIT.toml file.

    Falls back to default values if JNIKIT.toml is not found or no TOML
    reader is available. A file that exists but can not be parsed is an error.
    """
    project_dir = project_dir or os.getcwd()
    config_file = os.path.join(project_dir, CONFIG_FILE_NAME)
    config = default_config(project_dir)

    if not os.path.isfile(config_file):
        print(f"   ⚠️  Warning: {CONFIG_FILE_NAME} not found at {config_file}")
        print("   ⚠️  Using default configuration values")
        return config

    if not tomllib:
        print("   ⚠️  Warning: tomllib not available. Install 'tomli' for Python < 3.11")
        print("   ⚠️  Using default configuration values")
        return config

    try:
        with open(config_file, "rb") as f:
            toml_data = tomllib.load(f)
    except Exception as e:
        print(f"   ❌ Failed to parse {config_file}: {e}")
        raise

    project = toml_data.get("project", {})
    jni = toml_data.get("jni", {})
    dependencies = toml_data.get("dependencies", {})

    config["PROJECT_NAME"] = project.get("name", config["PROJECT_NAME"])
    config["TARGETS"] = list(jni.get("targets", config["TARGETS"]))
    config["CATALOG"] = jni.get("catalog", config["CATALOG"])
    config["TOOLCHAIN"] = jni.get("toolchain", config["TOOLCHAIN"])
    config["JVM_DEPENDENCIES"] = list(dependencies.get("jvm", []))
    config["NATIVE_DEPENDENCIES"] = list(dependencies.get("native", []))
    config["CAPABILITIES"] = list(dependencies.get("capabilities", []))
    return config


def get_catalog_path(config):
    catalog = config["CATALOG"]
    if os.path.isabs(catalog):
        return catalog
    return os.path.join(config["PROJECT_DIR"], catalog)
