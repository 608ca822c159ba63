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

"""Build script helpers for JNI libraries."""

__all__ = [
    "build_config",
    "dependency_manager",
    "jni_utils",
    "target_machine",
    "toolchain",
]
