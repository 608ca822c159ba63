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

import sys
import argparse

from jnikit.utils.context.namespace import CliNameSpace
from jnikit.utils.context.context import CliContext
from jnikit.utils.context.command import CliCommand
from jnikit.build_scripts.build_config import load_jnikit_config
from jnikit.build_scripts.jni_utils import library_file_name_for, variant_name
from jnikit.build_scripts.target_machine import TargetMachine, UnknownPlatformError


class Variant(CliCommand):
    def description(self) -> str:
        return """
        This is a subcommand to print the variant name and the shared library
        file name of each target machine.

        Targets are given as <os>-<arch>, an architecture of x86 is 32-bit,
        anything else is x86-64. Without targets, [jni] targets of JNIKIT.toml
        are used.

        Examples:
            jnikit variant                          # Configured targets
            jnikit variant linux-x86 windows-x86-64
            jnikit variant osx-x86-64 --name foo    # macos-x86-64  libfoo.dylib
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="jnikit variant",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "targets",
            nargs="*",
            help="Target machines such as linux-x86-64 (default: configured targets)",
        )
        parser.add_argument(
            "--name",
            action="store",
            default=None,
            help="Library name (default: [project] name)",
        )
        args, unknown = parser.parse_known_args(
            self.subcommand_argv(argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        config = load_jnikit_config(context.project_dir)
        name = args.name or config["PROJECT_NAME"]
        targets = args.targets or config["TARGETS"]

        for text in targets:
            target = TargetMachine.parse(text)
            try:
                variant = variant_name(target)
                file_name = library_file_name_for(name, target.operating_system_family)
            except UnknownPlatformError as e:
                print(f"ERROR: {e} (target '{text}')")
                sys.exit(1)
            print(f"{variant}\t{file_name}")
