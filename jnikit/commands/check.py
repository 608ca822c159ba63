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
import platform

from jnikit.utils.context.namespace import CliNameSpace
from jnikit.utils.context.context import CliContext
from jnikit.utils.context.command import CliCommand
from jnikit.build_scripts.build_config import load_jnikit_config
from jnikit.build_scripts.jni_utils import host_os_name, targets_host, variant_name
from jnikit.build_scripts.target_machine import TargetMachine, UnknownPlatformError


class Check(CliCommand):
    def description(self) -> str:
        return """
        This is a subcommand to check which target machines the host builds natively.

        The host is matched by operating system family only, set JNIKIT_HOST_OS
        to check as another host.

        Examples:
            jnikit check                    # Check configured targets
            jnikit check linux-x86          # Check the given targets
            jnikit check --verbose          # Also show the host architecture
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="jnikit check",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "targets",
            nargs="*",
            help="Target machines such as linux-x86-64 (default: configured targets)",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed information",
        )
        args, unknown = parser.parse_known_args(
            self.subcommand_argv(argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        config = load_jnikit_config(context.project_dir)
        targets = args.targets or config["TARGETS"]

        print(f"Host OS: {host_os_name()}")
        if args.verbose:
            print(f"Host architecture: {platform.machine()}")
        print("")

        matched = 0
        for text in targets:
            target = TargetMachine.parse(text)
            try:
                variant = variant_name(target)
            except UnknownPlatformError as e:
                print(f"ERROR: {e} (target '{text}')")
                sys.exit(1)
            if targets_host(target):
                matched += 1
                print(f"   ✅ {variant} (host)")
            else:
                print(f"   ➖ {variant}")

        print(f"\n{matched} of {len(targets)} target(s) match the host")
