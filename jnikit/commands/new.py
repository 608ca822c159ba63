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

import os
import sys
import argparse
from copier import run_copy
from copier.errors import CopierError

from jnikit.utils.context.namespace import CliNameSpace
from jnikit.utils.context.context import CliContext
from jnikit.utils.context.command import CliCommand
from jnikit.build_scripts.build_config import DEFAULT_TARGETS
from jnikit.build_scripts.jni_utils import variant_name
from jnikit.build_scripts.target_machine import TargetMachine, UnknownPlatformError


def parse_data_items(items) -> dict:
    """Parse KEY=VALUE items, "true"/"false" become booleans."""
    data = {}
    for item in items or []:
        if "=" not in item:
            continue
        key, value = item.split("=", 1)
        if value.lower() == "true":
            value = True
        elif value.lower() == "false":
            value = False
        data[key] = value
    return data


class New(CliCommand):
    def description(self) -> str:
        return """
        Create a new JNI library project in a new directory.

        The project is rendered from a copier template. By default the command
        runs in non-interactive mode using default values, use --interact to
        be prompted.

        Examples:
            jnikit new my-lib --template-url=gh:user/jni-template
            jnikit new my-lib --template-url=../jni-template --targets linux-x86-64 macos-x86-64
            jnikit new my-lib --template-url=gh:user/jni-template --vcs-ref=v1.2.0
            jnikit new my-lib --template-url=gh:user/jni-template --data jvm_target=11
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="jnikit new",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "path", help="Directory path where the new project will be created"
        )
        parser.add_argument(
            "--template-url",
            action="store",
            required=True,
            help="Template repository URL or local path",
        )
        parser.add_argument(
            "--vcs-ref",
            action="store",
            default=None,
            help="Template tag or branch to use (default: latest tag)",
        )
        parser.add_argument(
            "--targets",
            nargs="+",
            default=DEFAULT_TARGETS,
            help="Target machines of the library",
        )
        parser.add_argument(
            "--data",
            action="append",
            help="Template data in KEY=VALUE format (can be used multiple times)",
        )
        parser.add_argument(
            "--interact",
            action="store_true",
            help="Enable interactive mode with prompts (default is non-interactive)",
        )
        args, unknown = parser.parse_known_args(
            self.subcommand_argv(argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        print(f"Creating new jnikit project in '{args.path}'...")

        if os.path.exists(args.path):
            print(f"ERROR: Directory '{args.path}' already exists.")
            sys.exit(1)

        try:
            variants = [variant_name(TargetMachine.parse(t)) for t in args.targets]
        except UnknownPlatformError as e:
            print(f"ERROR: {e}")
            sys.exit(1)

        data = {
            "project_name": os.path.basename(os.path.abspath(args.path)),
            "targets": variants,
        }
        data.update(parse_data_items(args.data))

        try:
            run_copy(
                args.template_url,
                args.path,
                vcs_ref=args.vcs_ref,
                data=data,
                unsafe=True,
                defaults=not args.interact,
                overwrite=True,
            )
        except (CopierError, OSError) as e:
            # git failures surface as plumbum ProcessExecutionError, an OSError
            print(f"ERROR: Failed to render template '{args.template_url}': {e}")
            sys.exit(1)

        print(f"\nSuccessfully created new jnikit project: '{args.path}'")
        print(f"\nNext steps:")
        print(f"  cd {args.path}")
        print(f"  jnikit check")
