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
import importlib
import argparse

from jnikit.utils.context.namespace import CliNameSpace
from jnikit.utils.context.context import CliContext
from jnikit.utils.context.command import CliCommand

SCRIPT_PATH = os.path.split(os.path.realpath(__file__))[0]


# Root Class for Command Line Interface
class Cli(CliCommand):
    def description(self) -> str:
        return """jnikit - JNI Library Build Helpers

Per-platform helpers for building JNI libraries on
Windows, Linux and macOS (x86 and x86-64)

USAGE:
    jnikit <command> [options]

COMMANDS:
    check       Show the host platform and which targets it builds natively
    variant     Print variant names and library file names of targets
    deps        Print dependency notations from the version catalog
    flags       Print optimization flags for the active toolchain
    new         Create a new JNI library project

EXAMPLES:
    jnikit check                       # Which configured targets match this host
    jnikit variant linux-x86 macos     # linux-x86  libfoo.so ...
    jnikit deps --native               # Native dependency notations
    jnikit flags --toolchain msvc      # /O2

For more information on a specific command:
    jnikit <command> --help
        """

    def get_command_list(self) -> list:
        arr = []
        for command in os.listdir(os.path.join(SCRIPT_PATH, "commands")):
            if not command.startswith("_") and command.endswith(".py"):
                arr.append(os.path.splitext(os.path.basename(command))[0])
        return sorted(arr)

    def _parser(self, add_help=True) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="jnikit",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
            add_help=add_help,
        )
        parser.add_argument(
            "subcommand",
            metavar=f"{self.get_command_list()}",
            type=str,
            nargs="?" if not add_help else None,
            choices=self.get_command_list(),
        )
        return parser

    def cli(self, argv=None) -> CliNameSpace:
        argv = sys.argv[1:] if argv is None else list(argv)
        # Help for the main command only, not for "jnikit build --help"
        if len(argv) == 1 and argv[0] in ["--help", "-h"]:
            self._parser().print_help()
            sys.exit(0)

        # parse only known args - this will NOT consume subcommand options
        args, unknown = self._parser(add_help=False).parse_known_args(argv, namespace=CliNameSpace())
        args.rest = list(argv)
        if args.subcommand:
            args.rest.remove(args.subcommand)
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        if not args.subcommand:
            print("ERROR: No command specified\n")
            self._parser().print_help()
            sys.exit(1)

        module = importlib.import_module(f"jnikit.commands.{args.subcommand}")
        klass = getattr(module, args.subcommand.capitalize())
        sub_cmd = klass()
        sub_cmd.exec(context, sub_cmd.cli(args.rest))


def main(argv=None):
    cmd = Cli()
    cmd.exec(CliContext(), cmd.cli(argv))


if __name__ == "__main__":
    main()
