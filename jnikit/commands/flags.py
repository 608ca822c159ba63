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

import argparse

from jnikit.utils.context.namespace import CliNameSpace
from jnikit.utils.context.context import CliContext
from jnikit.utils.context.command import CliCommand
from jnikit.build_scripts.build_config import DEFAULT_TOOLCHAIN, load_jnikit_config
from jnikit.build_scripts.jni_utils import optimized_binary
from jnikit.build_scripts.toolchain import (
    Provider,
    SourceCompile,
    host_tool_chain,
    toolchain_named,
)


class Flags(CliCommand):
    def description(self) -> str:
        return """
        This is a subcommand to print the optimization flags of a compile step.

        The toolchain is taken from --toolchain, then [jni] toolchain of
        JNIKIT.toml. "auto" detects it from the host compiler ($CC or cc/cl)
        when the flags are printed.

        Examples:
            jnikit flags                        # Detect the host compiler
            jnikit flags --toolchain gcc        # -O2
            jnikit flags --toolchain msvc       # /O2
            jnikit flags --cc clang-17          # Detect from a given compiler
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="jnikit flags",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "--toolchain",
            action="store",
            default=None,
            help="Toolchain name: gcc, mingw, clang, msvc or auto",
        )
        parser.add_argument(
            "--cc",
            action="store",
            default=None,
            help="Compiler command used by auto detection (default: $CC)",
        )
        parser.add_argument(
            "--repeat",
            action="store",
            type=int,
            default=1,
            help="Apply the optimization this many times",
        )
        args, unknown = parser.parse_known_args(
            self.subcommand_argv(argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        toolchain = args.toolchain
        if toolchain is None:
            toolchain = load_jnikit_config(context.project_dir)["TOOLCHAIN"]
        toolchain = toolchain.strip().lower()

        if toolchain == DEFAULT_TOOLCHAIN:
            tool_chain = host_tool_chain(args.cc)
        else:
            tool_chain = Provider.of(toolchain_named(toolchain))

        compile_step = SourceCompile("compileJni", tool_chain)
        for _ in range(args.repeat):
            optimized_binary(compile_step)

        print(" ".join(compile_step.compiler_args.get()))
