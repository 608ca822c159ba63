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

from .context import CliContext
from .namespace import CliNameSpace


# Base class of every jnikit command and subcommand
class CliCommand:
    def description(self) -> str:
        return ""

    def cli(self, argv=None) -> CliNameSpace:
        raise NotImplementedError

    def exec(self, context: CliContext, args: CliNameSpace):
        raise NotImplementedError

    def subcommand_argv(self, argv=None) -> list:
        # Cli strips the subcommand name before dispatching
        return [] if argv is None else list(argv)
