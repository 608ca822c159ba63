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
from jnikit.build_scripts.build_config import get_catalog_path, load_jnikit_config
from jnikit.build_scripts.dependency_manager import (
    DependencyError,
    JniLibraryDependencies,
    ModuleDependencyCapabilitiesHandler,
    VersionCatalog,
)
from jnikit.build_scripts.jni_utils import (
    jvm_lib_implementation,
    native_lib_implementation,
    require_lib_capability,
)


class Deps(CliCommand):
    def description(self) -> str:
        return """
        This is a subcommand to print the dependency notations of the project.

        Aliases listed under [dependencies] of JNIKIT.toml are looked up in the
        version catalog ([jni] catalog, default gradle/libs.versions.toml).

        Examples:
            jnikit deps                     # All dependencies
            jnikit deps --jvm               # JVM implementation dependencies
            jnikit deps --native            # Native implementation dependencies
            jnikit deps --capabilities      # Required capabilities
            jnikit deps --all-aliases       # Every library in the catalog
        """

    def cli(self, argv=None) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="jnikit deps",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument("--jvm", action="store_true", help="Only JVM dependencies")
        parser.add_argument("--native", action="store_true", help="Only native dependencies")
        parser.add_argument(
            "--capabilities", action="store_true", help="Only required capabilities"
        )
        parser.add_argument(
            "--all-aliases",
            action="store_true",
            help="List every library alias of the catalog with its notation",
        )
        args, unknown = parser.parse_known_args(
            self.subcommand_argv(argv), namespace=CliNameSpace()
        )
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        config = load_jnikit_config(context.project_dir)
        show_all = not (args.jvm or args.native or args.capabilities)

        try:
            catalog = VersionCatalog.load(get_catalog_path(config))

            if args.all_aliases:
                for alias in catalog.aliases():
                    dep = catalog.descriptor(alias)
                    print(f"{alias} = {dep.group}:{dep.name}:{dep.version_constraint}")
                return

            dependencies = JniLibraryDependencies()
            capabilities = ModuleDependencyCapabilitiesHandler()
            for alias in config["JVM_DEPENDENCIES"]:
                jvm_lib_implementation(dependencies, catalog.library(alias))
            for alias in config["NATIVE_DEPENDENCIES"]:
                native_lib_implementation(dependencies, catalog.library(alias))
            for alias in config["CAPABILITIES"]:
                require_lib_capability(capabilities, catalog.library(alias))
        except DependencyError as e:
            print(f"ERROR: {e}")
            sys.exit(1)

        if show_all or args.jvm:
            for dep in dependencies.jvm:
                print(f"jvmImplementation {dep.notation}")
        if show_all or args.native:
            for dep in dependencies.native:
                print(f"nativeImplementation {dep.notation}")
        if show_all or args.capabilities:
            for notation in capabilities.required:
                print(f"requireCapability {notation}")
