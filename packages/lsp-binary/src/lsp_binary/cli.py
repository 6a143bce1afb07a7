"""Command-line entry point for resolving and installing language servers.

Prints JSON to stdout so editors and scripts can consume the result:

    $ lsp-binary command --workspace ~/notes
    {"command": "/home/me/.cache/lsp-binary/harper-ls/harper-ls-v1.2.0/harper-ls", "args": ["--stdio"], "env": []}
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from lsp_binary.adapters.local_workspace import LocalWorkspace
from lsp_binary.domain.exceptions import LspBinaryError
from lsp_binary.factories import create_launcher
from lsp_binary.settings import get_installer_settings

logger = logging.getLogger(__name__)

COMMAND = "command"
INITIALIZATION_OPTIONS = "initialization-options"
WORKSPACE_CONFIGURATION = "workspace-configuration"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lsp-binary",
        description="Resolve, install and describe a language server binary",
    )
    parser.add_argument(
        "action",
        choices=[COMMAND, INITIALIZATION_OPTIONS, WORKSPACE_CONFIGURATION],
        help="What to print as JSON",
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        default=Path.cwd(),
        help="Workspace root directory (default: current directory)",
    )
    parser.add_argument(
        "--server-name",
        dest="server_name",
        help="Logical language server name (default: harper-ls)",
    )
    parser.add_argument(
        "--binary-name",
        dest="binary_name",
        help="Executable name (default: the server name)",
    )
    parser.add_argument(
        "--repository",
        help="Release repository in owner/name form",
    )
    parser.add_argument(
        "--install-root",
        dest="install_root",
        type=Path,
        help="Directory holding installed versions",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Argument list without the program name. Defaults to sys.argv.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        settings = get_installer_settings(
            server_name=args.server_name,
            binary_name=args.binary_name,
            repository=args.repository,
            install_root=args.install_root,
        )
        launcher = create_launcher(settings)
        workspace = LocalWorkspace(args.workspace.expanduser())

        if args.action == COMMAND:
            result = launcher.language_server_command(workspace).to_dict()
        elif args.action == INITIALIZATION_OPTIONS:
            result = launcher.initialization_options(workspace)
        else:
            result = launcher.workspace_configuration(workspace)
    except LspBinaryError as e:
        logger.debug("lsp-binary failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    json.dump(result, sys.stdout)
    sys.stdout.write("\n")
    return 0
