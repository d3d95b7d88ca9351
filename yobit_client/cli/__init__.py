"""
Command-line interface for the YoBit client.

Uses focused components for argument parsing and command routing.
"""

import logging

from ..utilities.console import print_error
from ..utilities.constants import YobitError
from .argument_parser import create_cli_parser
from .command_router import create_command_router


def main(argv=None) -> int:
    """
    Main CLI entry point.

    Separates argument parsing from command routing for better organization.
    """
    parser = create_cli_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.parser.print_help()
        return 0

    router = create_command_router()
    try:
        return router.route_command(args)
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        return 130
    except (YobitError, ValueError) as e:
        print_error(str(e))
        return 1

