"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with configuration and logging
"""
import os
import sys
import argparse
from typing import List, Optional

from solid_examples import __version__
from solid_examples.config.manager import ConfigurationManager
from solid_examples.domain.core.exceptions import DomainException
from solid_examples.infrastructure.logging.logger import get_logger, setup_logging
from solid_examples.principles import EXAMPLES, load_example

BANNER_WIDTH = 60


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]),
        description="SOLID Examples - wrong and right designs side by side",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                      # List available examples
  %(prog)s run                       # Run every example
  %(prog)s run ocp lsp               # Run selected examples
  %(prog)s --output-dir /tmp run srp # Write the SRP log files to /tmp
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--output-dir', help='Directory for the SRP example log files')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list', help='List available examples')

    run_parser = subparsers.add_parser('run', help='Run examples')
    run_parser.add_argument('examples', nargs='*', metavar='NAME',
                            help=f"Examples to run ({', '.join(EXAMPLES)}); default: all")

    return parser.parse_args(argv)


def list_examples() -> None:
    for name, title in EXAMPLES.items():
        print(f"{name:<5} {title}")


def run_examples(names: List[str], config_manager: ConfigurationManager) -> None:
    """
    Run the named examples in order.

    All names are resolved before any example runs, so an unknown name fails
    without partial output.
    """
    logger = get_logger(__name__)
    modules = [(name.lower(), load_example(name)) for name in names]

    for index, (name, module) in enumerate(modules):
        if index:
            print()
        print("=" * BANNER_WIDTH)
        print(EXAMPLES[name])
        print("=" * BANNER_WIDTH)
        options = config_manager.get_example_options(name)
        logger.info("Running example", example=name, options=options)
        module.run(**options)


def execute_command(args: argparse.Namespace, config_manager: ConfigurationManager) -> None:
    """Execute the parsed command."""
    if args.command == 'list':
        list_examples()
    elif args.command == 'run':
        run_examples(args.examples or list(EXAMPLES), config_manager)
    else:
        raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)

    if not args.command:
        print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
        sys.exit(1)

    try:
        config_manager = ConfigurationManager(args.config)
        overrides = {
            "srp.output_dir": args.output_dir,
            "logging.level": "DEBUG" if args.verbose and not args.log_level else args.log_level,
        }
        config_manager.override(**overrides)
        setup_logging(config_manager.get_logging_config())
    except (DomainException, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger = get_logger(__name__)

    try:
        execute_command(args, config_manager)
    except DomainException as e:
        logger.error("Domain error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        logger.error("I/O error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
