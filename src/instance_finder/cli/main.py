"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the instance finder service
"""
import argparse
import os
import sys
import traceback
from typing import Any, Dict, List, Optional

from instance_finder import __version__
from instance_finder.cli.formatters import format_output
from instance_finder.domain.core.exceptions import DomainException
from instance_finder.domain.instance.identifier import classify
from instance_finder.helpers.logger import get_logger
from instance_finder.infrastructure.exceptions import InfrastructureError

FORMAT_CHOICES = ['json', 'yaml', 'table', 'list']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or "instance-finder",
        description="Resolve identifiers into instances reachable through AWS Systems Manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                          # All SSM-online instances
  %(prog)s find i-0abc1234def567890      # By instance ID
  %(prog)s find 10.0.1.15                # By private IP
  %(prog)s find web-01 --format table    # By Name tag
  %(prog)s classify ip-10-0-0-5.ec2.internal
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path')
    parser.add_argument('--region', help='AWS region')
    parser.add_argument('--profile', help='AWS named profile')
    parser.add_argument('--timeout', type=float, help='Timeout for each AWS call, in seconds')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES, default='json', help='Output format')
    parser.add_argument('--quiet', action='store_true', help='Suppress error output')
    parser.add_argument('--verbose', action='store_true', help='Print tracebacks on errors')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list', help='List all instances online in SSM')

    find_parser = subparsers.add_parser('find', help='Find instances by identifier')
    find_parser.add_argument('identifier',
                             help='Instance ID, IP address, DNS name or Name tag')

    classify_parser = subparsers.add_parser('classify',
                                            help='Show which filter an identifier maps to')
    classify_parser.add_argument('identifier', help='Identifier to classify')

    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Map global CLI options onto configuration keys."""
    return {
        'aws': {
            'region': args.region,
            'profile': args.profile,
        },
        'logging': {
            'level': args.log_level,
        },
        'timeout_seconds': args.timeout,
    }


def execute_command(args: argparse.Namespace, app) -> Dict[str, Any]:
    """Execute the selected command and return serializable output."""
    if args.command == 'list':
        instances = app.finder.find_all()
        return {'instances': [i.to_dict() for i in instances]}
    if args.command == 'find':
        instances = app.finder.find_by_identifier(args.identifier)
        return {'instances': [i.to_dict() for i in instances]}
    if args.command == 'classify':
        return {'filter': classify(args.identifier).to_dict()}
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        if not args.command:
            print("Error: No command specified. Use --help for usage information.")
            sys.exit(1)

        try:
            from instance_finder.bootstrap import create_application
            app = create_application(args.config, build_overrides(args))
        except DomainException as e:
            if not args.quiet:
                print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        logger = get_logger(__name__)

        try:
            result = execute_command(args, app)
            print(format_output(result, args.format))
        except (DomainException, InfrastructureError) as e:
            logger.debug("Command failed", command=args.command, error=str(e))
            if args.verbose:
                traceback.print_exc()
            if not args.quiet:
                print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
