"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Wiring of the lesson service through the DI container
"""
import argparse
import os
import sys
from typing import List, Optional

from solidkit._package import DESCRIPTION, PACKAGE_NAME, __version__
from solidkit.application.catalog import Principle
from solidkit.application.lesson_service import LessonService
from solidkit.cli.formatters import format_output
from solidkit.config.manager import ConfigurationManager
from solidkit.domain.base.exceptions import DomainException
from solidkit.infrastructure.di.container import DIContainer
from solidkit.infrastructure.di.services import register_all_services
from solidkit.infrastructure.logging.logger import get_logger, setup_logging

PRINCIPLE_CHOICES = [principle.value for principle in Principle]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else PACKAGE_NAME,
        description=f"{PACKAGE_NAME} - {DESCRIPTION}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s lessons list                      # List all lessons
  %(prog)s lessons show lsp                  # Explain the Liskov lesson
  %(prog)s run dip --variant mysql alice     # Create a user through MySQL
  %(prog)s check --format table              # Check every lesson
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=['json', 'yaml', 'table'],
                        default='json', help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    subparsers.required = True

    # Lessons
    lessons_parser = subparsers.add_parser('lessons', help='Browse lessons')
    lessons_subparsers = lessons_parser.add_subparsers(dest='action', help='Lesson actions')
    lessons_subparsers.required = True
    lessons_subparsers.add_parser('list', help='List all lessons')
    lessons_show = lessons_subparsers.add_parser('show', help='Show lesson details')
    lessons_show.add_argument('principle', choices=PRINCIPLE_CHOICES, help='Principle to show')

    # Run
    run_parser = subparsers.add_parser('run', help="Run a lesson's consumer")
    run_parser.add_argument('principle', choices=PRINCIPLE_CHOICES, help='Principle to run')
    run_parser.add_argument('--variant', help='Variant to inject (defaults to the configured one)')
    run_parser.add_argument('inputs', nargs='*', help="Inputs for the consumer (defaults to the lesson's samples)")

    # Check
    check_parser = subparsers.add_parser('check', help='Check lessons against the design rules')
    check_parser.add_argument('principle', nargs='?', choices=PRINCIPLE_CHOICES,
                              help='Principle to check (all if omitted)')

    args, extras = parser.parse_known_args(argv)
    if extras:
        # argparse leaves run inputs that follow --variant unconsumed
        if args.command != 'run' or any(extra.startswith('--') for extra in extras):
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
        args.inputs = list(args.inputs) + extras
    return args


def build_lesson_service(config_manager: ConfigurationManager) -> LessonService:
    """Wire the lesson service through the composition root."""
    container = register_all_services(DIContainer(), config_manager)
    return container.get(LessonService)


def execute_command(args: argparse.Namespace, service: LessonService):
    """Route parsed arguments to the lesson service."""
    if args.command == 'lessons':
        if args.action == 'list':
            return {"lessons": service.list_lessons()}
        return service.describe(Principle.parse(args.principle))

    if args.command == 'run':
        return service.run(Principle.parse(args.principle), args.variant, args.inputs)

    if args.command == 'check':
        principle = Principle.parse(args.principle) if args.principle else None
        return service.check(principle)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)

    try:
        config_manager = ConfigurationManager(args.config)
        logging_config = config_manager.get_logging_config()
        if args.log_level:
            logging_config = logging_config.model_copy(update={"level": args.log_level})
        setup_logging(logging_config)
        logger = get_logger(__name__)

        service = build_lesson_service(config_manager)
        result = execute_command(args, service)
    except DomainException as e:
        get_logger(__name__).error(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_output(result, args.format))

    if args.command == 'check' and not result["passed"]:
        logger.warning("One or more lessons failed their conformance check")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
