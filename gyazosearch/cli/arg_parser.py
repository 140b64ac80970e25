"""
Argument parsing for the CLI interface.

Provides functions to create and configure the argument parser for the
Gyazo Search command-line interface.
"""

from __future__ import annotations

import argparse

from ..config import DEFAULT_PER_PAGE
from ..utils.validators import validate_per_page


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be 1 or greater, got {value}")
    return number


def _page_size(value: str) -> int:
    number = int(value)
    is_valid, error = validate_per_page(number)
    if not is_valid:
        raise argparse.ArgumentTypeError(error)
    return number


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description='Search your Gyazo images',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
      List your most recent images

  %(prog)s "invoice"
      Search for images matching "invoice"

  %(prog)s "invoice" --pages 3 --per-page 50
      Load three pages of 50 results

  %(prog)s "invoice" --details abc123
      Show metadata and OCR text of one result

  %(prog)s -i
      Interactive mode: type to search, 'm' to load more, 'd N' for details

The access token is read from GYAZO_ACCESS_TOKEN or ~/.gyazosearch/config.json.
        """
    )

    parser.add_argument(
        'query',
        nargs='?',
        default='',
        help='Search text (empty lists recent images)'
    )

    parser.add_argument(
        '--pages',
        type=_positive_int,
        default=1,
        help='Number of pages to load. Default: 1'
    )

    parser.add_argument(
        '--per-page',
        type=_page_size,
        default=None,
        help=f'Images per page. Default: {DEFAULT_PER_PAGE} (or per_page from config)'
    )

    parser.add_argument(
        '--token',
        default=None,
        help='Gyazo access token (overrides environment and config file)'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON'
    )

    parser.add_argument(
        '--details',
        metavar='IMAGE_ID',
        help='Print the detail view of a loaded image'
    )

    parser.add_argument(
        '--open',
        metavar='IMAGE_ID',
        dest='open_id',
        help='Open a loaded image in the browser'
    )

    parser.add_argument(
        '-i', '--interactive',
        action='store_true',
        help='Interactive search prompt'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: List of argument strings (default: sys.argv)

    Returns:
        Parsed arguments as Namespace object

    Examples:
        >>> args = parse_arguments(['cat', '--pages', '2'])
        >>> args.query, args.pages
        ('cat', 2)
    """
    parser = create_parser()
    return parser.parse_args(argv)


__all__ = [
    'create_parser',
    'parse_arguments',
]
