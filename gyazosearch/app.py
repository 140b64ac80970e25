#!/usr/bin/env python3
"""
Gyazo Search - GUI Application
==============================
A web-based interface for browsing and searching your Gyazo images.

Run with: python -m gyazosearch.app
Or: python -m gyazosearch gui

Options:
    -q, --quiet     Quiet mode - suppress all output except errors
    -v, --verbose   Verbose mode - show all Flask request logs
    -p, --port      Port to run on (default: 5000)
    --no-browser    Don't auto-open browser
"""

import argparse
import atexit
import logging
import os
import threading
import webbrowser
from typing import Optional

from flask import Flask

from .api import api
from .client import GyazoClient
from .cli.orchestrator import setup_logging
from .search import SearchSession
from .user_config import get_user_config


# Logging levels
LOG_QUIET = 0    # No output except errors
LOG_MINIMAL = 1  # Startup info only (default)
LOG_VERBOSE = 2  # All Flask request logs

_logger = logging.getLogger(__name__)


def create_session() -> SearchSession:
    """Build a search session from the user configuration."""
    config = get_user_config()
    client = GyazoClient(
        config.access_token,
        base_url=config.api_base_url,
        timeout=config.request_timeout,
    )
    return SearchSession(client, per_page=config.per_page, debounce_ms=config.debounce_ms)


def create_app(session: Optional[SearchSession] = None, log_level: int = LOG_MINIMAL) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        session: Search session to serve (built from user config if None)
        log_level: Logging verbosity level

    Returns:
        Configured Flask app instance
    """
    package_dir = os.path.dirname(os.path.abspath(__file__))
    template_dir = os.path.join(package_dir, 'templates')

    app = Flask(__name__, template_folder=template_dir)
    app.config['SEARCH_SESSION'] = session if session is not None else create_session()
    app.config['GRID_COLUMNS'] = get_user_config().grid_columns

    if log_level < LOG_VERBOSE:
        # Suppress Flask's default request logging
        log = logging.getLogger('werkzeug')
        log.setLevel(logging.ERROR if log_level == LOG_QUIET else logging.WARNING)

    app.register_blueprint(api)

    return app


def suppress_flask_banner():
    """Suppress Flask's development server banner and startup messages."""
    try:
        import flask.cli
        flask.cli.show_server_banner = lambda *args, **kwargs: None
    except (ImportError, AttributeError):
        pass

    logging.getLogger('werkzeug').setLevel(logging.ERROR)


def main():
    """Main entry point for the GUI application."""
    parser = argparse.ArgumentParser(
        description='Gyazo Search - GUI',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Quiet mode - suppress all output except errors'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose mode - show all Flask request logs'
    )
    parser.add_argument(
        '-p', '--port',
        type=int,
        default=5000,
        help='Port to run the server on (default: 5000)'
    )
    parser.add_argument(
        '--no-browser',
        action='store_true',
        help='Do not automatically open browser'
    )

    args = parser.parse_args()

    if args.quiet:
        log_level = LOG_QUIET
    elif args.verbose:
        log_level = LOG_VERBOSE
    else:
        log_level = LOG_MINIMAL

    setup_logging(verbose=args.verbose, quiet=args.quiet)

    port = args.port
    url = f'http://localhost:{port}'

    if log_level >= LOG_MINIMAL:
        print()
        print("  ╔══════════════════════════════════════╗")
        print("  ║          GYAZO SEARCH - GUI          ║")
        print("  ╚══════════════════════════════════════╝")
        print()
        print(f"  Server running at: {url}")
        if not args.no_browser:
            print("     └─ Opening in browser...")
        print()
        print("  Press Ctrl+C to stop")
        print()

    if log_level < LOG_VERBOSE:
        suppress_flask_banner()

    app = create_app(log_level=log_level)
    session = app.config['SEARCH_SESSION']
    atexit.register(session.close)

    # First page of recent images; a missing token queues a notice for the page
    session.start()

    if not args.no_browser:
        threading.Timer(1.5, lambda: webbrowser.open(url)).start()

    try:
        app.run(
            host='127.0.0.1',
            port=port,
            debug=False,
            threaded=True,
            use_reloader=False
        )
    except KeyboardInterrupt:
        if log_level >= LOG_MINIMAL:
            print("\n  Server stopped\n")


if __name__ == '__main__':
    main()
