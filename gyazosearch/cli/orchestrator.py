"""
CLI workflow orchestration for Gyazo Search.

Provides the CLIOrchestrator class that coordinates the CLI workflow
from argument parsing through searching, reporting and the optional
interactive loop.
"""

from __future__ import annotations

import logging
import sys
import webbrowser

from ..client import GyazoClient
from ..models import Notice, NoticeKind
from ..search import SearchSession
from ..user_config import get_user_config
from ..utils.redaction import install_token_filter
from .arg_parser import parse_arguments
from .interactive import confirm, prompt_for_token, run_interactive
from .reporting import print_detail, print_notice, print_results, results_json


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure logging.

    Args:
        verbose: Enable verbose (DEBUG level) logging
        quiet: Only show errors

    Returns:
        Configured logger instance
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    install_token_filter()
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI search workflow.

    Manages the lifecycle from argument parsing through fetching,
    reporting and the interactive prompt.
    """

    def __init__(self, argv=None):
        """Initialize the orchestrator."""
        self.argv = argv
        self.logger = None
        self.args = None
        self.session = None
        self.notices: list[Notice] = []

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)

        Workflow phases:
        1. Setup & argument parsing
        2. Configuration (access token, page size)
        3. Search (first page plus any extra pages)
        4. Reporting
        5. Interactive loop (if requested)
        """
        exit_code = self._setup_phase()
        if exit_code != 0:
            return exit_code

        try:
            exit_code = self._configure_phase()
            if exit_code != 0:
                return exit_code

            exit_code = self._search_phase()
            if exit_code != 0:
                return exit_code

            exit_code = self._report_phase()
            if exit_code != 0:
                return exit_code

            if self.args.interactive:
                run_interactive(self.session)
        finally:
            if self.session is not None:
                self.session.close()

        return 0

    def _on_notice(self, notice: Notice) -> None:
        self.notices.append(notice)
        print_notice(notice)

    def _setup_phase(self) -> int:
        """
        Phase 1: Parse arguments and setup logging.

        Returns:
            0 for success, non-zero for error
        """
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)
        return 0

    def _configure_phase(self) -> int:
        """
        Phase 2: Resolve the access token and build the session.

        Returns:
            0 for success, non-zero for error
        """
        config = get_user_config()
        token = self.args.token or config.access_token

        if not token and self.args.interactive and sys.stdin.isatty():
            token = prompt_for_token()
            if token and confirm(f"Save token to {config.config_file_path}?"):
                config.set_access_token(token)

        per_page = self.args.per_page or config.per_page
        client = GyazoClient(token, base_url=config.api_base_url, timeout=config.request_timeout)
        self.session = SearchSession(
            client,
            per_page=per_page,
            debounce_ms=config.debounce_ms,
            on_notice=self._on_notice,
        )
        return 0

    def _received(self, kind: NoticeKind) -> bool:
        return any(n.kind is kind for n in self.notices)

    def _search_phase(self) -> int:
        """
        Phase 3: Load the requested pages.

        Returns:
            0 for success, 1 if no access token is configured or a fetch failed
        """
        self.session.load_initial(self.args.query)
        if self._received(NoticeKind.CONFIGURATION_MISSING):
            self.logger.error(
                "Set GYAZO_ACCESS_TOKEN, pass --token, or run "
                "'python -m gyazosearch config --init' and edit the file"
            )
            return 1
        if self._received(NoticeKind.FETCH_FAILED):
            self.logger.error(f"Could not load images for {self.args.query!r}")
            return 1

        for _ in range(self.args.pages - 1):
            page_before = self.session.snapshot().page
            self.session.load_more()
            if self.session.snapshot().page == page_before:
                break
        if self._received(NoticeKind.FETCH_FAILED):
            self.logger.error("Could not load all requested pages")
            return 1
        return 0

    def _report_phase(self) -> int:
        """
        Phase 4: Print results, details, or open an image.

        Returns:
            0 for success, 1 if a requested image isn't loaded
        """
        state = self.session.snapshot()

        if self.args.json:
            print(results_json(state))
        elif not self.args.details and not self.args.open_id:
            print_results(state)

        for image_id in (self.args.details, self.args.open_id):
            if image_id and state.find(image_id) is None:
                self.logger.error(f"Image {image_id} is not among the loaded results")
                return 1

        if self.args.details:
            print_detail(state.find(self.args.details))
        if self.args.open_id:
            webbrowser.open(state.find(self.args.open_id).permalink_url)

        return 0


__all__ = ['CLIOrchestrator', 'setup_logging']
