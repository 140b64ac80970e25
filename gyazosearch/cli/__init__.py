"""
CLI package for Gyazo Search.

Provides the command-line interface for listing and searching Gyazo
images, with paging, JSON output, a detail view and an interactive
prompt.

Public API:
- main: Entry point for CLI execution
- CLIOrchestrator: CLI workflow orchestration class
- print_results: Function to display loaded results
"""

from __future__ import annotations

from .orchestrator import CLIOrchestrator, setup_logging
from .arg_parser import create_parser, parse_arguments
from .reporting import print_results, print_detail, print_notice, results_json
from .interactive import run_interactive, prompt_for_token, confirm


def main(argv=None) -> int:
    """
    Main entry point for the CLI.

    Delegates to CLIOrchestrator to execute the complete workflow.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    orchestrator = CLIOrchestrator(argv)
    return orchestrator.run()


__all__ = [
    # Main entry point
    'main',
    # Core classes
    'CLIOrchestrator',
    # Utilities
    'setup_logging',
    'create_parser',
    'parse_arguments',
    'print_results',
    'print_detail',
    'print_notice',
    'results_json',
    'run_interactive',
    'prompt_for_token',
    'confirm',
]
