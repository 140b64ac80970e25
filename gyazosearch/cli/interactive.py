"""
Interactive prompts for the CLI interface.

Provides the access token prompt and the interactive search loop.
"""

from __future__ import annotations

import getpass
import webbrowser
from typing import Callable

from ..search import SearchSession
from .reporting import print_detail, print_results

HELP_TEXT = """
Commands:
  <text>      Search for <text>
  /           List recent images (clear the search)
  m           Load more images
  d <number>  Show details of result <number>
  o <number>  Open result <number> in the browser
  ?           Show this help
  q           Quit
"""


def prompt_for_token() -> str:
    """
    Interactively prompt for a Gyazo access token.

    Returns:
        The entered token ('' if the user just pressed Enter)
    """
    print("\nNo Gyazo access token is configured.")
    print("Create one at https://gyazo.com/oauth/applications")
    return getpass.getpass("Access token (input hidden, Enter to skip): ").strip()


def confirm(question: str, input_func: Callable[[str], str] = input) -> bool:
    """
    Ask a yes/no question.

    Returns:
        True if user confirms (types 'y'), False otherwise
    """
    answer = input_func(f"{question} [y/N]: ")
    return answer.strip().lower() == 'y'


def _result_at(session: SearchSession, number: str):
    try:
        index = int(number)
    except ValueError:
        return None
    results = session.snapshot().results
    if 1 <= index <= len(results):
        return results[index - 1]
    return None


def run_interactive(
    session: SearchSession,
    input_func: Callable[[str], str] = input,
    open_url: Callable[[str], object] = webbrowser.open,
) -> None:
    """
    Run the interactive search loop until the user quits.

    Each entered line is a committed query; there is no debounce at a
    line-based prompt.
    """
    print(HELP_TEXT)
    while True:
        try:
            line = input_func("search> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return

        if not line:
            continue
        if line in ('q', 'quit', 'exit'):
            return
        if line == '?':
            print(HELP_TEXT)
        elif line == '/':
            session.load_initial('')
            print_results(session.snapshot())
        elif line == 'm':
            before = session.snapshot().result_count
            session.load_more()
            state = session.snapshot()
            if state.result_count > before:
                print_results(state)
        elif line.startswith('d ') and line[2:].strip().isdigit():
            image = _result_at(session, line[2:].strip())
            if image is None:
                print(f"No result #{line[2:].strip()}")
            else:
                print_detail(image)
        elif line.startswith('o ') and line[2:].strip().isdigit():
            image = _result_at(session, line[2:].strip())
            if image is None:
                print(f"No result #{line[2:].strip()}")
            else:
                open_url(image.permalink_url)
        else:
            session.load_initial(line)
            print_results(session.snapshot())


__all__ = [
    'HELP_TEXT',
    'prompt_for_token',
    'confirm',
    'run_interactive',
]
