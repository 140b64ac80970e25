"""
Allow running the package with: python -m gyazosearch

By default, launches the GUI. Use 'cli' subcommand for command-line interface.

Examples:
    python -m gyazosearch                    # Launch GUI
    python -m gyazosearch gui                # Launch GUI (explicit)
    python -m gyazosearch cli "invoice"      # Search from the command line
    python -m gyazosearch cli -i             # Interactive search prompt
    python -m gyazosearch config --init      # Create example config file
"""

import sys


def show_config() -> int:
    """Print or initialise the user configuration."""
    from .user_config import get_user_config

    config = get_user_config()

    if '--init' in sys.argv or '-i' in sys.argv:
        if config.config_file_path.exists():
            print(f"✗ Configuration file already exists: {config.config_file_path}")
            return 1
        if config.create_example_config():
            print("✓ Created example configuration file at:")
            print(f"  {config.config_file_path}")
            print("\nAdd your Gyazo access token to this file.")
            return 0
        print("✗ Failed to create configuration file.")
        return 1

    print(f"Configuration file: {config.config_file_path}")
    if config.config_file_path.exists():
        print("Status: ✓ Found")
    else:
        print("Status: ✗ Not found (using defaults)")
        print("\nRun 'python -m gyazosearch config --init' to create one.")

    print("\nCurrent settings:")
    print(f"  access_token: {config.masked_token()}")
    print(f"  per_page: {config.per_page}")
    print(f"  debounce_ms: {config.debounce_ms}")
    print(f"  grid_columns: {config.grid_columns}")
    print(f"  request_timeout: {config.request_timeout}")
    print(f"  api_base_url: {config.api_base_url}")
    return 0


def main():
    if len(sys.argv) > 1 and sys.argv[1] == 'cli':
        # Remove 'cli' from argv so argparse doesn't see it
        sys.argv.pop(1)
        from .cli import main as cli_main
        sys.exit(cli_main())
    elif len(sys.argv) > 1 and sys.argv[1] == 'gui':
        sys.argv.pop(1)
        from .app import main as gui_main
        gui_main()
    elif len(sys.argv) > 1 and sys.argv[1] == 'config':
        sys.argv.pop(1)
        sys.exit(show_config())
    else:
        # Default to GUI
        from .app import main as gui_main
        gui_main()


if __name__ == '__main__':
    main()
