"""
Package entry point.

Allows running the application via:

    python -m vitwise

This simply forwards execution to vitwise.cli.main().
"""

from vitwise.cli import main

if __name__ == "__main__":
    main()
