"""
Package entry point.

Allows running the application via:

    python -m weekview

This simply forwards execution to weekview.cli.main().
"""

from weekview.cli import main

if __name__ == "__main__":
    main()
