"""
Main entry point for the dsn_request package.

Allows running the CLI as: python -m dsn_request
"""

import sys

from dsn_request.cli import main

if __name__ == "__main__":
    sys.exit(main())
