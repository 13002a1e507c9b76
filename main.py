#!/usr/bin/env python
"""CLI for the Sollagarathi word resolver."""

from sollagarathi.cli import main

if __name__ == "__main__":
    main()
