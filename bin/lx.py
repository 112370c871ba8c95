#!/usr/bin/env python3
"""
The Helix Utility Tool - Standalone Wrapper

This is a standalone wrapper that makes the tool callable
without installing the console script.

Usage:
    ./bin/lx.py [--dev] <command>
    ./bin/lx.py --help

Examples:
    # Install a new instance
    ./bin/lx.py install

    # Start the development stack
    ./bin/lx.py --dev start

    # Remove the release images
    ./bin/lx.py clean
"""

from lx.cli import cli

if __name__ == "__main__":
    cli()
