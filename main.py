#!/usr/bin/env python3
"""
ABOUTME: Entry point for the env-binder CLI
ABOUTME: Simple wrapper that imports and runs the modular CLI
"""

from env_binder.cli import main

if __name__ == "__main__":
    main()
