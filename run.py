#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:
    python run.py play
    python run.py play --player1 ai --player2 ai --columns 9 --connect 5
    python run.py --debug-level info simulate --games 500 --seed 7
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
