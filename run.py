#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:

    # Play a two-player game on the standard 6x7 board
    python run.py play

    # Play on a bigger board with detailed logging
    python run.py play --rows 8 --cols 9 --debug

    # Replay a list of columns and show the final position
    python run.py replay --moves 3,3,4,4,5,5,6

    # Benchmark engine performance with 5000 iterations
    python run.py benchmark --iterations 5000
"""

import os
import sys

# Add the project root to Python path so the script works from a checkout
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
