#!/usr/bin/env python3
"""
Define Manager

Thin entry point around the command-line front end. The logic lives in
the definemgr package:
- Managed define list and its persistence
- Reconciliation of managed defines into each build target
- Single-target and all-target saves

To run: python main.py [command]
"""

from definemgr.cli import run

if __name__ == "__main__":
    run()
