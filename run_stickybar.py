#!/usr/bin/env python3
"""
Sticky sidebar demo launcher.

Run this from the project root to open the demo window.
"""

import sys
from pathlib import Path

# Add the stickybar package directory to Python path
project_root = Path(__file__).parent
stickybar_package = project_root / "stickybar"
sys.path.insert(0, str(stickybar_package))

# Now import and run - imports will work relative to stickybar package
if __name__ == '__main__':
    from run_demo import install_crash_handlers, run_demo, suppress_warnings
    suppress_warnings()
    install_crash_handlers()
    sys.exit(run_demo())
