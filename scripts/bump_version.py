"""
Replace a version literal across the workspace manifests and binaries.
Usage:
  py scripts/bump_version.py old_version new_version
"""
from __future__ import annotations
import sys
from pathlib import Path

# Make the verbump package importable from a checkout
root_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root_dir))

from verbump.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
