"""
Run TORAT from a source checkout without installing it.

Usage:
    python scripts/torat.py -h
    python scripts/torat.py -s NH -d data.csv -i target.txt -f out.txt
    python scripts/torat.py -d data.csv -l 123456789
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from orchestrator.cli import main


if __name__ == "__main__":
    sys.exit(main())
