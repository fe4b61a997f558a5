#!/usr/bin/env python3
"""
Deploy the SBT contract (or any profiled contract) and print its address.

Usage:
    python scripts/deploy.py --network tester --param name=MyToken --param symbol=MTK --param version=1.0
    python scripts/deploy.py --network sepolia --env-file .env

Set TOKEN_NAME, TOKEN_SYMBOL and TOKEN_VERSION in the environment (or pass
--param) before running; blank values are rejected before anything is sent.
"""

import sys
from pathlib import Path

# Allow running from a checkout without installing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from contract_deployer.deploy.cli import main


if __name__ == "__main__":
    sys.exit(main())
