"""
Deploy a contract from the command line.

Usage:
    python -m contract_deployer.deploy.cli --network tester \
        --param name=MyToken --param symbol=MTK --param version=1.0

    deploy-contract --network sepolia --env-file .env --artifact artifacts/contracts/SBT.sol/SBT.json

Environment Variables:
    - TOKEN_NAME / TOKEN_SYMBOL / TOKEN_VERSION: SBT constructor parameters
    - DEPLOY_NETWORK: network name (tester, localhost, sepolia, goerli)
    - RPC_URL or <NETWORK>_RPC_URL: RPC endpoint override
    - DEPLOYER_PRIVATE_KEY / PRIVATE_KEY: sign locally with this key
    - DEPLOYER: node account index or address (default: 0)
    - SOLC_VERSION: compiler version used with --source
    - DEPLOY_LOG_DIR: directory for log files

Exit status is 0 after a confirmed deployment (or a dry run) and 1 on any error.
"""

import argparse
import sys
import traceback

from dotenv import load_dotenv

from contract_deployer.config.contracts import DEFAULT_CONTRACT
from contract_deployer.config.deployment import ConfigurationError, build_deployment_config, parse_param_pairs
from contract_deployer.config.logging_config import get_deploy_logger
from contract_deployer.config.network import NETWORKS

from .runner import run_deployment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deploy a parameterized contract and report its address")
    parser.add_argument(
        "--network",
        type=str,
        default=None,
        help=f"Target network: {', '.join(NETWORKS)} (default: DEPLOY_NETWORK or tester)",
    )
    parser.add_argument("--contract", default=None, help=f"Contract identifier (default: {DEFAULT_CONTRACT})")
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Named constructor parameter, e.g. --param name=MyToken (repeatable)",
    )
    parser.add_argument(
        "--arg",
        action="append",
        default=[],
        metavar="VALUE",
        help="Positional constructor argument, in order (repeatable)",
    )
    parser.add_argument("--artifact", default=None, help="Path to artifact JSON (abi + bytecode)")
    parser.add_argument("--source", default=None, help="Solidity source to compile with py-solc-x instead of an artifact")
    parser.add_argument("--solc-version", default=None, help="solc version for --source (default: SOLC_VERSION or 0.8.24)")
    parser.add_argument("--deployer", default=None, help="Node account index or address (default: DEPLOYER or 0)")
    parser.add_argument("--env-file", default=None, help="Path to a .env file to load first")
    parser.add_argument("--timeout", type=float, default=None, help="Seconds to wait for the receipt (default: 120)")
    parser.add_argument("--dry-run", action="store_true", help="Estimate gas without submitting")
    parser.add_argument("--deployments-dir", default=None, help="Where to save deployment records (default: deployments)")
    parser.add_argument("--no-save", action="store_true", help="Do not write a deployment record")
    parser.add_argument("--log-dir", default=None, help="Directory for log files (default: DEPLOY_LOG_DIR or logs)")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def main(argv=None) -> int:
    """Main deployment CLI. Returns the process exit status."""
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        # argparse exits 2 on usage errors; keep the 0/1 contract
        return 1 if e.code else 0

    if args.env_file:
        load_dotenv(args.env_file, override=False)

    logger = get_deploy_logger(debug=args.debug, log_dir=args.log_dir)

    try:
        config = build_deployment_config(
            contract=args.contract,
            params=parse_param_pairs(args.param),
            args=args.arg,
            network=args.network,
            deployer=args.deployer,
            artifact_path=args.artifact,
            source_path=args.source,
            solc_version=args.solc_version,
            timeout=args.timeout,
            dry_run=args.dry_run,
            save=not args.no_save,
            deployments_dir=args.deployments_dir,
        )
        run_deployment(config)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.error(f"Deployment failed: {e}", exc_info=True)
        traceback.print_exc(file=sys.stderr)
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
