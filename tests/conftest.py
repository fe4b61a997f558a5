from pathlib import Path

import pytest

from contract_deployer.config.logging_config import reset_logger

FIXTURES = Path(__file__).parent / "fixtures"

DEPLOY_ENV_VARS = [
    "PRIVATE_KEY",
    "DEPLOYER_PRIVATE_KEY",
    "DEPLOYER",
    "DEPLOY_NETWORK",
    "DEPLOY_CONTRACT",
    "RPC_URL",
    "LOCALHOST_RPC_URL",
    "SEPOLIA_RPC_URL",
    "GOERLI_RPC_URL",
    "TOKEN_NAME",
    "TOKEN_SYMBOL",
    "TOKEN_VERSION",
    "SOLC_VERSION",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the operator's deployment environment."""
    for name in DEPLOY_ENV_VARS:
        # setenv first so the original state is restored even if a test
        # (e.g. --env-file) sets the variable behind monkeypatch's back
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("DEPLOY_LOG_DIR", str(tmp_path / "logs"))
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def sbt_artifact_path():
    return str(FIXTURES / "SBT.json")


@pytest.fixture
def rejecting_artifact_path():
    return str(FIXTURES / "RejectingSBT.json")


@pytest.fixture
def tester_w3():
    """Fresh in-process simulated chain"""
    pytest.importorskip("eth_tester")
    from contract_deployer.helpers.web3_setup import get_web3_instance

    return get_web3_instance("tester")
