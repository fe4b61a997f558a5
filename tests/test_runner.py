"""
Deployment runner tests
Deploys fixture artifacts to the in-process tester chain
"""

import json

import pytest
from eth_account import Account
from eth_utils import is_checksum_address

from contract_deployer.config.deployment import ConfigurationError, build_deployment_config
from contract_deployer.deploy.runner import DEPLOYED_LINE, DEPLOYER_LINE, run_deployment
from contract_deployer.helpers.signers import list_signers

SBT_PARAMS = {"name": "MyToken", "symbol": "MTK", "version": "1.0"}


@pytest.fixture
def make_config(tmp_path, sbt_artifact_path):
    def _make(**overrides):
        values = dict(
            params=SBT_PARAMS,
            artifact_path=sbt_artifact_path,
            deployments_dir=str(tmp_path / "deployments"),
            env={},
        )
        values.update(overrides)
        return build_deployment_config(**values)
    return _make


def test_deploy_reports_deployer_then_address(tester_w3, make_config, tmp_path):
    lines = []
    result = run_deployment(make_config(), w3=tester_w3, emit=lines.append)

    deployer = list_signers(tester_w3)[0]
    assert lines == [
        DEPLOYER_LINE.format(address=deployer),
        DEPLOYED_LINE.format(address=result.address),
    ]
    assert is_checksum_address(result.address)
    assert result.deployer == deployer
    assert result.constructor_args == ["MyToken", "MTK", "1.0"]
    assert tester_w3.eth.get_code(result.address) == b"\x00"

    records = list((tmp_path / "deployments").glob("*.json"))
    assert len(records) == 1
    assert json.loads(records[0].read_text())["address"] == result.address


def test_each_deployment_gets_a_new_address(tester_w3, make_config):
    first = run_deployment(make_config(), w3=tester_w3, emit=lambda _: None)
    second = run_deployment(make_config(), w3=tester_w3, emit=lambda _: None)
    assert first.address != second.address


def test_explicit_deployer_reference(tester_w3, make_config):
    result = run_deployment(make_config(deployer="2"), w3=tester_w3, emit=lambda _: None)
    assert result.deployer == list_signers(tester_w3)[2]


def test_local_private_key_signer(tester_w3, make_config):
    acct = Account.create()
    funder = list_signers(tester_w3)[0]
    tx = tester_w3.eth.send_transaction({"from": funder, "to": acct.address, "value": tester_w3.to_wei(1, "ether")})
    tester_w3.eth.wait_for_transaction_receipt(tx)

    config = make_config(private_key="0x" + bytes(acct.key).hex())
    result = run_deployment(config, w3=tester_w3, emit=lambda _: None)
    assert result.deployer == acct.address
    assert tester_w3.eth.get_transaction_count(acct.address) == 1


def test_dry_run_submits_nothing(tester_w3, make_config, tmp_path):
    lines = []
    deployer = list_signers(tester_w3)[0]
    nonce = tester_w3.eth.get_transaction_count(deployer)

    assert run_deployment(make_config(dry_run=True), w3=tester_w3, emit=lines.append) is None
    assert lines == [DEPLOYER_LINE.format(address=deployer)]
    assert tester_w3.eth.get_transaction_count(deployer) == nonce
    assert not (tmp_path / "deployments").exists()


def test_no_save(tester_w3, make_config, tmp_path):
    run_deployment(make_config(save=False), w3=tester_w3, emit=lambda _: None)
    assert not (tmp_path / "deployments").exists()


def test_constructor_revert_propagates_reason(tester_w3, make_config, rejecting_artifact_path):
    lines = []
    with pytest.raises(Exception, match="name required"):
        run_deployment(make_config(artifact_path=rejecting_artifact_path), w3=tester_w3, emit=lines.append)
    assert not any(line.startswith("Contract deployed at") for line in lines)


def test_constructor_arity_checked_before_network(make_config, tmp_path):
    artifact = tmp_path / "Vault.json"
    artifact.write_text(json.dumps({
        "abi": [{"type": "constructor", "inputs": [{"name": "owner", "type": "string"}]}],
        "bytecode": "0x6001600c60003960016000f300",
    }))
    config = make_config(contract="Vault", params=None, args=["a", "b"], artifact_path=str(artifact))
    with pytest.raises(ConfigurationError, match="takes 1"):
        # no w3 given: the check must fail before any connection is attempted
        run_deployment(config, emit=lambda _: None)
