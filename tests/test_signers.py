"""
Signer resolution tests
Run against the in-process tester chain (eth-tester + py-evm)
"""

import pytest
from eth_account import Account

from contract_deployer.helpers.signers import list_signers, resolve_signer, secondary_signer


class _NoAccountsEth:
    accounts = []


class _NoAccountsWeb3:
    eth = _NoAccountsEth()


def test_first_account_is_default_deployer(tester_w3):
    signer = resolve_signer(tester_w3)
    assert signer.address == list_signers(tester_w3)[0]
    assert not signer.is_local


def test_index_and_address_references(tester_w3):
    accounts = list_signers(tester_w3)
    assert resolve_signer(tester_w3, "1").address == accounts[1]
    assert resolve_signer(tester_w3, accounts[2].lower()).address == accounts[2]


def test_secondary_signer(tester_w3):
    deployer = resolve_signer(tester_w3)
    assert secondary_signer(tester_w3, deployer) == list_signers(tester_w3)[1]


def test_index_out_of_range(tester_w3):
    with pytest.raises(LookupError, match="out of range"):
        resolve_signer(tester_w3, "1000")


def test_unmanaged_address(tester_w3):
    stranger = Account.create().address
    with pytest.raises(LookupError, match="not managed"):
        resolve_signer(tester_w3, stranger)


def test_no_identities_available():
    with pytest.raises(LookupError, match="No signing identities"):
        resolve_signer(_NoAccountsWeb3())


def test_private_key_wins_over_reference():
    acct = Account.create()
    signer = resolve_signer(_NoAccountsWeb3(), "3", private_key="0x" + bytes(acct.key).hex())
    assert signer.address == acct.address
    assert signer.is_local
