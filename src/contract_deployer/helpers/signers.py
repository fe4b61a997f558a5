"""
Signing identities for deployments.

A Signer is either a local eth-account key (signs locally, sends raw
transactions) or an account the node manages and has unlocked, such as the
prefunded accounts of a simulated chain.
"""
from __future__ import annotations

from dataclasses import dataclass

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address
from web3 import Web3


@dataclass(frozen=True)
class Signer:
    address: str
    account: LocalAccount | None = None

    @property
    def is_local(self) -> bool:
        return self.account is not None


def list_signers(w3: Web3) -> list[str]:
    """Return the node-managed account addresses, in node order."""
    return [to_checksum_address(a) for a in w3.eth.accounts]


def resolve_signer(w3: Web3, reference: str = "0", private_key: str | None = None) -> Signer:
    """Resolve the deployer identity.

    A private key wins. Otherwise reference is an index into the node's
    account list or an address that must appear in it.

    Raises:
        LookupError: If no matching identity is available.
    """
    if private_key:
        acct: LocalAccount = Account.from_key(private_key)
        return Signer(address=to_checksum_address(acct.address), account=acct)

    accounts = list_signers(w3)
    if not accounts:
        raise LookupError(
            "No signing identities available: the node exposes no accounts and no private key was given"
        )

    if reference.isdigit():
        index = int(reference)
        if index >= len(accounts):
            raise LookupError(f"Account index {index} out of range; node exposes {len(accounts)} account(s)")
        return Signer(address=accounts[index])

    address = to_checksum_address(reference)
    if address not in accounts:
        raise LookupError(f"Account {address} is not managed by the node")
    return Signer(address=address)


def secondary_signer(w3: Web3, deployer: Signer) -> str | None:
    """First node account that is not the deployer, if any."""
    for address in list_signers(w3):
        if address != deployer.address:
            return address
    return None
