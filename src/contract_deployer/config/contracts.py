"""
Contract profiles for deployments.

A profile ties a contract identifier to the ordered names of its constructor
parameters and the environment variable each one can be read from.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContractProfile:
    """Constructor layout for a deployable contract."""
    contract: str
    params: tuple[str, ...]
    env_vars: tuple[str, ...]

    def env_var_for(self, param: str) -> str:
        return self.env_vars[self.params.index(param)]


CONTRACT_PROFILES: dict[str, ContractProfile] = {
    # Soulbound token: constructor(string name, string symbol, string version)
    "SBT": ContractProfile(
        contract="SBT",
        params=("name", "symbol", "version"),
        env_vars=("TOKEN_NAME", "TOKEN_SYMBOL", "TOKEN_VERSION"),
    ),
}

DEFAULT_CONTRACT = "SBT"


def get_contract_profile(contract: str) -> ContractProfile | None:
    """Get the registered profile for a contract, or None for ad-hoc contracts."""
    return CONTRACT_PROFILES.get(contract)


def register_contract_profile(contract: str, params: tuple[str, ...], env_vars: tuple[str, ...] | None = None) -> ContractProfile:
    """Register (or replace) the profile for a contract.

    When env_vars is omitted each parameter reads from <CONTRACT>_<PARAM>.
    """
    if env_vars is None:
        env_vars = tuple(f"{contract.upper()}_{p.upper()}" for p in params)
    if len(env_vars) != len(params):
        raise ValueError("params and env_vars must have the same length")
    profile = ContractProfile(contract=contract, params=tuple(params), env_vars=tuple(env_vars))
    CONTRACT_PROFILES[contract] = profile
    return profile
