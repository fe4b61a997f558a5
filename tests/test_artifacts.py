import json
import sys
import types
from pathlib import Path

import pytest

from contract_deployer.helpers import artifacts
from contract_deployer.helpers.artifacts import (
    compile_artifact,
    default_artifact_path,
    load_artifact,
    resolve_artifact,
)

FIXTURES = Path(__file__).parent / "fixtures"


def test_load_hardhat_artifact(sbt_artifact_path):
    art = load_artifact(sbt_artifact_path)
    assert art.name == "SBT"
    assert art.bytecode.startswith("0x6001")
    assert [i["name"] for i in art.constructor_inputs] == ["name_", "symbol_", "version_"]


def test_load_foundry_artifact_adds_prefix():
    art = load_artifact(FIXTURES / "foundry_SBT.json", contract="SBT")
    assert art.name == "SBT"
    assert art.bytecode == "0x6001600c60003960016000f300"


def test_missing_artifact(tmp_path):
    with pytest.raises(FileNotFoundError, match="Artifact not found"):
        load_artifact(tmp_path / "nope.json")


def test_artifact_without_bytecode(tmp_path):
    path = tmp_path / "Abstract.json"
    path.write_text(json.dumps({"abi": [{"type": "function", "name": "f"}], "bytecode": "0x"}))
    with pytest.raises(ValueError, match="abi/bytecode"):
        load_artifact(path)


def test_default_artifact_path_follows_hardhat_layout():
    assert default_artifact_path("SBT").as_posix() == "artifacts/contracts/SBT.sol/SBT.json"


def test_resolve_uses_default_path(tmp_path, monkeypatch, sbt_artifact_path):
    target = default_artifact_path("SBT", tmp_path)
    target.parent.mkdir(parents=True)
    target.write_text(Path(sbt_artifact_path).read_text())
    monkeypatch.chdir(tmp_path)
    assert resolve_artifact("SBT").name == "SBT"


@pytest.fixture
def fake_solcx(monkeypatch):
    calls = {}

    def install_solc(version):
        calls["install"] = version

    def compile_source(source, **kwargs):
        calls["compile"] = kwargs
        return {
            "<stdin>:SBT": {
                "abi": [{"type": "constructor", "inputs": []}],
                "bin": "6001600c60003960016000f300",
            }
        }

    module = types.SimpleNamespace(install_solc=install_solc, compile_source=compile_source)
    monkeypatch.setitem(sys.modules, "solcx", module)
    return calls


def test_compile_artifact_with_solcx(tmp_path, fake_solcx):
    source = tmp_path / "SBT.sol"
    source.write_text("contract SBT {}")
    art = compile_artifact(source, "SBT", "0.8.20")
    assert art.bytecode == "0x6001600c60003960016000f300"
    assert fake_solcx["install"] == "0.8.20"
    assert fake_solcx["compile"]["solc_version"] == "0.8.20"


def test_compile_defaults_solc_version(tmp_path, fake_solcx):
    source = tmp_path / "SBT.sol"
    source.write_text("contract SBT {}")
    resolve_artifact("SBT", source_path=str(source))
    assert fake_solcx["install"] == artifacts.DEFAULT_SOLC_VERSION


def test_compile_unknown_contract(tmp_path, fake_solcx):
    source = tmp_path / "SBT.sol"
    source.write_text("contract SBT {}")
    with pytest.raises(ValueError, match="Available: SBT"):
        compile_artifact(source, "Other")
