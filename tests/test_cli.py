"""
Tests for the seedkeys CLI.
"""

import json

from typer.testing import CliRunner

from seedkeys.cli import app
from seedkeys.derivation import derive, derive_keys
from seedkeys.script import create_multisig_redeem_script, script_to_p2wsh_address

runner = CliRunner()


def _json(result) -> dict:
    return json.loads(result.stdout)


def test_derive_text(abc_seeds, abc_keys):
    result = runner.invoke(app, ["derive", *abc_seeds])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert [line.split()[0] for line in lines] == abc_seeds
    assert lines[1].split()[1] == abc_keys[1].public_key_hex()


def test_derive_sorted_json(abc_seeds):
    result = runner.invoke(app, ["derive", *abc_seeds, "--sorted", "--json"])
    assert result.exit_code == 0
    data = _json(result)
    assert data["sorted"] is True
    public_keys = [k["public_key"] for k in data["keys"]]
    assert public_keys == [k.public_key_hex() for k in derive_keys(abc_seeds, sorted=True)]


def test_derive_no_seeds():
    result = runner.invoke(app, ["derive", "--json"])
    assert result.exit_code == 0
    assert _json(result)["keys"] == []


def test_derive_sort_from_settings(monkeypatch, abc_seeds):
    monkeypatch.setenv("SEEDKEYS_SORT_KEYS", "true")
    monkeypatch.setenv("SEEDKEYS_OUTPUT_FORMAT", "json")
    result = runner.invoke(app, ["derive", *abc_seeds])
    assert result.exit_code == 0
    assert _json(result)["sorted"] is True


def test_derive_unsorted_overrides_settings(monkeypatch, abc_seeds):
    monkeypatch.setenv("SEEDKEYS_SORT_KEYS", "true")
    result = runner.invoke(app, ["derive", *abc_seeds, "--unsorted", "--json"])
    assert result.exit_code == 0
    assert [k["seed"] for k in _json(result)["keys"]] == abc_seeds


def test_range(federation_seeds):
    result = runner.invoke(app, ["range", "fed", "20", "--json"])
    assert result.exit_code == 0
    assert [k["seed"] for k in _json(result)["keys"]] == federation_seeds


def test_range_negative_start():
    result = runner.invoke(app, ["range", "fed", "2", "--start", "-1", "-l", "CRITICAL"])
    assert result.exit_code == 1


def test_multisig(federation_seeds):
    seeds = federation_seeds[:15]
    result = runner.invoke(
        app, ["multisig", "fed", "15", "--network", "testnet", "--json", "-l", "WARNING"]
    )
    assert result.exit_code == 0
    data = _json(result)

    script = create_multisig_redeem_script(8, derive_keys(seeds, sorted=True))
    assert data["threshold"] == 8
    assert data["redeem_script"] == script.hex()
    assert data["address"] == script_to_p2wsh_address(script, "testnet")
    assert len(data["keys"]) == 15


def test_multisig_explicit_threshold():
    result = runner.invoke(app, ["multisig", "erp", "3", "-m", "3", "--json", "-l", "WARNING"])
    assert result.exit_code == 0
    data = _json(result)
    assert data["threshold"] == 3
    assert data["redeem_script"].startswith("53")
    assert data["address"].startswith("bcrt1q")


def test_multisig_twenty_key_federation(federation_seeds):
    result = runner.invoke(
        app, ["multisig", "fed", "20", "--network", "testnet", "--json", "-l", "WARNING"]
    )
    assert result.exit_code == 0
    data = _json(result)

    script = create_multisig_redeem_script(11, derive_keys(federation_seeds, sorted=True))
    assert data["threshold"] == 11
    assert data["redeem_script"] == script.hex()
    assert data["redeem_script"].endswith("0114ae")
    assert data["address"] == script_to_p2wsh_address(script, "testnet")
    assert len(data["keys"]) == 20


def test_multisig_too_many_keys():
    result = runner.invoke(app, ["multisig", "fed", "21", "-l", "CRITICAL"])
    assert result.exit_code == 1


def test_multisig_text_output():
    keys = derive(["k1", "k2"])
    result = runner.invoke(app, ["multisig", "k", "2", "--text", "-l", "WARNING"])
    assert result.exit_code == 0
    assert "redeem_script:" in result.stdout
    assert any(k.public_key_hex() in result.stdout for k in keys)
