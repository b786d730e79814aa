"""
Tests for the command line checker
"""
import json

import pytest

from fancy_ip.__main__ import main


def test_cli_accepts(capsys):
    assert main(["192.168.1.5", "2001:db8::1"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["192.168.1.5", "2001:0db8:0000:0000:0000:0000:0000:0001"]


def test_cli_rejects(capsys):
    assert main(["192.168.1.5", "256.0.0.1"]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["192.168.1.5"]
    assert "error: octet out of range" in captured.err
    assert "  | ^^^" in captured.err


def test_cli_family(capsys):
    assert main(["--family", "v4", "::1"]) == 1
    assert "expected an IPv4 address" in capsys.readouterr().err


def test_cli_json(capsys):
    assert main(["--json", "::ffff:10.0.0.1"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["ipv4_mapped"] is True
    assert data["address"] == "0000:0000:0000:0000:0000:ffff:10.0.0.1"


def test_cli_socket(capsys):
    assert main(["--socket", "v6", "[::1]:8080"]) == 0
    assert capsys.readouterr().out.strip() == "[::1]:8080"
    assert main(["--socket", "v4", "10.0.0.1"]) == 1
    assert "missing port" in capsys.readouterr().err


def test_cli_log_level(capsys):
    assert main(["--log-level", "debug", "--json", "::1"]) == 0
    # Log records never land in the decoded output
    assert json.loads(capsys.readouterr().out)["address"] == "0000:0000:0000:0000:0000:0000:0000:0001"
    main(["--log-level", "WARNING", "::1"])


def test_cli_unknown_log_level(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "loud", "::1"])
    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err
