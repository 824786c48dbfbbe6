"""Tests for the tpf-query command line."""

import pytest

from conftest import ENDPOINT, FakeTransport, nt
from fragments import cli
from fragments.client import Client
from fragments.config import ClientConfig
from fragments.exceptions import ConfigError
from fragments.namespaces import RDFS, iri_reference

A = "<http://x/A>"
LABEL = iri_reference(RDFS, "label")


@pytest.fixture
def served(monkeypatch):
    """Route every client the CLI builds through one fake transport."""
    transport = FakeTransport()
    original = Client.from_config.__func__

    def from_config(cls, config, transport_=None):
        return original(cls, config, transport)

    monkeypatch.setattr(Client, "from_config", classmethod(from_config))
    monkeypatch.delenv("TPF_ENDPOINT", raising=False)
    return transport


class TestParser:
    def test_steps_keep_command_line_order(self):
        args = cli.build_parser().parse_args([
            "--entity", "http://x/A",
            "--link", "http://x/", "p",
            "--type", "http://x/", "T",
            "--link", "http://x/", "q",
        ])
        assert args.steps == [("link", "http://x/", "p"), ("type", "http://x/", "T"), ("link", "http://x/", "q")]

    def test_start_is_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--link", "a", "b"])


class TestResolveConfig:
    def test_flag_beats_environment(self, monkeypatch):
        monkeypatch.setenv("TPF_ENDPOINT", "https://env.example.org")
        args = cli.build_parser().parse_args(["--endpoint", "https://flag.example.org", "--entity", "x"])
        assert cli.resolve_config(args).endpoint == "https://flag.example.org"

    def test_environment_overrides_file(self, monkeypatch, tmp_path):
        path = tmp_path / "client.yaml"
        path.write_text("endpoint: https://file.example.org\ntimeout: 9\n", encoding="utf-8")
        monkeypatch.setenv("TPF_ENDPOINT", "https://env.example.org")
        args = cli.build_parser().parse_args(["--config", str(path), "--entity", "x"])
        assert cli.resolve_config(args) == ClientConfig(endpoint="https://env.example.org", timeout=9)

    def test_no_endpoint_anywhere(self, monkeypatch):
        monkeypatch.delenv("TPF_ENDPOINT", raising=False)
        args = cli.build_parser().parse_args(["--entity", "x"])
        with pytest.raises(ConfigError):
            cli.resolve_config(args)


class TestMain:
    def test_prints_results(self, served, capsys):
        served.serve(nt((A, LABEL, '"Alice"@en'), (A, LABEL, '"Ali"@en')), subject=A)
        code = cli.main(["--endpoint", ENDPOINT, "--entity", "http://x/A", "--link", RDFS, "label"])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["Alice", "Ali"]

    def test_single(self, served, capsys):
        served.serve(nt((A, LABEL, '"Alice"@en'), (A, LABEL, '"Ali"@en')), subject=A)
        code = cli.main(["--endpoint", ENDPOINT, "--entity", A, "--link", RDFS, "label", "--single"])
        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["Alice"]

    def test_transport_failure_exits_1(self, served):
        served.fail(subject=A)
        assert cli.main(["--endpoint", ENDPOINT, "--entity", A, "--link", RDFS, "label"]) == 1

    def test_bad_config_exits_1(self, served, tmp_path):
        assert cli.main(["--config", str(tmp_path / "missing.yaml"), "--entity", A]) == 1
