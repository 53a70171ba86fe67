"""Tests for the mcmfixtures command line."""

import logging
from unittest.mock import patch

import pytest
from kubernetes.client import ApiException

from mcmfixtures.cmd.cli import build_parser, main

from conftest import MACHINE_YAML


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParser:

    def test_apply_arguments(self):
        args = build_parser().parse_args(
            ["apply", "a.yaml", "dir", "-n", "ns", "--timeout", "5", "--on-name-conflict", "fail"]
        )
        assert args.command == "apply"
        assert args.sources == ["a.yaml", "dir"]
        assert args.namespace == "ns"
        assert args.timeout == 5.0
        assert args.on_name_conflict == "fail"
        assert args.fail_fast is None

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestParseCommand:

    def test_prints_resources_and_errors(self, tmp_path, capsys):
        path = tmp_path / "m.yaml"
        path.write_text(MACHINE_YAML + "---\napiVersion: v1\nkind: Foo\n")

        rc = main(["parse", str(path)])

        out = capsys.readouterr().out
        assert rc == 1
        assert "resource\t" in out and "Machine/test-machine" in out
        assert "error\t" in out and "Foo" in out

    def test_clean_manifest_exits_zero(self, tmp_path, capsys):
        path = tmp_path / "m.yaml"
        path.write_text(MACHINE_YAML)

        assert main(["parse", str(path)]) == 0


class TestApplyCommand:

    def test_applies_with_loaded_cluster(self, cluster, manifests_dir):
        with patch("mcmfixtures.cmd.main.load_cluster_handle", return_value=cluster) as load:
            rc = main(["--kubeconfig", "/tmp/kc", "apply", str(manifests_dir), "-n", "shoot"])

        assert rc == 0
        load.assert_called_once_with("/tmp/kc", None)
        _, kwargs = cluster.apps.create_namespaced_deployment.call_args
        assert kwargs["namespace"] == "shoot"

    def test_failure_exits_non_zero(self, cluster, manifests_dir):
        cluster.apps.create_namespaced_deployment.side_effect = ApiException(status=500, reason="boom")
        with patch("mcmfixtures.cmd.main.load_cluster_handle", return_value=cluster):
            rc = main(["apply", str(manifests_dir)])
        assert rc == 1

    def test_invalid_environment_exits_two(self, cluster, manifests_dir, monkeypatch):
        monkeypatch.setenv("MCMFIXTURES_CRD_TIMEOUT", "later")
        with patch("mcmfixtures.cmd.main.load_cluster_handle", return_value=cluster) as load:
            rc = main(["apply", str(manifests_dir)])
        assert rc == 2
        load.assert_not_called()

    def test_log_file_is_rotated(self, cluster, manifests_dir, tmp_path):
        log_file = tmp_path / "apply.log"
        log_file.write_text("previous run\n")

        with patch("mcmfixtures.cmd.main.load_cluster_handle", return_value=cluster):
            rc = main(["--log-file", str(log_file), "apply", str(manifests_dir / "deployment.yaml")])

        for h in logging.getLogger().handlers:
            h.flush()
        assert rc == 0
        assert (tmp_path / "apply.log.1").read_text() == "previous run\n"
        assert "successfully applied" in log_file.read_text()
