"""Tests for reading manifests from local paths and URLs."""

from unittest.mock import patch

import pytest
import requests

from mcmfixtures.manifest import is_url, load_source

from conftest import MACHINE_YAML


class TestLoadSource:

    def test_url_is_fetched(self):
        with patch("mcmfixtures.manifest.loader.requests.get") as mock_get:
            mock_get.return_value.text = MACHINE_YAML

            result = load_source("https://example.com/machine.yaml")

            mock_get.assert_called_once_with("https://example.com/machine.yaml", timeout=20)
            mock_get.return_value.raise_for_status.assert_called_once()
            assert result.source == "https://example.com/machine.yaml"
            assert [r.kind for r in result.resources] == ["Machine"]

    def test_http_error_propagates(self):
        with patch("mcmfixtures.manifest.loader.requests.get") as mock_get:
            mock_get.return_value.raise_for_status.side_effect = requests.HTTPError("404 Client Error")

            with pytest.raises(requests.HTTPError):
                load_source("http://example.com/missing.yaml")

    def test_local_path(self, tmp_path):
        path = tmp_path / "machine.yaml"
        path.write_text(MACHINE_YAML)

        result = load_source(str(path))

        assert [r.name for r in result.resources] == ["test-machine"]

    @pytest.mark.parametrize("source, expected", [
        ("http://host/a.yaml", True),
        ("https://host/a.yaml", True),
        ("/tmp/a.yaml", False),
        ("httpfiles/a.yaml", False),
    ])
    def test_is_url(self, source, expected):
        assert is_url(source) is expected
