"""Tests for the generate_graph command line."""

import sys

import pytest
from loguru import logger

from scripts.generate_graph import main


@pytest.fixture(autouse=True)
def restore_logger():
    """Undo the sink changes main() makes."""
    yield
    logger.remove()
    logger.add(sys.__stderr__)


class TestMain:
    """Tests for main entry point."""

    def test_list_models(self, capsys):
        """Test --list prints usage for every model."""
        assert main(["--list"]) == 0

        out = capsys.readouterr().out
        assert "undirected models" in out
        assert "barabasi_albert/n,m" in out
        assert "watts_strogatz/n,k,p" in out

    def test_print_edges(self, capsys):
        """Test --edges prints one edge per line."""
        assert main(["chain/3", "--directed", "--edges", "--seed", "1"]) == 0

        out = capsys.readouterr().out
        assert "# sample 0" in out
        assert "0 1\n1 2\n" in out

    def test_multiple_samples(self, capsys):
        """Test each sample gets its own edge block."""
        assert main(["tree/4", "--samples", "3", "--edges", "--seed", "2"]) == 0

        out = capsys.readouterr().out
        assert out.count("# sample") == 3

    def test_invalid_spec(self, capsys):
        """Test invalid specifications exit with status 2."""
        assert main(["foo/3"]) == 2
        assert main(["chain"]) == 2
        assert capsys.readouterr().out == ""

    def test_invalid_configuration(self, tmp_path, capsys):
        """Test invalid configuration values exit with status 2."""
        assert main(["chain/3", "--samples", "0"]) == 2

        path = tmp_path / "bad.yaml"
        path.write_text("num_samples: -1\n")
        assert main(["--config", str(path)]) == 2
        assert capsys.readouterr().out == ""

    def test_preset(self):
        """Test bundled presets run."""
        assert main(["--preset", "random_tree", "--samples", "1"]) == 0

    def test_config_file(self, tmp_path, capsys):
        """Test configuration files are honoured and overridable."""
        path = tmp_path / "run.yaml"
        path.write_text("spec: chain/2\nshow_edges: true\nseed: 0\n")

        assert main(["--config", str(path)]) == 0
        assert "0 1" in capsys.readouterr().out
