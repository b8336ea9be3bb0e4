# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_dotfiles.py

from unittest.mock import patch

import pytest

from yoz.core.dotfiles import DOTFILE_TARGETS, ConfigFiles, generate_dotfiles
from yoz.system.exceptions import CommandError
from yoz.system.execution import CommandExecutor
from tests.helpers import failed, ok

URL = "https://example.com/dotfiles.git"


@pytest.fixture
def checkout(tmp_path):
    """A dotfiles checkout with nvim, i3 and starship configs."""
    files = tmp_path / "repos" / "dotfiles"
    (files / "nvim" / "lua").mkdir(parents=True)
    (files / "nvim" / "init.lua").write_text("require('plugins')\n")
    (files / "nvim" / "lua" / "plugins.lua").write_text("return {}\n")
    (files / "i3").mkdir()
    (files / "i3" / "config").write_text("set $mod Mod4\n")
    (files / "starship").mkdir()
    (files / "starship" / "starship.toml").write_text("add_newline = false\n")
    return files


class TestGenerate:

    def test_copies_with_layout(self, checkout, tmp_path):
        target = tmp_path / "config"
        generated = ConfigFiles(checkout).generate("nvim", target)

        assert (target / "nvim" / "init.lua").read_text() == "require('plugins')\n"
        assert (target / "nvim" / "lua" / "plugins.lua").exists()
        assert len(generated.files) == 2
        assert generated.total_size == len("require('plugins')\n") + len("return {}\n")

    def test_starship_goes_to_config_home(self, checkout, tmp_path):
        target = tmp_path / "config"
        ConfigFiles(checkout).generate("starship", target)
        assert (target / "starship.toml").read_text() == "add_newline = false\n"

    def test_overwrites_existing_files(self, checkout, tmp_path):
        target = tmp_path / "config"
        (target / "i3").mkdir(parents=True)
        (target / "i3" / "config").write_text("old")

        ConfigFiles(checkout).generate("i3", target)

        assert (target / "i3" / "config").read_text() == "set $mod Mod4\n"

    def test_missing_source_is_skipped(self, checkout, tmp_path):
        generated = ConfigFiles(checkout).generate("i3status", tmp_path / "config")
        assert generated.skipped is True
        assert generated.files == []

    def test_dry_run_writes_nothing(self, checkout, tmp_path):
        target = tmp_path / "config"
        generated = ConfigFiles(checkout).generate("nvim", target, dry_run=True)

        assert not target.exists()
        assert len(generated.files) == 2
        assert generated.total_size > 0

    def test_generate_all_covers_every_application(self, checkout, tmp_path):
        generated = ConfigFiles(checkout).generate_all(tmp_path / "config")
        assert [g.name for g in generated] == list(DOTFILE_TARGETS)
        assert {g.name for g in generated if g.skipped} == {"cargo-temp", "i3status"}


class TestGetOrDownload:

    def test_existing_checkout_is_not_cloned(self, checkout):
        with patch.object(CommandExecutor, "run_local") as mock_run:
            ConfigFiles.get_or_download(checkout, URL, checkout.parent)
        mock_run.assert_not_called()

    def test_clones_missing_checkout(self, tmp_path):
        repos = tmp_path / "repos"
        with patch.object(CommandExecutor, "run_local", return_value=ok()) as mock_run:
            ConfigFiles.get_or_download(repos / "dotfiles", URL, repos)

        assert repos.is_dir()
        mock_run.assert_called_once_with(["git", "clone", URL], cwd=repos, check=False)

    def test_clone_failure(self, tmp_path):
        repos = tmp_path / "repos"
        with patch.object(CommandExecutor, "run_local", return_value=failed()):
            with pytest.raises(CommandError, match="cannot download config files"):
                ConfigFiles.get_or_download(repos / "dotfiles", URL, repos)

    def test_dry_run_does_not_clone(self, tmp_path):
        repos = tmp_path / "repos"
        with patch.object(CommandExecutor, "run_local") as mock_run:
            ConfigFiles.get_or_download(repos / "dotfiles", URL, repos, dry_run=True)
        mock_run.assert_not_called()
        assert not repos.exists()


def test_generate_dotfiles(checkout, tmp_path):
    target = tmp_path / "config"
    generated = generate_dotfiles(checkout.parent, "dotfiles", URL, target)

    assert (target / "i3" / "config").exists()
    assert sum(len(g.files) for g in generated) == 4
