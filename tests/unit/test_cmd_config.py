"""Tests for the config commands."""

from pathlib import Path

import pytest

from git_site_clone import cmd_config
from git_site_clone.config import Config, ConfigStore


@pytest.mark.unit
class TestConfigCommands:
    """Tests for show, base and mappings."""

    def test_show_creates_file(self, store: ConfigStore, config_path: Path) -> None:
        text = cmd_config.show(store)
        assert config_path.exists()
        assert text == config_path.read_text()

    def test_set_base(self, store: ConfigStore) -> None:
        cmd_config.set_base(store, Path("/src"))
        assert store.load().base == Path("/src")

    def test_set_base_keeps_mappings(self, store: ConfigStore) -> None:
        store.store(Config(mappings={"github.com": Path("/gh")}))
        cmd_config.set_base(store, Path("/src"))
        assert store.load() == Config(
            base=Path("/src"), mappings={"github.com": Path("/gh")}
        )

    def test_add_mapping_persists(self, store: ConfigStore) -> None:
        cmd_config.add_mapping(store, "github.com", Path("/gh"))
        assert ConfigStore(store.path).load().mappings == {"github.com": Path("/gh")}

    def test_add_then_remove(self, store: ConfigStore) -> None:
        store.store(Config(base=Path("/src"), mappings={"gitlab.com": Path("/gl")}))
        before = store.load()

        cmd_config.add_mapping(store, "github.com", Path("/gh"))
        cmd_config.remove_mapping(store, "github.com")

        assert store.load() == before

    def test_remove_missing(self, store: ConfigStore) -> None:
        store.store(Config(mappings={"github.com": Path("/gh")}))
        cmd_config.remove_mapping(store, "gitlab.com")
        assert store.load().mappings == {"github.com": Path("/gh")}
