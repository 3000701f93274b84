"""Tests for configuration load/save and the ConfigManager."""

import pytest
import yaml

from nehv_lib.config import (
    ConfigError,
    ConfigManager,
    InterfaceConfig,
    RouterConfig,
    copy_config,
    load_config,
    load_or_create_config,
    save_config,
)


class TestSerialization:

    def test_save_then_load(self, tmp_path):
        config = RouterConfig(
            hostname="test-router",
            interfaces={"eth0": InterfaceConfig(address="192.168.1.1/24", mac="00:11:22:33:44:55")},
            dns=["8.8.8.8", "1.1.1.1"],
            default_route="192.168.1.254",
        )
        path = tmp_path / "boot.config.yaml"
        save_config(config, path)
        assert load_config(path) == config

    def test_document_layout(self, tmp_path):
        config = RouterConfig(interfaces={"eth1": InterfaceConfig(address="10.0.0.1/8")})
        path = tmp_path / "config.yaml"
        save_config(config, path)
        data = yaml.safe_load(path.read_text())
        assert data == {
            "hostname": "vyos-router",
            "interfaces": {"eth1": {"address": "10.0.0.1/8"}},
            "dns": [],
            "default_route": "",
        }

    def test_save_writes_every_path(self, tmp_path):
        paths = [tmp_path / "a.yaml", tmp_path / "nested" / "b.yaml"]
        save_config(RouterConfig(hostname="r1"), *paths)
        for path in paths:
            assert load_config(path).hostname == "r1"

    def test_missing_keys_get_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("dns:\n  - 9.9.9.9\n")
        config = load_config(path)
        assert config.hostname == "vyos-router"
        assert config.interfaces == {}
        assert config.dns == ["9.9.9.9"]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == RouterConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "absent.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("hostname: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(path)

    @pytest.mark.parametrize("document", [
        "interfaces: [eth0]\n",
        "interfaces:\n  eth0: 10.0.0.1/24\n",
        "dns: 5\n",
        "dns: 8.8.8.8\n",
    ])
    def test_wrong_shape_documents(self, tmp_path, document):
        path = tmp_path / "config.yaml"
        path.write_text(document)
        with pytest.raises(ConfigError):
            load_config(path)

    def test_interface_without_settings(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("interfaces:\n  eth0:\n")
        assert load_config(path).interfaces == {"eth0": InterfaceConfig()}

    def test_load_or_create_writes_defaults(self, config_paths):
        boot, running = config_paths
        config = load_or_create_config(boot, running)
        assert config == RouterConfig()
        assert boot.exists()
        assert running.exists()

    def test_load_or_create_reads_existing(self, config_paths):
        boot, running = config_paths
        save_config(RouterConfig(hostname="existing"), boot)
        assert load_or_create_config(boot, running).hostname == "existing"
        assert not running.exists()

    def test_copy_config(self, tmp_path):
        source = tmp_path / "running.config.yaml"
        dest = tmp_path / "boot.config.yaml"
        source.write_text("hostname: copied\n")
        copy_config(source, dest)
        assert dest.read_text() == "hostname: copied\n"

    def test_copy_missing_source(self, tmp_path):
        with pytest.raises(ConfigError):
            copy_config(tmp_path / "absent.yaml", tmp_path / "dest.yaml")


class TestConfigManager:

    def test_add_dns_skips_duplicates(self, manager):
        assert manager.add_dns("8.8.8.8")
        assert not manager.add_dns("8.8.8.8")
        assert manager.config.dns == ["8.8.8.8"]

    def test_set_dns_replaces(self, manager):
        manager.add_dns("8.8.8.8")
        manager.set_dns(["1.1.1.1"])
        assert manager.config.dns == ["1.1.1.1"]

    def test_dirty_cleared_by_save(self, manager, config_paths):
        manager.set_default_route("10.0.0.1")
        assert manager.dirty
        manager.save()
        assert not manager.dirty
        for path in config_paths:
            assert load_config(path).default_route == "10.0.0.1"

    def test_get_interface_returns_copy(self, manager):
        manager.set_interface("eth0", InterfaceConfig(address="10.0.0.1/24"))
        iface = manager.get_interface("eth0")
        iface.address = "10.0.0.2/24"
        assert manager.config.interfaces["eth0"].address == "10.0.0.1/24"

    def test_get_unknown_interface(self, manager):
        assert manager.get_interface("eth9") == InterfaceConfig()

    def test_backup_and_restore(self, manager, tmp_path):
        manager.set_hostname("before")
        backup_file = manager.backup(tmp_path / "backup")
        assert backup_file.parent == tmp_path / "backup"
        assert backup_file.name.startswith("config_")
        assert backup_file.suffix == ".yaml"

        manager.set_hostname("after")
        manager.restore(backup_file)
        assert manager.config.hostname == "before"
        assert not manager.dirty
        assert load_config(manager.running_file).hostname == "before"

    def test_restore_missing_backup(self, manager, tmp_path):
        with pytest.raises(ConfigError):
            manager.restore(tmp_path / "absent.yaml")
