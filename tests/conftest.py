import pytest

from nehv_lib.config import ConfigManager
from nehv_lib.repl import CompletionEngine, SessionContext, build_command_tree


@pytest.fixture
def config_paths(tmp_path):
    return tmp_path / "boot.config.yaml", tmp_path / "running.config.yaml"


@pytest.fixture
def manager(config_paths):
    boot, running = config_paths
    mgr = ConfigManager(boot, running)
    mgr.load()
    return mgr


@pytest.fixture
def ctx(manager):
    return SessionContext(manager=manager)


@pytest.fixture
def engine():
    return CompletionEngine(build_command_tree())
