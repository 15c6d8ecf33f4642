import json
import os

import pytest

from smartlink.adapters.local_storage import LocalFileStore, create_local_storage
from smartlink.app_shell.context import ServiceContext
from smartlink.components.links import CreateLinkInput, run_create
from smartlink.core.ports.storage import ReadFailedError


@pytest.fixture
def store(tmp_path):
    return LocalFileStore(tmp_path / "store")


def test_missing_key_reads_none(store):
    assert store.read("smartlink_data") is None


def test_write_and_read(store):
    store.write("smartlink_data", '{"a": 1}')
    assert store.read("smartlink_data") == '{"a": 1}'


def test_overwrite(store):
    store.write("k", "v1")
    store.write("k", "v2")
    assert store.read("k") == "v2"


def test_no_temp_files_left(store):
    store.write("k", "value")
    assert sorted(os.listdir(store.base_path)) == ["k.json"]


def test_delete(store):
    store.write("k", "v")
    assert store.delete("k") is True
    assert store.delete("k") is False
    assert store.read("k") is None


def test_path_traversal_is_flattened(store):
    store.write("../escape", "x")
    assert not (store.base_path.parent / "escape.json").exists()
    assert store.read("../escape") == "x"


def test_unreadable_file_raises_read_failed(store):
    (store.base_path / "k.json").mkdir()
    with pytest.raises(ReadFailedError):
        store.read("k")


def test_factory_uses_env(tmp_path, monkeypatch):
    monkeypatch.setenv("SMARTLINK_DATA_DIR", str(tmp_path / "env-data"))
    store = create_local_storage()
    assert store.base_path == tmp_path / "env-data"


def test_engine_state_survives_restart(tmp_path):
    """A second engine on the same directory sees the first one's links."""
    first = ServiceContext.create(LocalFileStore(tmp_path))
    run_create(CreateLinkInput(title="Blog", url="blog.dev"), first.link_service)

    second = ServiceContext.create(LocalFileStore(tmp_path))

    assert [link.url for link in second.link_service.get_all()] == ["https://blog.dev"]
    on_disk = json.loads((tmp_path / "smartlink_data.json").read_text())
    assert on_disk["links"][0]["title"] == "Blog"
