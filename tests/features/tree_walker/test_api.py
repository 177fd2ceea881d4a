import asyncio
import json

import pytest

from npm_scrub.core.common.errors import ConfigurationError
from npm_scrub.core.config.settings import settings
from npm_scrub.features.tree_walker.data.local_fs import LocalFileSystem
from npm_scrub.features.tree_walker.service.api import build_dispatcher, remove_absolute_paths, run


@pytest.fixture
def forbid_disk(monkeypatch):
    """Any filesystem probe during the test is a failure."""
    async def boom(self, path):
        raise AssertionError(f"filesystem touched: {path}")

    monkeypatch.setattr(LocalFileSystem, "stat", boom)
    monkeypatch.setattr(LocalFileSystem, "list_dir", boom)


@pytest.mark.parametrize("options", [{"fields": []}, {"fields": "not-an-array"}])
def test_invalid_fields_reject_before_io(forbid_disk, tmp_path, options):
    with pytest.raises(ConfigurationError, match="Invalid option: fields"):
        run(tmp_path, options)


def test_missing_path_wins_over_bad_options(forbid_disk):
    with pytest.raises(ConfigurationError, match="Missing path"):
        run("", {"fields": []})


def test_run_with_default_options(underscore_tree):
    results = run(str(underscore_tree))

    assert len(results) == 3
    manifest = underscore_tree / "module" / "package.json"
    assert json.loads(manifest.read_text()) == {
        "name": "left-pad",
        "version": "1.3.0",
        "main": "index.js",
        "dependencies": {"_private": "kept"},
    }


def test_force_option_mapping(clean_tree):
    without_force = run(clean_tree)
    with_force = run(clean_tree, {"force": True})

    assert [r.rewritten for r in without_force] == [False, False, False]
    assert [r.rewritten for r in with_force] == [False, False, True]


def test_fields_option_mapping(underscore_tree):
    manifest = underscore_tree / "module" / "package.json"

    run(underscore_tree, {"fields": ["_where", "main"]})

    data = json.loads(manifest.read_text())
    assert "_where" not in data and "main" not in data
    assert data["_from"] == "left-pad@^1.3.0"
    assert data["_resolved"].endswith(".tgz")


def test_async_entry_point(underscore_tree):
    results = asyncio.run(remove_absolute_paths(underscore_tree))

    assert [r.success for r in results] == [True, True, True]


def test_bounded_in_flight_io_gives_same_results(nested_node_modules, monkeypatch):
    monkeypatch.setattr(settings, "MAX_IN_FLIGHT_IO", 1)

    results = run(nested_node_modules)

    assert sum(1 for r in results if r.rewritten) == 2
    assert all(r.success for r in results)


def test_build_dispatcher_shares_one_limiter():
    async def build():
        return build_dispatcher(3)

    dispatcher = asyncio.run(build())

    assert dispatcher.fs.limiter is dispatcher.processor.store.limiter
    assert dispatcher.fs.limiter is not None
    assert build_dispatcher(None).fs.limiter is None
