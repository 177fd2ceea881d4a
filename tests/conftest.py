# File: tests/conftest.py

import json
import os
import sys

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

INSTALLED_MANIFEST = {
    "_from": "left-pad@^1.3.0",
    "_id": "left-pad@1.3.0",
    "_resolved": "https://registry.npmjs.org/left-pad/-/left-pad-1.3.0.tgz",
    "_where": "/home/dev/projects/app",
    "name": "left-pad",
    "version": "1.3.0",
    "main": "index.js",
    "dependencies": {"_private": "kept"},
}

CLEAN_MANIFEST = {
    "name": "left-pad",
    "version": "1.3.0",
    "main": "index.js",
}


def _write_manifest(path, data, trailing_newline=True):
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(data, indent=2)
    if trailing_newline:
        text += "\n"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def write_manifest():
    """
    Factory for package.json files with or without a trailing newline.
    """
    return _write_manifest


@pytest.fixture
def underscore_tree(tmp_path):
    """
    root/
      module/
        package.json   (npm install metadata present)
        index.js       (ignored)
    """
    root = tmp_path / "underscore_fields"
    _write_manifest(root / "module" / "package.json", INSTALLED_MANIFEST)
    (root / "module" / "index.js").write_text("module.exports = 1;\n")
    return root


@pytest.fixture
def clean_tree(tmp_path):
    root = tmp_path / "no_underscore_fields"
    _write_manifest(root / "module" / "package.json", CLEAN_MANIFEST)
    return root


@pytest.fixture
def malformed_tree(tmp_path):
    root = tmp_path / "malformed"
    manifest = root / "module" / "package.json"
    manifest.parent.mkdir(parents=True)
    manifest.write_text('{"name": "module", "_where": "/tmp"', encoding="utf-8")
    return root


@pytest.fixture
def no_manifest_tree(tmp_path):
    """
    Directories only hold look-alike files, nothing named package.json.
    """
    root = tmp_path / "not_package_json"
    _write_manifest(root / "module" / "not_package.json", INSTALLED_MANIFEST)
    (root / "module" / "Package.json").write_text("{}")
    return root


@pytest.fixture
def nested_node_modules(tmp_path):
    """
    app/
      package.json
      node_modules/
        a/package.json
        a/node_modules/b/package.json
        a/node_modules/b/README.md
    """
    root = tmp_path / "app"
    _write_manifest(root / "package.json", CLEAN_MANIFEST)
    _write_manifest(root / "node_modules" / "a" / "package.json", INSTALLED_MANIFEST)
    _write_manifest(
        root / "node_modules" / "a" / "node_modules" / "b" / "package.json",
        INSTALLED_MANIFEST,
        trailing_newline=False,
    )
    (root / "node_modules" / "a" / "node_modules" / "b" / "README.md").write_text("# b\n")
    return root
