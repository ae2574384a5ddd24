"""
Tests for configuration loading — catalogue discovery, parsing and validation.
"""

import json
import textwrap
from pathlib import Path

import pytest

from cmdforge.core.config.loader import (
    CATALOG_ENV_VAR,
    ConfigError,
    find_catalog_file,
    load_catalog,
    parse_catalogue,
    resolve_catalog_path,
)
from cmdforge.core.data import BUNDLED_CATALOGUE, get_registry


@pytest.fixture
def catalog_yml(tmp_path: Path) -> Path:
    """Create a small commands.yml in a temp directory."""
    content = textwrap.dedent("""\
        version: "1.0"
        categories:
          - id: files
            name: Files
            order: 1
        commands:
          - id: hello
            base: echo
            category: files
            args:
              - id: text
                type: text
                positional: true
                position: 1
                required: true
              - id: no-newline
                type: checkbox
                flag: -n
            examples:
              - name: Greet
                values: {text: hi}
                output: "echo 'hi'"
    """)
    path = tmp_path / "commands.yml"
    path.write_text(content)
    return path


class TestFindCatalogFile:
    def test_found_in_start_dir(self, catalog_yml: Path):
        assert find_catalog_file(catalog_yml.parent) == catalog_yml.resolve()

    def test_found_walking_up(self, catalog_yml: Path):
        nested = catalog_yml.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_catalog_file(nested) == catalog_yml.resolve()

    def test_not_found(self, tmp_path: Path):
        empty = tmp_path / "empty"
        empty.mkdir()
        # pytest temp roots never hold a commands.yml
        assert find_catalog_file(empty) is None


class TestResolveCatalogPath:
    def test_explicit_wins(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CATALOG_ENV_VAR, str(tmp_path / "env.yml"))
        assert resolve_catalog_path(tmp_path / "cli.yml") == tmp_path / "cli.yml"

    def test_env_var(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(CATALOG_ENV_VAR, str(tmp_path / "env.yml"))
        assert resolve_catalog_path() == tmp_path / "env.yml"

    def test_discovered_from_cwd(self, catalog_yml: Path):
        # cwd is tmp_path (see conftest)
        assert resolve_catalog_path() == catalog_yml.resolve()

    def test_none_means_bundled(self):
        assert resolve_catalog_path() is None


class TestLoadCatalog:
    def test_yaml(self, catalog_yml: Path):
        catalog = load_catalog(catalog_yml)
        assert catalog.ids() == ["hello"]
        assert catalog.by_id("hello").args[0].required is True

    def test_json(self, tmp_path: Path):
        path = tmp_path / "cat.json"
        path.write_text(json.dumps({"commands": [{"id": "pwd", "base": "pwd"}]}))
        assert "pwd" in load_catalog(path)

    def test_bare_list(self, tmp_path: Path):
        path = tmp_path / "list.yml"
        path.write_text("- id: pwd\n  base: pwd\n")
        assert load_catalog(path).ids() == ["pwd"]

    def test_bundled_fallback(self):
        assert len(load_catalog()) == 133

    def test_env_var_used(self, catalog_yml: Path, monkeypatch):
        monkeypatch.setenv(CATALOG_ENV_VAR, str(catalog_yml))
        assert load_catalog().ids() == ["hello"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_catalog(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("commands: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_catalog(path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_catalog(path)

    def test_schema_violation(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("commands:\n  - id: x\n    base: x\n    args:\n      - id: a\n        depends_on: [b]\n")
        with pytest.raises(ConfigError, match="Invalid command catalogue"):
            load_catalog(path)

    def test_scalar_document(self, tmp_path: Path):
        path = tmp_path / "scalar.yml"
        path.write_text("just a string\n")
        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_catalog(path)


class TestParseCatalogue:
    def test_defaults(self):
        catalogue = parse_catalogue({})
        assert catalogue.version == "1.0"
        assert catalogue.commands == []

    def test_duplicate_ids(self):
        with pytest.raises(ConfigError, match="duplicate command ids"):
            parse_catalogue([{"id": "a", "base": "a"}, {"id": "a", "base": "b"}])


class TestDataRegistry:
    def test_bundled_file_shipped(self):
        assert BUNDLED_CATALOGUE.is_file()

    def test_singleton(self):
        assert get_registry() is get_registry()

    def test_cached(self):
        registry = get_registry()
        assert registry.command_catalogue is registry.command_catalogue
        assert len(registry.command_catalogue["commands"]) == 133
