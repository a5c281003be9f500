"""
Tests for bintree.config module.
"""

import pytest


@pytest.fixture(autouse=True)
def _clear_bintree_env(monkeypatch):
    """Keep BINTREE_* variables from the outer environment out of these tests."""
    import os

    for name in list(os.environ):
        if name.startswith("BINTREE_"):
            monkeypatch.delenv(name)


class TestTreeConfig:
    """Tests for TreeConfig."""

    def test_defaults(self):
        from bintree.config import DEFAULT_CONFIG, TreeConfig

        config = TreeConfig()
        assert config.traversal == DEFAULT_CONFIG["traversal"]
        assert config.strict_keys is DEFAULT_CONFIG["strict_keys"]

    def test_unknown_traversal_rejected(self):
        from bintree.config import TreeConfig

        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            TreeConfig(traversal="breadth")

    def test_non_boolean_strict_keys_rejected(self):
        from bintree.config import TreeConfig

        with pytest.raises(ValueError, match="strict_keys"):
            TreeConfig(strict_keys="yes")

    def test_from_dict_ignores_unknown_keys(self):
        from bintree.config import TreeConfig

        config = TreeConfig.from_dict({"traversal": "iterative", "colour": "red"})
        assert config == TreeConfig(traversal="iterative")


class TestConfigLoader:
    """Tests for configuration loading."""

    def test_load_config_without_file_uses_defaults(self, tmp_path):
        from bintree.config import TreeConfig, load_config

        assert load_config(start_dir=tmp_path) == TreeConfig()

    def test_load_config_from_bintree_toml(self, tmp_path):
        from bintree.config import load_config

        config_file = tmp_path / "bintree.toml"
        config_file.write_text('traversal = "iterative"\nstrict_keys = false\n')

        config = load_config(config_file)

        assert config.traversal == "iterative"
        assert config.strict_keys is False

    def test_load_config_merges_with_defaults(self, tmp_path):
        from bintree.config import load_config

        config_file = tmp_path / "bintree.toml"
        config_file.write_text('traversal = "iterative"\n')

        config = load_config(config_file)

        assert config.traversal == "iterative"
        assert config.strict_keys is True

    def test_load_config_from_pyproject(self, tmp_path):
        from bintree.config import load_config

        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "demo"\n\n[tool.bintree]\ntraversal = "iterative"\n'
        )

        config = load_config(start_dir=tmp_path)

        assert config.traversal == "iterative"

    def test_load_config_missing_explicit_path(self, tmp_path):
        from bintree.config import load_config

        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_load_config_invalid_value(self, tmp_path):
        from bintree.config import load_config

        config_file = tmp_path / "bintree.toml"
        config_file.write_text('traversal = "zigzag"\n')

        with pytest.raises(ValueError):
            load_config(config_file)


class TestFindConfigFile:
    """Tests for find_config_file."""

    def test_find_bintree_toml(self, tmp_path):
        from bintree.config import find_config_file

        (tmp_path / "bintree.toml").write_text("")

        config_path = find_config_file(tmp_path)
        assert config_path is not None
        assert config_path.name == "bintree.toml"

    def test_find_config_file_in_parent(self, tmp_path):
        from bintree.config import find_config_file

        (tmp_path / "bintree.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == (tmp_path / "bintree.toml").resolve()

    def test_pyproject_without_section_is_skipped(self, tmp_path):
        from bintree.config import find_config_file

        (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n')

        assert find_config_file(tmp_path) is None

    def test_bintree_toml_preferred_over_pyproject(self, tmp_path):
        from bintree.config import find_config_file

        (tmp_path / "bintree.toml").write_text("")
        (tmp_path / "pyproject.toml").write_text('[tool.bintree]\ntraversal = "iterative"\n')

        assert find_config_file(tmp_path).name == "bintree.toml"

    def test_pyproject_with_non_table_tool_is_skipped(self, tmp_path):
        from bintree.config import find_config_file

        (tmp_path / "pyproject.toml").write_text('tool = "poetry"\n')

        assert find_config_file(tmp_path) is None

    def test_unparsable_parent_pyproject_is_skipped(self, tmp_path):
        from bintree.config import TreeConfig, find_config_file, load_config

        (tmp_path / "pyproject.toml").write_text("[project\nname = ")
        nested = tmp_path / "work"
        nested.mkdir()

        assert find_config_file(nested) is None
        assert load_config(start_dir=nested) == TreeConfig()

    def test_bintree_toml_found_past_unparsable_pyproject(self, tmp_path):
        from bintree.config import find_config_file

        (tmp_path / "bintree.toml").write_text('traversal = "iterative"\n')
        nested = tmp_path / "work"
        nested.mkdir()
        (nested / "pyproject.toml").write_text("not = = toml")

        assert find_config_file(nested) == (tmp_path / "bintree.toml").resolve()

    def test_explicit_unparsable_file_raises(self, tmp_path):
        from tomlkit.exceptions import ParseError

        from bintree.config import load_config

        config_file = tmp_path / "bintree.toml"
        config_file.write_text("[broken\n")

        with pytest.raises(ParseError):
            load_config(config_file)

    def test_find_config_file_not_found(self, tmp_path):
        from bintree.config import find_config_file

        assert find_config_file(tmp_path) is None


class TestMergeConfigs:
    """Tests for merge_configs."""

    def test_override_wins(self):
        from bintree.config import merge_configs

        assert merge_configs({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_tables_merge(self):
        from bintree.config import merge_configs

        result = merge_configs({"t": {"x": 1, "y": 2}}, {"t": {"y": 5}})
        assert result == {"t": {"x": 1, "y": 5}}

    def test_base_not_modified(self):
        from bintree.config import merge_configs

        base = {"a": 1}
        merge_configs(base, {"a": 2})
        assert base == {"a": 1}
