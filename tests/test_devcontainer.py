"""
Tests for ghcheck.devcontainer: comment stripping and loading.
"""

import pytest

from ghcheck.devcontainer import (
    DevContainerError,
    load_devcontainer,
    strip_json_comments,
)


def _write(tmp_path, text):
    folder = tmp_path / ".devcontainer"
    folder.mkdir()
    (folder / "devcontainer.json").write_text(text, encoding="utf-8")


class TestStripJsonComments:

    def test_line_comments_removed(self):
        text = '// top\n{"a": 1} // trailing\n'
        assert strip_json_comments(text).strip() == '{"a": 1}'

    def test_block_comments_removed_across_lines(self):
        text = '{/* one\n two */"a": 1}'
        assert strip_json_comments(text) == '{"a": 1}'

    def test_double_slash_inside_strings_is_stripped_too(self):
        # Naive stripping: a URL value loses everything after "//".
        text = '{"image": "https://example.com/img"}'
        assert strip_json_comments(text) == '{"image": "https:'


class TestLoadDevcontainer:

    def test_missing_file_returns_none(self, tmp_path):
        assert load_devcontainer(tmp_path) is None

    def test_commented_file_parses(self, tmp_path):
        _write(tmp_path, '// comment\n{"customizations":{"vscode":{"extensions":["GitHub.copilot"]}}}')
        config = load_devcontainer(tmp_path)
        assert config is not None
        assert config.extensions == ["GitHub.copilot"]

    def test_extensions_absent(self, tmp_path):
        _write(tmp_path, '{"name": "dev"}')
        assert load_devcontainer(tmp_path).extensions is None

    def test_extensions_not_a_list(self, tmp_path):
        _write(tmp_path, '{"customizations": {"vscode": {"extensions": "GitHub.copilot"}}}')
        assert load_devcontainer(tmp_path).extensions is None

    def test_unbalanced_braces_raise_with_message(self, tmp_path):
        _write(tmp_path, '{"customizations": {"vscode": {}')
        with pytest.raises(DevContainerError) as exc_info:
            load_devcontainer(tmp_path)
        assert str(exc_info.value)

    def test_top_level_array_rejected(self, tmp_path):
        _write(tmp_path, '["not", "an", "object"]')
        with pytest.raises(DevContainerError, match="JSON object"):
            load_devcontainer(tmp_path)

    def test_invalid_utf8_raises(self, tmp_path):
        folder = tmp_path / ".devcontainer"
        folder.mkdir()
        (folder / "devcontainer.json").write_bytes(b'{"name": "\xff\xfe"}')
        with pytest.raises(DevContainerError, match="Could not read"):
            load_devcontainer(tmp_path)

    def test_directory_in_place_of_file_raises(self, tmp_path):
        (tmp_path / ".devcontainer" / "devcontainer.json").mkdir(parents=True)
        with pytest.raises(DevContainerError, match="Could not read"):
            load_devcontainer(tmp_path)
