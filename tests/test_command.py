import os

import pytest

from pipex.command import (
    CMD_NOTFOUND,
    PERMISSION_DENIED,
    CommandData,
    CommandError,
    find_executable,
    resolve_command,
    search_paths,
)


def _make_file(directory, name, mode):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def test_search_paths_splits_and_drops_empty():
    assert search_paths({"PATH": "/a::/b:"}) == ["/a", "/b"]


def test_search_paths_without_path():
    assert search_paths({"HOME": "/home"}) is None


def test_find_executable_first_match_wins(tmp_path):
    one = tmp_path / "one"
    two = tmp_path / "two"
    one.mkdir()
    two.mkdir()
    _make_file(two, "tool", 0o755)
    _make_file(one, "tool", 0o755)
    assert find_executable("tool", [str(one), str(two)]) == f"{one}/tool"


def test_find_executable_skips_missing_dirs(tmp_path):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _make_file(bin_dir, "tool", 0o755)
    found = find_executable("tool", [str(tmp_path / "none"), str(bin_dir)])
    assert found == f"{bin_dir}/tool"


def test_find_executable_permission_denied_stops(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_file(first, "tool", 0o644)
    _make_file(second, "tool", 0o755)
    with pytest.raises(CommandError) as info:
        find_executable("tool", [str(first), str(second)])
    assert info.value.code == PERMISSION_DENIED
    assert str(first / "tool") in str(info.value)


def test_find_executable_not_found(tmp_path):
    with pytest.raises(CommandError) as info:
        find_executable("missing", [str(tmp_path)])
    assert info.value.code == CMD_NOTFOUND
    assert str(info.value).startswith("missing:")


def test_resolve_command_splits_args(tmp_path):
    _make_file(tmp_path, "tool", 0o755)
    data = resolve_command("tool  -l   x", {"PATH": str(tmp_path)})
    assert data == CommandData(f"{tmp_path}/tool", ["tool", "-l", "x"])


def test_resolve_command_with_slash_is_used_as_given():
    data = resolve_command("./nothing arg", {})
    assert data.path == "./nothing"
    assert data.args == ["./nothing", "arg"]


def test_resolve_command_empty():
    with pytest.raises(CommandError):
        resolve_command("   ", {"PATH": "/bin"})


def test_resolve_command_without_path():
    with pytest.raises(CommandError) as info:
        resolve_command("ls", {})
    assert info.value.code == CMD_NOTFOUND