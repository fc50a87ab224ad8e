from promptsh.environment import Environment
from promptsh.resolve import dot_path, is_directory, path_candidates, resolve_command


def test_is_directory(tmp_path):
    path = tmp_path / "file"
    path.write_text("x")
    assert is_directory(str(tmp_path)) is True
    assert is_directory(str(path)) is False
    assert is_directory(str(tmp_path / "missing")) is False


def test_path_candidates_order():
    env = Environment(["PATH=/bin:/usr/bin"])
    assert path_candidates(env, "ls") == ["/bin/ls", "/usr/bin/ls"]


def test_path_candidates_skip_empty_segments():
    env = Environment(["PATH=:/a::/b:"])
    result = path_candidates(env, "tool")
    assert len(result) == 2
    assert all(item.endswith("/tool") for item in result)


def test_path_candidates_without_path():
    assert path_candidates(Environment(["HOME=/h"]), "ls") == []


def test_dot_path_joins_pwd(tmp_path):
    env = Environment([f"PWD={tmp_path}"])
    assert dot_path(env, "./run") == str(tmp_path) + "/run"


def test_dot_path_without_pwd():
    assert dot_path(Environment([]), "./run") is None


def test_resolve_absolute_unchanged():
    env = Environment(["PATH=/nowhere"])
    assert resolve_command(env, "/some/prog") == "/some/prog"


def test_resolve_dot(tmp_path):
    env = Environment([f"PWD={tmp_path}"])
    assert resolve_command(env, "./prog") == f"{tmp_path}/prog"


def test_resolve_finds_first_existing(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    (second / "prog").write_text("x")
    env = Environment([f"PATH={first}:{second}"])
    assert resolve_command(env, "prog") == f"{second}/prog"


def test_resolve_prefers_earlier_directory(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    for directory in (first, second):
        directory.mkdir()
        (directory / "prog").write_text("x")
    env = Environment([f"PATH={first}:{second}"])
    assert resolve_command(env, "prog") == f"{first}/prog"


def test_resolve_unknown_returns_name(tmp_path):
    env = Environment([f"PATH={tmp_path}"])
    assert resolve_command(env, "no-such-prog") == "no-such-prog"