"""Tests for the forwarding dispatcher."""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from typing import Any

import pytest

from wslgit.features.dispatch import (
    Dispatcher,
    ProcessLaunchError,
    ProcessOutcome,
    SubcommandAllowList,
)
from wslgit.features.translation import (
    EditorTranslator,
    ForwardTranslator,
    PathResolver,
    ReverseTranslator,
    UnsupportedPathError,
)


@pytest.fixture
def build(make_filesystem: Callable[..., Any]) -> Callable[..., Dispatcher]:
    """Build dispatchers over a filesystem containing ``C:\\Tools\\code.EXE``."""

    filesystem = make_filesystem(existing={"C:\\Tools\\code.EXE"})

    def _build(runner: Any, **kwargs: Any) -> Dispatcher:
        forward = ForwardTranslator(filesystem.exists)
        editor = EditorTranslator(PathResolver(filesystem), forward)
        return Dispatcher(forward, ReverseTranslator(), editor, runner, **kwargs)

    return _build


def test_build_argv_translates_each_argument(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    dispatcher = build(make_runner())

    assert dispatcher.build_argv(["-C", "D:\\repo", "add", "--pathspec-from-file=C:\\list.txt"]) == [
        "wsl",
        "git",
        "-C",
        "/mnt/d/repo",
        "add",
        "--pathspec-from-file=/mnt/c/list.txt",
    ]


def test_custom_launcher_and_program(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    dispatcher = build(make_runner(), launcher="wsl.exe", target_program="git-lfs")

    assert dispatcher.build_argv(["env"]) == ["wsl.exe", "git-lfs", "env"]


def test_editor_variable_is_translated(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    dispatcher = build(make_runner())

    env = dispatcher.build_env({"GIT_EDITOR": "C:\\Tools\\code --wait", "HOME": "C:\\Users\\me"})

    assert env == {"GIT_EDITOR": "/mnt/c/Tools/code.EXE --wait", "HOME": "C:\\Users\\me"}


def test_environment_without_editor_is_copied(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    dispatcher = build(make_runner())
    environ = {"PATH": "C:\\Windows"}

    env = dispatcher.build_env(environ)

    assert env == environ
    assert env is not environ
    assert "GIT_EDITOR" not in env


def test_translated_subcommand_output_is_rewritten(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    runner = make_runner(ProcessOutcome(returncode=0, stdout=b"/mnt/c/work/repo\n"))
    dispatcher = build(runner)
    sink = BytesIO()

    outcome = dispatcher.dispatch(["rev-parse", "--show-toplevel"], {}, stdout=sink)

    assert outcome.exit_code == 0
    assert sink.getvalue() == b"c:/work/repo\n"
    argv, _env, capture = runner.calls[0]
    assert argv == ["wsl", "git", "rev-parse", "--show-toplevel"]
    assert capture is True


def test_other_subcommands_are_streamed(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    runner = make_runner(ProcessOutcome(returncode=1))
    dispatcher = build(runner)
    sink = BytesIO()

    outcome = dispatcher.dispatch(["status"], {}, stdout=sink)

    assert outcome.exit_code == 1
    assert sink.getvalue() == b""
    assert runner.calls[0][2] is False


def test_allow_list_matches_any_position(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    runner = make_runner(ProcessOutcome(returncode=0, stdout=b""))
    dispatcher = build(runner)

    _ = dispatcher.dispatch(["log", "--grep", "remote"], {}, stdout=BytesIO())

    assert runner.calls[0][2] is True


def test_injected_output_predicate(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    runner = make_runner(ProcessOutcome(returncode=0, stdout=b"/mnt/d/x"))
    dispatcher = build(runner, translate_output=SubcommandAllowList(["worktree"]))
    sink = BytesIO()

    _ = dispatcher.dispatch(["worktree", "list"], {}, stdout=sink)
    _ = dispatcher.dispatch(["remote", "-v"], {}, stdout=BytesIO())

    assert sink.getvalue() == b"d:/x"
    assert runner.calls[1][2] is False


def test_editor_reaches_runner(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    runner = make_runner()
    dispatcher = build(runner)

    _ = dispatcher.dispatch(["commit"], {"GIT_EDITOR": "C:\\Tools\\code -w"})

    assert runner.calls[0][1]["GIT_EDITOR"] == "/mnt/c/Tools/code.EXE -w"


def test_launch_failure_names_command(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    dispatcher = build(make_runner(error=FileNotFoundError("wsl")))

    with pytest.raises(ProcessLaunchError) as excinfo:
        _ = dispatcher.dispatch(["commit", "-m", "two words"], {})

    assert excinfo.value.command_line == 'wsl git commit -m "two words"'
    assert "Failed to execute command" in str(excinfo.value)


def test_unsupported_argument_aborts_before_launch(
    build: Callable[..., Dispatcher], make_runner: Callable[..., Any]
) -> None:
    runner = make_runner()
    dispatcher = build(runner)

    with pytest.raises(UnsupportedPathError):
        _ = dispatcher.dispatch(["-C", "\\\\server\\share\\repo", "status"], {})

    assert runner.calls == []
