import os

import pytest

from core.domain.errors import InstallFailed, PostInstallStillMissing, SpawnFailed
from core.domain.models import CommandSpec, Invocation, Mode, Options, RunOutcome
from core.environment import DEFAULT_BIN_DIR
from core.services.task_runner import TaskRunner, command_for

ENV = {"PATH": "/usr/bin", "HOME": "/home/dev"}
TOOL = CommandSpec(program="miniserve", args=("--index", "index.html", "static"))


def test_build_command():
    spec = command_for(Mode.BUILD)

    assert spec.argv == [
        "wasm-pack",
        "build",
        "web",
        "--no-pack",
        "--no-typescript",
        "--target",
        "web",
        "--out-dir",
        "../static/pkg",
    ]
    assert spec.env == {}


def test_serve_command():
    assert command_for(Mode.SERVE).argv == ["miniserve", "--index", "index.html", "static"]


@pytest.mark.parametrize("mode", list(Mode))
def test_every_mode_has_a_command(mode):
    spec = command_for(mode)

    assert spec.program in {"wasm-pack", "miniserve"}
    assert command_for(mode) is not spec


def test_start_dispatches_mode_command(make_runner, make_installer):
    runner = make_runner(RunOutcome.ok())
    task = TaskRunner(runner, make_installer(), environ=ENV)

    task.start(Invocation(mode=Mode.SERVE))

    assert [spec.argv for spec in runner.calls] == [["miniserve", "--index", "index.html", "static"]]


def test_child_path_gets_bin_dir_once(make_runner, make_installer):
    runner = make_runner(RunOutcome.ok(), RunOutcome.ok())
    environ = {"PATH": os.pathsep.join(["/usr/bin", DEFAULT_BIN_DIR])}
    task = TaskRunner(runner, make_installer(), environ=environ)

    task.install_and_run(TOOL, Options())
    task.install_and_run(TOOL, Options())

    for spec in runner.calls:
        assert spec.env["PATH"].split(os.pathsep).count(DEFAULT_BIN_DIR) == 1


def test_parent_environment_is_not_mutated(make_runner, make_installer):
    environ = dict(ENV)
    task = TaskRunner(make_runner(RunOutcome.ok()), make_installer(), environ=environ)

    task.install_and_run(TOOL, Options())

    assert environ == ENV


def test_success_does_not_install(make_runner, make_installer):
    installer = make_installer()
    task = TaskRunner(make_runner(RunOutcome.ok()), installer, environ=ENV)

    task.install_and_run(TOOL, Options())

    assert installer.installed == []


def test_not_found_with_no_install_is_success(make_runner, make_installer):
    runner = make_runner(RunOutcome.not_found())
    installer = make_installer()
    notices = []
    task = TaskRunner(runner, installer, environ=ENV, on_installing=notices.append)

    task.install_and_run(TOOL, Options(no_install=True))

    assert installer.installed == []
    assert len(runner.calls) == 1
    assert notices == []


def test_not_found_installs_then_succeeds(make_runner, make_installer):
    runner = make_runner(RunOutcome.not_found(), RunOutcome.ok())
    installer = make_installer()
    notices = []
    task = TaskRunner(runner, installer, environ=ENV, on_installing=notices.append)

    task.install_and_run(TOOL, Options())

    assert installer.installed == ["miniserve"]
    assert notices == ["miniserve"]
    assert len(runner.calls) == 2
    assert runner.calls[0] == runner.calls[1]


def test_install_leaving_no_binary_is_fatal(make_runner, make_installer):
    runner = make_runner(RunOutcome.not_found(), RunOutcome.not_found())
    installer = make_installer()
    task = TaskRunner(runner, installer, environ=ENV)

    with pytest.raises(PostInstallStillMissing, match="^failed to install miniserve$"):
        task.install_and_run(TOOL, Options())

    assert len(runner.calls) == 2
    assert installer.installed == ["miniserve"]


def test_failed_run_is_surfaced_without_install(make_runner, make_installer):
    installer = make_installer()
    task = TaskRunner(make_runner(RunOutcome.failed("execution of miniserve failed")), installer, environ=ENV)

    with pytest.raises(SpawnFailed, match="execution of miniserve failed"):
        task.install_and_run(TOOL, Options())

    assert installer.installed == []


def test_install_failure_propagates_and_skips_retry(make_runner, make_installer):
    runner = make_runner(RunOutcome.not_found())
    task = TaskRunner(runner, make_installer(error="failed to install miniserve"), environ=ENV)

    with pytest.raises(InstallFailed, match="failed to install miniserve"):
        task.install_and_run(TOOL, Options())

    assert len(runner.calls) == 1


def test_retry_failure_message_propagates(make_runner, make_installer):
    runner = make_runner(RunOutcome.not_found(), RunOutcome.failed("failed to run miniserve: denied"))
    task = TaskRunner(runner, make_installer(), environ=ENV)

    with pytest.raises(SpawnFailed, match="failed to run miniserve: denied"):
        task.install_and_run(TOOL, Options())


def test_on_command_sees_every_attempt(make_runner, make_installer):
    seen = []
    runner = make_runner(RunOutcome.not_found(), RunOutcome.ok())
    task = TaskRunner(runner, make_installer(), environ=ENV, on_command=seen.append)

    task.install_and_run(TOOL, Options())

    assert [spec.program for spec in seen] == ["miniserve", "miniserve"]
