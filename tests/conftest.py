import pytest
from pathlib import Path

from toxtesting.config import ServerConfig
from toxtesting.testing import CommandSpec, ExecutionOutcome


class RecordingExecutor:
    """Deterministic stand-in for SubprocessExecutor."""

    def __init__(self, outcome: ExecutionOutcome):
        self.outcome = outcome
        self.specs: list[CommandSpec] = []

    async def execute(self, spec: CommandSpec) -> ExecutionOutcome:
        self.specs.append(spec)
        return self.outcome


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    project = tmp_path / "app"
    project.mkdir()
    (project / "tox.ini").write_text("[tox]\nenvlist = py\n")
    return project


@pytest.fixture
def server_config(app_dir: Path) -> ServerConfig:
    return ServerConfig(app_dir=app_dir)


@pytest.fixture
def passing_executor() -> RecordingExecutor:
    return RecordingExecutor(
        ExecutionOutcome(stdout="==== 3 passed in 0.12s ====", stderr="", exit_code=0)
    )


@pytest.fixture
def failing_executor() -> RecordingExecutor:
    return RecordingExecutor(
        ExecutionOutcome(
            stdout="FAILED tests/test_routes.py::test_home - assert 404 == 200\n==== 1 failed ====",
            stderr="",
            exit_code=1,
            error="Command failed with exit code 1: tox -- tests/test_routes.py --tb=line -ra",
        )
    )


@pytest.fixture
def make_executor():
    """Factory for a RecordingExecutor returning the given outcome."""
    return RecordingExecutor
