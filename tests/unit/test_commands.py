#
# tests/unit/test_commands.py
#
"""
Tests for the invocation to command line mapping.
"""

import pytest

from toxtesting.commands import GROUP_TABLE, build_command
from toxtesting.config import ServerConfig
from toxtesting.exceptions import InvalidParamsError, UnknownGroupError
from toxtesting.invocation import (
    AllInvocation,
    CaseInvocation,
    DirectoryInvocation,
    FileInvocation,
    parse_invocation,
)


class TestCommandTemplates:
    """Literal command strings per mode."""

    def test_all_without_group_runs_test_root(self, server_config: ServerConfig) -> None:
        spec = build_command(AllInvocation(), server_config)
        assert spec.command == "tox -- tests/ --tb=no -ra"

    def test_all_with_auth_group(self, server_config: ServerConfig) -> None:
        spec = build_command(parse_invocation({"mode": "all", "group": "auth"}), server_config)
        assert spec.command == (
            "tox -- tests/test_oauth_routes.py tests/test_users_api.py "
            "tests/test_uploads_auth.py --tb=no -ra"
        )

    @pytest.mark.parametrize("group", sorted(GROUP_TABLE))
    def test_every_group(self, server_config: ServerConfig, group: str) -> None:
        spec = build_command(AllInvocation(group=group), server_config)
        assert spec.command == f"tox -- {GROUP_TABLE[group]} --tb=no -ra"

    def test_directory(self, server_config: ServerConfig) -> None:
        spec = build_command(DirectoryInvocation(directory="tests/api"), server_config)
        assert spec.command == "tox -- tests/api --tb=no -ra"

    def test_file_uses_line_tracebacks(self, server_config: ServerConfig) -> None:
        spec = build_command(FileInvocation(test_file="tests/test_routes.py"), server_config)
        assert spec.command == "tox -- tests/test_routes.py --tb=line -ra"
        assert "--tb=no" not in spec.command

    def test_case_has_no_extra_flags(self, server_config: ServerConfig) -> None:
        spec = build_command(
            CaseInvocation(test_file="tests/test_routes.py", test_case="test_home"), server_config
        )
        assert spec.command == "tox -- tests/test_routes.py::test_home"

    def test_case_with_parametrized_id_is_quoted(self, server_config: ServerConfig) -> None:
        spec = build_command(
            CaseInvocation(test_file="tests/test_routes.py", test_case="test_home[admin user]"),
            server_config,
        )
        assert spec.command == "tox -- 'tests/test_routes.py::test_home[admin user]'"

    def test_shell_metacharacters_are_quoted(self, server_config: ServerConfig) -> None:
        spec = build_command(FileInvocation(test_file="tests/x.py; rm -rf /"), server_config)
        assert spec.command == "tox -- 'tests/x.py; rm -rf /' --tb=line -ra"


class TestCommandBounds:
    """Working directory and limits come from configuration only."""

    def test_spec_carries_config(self, server_config: ServerConfig) -> None:
        spec = build_command(AllInvocation(), server_config)
        assert spec.working_dir == server_config.app_dir
        assert spec.timeout == 600.0
        assert spec.max_output_bytes == 50 * 1024 * 1024
        assert spec.shell == "/bin/bash"

    def test_custom_timeout(self, server_config: ServerConfig) -> None:
        config = ServerConfig(app_dir=server_config.app_dir, timeout_seconds=30)
        assert build_command(AllInvocation(), config).timeout == 30.0

    def test_same_invocation_builds_equal_specs(self, server_config: ServerConfig) -> None:
        invocation = parse_invocation({"mode": "case", "testFile": "tests/test_routes.py", "testCase": "test_home"})
        first = build_command(invocation, server_config)
        second = build_command(invocation, server_config)
        assert first == second
        assert first is not second


class TestUnknownGroup:
    def test_unknown_group_names_valid_set(self, server_config: ServerConfig) -> None:
        with pytest.raises(UnknownGroupError) as exc_info:
            build_command(AllInvocation(group="database"), server_config)

        message = str(exc_info.value)
        assert message == (
            "Invalid test group: database. Valid groups are: clients, api, auth, uploads, routes"
        )
        assert isinstance(exc_info.value, InvalidParamsError)

    def test_group_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            GROUP_TABLE["extra"] = "tests/test_extra.py"  # type: ignore[index]

    def test_unsupported_invocation_type(self, server_config: ServerConfig) -> None:
        with pytest.raises(TypeError, match="Unsupported invocation type"):
            build_command(object(), server_config)  # type: ignore[arg-type]
