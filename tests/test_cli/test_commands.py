"""Tests for CLI command implementations."""

import pytest
from unittest.mock import patch

from devspace.cli.commands import shell, show_status
from devspace.errors import ConfigurationError
from devspace.models.config import UserConfig


@pytest.fixture
def demo_root(project_root):
    """Project "demo" with a Dockerfile source."""
    (project_root / ".devcontainer" / "devcontainer.json").write_text(
        '{\n  // dev image\n  "dockerFile": "Dockerfile",\n}'
    )
    return project_root


class TestShell:
    """Tests for the shell command."""

    def test_shell_attaches_configured_shell(self, demo_root, fake_client):
        """Test shell reconciles and attaches the user's shell."""
        shell(demo_root, UserConfig(shell="/bin/bash"), client=fake_client, quiet=True)

        assert fake_client.call_names().count("build_image") == 1
        assert fake_client.calls[-1] == ("exec", "demo", ["/bin/bash"])

    def test_shell_stop(self, demo_root, fake_client):
        """Test --stop stops the container with the configured timeout."""
        fake_client.add_container("demo", "running")

        shell(demo_root, UserConfig(stop_timeout=3), stop=True, client=fake_client, quiet=True)

        assert fake_client.calls[-1] == ("stop_container", "demo", 3)

    @patch("devspace.cli.commands.typer.confirm", return_value=True)
    def test_shell_asks_before_stopping(self, mock_confirm, demo_root, fake_client):
        """Test ask_stop prompts after the session."""
        fake_client.add_container("demo", "running")

        shell(demo_root, UserConfig(ask_stop=True), client=fake_client, quiet=True)

        mock_confirm.assert_called_once()
        assert "demo" in mock_confirm.call_args[0][0]
        assert fake_client.call_names()[-1] == "stop_container"

    @patch("devspace.cli.commands.typer.confirm")
    def test_shell_no_prompt_by_default(self, mock_confirm, demo_root, fake_client):
        """Test no prompt is shown unless ask_stop is enabled."""
        fake_client.add_container("demo", "running")

        shell(demo_root, UserConfig(), client=fake_client, quiet=True)

        mock_confirm.assert_not_called()
        assert "stop_container" not in fake_client.call_names()

    def test_shell_without_config(self, tmp_path, fake_client):
        """Test a missing devcontainer file fails before touching the runtime."""
        with pytest.raises(ConfigurationError):
            shell(tmp_path, UserConfig(), client=fake_client, quiet=True)

        assert fake_client.calls == []


class TestShowStatus:
    """Tests for the status command."""

    @patch("devspace.cli.commands.console")
    def test_status_is_read_only(self, mock_console, demo_root, fake_client):
        """Test status only queries the runtime."""
        fake_client.add_container("demo", "exited")

        show_status(demo_root, UserConfig(), client=fake_client)

        assert fake_client.mutating_calls() == []
        mock_console.print.assert_called_once()
        table = mock_console.print.call_args[0][0]
        assert table.row_count == 2
