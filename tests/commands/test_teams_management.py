"""Tests for the teams CLI."""

from unittest.mock import Mock

import pytest
from click.testing import CliRunner

from commands.teams_management import teams
from services.teams import TeamsDispatcher
from shared.exceptions import StoreError


@pytest.fixture
def runner():
    return CliRunner()


def _invoke(runner, dispatcher, *args):
    return runner.invoke(teams, list(args), obj={"dispatcher": dispatcher})


class TestTeamsCli:

    def test_list_empty(self, runner, dispatcher):
        result = _invoke(runner, dispatcher, "list")

        assert result.exit_code == 0
        assert "No teams found" in result.output

    def test_add_show_delete(self, runner, dispatcher, repository):
        added = _invoke(
            runner, dispatcher, "add",
            "--name", "Pallokuninkaat",
            "--sport-type", "Jalkapallo",
            "--founded", "2025-02-01",
            "--home-stadium", "Hirvensalmi",
            "--max-roster-size", "25",
        )
        assert added.exit_code == 0, added.output
        team_id = repository.list_all()[0].id
        assert f"Created team {team_id}" in added.output

        shown = _invoke(runner, dispatcher, "show", str(team_id))
        assert shown.exit_code == 0
        assert "Hirvensalmi" in shown.output

        deleted = _invoke(runner, dispatcher, "delete", str(team_id))
        assert deleted.exit_code == 0
        assert repository.exists(team_id) is False

    def test_add_invalid_team_exits_with_error(self, runner, dispatcher, repository):
        result = _invoke(
            runner, dispatcher, "add",
            "--name", " ",
            "--sport-type", "Jalkapallo",
            "--founded", "2025-02-01",
            "--home-stadium", "Hirvensalmi",
        )

        assert result.exit_code == 1
        assert repository.list_all() == []

    def test_show_missing_team(self, runner, dispatcher):
        result = _invoke(runner, dispatcher, "show", "99")

        assert result.exit_code == 1

    @pytest.mark.parametrize("args, operation", [
        (("show", "1"), "get_by_id"),
        (("delete", "1"), "delete"),
    ])
    def test_store_failure_exits_with_error(self, runner, args, operation):
        failing = Mock(spec=TeamsDispatcher)
        failing.send.side_effect = StoreError(operation)

        result = _invoke(runner, failing, *args)

        assert result.exit_code == 1
        assert f"Error: Team store failed during '{operation}'" in result.output
        assert failing.send.call_count == 1
