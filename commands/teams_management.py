#!/usr/bin/env python3
"""
Teams Management Commands

CLI commands for creating the schema and managing team records from the
shell. Every command goes through the same dispatcher as the HTTP API.
"""

import sys
import logging

import click

from core.db import create_all_tables, configure_engine
from config import get_config
from services.teams import (
    CreateTeamCommand,
    DeleteTeamCommand,
    GetTeamByIdQuery,
    GetTeamsQuery,
    TeamsDispatcher,
)
from shared.exceptions import TeamsAppError


_LOG = logging.getLogger(__name__)


def _dispatcher(ctx: click.Context) -> TeamsDispatcher:
    if ctx.obj is None:
        ctx.obj = {}
    if "dispatcher" not in ctx.obj:
        ctx.obj["dispatcher"] = TeamsDispatcher()
    return ctx.obj["dispatcher"]


def _format_team(team) -> str:
    return (
        f"{team.id:<5} {team.name:<25} {team.sportType:<15} "
        f"{team.foundedDate.isoformat():<11} {team.homeStadium:<20} {team.maxRosterSize}"
    )


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def teams(ctx, verbose):
    """Teams Management Commands."""
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@teams.command("init-db")
def init_db():
    """Create the teams table if it does not exist."""
    config = get_config()
    configure_engine(config.database)
    if not create_all_tables():
        click.echo("Cannot connect to database", err=True)
        sys.exit(1)
    click.echo("Database schema is ready")


@teams.command("list")
@click.pass_context
def list_teams(ctx):
    """List all teams."""
    try:
        rows = _dispatcher(ctx).send(GetTeamsQuery())
    except TeamsAppError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)

    if not rows:
        click.echo("No teams found")
        return
    for team in rows:
        click.echo(_format_team(team))


@teams.command("show")
@click.argument('team_id', type=int)
@click.pass_context
def show_team(ctx, team_id):
    """Show one team by id."""
    try:
        team = _dispatcher(ctx).send(GetTeamByIdQuery(id=team_id))
    except TeamsAppError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)
    if team is None:
        click.echo(f"Team {team_id} not found", err=True)
        sys.exit(1)
    click.echo(_format_team(team))


@teams.command("add")
@click.option('--name', required=True)
@click.option('--sport-type', required=True)
@click.option('--founded', 'founded_date', required=True,
              type=click.DateTime(formats=["%Y-%m-%d"]), help='YYYY-MM-DD')
@click.option('--home-stadium', required=True)
@click.option('--max-roster-size', type=int, default=0, show_default=True)
@click.pass_context
def add_team(ctx, name, sport_type, founded_date, home_stadium, max_roster_size):
    """Add a team."""
    command = CreateTeamCommand(
        name=name,
        sport_type=sport_type,
        founded_date=founded_date.date(),
        home_stadium=home_stadium,
        max_roster_size=max_roster_size,
    )
    try:
        created = _dispatcher(ctx).send(command)
    except TeamsAppError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)
    _LOG.debug("CLI created team %s", created.id)
    click.echo(f"Created team {created.id}")


@teams.command("delete")
@click.argument('team_id', type=int)
@click.pass_context
def delete_team(ctx, team_id):
    """Delete a team by id (no error if it does not exist)."""
    try:
        _dispatcher(ctx).send(DeleteTeamCommand(id=team_id))
    except TeamsAppError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)
    click.echo(f"Deleted team {team_id}")


if __name__ == '__main__':
    teams()
