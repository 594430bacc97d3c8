"""Tests for the Team domain entity rules."""

from datetime import date, datetime, timedelta

import pytest

from domain.models.team import Team
from shared.exceptions import ValidationError


VALID = dict(
    name="Mikkelin mailamestarit",
    sport_type="Pesäpallo",
    founded_date=date(2024, 10, 4),
    home_stadium="Urheilupuisto",
    max_roster_size=30,
)


def _team(**overrides):
    fields = dict(VALID)
    fields.update(overrides)
    return Team.create(**fields)


class TestTeamCreation:

    def test_valid_data_round_trips_every_field(self):
        team = _team()

        assert team.id is None
        assert team.name == "Mikkelin mailamestarit"
        assert team.sport_type == "Pesäpallo"
        assert team.founded_date == date(2024, 10, 4)
        assert team.home_stadium == "Urheilupuisto"
        assert team.max_roster_size == 30
        assert not team.is_persisted

    def test_values_are_not_trimmed(self):
        team = _team(name="  Padded  ")
        assert team.name == "  Padded  "

    @pytest.mark.parametrize("field", ["name", "sport_type", "home_stadium"])
    @pytest.mark.parametrize("value", ["", " ", "\t\n "])
    def test_blank_text_fails_naming_the_field(self, field, value):
        with pytest.raises(ValidationError) as exc_info:
            _team(**{field: value})

        assert exc_info.value.field == field
        assert exc_info.value.details["field"] == field

    def test_non_string_name_fails(self):
        with pytest.raises(ValidationError):
            _team(name=None)

    def test_negative_roster_size_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            _team(max_roster_size=-1)
        assert exc_info.value.field == "max_roster_size"

    def test_zero_roster_size_is_allowed(self):
        assert _team(max_roster_size=0).max_roster_size == 0

    def test_boolean_roster_size_fails(self):
        with pytest.raises(ValidationError):
            _team(max_roster_size=True)

    def test_future_founded_date_fails(self):
        tomorrow = date.today() + timedelta(days=1)
        with pytest.raises(ValidationError) as exc_info:
            _team(founded_date=tomorrow)
        assert exc_info.value.field == "founded_date"

    def test_founded_today_is_allowed(self):
        today = date.today()
        assert _team(founded_date=today).founded_date == today

    def test_datetime_and_iso_string_become_dates(self):
        assert _team(founded_date=datetime(2020, 5, 17, 14, 30)).founded_date == date(2020, 5, 17)
        assert _team(founded_date="2019-01-31").founded_date == date(2019, 1, 31)

    def test_unparseable_date_fails(self):
        with pytest.raises(ValidationError):
            _team(founded_date="not a date")

    @pytest.mark.parametrize("bad_id", [0, -3, "7"])
    def test_invalid_id_fails(self, bad_id):
        with pytest.raises(ValidationError):
            Team(id=bad_id, **VALID)


class TestTeamChanges:

    def test_with_changes_returns_revalidated_copy(self):
        team = _team().with_id(4)
        renamed = team.with_changes(name="Uusi nimi", max_roster_size=12)

        assert renamed.id == 4
        assert renamed.name == "Uusi nimi"
        assert renamed.max_roster_size == 12
        assert team.name == "Mikkelin mailamestarit"

    def test_invalid_change_fails_and_keeps_original(self):
        team = _team()

        with pytest.raises(ValidationError):
            team.with_changes(home_stadium="   ")

        assert team.home_stadium == "Urheilupuisto"

    def test_future_date_change_fails_like_construction(self):
        with pytest.raises(ValidationError):
            _team().with_changes(founded_date=date.today() + timedelta(days=30))

    def test_id_cannot_be_changed(self):
        team = _team().with_id(1)
        with pytest.raises(ValidationError):
            team.with_id(2)
        with pytest.raises(ValidationError):
            team.with_changes(id=2)

    def test_instances_are_frozen(self):
        team = _team()
        with pytest.raises(AttributeError):
            team.name = "Other"

    def test_to_dict(self):
        assert _team().with_id(9).to_dict() == {"id": 9, **VALID}
