"""Tests for team roster parsing."""
from survey_fields.core.roster import load_teams, load_teams_file, parse_team_line


class TestParseTeamLine:
    def test_valid_row(self):
        team = parse_team_line("Red Team,RED,#ff0000")
        assert team.name == "Red Team"
        assert team.abbr == "RED"
        assert team.color == "#FF0000"

    def test_color_without_hash(self):
        assert parse_team_line("Green,GRN,00ff00").color == "#00FF00"

    def test_too_few_fields(self):
        assert parse_team_line("Red,RED") is None

    def test_bad_color(self):
        assert parse_team_line("Red,RED,#GGGGGG") is None

    def test_empty_name(self):
        assert parse_team_line(",RED,#ff0000") is None


class TestLoadTeams:
    def test_skips_header_blank_and_malformed(self):
        lines = [
            "name,abbr,color\n",
            "Red,RED,#ff0000\n",
            "\n",
            "broken row\n",
            "Blue,BLU,#0000FF\n",
        ]
        teams = load_teams(lines)
        assert [t.name for t in teams] == ["Red", "Blue"]

    def test_header_only(self):
        assert load_teams(["name,abbr,color\n"]) == []

    def test_from_file(self, tmp_path):
        path = tmp_path / "teams.csv"
        path.write_text("name,abbr,color\nRed,RED,#ff0000\nBlue,BLU,#0000ff\n")
        teams = load_teams_file(str(path))
        assert [t.abbr for t in teams] == ["RED", "BLU"]
