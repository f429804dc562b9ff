from pathlib import Path
from unittest.mock import patch, MagicMock

from click.testing import CliRunner

from truss_dashboard.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliEndpoints:
    def test_lists_grouped_endpoints(self):
        runner = CliRunner()
        result = runner.invoke(main, ["endpoints", "--doc", str(FIXTURES / "paragon_v1.json")])

        assert result.exit_code == 0
        assert "[Lumber]" in result.output
        assert "GET /api/public/projects -> Project[]" in result.output
        assert "GET /api/Lumber/count -> integer" in result.output
        assert "Found 5 endpoints." in result.output

    def test_filter_by_tag(self):
        runner = CliRunner()
        result = runner.invoke(main, [
            "endpoints", "--doc", str(FIXTURES / "paragon_v1.json"),
            "--tag", "Lumber",
        ])

        assert result.exit_code == 0
        assert "[Projects]" not in result.output
        assert "Found 2 endpoints." in result.output

    def test_missing_document_lists_nothing(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["endpoints", "--doc", str(tmp_path / "v1.json")])

        assert result.exit_code == 0
        assert "Found 0 endpoints." in result.output


class TestCliSchema:
    def test_show_schema(self):
        runner = CliRunner()
        result = runner.invoke(main, ["schema", "Project", "--doc", str(FIXTURES / "paragon_v1.json")])

        assert result.exit_code == 0
        assert "Project (object)" in result.output
        assert "id: string (uuid) *" in result.output

    def test_unknown_schema(self):
        runner = CliRunner()
        result = runner.invoke(main, ["schema", "Nope", "--doc", str(FIXTURES / "paragon_v1.json")])

        assert result.exit_code != 0
        assert "Unknown schema" in result.output


class TestCliMemberLength:
    def test_member_length(self):
        runner = CliRunner()
        result = runner.invoke(main, ["member-length", str(FIXTURES / "member_points.json")])

        assert result.exit_code == 0
        assert result.output.strip() == "5"

    def test_invalid_points(self, tmp_path):
        points = tmp_path / "points.json"
        points.write_text('[{"x": "a"}]')
        runner = CliRunner()
        result = runner.invoke(main, ["member-length", str(points)])

        assert result.exit_code != 0
        assert "Invalid point geometry" in result.output


class TestCliHealth:
    @patch("truss_dashboard.cli.ParagonClient")
    def test_reachable(self, MockClient):
        mock_client = MagicMock()
        mock_client.health_check.return_value = True
        mock_client.base_url = "https://vendor.test"
        MockClient.return_value = mock_client

        runner = CliRunner()
        result = runner.invoke(main, ["health"])

        assert result.exit_code == 0
        assert "reachable" in result.output

    @patch("truss_dashboard.cli.ParagonClient")
    def test_unreachable(self, MockClient):
        mock_client = MagicMock()
        mock_client.health_check.return_value = False
        mock_client.base_url = "https://vendor.test"
        MockClient.return_value = mock_client

        runner = CliRunner()
        result = runner.invoke(main, ["health", "--base-url", "https://vendor.test"])

        assert result.exit_code != 0
        MockClient.assert_called_once_with(base_url="https://vendor.test")
