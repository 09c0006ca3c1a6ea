"""Tests for the algolia-client CLI commands.

Testing approach:
- Uses Click's CliRunner for command invocation
- Patches ``get_client`` so commands talk to the in-memory fake application
- Tests output formatting (table and JSON) and error exit codes
"""

import json
from unittest.mock import patch

from click.testing import CliRunner
import pytest

from algolia_client.cli.main import cli

# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create Click CLI runner for testing commands.

    Returns:
        CliRunner instance configured for testing.
    """
    return CliRunner()


@pytest.fixture
def fake_client(fake_algolia):
    """Patch every command module so ``get_client()`` returns a fake-backed client."""
    targets = [
        "algolia_client.cli.commands.indexes.get_client",
        "algolia_client.cli.commands.keys.get_client",
        "algolia_client.cli.commands.records.get_client",
        "algolia_client.cli.commands.settings.get_client",
    ]
    patchers = [patch(target, side_effect=fake_algolia.client) for target in targets]
    for patcher in patchers:
        patcher.start()
    yield fake_algolia
    for patcher in patchers:
        patcher.stop()


# =============================================================================
# Top-level group
# =============================================================================


@pytest.mark.unit
class TestMain:
    """Tests for the root command group."""

    def test_version(self, cli_runner):
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_missing_credentials(self, cli_runner):
        """Test that commands refuse to run without ALGOLIA_* credentials."""
        result = cli_runner.invoke(cli, ["indexes", "list"])

        assert result.exit_code == 2
        assert "ALGOLIA_APPLICATION_ID" in result.output


# =============================================================================
# indexes
# =============================================================================


@pytest.mark.unit
class TestIndexesCommands:
    """Tests for ``indexes`` commands."""

    def test_list_table(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        result = cli_runner.invoke(cli, ["indexes", "list"])

        assert result.exit_code == 0
        assert "products" in result.output
        assert "Total: 1 indexes" in result.output

    def test_list_json(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        result = cli_runner.invoke(cli, ["indexes", "list", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["name"] == "products"
        assert data[0]["entries"] == 4

    def test_list_empty(self, cli_runner, fake_client):
        result = cli_runner.invoke(cli, ["indexes", "list"])

        assert result.exit_code == 0
        assert "No indexes found" in result.output

    def test_delete_requires_confirmation(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        result = cli_runner.invoke(cli, ["indexes", "delete", "products"], input="n\n")

        assert result.exit_code == 0
        assert "Delete cancelled" in result.output
        assert "products" in fake_client.indexes

    def test_delete_force_wait(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        result = cli_runner.invoke(cli, ["indexes", "delete", "products", "--force", "--wait"])

        assert result.exit_code == 0
        assert "Index products deleted" in result.output
        assert "products" not in fake_client.indexes

    def test_copy_and_move(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        copied = cli_runner.invoke(cli, ["indexes", "copy", "products", "backup"])
        moved = cli_runner.invoke(cli, ["indexes", "move", "backup", "archive", "--wait"])

        assert copied.exit_code == 0
        assert moved.exit_code == 0
        assert set(fake_client.indexes) == {"products", "archive"}

    def test_clear_force(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        result = cli_runner.invoke(cli, ["indexes", "clear", "products", "--force"])

        assert result.exit_code == 0
        assert fake_client.indexes["products"].records == {}

    def test_api_error_exits_1(self, cli_runner, fake_client):
        fake_client.down_hosts.update(
            {"testapp.algolia.net", *(f"testapp-{i}.algolianet.com" for i in range(1, 4))}
        )

        result = cli_runner.invoke(cli, ["indexes", "clear", "products", "--force"])

        assert result.exit_code == 1
        assert "Failed to clear index products" in result.output


# =============================================================================
# keys
# =============================================================================


@pytest.mark.unit
class TestKeysCommands:
    """Tests for ``keys`` commands."""

    @pytest.fixture
    def seeded(self, fake_client):
        fake_client.keys["key-1"] = {
            "value": "key-1",
            "acl": ["search", "browse"],
            "description": "frontend",
        }
        return fake_client

    def test_list(self, cli_runner, seeded):
        result = cli_runner.invoke(cli, ["keys", "list"])

        assert result.exit_code == 0
        assert "key-1" in result.output
        assert "search,browse" in result.output

    def test_get_json(self, cli_runner, seeded):
        result = cli_runner.invoke(cli, ["keys", "get", "key-1"])

        assert result.exit_code == 0
        assert json.loads(result.output)["description"] == "frontend"

    def test_get_missing(self, cli_runner, seeded):
        result = cli_runner.invoke(cli, ["keys", "get", "nope"])

        assert result.exit_code == 1
        assert "Key does not exist" in result.output

    def test_delete_force(self, cli_runner, seeded):
        result = cli_runner.invoke(cli, ["keys", "delete", "key-1", "--force"])

        assert result.exit_code == 0
        assert seeded.keys == {}


# =============================================================================
# records
# =============================================================================


@pytest.mark.unit
class TestRecordsCommands:
    """Tests for ``records`` commands."""

    def test_search(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        result = cli_runner.invoke(cli, ["records", "search", "products", "phone"])

        assert result.exit_code == 0
        assert "Galaxy phone" in result.output
        assert "3 hits" in result.output

    def test_search_json(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        result = cli_runner.invoke(
            cli, ["records", "search", "products", "laptop", "--format", "json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["nbHits"] == 1

    def test_browse_dumps_json_lines(self, cli_runner, fake_client):
        fake_client.add_records("products", [{"objectID": str(i)} for i in range(5)])

        result = cli_runner.invoke(cli, ["records", "browse", "products"])

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.startswith("{")]
        assert [json.loads(line)["objectID"] for line in lines] == ["0", "1", "2", "3", "4"]

    def test_browse_limit(self, cli_runner, fake_client):
        fake_client.add_records("products", [{"objectID": str(i)} for i in range(5)])

        result = cli_runner.invoke(cli, ["records", "browse", "products", "--limit", "2"])

        lines = [line for line in result.output.splitlines() if line.startswith("{")]
        assert len(lines) == 2

    def test_browse_missing_index(self, cli_runner, fake_client):
        result = cli_runner.invoke(cli, ["records", "browse", "missing"])

        assert result.exit_code == 1
        assert "Browse failed after 0 records" in result.output

    def test_get_with_attributes(self, cli_runner, fake_client, products):
        fake_client.add_records("products", products)

        result = cli_runner.invoke(
            cli, ["records", "get", "products", "1", "--attribute", "name"]
        )

        assert result.exit_code == 0
        assert json.loads(result.output) == {"objectID": "1", "name": "Galaxy phone"}


# =============================================================================
# settings
# =============================================================================


@pytest.mark.unit
class TestSettingsCommands:
    """Tests for ``settings`` commands."""

    def test_set_then_get(self, cli_runner, fake_client):
        fake_client.add_index("products")

        updated = cli_runner.invoke(
            cli,
            ["settings", "set", "products", '{"searchableAttributes": ["name"]}', "--wait"],
        )
        shown = cli_runner.invoke(cli, ["settings", "get", "products", "--format", "json"])

        assert updated.exit_code == 0
        assert json.loads(shown.output) == {"searchableAttributes": ["name"]}

    def test_set_rejects_invalid_json(self, cli_runner, fake_client):
        result = cli_runner.invoke(cli, ["settings", "set", "products", "{not json"])

        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_get_table(self, cli_runner, fake_client):
        fake_client.add_index("products").settings["hitsPerPage"] = 5

        result = cli_runner.invoke(cli, ["settings", "get", "products"])

        assert result.exit_code == 0
        assert "hitsPerPage" in result.output
