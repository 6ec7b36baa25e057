"""grail-linear stub lookups."""

from click.testing import CliRunner

from grail.linear import USAGE, linear


def test_me():
    result = CliRunner().invoke(linear, ["me"])
    assert result.exit_code == 0
    assert result.output == '{"me":true}\n'


def test_issues():
    result = CliRunner().invoke(linear, ["issues"])
    assert result.output == "[]\n"


def test_issue():
    result = CliRunner().invoke(linear, ["issue", "ENG-1"])
    assert result.exit_code == 0
    assert result.output == '{"id":"example"}\n'


def test_no_subcommand_usage():
    result = CliRunner().invoke(linear, [])
    assert result.exit_code == 2
    assert USAGE in result.output


def test_unknown_subcommand_usage():
    result = CliRunner().invoke(linear, ["teams"])
    assert result.exit_code == 2
    assert USAGE in result.output
