"""CLI tests — grailx prompt/run/plugins/init/manifest via CliRunner."""

from __future__ import annotations

import json
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from grail.cli import PLUGINS_USAGE, USAGE, cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path, monkeypatch) -> Path:
    """Empty project dir, set as GRAIL_PROJECT_ROOT."""
    monkeypatch.setenv("GRAIL_PROJECT_ROOT", str(tmp_path))
    return tmp_path


def _write(path: Path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


# ---------------------------------------------------------------------------
# Group wiring
# ---------------------------------------------------------------------------


def test_cli_is_group():
    assert isinstance(cli, click.Group)


def test_cli_help_exits_zero(runner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for sub in ["prompt", "run", "plugins", "init", "manifest"]:
        assert sub in result.output


def test_no_subcommand_prints_usage_exit_2(runner, project):
    result = runner.invoke(cli, [])
    assert result.exit_code == 2
    assert USAGE in result.stdout
    assert result.stderr == ""


def test_unknown_subcommand_prints_usage_exit_2(runner, project):
    result = runner.invoke(cli, ["frobnicate"])
    assert result.exit_code == 2
    assert USAGE in result.stdout
    assert result.stderr == ""


def test_plugins_without_subcommand_exit_2(runner, project):
    result = runner.invoke(cli, ["plugins"])
    assert result.exit_code == 2
    assert PLUGINS_USAGE in result.stdout
    assert result.stderr == ""


def test_plugins_unknown_subcommand_exit_2(runner, project):
    result = runner.invoke(cli, ["plugins", "purge"])
    assert result.exit_code == 2
    assert PLUGINS_USAGE in result.stdout
    assert result.stderr == ""


# ---------------------------------------------------------------------------
# prompt / run
# ---------------------------------------------------------------------------


def test_prompt_uninitialized_fails(runner, project):
    result = runner.invoke(cli, ["prompt"])
    assert result.exit_code == 1
    assert "no manifests found" in result.stderr
    assert result.stdout == ""


def test_prompt_single_command(runner, project):
    _write(project / "grail.manifest.json", {"commands": [{"name": "web.search", "desc": "search docs"}]})
    result = runner.invoke(cli, ["prompt"])
    assert result.exit_code == 0
    assert "Commands:\n- web.search: search docs\n" in result.stdout


def test_prompt_bare_command_name(runner, project):
    _write(project / "grail.manifest.json", {"commands": [{"name": "bundle"}]})
    result = runner.invoke(cli, ["prompt"])
    assert result.exit_code == 0
    assert "Commands:\n- bundle\n" in result.output


def test_prompt_corrupt_base_manifest_fails(runner, project):
    (project / "grail.manifest.json").write_text("{")
    result = runner.invoke(cli, ["prompt"])
    assert result.exit_code == 1
    assert "Corrupt manifest" in result.stderr
    assert "Corrupt manifest" not in result.stdout


def test_end_to_end_base_plus_registered_plugin(runner, project):
    _write(project / "grail.manifest.json", {"commands": [{"name": "web.search", "desc": "search docs"}]})
    _write(project / "plugins" / "auth.json", {"env": {"TOKEN": "set this"}})

    added = runner.invoke(cli, ["plugins", "add", "auth"])
    assert added.exit_code == 0

    result = runner.invoke(cli, ["prompt"])
    assert result.exit_code == 0
    assert "Commands:\n- web.search: search docs\n" in result.stdout
    assert "Environment hints:\n- TOKEN: set this\n" in result.stdout


def test_project_root_option_overrides_env(runner, project, tmp_path_factory):
    other = tmp_path_factory.mktemp("other")
    _write(other / "grail.manifest.json", {"commands": [{"name": "from.other"}]})
    result = runner.invoke(cli, ["--project-root", str(other), "prompt"])
    assert result.exit_code == 0
    assert "- from.other" in result.output


def test_run_requires_agent(runner, project):
    _write(project / "grail.manifest.json", {"commands": [{"name": "c"}]})
    result = runner.invoke(cli, ["run"])
    assert result.exit_code == 1
    assert "--agent" in result.stderr
    assert result.stdout == ""


def test_run_prints_prompt_then_agent(runner, project):
    _write(project / "grail.manifest.json", {"commands": [{"name": "c"}]})
    result = runner.invoke(cli, ["run", "--agent", "claude -p 'fix tests'"])
    assert result.exit_code == 0
    prompt_end = result.output.index("Always prefer Grail")
    handoff = result.output.index("---\nRun this agent command in the same shell:\n")
    assert prompt_end < handoff
    assert result.output.rstrip("\n").endswith("claude -p 'fix tests'")


def test_run_uninitialized_fails(runner, project):
    result = runner.invoke(cli, ["run", "--agent", "codex"])
    assert result.exit_code == 1


# ---------------------------------------------------------------------------
# plugins
# ---------------------------------------------------------------------------


def test_plugins_list_empty(runner, project):
    result = runner.invoke(cli, ["plugins", "list"])
    assert result.exit_code == 0
    assert result.output == ""


def test_plugins_list_insertion_order_after_restart(runner, project):
    runner.invoke(cli, ["plugins", "add", "web"])
    runner.invoke(cli, ["plugins", "add", "extra/tools.json"])
    result = CliRunner().invoke(cli, ["plugins", "list"])
    assert result.exit_code == 0
    assert result.stdout == "web\nextra/tools.json\n"


def test_plugins_add_twice_single_entry(runner, project):
    runner.invoke(cli, ["plugins", "add", "web"])
    runner.invoke(cli, ["plugins", "add", "web"])
    result = runner.invoke(cli, ["plugins", "list"])
    assert result.output == "web\n"


def test_plugins_rm(runner, project):
    for name in ("a", "b", "c"):
        runner.invoke(cli, ["plugins", "add", name])
    result = runner.invoke(cli, ["plugins", "rm", "b"])
    assert result.exit_code == 0
    assert runner.invoke(cli, ["plugins", "list"]).output == "a\nc\n"


@pytest.mark.parametrize("sub", ["add", "rm"])
def test_plugins_mutators_require_ref(runner, project, sub):
    result = runner.invoke(cli, ["plugins", sub])
    assert result.exit_code == 1
    assert "usage: grailx plugins" in result.stderr
    assert result.stdout == ""
    assert not (project / ".grail" / "config.json").exists()


def test_plugins_list_json(runner, project):
    runner.invoke(cli, ["plugins", "add", "web"])
    result = runner.invoke(cli, ["plugins", "list", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"plugins": ["web"]}


def test_plugins_list_corrupt_registry_fails(runner, project):
    (project / ".grail").mkdir()
    (project / ".grail" / "config.json").write_text("not json")
    result = runner.invoke(cli, ["plugins", "list"])
    assert result.exit_code == 1
    assert "Corrupt plugin registry" in result.stderr
    assert result.stdout == ""


# ---------------------------------------------------------------------------
# init / manifest
# ---------------------------------------------------------------------------


def test_init_then_prompt(runner, project):
    result = runner.invoke(cli, ["init"])
    assert result.exit_code == 0
    assert (project / "grail.manifest.json").exists()
    prompt = runner.invoke(cli, ["prompt"])
    assert prompt.exit_code == 0
    assert "- web.search: " in prompt.output


def test_init_refuses_overwrite(runner, project):
    _write(project / "grail.manifest.json", {"commands": [{"name": "mine"}]})
    result = runner.invoke(cli, ["init"])
    assert result.exit_code == 1
    assert json.loads((project / "grail.manifest.json").read_text()) == {"commands": [{"name": "mine"}]}


def test_init_force_overwrites(runner, project):
    _write(project / "grail.manifest.json", {"commands": [{"name": "mine"}]})
    result = runner.invoke(cli, ["init", "--force"])
    assert result.exit_code == 0
    assert json.loads((project / "grail.manifest.json").read_text())["name"] == "grail"


def test_manifest_json(runner, project):
    _write(project / "grail.manifest.json", {"name": "base", "commands": [{"name": "c"}]})
    _write(project / "plugins" / "p.json", {"name": "p", "env": {"K": "v"}})
    result = runner.invoke(cli, ["manifest"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["name"] == "base"
    assert data["commands"] == [{"name": "c"}]
    assert data["env"] == {"K": "v"}


def test_manifest_human(runner, project):
    _write(project / "grail.manifest.json", {"name": "base", "commands": [{"name": "c"}]})
    result = runner.invoke(cli, ["manifest", "--human"])
    assert result.exit_code == 0
    assert "name: base\n" in result.output


def test_verbose_flag_accepted(runner, project):
    result = runner.invoke(cli, ["-v", "plugins", "list"])
    assert result.exit_code == 0


def test_plugins_add_unwritable_config_fails_cleanly(runner, project):
    (project / ".grail").write_text("not a directory")
    result = runner.invoke(cli, ["plugins", "add", "web"])
    assert result.exit_code == 1
    assert "cannot write" in result.stderr
    assert result.stdout == ""
    assert not isinstance(result.exception, OSError)


def test_plugins_rm_unwritable_config_fails_cleanly(runner, project):
    (project / ".grail").write_text("not a directory")
    result = runner.invoke(cli, ["plugins", "rm", "web"])
    assert result.exit_code == 1
    assert "cannot write" in result.stderr


def test_init_unwritable_manifest_fails_cleanly(runner, project):
    (project / "grail.manifest.json").mkdir()
    result = runner.invoke(cli, ["init", "--force"])
    assert result.exit_code == 1
    assert "cannot write" in result.stderr
    assert not isinstance(result.exception, OSError)
