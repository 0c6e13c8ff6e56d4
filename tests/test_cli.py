import json
import os
from pathlib import Path

from argscan.cli import CLI
from argscan.cli_builder import LAUNCHER_SHORT_OPTIONS, build_launcher_parser, build_launcher_table
from argscan.config import DEFAULT_HELP_DIR, HELP_PATH_ENV, NO_COLOR_ENV, VERSION, ParserConfig
from argscan.help.provider import ERROR_BANNER
from argscan.model.models import ShortSpec


def make_cli(**overrides) -> CLI:
    values = {"tool_name": "prun", "no_color": True}
    values.update(overrides)
    return CLI(config=ParserConfig(**values))


def test_success_prints_outcome_as_json(capsys):
    exit_code = make_cli().run(
        ["-n", "2", "--mca", "plm_base_verbose", "5", "./a.out", "-x", "PATH", "arg"]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out) == {
        "options": {"np": ["2"], "mca": ["plm_base_verbose=5"], "export": ["PATH"]},
        "tail": ["./a.out", "arg"],
    }


def test_help_prints_usage(capsys):
    exit_code = make_cli().run(["--help"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage: prun [OPTION]" in captured.out
    assert f"prun (argscan) {VERSION}" in captured.out


def test_version(capsys):
    exit_code = make_cli(package_name="Launcher").run(["-V"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert f"prun (Launcher) {VERSION}" in captured.out
    assert "Usage:" not in captured.out


def test_help_on_option(capsys):
    exit_code = make_cli().run(["--np", "help"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "prun --np 4 ./a.out" in captured.out


def test_unrecognized_option_reports_and_fails(capsys):
    exit_code = make_cli().run(["--bogus", "./a.out"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert ERROR_BANNER in captured.err
    assert "Option: --bogus" in captured.err


def test_bad_parameter_exit_code(capsys):
    exit_code = make_cli().run(["-v", 7])

    captured = capsys.readouterr()
    assert exit_code == 2
    assert "Error:" in captured.err


def test_help_path_from_environment(tmp_path: Path, capsys):
    (tmp_path / "help-launcher.md").write_text("# usage\n\nCustom usage for {0}\n")
    config = ParserConfig.from_environment(
        {HELP_PATH_ENV: str(tmp_path), NO_COLOR_ENV: "1"}, tool_name="prun"
    )

    exit_code = CLI(config=config).run(["-h"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Custom usage for prun" in captured.out


def test_config_from_environment():
    first, second = Path("/opt/help"), Path("/usr/share/help")
    config = ParserConfig.from_environment(
        {HELP_PATH_ENV: f"{first}{os.pathsep}{os.pathsep}{second}", NO_COLOR_ENV: "1"},
        tool_name="prun",
    )

    assert config.help_dirs == (first, second, DEFAULT_HELP_DIR)
    assert config.no_color is True
    assert config.tool_name == "prun"
    assert config.exempt_shorts == frozenset({"h", "V"})

    assert ParserConfig.from_environment({}).no_color is False


def test_launcher_table_and_short_options_agree():
    table = build_launcher_table()
    spec = ShortSpec.parse(LAUNCHER_SHORT_OPTIONS)

    for flag, policy in spec.policies.items():
        descriptor = table.find_short(flag)
        assert descriptor is not None, f"-{flag} has no descriptor"
        assert descriptor.policy is policy


def test_launcher_parser_is_reusable():
    parser = build_launcher_parser(ParserConfig(no_color=True))

    first = parser.parse(["--debug=3", "-q", "prog"])
    second = parser.parse(["-d", "prog"])

    assert first.get_values("debug") == ["3"]
    assert first.is_taken("quiet")
    assert second.get_values("debug") == []
    assert second.tail == ["prog"]
