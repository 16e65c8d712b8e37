"""Unit tests for yakuake_session.cli.options."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from yakuake_session.cli.options import parse_options


class TestDefaults:
    def test_no_arguments(self):
        options = parse_options([])
        assert options.workdir is None
        assert options.title is None
        assert options.command is None
        assert options.hold is False
        assert options.show is True
        assert options.fish is False
        assert options.properties == ()
        assert options.debug is False

    def test_defaults_from_config(self):
        options = parse_options([], default_fish=True, default_show=False)
        assert options.fish is True
        assert options.show is False

    def test_options_are_immutable(self):
        options = parse_options([])
        with pytest.raises(ValidationError):
            options.title = "changed"


class TestWorkdir:
    def test_short_flag(self):
        assert parse_options(["-w", "/tmp"]).workdir == Path("/tmp")

    def test_long_flag_with_value(self):
        assert parse_options(["--workdir=/srv"]).workdir == Path("/srv")

    def test_long_flag_takes_value_only_after_equals(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["--workdir", "/srv"])
        assert exc_info.value.code == 1

    def test_long_flag_without_value_uses_cwd(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert parse_options(["--workdir"]).workdir == tmp_path

    def test_homedir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert parse_options(["-h"]).workdir == tmp_path
        assert parse_options(["--homedir"]).workdir == tmp_path

    def test_homedir_overrides_prior_workdir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert parse_options(["-w", "/tmp", "-h"]).workdir == tmp_path

    def test_later_workdir_overrides_homedir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert parse_options(["-h", "-w", "/tmp"]).workdir == Path("/tmp")

    def test_effective_workdir_defaults_to_cwd(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        assert parse_options([]).effective_workdir == tmp_path


class TestFlags:
    def test_title(self):
        assert parse_options(["-t", "My Tab"]).title == "My Tab"
        assert parse_options(["--title", "logs"]).title == "logs"

    def test_quiet_disables_show(self):
        assert parse_options(["-q"]).show is False

    @pytest.mark.parametrize("flag", ["--hold", "--noclose"])
    def test_hold(self, flag):
        assert parse_options([flag]).hold is True

    def test_fish_and_nofish_last_wins(self):
        assert parse_options(["--fish"]).fish is True
        assert parse_options(["--fish", "--nofish"]).fish is False
        assert parse_options(["--nofish"], default_fish=True).fish is False

    def test_debug(self):
        assert parse_options(["--debug"]).debug is True

    def test_properties_keep_order(self):
        options = parse_options(["-p", "FOO=bar", "-p", "BAZ=qux"])
        assert options.properties == ("FOO=bar", "BAZ=qux")

    def test_property_value_may_contain_equals(self):
        assert parse_options(["-p", "Command=env A=1"]).properties == ("Command=env A=1",)


class TestCommand:
    def test_collects_remaining_tokens(self):
        options = parse_options(["-e", "echo", "hi"])
        assert options.command == ("echo", "hi")

    def test_tokens_after_e_are_not_options(self):
        options = parse_options(["-t", "x", "-e", "ls", "-la", "-t", "--hold"])
        assert options.title == "x"
        assert options.hold is False
        assert options.command == ("ls", "-la", "-t", "--hold")

    def test_double_dash_after_e_is_kept(self):
        options = parse_options(["-e", "git", "log", "--", "README"])
        assert options.command == ("git", "log", "--", "README")

    def test_command_may_start_with_double_dash(self):
        assert parse_options(["-e", "--", "ls"]).command == ("--", "ls")

    @pytest.mark.parametrize("token", ["--help", "--version", "-e", "--workdir=/x"])
    def test_special_tokens_after_e_are_kept(self, token):
        options = parse_options(["-e", "echo", token])
        assert options.command == ("echo", token)

    @pytest.mark.parametrize("flag", ["-w", "-t", "-p"])
    def test_e_as_option_value_does_not_start_command(self, flag):
        with pytest.raises(SystemExit) as exc_info:
            parse_options([flag, "-e", "ls"])
        assert exc_info.value.code == 1

    def test_bundled_quiet_and_e(self):
        options = parse_options(["-qe", "top"])
        assert options.show is False
        assert options.command == ("top",)

    def test_options_before_e_are_parsed(self):
        options = parse_options(["-w", "/tmp", "-q", "-e", "top"])
        assert options.workdir == Path("/tmp")
        assert options.show is False
        assert options.command == ("top",)


class TestUsageErrors:
    def test_unknown_option_exits_with_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["--bogus"])
        assert exc_info.value.code == 1
        assert "--bogus" in capsys.readouterr().err

    def test_missing_argument_exits_with_one(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["-w"])
        assert exc_info.value.code == 1

    def test_e_without_command_exits_with_one(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["-e"])
        assert exc_info.value.code == 1

    def test_malformed_property_exits_with_one(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["-p", "novalue"])
        assert exc_info.value.code == 1
        assert "PROPERTY=VALUE" in capsys.readouterr().err

    def test_positional_argument_exits_with_one(self):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["stray"])
        assert exc_info.value.code == 1


class TestHelp:
    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["--help"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "--homedir" in out
        assert "--hold" in out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["--version"])
        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out
