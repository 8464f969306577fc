# tests/integration/test_cli_errors.py
# Integration tests for CLI error conditions, exit codes & diagnostics

from catr.cli.app import app


ENV = {"NO_COLOR": "1", "TERM": "dumb"}


# * Missing first source is reported; second still printed w/ counter at 1
def test_missing_then_valid(runner, tmp_path, write_source):
    missing = str(tmp_path / "missing.txt")
    valid = write_source("x.txt", ["x"])

    result = runner.invoke(app, ["-n", missing, str(valid)], env=ENV)

    assert result.stdout == "     1\tx\n"
    assert result.stderr == f"Failed to open {missing}: No such file or directory\n"
    # any failed source makes the run exit 1
    assert result.exit_code == 1


# * Directory sources are reported & skipped
def test_directory_source(runner, tmp_path, write_source):
    valid = write_source("ok.txt", ["ok"])

    result = runner.invoke(app, [str(tmp_path), str(valid)], env=ENV)

    assert result.exit_code == 1
    assert result.stdout == "ok\n"
    assert result.stderr.startswith(f"Failed to open {tmp_path}: ")


# * All sources failing still exits 1 w/ one diagnostic each
def test_all_sources_missing(runner, tmp_path):
    a = str(tmp_path / "a")
    b = str(tmp_path / "b")

    result = runner.invoke(app, [a, b], env=ENV)

    assert result.exit_code == 1
    assert result.stdout == ""
    assert result.stderr.splitlines() == [
        f"Failed to open {a}: No such file or directory",
        f"Failed to open {b}: No such file or directory",
    ]


# * -n & -b together is a usage error (exit 2) & nothing is read
def test_conflicting_flags(runner, sample_source):
    result = runner.invoke(app, ["-n", "-b", str(sample_source)], env=ENV)

    assert result.exit_code == 2
    assert result.stdout == ""
    assert "cannot be used together" in result.stderr


# * Unknown options are usage errors
def test_unknown_option(runner):
    result = runner.invoke(app, ["--squeeze-blank"], env=ENV)

    assert result.exit_code == 2


# * Empty source tokens are rejected as configuration errors
def test_empty_token(runner):
    result = runner.invoke(app, [""], env=ENV)

    assert result.exit_code == 1
    assert "Configuration Error" in result.stderr
    assert result.stdout == ""


# * Unwritable log file is reported as a File Error
def test_log_file_is_directory(runner, tmp_path, sample_source):
    result = runner.invoke(
        app, ["--log-file", str(tmp_path), str(sample_source)], env=ENV
    )

    assert result.exit_code == 1
    assert "File Error" in result.stderr
    assert result.stdout == ""


# * Escape sequences in a failed token are echoed verbatim in the diagnostic
def test_ansi_token_in_diagnostic(runner, tmp_path):
    missing = str(tmp_path / "\x1b[1mbold\x1b[0m.txt")

    result = runner.invoke(app, [missing], env=ENV)

    assert result.exit_code == 1
    assert result.stderr == f"Failed to open {missing}: No such file or directory\n"
