import pytest

from chromahex import cli


@pytest.fixture(autouse=True)
def no_color_env(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)


def test_prints_all_representations(capsys):
    assert cli.main(["#ffaa33"]) == 0
    out = capsys.readouterr().out

    assert "Hex Input: #FFAA33" in out
    assert "\033[48;2;255;170;51m" in out
    assert "rgba(255, 170, 51, 255)" in out
    assert "hsl(35°, 100%, 60%)" in out
    assert "hsv(35°, 80%, 100%)" in out
    assert "cmyk(0%, 33%, 80%, 0%)" in out
    assert "-> Alpha: 255" in out


def test_no_color_flag_drops_swatch(capsys):
    assert cli.main(["--no-color", "fa3"]) == 0
    out = capsys.readouterr().out
    assert "\033[" not in out
    assert "Hex Input: #FA3" in out


def test_no_color_env(capsys, monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert cli.main(["000"]) == 0
    out = capsys.readouterr().out
    assert "\033[" not in out
    assert "cmyk(0%, 0%, 0%, 100%)" in out


def test_invalid_color_exits_1(capsys):
    assert cli.main(["--no-color", "#GGHHII"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Invalid character in hex color" in captured.err


def test_invalid_length_exits_1(capsys):
    assert cli.main(["FFFFF"]) == 1
    assert "Hex color must be 3, 4, 6 or 8 characters long" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["fff", "000"]])
def test_bad_arguments_print_usage(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "usage: chromahex" in err
    assert "Example:" in err


def test_rounded_half_up():
    assert cli.rounded(0.5) == 1
    assert cli.rounded(2.5) == 3
    assert cli.rounded(2.49) == 2


def test_verbose_logs_core_modules(capsys):
    assert cli.main(["-v", "--no-color", "#0f0"]) == 0
    err = capsys.readouterr().err
    assert cli.logger.name == "chromahex"
    assert "chromahex.conversions.hex" in err
    cli.setup_logging(False)
