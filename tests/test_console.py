import pytest

from aatools import console


def test_echo(capsys):
    assert console.echo("%s", "Print message") == 13
    assert capsys.readouterr().out == "Print message"


def test_echoln(capsys):
    assert console.echoln("Print message") == 14
    assert capsys.readouterr().out == "Print message\n"


def test_bulletf():
    assert console.bulletf("%s", "Bullet message") == "\033[1m ⋅ \033[0mBullet message\n"


def test_bullet(capsys):
    assert console.bullet("%s", "Bullet message") == 28
    assert capsys.readouterr().out == "\033[1m ⋅ \033[0mBullet message\n"


def test_stepf():
    assert console.stepf("%s", "Step message") == "\033[1;32mStep message\033[0m\n"


def test_step():
    assert console.step("%s", "Step message") == 24


def test_successf():
    assert console.successf("%s", "Success message") == "\033[1;32m ✓ \033[0mSuccess message\n"


def test_success():
    assert console.success("%s", "Success message") == 32


def test_warningf():
    assert console.warningf("%s", "Warning message") == "\033[1;33m ‼ \033[0mWarning message\n"


def test_warning():
    assert console.warning("%s", "Warning message") == 32


def test_error():
    assert console.error("%s", "Error message") == 30


def test_fatalf():
    assert console.fatalf("%s", "Error message") == "\033[1;31m ✗ Error: \033[0mError message\n"


def test_fatal_exits(capsys):
    with pytest.raises(SystemExit) as info:
        console.fatal("%s", "Error message")
    assert info.value.code == 1
    assert capsys.readouterr().err == "\033[1;31m ✗ Error: \033[0mError message\n"


def test_indent_is_prefixed(monkeypatch):
    monkeypatch.setattr(console, "INDENT", "  ")
    assert console.stepf("%s", "Step message") == "  \033[1;32mStep message\033[0m\n"


def test_format_arguments():
    assert console.bulletf("Number %d", 7).endswith("Number 7\n")