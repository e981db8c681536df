import sys
from unittest import mock

import pytest

from kensaku import info


def test_cpu_model_reads_first_model_name(tmp_path):
    path = tmp_path / "cpuinfo"
    path.write_text(
        "processor\t: 0\nmodel name\t: Fancy CPU 9000  \nprocessor\t: 1\nmodel name\t: Other\n",
        encoding="utf-8",
    )
    assert info.cpu_model(path) == "Fancy CPU 9000"


def test_cpu_model_missing(tmp_path):
    assert info.cpu_model(tmp_path / "nope") is None
    empty = tmp_path / "cpuinfo"
    empty.write_text("processor : 0\n", encoding="utf-8")
    assert info.cpu_model(empty) is None


def test_memory_usage(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text(
        "MemTotal:        2048 kB\nMemFree:          512 kB\nMemAvailable:    1024 kB\n",
        encoding="utf-8",
    )
    assert info.memory_usage(path) == (1, 2)


def test_memory_usage_never_negative(tmp_path):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1024 kB\nMemAvailable: 4096 kB\nMemFree: junk kB\n", encoding="utf-8")
    used, total = info.memory_usage(path)
    assert used == 0
    assert total == 1


def test_memory_usage_missing(tmp_path):
    assert info.memory_usage(tmp_path / "nope") is None


def test_uptime_format(tmp_path):
    path = tmp_path / "uptime"
    path.write_text("3725.5 1000.0\n", encoding="utf-8")
    assert info.uptime(path) == "1h 2m"


@pytest.mark.parametrize("content", ["", "abc 12", "\n"])
def test_uptime_unparsable(tmp_path, content):
    path = tmp_path / "uptime"
    path.write_text(content, encoding="utf-8")
    assert info.uptime(path) is None


def test_hostname_and_kernel_are_trimmed(tmp_path):
    host = tmp_path / "hostname"
    host.write_text("  box\n", encoding="utf-8")
    kernel = tmp_path / "osrelease"
    kernel.write_text("6.1.0-test\n", encoding="utf-8")
    assert info.hostname(host) == "box"
    assert info.kernel_version(kernel) == "6.1.0-test"
    assert info.hostname(tmp_path / "missing") is None


def test_os_pretty_name(tmp_path):
    path = tmp_path / "os-release"
    path.write_text('NAME="Thing"\nPRETTY_NAME="Thing Linux"\nID=thing\n', encoding="utf-8")
    assert info.os_pretty_name(path) == "Thing Linux"


def test_os_pretty_name_absent(tmp_path):
    path = tmp_path / "os-release"
    path.write_text("NAME=Thing\n", encoding="utf-8")
    assert info.os_pretty_name(path) is None


def test_arch_is_normalised():
    name = info.arch()
    assert name == name.lower()
    assert name not in {"amd64", "arm64"}


def test_package_count_without_managers():
    with mock.patch("kensaku.info.shutil.which", return_value=None):
        assert info.package_count() == "0 (native), 0 (flatpak)"


def test_shell_version_uses_shell_variable():
    result = info.shell_version({"SHELL": sys.executable})
    assert result.startswith("Python 3.")


def test_shell_version_capitalises(tmp_path):
    script = tmp_path / "fakesh"
    script.write_text("#!/bin/sh\necho 'zsh 5.9'\necho second\n", encoding="utf-8")
    script.chmod(0o755)
    assert info.shell_version({"SHELL": str(script)}) == "Zsh 5.9"


def test_shell_version_missing_shell(tmp_path):
    with pytest.raises(RuntimeError):
        info.shell_version({"SHELL": str(tmp_path / "no-such-shell")})


def test_window_manager_from_environment(tmp_path):
    env = {"DESKTOP_SESSION": "plasma", "XDG_DESKTOP_SESSION": "sway"}
    assert info.window_manager(env, tmp_path) == "sway"
    assert info.window_manager({"XDG_CURRENT_DESKTOP": "GNOME", **env}, tmp_path) == "GNOME"


def test_window_manager_empty_variable_counts(tmp_path):
    assert info.window_manager({"XDG_CURRENT_DESKTOP": ""}, tmp_path) == ""


def test_window_manager_from_xinitrc(tmp_path):
    (tmp_path / ".xinitrc").write_text("xrdb ~/.Xresources\nexec i3\n", encoding="utf-8")
    assert info.window_manager({}, tmp_path) == "i3"


def test_window_manager_xinitrc_last_word(tmp_path):
    (tmp_path / ".xinitrc").write_text("exec dbus-launch openbox-session", encoding="utf-8")
    assert info.window_manager({}, tmp_path) == "openbox-session"