import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
ICO_BYTES = bytes([0x00, 0x00, 0x01, 0x00, 0x01, 0x00, 0x10, 0x10])


def _run_cli(args, cwd=None, timeout=60, extra_env=None):
    env = os.environ.copy()
    env.update(extra_env or {})
    env["PYTHONPATH"] = str(ROOT)
    cmd = [sys.executable, "-m", "icocheck", *args]
    return subprocess.run(
        cmd,
        capture_output=True,
        env=env,
        cwd=cwd,
        timeout=timeout,
    )


def test_cli_help():
    result = _run_cli(["--help"])
    assert result.returncode == 0
    assert b"Usage:" in result.stdout


def test_valid_icon_end_to_end(tmp_path):
    target = tmp_path / "icon.ico"
    target.write_bytes(ICO_BYTES)

    result = _run_cli([str(target)])
    assert result.returncode == 0
    assert result.stdout.decode("utf-8") == f"✓ {target} is a valid Windows ICO file\n"
    assert result.stderr == b""


def test_cursor_end_to_end(tmp_path):
    target = tmp_path / "icon.ico"
    target.write_bytes(b"\x00\x00\x02\x00")

    result = _run_cli([str(target)])
    assert result.returncode == 1
    assert result.stderr.decode("utf-8") == f"✗ {target} is not a valid ICO file!\n"
    assert result.stdout == b""


def test_default_target_end_to_end(tmp_path):
    icons = tmp_path / "src-tauri" / "icons"
    icons.mkdir(parents=True)
    (icons / "icon.ico").write_bytes(ICO_BYTES)

    result = _run_cli([], cwd=tmp_path)
    assert result.returncode == 0
    assert b"src-tauri/icons/icon.ico is a valid Windows ICO file" in result.stdout


def test_glyphs_survive_narrow_locale(tmp_path):
    target = tmp_path / "icon.ico"
    target.write_bytes(b"\x89PNG")

    env = os.environ.copy()
    env["PYTHONPATH"] = str(ROOT)
    env["PYTHONIOENCODING"] = "ascii"
    result = subprocess.run(
        [sys.executable, "-m", "icocheck", str(target)],
        capture_output=True,
        env=env,
        timeout=60,
    )
    assert result.returncode == 1
    assert "✗".encode("utf-8") in result.stderr


def test_force_color_does_not_style_report_lines(tmp_path):
    target = tmp_path / "icon.ico"
    target.write_bytes(ICO_BYTES)
    result = _run_cli([str(target)], extra_env={"FORCE_COLOR": "1"})
    assert result.returncode == 0
    assert result.stdout == f"✓ {target} is a valid Windows ICO file\n".encode("utf-8")

    cursor = tmp_path / "pointer.cur"
    cursor.write_bytes(b"\x00\x00\x02\x00")
    result = _run_cli([str(cursor)], extra_env={"FORCE_COLOR": "1"})
    assert result.returncode == 1
    assert result.stderr == f"✗ {cursor} is not a valid ICO file!\n".encode("utf-8")


def test_tab_in_path_end_to_end(tmp_path):
    target = tmp_path / "a\tb.ico"
    target.write_bytes(b"\x00\x00\x02\x00")
    result = _run_cli([str(target)])
    assert result.returncode == 1
    assert result.stderr == f"✗ {target} is not a valid ICO file!\n".encode("utf-8")
