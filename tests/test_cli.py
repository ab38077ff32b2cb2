"""Smoke tests for the command-line host."""

from __future__ import annotations

from pathlib import Path

import pytest

from sandfall.__main__ import main


def test_main_module_importable() -> None:
    """The __main__ module is importable and exposes main()."""
    assert callable(main)


def test_main_prints_frames(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scene = tmp_path / "scene.yaml"
    scene.write_text(
        "seed: 1\n"
        "world_width: 4\n"
        "world_height: 3\n"
        "ticks: 2\n"
        "brushes:\n"
        "  - {x: 1, y: 0, material: sand}\n",
    )
    main(["-c", str(scene), "--every", "1"])
    out = capsys.readouterr().out
    assert "--- tick 1 ---" in out
    assert "--- tick 2 ---" in out
    assert out.splitlines()[0] == " .  "


def test_ticks_override(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    scene = tmp_path / "scene.yaml"
    scene.write_text("world_width: 2\nworld_height: 2\nticks: 100\n")
    main(["-c", str(scene), "--ticks", "3", "--every", "3"])
    out = capsys.readouterr().out
    assert "--- tick 3 ---" in out
    assert "--- tick 6 ---" not in out
