"""Tests for the eyeblink command line."""

from __future__ import annotations

import math

import numpy as np
import pytest
from typer.testing import CliRunner

from eyeblink.cli.commands.preview import ASCII_RAMP, render_ascii
from eyeblink.loop import app

runner = CliRunner()


class TestCli:
    def test_evaluate_center_pixel(self) -> None:
        result = runner.invoke(
            app,
            ["evaluate", "32", "32", "--width", "64", "--height", "64", "--time", str(math.pi / 2)],
        )

        assert result.exit_code == 0
        assert float(result.stdout.strip()) == pytest.approx(0.975 ** (1 / 32), abs=1e-6)

    def test_evaluate_honors_blink_mode(self) -> None:
        result = runner.invoke(
            app,
            ["evaluate", "1", "1", "--width", "2", "--height", "2", "--time", str(math.pi / 2), "--blink-mode", "smooth"],
        )

        assert result.exit_code == 0
        assert float(result.stdout.strip()) == pytest.approx(0.975 ** (1 / 64), abs=1e-6)

    def test_evaluate_rejects_unknown_blink_mode(self) -> None:
        result = runner.invoke(app, ["evaluate", "1", "1", "--blink-mode", "wink"])

        assert result.exit_code != 0

    def test_preview_prints_one_row_per_pixel_row(self) -> None:
        result = runner.invoke(app, ["preview", "--width", "12", "--height", "5"])

        assert result.exit_code == 0
        rows = result.stdout.rstrip("\n").split("\n")
        assert len(rows) == 5
        assert all(len(row) == 12 for row in rows)

    def test_timeline_prints_each_frame(self) -> None:
        result = runner.invoke(app, ["timeline", "--frames", "4", "--fps", "2"])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 4
        # Frame zero is a blink instant.
        assert float(lines[0].split()[-1]) < 1e-3


def test_render_ascii_maps_extremes() -> None:
    assert render_ascii(np.array([[0.0, 1.0]])) == ASCII_RAMP[0] + ASCII_RAMP[-1]
