"""Tests for the command-line interface."""

import os

from click.testing import CliRunner

from simulator.main import cli


class TestCli:
    def test_seed_then_run(self, tmp_path):
        data_dir = str(tmp_path / "data")
        results_dir = str(tmp_path / "results")
        runner = CliRunner()

        seeded = runner.invoke(cli, ["seed", "--data-dir", data_dir])
        assert seeded.exit_code == 0
        assert os.path.exists(os.path.join(data_dir, "orders.csv"))

        ran = runner.invoke(cli, [
            "run", "--drivers", "3", "--data-dir", data_dir, "--results-dir", results_dir
        ])
        assert ran.exit_code == 0, ran.output
        assert "SIMULATION RESULTS" in ran.output
        assert len(os.listdir(results_dir)) == 1

        latest = runner.invoke(cli, ["latest", "--results-dir", results_dir])
        assert latest.exit_code == 0
        assert "Total Profit" in latest.output

        history = runner.invoke(cli, ["history", "--results-dir", results_dir])
        assert history.exit_code == 0
        assert "RECENT SIMULATIONS (1)" in history.output

    def test_invalid_params_rejected(self, tmp_path):
        result = CliRunner().invoke(cli, ["run", "--drivers", "0", "--data-dir", str(tmp_path)])
        assert result.exit_code == 2

    def test_missing_data(self, tmp_path):
        result = CliRunner().invoke(cli, [
            "run", "--data-dir", str(tmp_path), "--results-dir", str(tmp_path / "r")
        ])
        assert result.exit_code == 1

    def test_latest_without_results(self, tmp_path):
        result = CliRunner().invoke(cli, ["latest", "--results-dir", str(tmp_path)])
        assert result.exit_code == 1

    def test_no_save(self, tmp_path):
        runner = CliRunner()
        data_dir = str(tmp_path / "data")
        results_dir = str(tmp_path / "results")
        runner.invoke(cli, ["seed", "--data-dir", data_dir])
        ran = runner.invoke(cli, [
            "run", "--data-dir", data_dir, "--results-dir", results_dir, "--no-save"
        ])
        assert ran.exit_code == 0
        assert not os.path.exists(results_dir) or os.listdir(results_dir) == []

    def test_history_rejects_negative_limit(self, tmp_path):
        result = CliRunner().invoke(cli, ["history", "--limit", "-1", "--results-dir", str(tmp_path)])
        assert result.exit_code == 2

    def test_corrupt_result_reported(self, tmp_path):
        (tmp_path / "simulation_20240101_000000_000000.json").write_text("{not json")
        runner = CliRunner()

        for command in ("latest", "history"):
            result = runner.invoke(cli, [command, "--results-dir", str(tmp_path)])
            assert result.exit_code == 1
            assert not isinstance(result.exception, ValueError)
