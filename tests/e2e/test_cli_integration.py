"""End-to-end CLI tests."""
import json

import pytest

from solid_examples.cli.main import main, parse_args


class TestCLIIntegration:
    """Test complete CLI scenarios."""

    def test_list(self, capsys):
        main(["list"])

        lines = capsys.readouterr().out.splitlines()
        assert [line.split()[0] for line in lines] == ["srp", "ocp", "lsp", "isp", "dip"]
        assert "Liskov Substitution Principle" in lines[2]

    def test_run_selected_examples_in_given_order(self, capsys):
        main(["run", "lsp", "OCP"])

        output = capsys.readouterr().out
        assert output.index("Liskov Substitution Principle") < output.index("Open/Closed Principle")
        assert "Expected 200, got 400" in output
        assert "--Large and yellow things:\nTrain\n" in output
        assert "Single Responsibility Principle" not in output

    def test_run_all_writes_srp_files_to_output_dir(self, tmp_path, capsys):
        main(["--output-dir", str(tmp_path), "run"])

        output = capsys.readouterr().out
        for title in (
            "Single Responsibility Principle",
            "Open/Closed Principle",
            "Liskov Substitution Principle",
            "Interface Segregation Principle",
            "Dependency Inversion Principle",
        ):
            assert title in output
        assert (tmp_path / "wrong.log").read_text() == "entry1\nentry2\n"
        assert (tmp_path / "better.log").read_text() == "entry1\nentry2\n"

    def test_config_file_sets_srp_filenames(self, tmp_path, write_config, capsys):
        path = write_config({
            "srp": {"output_dir": str(tmp_path), "wrong_filename": "bad.log", "better_filename": "good.log"}
        })

        main(["--config", path, "run", "srp"])

        assert (tmp_path / "bad.log").exists()
        assert (tmp_path / "good.log").exists()

    def test_unknown_example_exits_without_running_others(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "ocp", "nope"])

        captured = capsys.readouterr()
        assert exc_info.value.code == 1
        assert "Unknown example 'nope'" in captured.err
        assert "Open/Closed" not in captured.out

    def test_srp_write_failure_exits_with_error(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--output-dir", str(tmp_path / "missing"), "run", "srp"])

        assert exc_info.value.code == 1
        assert "Error: " in capsys.readouterr().err

    def test_invalid_config_file_exits_with_error(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "LOUD"}}))

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(path), "list"])

        assert exc_info.value.code == 1
        assert "logging.level" in capsys.readouterr().err

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "No command specified" in capsys.readouterr().err

    def test_verbose_logs_to_stderr_only(self, capsys):
        main(["--verbose", "run", "dip"])

        captured = capsys.readouterr()
        assert "Delegating work" in captured.err
        assert "Delegating work" not in captured.out

    def test_parse_args_defaults(self):
        args = parse_args(["run"])

        assert args.command == "run"
        assert args.examples == []
        assert args.config is None
        assert args.output_dir is None
        assert args.verbose is False


@pytest.mark.parametrize("name", ["srp", "ocp", "lsp", "isp", "dip"])
def test_module_main_runs_standalone(name, tmp_path, monkeypatch, capsys):
    """Each example runs on its own with no arguments."""
    import importlib

    monkeypatch.chdir(tmp_path)
    importlib.import_module(f"solid_examples.principles.{name}").main()

    assert capsys.readouterr().out
