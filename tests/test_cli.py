import shutil
from pathlib import Path

from click.testing import CliRunner

from api_spec_overlay.cli import main

FIXTURES = Path(__file__).parent / "fixtures"

CONFIG = """- specification: blog.yaml
  overlay_yaml: build/blog-overlay.yaml
  schema_json: build/schemas.json
"""


def _workspace(tmp_path: Path) -> Path:
    shutil.copy(FIXTURES / "blog.yaml", tmp_path / "blog.yaml")
    config = tmp_path / "apispec.yaml"
    config.write_text(CONFIG)
    return config


class TestCliGenerate:
    def test_generate_with_config(self, tmp_path):
        config = _workspace(tmp_path)
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "build" / "blog-overlay.yaml").exists()
        assert (tmp_path / "build" / "schemas.json").exists()
        assert "Processed 1 jobs" in result.output

    def test_generate_with_default_config(self, tmp_path, monkeypatch):
        _workspace(tmp_path)
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "--log-level", "off"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "build" / "blog-overlay.yaml").exists()

    def test_generate_without_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        runner = CliRunner()
        result = runner.invoke(main, ["generate"])

        assert result.exit_code == 1
        assert "apispec.yaml" in result.output

    def test_invalid_log_level(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "--log-level", "verbose"])
        assert result.exit_code == 2


class TestCliDiff:
    def test_diff_clean_after_generate(self, tmp_path):
        config = _workspace(tmp_path)
        runner = CliRunner()
        runner.invoke(main, ["generate", "--config", str(config)])
        result = runner.invoke(main, ["diff", "--config", str(config)])

        assert result.exit_code == 0, result.output
        assert "No differences found" in result.output

    def test_diff_reports_missing_outputs(self, tmp_path):
        config = _workspace(tmp_path)
        runner = CliRunner()
        result = runner.invoke(main, ["diff", "--config", str(config)])

        assert result.exit_code == 1
        assert "Differences found" in result.output
        assert "file does not exist" in result.output


class TestCliValidate:
    def test_valid_document(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "blog.yaml")])

        assert result.exit_code == 0, result.output
        assert "is valid" in result.output

    def test_invalid_document_shows_position(self):
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(FIXTURES / "invalid_operation.yaml")])

        assert result.exit_code == 1
        assert "line 5, column 5" in result.output
        assert "invalid operation 'create'" in result.output

    def test_unsupported_extension(self, tmp_path):
        doc = tmp_path / "spec.txt"
        doc.write_text("name: x\n")
        runner = CliRunner()
        result = runner.invoke(main, ["validate", str(doc)])

        assert result.exit_code == 1
        assert "unsupported file extension" in result.output
