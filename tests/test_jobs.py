import json
import shutil
from pathlib import Path

import yaml

from api_spec_overlay.config import Job
from api_spec_overlay.jobs import describe_difference, diff_jobs, first_difference, run_jobs

FIXTURES = Path(__file__).parent / "fixtures"


def _job(tmp_path: Path) -> Job:
    shutil.copy(FIXTURES / "blog.yaml", tmp_path / "blog.yaml")
    return Job(
        specification="blog.yaml",
        overlay_yaml="build/blog-overlay.yaml",
        overlay_json="build/blog-overlay.json",
        schema_json="build/schemas.json",
    )


class TestRunJobs:
    def test_writes_outputs(self, tmp_path):
        written = run_jobs([_job(tmp_path)], tmp_path)
        assert sorted(p.name for p in written) == ["blog-overlay.json", "blog-overlay.yaml", "schemas.json"]

        overlay = yaml.safe_load((tmp_path / "build" / "blog-overlay.yaml").read_text())
        assert overlay["name"] == "Blog API"
        assert any(o["name"] == "UsersFilter" for o in overlay["objects"])

        schemas = json.loads((tmp_path / "build" / "schemas.json").read_text())
        assert "Service" in schemas


class TestDiffJobs:
    def test_missing_files_reported(self, tmp_path):
        differences = diff_jobs([_job(tmp_path)], tmp_path)
        assert len(differences) == 3
        assert all("file does not exist" in d for d in differences)

    def test_no_differences_after_generate(self, tmp_path):
        job = _job(tmp_path)
        run_jobs([job], tmp_path)
        assert diff_jobs([job], tmp_path) == []

    def test_changed_file_reported(self, tmp_path):
        job = _job(tmp_path)
        run_jobs([job], tmp_path)
        target = tmp_path / "build" / "blog-overlay.yaml"
        target.write_text("name: Changed\n" + target.read_text())
        differences = diff_jobs([job], tmp_path)
        assert len(differences) == 1
        assert "first difference at line 1" in differences[0]


class TestDescribeDifference:
    def test_first_difference(self):
        assert first_difference(["a", "b"], ["a", "c"]) == 1
        assert first_difference(["a"], ["a", "b"]) == 1
        assert first_difference(["a"], ["a"]) is None

    def test_context(self):
        text = describe_difference("a\nb\nc\n", "a\nx\nc\n")
        assert "first difference at line 2" in text
        assert "> 2: b" in text
        assert "> 2: x" in text

    def test_equal(self):
        assert describe_difference("a\n", "a\n") == ""
