import pytest

from api_spec_overlay.config import find_default_config, load_config
from api_spec_overlay.errors import ConfigError, InputError


class TestLoadConfig:
    def test_valid(self, tmp_path):
        path = tmp_path / "apispec.yaml"
        path.write_text("- specification: blog.yaml\n  overlay_yaml: out/blog.yaml\n  schema_json: out/schemas.json\n")
        jobs = load_config(path)
        assert len(jobs) == 1
        assert jobs[0].outputs() == {"overlay_yaml": "out/blog.yaml", "schema_json": "out/schemas.json"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="does not exist"):
            load_config(tmp_path / "nope.yaml")

    def test_config_error_is_input_error(self, tmp_path):
        with pytest.raises(InputError):
            load_config(tmp_path / "nope.yaml")

    def test_empty(self, tmp_path):
        path = tmp_path / "apispec.yaml"
        path.write_text("")
        with pytest.raises(ConfigError, match="at least one job"):
            load_config(path)

    def test_missing_specification(self, tmp_path):
        path = tmp_path / "apispec.yaml"
        path.write_text("- overlay_yaml: out.yaml\n")
        with pytest.raises(ConfigError, match="job 1 is missing required 'specification'"):
            load_config(path)

    def test_missing_outputs(self, tmp_path):
        path = tmp_path / "apispec.yaml"
        path.write_text("- specification: blog.yaml\n")
        with pytest.raises(ConfigError, match="at least one output"):
            load_config(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "apispec.yaml"
        path.write_text("- specification: blog.yaml\n  server_go: server.go\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "apispec.yaml"
        path.write_text("- specification: [\n")
        with pytest.raises(ConfigError, match="failed to parse"):
            load_config(path)


class TestFindDefaultConfig:
    def test_prefers_yaml(self, tmp_path):
        (tmp_path / "apispec.yml").write_text("[]")
        (tmp_path / "apispec.yaml").write_text("[]")
        assert find_default_config(tmp_path) == tmp_path / "apispec.yaml"

    def test_yml(self, tmp_path):
        (tmp_path / "apispec.yml").write_text("[]")
        assert find_default_config(tmp_path) == tmp_path / "apispec.yml"

    def test_none(self, tmp_path):
        assert find_default_config(tmp_path) is None
