import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from openapi_to_models.openapi_to_models import openapi_to_models
from openapi_to_models.pipeline.config import GeneratorConfig

PETSTORE = Path(__file__).parent / "test_data" / "petstore.json"


class TestCli:
    """Test the command line entry point"""

    def test_generate(self, tmp_path):
        out = tmp_path / "models"
        result = CliRunner().invoke(openapi_to_models, [str(PETSTORE), str(out)])
        assert result.exit_code == 0, result.output
        assert "Generated 5 models" in result.output
        assert (out / "base" / "pet.js").exists()
        assert (out / "index.js").exists()

    def test_options(self, tmp_path):
        out = tmp_path / "models"
        base = tmp_path / "base_models"
        result = CliRunner().invoke(
            openapi_to_models,
            [str(PETSTORE), str(out), "-b", str(base), "--flow", "--no-prop-types", "--attribute-case", "snake"],
        )
        assert result.exit_code == 0, result.output
        content = (base / "pet.js").read_text()
        assert "photo_urls?: string[]," in content
        assert "PropTypes" not in content

    def test_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"use_flow": True, "attribute_case": "camel"}))
        out = tmp_path / "models"
        result = CliRunner().invoke(openapi_to_models, ["-c", str(config), str(PETSTORE), str(out)])
        assert result.exit_code == 0, result.output
        assert "export type Pet = {" in (out / "base" / "pet.js").read_text()

    def test_flag_overrides_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"use_flow": True}))
        out = tmp_path / "models"
        result = CliRunner().invoke(openapi_to_models, ["-c", str(config), "--no-flow", str(PETSTORE), str(out)])
        assert result.exit_code == 0, result.output
        assert "export type Pet" not in (out / "base" / "pet.js").read_text()

    def test_missing_spec(self, tmp_path):
        result = CliRunner().invoke(openapi_to_models, [str(tmp_path / "missing.json"), str(tmp_path)])
        assert result.exit_code != 0


class TestGeneratorConfig:
    """Test configuration loading"""

    def test_from_dict_ignores_unknown_keys(self):
        config = GeneratorConfig.from_dict({"use_flow": True, "unknown": 1})
        assert config.use_flow is True
        assert not hasattr(config, "unknown")

    def test_round_trip(self):
        config = GeneratorConfig(is_v2=True, attribute_case="snake")
        assert GeneratorConfig.from_dict(config.to_dict()) == config

    def test_unknown_attribute_case(self):
        with pytest.raises(ValueError):
            GeneratorConfig.from_dict({"attribute_case": "kebab"})

    def test_attribute_converter(self):
        assert GeneratorConfig(attribute_case="camel").attribute_converter("pet_id") == "petId"
        assert GeneratorConfig().attribute_converter("pet_id") == "pet_id"
