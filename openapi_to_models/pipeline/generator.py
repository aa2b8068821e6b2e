"""
Generation driver: writes one base file and one override file per model,
plus an index of every generated model.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from ..utils import snake_case
from .config import GeneratorConfig
from .descriptor import ModelDescriptorBuilder
from .renderer import TemplateRenderer
from .spec_source import get_model_definitions
from .writer import AtomicWriter

logger = logging.getLogger(__name__)

INDEX_FILE_STEM = "index"


def resolve_path(path: str | Path, base_dir: str | Path | None) -> Path:
    """Resolve a relative path against an explicit base directory."""
    path = Path(path)
    if base_dir is None or path.is_absolute():
        return path
    return Path(base_dir) / path


class ModelGenerator:
    """Generates model files from the model definitions of a spec."""

    def __init__(
        self,
        config: GeneratorConfig,
        output_dir: str | Path,
        output_base_dir: str | Path | None = None,
        base_dir: str | Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
        writer: AtomicWriter | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Generation options
            output_dir: Directory of override files and the index
            output_base_dir: Directory of base files (default: output_dir/base)
            base_dir: Directory relative paths resolve against (default:
                relative paths are used as given)
            clock: Source of the generation timestamp
            writer: File writer
        """
        self.config = config
        self.output_dir = resolve_path(output_dir, base_dir)
        self.output_base_dir = resolve_path(output_base_dir, base_dir) if output_base_dir else self.output_dir / "base"
        self.writer = writer or AtomicWriter()
        self.builder = ModelDescriptorBuilder(
            attribute_converter=config.attribute_converter,
            use_prop_types=config.use_prop_types,
            use_flow=config.use_flow,
        )
        self.renderer = TemplateRenderer(
            template_dir=config.template_dir or None,
            with_date=config.with_date,
            clock=clock,
        )

    @property
    def base_import_path(self) -> str:
        """Import path of the base directory, relative to the override files."""
        relative = Path(os.path.relpath(self.output_base_dir, self.output_dir)).as_posix()
        return relative if relative.startswith(".") else f"./{relative}"

    def _file_path(self, directory: Path, stem: str) -> Path:
        return directory / f"{stem}{self.config.file_extension}"

    def write_model(self, name: str, model: dict[str, Any]) -> str | None:
        """
        Write the base and override files of a model.

        Returns:
            The model name, or None if the model was skipped

        Raises:
            UnionResolutionError: If a discriminated union cannot be resolved
            OSError: If a file cannot be written
        """
        descriptor = self.builder.build(name, model)
        if descriptor is None:
            return None

        self.writer.write(
            self._file_path(self.output_base_dir, descriptor.file_name),
            self.renderer.render_model(descriptor),
        )
        override_path = self._file_path(self.output_dir, descriptor.file_name)
        if self.writer.write_if_absent(override_path, self.renderer.render_override(descriptor, self.base_import_path)):
            logger.info(f"Created override model {override_path}")
        return name

    def write_index(self, model_names: list[str]) -> Path:
        """Write the index of generated models, de-duplicated in order."""
        models = [{"file_name": snake_case(name), "name": name} for name in dict.fromkeys(model_names)]
        path = self._file_path(self.output_dir, INDEX_FILE_STEM)
        self.writer.write(path, self.renderer.render_index(models))
        return path

    def generate(self, spec: dict[str, Any]) -> list[str]:
        """
        Generate every model of a prepared spec, then the index.

        Returns:
            Names of the generated models, in definition order
        """
        generated = []
        for name, model in get_model_definitions(spec, self.config.is_v2).items():
            if self.write_model(name, model):
                generated.append(name)
        self.write_index(generated)
        logger.info(f"Generated {len(generated)} models in {self.output_dir}")
        return generated
