"""
Jinja2 rendering of model descriptors.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import jinja2

from .descriptor import ModelDescriptor

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"

TEMPLATE_EXTENSION = ".js.jinja2"


class TemplateRenderer:
    """Renders base models, override models and the index."""

    def __init__(
        self,
        template_dir: str | Path | None = None,
        with_date: bool = False,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the renderer.

        Args:
            template_dir: Directory whose templates take precedence over the
                packaged ones
            with_date: Pass the generation timestamp to templates
            clock: Source of the generation timestamp
        """
        self.with_date = with_date
        self.clock = clock
        loaders: list[jinja2.BaseLoader] = [jinja2.FileSystemLoader(str(TEMPLATE_DIR))]
        if template_dir:
            loaders.insert(0, jinja2.FileSystemLoader(str(template_dir)))
        self.jinja_env = jinja2.Environment(
            loader=jinja2.ChoiceLoader(loaders),
            keep_trailing_newline=True,
            lstrip_blocks=True,
            trim_blocks=True,
            undefined=jinja2.StrictUndefined,
        )
        self.model_template = self.jinja_env.get_template(f"model{TEMPLATE_EXTENSION}")
        self.override_template = self.jinja_env.get_template(f"override{TEMPLATE_EXTENSION}")
        self.models_template = self.jinja_env.get_template(f"models{TEMPLATE_EXTENSION}")

    def _context(self, **data: Any) -> dict[str, Any]:
        data["generated_at"] = self.clock().isoformat(timespec="seconds") if self.with_date else None
        return data

    def render_model(self, descriptor: ModelDescriptor) -> str:
        """Render the base model file."""
        return self.model_template.render(**self._context(model=descriptor))

    def render_override(self, descriptor: ModelDescriptor, base_path: str = "./base") -> str:
        """Render the override model file.

        Args:
            descriptor: The model descriptor
            base_path: Import path of the base model directory, relative to
                the override file
        """
        return self.override_template.render(**self._context(model=descriptor, base_path=base_path))

    def render_index(self, models: list[dict[str, str]]) -> str:
        """Render the index of generated models ([{file_name, name}])."""
        return self.models_template.render(**self._context(models=models))
