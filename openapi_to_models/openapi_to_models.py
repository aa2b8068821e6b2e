import json
import logging
from pathlib import Path

import click
from click.core import ParameterSource

from .pipeline import GeneratorConfig, ModelGenerator, load_spec
from .utils import ATTRIBUTE_CONVERTERS

# CLI parameter -> GeneratorConfig attribute
CONFIG_OPTIONS = {
    "is_v2": "is_v2",
    "flow": "use_flow",
    "prop_types": "use_prop_types",
    "attribute_case": "attribute_case",
    "templates": "template_dir",
}


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--base-output", "-b", default=None, type=click.Path(resolve_path=True), help="Directory of base model files (default: OUTPUT/base)")
@click.option("--v2", "is_v2", is_flag=True, default=False, help="Read definitions from a Swagger 2 document")
@click.option("--flow/--no-flow", default=False, help="Emit Flow type annotations")
@click.option("--prop-types/--no-prop-types", default=True, help="Emit PropTypes declarations")
@click.option("--attribute-case", default="none", type=click.Choice(sorted(ATTRIBUTE_CONVERTERS)))
@click.option("--templates", default="", type=click.Path(exists=True, file_okay=False, resolve_path=True), help="Directory of templates overriding the packaged ones")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", type=click.Path(resolve_path=True))
@click.pass_context
def openapi_to_models(ctx, config, base_output, is_v2, flow, prop_types, attribute_case, templates, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # Flags given on the command line override the config file
    for param_name, attribute in CONFIG_OPTIONS.items():
        if ctx.get_parameter_source(param_name) is ParameterSource.COMMANDLINE:
            setattr(config, attribute, ctx.params[param_name])

    spec = load_spec(path, config.is_v2)
    generator = ModelGenerator(config, Path(output), base_output)
    names = generator.generate(spec)
    click.echo(f"Generated {len(names)} models in {output}")
