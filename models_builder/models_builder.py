import json
import logging

import click

from .cli_utils import reconstruct_command_line
from .pipeline import BuilderConfig, ModelsApplication, ModelsBuilderError


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--category",
    "-t",
    default=None,
    type=click.Choice(["content", "media", "all"]),
    help="Item category to build (defaults to the categories of the config)",
)
@click.option(
    "--no-cycle-check",
    is_flag=True,
    default=False,
    help="Trust the snapshot to have no cyclic parent chains",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each build pass")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def models_builder(config, category, no_cycle_check, verbose, path, output):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            try:
                config = BuilderConfig.from_dict(json.load(f))
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--config") from e
    else:
        config = BuilderConfig()

    # CLI flags override the config file
    if no_cycle_check:
        config.detect_cycles = False
    if category == "all":
        categories = ["content", "media"]
    elif category is not None:
        categories = [category]
    else:
        categories = config.categories

    try:
        with ModelsApplication.from_file(path, config) as application:
            types = []
            for item_category in categories:
                types.extend(application.get_types(item_category))
    except ModelsBuilderError as e:
        raise click.ClickException(str(e)) from e

    out = json.dumps(
        {
            "command": reconstruct_command_line(models_builder),
            "types": [type_model.to_dict() for type_model in types],
        },
        indent=2,
    )
    if output is None:
        click.echo(out)
    else:
        with open(output, "w") as f:
            f.write(out + "\n")
