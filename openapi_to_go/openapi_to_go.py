import json
import logging

import click

from .pipeline import CodeGeneratorConfig, CompileError, PipelineGenerator


def parse_import_mapping(ctx, param, values):
    mapping = {}
    for value in values:
        document, sep, alias = value.rpartition(":")
        if not sep or not document or not alias:
            raise click.BadParameter(f"expected DOCUMENT:ALIAS, got '{value}'", ctx=ctx, param=param)
        mapping[document] = alias
    return mapping


@click.command()
@click.option("--package", "-p", default=None, type=str, help="Go package name of the generated file")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--import-mapping",
    "-m",
    multiple=True,
    callback=parse_import_mapping,
    help="Map an external document to a Go package alias, as DOCUMENT:ALIAS (repeatable)",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log compilation details")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def openapi_to_go(package, config, import_mapping, verbose, path, output):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        document = json.load(f)

    if config is not None:
        with open(config) as f:
            config = json.load(f)
            config = CodeGeneratorConfig.from_dict(config)
    else:
        config = CodeGeneratorConfig()

    # CLI options override the config file
    if package is not None:
        config.package_name = package
    config.import_mapping.update(import_mapping)

    codegen = PipelineGenerator(document, config)
    try:
        out = codegen.generate()
    except CompileError as err:
        raise click.ClickException(str(err)) from err

    with open(output, "w") as f:
        f.write(out)
