"""automapper developer tool - command line interface."""
import importlib
import logging

import click
from colorama import Fore, Style, init

from automapper import __version__
from automapper.introspection import ReflectionFacility
from automapper.naming import NamingConventionRegistry, translate
from automapper.settings import AppConfig

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    print(f"{Fore.CYAN}{'=' * 44}")
    print(f"{Fore.CYAN}║   {Fore.WHITE}automapper{Fore.CYAN}                           ║")
    print(f"{Fore.CYAN}║   {Fore.WHITE}Object-to-object mapping toolkit{Fore.CYAN}     ║")
    print(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    print()


def load_type(path: str) -> type:
    """Import a class given as 'package.module:ClassName'."""
    if ":" not in path:
        raise click.BadParameter("expected 'module:ClassName'", param_hint="TYPE_PATH")

    module_name, _, qualname = path.partition(":")
    try:
        target = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name}: {e}", param_hint="TYPE_PATH")

    for part in qualname.split("."):
        target = getattr(target, part, None)
        if target is None:
            raise click.BadParameter(f"{qualname} not found in {module_name}", param_hint="TYPE_PATH")

    if not isinstance(target, type):
        raise click.BadParameter(f"{path} is not a class", param_hint="TYPE_PATH")
    return target


@click.group()
@click.version_option(version=__version__)
def cli():
    """automapper - inspect naming conventions and mappable types."""
    config = AppConfig.from_env()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.WARNING))


@cli.command()
@click.argument("identifier")
@click.option("--from", "source", default="camel", show_default=True, help="Source naming convention")
@click.option("--to", "destination", default="snake", show_default=True, help="Destination naming convention")
def convert_name(identifier, source, destination):
    """Translate IDENTIFIER between naming conventions."""
    registry = NamingConventionRegistry()

    try:
        source_convention = registry.get(source)
        destination_convention = registry.get(destination)
    except ValueError as e:
        raise click.UsageError(str(e))

    click.echo(translate(identifier, source_convention, destination_convention))


@cli.command()
def conventions():
    """List available naming conventions."""
    registry = NamingConventionRegistry()

    for name in registry.names():
        example = registry.get(name).from_words(["property", "name"])
        click.echo(f"{Fore.GREEN}{name:<10}{Style.RESET_ALL} {example}")


@cli.command()
@click.argument("type_path")
def members(type_path):
    """List the mappable members of TYPE_PATH (module:ClassName)."""
    print_banner()

    cls = load_type(type_path)
    reflection = ReflectionFacility()

    click.echo(f"{Fore.YELLOW}{cls.__module__}.{cls.__qualname__}")
    click.echo(f"{Fore.YELLOW}{'=' * 30}")

    for name in reflection.list_members(cls):
        declared, is_sequence = reflection.member_type(cls, name)
        if declared is None:
            label = "list" if is_sequence else "-"
        else:
            label = f"list[{declared.__name__}]" if is_sequence else declared.__name__
        click.echo(f"  {name:<30} {label}")
