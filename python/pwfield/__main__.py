"""
CLI interface for pwfield.
"""

import sys
import json
import getpass
import logging
import click
from typing import Optional

from .config import FieldDefaults, load_defaults
from .exceptions import PasswordFieldException
from .field import PasswordGeneratorField
from .hashing import get_password_hasher
from .options import OPTION_TYPES


class CliContext:
    """Context object for sharing settings across commands."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file
        self._defaults: Optional[FieldDefaults] = None

    def get_defaults(self) -> FieldDefaults:
        """Load defaults once, exiting on a bad config file."""
        if self._defaults is None:
            try:
                self._defaults = load_defaults(self.config_file)
            except PasswordFieldException as e:
                click.echo(f"Config error: {e}", err=True)
                sys.exit(1)
        return self._defaults


@click.group()
@click.option(
    "--config",
    "-c",
    "config_file",
    default=None,
    help="Path to field defaults JSON (default: $PWFIELD_CONFIG)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[str], verbose: bool) -> None:
    """pwfield - password generator field configuration."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.obj = CliContext(config_file)


@cli.command()
@click.argument("name")
@click.option("--attribute", default=None, help="Model attribute (default: derived from NAME)")
@click.option("--length", type=int, default=None, help="Generated password length")
@click.option("--min", "min_length", type=int, default=None, help="Minimum selectable length")
@click.option("--max", "max_length", type=int, default=None, help="Maximum selectable length")
@click.option("--prefix", default=None, help="Prefix added to generated passwords")
@click.option("--suffix", default=None, help="Suffix added to generated passwords")
@click.option("--no-lowercase", is_flag=True, help="Start with lowercase letters off")
@click.option("--no-uppercase", is_flag=True, help="Start with uppercase letters off")
@click.option("--no-numbers", is_flag=True, help="Start with numbers off")
@click.option("--no-symbols", is_flag=True, help="Start with symbols off")
@click.option("--allow-similar", is_flag=True, help="Allow similar characters (i, l, 1, L, o, 0, O)")
@click.option("--allow-ambiguous", is_flag=True, help="Allow ambiguous symbols")
@click.option("--show/--hide", "show", default=None, help="Show or mask the password by default")
@click.option("--hide-extras", is_flag=True, help="Hide toggles, length input and buttons")
@click.option("--copy", is_flag=True, help="Copy the JSON to the clipboard")
@click.pass_obj
def render(cli_ctx: CliContext, name: str, attribute: Optional[str], length: Optional[int],
           min_length: Optional[int], max_length: Optional[int], prefix: Optional[str],
           suffix: Optional[str], no_lowercase: bool, no_uppercase: bool, no_numbers: bool,
           no_symbols: bool, allow_similar: bool, allow_ambiguous: bool,
           show: Optional[bool], hide_extras: bool, copy: bool) -> None:
    """Print the renderer payload for a field as JSON."""
    field = PasswordGeneratorField.from_defaults(name, cli_ctx.get_defaults(), attribute=attribute)

    if length is not None:
        field.set_length(length)
    if min_length is not None:
        field.set_min_length(min_length)
    if max_length is not None:
        field.set_max_length(max_length)
    if prefix is not None:
        field.set_prefix(prefix)
    if suffix is not None:
        field.set_suffix(suffix)
    if no_lowercase:
        field.set_lowercase(False)
    if no_uppercase:
        field.set_uppercase(False)
    if no_numbers:
        field.set_numbers(False)
    if no_symbols:
        field.set_symbols(False)
    if allow_similar:
        field.set_include_similar()
    if allow_ambiguous:
        field.set_include_ambiguous()
    if show is not None:
        field.set_show_password(show)
    if hide_extras:
        field.set_hide_all_extras()

    payload = json.dumps(field.json_serialize(), indent=2)
    click.echo(payload)

    if copy:
        try:
            import pyperclip
            pyperclip.copy(payload)
            click.echo("✅ Field JSON copied to clipboard.", err=True)
        except ImportError:
            click.echo("pyperclip not installed. Install with: pip install pyperclip", err=True)
        except Exception as e:
            click.echo(f"Could not copy to clipboard: {e}", err=True)


@cli.command("hash")
@click.argument("value", required=False)
@click.option("--stdin", is_flag=True, help="Read value from stdin")
@click.option("--iterations", type=click.IntRange(min=1), default=None,
              help="PBKDF2 iterations (default: config or 100000)")
@click.pass_obj
def hash_value(cli_ctx: CliContext, value: Optional[str], stdin: bool,
               iterations: Optional[int]) -> None:
    """Hash a password the way a submitted field value is stored."""
    if stdin and value:
        click.echo("Error: Cannot use --stdin with a provided value", err=True)
        sys.exit(1)

    if stdin:
        value = sys.stdin.read().strip()
    elif not value:
        value = getpass.getpass("Enter password: ")

    if not value:
        click.echo("Error: Value cannot be empty", err=True)
        sys.exit(1)

    if iterations is None:
        iterations = cli_ctx.get_defaults().hash_iterations

    try:
        click.echo(get_password_hasher(iterations).make(value))
    except PasswordFieldException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("value")
@click.argument("encoded")
def verify(value: str, encoded: str) -> None:
    """Check VALUE against a stored ENCODED hash."""
    if get_password_hasher().check(value, encoded):
        click.echo("✅ Password matches.")
    else:
        click.echo("❌ Password does not match.", err=True)
        sys.exit(1)


@cli.command()
def keys() -> None:
    """List the option keys the renderer understands."""
    for key, expected in OPTION_TYPES.items():
        click.echo(f"  {key} ({expected.__name__})")


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
