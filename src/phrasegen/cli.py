"""
Phrasegen CLI Module

Generate memorable passphrases from a word list.

    phrasegen                        <- one 3-word passphrase
    phrasegen -n 5 -w 3 -W 5         <- five passphrases of 3-5 words
    phrasegen -l 12 -L 24 -i         <- 12-24 characters, with entropy info
    phrasegen -d words.txt -I        <- custom dictionary, with dictionary stats
    phrasegen -H -c                  <- copy to clipboard without printing

The command only parses options, calls the core, and hands the result to a
formatter (plain, styled or JSON). Every core failure is turned into a
ClickException so the user gets a one-line message and a non-zero exit code.

Tests and embedding code can pass collaborators through the context object:

    cli(obj={"rng": SeededRandom(1), "clipboard": FakeClipboard()})
"""

import json
import sys

import click

from .clipboard import Clipboard, SystemClipboard
from .config import debug_from_env, resolve_dictionary_path
from .constants import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MAX_WORDS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_MIN_WORDS,
    DEFAULT_PASSPHRASE_COUNT,
    DEFAULT_SEPARATOR,
    __version__,
)
from .debug import debug
from .dictionary import dictionary_stats, dump, load_bip39_dictionary, load_dictionary
from .entropy import analyze
from .exceptions import ClipboardError, DictionaryError, GenerationError
from .generator import generate_passphrases
from .models import GenerationConfig
from .output import RunOutput, get_formatter
from .validation import validate_config

# help_option_names lets users use either -h or --help
CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _load(dict_path, bip39):
    if bip39:
        if dict_path is not None:
            raise click.UsageError("--dict and --bip39 cannot be used together")
        return load_bip39_dictionary()
    return load_dictionary(resolve_dictionary_path(dict_path))


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-v", "--version")
@click.option(
    "-d", "--dict", "dict_path",
    type=click.Path(dir_okay=False),
    help="A path to a dictionary file to use (one word per line)",
)
@click.option("--bip39", is_flag=True, help="Use the BIP-39 English word list")
@click.option("-H", "--hidden", is_flag=True, help="Do not print the passphrase(s) to stdout")
@click.option(
    "-c", "--copy", is_flag=True,
    help="Copy the output to the system clipboard (newline delimited)",
)
@click.option(
    "-n", "--count", "number",
    type=click.IntRange(min=0), default=DEFAULT_PASSPHRASE_COUNT, show_default=True,
    help="How many passphrases to generate",
)
@click.option(
    "-L", "--max-len",
    type=click.IntRange(min=0), default=DEFAULT_MAX_LENGTH, show_default=True,
    help="Maximum length of the generated passphrase(s)",
)
@click.option(
    "-l", "--min-len",
    type=click.IntRange(min=0), default=DEFAULT_MIN_LENGTH, show_default=True,
    help="Minimum length of the generated passphrase(s); 0 disables length checks",
)
@click.option(
    "-W", "--max-words",
    type=click.IntRange(min=0), default=DEFAULT_MAX_WORDS, show_default=True,
    help="Maximum number of words per passphrase",
)
@click.option(
    "-w", "--min-words",
    type=click.IntRange(min=0), default=DEFAULT_MIN_WORDS, show_default=True,
    help="Minimum number of words per passphrase",
)
@click.option(
    "-s", "--separator", default=DEFAULT_SEPARATOR,
    help="Text placed between words (default: none)",
)
@click.option(
    "-i", "--pass-info", is_flag=True,
    help="Show length and entropy estimates for each passphrase",
)
@click.option(
    "-I", "--dict-info", is_flag=True,
    help="Show dictionary statistics and implications",
)
@click.option("--dump", "dump_words", is_flag=True, help="Print every dictionary entry and exit")
@click.option(
    "--style/--no-style", default=None,
    help="Bold the first letter of each word (default: only on a terminal)",
)
@click.option("--json", "json_output", is_flag=True, help="Output results as JSON")
@click.option("--debug", "debug_mode", is_flag=True, help="Trace internals on stderr")
@click.pass_context
def cli(
    ctx, dict_path, bip39, hidden, copy, number, max_len, min_len, max_words, min_words,
    separator, pass_info, dict_info, dump_words, style, json_output, debug_mode,
):
    """
    Phrasegen - memorable passphrases from a word list.

    Examples:

        phrasegen -n 5

        phrasegen -w 3 -W 5 -l 16 -L 28 -i

        phrasegen --bip39 -w 6 -W 6 -s " "
    """
    ctx.ensure_object(dict)
    if debug_mode or debug_from_env():
        debug.enable(True)

    config = GenerationConfig(
        min_words=min_words,
        max_words=max_words,
        min_len=min_len,
        max_len=max_len,
        passphrase_count=number,
        separator=separator,
    )
    result = validate_config(config)
    if not result.is_valid:
        raise click.UsageError(result.error_message)

    try:
        dictionary = _load(dict_path, bip39)
    except DictionaryError as e:
        raise click.ClickException(str(e)) from e

    if dump_words:
        if json_output:
            click.echo(json.dumps({"source": dictionary.source, "words": list(dump(dictionary))}))
        else:
            for word in dump(dictionary):
                click.echo(word)
        return

    try:
        passphrases = generate_passphrases(config, dictionary, ctx.obj.get("rng"))
    except GenerationError as e:
        raise click.ClickException(str(e)) from e

    if copy and passphrases:
        clipboard: Clipboard = ctx.obj.get("clipboard") or SystemClipboard()
        try:
            clipboard.copy("\n".join(p.text for p in passphrases))
        except ClipboardError as e:
            raise click.ClickException(str(e)) from e
        click.echo(f"Copied {len(passphrases)} passphrase(s) to the clipboard", err=True)

    output = RunOutput(
        passphrases=passphrases,
        dictionary_source=dictionary.source,
        reports=[analyze(p, len(dictionary)) for p in passphrases] if pass_info else None,
        stats=dictionary_stats(dictionary) if dict_info else None,
        hidden=hidden,
    )

    styled = style if style is not None else sys.stdout.isatty()
    text = get_formatter(json_output=json_output, styled=styled).render(output)
    if text:
        click.echo(text, color=True if styled else None)


def main():
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
