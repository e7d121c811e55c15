"""
Phrasegen Output Formatting

Presentation adapters for generated passphrases and statistics. The core
hands over a RunOutput; which formatter renders it is the caller's choice:

    PlainFormatter   raw text, safe for pipes
    StyledFormatter  bold initial letter per word, colored labels
    JsonFormatter    machine-readable
"""

import json
from dataclasses import dataclass
from typing import Protocol

import click

from .models import DictionaryStats, EntropyReport, Passphrase

RULE_WIDTH = 36


@dataclass
class RunOutput:
    """Everything one run produced, ready for display."""
    passphrases: list[Passphrase]
    dictionary_source: str = ""
    reports: list[EntropyReport] | None = None
    stats: DictionaryStats | None = None
    hidden: bool = False


class Formatter(Protocol):
    def render(self, output: RunOutput) -> str:
        ...


def _character_classes(stats: DictionaryStats) -> str:
    if not stats.ascii_only:
        return "n/a (non-ASCII)"
    classes = [
        name
        for name, present in (
            ("lowercase", stats.has_lowercase),
            ("uppercase", stats.has_uppercase),
            ("digits", stats.has_digits),
            ("punctuation", stats.has_punctuation),
        )
        if present
    ]
    return ", ".join(classes) or "none"


class PlainFormatter:
    """Unstyled text output."""

    def label(self, text: str) -> str:
        return text

    def passphrase(self, passphrase: Passphrase) -> str:
        return passphrase.text

    def rule(self) -> str:
        return "─" * RULE_WIDTH

    def stats_lines(self, stats: DictionaryStats, source: str) -> list[str]:
        return [
            f"{self.label('Dictionary:')}   {source}",
            f"{self.label('Words:')}        {stats.word_count:,}",
            f"{self.label('Avg length:')}   {stats.average_length:.2f}",
            f"{self.label('ASCII only:')}   {'yes' if stats.ascii_only else 'no'}",
            f"{self.label('Classes:')}      {_character_classes(stats)}",
            f"{self.label('Bits/word:')}    {stats.bits_per_word:.2f}",
        ]

    def report_lines(self, passphrase: Passphrase, report: EntropyReport) -> list[str]:
        brute = report.brute_force
        return [
            f"  {self.label('Length:')}       {passphrase.length} chars, "
            f"{passphrase.word_count} words",
            f"  {self.label('Known method:')} {report.known_method} bits",
            f"  {self.label('Brute force:')}  lowercase {brute['lowercase']}, "
            f"mixed case {brute['mixed_case']}, "
            f"alphanumeric {brute['alphanumeric']}, "
            f"symbols {brute['symbols']} bits",
        ]

    def render(self, output: RunOutput) -> str:
        lines = []

        if output.stats is not None:
            lines.extend(self.stats_lines(output.stats, output.dictionary_source))
            lines.append(self.rule())

        for index, passphrase in enumerate(output.passphrases):
            if output.hidden:
                if output.reports is not None:
                    lines.append(self.label(f"Passphrase {index + 1}:"))
            else:
                lines.append(self.passphrase(passphrase))
            if output.reports is not None:
                lines.extend(self.report_lines(passphrase, output.reports[index]))

        return "\n".join(lines)


class StyledFormatter(PlainFormatter):
    """Terminal output: bold initial letter of each word."""

    def label(self, text: str) -> str:
        return click.style(text, fg="cyan")

    def passphrase(self, passphrase: Passphrase) -> str:
        styled = [
            click.style(word[:1], bold=True) + word[1:]
            for word in passphrase.words
        ]
        return passphrase.separator.join(styled)


class JsonFormatter:
    """Machine-readable output."""

    def render(self, output: RunOutput) -> str:
        items = []
        for index, passphrase in enumerate(output.passphrases):
            item = {"length": passphrase.length, "word_count": passphrase.word_count}
            if not output.hidden:
                item["passphrase"] = passphrase.text
                item["words"] = list(passphrase.words)
            if output.reports is not None:
                item["entropy"] = output.reports[index].as_dict()
            items.append(item)

        result = {"passphrases": items}
        if output.stats is not None:
            result["dictionary"] = {"source": output.dictionary_source, **output.stats.as_dict()}
        return json.dumps(result, indent=2)


def get_formatter(json_output: bool = False, styled: bool = False) -> Formatter:
    """Pick the formatter for the requested output mode."""
    if json_output:
        return JsonFormatter()
    if styled:
        return StyledFormatter()
    return PlainFormatter()
