"""Prefix tokenizer for command arguments.

Splits ``" 1 n/John Doe t/friends t/owesMoney"`` into a preamble (``"1"``)
and a multimap ``{n/: ["John Doe"], t/: ["friends", "owesMoney"]}``.

A prefix only counts when preceded by whitespace, so ``a/`` inside
``"Flat a/b"`` would split but ``"Blk12a/b"`` would not.
"""

from __future__ import annotations

import re

from restrack.parsing.syntax import Prefix


class ArgumentMultimap:
    """Prefix -> ordered list of raw values, plus the preamble.

    A prefix that never occurred has no entry: :meth:`get_value` returns
    ``None`` and :meth:`get_all_values` returns an empty list.  A prefix
    that occurred with nothing after it maps to ``[""]``.
    """

    def __init__(self, preamble: str = "") -> None:
        self.preamble = preamble
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._values

    def get_value(self, prefix: Prefix) -> str | None:
        """Last value given for *prefix*, or None when absent."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def prefixes(self) -> list[Prefix]:
        return list(self._values)


def _find_positions(args: str, prefix: Prefix) -> list[tuple[int, Prefix]]:
    pattern = re.compile(rf"(?<=\s){re.escape(prefix.token)}")
    return [(match.start(), prefix) for match in pattern.finditer(args)]


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize *args* against the declared *prefixes*.

    Values are the text between one prefix occurrence and the next (or the
    end of the string), with surrounding whitespace stripped.  Values are
    not validated.
    """
    positions = sorted(
        (position for prefix in prefixes for position in _find_positions(args, prefix)),
        key=lambda item: item[0],
    )
    if not positions:
        return ArgumentMultimap(preamble=args.strip())

    multimap = ArgumentMultimap(preamble=args[: positions[0][0]].strip())
    ends = [start for start, _ in positions[1:]] + [len(args)]
    for (start, prefix), end in zip(positions, ends, strict=True):
        multimap.put(prefix, args[start + len(prefix.token) : end].strip())
    return multimap
