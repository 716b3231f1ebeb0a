"""
Name Tokenizer — Extracts enumerator names from raw declaration text.

The text is the comma-separated clause list as written, for example
``None = 0, Salted = 1 << 0, SourSweet = (Sour | Sweet)``. Each clause is an
identifier, optionally followed by ``= <initializer>``. Initializers may hold
nested parentheses and commas that do not separate clauses.

Three-state machine, single left-to-right pass:

    START          -> IN_IDENTIFIER on an identifier character
    IN_IDENTIFIER  -> SKIPPING on any other character (name is emitted,
                      the character is examined again in SKIPPING)
    SKIPPING       -> START on a comma at parenthesis depth 0

A ``)`` at depth 0 closes the list, as does the end of the text.
"""

import string
from dataclasses import dataclass
from typing import Iterator

from enumreflect.errors import StructuralMismatchError
from enumreflect.vocabulary import ScanState


IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")


@dataclass(frozen=True)
class NameToken:
    """An enumerator name and its span in the declaration text."""
    name: str
    start: int
    end: int


class NameTokenizer:
    """
    Scans declaration text for enumerator names.

    Stateless between calls; one instance can be shared across threads.
    """

    def scan(self, raw: str) -> Iterator[NameToken]:
        """
        Yield every enumerator name in declaration order.

        Raises:
            StructuralMismatchError: Malformed identifier, unclosed
                initializer parentheses, or text after the closing ``)``
        """
        state = ScanState.START
        depth = 0
        start = 0
        pos = 0
        closed_at: int | None = None
        length = len(raw)

        while pos < length:
            char = raw[pos]

            if state is ScanState.START:
                if char in IDENTIFIER_CHARS:
                    state = ScanState.IN_IDENTIFIER
                    start = pos
                elif char == ")":
                    closed_at = pos
                    break
                pos += 1

            elif state is ScanState.IN_IDENTIFIER:
                if char in IDENTIFIER_CHARS:
                    pos += 1
                else:
                    yield self._token(raw, start, pos)
                    state = ScanState.SKIPPING

            else:
                if char == "(":
                    depth += 1
                elif char == ")":
                    if depth == 0:
                        closed_at = pos
                        break
                    depth -= 1
                elif char == "," and depth == 0:
                    state = ScanState.START
                pos += 1

        if closed_at is not None:
            trailing = raw[closed_at + 1:]
            if trailing.strip():
                raise StructuralMismatchError(
                    f"Unexpected text after end of enumerator list: {trailing.strip()!r}",
                    position=closed_at + 1,
                )
            return

        if state is ScanState.IN_IDENTIFIER:
            yield self._token(raw, start, length)
        elif state is ScanState.SKIPPING and depth > 0:
            raise StructuralMismatchError(
                f"Declaration text ends inside an initializer ({depth} unclosed '(')",
                position=length,
            )

    def tokenize(self, raw: str, expected_count: int) -> list[str]:
        """
        Extract exactly expected_count names from raw declaration text.

        Args:
            raw: Enumerator clause list, with or without its enclosing parentheses
            expected_count: Number of resolved values the names will align with

        Returns:
            Names in declaration order

        Raises:
            StructuralMismatchError: The text does not hold exactly
                expected_count well-formed clauses
        """
        names: list[str] = []

        for token in self.scan(raw):
            if len(names) == expected_count:
                raise StructuralMismatchError(
                    f"Found more than {expected_count} enumerator names "
                    f"(surplus '{token.name}' at {token.start})",
                    expected=expected_count,
                    found=len(names) + 1,
                    position=token.start,
                )
            names.append(token.name)

        if len(names) != expected_count:
            raise StructuralMismatchError(
                f"Found {len(names)} enumerator names, expected {expected_count}",
                expected=expected_count,
                found=len(names),
                position=len(raw),
            )

        return names

    @staticmethod
    def _token(raw: str, start: int, end: int) -> NameToken:
        name = raw[start:end]
        if name[0].isdigit():
            raise StructuralMismatchError(
                f"Enumerator name '{name}' at {start} is not a valid identifier",
                position=start,
            )
        return NameToken(name=name, start=start, end=end)


_default_tokenizer = NameTokenizer()


def tokenize(raw: str, expected_count: int) -> list[str]:
    """Extract exactly expected_count names using the shared tokenizer."""
    return _default_tokenizer.tokenize(raw, expected_count)


def scan_names(raw: str) -> list[str]:
    """Extract every name regardless of count."""
    return [token.name for token in _default_tokenizer.scan(raw)]
