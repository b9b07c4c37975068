
"""
Grammar-driven classification of a single option token.

The caller strips the ``--`` prefix and surrounding whitespace; what remains
is either an assignment (``key=value``, split on the *first* ``=``) or a bare
flag (``key``).  The LALR parser runs with lark's contextual lexer, so once
the ``=`` has been consumed every following character, further ``=`` signs
included, belongs to the value.
"""

from dataclasses import dataclass
from typing import Optional, Sequence
from lark import Lark, Transformer, Token


GRAMMAR = r"""
start: assignment | flag

assignment: KEY? "=" VALUE?
flag: KEY

KEY:   /[^=]+/
VALUE: /.+/s
"""


@dataclass(frozen=True)
class OptionToken:
    """
    One classified option.
      .key   : str, never empty
      .value : str for ``key=value`` (possibly ""), None for a bare flag
    """
    key: str
    value: Optional[str]

    @property
    def is_flag(self) -> bool:
        return self.value is None


class _OptionTransformer(Transformer[Token, Optional[OptionToken]]):
    def start(self, items: Sequence[Optional[OptionToken]]) -> Optional[OptionToken]:
        return items[0]

    def assignment(self, items: Sequence[Token]) -> Optional[OptionToken]:
        key = ""
        value = ""
        for tok in items:
            if tok.type == "KEY":
                key = tok.value
            elif tok.type == "VALUE":
                value = tok.value
        if not key:
            return None
        return OptionToken(key, value)

    def flag(self, items: Sequence[Token]) -> OptionToken:
        return OptionToken(items[0].value, None)


_parser = Lark(
    GRAMMAR,
    parser="lalr",
    propagate_positions=False,
    maybe_placeholders=False,
)


def parse_option(text: str) -> Optional[OptionToken]:
    """
    Classify ``text`` (an option with its prefix already removed).

    Returns None when there is nothing to record: empty text, or an
    assignment whose key is empty (``=value``).
    """

    if not text:
        return None
    tree = _parser.parse(text)
    return _OptionTransformer().transform(tree)
