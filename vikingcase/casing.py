"""Word splitting and case conversion for identifiers."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, Iterable, Iterator

_DELIMITERS = re.compile(r"[_\- ]")
_DIGITS = frozenset("0123456789")


class CaseTypeError(ValueError):
    """Raised when a name does not denote a known case."""

    def __init__(self, case: str | None = None) -> None:
        self.case = case
        if case is None:
            message = "Unknown error: Your guess is as good as mine"
        else:
            message = f"Not a valid case: {case}"
        super().__init__(message)


class CaseType(enum.Enum):
    """The naming conventions an identifier can be rendered in."""

    SNAKE = "Snake"
    CONSTANT = "Constant"
    UPPER_SNAKE = "UpperSnake"
    ADA = "Ada"
    KEBAB = "Kebab"
    COBOL = "Cobol"
    UPPER_KEBAB = "UpperKebab"
    TRAIN = "Train"
    FLAT = "Flat"
    UPPER_FLAT = "UpperFlat"
    PASCAL = "Pascal"
    UPPER_CAMEL = "UpperCamel"
    CAMEL = "Camel"
    LOWER = "Lower"
    UPPER = "Upper"
    TITLE = "Title"
    SENTENCE = "Sentence"
    ALTERNATING = "Alternating"
    TOGGLE = "Toggle"
    NONE = "None"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> CaseType:
        """Return the case whose name is exactly ``name``."""
        try:
            return cls(name)
        except ValueError:
            raise CaseTypeError(str(name)) from None

    @classmethod
    def from_attributes(cls, names: Iterable[object]) -> CaseType | None:
        """Return the last entry of ``names`` that denotes a case, or None.

        Entries may be case members or attribute-like strings such as
        ``"Snake"`` or ``"Sentence()"``; anything else is ignored.
        """
        found: CaseType | None = None
        for name in names:
            if isinstance(name, CaseType):
                found = name
            elif isinstance(name, str):
                path = name.split("(", 1)[0].strip()
                try:
                    found = cls.parse(path)
                except CaseTypeError:
                    continue
        return found

    def convert(self, text: str) -> str:
        """Render ``text`` in this case."""
        return to_case(text, self)


def _is_lower(ch: str) -> bool:
    return ch.upper() != ch.lower() and ch == ch.lower()


def _is_upper(ch: str) -> bool:
    return ch.upper() != ch.lower() and ch == ch.upper()


def _is_digit(ch: str) -> bool:
    return ch in _DIGITS


def _is_letter(ch: str) -> bool:
    return _is_lower(ch) or _is_upper(ch)


def _is_boundary(prev: str, cur: str, nxt: str) -> bool:
    return (
        (_is_lower(prev) and _is_upper(cur))
        or (_is_upper(prev) and _is_upper(cur) and _is_lower(nxt))
        or (_is_digit(prev) and _is_letter(cur))
        or (_is_letter(prev) and _is_digit(cur))
    )


def _split_chunk(chunk: str) -> Iterator[str]:
    start = 0
    for i in range(1, len(chunk)):
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if _is_boundary(chunk[i - 1], chunk[i], nxt):
            yield chunk[start:i]
            start = i
    yield chunk[start:]


def split_words(text: str) -> list[str]:
    """Split an identifier into its words.

    Words are separated by underscores, hyphens and spaces, and by the
    transitions lower-to-upper, acronym-to-word and letter-to-digit.
    """
    return [
        word
        for chunk in _DELIMITERS.split(text)
        for word in _split_chunk(chunk)
        if word
    ]


def _capital(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _lowercase(words: list[str]) -> list[str]:
    return [word.lower() for word in words]


def _uppercase(words: list[str]) -> list[str]:
    return [word.upper() for word in words]


def _capitalised(words: list[str]) -> list[str]:
    return [_capital(word) for word in words]


def _camel(words: list[str]) -> list[str]:
    return [word.lower() if i == 0 else _capital(word) for i, word in enumerate(words)]


def _sentence(words: list[str]) -> list[str]:
    return [_capital(word) if i == 0 else word.lower() for i, word in enumerate(words)]


def _toggle(words: list[str]) -> list[str]:
    return [word[:1].lower() + word[1:].upper() for word in words]


def _alternating(words: list[str]) -> list[str]:
    upper = False
    result = []
    for word in words:
        letters = []
        for ch in word:
            if _is_letter(ch):
                letters.append(ch.upper() if upper else ch.lower())
                upper = not upper
            else:
                letters.append(ch)
        result.append("".join(letters))
    return result


_Pattern = Callable[[list[str]], list[str]]

_STYLES: dict[CaseType, tuple[_Pattern, str]] = {
    CaseType.SNAKE: (_lowercase, "_"),
    CaseType.CONSTANT: (_uppercase, "_"),
    CaseType.UPPER_SNAKE: (_uppercase, "_"),
    CaseType.ADA: (_capitalised, "_"),
    CaseType.KEBAB: (_lowercase, "-"),
    CaseType.COBOL: (_uppercase, "-"),
    CaseType.UPPER_KEBAB: (_uppercase, "-"),
    CaseType.TRAIN: (_capitalised, "-"),
    CaseType.FLAT: (_lowercase, ""),
    CaseType.UPPER_FLAT: (_uppercase, ""),
    CaseType.PASCAL: (_capitalised, ""),
    CaseType.UPPER_CAMEL: (_capitalised, ""),
    CaseType.CAMEL: (_camel, ""),
    CaseType.LOWER: (_lowercase, " "),
    CaseType.UPPER: (_uppercase, " "),
    CaseType.TITLE: (_capitalised, " "),
    CaseType.SENTENCE: (_sentence, " "),
    CaseType.ALTERNATING: (_alternating, " "),
    CaseType.TOGGLE: (_toggle, " "),
}


def to_case(text: str, case: CaseType | str) -> str:
    """Render ``text`` in ``case``; ``CaseType.NONE`` leaves it unchanged."""
    if not isinstance(case, CaseType):
        case = CaseType.parse(case)
    if case is CaseType.NONE:
        return text
    pattern, delimiter = _STYLES[case]
    return delimiter.join(pattern(split_words(text)))