"""Field name transformation strategies."""

from __future__ import annotations

from typing import Protocol

_DELIMITER = "_"


class FieldNameTransformer(Protocol):
    """Maps a declared field name to its name in the index mapping."""

    def transform_field_name(self, name: str) -> str: ...


class SnakeCaser:
    """Converts ``CamelCase`` and ``mixedCase`` names to ``snake_case``.

    Runs of uppercase letters form one word (``FOo`` -> ``foo``) unless the run
    is followed by a lowercase word (``FOOBar`` -> ``foo_bar``). Digit runs form
    their own word (``Foo123Bar`` -> ``foo_123_bar``).
    """

    def transform_field_name(self, name: str) -> str:
        return self.to_snake_case(name)

    @staticmethod
    def to_snake_case(name: str) -> str:
        result: list[str] = []
        for index, char in enumerate(name):
            previous = name[index - 1] if index > 0 else ""
            if result and previous != _DELIMITER and _starts_new_word(name, index):
                result.append(_DELIMITER)
            result.append(char.lower() if _is_upper(char) else char)
        return "".join(result)


def _starts_new_word(name: str, index: int) -> bool:
    char = name[index]
    previous = name[index - 1] if index > 0 else ""
    if _is_upper(char):
        if not _is_upper(previous):
            return True
        following = name[index + 1] if index + 1 < len(name) else ""
        before_previous = name[index - 2] if index > 1 else ""
        return _is_upper(before_previous) and following.islower()
    if _is_digit(char):
        return not _is_digit(previous)
    return False


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"
