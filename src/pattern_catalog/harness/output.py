from __future__ import annotations

from typing import Iterator


class Transcript:
    """Line collector for scenarios written in a ``print`` style."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def print(self, *values: object, sep: str = " ") -> None:
        text = sep.join(str(value) for value in values)
        self._lines.extend(text.split("\n"))

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)


def collect_lines(output: object) -> tuple[str, ...]:
    """Materialize a scenario's output into a tuple of lines.

    A bare string is rejected rather than split into characters.
    """
    if isinstance(output, (str, bytes)):
        msg = f"expected a sequence of lines, got {type(output).__name__}"
        raise TypeError(msg)
    try:
        iterator = iter(output)  # type: ignore[call-overload]
    except TypeError:
        msg = f"expected a sequence of lines, got {type(output).__name__}"
        raise TypeError(msg) from None

    lines: list[str] = []
    for index, line in enumerate(iterator):
        if not isinstance(line, str):
            msg = f"line {index} is {type(line).__name__}, not str"
            raise TypeError(msg)
        lines.append(line)
    return tuple(lines)
