from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Final

from .errors import OptionSetError

MIN_OPTIONS: Final = 2
MAX_OPTIONS: Final = 10


def is_blank(label: str) -> bool:
    return not label.strip()


@dataclass(frozen=True)
class OptionSet:
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        count = len(self.labels)
        if not MIN_OPTIONS <= count <= MAX_OPTIONS:
            raise OptionSetError(f"Expected {MIN_OPTIONS}-{MAX_OPTIONS} options, got {count}")
        for position, label in enumerate(self.labels, 1):
            if not isinstance(label, str) or is_blank(label):
                raise OptionSetError(f"Option {position} is blank")

    @classmethod
    def of(cls, labels: Iterable[str]) -> OptionSet:
        return cls(tuple(labels))

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __getitem__(self, index: int) -> str:
        return self.labels[index]


@dataclass(frozen=True)
class SelectionResult:
    """The winning option of a spin."""

    index: int
    label: str

    @property
    def position(self) -> int:
        # 1-based index shown to the user
        return self.index + 1
