"""Speaker variants sharing a single speak capability."""

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TextIO


class SpeakerKind(Enum):
    """Closed set of speaker variants."""
    DOG = "dog"
    CAT = "cat"


class Speaker(ABC):
    """
    Named entity that voices its variant's phrase.

    The name is fixed at construction; speak() always uses this instance's
    own name.
    """

    kind: SpeakerKind

    __slots__ = ("_name",)

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    @abstractmethod
    def phrase(self) -> str:
        """Fixed phrase for this variant."""
        pass

    def utterance(self) -> str:
        return f"{self._name} says: {self.phrase}"

    def speak(self, stream: Optional[TextIO] = None) -> str:
        """
        Print the utterance and return it.

        Args:
            stream: Destination stream (defaults to the current stdout)

        Returns:
            The line that was printed
        """
        line = self.utterance()
        print(line, file=stream or sys.stdout, flush=True)
        return line

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Speaker):
            return NotImplemented
        return self.kind is other.kind and self._name == other._name

    def __hash__(self) -> int:
        return hash((self.kind, self._name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class Dog(Speaker):
    kind = SpeakerKind.DOG

    __slots__ = ()

    @property
    def phrase(self) -> str:
        return "Woof!"


class Cat(Speaker):
    kind = SpeakerKind.CAT

    __slots__ = ()

    @property
    def phrase(self) -> str:
        return "Meow!"
