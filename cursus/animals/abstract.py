"""Thinking animals built on an abstract base that cannot be created on its own."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO, Union

from cursus.animals.thinking import Brain

_YELLOW = "\x1b[33m"
_BLUE = "\x1b[34m"
_RESET = "\033[0m"


class AAnimal(ABC):
    """The abstract animal: every concrete kind must say what it sounds like."""

    _type_name = "AAnimal"

    def __init__(self) -> None:
        self._type = self._type_name

    @property
    def type(self) -> str:
        """The kind of animal this is."""
        return self._type

    @abstractmethod
    def sound(self) -> str:
        """Return what this animal says; the base gives a generic sound."""
        return f"{_YELLOW}ANIMAL SOUND{_RESET}"

    def make_sound(self, out: TextIO | None = None) -> None:
        """Write this animal's sound on a line of its own."""
        out = sys.stdout if out is None else out
        out.write(self.sound() + "\n")

    def copy(self) -> AAnimal:
        """Return an equal animal that shares no state with this one."""
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        brain = self.__dict__.get("_brain")
        if isinstance(brain, Brain):
            clone._brain = brain.copy()
        return clone


class Dog(AAnimal):
    """A dog that barks and thinks."""

    _type_name = "Dog"

    def __init__(self) -> None:
        super().__init__()
        self._brain = Brain()

    def sound(self) -> str:
        """Return the dog's bark."""
        return "WUFF! WUFF! WUFF!"

    def set_idea(self, index: int, idea: str) -> None:
        """Store an idea in this dog's brain; an index out of range is ignored."""
        self._brain.set_idea(index, idea)

    def get_idea(self, index: int) -> str:
        """Return an idea from this dog's brain, highlighted."""
        return self._brain.get_idea(index)


class Cat(AAnimal):
    """A cat that meows and thinks."""

    _type_name = "Cat"

    def __init__(self) -> None:
        super().__init__()
        self._brain = Brain()

    def sound(self) -> str:
        """Return the cat's meow."""
        return "MEOOOOOOOW!"

    def set_idea(self, index: int, idea: str) -> None:
        """Store an idea in this cat's brain; an index out of range is ignored."""
        self._brain.set_idea(index, idea)

    def get_idea(self, index: int) -> str:
        """Return an idea from this cat's brain, highlighted."""
        return self._brain.get_idea(index)


_Thinking = Union[Dog, Cat]


def _construct(cls: type[_Thinking], out: TextIO) -> _Thinking:
    animal = cls()
    out.write(f"{_YELLOW}Default AAnimal is constructed{_RESET}\n")
    out.write(f"{_BLUE}Brain is constructed{_RESET}\n")
    out.write(f"{animal.type} is constructed\n")
    return animal


def _destroy(animal: _Thinking, out: TextIO) -> None:
    out.write(f"{_BLUE}Brain is destructed{_RESET}\n")
    out.write(f"{animal.type} is destructed\n")
    out.write(f"{_YELLOW}{animal.type} type AAnimal is destructed{_RESET}\n")


def main(argv: list[str] | None = None) -> int:
    """Create a dog and a cat through the abstract base and let them speak."""
    out = sys.stdout
    first = _construct(Dog, out)
    second = _construct(Cat, out)
    first.make_sound(out)
    second.make_sound(out)
    _destroy(first, out)
    _destroy(second, out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())