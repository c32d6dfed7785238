"""Animals with a brain full of ideas that is copied whole, never shared."""

from __future__ import annotations

import sys
from typing import TextIO, Union

IDEA_COUNT = 100

_YELLOW = "\x1b[33m"
_BLUE = "\x1b[34m"
_BOLD_BLUE = "\x1b[1;34m"
_RESET = "\033[0m"

INVALID_INDEX = f"{_BLUE}INVALID_INDEX{_RESET}"


class Brain:
    """A fixed number of idea slots, all empty at first."""

    def __init__(self, ideas: list[str] | None = None) -> None:
        self._ideas = [""] * IDEA_COUNT
        if ideas is not None:
            self._ideas[: len(ideas)] = ideas[:IDEA_COUNT]

    @staticmethod
    def _in_range(index: int) -> bool:
        return 0 <= index < IDEA_COUNT

    def set_idea(self, index: int, idea: str) -> None:
        """Store ``idea`` in slot ``index``; an index out of range is ignored."""
        if self._in_range(index):
            self._ideas[index] = idea

    def get_idea(self, index: int) -> str:
        """Return the idea in slot ``index`` highlighted, or an invalid-index marker."""
        if self._in_range(index):
            return f"{_BOLD_BLUE}{self._ideas[index]}{_RESET}"
        return INVALID_INDEX

    def copy(self) -> Brain:
        """Return a brain holding the same ideas, independent of this one."""
        return Brain(list(self._ideas))


class Animal:
    """A generic animal; subclasses replace its sound."""

    _type_name = "Animal"

    def __init__(self) -> None:
        self._type = self._type_name

    @property
    def type(self) -> str:
        """The kind of animal this is."""
        return self._type

    def sound(self) -> str:
        """Return what this animal says."""
        return f"{_YELLOW}ANIMAL SOUND{_RESET}"

    def make_sound(self, out: TextIO | None = None) -> None:
        """Write this animal's sound on a line of its own."""
        out = sys.stdout if out is None else out
        out.write(self.sound() + "\n")

    def copy(self) -> Animal:
        """Return an equal animal that shares no state with this one."""
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        brain = self.__dict__.get("_brain")
        if isinstance(brain, Brain):
            clone._brain = brain.copy()
        return clone


class Dog(Animal):
    """A dog that barks and thinks."""

    _type_name = "Dog"

    def __init__(self) -> None:
        super().__init__()
        self._brain = Brain()

    def sound(self) -> str:
        return "WUFF! WUFF! WUFF!"

    def set_idea(self, index: int, idea: str) -> None:
        """Store an idea in this dog's brain."""
        self._brain.set_idea(index, idea)

    def get_idea(self, index: int) -> str:
        """Return an idea from this dog's brain."""
        return self._brain.get_idea(index)


class Cat(Animal):
    """A cat that meows and thinks."""

    _type_name = "Cat"

    def __init__(self) -> None:
        super().__init__()
        self._brain = Brain()

    def sound(self) -> str:
        return "MEOOOOOOOW!"

    def set_idea(self, index: int, idea: str) -> None:
        """Store an idea in this cat's brain."""
        self._brain.set_idea(index, idea)

    def get_idea(self, index: int) -> str:
        """Return an idea from this cat's brain."""
        return self._brain.get_idea(index)


_Thinking = Union[Dog, Cat]


def _construct(cls: type[_Thinking], out: TextIO) -> _Thinking:
    animal = cls()
    out.write(f"{_YELLOW}Default Animal is constructed{_RESET}\n")
    out.write(f"{_BLUE}Brain is constructed{_RESET}\n")
    out.write(f"{animal.type} is constructed\n")
    return animal


def _destroy(animal: _Thinking, out: TextIO) -> None:
    out.write(f"{_BLUE}Brain is destructed{_RESET}\n")
    out.write(f"{animal.type} is destructed\n")
    out.write(f"{_YELLOW}{animal.type} type Animal is destructed{_RESET}\n")


def _assign(source: _Thinking, out: TextIO) -> _Thinking:
    out.write(f"{source.type} assignment operator overload called\n")
    out.write(f"{_BLUE}Brain is destructed{_RESET}\n")
    out.write(f"{_BLUE}Brain copy constructed{_RESET}\n")
    return source.copy()


def _copy_construct(source: _Thinking, out: TextIO) -> _Thinking:
    out.write(f"{_YELLOW}Animal copy constructor called{_RESET}\n")
    out.write(f"{_YELLOW}Animal assigment operator called{_RESET}\n")
    out.write(f"{_BLUE}Brain copy constructed{_RESET}\n")
    out.write(f"{source.type} copy constructor called\n")
    return _assign(source, out)


def main(argv: list[str] | None = None) -> int:
    """Show polymorphic sounds and that copied animals keep separate brains."""
    out = sys.stdout

    out.write("----- Test 1: Basic Polymorphism -----\n")
    first = _construct(Dog, out)
    second = _construct(Cat, out)
    first.make_sound(out)
    second.make_sound(out)
    _destroy(first, out)
    _destroy(second, out)

    out.write("\n\n\n----- Test 2: Array of Animals -----\n")
    animals = [_construct(Dog, out) for _ in range(5)]
    animals += [_construct(Cat, out) for _ in range(5)]
    for animal in animals:
        animal.make_sound(out)
    for animal in animals:
        _destroy(animal, out)

    out.write("\n\n\n----- Test 3: Deep Copy (Copy Constructor) -----\n")
    dog1 = _construct(Dog, out)
    dog1.set_idea(0, "I want a bone")
    dog1.set_idea(1, "I want to play")
    dog2 = _copy_construct(dog1, out)
    out.write(f"dog1 idea[0]: {dog1.get_idea(0)}\n")
    out.write(f"dog2 idea[0]: {dog2.get_idea(0)}\n")
    dog2.set_idea(0, "I want a nap")
    out.write("After changing dog2 idea[0]:\n")
    out.write(f"dog1 idea[0]: {dog1.get_idea(0)}\n")
    out.write(f"dog2 idea[0]: {dog2.get_idea(0)}\n")

    out.write("\n\n\n----- Test 4: Deep Copy (Assignment Operator) -----\n")
    _construct(Dog, out)
    dog3 = _assign(dog1, out)
    out.write(f"dog1 idea[1]: {dog1.get_idea(1)}\n")
    out.write(f"dog3 idea[1]: {dog3.get_idea(1)}\n")
    dog3.set_idea(1, "I want to run")
    out.write("After changing dog3 idea[1]:\n")
    out.write(f"dog1 idea[1]: {dog1.get_idea(1)}\n")
    out.write(f"dog3 idea[1]: {dog3.get_idea(1)}\n")

    out.write("\n\n\n----- All tests complete -----\n")
    for animal in (dog3, dog2, dog1):
        _destroy(animal, out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())