"""Animals that make sounds, and wrong animals whose sound is not overridden."""

from __future__ import annotations

import sys
from typing import TextIO

_YELLOW = "\x1b[33m"
_MAGENTA = "\x1b[35m"
_RESET = "\033[0m"


class _Lifecycle:
    """Construction and destruction announcements collected along the class chain."""

    _type_name = ""
    _constructed: str
    _destructed: str

    def __init__(self) -> None:
        self._type = self._type_name

    @property
    def type(self) -> str:
        """The kind of animal this is."""
        return self._type

    def _birth_lines(self) -> list[str]:
        return [
            cls.__dict__["_constructed"]
            for cls in reversed(type(self).__mro__)
            if "_constructed" in cls.__dict__
        ]

    def _death_lines(self) -> list[str]:
        return [
            cls.__dict__["_destructed"].format(type=self._type)
            for cls in type(self).__mro__
            if "_destructed" in cls.__dict__
        ]


class Animal(_Lifecycle):
    """A generic animal; subclasses replace its sound."""

    _type_name = "Animal"
    _constructed = f"{_YELLOW}Default Animal is constructed{_RESET}"
    _destructed = _YELLOW + "{type} type Animal is destructed" + _RESET

    def sound(self) -> str:
        """Return what this animal says."""
        return f"{_YELLOW}ANIMAL SOUND{_RESET}"

    def make_sound(self, out: TextIO | None = None) -> None:
        """Write this animal's sound on a line of its own."""
        out = sys.stdout if out is None else out
        out.write(self.sound() + "\n")


class Dog(Animal):
    """An animal that barks."""

    _type_name = "Dog"
    _constructed = "Dog is constructed"
    _destructed = "{type} is destructed"

    def sound(self) -> str:
        return "WUFF! WUFF! WUFF!"


class Cat(Animal):
    """An animal that meows."""

    _type_name = "Cat"
    _constructed = "Cat is constructed"
    _destructed = "{type} is destructed"

    def sound(self) -> str:
        return "MEOOOOOOOW!"


class WrongAnimal(_Lifecycle):
    """An animal whose make_sound always uses its own sound, ignoring subclasses."""

    _type_name = "WrongAnimal"
    _constructed = f"{_MAGENTA}Default WrongAnimal is constructed{_RESET}"
    _destructed = _MAGENTA + "{type} type WrongAnimal is destructed" + _RESET

    def sound(self) -> str:
        """Return what a wrong animal says."""
        return f"{_MAGENTA}WRONG ANIMAL SOUND{_RESET}"

    def make_sound(self, out: TextIO | None = None) -> None:
        """Write the wrong animal's sound; a subclass's sound is never used."""
        out = sys.stdout if out is None else out
        out.write(WrongAnimal.sound(self) + "\n")


class WrongCat(WrongAnimal):
    """A cat whose own sound is hidden behind WrongAnimal.make_sound."""

    _type_name = "WrongCat"
    _constructed = "WrongCat is constructed"
    _destructed = "{type} is destructed"

    def sound(self) -> str:
        return "WRONG___MEOOOOOOOW!"


def _create(cls: type[_Lifecycle], out: TextIO) -> _Lifecycle:
    animal = cls()
    out.writelines(line + "\n" for line in animal._birth_lines())
    return animal


def _destroy(animal: _Lifecycle, out: TextIO) -> None:
    out.writelines(line + "\n" for line in animal._death_lines())


def main(argv: list[str] | None = None) -> int:
    """Create a few animals, let them speak and dispose of them."""
    out = sys.stdout
    meta = _create(Animal, out)
    wrong_meta = _create(WrongAnimal, out)
    dog = _create(Dog, out)
    cat = _create(Cat, out)
    wrong_cat = _create(WrongCat, out)
    for animal in (cat, dog, wrong_cat, meta, wrong_meta):
        animal.make_sound(out)
    for animal in (meta, wrong_meta, dog, cat, wrong_cat):
        _destroy(animal, out)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())