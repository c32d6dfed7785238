import io

import pytest

from cursus.animals.abstract import AAnimal, Cat, Dog, main
from cursus.animals.thinking import INVALID_INDEX


def test_abstract_base_cannot_be_created():
    with pytest.raises(TypeError):
        AAnimal()


def test_dog_sound():
    assert Dog().sound() == "WUFF! WUFF! WUFF!"


def test_cat_sound():
    assert Cat().sound() == "MEOOOOOOOW!"


def test_types():
    assert Dog().type == "Dog"
    assert Cat().type == "Cat"


def test_make_sound_writes_line():
    out = io.StringIO()
    Cat().make_sound(out)
    assert out.getvalue() == "MEOOOOOOOW!\n"


def test_base_sound_reachable_from_subclass():
    assert AAnimal.sound(Dog()) == "\x1b[33mANIMAL SOUND\033[0m"
    assert AAnimal.sound(Cat()) == "\x1b[33mANIMAL SOUND\033[0m"


def test_idea_round_trip():
    dog = Dog()
    dog.set_idea(0, "I want a bone")
    assert dog.get_idea(0) == "\x1b[1;34mI want a bone\033[0m"


def test_invalid_index():
    cat = Cat()
    cat.set_idea(100, "ignored")
    assert cat.get_idea(100) == INVALID_INDEX
    assert cat.get_idea(-1) == INVALID_INDEX


def test_copy_is_deep():
    dog1 = Dog()
    dog1.set_idea(0, "I want a bone")
    dog2 = dog1.copy()
    assert dog2.get_idea(0) == dog1.get_idea(0)
    dog2.set_idea(0, "I want a nap")
    assert dog1.get_idea(0) == "\x1b[1;34mI want a bone\033[0m"
    assert dog2.get_idea(0) == "\x1b[1;34mI want a nap\033[0m"
    assert type(dog2) is Dog
    assert dog2.type == "Dog"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "\x1b[33mDefault AAnimal is constructed\033[0m"
    assert "WUFF! WUFF! WUFF!" in lines
    assert "MEOOOOOOOW!" in lines
    assert lines.index("WUFF! WUFF! WUFF!") < lines.index("MEOOOOOOOW!")
    assert lines[-1] == "\x1b[33mCat type AAnimal is destructed\033[0m"
    assert lines.count("\x1b[34mBrain is destructed\033[0m") == 2