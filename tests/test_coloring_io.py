"""Tests for aaptools.io.coloring."""
import pytest

from aaptools.aap.detect import BLUE, RED, UNCOLORED
from aaptools.io.coloring import color_classes, coloring_to_str, str_to_coloring


def test_to_str():
    assert coloring_to_str([RED, BLUE, UNCOLORED, RED]) == "RB.R"
    assert coloring_to_str([]) == ""


def test_from_str_lenient():
    assert str_to_coloring("rb R\nb") == [RED, BLUE, RED, BLUE]


def test_from_str_rejects_garbage():
    with pytest.raises(ValueError):
        str_to_coloring("RBX")


def test_to_str_rejects_garbage():
    with pytest.raises(ValueError):
        coloring_to_str([RED, 7])


def test_color_classes():
    red, blue = color_classes(str_to_coloring("RBB.R"))
    assert red == [0, 4]
    assert blue == [1, 2]
