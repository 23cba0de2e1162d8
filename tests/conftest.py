import pytest

from src.wordgrid import Dictionary


# C A T S
# D O G S
# B E A R
# M I C E
LETTERS = "CATSDOGSBEARMICE"


@pytest.fixture
def dictionary():
    return Dictionary(["cat", "cats", "dog", "bear", "ice"])


@pytest.fixture
def letters():
    return LETTERS
