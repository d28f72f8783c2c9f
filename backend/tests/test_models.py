import pytest

from exercise_api.models import Question, User


@pytest.mark.parametrize("field,value", [
    ("id", 7),
    ("name", "Soma de vetores"),
    ("statement", "Escreva uma funcao que some dois vetores."),
    ("source_code", "def soma(a, b):\n    return [x + y for x, y in zip(a, b)]\n"),
])
def test_question_attribute_round_trip(field, value):
    q = Question()
    setattr(q, field, value)
    assert getattr(q, field) == value


@pytest.mark.parametrize("field,value", [
    ("name", "Ana"),
    ("password", "123"),
    ("email", "ana@x.com"),
])
def test_user_attribute_round_trip(field, value):
    u = User()
    setattr(u, field, value)
    assert getattr(u, field) == value


def test_question_identity_is_by_id():
    a = Question(id=1, name="A")
    b = Question(id=1, name="B")
    c = Question(id=2, name="A")
    assert a == b
    assert hash(a) == hash(b)
    assert a != c


def test_entities_without_id_compare_by_object():
    a = User(name="Ana")
    b = User(name="Ana")
    assert a != b
    assert a == a


def test_different_entity_types_never_equal():
    assert Question(id=1) != User(id=1)
