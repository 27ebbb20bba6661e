from crablings.lessons.sequences import (
    array_and_vec,
    compose_me,
    is_a_color_word,
    replace_me,
    trim_me,
    vec_loop,
    vec_map,
)


def test_array_and_vec_similarity():
    fixed, values = array_and_vec()
    assert list(fixed) == values


def test_vec_loop():
    values = [2, 4, 6, 8, 10]
    result = vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert result is values


def test_vec_map():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]


def test_color_words():
    assert is_a_color_word("green")
    assert is_a_color_word("blue")
    assert is_a_color_word("red")
    assert not is_a_color_word("purple")


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"