import pytest

from instantshare.naming import pluralize, table_name_for, to_snake_case


@pytest.mark.parametrize(
    "name, expected",
    [("RemindersList", "reminders_list"), ("Reminder", "reminder")],
)
def test_to_snake_case(name, expected):
    assert to_snake_case(name) == expected


def test_snake_case_is_lower_and_idempotent():
    snake = to_snake_case("SomeLongTypeName")
    assert snake == snake.lower()
    assert to_snake_case(snake) == snake


def test_leading_capital_gets_no_underscore():
    assert not to_snake_case("Reminder").startswith("_")


@pytest.mark.parametrize(
    "word, expected",
    [("reminder", "reminders"), ("category", "categories")],
)
def test_pluralize_documented(word, expected):
    assert pluralize(word) == expected


@pytest.mark.parametrize("word", ["key", "day", "toy"])
def test_vowel_y_takes_plain_s(word):
    assert pluralize(word) == word + "s"


@pytest.mark.parametrize("word", ["bus", "dish", "match", "box"])
def test_sibilant_endings_take_es(word):
    assert pluralize(word) == word + "es"


@pytest.mark.parametrize(
    "class_name, expected",
    [("Reminder", "reminders"), ("RemindersList", "reminders_lists")],
)
def test_table_name_for(class_name, expected):
    assert table_name_for(class_name) == expected


def test_table_name_for_combines_steps():
    assert table_name_for("Category") == pluralize(to_snake_case("Category"))
    assert table_name_for("Category") == "categories"