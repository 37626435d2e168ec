import pytest

from vikingcase.casing import CaseType, CaseTypeError, split_words, to_case

SAMPLES = ["MyEnumMember", "parse HTTPRequest now", "snake_case-and kebab", "Version2Beta"]


@pytest.mark.parametrize("case", list(CaseType))
def test_parse_round_trip(case):
    assert CaseType.parse(case.value) is case
    assert str(case) == case.value


def test_parse_rejects_unknown_name():
    with pytest.raises(CaseTypeError, match="Not a valid case: Bogus") as info:
        CaseType.parse("Bogus")
    assert info.value.case == "Bogus"
    assert isinstance(info.value, ValueError)


def test_parse_is_exact():
    with pytest.raises(CaseTypeError):
        CaseType.parse("snake")


def test_unknown_error_message():
    assert str(CaseTypeError()) == "Unknown error: Your guess is as good as mine"


def test_from_attributes_last_valid_wins():
    assert CaseType.from_attributes(["Snake", "allow", "Kebab", "derive"]) is CaseType.KEBAB


def test_from_attributes_accepts_call_form_and_members():
    assert CaseType.from_attributes(["Sentence()"]) is CaseType.SENTENCE
    assert CaseType.from_attributes([CaseType.TOGGLE, 42]) is CaseType.TOGGLE


def test_from_attributes_without_case_is_none():
    assert CaseType.from_attributes([]) is None
    assert CaseType.from_attributes(["doc", "allow"]) is None


def test_split_on_delimiters():
    assert split_words("snake_case") == ["snake", "case"]
    assert split_words("a--b  c") == ["a", "b", "c"]
    assert split_words("") == []


def test_split_on_case_and_acronyms():
    assert split_words("HTTPRequest") == ["HTTP", "Request"]
    assert split_words("MyEnumMember") == ["My", "Enum", "Member"]


def test_split_on_digits():
    assert split_words("Version2Beta") == ["Version", "2", "Beta"]


def test_documented_example():
    assert to_case("Horizontal", CaseType.FLAT) == "horizontal"
    assert to_case("Vertical", CaseType.UPPER_FLAT) == "VERTICAL"
    assert to_case("ToTALLyRandDOmCaSe", CaseType.NONE) == "ToTALLyRandDOmCaSe"


@pytest.mark.parametrize("text", SAMPLES)
def test_delimited_cases_agree(text):
    snake = to_case(text, CaseType.SNAKE)
    assert snake == to_case(text, CaseType.LOWER).replace(" ", "_")
    assert to_case(text, CaseType.CONSTANT) == snake.upper()
    assert to_case(text, CaseType.UPPER_SNAKE) == snake.upper()
    assert to_case(text, CaseType.KEBAB) == snake.replace("_", "-")
    assert to_case(text, CaseType.COBOL) == snake.upper().replace("_", "-")
    assert to_case(text, CaseType.FLAT) == snake.replace("_", "")


@pytest.mark.parametrize("text", SAMPLES)
def test_capitalised_cases_agree(text):
    title = to_case(text, CaseType.TITLE)
    assert to_case(text, CaseType.PASCAL) == title.replace(" ", "")
    assert to_case(text, CaseType.UPPER_CAMEL) == title.replace(" ", "")
    assert to_case(text, CaseType.ADA) == title.replace(" ", "_")
    assert to_case(text, CaseType.TRAIN) == title.replace(" ", "-")
    camel = to_case(text, CaseType.CAMEL)
    assert camel[:1] == camel[:1].lower()
    assert camel[1:] == title.replace(" ", "")[1:]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("case", [CaseType.SNAKE, CaseType.KEBAB, CaseType.TITLE, CaseType.CONSTANT])
def test_conversion_is_idempotent(text, case):
    once = to_case(text, case)
    assert to_case(once, case) == once


@pytest.mark.parametrize("text", SAMPLES)
def test_words_survive_conversion(text):
    expected = [word.lower() for word in split_words(text)]
    assert split_words(to_case(text, CaseType.SNAKE)) == expected


@pytest.mark.parametrize("text", SAMPLES)
def test_alternating_letters_alternate(text):
    result = to_case(text, CaseType.ALTERNATING)
    letters = [ch for ch in result if ch.isalpha()]
    assert all(ch.islower() for ch in letters[0::2])
    assert all(ch.isupper() for ch in letters[1::2])


@pytest.mark.parametrize("text", SAMPLES)
def test_toggle_words(text):
    for word in to_case(text, CaseType.TOGGLE).split(" "):
        assert word[:1] == word[:1].lower()
        assert word[1:] == word[1:].upper()


@pytest.mark.parametrize("text", SAMPLES)
def test_sentence_starts_capital_then_lower(text):
    result = to_case(text, CaseType.SENTENCE)
    assert result[:1] == result[:1].upper()
    assert result[1:] == to_case(text, CaseType.LOWER)[1:]


def test_convert_method_and_string_case():
    assert CaseType.KEBAB.convert("MyEnumMember") == to_case("MyEnumMember", CaseType.KEBAB)
    assert to_case("MyEnumMember", "Kebab") == to_case("MyEnumMember", CaseType.KEBAB)
    with pytest.raises(CaseTypeError):
        to_case("MyEnumMember", "kebab")


def test_empty_text():
    assert all(to_case("", case) == "" for case in CaseType)