import pytest

from morse_code import (
    MORSE_CODE,
    MorseCodec,
    MorseTable,
    morse_to_text,
    text_to_morse,
)

HELLO_WORLD = ".... . .-.. .-.. --- / .-- --- .-. .-.. -.."


@pytest.fixture
def codec():
    return MorseCodec()


def test_table_is_a_bijection():
    table = MorseTable()
    assert len(table) == 55
    tokens = [code for _, code in table]
    assert len(set(tokens)) == len(tokens)
    for char, code in table:
        assert table.lookup_character(code) == char


def test_table_rejects_duplicate_tokens():
    with pytest.raises(ValueError):
        MorseTable({'A': '.-', 'B': '.-'})


def test_table_tokens_use_dots_and_dashes():
    for char, code in MorseTable():
        if char == ' ':
            assert code == '/'
        else:
            assert code and set(code) <= {'.', '-'}


def test_lookup_code(codec):
    assert codec.lookup_code('A') == ".-"
    assert codec.lookup_code('Z') == "--.."
    assert codec.lookup_code('5') == "....."
    assert codec.lookup_code(' ') == "/"


def test_lookup_is_case_sensitive(codec):
    assert codec.lookup_code('a') is None
    assert 'a' not in codec.table
    assert 'A' in codec.table


def test_lookup_character(codec):
    assert codec.lookup_character(".-") == 'A'
    assert codec.lookup_character("--..") == 'Z'
    assert codec.lookup_character(".....") == '5'
    assert codec.lookup_character("/") == ' '
    assert codec.lookup_character("-..-..-") is None


def test_encode(codec):
    assert codec.encode("HELLO WORLD") == HELLO_WORLD


def test_decode(codec):
    assert codec.decode(HELLO_WORLD) == "HELLO WORLD"


def test_empty_input(codec):
    assert codec.encode("") == ""
    assert codec.decode("") == ""


def test_encode_skips_unknown_characters(codec):
    assert codec.encode("h3~~") == "...--"
    assert codec.encode("H3!!!") == ".... ...-- -.-.-- -.-.-- -.-.--"
    assert codec.encode("hello") == ""


def test_decode_skips_unknown_tokens(codec):
    assert codec.decode("... -..-..- ...") == "SS"
    assert codec.decode("abc") == ""


@pytest.mark.parametrize("char", [c for c in MORSE_CODE if c != ' '])
def test_round_trip(codec, char):
    assert codec.decode(codec.encode(char)) == char


def test_space_does_not_round_trip(codec):
    # The space token is also the word separator, so an encoded space and
    # a blank Morse string both decode to nothing
    assert codec.encode(" ") == "/"
    assert codec.decode("/") == ""
    assert codec.decode("   ") == ""
    assert codec.decode(codec.encode("A B")) == "A B"


def test_decode_stray_separator_splits_word(codec):
    assert codec.decode(".- / -...") == "A B"
    assert codec.decode(".-/-...") == "A B"
    assert codec.decode("/ .-") == "A"


def test_is_morse(codec):
    assert codec.is_morse("... --- ...")
    assert codec.is_morse(HELLO_WORLD)
    assert codec.is_morse("")
    assert codec.is_morse("   ")
    assert not codec.is_morse("HELLO")
    assert not codec.is_morse("... x")


def test_contains_morse(codec):
    assert codec.contains_morse("HELLO .- WORLD")
    assert codec.contains_morse("/")
    assert not codec.contains_morse("HELLO WORLD")
    assert not codec.contains_morse("   ")
    assert not codec.contains_morse("")


def test_translate_mixed_text(codec):
    assert codec.translate("HELLO WORLD ... --- ...") == \
        ".... . .-.. .-.. --- .-- --- .-. .-.. -.. S O S"
    assert codec.translate("... --- ... HELLO WORD") == \
        "S O S .... . .-.. .-.. --- .-- --- .-. -.."


def test_translate_decodes_word_by_word(codec):
    # each space-delimited token is decoded alone, unlike decode()
    assert codec.translate("... --- ...") == "S O S"
    assert codec.decode("... --- ...") == "SOS"


def test_translate_empty(codec):
    assert codec.translate("") == ""


def test_module_functions():
    assert text_to_morse("SOS") == "... --- ..."
    assert morse_to_text("... --- ...") == "SOS"
