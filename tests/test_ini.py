import pytest

from retrokit.ini import IniParser, ItemType

SAMPLE = """# leading comment
Name=Test Mod
Count=12abc
[mods]
alpha=true
beta = 1
; not an item
gamma=false
"""


def test_parse_sectionless_and_section_items():
    parser = IniParser.parse(SAMPLE)
    assert parser.get_string("", "Name") == "Test Mod"
    assert parser.get_bool("mods", "alpha") is True
    assert parser.get_bool("mods", "gamma") is False
    assert [item.key for item in parser.items] == ["Name", "Count", "alpha", "beta ", "gamma"]


def test_key_keeps_trailing_space_and_value_skips_leading():
    parser = IniParser.parse("[s]\nbeta = 1\n")
    assert parser.get_string("s", "beta ") == "1"
    with pytest.raises(KeyError):
        parser.get_string("s", "beta")


def test_get_int_uses_leading_digits():
    parser = IniParser.parse("a=12abc\nb=abc\nc= -7\n")
    assert parser.get_int("", "a") == 12
    assert parser.get_int("", "b") == 0
    assert parser.get_int("", "c") == -7


def test_get_float_parses_prefix():
    parser = IniParser.parse("f=2.5xyz\ng=nope\n")
    assert parser.get_float("", "f") == 2.5
    assert parser.get_float("", "g") == 0.0


def test_get_bool_accepts_true_and_one_only():
    parser = IniParser.parse("a=1\nb=yes\nc=true\n")
    assert parser.get_bool("", "a") is True
    assert parser.get_bool("", "b") is False
    assert parser.get_bool("", "c") is True


def test_missing_key_raises():
    parser = IniParser()
    with pytest.raises(KeyError):
        parser.get_int("mods", "anything")


def test_section_flag_recorded():
    parser = IniParser.parse("top=1\n[sec]\ninner=2\n")
    assert [item.has_section for item in parser.items] == [False, True]
    assert parser.items[1].section == "sec"


def test_value_stops_at_carriage_return():
    parser = IniParser.parse("key=value\r\n")
    assert parser.get_string("", "key") == "value"


def test_dumps_layout():
    parser = IniParser()
    parser.set_string("", "a", "1")
    parser.set_bool("mods", "x", True)
    parser.set_int("mods", "y", 5)
    assert parser.dumps() == "a=1\n\n[mods]\nx=true\ny=5\n"


def test_set_float_uses_six_decimals():
    parser = IniParser()
    parser.set_float("s", "f", 1.5)
    assert parser.get_string("s", "f") == "1.500000"
    assert parser.items[0].item_type == ItemType.FLOAT


def test_comment_written_with_semicolon():
    parser = IniParser()
    parser.set_comment("", "c1", "hello")
    assert parser.dumps() == "; hello\n\n"


def test_set_overwrites_existing_item():
    parser = IniParser()
    parser.set_int("s", "k", 1)
    parser.set_bool("s", "k", False)
    assert len(parser.items) == 1
    assert parser.get_string("s", "k") == "false"
    assert parser.items[0].item_type == ItemType.BOOL


def test_multiple_sections_separated_by_blank_line():
    parser = IniParser()
    parser.set_int("one", "a", 1)
    parser.set_int("two", "b", 2)
    assert parser.dumps() == "\n[one]\na=1\n\n[two]\nb=2\n"


def test_repeated_first_section_written_once():
    parser = IniParser()
    parser.set_int("A", "a", 1)
    parser.set_int("B", "b", 2)
    parser.set_int("A", "c", 3)
    text = parser.dumps()
    assert text.count("[A]") == 1
    assert text.count("[B]") == 1


def test_round_trip_through_text():
    parser = IniParser()
    parser.set_string("", "Name", "My Mod")
    parser.set_bool("mods", "first", True)
    parser.set_int("mods", "second", -4)
    reparsed = IniParser.parse(parser.dumps())
    assert reparsed.get_string("", "Name") == "My Mod"
    assert reparsed.get_bool("mods", "first") is True
    assert reparsed.get_int("mods", "second") == -4


def test_write_and_read_file(tmp_path):
    path = tmp_path / "modconfig.ini"
    parser = IniParser()
    parser.set_bool("mods", "folder", True)
    parser.write(path)
    loaded = IniParser.from_file(path)
    assert loaded.get_bool("mods", "folder") is True
    assert path.read_text(encoding="utf-8") == parser.dumps()


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        IniParser.from_file(tmp_path / "absent.ini")