import json

import pytest

from socialxml.xml_to_json import pretty_json, xml_to_json, xml_to_json_minified

SINGLE_USER = "<users><user><id>1</id><name>Ahmed</name></user></users>"
TWO_USERS = "<users><user><id>1</id></user><user><id>2</id></user></users>"
FOLLOWERS = "<user><followers><id>1</id><id>2</id><id>3</id></followers></user>"


def test_empty_input_gives_empty_output():
    assert xml_to_json("") == ""
    assert xml_to_json_minified("") == ""


def test_single_user_pretty_parses():
    assert json.loads(xml_to_json(SINGLE_USER)) == {
        "users": {"user": {"id": "1", "name": "Ahmed"}}
    }


def test_single_user_pretty_layout():
    lines = xml_to_json(SINGLE_USER).split("\n")
    assert lines[0] == "{"
    assert lines[1] == '    "users": {'
    assert lines[3] == '            "id": "1",'
    assert lines[-1] == "}"


def test_single_user_minified():
    result = xml_to_json_minified(SINGLE_USER)
    assert json.loads(result) == {"users": {"user": {"id": "1", "name": "Ahmed"}}}
    assert result == json.dumps(json.loads(result), separators=(",", ":"))


def test_repeated_elements_become_array():
    expected = {"users": {"user": [{"id": "1"}, {"id": "2"}]}}
    assert json.loads(xml_to_json(TWO_USERS)) == expected
    assert json.loads(xml_to_json_minified(TWO_USERS)) == expected


def test_repeated_text_elements_become_array():
    expected = {"user": {"followers": {"id": ["1", "2", "3"]}}}
    assert json.loads(xml_to_json(FOLLOWERS)) == expected
    assert json.loads(xml_to_json_minified(FOLLOWERS)) == expected


def test_array_followed_by_sibling():
    xml = "<r><list><item><v>a</v></item><item><v>b</v></item></list><tail>t</tail></r>"
    expected = {"r": {"list": {"item": [{"v": "a"}, {"v": "b"}]}, "tail": "t"}}
    assert json.loads(xml_to_json(xml)) == expected
    assert json.loads(xml_to_json_minified(xml)) == expected


def test_indentation_in_source_is_ignored():
    indented = "<users>\n  <user>\n    <id>1</id>\n    <name>Ahmed</name>\n  </user>\n</users>\n"
    assert xml_to_json(indented) == xml_to_json(SINGLE_USER)
    assert xml_to_json_minified(indented) == xml_to_json_minified(SINGLE_USER)


def test_text_is_trimmed():
    assert json.loads(xml_to_json_minified("<a><b>  x  </b></a>")) == {"a": {"b": "x"}}


def test_conversion_is_repeatable():
    first = xml_to_json(TWO_USERS)
    assert xml_to_json(TWO_USERS) == first
    assert xml_to_json_minified(TWO_USERS) == xml_to_json_minified(TWO_USERS)


def test_malformed_xml_gives_empty_root():
    assert json.loads(xml_to_json_minified("<a><b></a>")) == {"": {}}
    assert json.loads(xml_to_json("not xml at all")) == {"": {}}


def test_pretty_and_minified_agree_on_nested_document():
    xml = (
        "<users><user><id>1</id><name>Ahmed</name><posts><post><body>hi</body>"
        "<topics><topic>economy</topic><topic>finance</topic></topics></post></posts>"
        "<followers><follower><id>2</id></follower><follower><id>3</id></follower>"
        "</followers></user></users>"
    )
    assert json.loads(xml_to_json(xml)) == json.loads(xml_to_json_minified(xml))


def test_pretty_json_indents_object():
    assert pretty_json('{\n"a": 1\n}') == '{\n    "a": 1\n}'


def test_pretty_json_empty():
    assert pretty_json("") == ""


@pytest.mark.parametrize(
    "text",
    [
        '{\n"a": {\n"b": "c"\n}\n}',
        '{\n"a": [\n"1",\n"2"\n]\n}',
        "plain\nlines",
    ],
)
def test_pretty_json_only_adds_leading_spaces(text):
    result = pretty_json(text)
    assert [line.lstrip(" ") for line in result.split("\n")] == text.split("\n")


def test_pretty_json_drops_trailing_newline():
    assert pretty_json('{\n"a": 1\n}\n') == pretty_json('{\n"a": 1\n}')


def test_pretty_json_nesting_returns_to_zero():
    result = pretty_json('{\n"a": {\n"b": {\n"c": "d"\n}\n}\n}')
    lines = result.split("\n")
    assert lines[0] == "{"
    assert lines[-1] == "}"
    assert lines[3] == "            " + '"c": "d"'