import pytest

from specfmt.core.unwrap import unwrap_lines

from conftest import contents_of, make_lines


def test_paragraph_lines_are_joined(classifier):
    result = unwrap_lines(make_lines(["<p>", "foo", "bar", "</p>"]), classifier)
    assert contents_of(result) == ["<p>", "foo bar", "</p>"]
    assert result[1].should_format is True


def test_ineligible_line_is_not_merged(classifier):
    result = unwrap_lines(make_lines(["<p>", "foo", "bar"], [True, True, False]), classifier)
    assert contents_of(result) == ["<p>", "foo", "bar"]
    assert result[2].should_format is False


def test_merging_into_ineligible_line_makes_it_eligible(classifier):
    result = unwrap_lines(make_lines(["foo", "bar"], [False, True]), classifier)
    assert contents_of(result) == ["foo bar"]
    assert result[0].should_format is True


def test_leading_indentation_of_first_line_is_kept(classifier):
    result = unwrap_lines(make_lines(["  foo", "      bar  "]), classifier)
    assert contents_of(result) == ["  foo bar"]


@pytest.mark.parametrize("first", [
    "<p>foo</p>",
    "<li>foo</li>",
    "<dd>foo</dd>",
    "foo -->",
    "<p>foo</p>   ",
])
def test_hard_terminators_end_the_logical_line(classifier, first):
    result = unwrap_lines(make_lines([first, "bar"]), classifier)
    assert contents_of(result) == [first, "bar"]


@pytest.mark.parametrize("standalone", [
    "",
    "   ",
    "<p>",
    "</div>",
    "<br>",
    "<img src=foo.png alt=''/>",
    "<div algorithm>",
    "<span class=note></span>",
    "<dt>term</dt>",
    "<h3 id=intro>Introduction</h3>",
])
def test_standalone_lines_never_merge(classifier, standalone):
    result = unwrap_lines(make_lines(["foo", standalone, "bar"]), classifier)
    assert contents_of(result) == ["foo", standalone, "bar"]


def test_standalone_line_keeps_its_flag(classifier):
    result = unwrap_lines(make_lines(["<p>", "x"], [False, True]), classifier)
    assert [line.should_format for line in result] == [False, True]


@pytest.mark.parametrize("opener", ["2. Next step", ": <dfn>term</dfn>", ":: A description"])
def test_list_and_definition_openers_start_their_own_line(classifier, opener):
    result = unwrap_lines(make_lines(["Some text", "  " + opener]), classifier)
    assert contents_of(result) == ["Some text", "  " + opener]


def test_description_takes_continuation_lines(classifier):
    result = unwrap_lines(make_lines(["  :: The description", "     continues here."]), classifier)
    assert contents_of(result) == ["  :: The description continues here."]


def test_term_and_numbered_item_do_not_take_continuation_lines(classifier):
    result = unwrap_lines(make_lines([": <dfn>term</dfn>", "next", "1. Step", "more"]), classifier)
    assert contents_of(result) == [": <dfn>term</dfn>", "next", "1. Step", "more"]


def test_output_is_never_longer_than_input(classifier):
    contents = ["<p>", "a", "b", "", "c", "<!-- x -->", "d", "e</p>"]
    result = unwrap_lines(make_lines(contents), classifier)
    assert len(result) <= len(contents)
    assert contents_of(result) == ["<p>", "a b", "", "c <!-- x -->", "d e</p>"]


def test_empty_document(classifier):
    assert unwrap_lines([], classifier) == []


def test_exempt_line_takes_no_continuation(classifier):
    lines = make_lines(["print(x)</pre>", "more text"])
    lines[0].should_format = False
    lines[0].exempt = True
    result = unwrap_lines(lines, classifier)
    assert contents_of(result) == ["print(x)</pre>", "more text"]
    assert result[0].exempt is True
    assert result[1].exempt is False
