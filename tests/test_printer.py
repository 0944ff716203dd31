import io

import pytest
from mlisp.errors import InvalidArgument
from mlisp.objects import make_empty, make_list, make_number, make_pair, make_symbol
from mlisp.parser import parse
from mlisp.printer import format_obj, print_obj
from mlisp.tokenizer import tokenize
from mlisp.types import ReaderConfig


def roundtrip(src, config=None):
    return format_obj(parse(tokenize(src)), config)


def test_number():
    assert format_obj(make_number(1)) == "1.000000"


def test_negative_number():
    assert format_obj(make_number(-0.5)) == "-0.500000"


def test_symbol():
    assert format_obj(make_symbol("foo")) == "foo"


def test_empty():
    assert format_obj(make_empty()) == "()"


def test_proper_list():
    assert roundtrip("(1 2 3)") == "(1.000000 2.000000 3.000000)"


def test_nested_list():
    assert roundtrip("(a (b (c)) () d)") == "(a (b (c)) () d)"


def test_quote_sugar_prints_expanded():
    assert roundtrip("'(a b)") == "(quote (a b))"
    assert roundtrip("''x") == "(quote (quote x))"


def test_dotted_pair():
    pair = make_pair(make_symbol("a"), make_number(1.0))
    assert format_obj(pair) == "(a . 1.000000)"


def test_improper_list():
    lst = make_list(make_symbol("a"), make_symbol("b"), tail=make_symbol("c"))
    assert format_obj(lst) == "(a b . c)"


def test_pair_with_list_head():
    pair = make_pair(make_list(make_symbol("x")), make_symbol("y"))
    assert format_obj(pair) == "((x) . y)"


def test_print_obj_appends_newline():
    out = io.StringIO()
    print_obj(out, make_list(make_symbol("a")))
    assert out.getvalue() == "(a)\n"


def test_trim_zeros():
    config = ReaderConfig(trim_zeros=True)
    assert roundtrip("(1 2.5 -0.25 10)", config) == "(1 2.5 -0.25 10)"


def test_number_format():
    assert format_obj(make_number(2), ReaderConfig(number_format="%.1f")) == "2.0"


def test_missing_object():
    with pytest.raises(InvalidArgument, match="missing object"):
        format_obj(None)


def test_unknown_object():
    with pytest.raises(TypeError, match="unknown object type"):
        format_obj("not an object")


def test_long_list():
    lst = make_list(*[make_symbol("x") for _ in range(5000)])
    assert format_obj(lst) == "(" + " ".join(["x"] * 5000) + ")"
