import io

import pytest

from cqlgen import data
from cqlgen.adapter.cql import ensure_buffer, identifier, qualified, quote_string


def test_identifier_leaves_lower_case_names_unquoted():
    assert identifier("customer_id") == "customer_id"
    assert identifier("t1") == "t1"


def test_identifier_quotes_mixed_case_names():
    assert identifier("CustomerId") == '"CustomerId"'


def test_identifier_quotes_names_with_other_characters():
    assert identifier("first name") == '"first name"'
    assert identifier("1st") == '"1st"'
    assert identifier("users\n") == '"users\n"'


def test_identifier_doubles_embedded_double_quotes():
    assert identifier('say "hi"') == '"say ""hi"""'


def test_identifier_quotes_reserved_keywords():
    assert identifier("select") == '"select"'
    assert identifier("table") == '"table"'


@pytest.mark.parametrize("name", ["", None])
def test_identifier_rejects_empty_names(name: str | None):
    with pytest.raises(data.InvalidIdentifier):
        identifier(name)


def test_qualified():
    assert qualified("ks", "mytable") == "ks.mytable"
    assert qualified(None, "mytable") == "mytable"
    assert qualified("Ks", "mytable") == '"Ks".mytable'


def test_quote_string_doubles_single_quotes():
    assert quote_string("it's") == "'it''s'"
    assert quote_string("") == "''"


def test_ensure_buffer():
    buf = io.StringIO()
    assert ensure_buffer(buf) is buf
    assert isinstance(ensure_buffer(None), io.StringIO)
    assert ensure_buffer() is not ensure_buffer()
