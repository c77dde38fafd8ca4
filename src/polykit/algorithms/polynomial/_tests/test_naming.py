import pytest

from polykit.algorithms.polynomial.naming import (NAMING, NO_VARIABLE,
                                                  NamingTable,
                                                  decode_variable_id,
                                                  id_to_variable_name,
                                                  is_valid_variable_name,
                                                  split_variable_name,
                                                  variable_name_to_id)
from polykit.algorithms.utils.exceptions import (IdOverflowError,
                                                 InvalidNameError)


def test_table_constants():
    assert NAMING.radix == 31
    assert NAMING.max_name_part == 31**4
    assert NAMING.max_index == 2325


def test_single_letter_round_trip():
    var = variable_name_to_id("x", 1)
    assert var == 56
    assert decode_variable_id(var) == ("x", 1)
    assert id_to_variable_name(var) == "x1"


@pytest.mark.parametrize("name", ["x", "@", "q", "ab", "s_.", "zzzz", "@@@@", "t.#a"])
@pytest.mark.parametrize("m", [1, 2, 17, 2325])
def test_round_trip(name, m):
    var = variable_name_to_id(name, m)
    assert var > NO_VARIABLE
    assert var % 2 == 0
    assert decode_variable_id(var) == (name, m)


def test_ids_are_distinct():
    ids = {
        variable_name_to_id("x", 1),
        variable_name_to_id("x", 2),
        variable_name_to_id("y", 1),
        variable_name_to_id("xy", 1),
        variable_name_to_id("yx", 1),
    }
    assert len(ids) == 5


@pytest.mark.parametrize("name", ["$", "x$", "", "X", "a b"])
def test_invalid_names(name):
    assert not is_valid_variable_name(name)
    with pytest.raises(InvalidNameError):
        variable_name_to_id(name)


def test_name_too_long():
    assert is_valid_variable_name("abcde")
    with pytest.raises(IdOverflowError):
        variable_name_to_id("abcde")


def test_index_bounds():
    with pytest.raises(InvalidNameError):
        variable_name_to_id("x", 0)
    with pytest.raises(IdOverflowError):
        variable_name_to_id("x", NAMING.max_index + 1)


@pytest.mark.parametrize("var", [0, -2, 57])
def test_decode_rejects_bad_ids(var):
    with pytest.raises(InvalidNameError):
        decode_variable_id(var)


def test_decode_rejects_gaps():
    # digit 0 between used positions: "x" shifted by one base-31 place
    var = 2 * (28 * 31)
    with pytest.raises(InvalidNameError):
        decode_variable_id(var)


def test_split_variable_name():
    assert split_variable_name("x12") == ("x", 12)
    assert split_variable_name("c") == ("c", 1)
    assert split_variable_name("ab3") == ("ab", 3)
    with pytest.raises(InvalidNameError):
        split_variable_name("12")


def test_custom_table():
    table = NamingTable(alphabet="ab", max_name_length=2)
    assert table.radix == 3
    var = variable_name_to_id("ba", 2, table=table)
    assert decode_variable_id(var, table=table) == ("ba", 2)
    with pytest.raises(InvalidNameError):
        variable_name_to_id("c", table=table)
