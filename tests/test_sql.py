import pytest

from core.errors import BadRequestError
from core.sql import PG_INT_MAX, is_pg_int, sql_for_partial_update


def test_one_placeholder_per_field_in_input_order():
    set_cols, values = sql_for_partial_update({"city": "Kilis", "country": "Turkey", "location": "East"})

    assert set_cols == '"city"=$1, "country"=$2, "location"=$3'
    assert values == ["Kilis", "Turkey", "East"]
    assert set_cols.count("$") == len(values)


def test_column_names_alias_fields():
    set_cols, values = sql_for_partial_update(
        {"firstName": "Aliya", "age": 32},
        {"firstName": "first_name"},
    )

    assert set_cols == '"first_name"=$1, "age"=$2'
    assert values == ["Aliya", 32]


def test_single_field():
    set_cols, values = sql_for_partial_update({"head": 4})

    assert set_cols == '"head"=$1'
    assert values == [4]


def test_empty_data_is_rejected():
    with pytest.raises(BadRequestError) as excinfo:
        sql_for_partial_update({})

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "No data"


def test_is_pg_int_bounds():
    assert is_pg_int(PG_INT_MAX)
    assert is_pg_int(-PG_INT_MAX - 1)
    assert not is_pg_int(PG_INT_MAX + 1)
    assert not is_pg_int(3_000_000_000)
