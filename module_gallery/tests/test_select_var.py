"""Tests for the variable selector module"""

import pandas as pd
import pytest

from module_gallery.modules.select_var import (
    bound_to,
    describe_column,
    find_vars,
    get_binding,
    is_numeric,
    keep_selection,
    select_column,
    select_var_server,
)


@pytest.fixture
def frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "height": [1.2, 1.5, 1.9],
            "count": [1, 2, 3],
            "name": ["a", "b", "c"],
            "flag": [True, False, True],
        }
    )


class TestFindVars:

    def test_numeric_columns(self, frame):
        assert find_vars(frame, is_numeric) == ["height", "count"]

    def test_custom_filter(self, frame):
        assert find_vars(frame, pd.api.types.is_string_dtype) == ["name"]

    def test_requires_data_frame(self):
        with pytest.raises(TypeError):
            find_vars([[1, 2]], is_numeric)

    def test_requires_callable_filter(self, frame):
        with pytest.raises(TypeError):
            find_vars(frame, "numeric")


class TestColumns:

    def test_select_existing(self, frame):
        assert select_column(frame, "count").tolist() == [1, 2, 3]

    def test_missing_is_none(self, frame):
        assert select_column(frame, "weight") is None
        assert select_column(frame, "") is None
        assert select_column(None, "count") is None

    def test_describe(self, frame):
        assert "mean" in describe_column(frame["count"])
        assert describe_column(None) == "NULL"

    def test_keep_selection(self):
        assert keep_selection(["a", "b"], "b") == "b"
        assert keep_selection(["a", "b"], "z") == "a"
        assert keep_selection(["a", "b"], None) == "a"
        assert keep_selection([], "a") == ""


class TestSelectVarServer:

    def test_binding_ids(self):
        binding = select_var_server("t_var", data_id="t_data")
        assert binding.input_id == "t_var/var"
        assert binding.dataset_input_id == "t_data/dataset"
        assert get_binding("t_var/var") is binding
        assert binding in bound_to("t_data/dataset")

    def test_data_must_be_module_id(self, frame):
        with pytest.raises(TypeError):
            select_var_server("t_var2", data_id=frame)

    def test_filter_must_be_callable(self):
        with pytest.raises(TypeError):
            select_var_server("t_var3", data_id="t_data", filter="numeric")

    def test_unknown_binding(self):
        with pytest.raises(KeyError):
            get_binding("nobody/var")
