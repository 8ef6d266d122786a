"""
Unit tests for MethodAccessors
"""

from typing import Optional

import pytest

from quickreflect import ArgErr, CastErr, MethodAccessors, UnknownSlotErr


class MethodAccessorsTestClass:

    def __init__(self):
        self.method1_called = 0

    def increase_calls(self):
        self.method1_called += 1

    def increase_calls_by_increment(self, increment):
        self.method1_called += increment

    def return42(self):
        return 42

    def return42_times_factor(self, factor):
        return factor * 42

    def add(self, a, b):
        return a + b

    def maybe(self, flag):
        return "yes" if flag else None

    def is_even(self, n):
        return n % 2 == 0

    def fail(self):
        raise ValueError("boom")

    @staticmethod
    def twice(x):
        return 2 * x

    @classmethod
    def kind(cls):
        return cls.__name__


class TestInvokeAction:

    def test_containing_object_is_none(self):
        with pytest.raises(ArgErr):
            MethodAccessors.invoke_action(None, "any_method", None)

    @pytest.mark.parametrize("name,err", [(None, ArgErr), ("invalid_method_name", UnknownSlotErr)])
    def test_method_does_not_exist(self, name, err):
        with pytest.raises(err):
            MethodAccessors.invoke_action(MethodAccessorsTestClass(), name, None)

    def test_method_without_params_is_called(self):
        obj = MethodAccessorsTestClass()
        MethodAccessors.invoke_action(obj, "increase_calls", None)
        assert obj.method1_called == 1

    def test_method_with_params_is_called(self):
        obj = MethodAccessorsTestClass()
        MethodAccessors.invoke_action(obj, "increase_calls_by_increment", [3])
        assert obj.method1_called == 3


class TestInvoke:

    def test_containing_object_is_none(self):
        with pytest.raises(ArgErr):
            MethodAccessors.invoke(None, "any_method")

    def test_returns_value(self):
        assert MethodAccessors.invoke(MethodAccessorsTestClass(), "return42") == 42

    def test_returns_value_with_params(self):
        assert MethodAccessors.invoke(MethodAccessorsTestClass(), "return42_times_factor", [3]) == 126

    def test_void_method_returns_none(self):
        assert MethodAccessors.invoke(MethodAccessorsTestClass(), "increase_calls") is None

    def test_args_tuple(self):
        assert MethodAccessors.invoke(MethodAccessorsTestClass(), "add", ("a", "b")) == "ab"

    def test_static_and_class_methods(self):
        obj = MethodAccessorsTestClass()
        assert MethodAccessors.invoke(obj, "twice", [4]) == 8
        assert MethodAccessors.invoke(obj, "kind") == "MethodAccessorsTestClass"

    def test_method_errors_propagate_unchanged(self):
        """Errors raised by the method body are not wrapped"""
        with pytest.raises(ValueError, match="boom"):
            MethodAccessors.invoke(MethodAccessorsTestClass(), "fail")

    def test_wrong_argument_count_raises_type_error(self):
        with pytest.raises(TypeError):
            MethodAccessors.invoke(MethodAccessorsTestClass(), "add", [1])

    def test_field_name_is_not_a_method(self):
        with pytest.raises(UnknownSlotErr):
            MethodAccessors.invoke(MethodAccessorsTestClass(), "method1_called")


class TestInvokeTyped:

    def test_containing_object_is_none(self):
        with pytest.raises(ArgErr):
            MethodAccessors.invoke_typed(None, "any_method", None, int)

    @pytest.mark.parametrize("name,err", [(None, ArgErr), ("invalid_method_name", UnknownSlotErr)])
    def test_method_does_not_exist(self, name, err):
        with pytest.raises(err):
            MethodAccessors.invoke_typed(MethodAccessorsTestClass(), name, None, int)

    def test_add(self):
        assert MethodAccessors.invoke_typed(MethodAccessorsTestClass(), "add", [2, 3], int) == 5

    def test_with_params(self):
        assert MethodAccessors.invoke_typed(MethodAccessorsTestClass(), "return42_times_factor", [3], int) == 126

    def test_invalid_return_type(self):
        """Should raise a CastErr naming the method and both types"""
        with pytest.raises(CastErr) as exc:
            MethodAccessors.invoke_typed(MethodAccessorsTestClass(), "add", [2, 3], str)
        err = exc.value
        assert err.name == "add"
        assert err.actual == "int"
        assert err.expected == "str"
        assert "add" in err.msg()
        assert "MethodAccessorsTestClass" in err.msg()
        assert "(got 'int')" in err.msg()
        assert isinstance(err.cause(), CastErr)
        assert err.__cause__ is err.cause()

    def test_bool_is_not_int(self):
        with pytest.raises(CastErr):
            MethodAccessors.invoke_typed(MethodAccessorsTestClass(), "is_even", [2], int)
        assert MethodAccessors.invoke_typed(MethodAccessorsTestClass(), "is_even", [2], bool) is True

    def test_none_needs_optional(self):
        obj = MethodAccessorsTestClass()
        with pytest.raises(CastErr):
            MethodAccessors.invoke_typed(obj, "maybe", [False], str)
        assert MethodAccessors.invoke_typed(obj, "maybe", [False], Optional[str]) is None
        assert MethodAccessors.invoke_typed(obj, "maybe", [True], Optional[str]) == "yes"

    def test_mismatch_is_logged(self, log_recs):
        with pytest.raises(CastErr):
            MethodAccessors.invoke_typed(MethodAccessorsTestClass(), "return42", None, float)
        assert any("return42" in rec.msg() for rec in log_recs)
