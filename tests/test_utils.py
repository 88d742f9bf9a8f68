#
# Varinspect - Utils Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from varinspect.utils import class_name, constructor_name, is_index_name


# Tests ----------------------------------------------------------------------------------------------------------------

class TestClassName:
    @pytest.mark.parametrize(
        "obj, fully_qualified_builtins, expected",
        [
            pytest.param(int, False, "int", id="builtin-class-no-fq"),
            pytest.param(10, False, "int", id="builtin-instance-no-fq"),
            pytest.param(int, True, "builtins.int", id="builtin-class-fq"),
            pytest.param("abc", True, "builtins.str", id="builtin-str-fq"),
        ],
    )
    def test_builtin_names(self, obj, fully_qualified_builtins, expected):
        assert class_name(obj, fully_qualified_builtins=fully_qualified_builtins) == expected

    @pytest.mark.parametrize("as_class", [True, False], ids=["class", "instance"])
    def test_user_class_fq(self, as_class):
        class Custom:
            pass

        target = Custom if as_class else Custom()
        assert class_name(target, fully_qualified=True) == f"{Custom.__module__}.Custom"
        assert class_name(target) == "Custom"


class TestConstructorName:
    @pytest.mark.parametrize(
        "obj, expected",
        [
            pytest.param({}, "dict", id="dict"),
            pytest.param([], "list", id="list"),
            pytest.param(dict, "type", id="class"),
            pytest.param(len, "builtin_function_or_method", id="builtin"),
        ],
    )
    def test_named(self, obj, expected):
        assert constructor_name(obj) == expected

    def test_overridden_class_not_run(self):
        """A __class__ property, as on proxy objects, is ignored."""
        class Proxy:
            @property
            def __class__(self):
                raise AssertionError("__class__ must not be read")

        assert constructor_name(Proxy()) == "Proxy"
        assert class_name(Proxy()) == "Proxy"

    def test_anonymous(self):
        Nameless = type("", (), {})
        assert constructor_name(Nameless()) == "(anonymous)"


class TestIsIndexName:
    @pytest.mark.parametrize(
        "name, expected",
        [
            pytest.param("0", True, id="zero"),
            pytest.param("42", True, id="number"),
            pytest.param("007", False, id="leading-zero"),
            pytest.param("-1", False, id="negative"),
            pytest.param("1.0", False, id="float"),
            pytest.param("", False, id="empty"),
            pytest.param(" 1", False, id="space"),
            pytest.param("１", False, id="fullwidth"),
            pytest.param(1, False, id="not-str"),
        ],
    )
    def test_is_index_name(self, name, expected):
        assert is_index_name(name) is expected
