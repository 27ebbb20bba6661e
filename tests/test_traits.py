import pytest

from crablings.lessons.traits import (
    Licensed,
    OtherSoftware,
    SomeSoftware,
    Wrapper,
    append_bar,
    compare_license_types,
)


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"
    assert foo == []


def test_append_bar_list_leaves_input_alone():
    original = ["Foo"]
    append_bar(original)
    assert original == ["Foo"]


def test_append_bar_rejects_other_types():
    with pytest.raises(TypeError):
        append_bar(3)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(), OtherSoftware())


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware(), SomeSoftware())


def test_compare_license_information_differs():
    class Custom(Licensed):
        def licensing_info(self) -> str:
            return "other terms"

    assert compare_license_types(SomeSoftware(), Custom()) is False