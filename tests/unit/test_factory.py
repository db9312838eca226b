"""Unit tests for the fetcher factory."""

from datetime import datetime, timedelta
from typing import Annotated, Optional, Union

import httpx
import pytest

from envbind.core.exceptions import UnsupportedTypeError
from envbind.core.factory import FETCHERS, TYPE_TAGS, FetcherFactory, unwrap_optional
from envbind.core.tags import Tag, parse_tag
from envbind.interfaces.fetcher import FieldAnnotation, TypeTag
from envbind.strategies.fetchers import (
    BooleanFetcher,
    DurationFetcher,
    FloatFetcher,
    IntegerFetcher,
    TextFetcher,
    TimestampFetcher,
    URLFetcher,
)


class TestUnwrapOptional:
    """Test suite for unwrap_optional."""

    @pytest.mark.parametrize(
        "hint, expected",
        [
            (int, (int, False)),
            (Optional[int], (int, True)),
            (int | None, (int, True)),
            (Union[None, str], (str, True)),
            (Annotated[float, Tag("X")], (float, False)),
            (Annotated[float | None, Tag("X")], (float, True)),
            (Optional[Annotated[bool, Tag("X")]], (bool, True)),
        ],
    )
    def test_unwrap(self, hint, expected):
        assert unwrap_optional(hint) == expected

    def test_multi_member_union_unchanged(self):
        hint = int | str | None
        assert unwrap_optional(hint) == (hint, False)


class TestFetcherFactory:
    """Test suite for FetcherFactory."""

    @pytest.fixture
    def factory(self):
        return FetcherFactory(environ={"PORT": "9090"})

    def test_registry_is_complete(self):
        """Test that every type tag has exactly one fetcher."""
        assert set(FETCHERS) == set(TypeTag)
        assert set(TYPE_TAGS.values()) == set(TypeTag)
        for tag, fetcher_cls in FETCHERS.items():
            assert fetcher_cls.type_tag is tag

    @pytest.mark.parametrize(
        "hint, fetcher_cls, name",
        [
            (str, TextFetcher, "str"),
            (int, IntegerFetcher, "int"),
            (bool, BooleanFetcher, "bool"),
            (float, FloatFetcher, "float"),
            (datetime, TimestampFetcher, "datetime"),
            (timedelta, DurationFetcher, "timedelta"),
            (httpx.URL, URLFetcher, "URL"),
        ],
    )
    def test_dispatch(self, factory, hint, fetcher_cls, name):
        """Test that each supported type selects its fetcher."""
        annotation = factory.annotate("field", hint, parse_tag("PORT"))

        assert annotation.base_type_name == name
        assert annotation.is_optional is False
        assert type(factory.get_fetcher(annotation)) is fetcher_cls

    def test_annotate_optional(self, factory):
        annotation = factory.annotate("port", int | None, parse_tag("PORT,default=8080"))

        assert annotation == FieldAnnotation(
            variable_name="PORT",
            has_default=True,
            default_value="8080",
            is_optional=True,
            base_type_name="int",
            field_name="port",
        )

    def test_fetcher_reads_factory_environ(self, factory):
        annotation = factory.annotate("port", int, parse_tag("PORT,default=8080"))
        assert factory.get_fetcher(annotation).fetch() == 9090

    def test_timestamp_format_passed(self, factory):
        annotation = factory.annotate("at", datetime, parse_tag("AT,format=%Y,default=1999"))
        fetcher = factory.get_fetcher(annotation)

        assert fetcher.format == "%Y"
        assert fetcher.fetch() == datetime(1999, 1, 1)

    @pytest.mark.parametrize("hint", [bytes, list, dict[str, str], int | str, complex, object])
    def test_unsupported(self, factory, hint):
        with pytest.raises(UnsupportedTypeError):
            factory.annotate("field", hint, parse_tag("PORT"))

    def test_subclass_not_matched(self, factory):
        """Test that lookup is by exact type."""

        class MyStr(str):
            pass

        with pytest.raises(UnsupportedTypeError) as exc_info:
            factory.annotate("field", MyStr, parse_tag("PORT"))
        assert exc_info.value.type_name == "MyStr"

    def test_unknown_base_type_name(self, factory):
        annotation = FieldAnnotation(variable_name="PORT", base_type_name="Dummy")
        with pytest.raises(UnsupportedTypeError):
            factory.get_fetcher(annotation)

    def test_unknown_base_type_names_the_field(self, factory):
        """Test that the error reports the field, not the variable."""
        annotation = FieldAnnotation(
            variable_name="PORT", base_type_name="Dummy", field_name="port"
        )

        with pytest.raises(UnsupportedTypeError) as exc_info:
            factory.get_fetcher(annotation)

        assert exc_info.value.field_name == "port"
        assert exc_info.value.type_name == "Dummy"
        assert "'port'" in str(exc_info.value)
