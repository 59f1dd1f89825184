"""Unit tests for selectstar.sql.literals."""

from datetime import date, datetime, time
from decimal import Decimal

from selectstar.sql import identifier, list_
from selectstar.sql.literals import is_literal


class TestIsLiteral:
    def test_scalars(self):
        for value in ("x", "", 0, -1, 1.5, Decimal("2.50"), True, False, None):
            assert is_literal(value)

    def test_dates(self):
        for value in (date(2020, 1, 1), datetime(2020, 1, 1, 12), time(12, 30)):
            assert is_literal(value)

    def test_binary(self):
        for value in (b"\x00", bytearray(b"ab"), memoryview(b"ab")):
            assert is_literal(value)

    def test_containers_rejected(self):
        for value in ([1, 2], (1,), {"a": 1}, {1}):
            assert not is_literal(value)

    def test_functions_and_objects_rejected(self):
        assert not is_literal(lambda: 1)
        assert not is_literal(object())

    def test_boxes_rejected(self):
        assert not is_literal(identifier("t"))
        assert not is_literal(list_([1]))
