"""
Unit tests for the decoder (property list tree to dynamic values).
"""

import plistlib
import unittest
from datetime import datetime, timedelta, timezone

from plistbridge.conversion import decode
from plistbridge.errors import IntegerRangeError
from plistbridge.models import (
    I64_MAX,
    I64_MIN,
    BinaryValue,
    BoolValue,
    DateValue,
    FloatValue,
    IntValue,
    ListValue,
    NothingValue,
    RecordValue,
    StringValue,
)


class TestDecodeScalars(unittest.TestCase):
    """Test decoding of leaf values."""

    def test_decode_string(self):
        self.assertEqual(decode("hello"), StringValue(val="hello"))

    def test_decode_boolean(self):
        result = decode(True)
        self.assertIsInstance(result, BoolValue)
        self.assertEqual(result, BoolValue(val=True))

    def test_decode_real(self):
        self.assertEqual(decode(3.14), FloatValue(val=3.14))

    def test_decode_integer(self):
        self.assertEqual(decode(42), IntValue(val=42))

    def test_decode_integer_bounds(self):
        """Both ends of the signed 64-bit range decode."""
        self.assertEqual(decode(I64_MAX), IntValue(val=I64_MAX))
        self.assertEqual(decode(I64_MIN), IntValue(val=I64_MIN))

    def test_decode_uid_as_float(self):
        result = decode(plistlib.UID(12345678))
        self.assertEqual(result, FloatValue(val=12345678.0))

    def test_decode_data(self):
        data = b"\x00\x01\xfe\xff"
        self.assertEqual(decode(data), BinaryValue(val=data))

    def test_decode_bytearray(self):
        self.assertEqual(decode(bytearray(b"ab")), BinaryValue(val=b"ab"))

    def test_decode_epoch_date(self):
        result = decode(datetime(1970, 1, 1))

        self.assertIsInstance(result, DateValue)
        self.assertEqual(result.val.year, 1970)
        self.assertEqual(result.val.month, 1)
        self.assertEqual(result.val.day, 1)
        self.assertEqual(result.val.utcoffset(), timedelta(0))

    def test_decode_date_keeps_microseconds(self):
        result = decode(datetime(2024, 5, 22, 10, 30, 0, 123456))
        self.assertEqual(result.val, datetime(2024, 5, 22, 10, 30, 0, 123456, tzinfo=timezone.utc))

    def test_decode_unknown_value_as_nothing(self):
        self.assertEqual(decode(None), NothingValue())
        self.assertEqual(decode(object()), NothingValue())


class TestDecodeIntegerRange(unittest.TestCase):
    """Test the signed 64-bit narrowing of integers."""

    def test_unsigned_max_fails(self):
        with self.assertRaises(IntegerRangeError) as ctx:
            decode(2 ** 64 - 1)

        self.assertEqual(ctx.exception.value, 2 ** 64 - 1)
        self.assertIn("18446744073709551615", str(ctx.exception))

    def test_just_above_signed_max_fails(self):
        with self.assertRaises(IntegerRangeError):
            decode(I64_MAX + 1)

    def test_just_below_signed_min_fails(self):
        with self.assertRaises(IntegerRangeError):
            decode(I64_MIN - 1)

    def test_nested_failure_reports_path(self):
        with self.assertRaises(IntegerRangeError) as ctx:
            decode({"ok": 1, "items": ["a", 2 ** 63]})

        self.assertEqual(ctx.exception.path, ("items", 1))
        self.assertIn("$.items[1]", str(ctx.exception))


class TestDecodeContainers(unittest.TestCase):
    """Test decoding of arrays and dictionaries."""

    def test_decode_array(self):
        result = decode(["a", "b"])
        self.assertEqual(result, ListValue(vals=[StringValue(val="a"), StringValue(val="b")]))

    def test_decode_empty_array(self):
        self.assertEqual(decode([]), ListValue(vals=[]))

    def test_decode_dict(self):
        result = decode({"a": "c", "b": "d"})

        self.assertEqual(result, RecordValue(val={
            "a": StringValue(val="c"),
            "b": StringValue(val="d"),
        }))
        self.assertEqual(list(result.val.keys()), ["a", "b"])

    def test_decode_empty_dict_is_empty_record(self):
        result = decode({})

        self.assertIsInstance(result, RecordValue)
        self.assertEqual(len(result.val), 0)

    def test_decode_preserves_key_order(self):
        keys = ["zeta", "alpha", "mid", "beta"]
        result = decode({key: index for index, key in enumerate(keys)})

        self.assertEqual(list(result.val.keys()), keys)
        self.assertEqual(result.val["mid"], IntValue(val=2))

    def test_decode_heterogeneous_nested(self):
        result = decode({"list": [1, 2.5, True, {"inner": b"x"}]})

        items = result.val["list"].vals
        self.assertEqual(len(items), 4)
        self.assertEqual(items[0], IntValue(val=1))
        self.assertEqual(items[1], FloatValue(val=2.5))
        self.assertEqual(items[2], BoolValue(val=True))
        self.assertEqual(items[3], RecordValue(val={"inner": BinaryValue(val=b"x")}))


if __name__ == "__main__":
    unittest.main()
