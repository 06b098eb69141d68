from bson import ObjectId

from garden_site.utils import identifiers


def test_numeric_strings_and_ints_parse_to_int():
    assert identifiers.to_int_id(7) == 7
    assert identifiers.to_int_id("7") == 7
    assert identifiers.to_int_id(" 12 ") == 12


def test_non_numeric_ids_do_not_parse_to_int():
    assert identifiers.to_int_id("abc") is None
    assert identifiers.to_int_id("507f1f77bcf86cd799439011") is None
    assert identifiers.to_int_id(True) is None
    assert identifiers.to_int_id(None) is None
    assert identifiers.to_int_id(-1) is None


def test_object_id_from_hex_string():
    oid = ObjectId()
    assert identifiers.to_object_id(str(oid)) == oid
    assert identifiers.to_object_id(oid) is oid


def test_malformed_object_ids_return_none():
    assert identifiers.to_object_id("not-an-id") is None
    assert identifiers.to_object_id("123") is None
    assert identifiers.to_object_id(123) is None
    assert identifiers.to_object_id(None) is None


def test_object_id_round_trips_through_string():
    original = str(ObjectId())
    assert identifiers.object_id_to_str(identifiers.to_object_id(original)) == original
    assert identifiers.object_id_to_str(None) is None


def test_non_ascii_digits_do_not_parse_to_int():
    assert identifiers.is_numeric_id("²") is False
    assert identifiers.to_int_id("²") is None
    assert identifiers.to_int_id("1²") is None
    assert identifiers.to_int_id("١٢") is None
    assert identifiers.to_int_id("") is None
    assert identifiers.to_int_id("   ") is None
