from campusmart.serialization import decode_photos, encode_photos


def test_roundtrip_keeps_order_and_entries():
    xs = ["content://a/1", "https://cdn.example.com/x.jpg", "file:///tmp/ü.png", "c"]
    assert decode_photos(encode_photos(xs)) == xs


def test_empty_list_roundtrip():
    assert encode_photos([]) == "[]"
    assert decode_photos("[]") == []


def test_encoding_is_compact_json_array():
    assert encode_photos(["a", "b"]) == '["a","b"]'


def test_malformed_text_decodes_to_empty():
    assert decode_photos("not valid") == []
    assert decode_photos("") == []
    assert decode_photos(None) == []
    assert decode_photos('["unterminated"') == []


def test_non_array_json_decodes_to_empty():
    assert decode_photos('{"a": 1}') == []
    assert decode_photos('"just a string"') == []


def test_blank_entries_are_filtered():
    assert decode_photos('["a", "", "   ", null, "b"]') == ["a", "b"]


def test_non_string_items_keep_json_spelling():
    assert decode_photos('[true, 1.0, 7, "a"]') == ["true", "1.0", "7", "a"]
