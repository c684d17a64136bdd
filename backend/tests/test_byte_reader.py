from graymap.services.byte_reader import ByteReader, is_space


def test_read_line_strips_newline_and_keeps_last_line():
    reader = ByteReader(b"P5\nlast")

    assert reader.read_line() == "P5"
    assert reader.read_line() == "last"
    assert reader.read_line() is None
    assert reader.failed is True


def test_read_uint_skips_whitespace_and_stops_at_non_digit():
    reader = ByteReader(b"  12\t\n34abc")

    assert reader.read_uint() == 12
    assert reader.read_uint() == 34
    assert reader.peek() == ord("a")


def test_failed_read_is_sticky():
    reader = ByteReader(b"x 5")

    assert reader.read_uint() is None
    assert reader.failed is True
    # El 5 sigue ahí, pero el lector ya no extrae nada
    assert reader.read_uint() is None
    assert reader.read_byte() is None
    assert reader.read_bytes(2) == b""
    assert reader.peek() is None


def test_skip_while_counts_consumed_bytes():
    reader = ByteReader(b" \r\n\tA")

    assert reader.skip_whitespace() == 4
    assert reader.read_byte() == ord("A")
    assert reader.read_byte() is None
    assert reader.failed is True


def test_read_bytes_short_read_marks_failure():
    reader = ByteReader(b"\x01\x02\x03")

    assert reader.read_bytes(2) == b"\x01\x02"
    assert reader.failed is False
    assert reader.read_bytes(5) == b"\x03"
    assert reader.failed is True


def test_is_space_matches_c_locale():
    assert all(is_space(b) for b in b" \t\n\v\f\r")
    assert not is_space(ord("0"))
    assert not is_space(0)
