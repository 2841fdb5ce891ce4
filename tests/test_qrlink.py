from agvnav.qrlink import QrData, QrLink, parse_qr_line


def test_parse_full_line():
    assert parse_qr_line("3,320,240,90") == QrData(3, 320, 240, 90.0)


def test_parse_signs_and_whitespace():
    assert parse_qr_line("-5, 12 ,  7,-45") == QrData(-5, 12, 7, -45.0)


def test_angle_is_read_as_integer():
    assert parse_qr_line("1,2,3,45.9").angle == 45.0


def test_line_without_commas_repeats_value():
    assert parse_qr_line("7") == QrData(7, 7, 7, 7.0)


def test_garbage_reads_as_zero():
    assert parse_qr_line("abc") == QrData(0, 0, 0, 0.0)


def test_link_reads_lines_in_order():
    link = QrLink()
    assert link.available() is False
    link.feed(b"1,10,20,30\n2,11,21,31\n")
    assert link.available() is True
    assert link.read() == QrData(1, 10, 20, 30.0)
    assert link.read() == QrData(2, 11, 21, 31.0)
    assert link.available() is False


def test_link_accepts_text_and_crlf():
    link = QrLink()
    link.feed("4,5,6,7\r\n")
    assert link.read() == QrData(4, 5, 6, 7.0)
    assert link.available() is False


def test_read_without_newline_consumes_rest():
    link = QrLink()
    link.feed("8,9,")
    link.feed("10,11")
    assert link.read() == QrData(8, 9, 10, 11.0)
    assert link.available() is False


def test_read_on_empty_link_gives_zeros():
    assert QrLink().read() == QrData(0, 0, 0, 0.0)