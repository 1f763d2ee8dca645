from png_frame.chunks import read_chunk
from png_frame.header import decode_header
from png_frame.printer import Printer


def test_paint():
    assert Printer.paint("x", 1, 2, 3) == "\x1B[38;2;1;2;3mx\x1B[0m"


def test_rows_without_colour(make_chunk, make_ihdr_payload):
    # Arrange
    chunk = read_chunk(make_chunk(b"IHDR", make_ihdr_payload(color_type=6), b"\x01\x02\x03\x04"))
    header = decode_header(chunk)

    # Act
    rows = Printer(colour=False).rows(header)

    # Assert
    assert rows[0] == "width              : 16"
    assert rows[3] == "color_type         : TRUECOLOR_WITH_ALPHA (6)"
    assert rows[-1] == "chunk              : IHDR length=13 size=25 crc=01020304"


def test_print_colours_enums(capsys, make_chunk, make_ihdr_payload):
    header = decode_header(read_chunk(make_chunk(b"IHDR", make_ihdr_payload(interlace=1))))

    Printer().print(header)

    out = capsys.readouterr().out
    assert Printer.paint("ADAM7 (1)", *Printer.ENUM_RGB) in out
    assert "\x1B[" not in out.splitlines()[0]
