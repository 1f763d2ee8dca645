from enum import Enum

from png_frame.header import ImageHeader


class Printer:
    ESC = "\x1B"
    CSI = f"{ESC}["
    ENUM_RGB = (80, 200, 255)

    @classmethod
    def paint(cls, s: str, r: int, g: int, b: int) -> str:
        return "".join(
            [
                f"{cls.CSI}38;2;{r};{g};{b}m",
                s,
                f"{cls.CSI}0m",
            ]
        )

    def __init__(self, colour: bool = True):
        self.colour = colour

    def format_value(self, value) -> str:
        if isinstance(value, Enum):
            s = f"{value.name} ({value.value})"
            return self.paint(s, *self.ENUM_RGB) if self.colour else s
        return str(value)

    def rows(self, header: ImageHeader) -> list[str]:
        names = header._fields[:7]
        pad = max(len(name) for name in names)
        rows = [f"{name:<{pad}} : {self.format_value(value)}" for name, value in zip(names, header)]

        if header.raw_chunk is not None:
            chunk = header.raw_chunk
            rows.append(
                f"{'chunk':<{pad}} : {chunk.chunk_type.name} length={chunk.length} "
                f"size={chunk.chunk_size} crc={bytes(chunk.crc).hex()}"
            )
        return rows

    def print(self, header: ImageHeader):
        for row in self.rows(header):
            print(row)
