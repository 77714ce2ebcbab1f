"""Method body length decoding (ECMA-335 partition II, 25.4).

A body starts with either a one-byte tiny header or a twelve-byte fat
header. Fat bodies may be followed by extra data sections holding exception
clauses; those are part of the body and are counted.
"""

from typing import Callable

from ..exceptions import MetadataResolutionError

# (rva, length) -> bytes
DataReader = Callable[[int, int], bytes]

TINY_FORMAT = 0x2
FAT_FORMAT = 0x3
FORMAT_MASK = 0x3
MORE_SECTS = 0x8

SECT_EH_TABLE = 0x1
SECT_FAT_FORMAT = 0x40
SECT_MORE_SECTS = 0x80

FAT_HEADER_SIZE = 12


def _align4(value: int) -> int:
    return (value + 3) & ~3


def _read(get_data: DataReader, rva: int, length: int) -> bytes:
    data = get_data(rva, length)
    if data is None or len(data) < length:
        raise MetadataResolutionError(
            "MethodBody", None, f"truncated body data at RVA {rva:#x}"
        )
    return data


def method_body_size(get_data: DataReader, rva: int) -> int:
    """Return the total byte length of the method body at ``rva``.

    Args:
        get_data: Callable returning ``length`` bytes starting at an RVA
        rva: Relative virtual address of the body header

    Raises:
        MetadataResolutionError: On an unknown header or section format,
            or when the image ends inside the body
    """
    first = _read(get_data, rva, 1)[0]
    header_format = first & FORMAT_MASK

    if header_format == TINY_FORMAT:
        return 1 + (first >> 2)

    if header_format != FAT_FORMAT:
        raise MetadataResolutionError(
            "MethodBody", None, f"invalid header format {first:#04x} at RVA {rva:#x}"
        )

    header = _read(get_data, rva, FAT_HEADER_SIZE)
    flags_and_size = int.from_bytes(header[0:2], "little")
    header_size = (flags_and_size >> 12) * 4
    code_size = int.from_bytes(header[4:8], "little")
    if header_size < FAT_HEADER_SIZE:
        raise MetadataResolutionError(
            "MethodBody", None, f"fat header too small ({header_size} bytes) at RVA {rva:#x}"
        )

    size = header_size + code_size
    if not flags_and_size & MORE_SECTS:
        return size

    more = True
    while more:
        size = _align4(size)
        kind = _read(get_data, rva + size, 1)[0]
        if not kind & SECT_EH_TABLE:
            raise MetadataResolutionError(
                "MethodBody", None, f"unsupported data section {kind:#04x} at RVA {rva:#x}"
            )
        if kind & SECT_FAT_FORMAT:
            section = _read(get_data, rva + size, 4)
            data_size = int.from_bytes(section[1:4], "little")
        else:
            section = _read(get_data, rva + size, 2)
            data_size = section[1]
        if data_size == 0:
            raise MetadataResolutionError(
                "MethodBody", None, f"empty data section at RVA {rva + size:#x}"
            )
        size += data_size
        more = bool(kind & SECT_MORE_SECTS)

    return size
