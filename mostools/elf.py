"""Structures and parsers for 32-bit ELF files."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

EI_NIDENT = 16
ELF_MAGIC = b"\x7fELF"
_EI_DATA = 5
_ELFDATA2MSB = 2

_EHDR_LAYOUT = "16sHHIIIIIHHHHHH"
_SHDR_LAYOUT = "10I"
_PHDR_LAYOUT = "8I"


class ElfFormatError(ValueError):
    """Raised when data is not a well-formed 32-bit ELF image."""


class SegmentType(enum.IntEnum):
    """Legal values for a program header's type field."""

    NULL = 0
    LOAD = 1
    DYNAMIC = 2
    INTERP = 3
    NOTE = 4
    SHLIB = 5
    PHDR = 6
    LOOS = 0x60000000
    HIOS = 0x6FFFFFFF
    LOPROC = 0x70000000
    HIPROC = 0x7FFFFFFF


class SegmentFlag(enum.IntFlag):
    """Legal bits of a program header's flags field."""

    X = 1 << 0
    W = 1 << 1
    R = 1 << 2
    MASKPROC = 0xF0000000


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header found at the start of every ELF file."""

    ident: bytes
    type: int
    machine: int
    version: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int

    SIZE = struct.calcsize("<" + _EHDR_LAYOUT)


@dataclass(frozen=True)
class SectionHeader:
    """One entry of the section header table."""

    name: int
    type: int
    flags: int
    addr: int
    offset: int
    size: int
    link: int
    info: int
    addralign: int
    entsize: int

    SIZE = struct.calcsize("<" + _SHDR_LAYOUT)


@dataclass(frozen=True)
class ProgramHeader:
    """One entry of the program header table."""

    type: int
    offset: int
    vaddr: int
    paddr: int
    filesz: int
    memsz: int
    flags: int
    align: int

    SIZE = struct.calcsize("<" + _PHDR_LAYOUT)


def _byte_order(ident: bytes) -> str:
    return ">" if len(ident) > _EI_DATA and ident[_EI_DATA] == _ELFDATA2MSB else "<"


def is_elf_format(binary: bytes) -> bool:
    """Tell whether the data is large enough for a header and starts with the ELF magic."""
    return len(binary) >= ElfHeader.SIZE and bytes(binary[:4]) == ELF_MAGIC


def parse_header(binary: bytes) -> ElfHeader:
    """Decode the ELF file header."""
    if not is_elf_format(binary):
        raise ElfFormatError("not an elf file")
    order = _byte_order(bytes(binary[:EI_NIDENT]))
    fields = struct.unpack_from(order + _EHDR_LAYOUT, binary, 0)
    return ElfHeader(*fields)


def _parse_table(binary, offset, count, layout, size, cls, what):
    end = offset + count * size
    if count and end > len(binary):
        raise ElfFormatError(
            f"{what} table at offset {offset:#x} with {count} entries "
            f"runs past the end of the data ({len(binary)} bytes)"
        )
    return [
        cls(*struct.unpack_from(layout, binary, offset + index * size))
        for index in range(count)
    ]


def parse_section_headers(binary: bytes, header: ElfHeader | None = None) -> list[SectionHeader]:
    """Decode every entry of the section header table."""
    header = header or parse_header(binary)
    order = _byte_order(header.ident)
    return _parse_table(
        binary, header.shoff, header.shnum, order + _SHDR_LAYOUT,
        SectionHeader.SIZE, SectionHeader, "section header",
    )


def parse_program_headers(binary: bytes, header: ElfHeader | None = None) -> list[ProgramHeader]:
    """Decode every entry of the program header table."""
    header = header or parse_header(binary)
    order = _byte_order(header.ident)
    return _parse_table(
        binary, header.phoff, header.phnum, order + _PHDR_LAYOUT,
        ProgramHeader.SIZE, ProgramHeader, "program header",
    )