"""List the address of every section of an ELF file."""

from __future__ import annotations

import sys
from pathlib import Path

from mostools.elf import ElfFormatError, parse_header, parse_section_headers


def section_addresses(binary: bytes) -> list[int]:
    """Return the address of each section, in table order."""
    header = parse_header(binary)
    return [section.addr for section in parse_section_headers(binary, header)]


def format_sections(binary: bytes) -> str:
    """Render one ``index:0xaddr`` line per section."""
    return "".join(
        f"{index}:0x{addr:x}\n" for index, addr in enumerate(section_addresses(binary))
    )


def main(argv: list[str] | None = None) -> int:
    """Read the ELF file named on the command line and print its section addresses."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: readelf <elf-file>", file=sys.stderr)
        return 1
    path = args[0]
    try:
        binary = Path(path).read_bytes()
    except OSError as err:
        print(f"{path}: {err.strerror or err}", file=sys.stderr)
        return 1
    try:
        output = format_sections(binary)
    except ElfFormatError as err:
        print(err, file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())