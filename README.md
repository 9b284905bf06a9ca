# mostools

Two small host-side tools used when building a teaching kernel, and the
32-bit ELF parsing they rest on. No third-party dependencies.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Listing section addresses

    mos-readelf path/to/program.elf

Prints one line per entry of the section header table, `index:0xaddress`,
with the address in lower-case hex, for example:

    0:0x0
    1:0x80010000

The command exits with status 1 and a message on standard error when:

- no file is named (a usage line is printed),
- the file cannot be read,
- the data is not ELF (`not an elf file`): shorter than an ELF32 file
  header or not starting with `\x7fELF`,
- the section header table runs past the end of the data.

From Python:

```python
from pathlib import Path

from mostools.readelf import format_sections, section_addresses

data = Path("program.elf").read_bytes()
for index, addr in enumerate(section_addresses(data)):
    print(index, hex(addr))
print(format_sections(data), end="")
```

`section_addresses(binary)` returns a list of the section addresses in
table order; `format_sections(binary)` returns the text the command prints.
Both raise `mostools.elf.ElfFormatError` on bad input.

## The ELF parser

`mostools.elf` decodes ELF32 files, little- or big-endian (chosen from the
data-encoding byte of the identification bytes):

- `is_elf_format(binary)` — `True` when the data holds at least a file
  header and starts with the ELF magic.
- `parse_header(binary)` — returns an `ElfHeader` record.
- `parse_section_headers(binary, header=None)` — returns a list of
  `SectionHeader` records.
- `parse_program_headers(binary, header=None)` — returns a list of
  `ProgramHeader` records.

Records are frozen dataclasses whose fields follow the ELF names without
their prefixes (`shoff`, `shnum`, `addr`, `vaddr`, `filesz`, ...). Each
class has a `SIZE` attribute giving its on-disk size. Malformed input raises
`ElfFormatError`, a subclass of `ValueError`. `SegmentType` (`LOAD`,
`DYNAMIC`, `NOTE`, ...) and `SegmentFlag` (`X`, `W`, `R`, `MASKPROC`) name
program-header type and flag values.

## Embedding a binary in a C file

    mos-bintoc -f hello.b -o hello.b.c -p test

writes

    unsigned int binary_test_hello_size = <n>;
    unsigned char binary_test_hello_start[] = {0x7f,0x45,...};

The array names are built from the prefix and the input path cut at its
first `.` (anywhere in the path, directories included). Options:

- `-f <file>` the binary to read (required)
- `-o <file>` the C file to write (required)
- `-p <prefix>` prefix for the array names (default empty)
- `-h` show help; any other option starting with `-` also shows help

Arguments that do not start with `-` are ignored. A missing `-f` or `-o`,
an option without a value, an option given twice, an unreadable input or an
input of 128 MiB (`4 << 25` bytes) or more is reported on standard error
with exit status 1.

From Python:

- `convert(bin_file, out_file, prefix="")` writes the file and returns the
  number of bytes converted.
- `to_c_source(data, prefix, stem)` returns the C text without touching the
  file system; it raises `ValueError` for data over the size limit.
- `array_stem(path)` returns the path up to its first dot.