"""Convert a binary file into C source holding its bytes as an array."""

from __future__ import annotations

import sys
from pathlib import Path

BMAX = 4 << 25

HELP = (
    "convert ELF binary file to C file.\n"
    " -h            print this message\n"
    " -f <file>     tell the binary file  (input)\n"
    " -o <file>     tell the c file       (output)\n"
    " -p <prefix>   add prefix to the array name\n"
)


class _UsageError(Exception):
    pass


def array_stem(path: str) -> str:
    """Return the input path up to its first dot, used in the array names."""
    return path.split(".", 1)[0]


def to_c_source(data: bytes, prefix: str, stem: str) -> str:
    """Render the size variable and byte array for the data."""
    if len(data) >= BMAX:
        raise ValueError(f"binary of {len(data)} bytes exceeds the limit of {BMAX}")
    name = f"{prefix}_{stem}"
    body = ",".join(f"0x{byte:x}" for byte in data)
    closing = "}" if data else ""
    return (
        f"unsigned int binary_{name}_size = {len(data)};\n"
        f"unsigned char binary_{name}_start[] = {{{body}{closing};\n"
    )


def convert(bin_file: str, out_file: str, prefix: str = "") -> int:
    """Write the C source for bin_file into out_file; return the byte count."""
    data = Path(bin_file).read_bytes()
    source = to_c_source(data, prefix, array_stem(bin_file))
    with open(out_file, "w", encoding="ascii", newline="\n") as out:
        out.write(source)
    return len(data)


def _parse_args(args: list[str]) -> dict[str, str] | None:
    options: dict[str, str] = {}
    keys = {"-f": "bin_file", "-o": "out_file", "-p": "prefix"}
    remaining = iter(args)
    for arg in remaining:
        if not arg.startswith("-"):
            continue
        key = keys.get(arg)
        if key is None:
            return None
        value = next(remaining, None)
        if value is None:
            raise _UsageError(f"option {arg} needs a value")
        if key in options:
            raise _UsageError(f"option {arg} given more than once")
        options[key] = value
    return options


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = _parse_args(args)
        if options is None:
            sys.stdout.write(HELP)
            return 0
        if "bin_file" not in options:
            raise _UsageError("no input file given (-f)")
        if "out_file" not in options:
            raise _UsageError("no output file given (-o)")
    except _UsageError as err:
        print(f"bintoc: {err}", file=sys.stderr)
        return 1
    try:
        convert(options["bin_file"], options["out_file"], options.get("prefix", ""))
    except (OSError, ValueError) as err:
        print(f"bintoc: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())