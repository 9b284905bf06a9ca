"""Host-side build helpers: ELF32 parsing, section listing and binary-to-C conversion."""

__version__ = "0.1.0"
__all__ = ["elf", "readelf", "bintoc"]