"""Signature checks for executables, object code and binary encodings."""

from __future__ import annotations

_COFF_X64 = b"\x64\x86"
_COFF_I386 = b"\x4c\x01"
_COFF_IA64 = b"\x00\x02"

_CAFEBABE = b"\xca\xfe\xba\xbe"
_MACH_MAGICS = (
    b"\xfe\xed\xfa\xce",
    b"\xfe\xed\xfa\xcf",
    b"\xce\xfa\xed\xfe",
    b"\xcf\xfa\xed\xfe",
)
# Java class files carry their major version in bytes 6-7; the first
# release used 45. Universal Mach-O binaries reuse the same magic but
# hold a small architecture count there instead.
_JAVA_MIN_MAJOR = 45
_MACH_FAT_MAX_ARCHS = 20


def is_coff_x64(data: bytes) -> bool:
    """COFF object for x86-64."""
    return data.startswith(_COFF_X64)


def is_coff_i386(data: bytes) -> bool:
    """COFF object for i386."""
    return data.startswith(_COFF_I386)


def is_coff_ia64(data: bytes) -> bool:
    """COFF object for Itanium."""
    return data.startswith(_COFF_IA64)


def is_coff(data: bytes) -> bool:
    """COFF object for any supported machine."""
    return is_coff_x64(data) or is_coff_i386(data) or is_coff_ia64(data)


def is_der(data: bytes) -> bool:
    """DER-encoded certificate: a SEQUENCE with a two-byte length."""
    return len(data) > 2 and data.startswith(b"\x30\x82")


def is_dex(data: bytes) -> bool:
    """Dalvik executable."""
    return len(data) > 36 and data.startswith(b"dex\n") and data[36] == 0x70


def is_dey(data: bytes) -> bool:
    """Optimised Dalvik executable wrapping a dex header at offset 40."""
    return len(data) > 100 and data.startswith(b"dey\n") and is_dex(data[40:100])


def is_exe(data: bytes) -> bool:
    """DOS or Windows executable."""
    return data.startswith(b"MZ")


def is_dll(data: bytes) -> bool:
    """Windows dynamic library; it shares the executable signature."""
    return is_exe(data)


def is_elf(data: bytes) -> bool:
    """ELF binary, long enough to hold a 32-bit header."""
    return len(data) > 52 and data.startswith(b"\x7fELF")


def is_java(data: bytes) -> bool:
    """Java class file."""
    return len(data) > 8 and data.startswith(_CAFEBABE) and data[7] >= _JAVA_MIN_MAJOR


def is_llvm(data: bytes) -> bool:
    """LLVM bitcode."""
    return data.startswith(b"BC")


def is_mach(data: bytes) -> bool:
    """Mach-O binary, thin in either byte order or universal."""
    if len(data) <= 4:
        return False
    if data[:4] in _MACH_MAGICS:
        return True
    return len(data) > 7 and data.startswith(_CAFEBABE) and data[7] < _MACH_FAT_MAX_ARCHS


def is_nes(data: bytes) -> bool:
    """iNES cartridge image."""
    return data.startswith(b"NES\x1a")


def is_pem(data: bytes) -> bool:
    """PEM-armoured data."""
    return len(data) > 11 and data.startswith(b"-----BEGIN ")


def is_wasm(data: bytes) -> bool:
    """WebAssembly module, binary format version 1."""
    return data.startswith(b"\x00asm\x01\x00\x00\x00")