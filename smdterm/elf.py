"""Loader for big-endian 32-bit 68000 ELF executables."""

import struct
from dataclasses import dataclass

ELF_MAGIC = b"\x7fELF"
ELFCLASS32 = 1
ELFDATA2MSB = 2
EV_CURRENT = 1
EM_68K = 4
ET_REL = 1
ET_EXEC = 2
PT_LOAD = 1

EI_CLASS = 4
EI_DATA = 5
EI_VERSION = 6

_EHDR = struct.Struct(">16sHHIIIIIHHHHHH")
_PHDR = struct.Struct(">8I")


class ElfError(Exception):
    """The file is not a loadable ELF image."""


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header."""

    ident: bytes
    file_type: int
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

    @classmethod
    def from_bytes(cls, data):
        """Parse the header at the start of ``data``."""
        if len(data) < _EHDR.size:
            raise ElfError("ELF header is truncated.")
        return cls(*_EHDR.unpack_from(data))


@dataclass(frozen=True)
class ProgramHeader:
    """One entry of the program header table."""

    segment_type: int
    offset: int
    vaddr: int
    paddr: int
    filesz: int
    memsz: int
    flags: int
    align: int

    @classmethod
    def from_bytes(cls, data):
        """Parse a program header at the start of ``data``."""
        if len(data) < _PHDR.size:
            raise ElfError("ELF program header is truncated.")
        return cls(*_PHDR.unpack_from(data))


def check_file(header):
    """Raise ElfError unless the header starts with the ELF magic."""
    for index, expected in enumerate(ELF_MAGIC):
        if header.ident[index] != expected:
            raise ElfError(f"ELF Header EI_MAG{index} incorrect.")


def check_supported(header):
    """Raise ElfError unless the file is a 32-bit big-endian 68000 object or executable."""
    try:
        check_file(header)
    except ElfError as err:
        raise ElfError("Invalid ELF File.") from err
    if header.ident[EI_CLASS] != ELFCLASS32:
        raise ElfError("Unsupported ELF File Class.")
    if header.ident[EI_DATA] != ELFDATA2MSB:
        raise ElfError("Unsupported ELF File byte order.")
    if header.machine != EM_68K:
        raise ElfError("Unsupported ELF File target.")
    if header.ident[EI_VERSION] != EV_CURRENT:
        raise ElfError("Unsupported ELF File version.")
    if header.file_type not in (ET_REL, ET_EXEC):
        raise ElfError("Unsupported ELF File type.")


def load_process(data):
    """Load the first program segment of an ELF image.

    Returns ``(entry, image)``. ``image`` holds ``memsz`` bytes read from the
    file offset equal to the segment's virtual address, zero-filled past the
    end of the file; it is empty when the first segment is not loadable.
    """
    data = bytes(data)
    header = ElfHeader.from_bytes(data)
    check_supported(header)
    if header.phoff == 0:
        raise ElfError("ELF has no program header table!")
    if header.phnum == 0:
        raise ElfError("ELF has no program headers.")

    segment = ProgramHeader.from_bytes(data[header.phoff:])
    if segment.segment_type != PT_LOAD:
        return header.entry, b""

    chunk = data[segment.vaddr:segment.vaddr + segment.memsz]
    return header.entry, chunk + bytes(segment.memsz - len(chunk))