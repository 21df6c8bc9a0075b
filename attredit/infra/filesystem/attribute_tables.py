"""Module: attribute_tables.py

Author: Michael Economou
Date: 2026-02-02

Candidate attribute tables per platform family.

These are descriptions, not the catalog: each provider filters its table
by what the running platform reports (masks, available constants, effective
user) before handing definitions to the AttributeCatalog.
"""

# Linux inode flags (linux/fs.h, ext2_fs.h): (bit, code, label), display order
LINUX_ATTRIBUTE_TABLE: list[tuple[int, str, str]] = [
    (0x00000001, "s", "Secure deletion"),
    (0x00000002, "u", "Undelete"),
    (0x00000008, "S", "Synchronous updates"),
    (0x00010000, "D", "Synchronous directory updates"),
    (0x00000010, "i", "Immutable"),
    (0x00000020, "a", "Append only"),
    (0x00000040, "d", "No dump"),
    (0x00000080, "A", "No update atime"),
    (0x00000004, "c", "Compress"),
    (0x00000800, "E", "Encrypted inode"),
    (0x00004000, "j", "Journaled data"),
    (0x00001000, "I", "Indexed directory"),
    (0x00008000, "t", "No tail merging"),
    (0x00020000, "T", "Top of directory hierarchies"),
    (0x00080000, "e", "Inode uses extents"),
    (0x00800000, "C", "No COW"),
    (0x40000000, "F", "Casefolded file"),
    (0x10000000, "N", "Inode has inline data"),
    (0x20000000, "P", "Project hierarchy"),
    (0x00100000, "V", "Verity protected inode"),
]

# BSD/macOS file flags: (stat constant name, code, label, superuser only)
BSD_ATTRIBUTE_TABLE: list[tuple[str, str, str, bool]] = [
    ("UF_NODUMP", "d", "No dump", False),
    ("UF_IMMUTABLE", "i", "User immutable", False),
    ("UF_APPEND", "a", "User append only", False),
    ("UF_NOUNLINK", "u", "User no unlink", False),
    ("UF_OPAQUE", "o", "Opaque directory", False),
    ("UF_HIDDEN", "h", "Hidden", False),
    ("UF_COMPRESSED", "c", "Compressed", False),
    ("SF_ARCHIVED", "R", "Archived", True),
    ("SF_IMMUTABLE", "I", "System immutable", True),
    ("SF_APPEND", "A", "System append only", True),
    ("SF_NOUNLINK", "U", "System no unlink", True),
    ("SF_SNAPSHOT", "S", "Snapshot", True),
]

# Set by the system, shown but never offered for editing
BSD_READ_ONLY_FLAGS = frozenset({"UF_COMPRESSED", "SF_SNAPSHOT"})
