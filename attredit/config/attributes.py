"""Module: attredit.config.attributes

Author: Michael Economou
Date: 2026-02-02

Attribute flag settings: bit masks, filesystem classification and
preview formatting.
"""

# =====================================
# BIT MASKS
# =====================================

# Attribute flags are unsigned 32-bit values
FLAGS_MASK = 0xFFFFFFFF

# Linux: ext4 user-modifiable flags (EXT4_FL_USER_MODIFIABLE) plus FS_NOCOW_FL
LINUX_USER_MODIFIABLE_FLAGS = 0x604BC0FF | 0x00800000

# =====================================
# FILESYSTEM CLASSIFICATION
# =====================================

# Filesystem types on which attribute changes are refused up front
NON_LOCAL_FILESYSTEM_TYPES = frozenset(
    {
        "nfs",
        "nfs4",
        "cifs",
        "smb",
        "smbfs",
        "smb3",
        "afs",
        "ncpfs",
        "9p",
        "fuse.sshfs",
        "sshfs",
        "davfs",
        "fuse.davfs2",
        "ceph",
        "glusterfs",
        "fuse.glusterfs",
        "lustre",
        "autofs",
    }
)

# =====================================
# PREVIEW FORMATTING
# =====================================

# Shown in the preview string for attributes that are not set
PREVIEW_PLACEHOLDER = "-"

# Attribute codes hidden from the form by default (none)
DEFAULT_HIDDEN_ATTRIBUTE_CODES: list[str] = []
