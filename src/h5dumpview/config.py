# src/h5dumpview/config.py
from h5dumpview.models import TokenClass

WARNING_LITERALS = ("HDF5",)

KEYWORD_LITERALS = (
    "ATTRIBUTE",
    "COMMENT",
    "DATA",
    "DATASET",
    "DATASPACE",
    "DATATYPE",
    "GROUP",
    "SOFTLINK",
)

# --- Datatypes ---
INTEGER_TYPES = tuple(
    f"H5T_STD_{sign}{bits}{order}"
    for sign in ("I", "U")
    for bits in (8, 16, 32, 64)
    for order in ("BE", "LE")
) + (
    "H5T_NATIVE_CHAR",
    "H5T_NATIVE_UCHAR",
    "H5T_NATIVE_SHORT",
    "H5T_NATIVE_USHORT",
    "H5T_NATIVE_INT",
    "H5T_NATIVE_UINT",
    "H5T_NATIVE_LONG",
    "H5T_NATIVE_ULONG",
    "H5T_NATIVE_LLONG",
    "H5T_NATIVE_ULLONG",
)

FLOAT_TYPES = (
    "H5T_IEEE_F32BE",
    "H5T_IEEE_F32LE",
    "H5T_IEEE_F64BE",
    "H5T_IEEE_F64LE",
    "H5T_NATIVE_FLOAT",
    "H5T_NATIVE_DOUBLE",
    "H5T_NATIVE_LDOUBLE",
)

BITFIELD_TYPES = tuple(
    f"H5T_STD_B{bits}{order}" for bits in (8, 16, 32, 64) for order in ("BE", "LE")
)

COMPOSITE_TYPES = (
    "H5T_ARRAY",
    "H5T_COMPOUND",
    "H5T_REFERENCE",
    "H5T_STRING",
    "H5T_VLEN",
)

TYPE_LITERALS = INTEGER_TYPES + FLOAT_TYPES + BITFIELD_TYPES + COMPOSITE_TYPES

CONSTANT_LITERALS = ("SCALAR", "SIMPLE")

VARIABLE_LITERALS = (
    "CSET",
    "CTYPE",
    "HARDLINK",
    "LINKTARGET",
    "STRPAD",
    "STRSIZE",
)

# Display priority follows tuple order.
DEFAULT_TOKEN_CLASSES = (
    TokenClass("warning", WARNING_LITERALS, style="warning"),
    TokenClass("keyword", KEYWORD_LITERALS, style="keyword"),
    TokenClass("type", TYPE_LITERALS, style="type"),
    TokenClass("constant", CONSTANT_LITERALS, style="constant"),
    TokenClass("variable", VARIABLE_LITERALS, style="variable"),
)

# Block headers listed in the structural outline
OUTLINE_KINDS = frozenset(KEYWORD_LITERALS + WARNING_LITERALS)

DEFAULT_FILE_PATTERNS = [
    "# Files opened in h5dump mode",
    "*.h5dump",
]
