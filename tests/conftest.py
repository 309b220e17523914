# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add src to sys.path so tests run without an editable install
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


SAMPLE_DUMP = '''HDF5 "sample.h5" {
GROUP "/" {
   ATTRIBUTE "title" {
      DATATYPE  H5T_STRING {
         STRSIZE 5;
         STRPAD H5T_STR_NULLTERM;
         CSET H5T_CSET_ASCII;
         CTYPE H5T_C_S1;
      }
      DATASPACE  SCALAR
      DATA {
      (0): "hello"
      }
   }
   GROUP "grid" {
      DATASET "temperature" {
         DATATYPE  H5T_IEEE_F64LE
         DATASPACE  SIMPLE { ( 3 ) / ( 3 ) }
         DATA {
         (0): 1.5, 2.5, 3.5
         }
      }
      SOFTLINK "latest" {
         LINKTARGET "/grid/temperature"
      }
   }
}
}
'''


@pytest.fixture
def sample_dump():
    """A small but realistic h5dump listing."""
    return SAMPLE_DUMP
