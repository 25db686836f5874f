from collections.abc import Mapping
from numbers import Integral

import numpy as np

from Workspace_Sync.core.errors import UnsupportedDataFormatError


def _from_byte_values(values, shape: str) -> bytes:
    try:
        return bytes(values)
    except (TypeError, ValueError) as err:
        raise UnsupportedDataFormatError(
            f"Unsupported data format for buffer: {shape} does not hold byte values ({err})"
        ) from err


def normalize_buffer(data) -> bytes:
    """
    Coerce file content into bytes.

    Accepts:
    - bytes (returned as-is)
    - bytearray / memoryview
    - numpy integer arrays with values in 0..255
    - list / tuple of ints in 0..255
    - mappings whose values, in iteration order, are ints in 0..255

    Anything else raises UnsupportedDataFormatError.
    """
    if isinstance(data, bytes):
        return data

    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)

    if isinstance(data, np.ndarray):
        if not np.issubdtype(data.dtype, np.integer):
            raise UnsupportedDataFormatError(
                f"Unsupported data format for buffer: array of dtype {data.dtype}"
            )
        flat = data.ravel()
        if flat.size and (flat.min() < 0 or flat.max() > 255):
            raise UnsupportedDataFormatError(
                "Unsupported data format for buffer: array values outside 0..255"
            )
        return flat.astype(np.uint8).tobytes()

    if isinstance(data, (list, tuple)):
        values = data
        shape = type(data).__name__
    elif isinstance(data, Mapping):
        values = list(data.values())
        shape = "mapping"
    else:
        raise UnsupportedDataFormatError(
            f"Unsupported data format for buffer: {type(data).__name__}"
        )

    # bool is an Integral, but True/False are not byte values
    if any(isinstance(v, bool) or not isinstance(v, Integral) for v in values):
        raise UnsupportedDataFormatError(
            f"Unsupported data format for buffer: {shape} contains non-integer values"
        )

    return _from_byte_values(values, shape)
