"""
Vectorized classification of address tables.

Applies the same ordered decision list as classify() to whole numpy
arrays. Entries that classify() would reject (out of range, floats, bools)
get code -1.
"""

from __future__ import annotations
from typing import Dict, Iterable, Union

import numpy as np

from .classifier import AddressType, classify
from .constants import (
    ADDRESS_MASK,
    ALL_NODES_ADDRESS,
    END_UNICAST_ADDRESS,
    GROUP_HIGH_BYTE_MIN,
    RFU_HIGH_BYTE,
    RFU_LOW_BYTE_MAX,
    START_UNICAST_ADDRESS,
    UNASSIGNED_ADDRESS,
)

INVALID_CODE = -1


def _as_array(addresses: Union[np.ndarray, Iterable[int]]) -> np.ndarray:
    """Convert input to an array, keeping ints numpy cannot hold as objects."""
    if isinstance(addresses, np.ndarray):
        return addresses
    if not isinstance(addresses, (list, tuple)):
        addresses = list(addresses)
    try:
        values = np.asarray(addresses)
    except OverflowError:
        return np.array(addresses, dtype=object)
    if not _is_integer_dtype(values.dtype):
        # float promotion of mixed huge/negative ints would lose values
        return np.array(addresses, dtype=object)
    return values


def _is_integer_dtype(dtype: np.dtype) -> bool:
    return np.issubdtype(dtype, np.integer) and dtype != np.bool_


def _classify_integers(values: np.ndarray) -> np.ndarray:
    if values.dtype.itemsize < 8:
        values = values.astype(np.int64)
    in_range = (values >= 0) & (values <= ADDRESS_MASK)
    # Out-of-range entries are zeroed so the int64 cast cannot wrap them
    values = np.where(in_range, values, 0).astype(np.int64)
    high = (values >> 8) & 0xFF
    low = values & 0xFF

    unassigned = values == UNASSIGNED_ADDRESS
    unicast = (values >= START_UNICAST_ADDRESS) & (values <= END_UNICAST_ADDRESS)
    rfu = (high == RFU_HIGH_BYTE) & (low <= RFU_LOW_BYTE_MAX)
    group = (high >= GROUP_HIGH_BYTE_MIN) & ~rfu & (values != ALL_NODES_ADDRESS)

    # np.select takes the first true condition, same order as classify()
    codes = np.select(
        [~in_range, unassigned, unicast, group],
        [
            INVALID_CODE,
            AddressType.UNASSIGNED.code,
            AddressType.UNICAST.code,
            AddressType.GROUP.code,
        ],
        default=AddressType.VIRTUAL.code,
    )
    return codes.astype(np.int8)


def _classify_elements(values: np.ndarray) -> np.ndarray:
    codes = np.empty(values.shape, dtype=np.int8)
    for index, value in np.ndenumerate(values):
        address_type = classify(value)
        codes[index] = INVALID_CODE if address_type is None else address_type.code
    return codes


def classify_array(addresses: Union[np.ndarray, Iterable[int]]) -> np.ndarray:
    """
    Classify an array of integer addresses.

    Args:
        addresses: Integer addresses (any shape).

    Returns:
        int8 array of the same shape holding AddressType codes, or -1
        where classify() would return None.
    """
    values = _as_array(addresses)
    if _is_integer_dtype(values.dtype):
        return _classify_integers(values)
    if values.dtype == object:
        return _classify_elements(values)
    # float, bool, string arrays: nothing in them is an address
    return np.full(values.shape, INVALID_CODE, dtype=np.int8)


def count_by_type(addresses: Union[np.ndarray, Iterable[int]]) -> Dict[AddressType, int]:
    """Count addresses per AddressType, ignoring out-of-range entries."""
    codes = classify_array(addresses)
    return {
        address_type: int(np.count_nonzero(codes == address_type.code))
        for address_type in AddressType
    }
