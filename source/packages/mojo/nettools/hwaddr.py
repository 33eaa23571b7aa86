"""
.. module:: hwaddr
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for parsing and formatting hardware (MAC) addresses.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from mojo.nettools.constants import HWADDR_LEN_EUI48, HWADDR_VALID_LENGTHS
from mojo.nettools.exceptions import InvalidMacError

HEX_DIGITS = "0123456789abcdefABCDEF"


def _decode_hex_group(group: str, hwaddr: str) -> bytes:
    if len(group) == 0 or any(ch not in HEX_DIGITS for ch in group):
        errmsg = f"Invalid hardware address, non-hex group found. hwaddr={hwaddr!r} group={group!r}"
        raise InvalidMacError(errmsg)
    return bytes.fromhex(group)


def parse_hardware_address(hwaddr: str) -> bytes:
    """
        Parses a hardware address string into its raw bytes.  The following forms are
        accepted, for 6, 8 or 20 byte addresses:

            00:00:5e:00:53:01
            00-00-5e-00-53-01
            0000.5e00.5301

        :param hwaddr: The hardware address string to parse.

        :returns: The raw bytes of the hardware address.

        :raises InvalidMacError: When the string is not a hardware address.
    """
    if not isinstance(hwaddr, str) or len(hwaddr) < 14:
        raise InvalidMacError(f"Invalid hardware address. hwaddr={hwaddr!r}")

    hwaddr_len = len(hwaddr)
    group_size = None
    separator = None

    if hwaddr[2] in (":", "-"):
        group_size = 2
        separator = hwaddr[2]
        if (hwaddr_len + 1) % 3 != 0:
            raise InvalidMacError(f"Invalid hardware address, bad length. hwaddr={hwaddr!r}")
    elif hwaddr[4] == ".":
        group_size = 4
        separator = "."
        if (hwaddr_len + 1) % 5 != 0:
            raise InvalidMacError(f"Invalid hardware address, bad length. hwaddr={hwaddr!r}")
    else:
        raise InvalidMacError(f"Invalid hardware address, unknown separator. hwaddr={hwaddr!r}")

    groups = hwaddr.split(separator)
    for group in groups:
        if len(group) != group_size:
            errmsg = f"Invalid hardware address, mixed separators or bad group. hwaddr={hwaddr!r}"
            raise InvalidMacError(errmsg)

    raw = b"".join([_decode_hex_group(group, hwaddr) for group in groups])
    if len(raw) not in HWADDR_VALID_LENGTHS:
        raise InvalidMacError(f"Invalid hardware address, unsupported length={len(raw)}. hwaddr={hwaddr!r}")

    return raw


def parse_mac_address(mac_addr: str) -> bytes:
    """
        Parses a MAC address string and ensures it resolves to exactly 6 bytes.

        :param mac_addr: The MAC address string to parse.

        :returns: The 6 raw bytes of the MAC address.

        :raises InvalidMacError: When the string is not parsable or is not a 6 byte address.
    """
    raw = parse_hardware_address(mac_addr)
    if len(raw) != HWADDR_LEN_EUI48:
        errmsg = f"Invalid MAC address, expected {HWADDR_LEN_EUI48} bytes but found {len(raw)}. mac={mac_addr!r}"
        raise InvalidMacError(errmsg)
    return raw


def format_hardware_address(raw: bytes) -> str:
    """
        Formats raw hardware address bytes in the lower case colon delimited form.
    """
    return ":".join(["%02x" % b for b in raw])

