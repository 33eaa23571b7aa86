"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants and default values used by the network tools.

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

# Hardware address lengths, in bytes, that are accepted by the parser
HWADDR_LEN_EUI48 = 6
HWADDR_LEN_EUI64 = 8
HWADDR_LEN_INFINIBAND = 20
HWADDR_VALID_LENGTHS = (HWADDR_LEN_EUI48, HWADDR_LEN_EUI64, HWADDR_LEN_INFINIBAND)

# Wake-on-LAN
DEFAULT_BROADCAST_ADDRESS = "255.255.255.255"
DEFAULT_WOL_PORT = 9
MAGIC_PACKET_SYNC = b"\xff" * 6
MAGIC_PACKET_REPEAT = 16
MAGIC_PACKET_LENGTH = len(MAGIC_PACKET_SYNC) + (HWADDR_LEN_EUI48 * MAGIC_PACKET_REPEAT)

HEXDUMP_BYTES_PER_LINE = 16

REPORT_SEPARATOR = "-" * 36

DEFAULT_LAYOUT_PADDING = 4.0
