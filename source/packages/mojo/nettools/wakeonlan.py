"""
.. module:: wakeonlan
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains the functions for building and broadcasting wake-on-lan
               magic packets.

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

from typing import Optional, Tuple, Union

import logging
import socket

from mojo.nettools.constants import (
    DEFAULT_BROADCAST_ADDRESS,
    DEFAULT_WOL_PORT,
    HEXDUMP_BYTES_PER_LINE,
    HWADDR_LEN_EUI48,
    MAGIC_PACKET_LENGTH,
    MAGIC_PACKET_REPEAT,
    MAGIC_PACKET_SYNC
)
from mojo.nettools.exceptions import (
    InterfaceNotFoundError,
    InvalidDestinationError,
    InvalidMacError,
    SendError,
    SocketError
)
from mojo.nettools.hwaddr import format_hardware_address, parse_mac_address
from mojo.nettools.interfaces import get_non_loopback_ipv4_address

logger = logging.getLogger()


def build_magic_packet(mac: bytes) -> bytes:
    """
        Builds the wake-on-lan magic packet for a MAC address.

            [FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )

        :param mac: The 6 raw bytes of the MAC address of the machine to wake.

        :returns: The 102 byte magic packet.
    """
    if len(mac) != HWADDR_LEN_EUI48:
        errmsg = f"A magic packet requires a {HWADDR_LEN_EUI48} byte MAC address, found len={len(mac)}."
        raise InvalidMacError(errmsg)

    packet = MAGIC_PACKET_SYNC + bytes(mac) * MAGIC_PACKET_REPEAT

    return packet


def format_packet_hex(packet: bytes) -> str:
    """
        Formats a packet as lower case hex with 16 space separated bytes per line.  Every
        16th byte is followed by a newline.
    """
    text = ""

    for idx, bval in enumerate(packet):
        text += "%02x" % bval
        if (idx + 1) % HEXDUMP_BYTES_PER_LINE == 0:
            text += "\n"
        else:
            text += " "

    return text


def resolve_source_address(ifname: Optional[str], strict: bool = False) -> Optional[str]:
    """
        Resolves the local address the magic packet socket should be bound to.

        :param ifname: The name of the interface to send from or None to let the operating
                       system pick the source address.
        :param strict: When True, an interface without a usable address is an error instead of
                       falling back to the operating system default.

        :returns: The first non-loopback IPv4 address of the interface or None.

        :raises SocketError: When strict is set and no usable source address was found.
    """
    if ifname is None:
        return None

    source_addr = None
    try:
        source_addr = get_non_loopback_ipv4_address(ifname)
    except InterfaceNotFoundError as nfe:
        if strict:
            raise SocketError(str(nfe)) from nfe
        logger.warning("%s Using the default source address.", nfe)
        return None

    if source_addr is None:
        errmsg = "No non-loopback IPv4 address found for interface ifname={}.".format(ifname)
        if strict:
            raise SocketError(errmsg)
        logger.warning("%s Using the default source address.", errmsg)

    return source_addr


def resolve_destination(broadcast_addr: str, port: Union[str, int]) -> Tuple[str, int]:
    """
        Resolves the broadcast address and port to an IPv4 socket destination.

        :param broadcast_addr: The broadcast address or host name to send to.
        :param port: The UDP port as a number or a numeric string.

        :returns: The (address, port) tuple of the destination.

        :raises InvalidDestinationError: When the address or port cannot be resolved.
    """
    try:
        port_num = int(str(port).strip())
    except ValueError as verr:
        raise InvalidDestinationError(f"Invalid destination port={port!r}.") from verr

    if port_num < 0 or port_num > 65535:
        raise InvalidDestinationError(f"Invalid destination port={port!r}, out of range.")

    try:
        addr_info = socket.getaddrinfo(broadcast_addr, port_num, socket.AF_INET, socket.SOCK_DGRAM)
    except (socket.gaierror, UnicodeError) as rerr:
        errmsg = f"Unable to resolve destination {broadcast_addr}:{port}. {rerr}"
        raise InvalidDestinationError(errmsg) from rerr

    if len(addr_info) == 0:
        raise InvalidDestinationError(f"Unable to resolve destination {broadcast_addr}:{port}.")

    dest_addr, dest_port = addr_info[0][4][:2]

    return dest_addr, dest_port


def send_packet(packet: bytes, destination: Tuple[str, int], source_addr: Optional[str] = None) -> int:
    """
        Sends a single UDP datagram to the destination.  The socket is always closed before
        returning.

        :param packet: The datagram payload.
        :param destination: The (address, port) to send to.
        :param source_addr: The local address to bind to or None for the default.

        :returns: The number of bytes that were sent.

        :raises SocketError: When the socket could not be opened, bound or connected.
        :raises SendError: When the payload was not written in full.
    """
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as oserr:
        raise SocketError(f"Error creating udp socket. {oserr}") from oserr

    try:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            if source_addr is not None:
                sock.bind((source_addr, 0))
            sock.connect(destination)
        except OSError as oserr:
            raise SocketError(f"Error setting up udp socket to {destination[0]}:{destination[1]}. {oserr}") from oserr

        try:
            sent = sock.send(packet)
        except OSError as oserr:
            raise SendError(f"Magic packet error sending to {destination[0]}:{destination[1]}. {oserr}") from oserr

        if sent != len(packet):
            raise SendError(f"Magic packet short write, sent={sent} expected={len(packet)}.")
    finally:
        sock.close()

    return sent


def send_magic_packet(mac_addr: str, broadcast_addr: str = DEFAULT_BROADCAST_ADDRESS, port: Union[str, int] = DEFAULT_WOL_PORT,
    ifname: Optional[str] = None, strict_source: bool = False) -> str:
    """
        Broadcasts a wake-on-lan magic packet for the specified MAC address.

        :param mac_addr: The MAC address of the machine to wake, 'XX:XX:XX:XX:XX:XX'.
        :param broadcast_addr: The broadcast address to send the packet to.
        :param port: The UDP port to send the packet to.
        :param ifname: The local interface to send from, None lets the operating system choose.
        :param strict_source: Raise instead of falling back when 'ifname' has no usable IPv4 address.

        :returns: The hex dump of the packet that was sent.
    """
    mac = parse_mac_address(mac_addr)

    packet = build_magic_packet(mac)

    source_addr = resolve_source_address(ifname, strict=strict_source)

    destination = resolve_destination(broadcast_addr, port)
    logger.debug("Sending magic packet src=%s dest=%s:%d", source_addr, destination[0], destination[1])

    send_packet(packet, destination, source_addr=source_addr)

    packet_hex = format_packet_hex(packet)
    logger.info("Magic Packet sent to %s:%d for mac=%s (%d bytes)", destination[0], destination[1], format_hardware_address(mac), MAGIC_PACKET_LENGTH)

    return packet_hex
