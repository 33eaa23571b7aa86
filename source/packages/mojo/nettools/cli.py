"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Command line front end for the interface, nslookup and wake-on-lan tools.

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

from typing import List, Optional

import argparse
import logging
import sys

from mojo.nettools.constants import DEFAULT_BROADCAST_ADDRESS, DEFAULT_WOL_PORT
from mojo.nettools.exceptions import NetToolsError
from mojo.nettools.interfaces import format_interface_report, get_interface_details, list_interfaces
from mojo.nettools.resolution import format_lookup_report
from mojo.nettools.wakeonlan import send_magic_packet

logger = logging.getLogger()

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def command_interfaces(args: argparse.Namespace) -> str:
    return "".join(["{}\n".format(ifname) for ifname in list_interfaces()])


def command_show(args: argparse.Namespace) -> str:
    details = get_interface_details(args.ifname)
    return format_interface_report(details)


def command_lookup(args: argparse.Namespace) -> str:
    return format_lookup_report(args.hostname)


def command_wake(args: argparse.Namespace) -> str:
    packet_hex = send_magic_packet(args.mac, broadcast_addr=args.broadcast, port=args.port,
        ifname=args.interface, strict_source=args.strict_source)
    return "Magic Packet sent : \n" + packet_hex


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mojo-nettools",
        description="Network interface, nslookup and wake-on-lan tools.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    iface_parser = subparsers.add_parser("interfaces", help="List the interfaces with an address and a MAC.")
    iface_parser.set_defaults(handler=command_interfaces)

    show_parser = subparsers.add_parser("show", help="Show the MAC and addresses of an interface.")
    show_parser.add_argument("ifname", help="The interface name.")
    show_parser.set_defaults(handler=command_show)

    lookup_parser = subparsers.add_parser("lookup", help="Resolve a host name to its IP addresses.")
    lookup_parser.add_argument("hostname", help="The host name to resolve.")
    lookup_parser.set_defaults(handler=command_lookup)

    wake_parser = subparsers.add_parser("wake", help="Broadcast a wake-on-lan magic packet.")
    wake_parser.add_argument("mac", help="MAC address like 11:22:33:44:55:66")
    wake_parser.add_argument("-b", "--broadcast", default=DEFAULT_BROADCAST_ADDRESS, help="The broadcast address.")
    wake_parser.add_argument("-p", "--port", default=str(DEFAULT_WOL_PORT), help="The UDP port.")
    wake_parser.add_argument("-i", "--interface", default=None, help="The interface to send from.")
    wake_parser.add_argument("--strict-source", action="store_true",
        help="Fail when the interface has no usable IPv4 address instead of using the default.")
    wake_parser.set_defaults(handler=command_wake)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    try:
        output = args.handler(args)
    except NetToolsError as nterr:
        logger.error("The '%s' command failed.", args.command)
        print("Error: {}".format(nterr), file=sys.stderr)
        return 1

    sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
