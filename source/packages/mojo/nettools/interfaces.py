"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for enumerating and inspecting network interfaces

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

from typing import List, NamedTuple, Optional

import ipaddress
import logging
import socket

import netifaces

from mojo.nettools.constants import REPORT_SEPARATOR
from mojo.nettools.exceptions import InterfaceNotFoundError

logger = logging.getLogger()

NULL_HWADDR = "00:00:00:00:00:00"


class InterfaceAddress(NamedTuple):
    """
        An internet address that is bound to a network interface.
    """
    family: int
    address: str
    netmask: Optional[str] = None
    broadcast: Optional[str] = None

    @property
    def prefixlen(self) -> Optional[int]:
        """
            The network prefix length derived from the netmask, or None when no netmask is known.
        """
        plen = None

        if self.netmask is not None:
            netmask = self.netmask
            if "/" in netmask:
                # netifaces reports IPv6 masks as 'ffff:ffff:ffff:ffff::/64'
                plen = int(netmask.split("/", 1)[1])
            else:
                plen = bin(int(ipaddress.ip_address(netmask))).count("1")

        return plen

    @property
    def host(self) -> str:
        """
            The address with any IPv6 zone index ('%eth0') removed.
        """
        return self.address.split("%", 1)[0]

    @property
    def is_ipv4(self) -> bool:
        return self.family == socket.AF_INET

    @property
    def is_loopback(self) -> bool:
        return ipaddress.ip_address(self.host).is_loopback

    def to_cidr(self) -> str:
        plen = self.prefixlen
        if plen is None:
            return self.host
        return "{}/{}".format(self.host, plen)


class InterfaceDetails(NamedTuple):
    """
        The hardware address and internet addresses that belong to a network interface.
    """
    name: str
    hwaddr: str
    addresses: List[InterfaceAddress]


def _get_address_table(ifname: str) -> dict:
    try:
        address_info = netifaces.ifaddresses(ifname)
    except ValueError as verr:
        errmsg = "The network interface ifname={} was not found.".format(ifname)
        raise InterfaceNotFoundError(errmsg, ifname) from verr
    return address_info


def _get_hwaddr(address_info: dict) -> str:
    hwaddr = ""

    if netifaces.AF_LINK in address_info:
        link_info = address_info[netifaces.AF_LINK]
        if len(link_info) > 0:
            hwaddr = link_info[0].get("addr", "")

    # Loopback interfaces report an all zero link address
    if hwaddr == NULL_HWADDR:
        hwaddr = ""

    return hwaddr


def _get_addresses(address_info: dict) -> List[InterfaceAddress]:
    addresses = []

    for family in (netifaces.AF_INET, netifaces.AF_INET6):
        for faddr in address_info.get(family, []):
            if "addr" not in faddr:
                continue
            sock_family = socket.AF_INET if family == netifaces.AF_INET else socket.AF_INET6
            addresses.append(InterfaceAddress(sock_family, faddr["addr"], faddr.get("netmask"), faddr.get("broadcast")))

    return addresses


def get_interface_details(ifname: str) -> InterfaceDetails:
    """
        Gets the hardware address and internet addresses bound to the specified interface.

        :param ifname: The name of the interface to inspect.

        :returns: An :class:`InterfaceDetails` for the interface.

        :raises InterfaceNotFoundError: When the interface does not exist.
    """
    address_info = _get_address_table(ifname)

    details = InterfaceDetails(ifname, _get_hwaddr(address_info), _get_addresses(address_info))

    return details


def list_interfaces() -> List[str]:
    """
        Gets the names of the interfaces on the local machine that have at least one internet
        address and a hardware address.  Loopback interfaces do not have a hardware address so
        they are not included.

        :returns: The list of valid interface names.
    """
    iface_list = []

    for ifname in netifaces.interfaces():
        try:
            details = get_interface_details(ifname)
        except InterfaceNotFoundError:
            # The interface went away between the listing and the lookup
            logger.debug("Interface ifname=%s disappeared during enumeration.", ifname)
            continue

        for idx, addr in enumerate(details.addresses):
            logger.debug("%s Interface Address #%d : %s", ifname, idx, addr.host)

        if len(details.addresses) > 0 and details.hwaddr != "":
            iface_list.append(ifname)

    return iface_list


def format_interface_report(details: InterfaceDetails) -> str:
    """
        Formats the details of an interface as the text report displayed to users.

        :param details: The interface details to format.

        :returns: The multi-line text report.
    """
    lines = [
        "{} : ".format(details.name),
        "MAC : {}".format(details.hwaddr)
    ]

    for idx, addr in enumerate(details.addresses):
        lines.append("Interface Address{} : {}".format(idx, addr.to_cidr()))

    lines.append(REPORT_SEPARATOR)

    report = "\n".join(lines) + "\n"
    return report


def get_non_loopback_ipv4_address(ifname: str) -> Optional[str]:
    """
        Get the first IPv4 address of the specified interface that is not a loopback address.

        :param ifname: The interface name to lookup the IP address for.

        :returns: The first non-loopback IPv4 address or None if the interface has none.

        :raises InterfaceNotFoundError: When the interface does not exist.
    """
    found = None

    details = get_interface_details(ifname)
    for addr in details.addresses:
        if addr.is_ipv4 and not addr.is_loopback:
            found = addr.host
            break

    return found
