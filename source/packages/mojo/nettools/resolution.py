"""
.. module:: resolution
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for resolving host names to ip addresses.

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

from typing import List

import logging
import socket

from mojo.nettools.exceptions import HostLookupError

logger = logging.getLogger()


def lookup_host(hostname: str) -> List[str]:
    """
        Resolves a host name to its IP addresses using the operating system resolver.

        :param hostname: The host name to lookup.

        :returns: The IPv4 and IPv6 addresses for the host in resolver order with duplicates removed.

        :raises HostLookupError: When the host name cannot be resolved.
    """
    hostname = hostname.strip()
    if hostname == "":
        raise HostLookupError("Could not get IPs, no host name was specified.", hostname)

    try:
        addr_info_list = socket.getaddrinfo(hostname, None)
    except (socket.gaierror, UnicodeError) as lkerr:
        errmsg = "Could not get IPs for hostname={}. {}".format(hostname, lkerr)
        raise HostLookupError(errmsg, hostname) from lkerr

    found = []
    for family, _, _, _, sockaddr in addr_info_list:
        if family not in (socket.AF_INET, socket.AF_INET6):
            continue
        ipaddr = sockaddr[0]
        if ipaddr not in found:
            found.append(ipaddr)

    return found


def format_lookup_report(hostname: str) -> str:
    """
        Performs a host lookup and formats the answers as the text report displayed to users.

        :param hostname: The host name to lookup.

        :returns: A line per address of the form '<hostname> IN A <ip>' or a 'Could not get IPs'
                  line when the lookup failed.
    """
    report = ""
    hostname = hostname.strip()

    try:
        for ipaddr in lookup_host(hostname):
            logger.debug("%s . IN A %s", hostname, ipaddr)
            report += "{} IN A {}\n".format(hostname, ipaddr)
    except HostLookupError as lkerr:
        logger.warning("%s", lkerr)
        report += "Could not get IPs: {}\n".format(hostname)

    return report
