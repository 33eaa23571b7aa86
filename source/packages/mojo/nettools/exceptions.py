"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised for exceptional network conditions
               encountered by the interface, lookup and wake-on-lan tools.

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


class NetToolsError(RuntimeError):
    """
        The base error for all the errors raised by the network tools.
    """

class InterfaceNotFoundError(NetToolsError):
    """
        This error is raised when a network interface name does not exist on the local machine.
    """
    def __init__(self, message, ifname, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.ifname = ifname
        return

class HostLookupError(NetToolsError):
    """
        This error is raised when the operating system resolver could not resolve a host name.
    """
    def __init__(self, message, hostname, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.hostname = hostname
        return

class WakeOnLanError(NetToolsError):
    """
        This error is the base error for failures sending a wake-on-lan magic packet.
    """

class InvalidMacError(WakeOnLanError, ValueError):
    """
        This error is raised when a MAC address cannot be parsed or is not a 6 byte address.
    """

class InvalidDestinationError(WakeOnLanError, ValueError):
    """
        This error is raised when the broadcast address or port of a destination cannot be resolved.
    """

class SocketError(WakeOnLanError):
    """
        This error is raised when the UDP socket cannot be opened, bound or connected.
    """

class SendError(WakeOnLanError):
    """
        This error is raised when the magic packet could not be written to the socket in full.
    """
