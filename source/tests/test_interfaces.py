import socket
import unittest

from unittest import mock

from fakeifaces import fake_ifaddresses, fake_interfaces

from mojo.nettools.exceptions import InterfaceNotFoundError
from mojo.nettools.interfaces import (
    InterfaceAddress,
    format_interface_report,
    get_interface_details,
    get_non_loopback_ipv4_address,
    list_interfaces
)


class FakeInterfacesTestCase(unittest.TestCase):

    def setUp(self):
        patch_list = [
            mock.patch("netifaces.interfaces", side_effect=fake_interfaces),
            mock.patch("netifaces.ifaddresses", side_effect=fake_ifaddresses),
        ]
        for patcher in patch_list:
            patcher.start()
            self.addCleanup(patcher.stop)
        return


class TestInterfaceEnumeration(FakeInterfacesTestCase):

    def test_list_interfaces_requires_address_and_mac(self):
        found = list_interfaces()
        expected = ["eth0", "eth1", "wlan0"]
        assert found == expected, f"Expected valid interfaces={expected}, found={found}"
        return

    def test_interface_details(self):
        details = get_interface_details("eth0")
        assert details.name == "eth0", f"Unexpected interface name={details.name}"
        assert details.hwaddr == "aa:bb:cc:dd:ee:01", f"Unexpected hardware address={details.hwaddr}"
        assert len(details.addresses) == 3, f"Expected 3 addresses, found={len(details.addresses)}"

        first = details.addresses[0]
        assert first.family == socket.AF_INET, "The IPv4 addresses should be listed first."
        assert first.to_cidr() == "10.0.0.5/24", f"Unexpected cidr={first.to_cidr()}"

        last = details.addresses[2]
        assert last.family == socket.AF_INET6, "The IPv6 addresses should be listed last."
        assert last.to_cidr() == "fe80::a8bb:ccff:fedd:ee01/64", f"Unexpected cidr={last.to_cidr()}"
        return

    def test_loopback_has_no_hwaddr(self):
        details = get_interface_details("lo")
        assert details.hwaddr == "", f"The loopback hardware address should be empty, found={details.hwaddr}"
        return

    def test_unknown_interface(self):
        with self.assertRaises(InterfaceNotFoundError) as ctx:
            get_interface_details("nope0")
        assert ctx.exception.ifname == "nope0", "The error should carry the interface name."
        return

    def test_non_loopback_ipv4_address(self):
        assert get_non_loopback_ipv4_address("eth0") == "10.0.0.5", "The first IPv4 address should be chosen."
        assert get_non_loopback_ipv4_address("eth1") == "192.168.1.20", "Loopback addresses should be skipped."
        assert get_non_loopback_ipv4_address("lo") is None, "The loopback interface has no usable address."
        assert get_non_loopback_ipv4_address("wlan0") is None, "An IPv6 only interface has no usable address."
        return


class TestInterfaceReport(FakeInterfacesTestCase):

    def test_report_format(self):
        report = format_interface_report(get_interface_details("eth0"))

        expected = (
            "eth0 : \n"
            "MAC : aa:bb:cc:dd:ee:01\n"
            "Interface Address0 : 10.0.0.5/24\n"
            "Interface Address1 : 10.0.0.6/24\n"
            "Interface Address2 : fe80::a8bb:ccff:fedd:ee01/64\n"
            "------------------------------------\n"
        )
        assert report == expected, f"Unexpected report:\n{report}"
        return

    def test_report_ipv6_netmask_without_prefix(self):
        report = format_interface_report(get_interface_details("wlan0"))
        assert "Interface Address0 : fe80::1/64\n" in report, f"Unexpected report:\n{report}"
        return


class TestInterfaceAddress(unittest.TestCase):

    def test_address_without_netmask(self):
        addr = InterfaceAddress(socket.AF_INET, "10.1.2.3")
        assert addr.prefixlen is None, "An address without a netmask has no prefix length."
        assert addr.to_cidr() == "10.1.2.3", f"Unexpected cidr={addr.to_cidr()}"
        return

    def test_loopback_detection(self):
        assert InterfaceAddress(socket.AF_INET, "127.0.0.1").is_loopback, "127.0.0.1 is a loopback address."
        assert not InterfaceAddress(socket.AF_INET, "10.0.0.1").is_loopback, "10.0.0.1 is not a loopback address."
        return


if __name__ == '__main__':
    unittest.main()
