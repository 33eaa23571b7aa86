"""
    Canned netifaces address tables used to exercise the interface helpers without
    depending on the interfaces of the machine running the tests.
"""

import netifaces

FAKE_ADDRESS_TABLE = {
    "lo": {
        netifaces.AF_LINK: [{"addr": "00:00:00:00:00:00", "peer": "00:00:00:00:00:00"}],
        netifaces.AF_INET: [{"addr": "127.0.0.1", "netmask": "255.0.0.0", "peer": "127.0.0.1"}],
        netifaces.AF_INET6: [{"addr": "::1", "netmask": "ffff:ffff:ffff:ffff:ffff:ffff:ffff:ffff/128"}],
    },
    "eth0": {
        netifaces.AF_LINK: [{"addr": "aa:bb:cc:dd:ee:01", "broadcast": "ff:ff:ff:ff:ff:ff"}],
        netifaces.AF_INET: [
            {"addr": "10.0.0.5", "netmask": "255.255.255.0", "broadcast": "10.0.0.255"},
            {"addr": "10.0.0.6", "netmask": "255.255.255.0", "broadcast": "10.0.0.255"},
        ],
        netifaces.AF_INET6: [{"addr": "fe80::a8bb:ccff:fedd:ee01%eth0", "netmask": "ffff:ffff:ffff:ffff::/64"}],
    },
    "eth1": {
        netifaces.AF_LINK: [{"addr": "aa:bb:cc:dd:ee:02", "broadcast": "ff:ff:ff:ff:ff:ff"}],
        netifaces.AF_INET: [
            {"addr": "127.0.1.1", "netmask": "255.0.0.0"},
            {"addr": "192.168.1.20", "netmask": "255.255.255.0", "broadcast": "192.168.1.255"},
        ],
    },
    "wlan0": {
        netifaces.AF_LINK: [{"addr": "aa:bb:cc:dd:ee:03", "broadcast": "ff:ff:ff:ff:ff:ff"}],
        netifaces.AF_INET6: [{"addr": "fe80::1%wlan0", "netmask": "ffff:ffff:ffff:ffff::"}],
    },
    "tun0": {
        netifaces.AF_INET: [{"addr": "10.8.0.2", "netmask": "255.255.255.255", "peer": "10.8.0.1"}],
    },
    "docker0": {
        netifaces.AF_LINK: [{"addr": "02:42:ac:11:00:01", "broadcast": "ff:ff:ff:ff:ff:ff"}],
    },
}


def fake_interfaces():
    return list(FAKE_ADDRESS_TABLE.keys())


def fake_ifaddresses(ifname):
    if ifname not in FAKE_ADDRESS_TABLE:
        raise ValueError("You must specify a valid interface name.")
    return FAKE_ADDRESS_TABLE[ifname]
