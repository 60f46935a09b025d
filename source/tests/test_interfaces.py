import unittest

from unittest import mock

import netifaces

from mojo.wakeonlan.exceptions import InterfaceAddressError
from mojo.wakeonlan.interfaces import get_ipv4_address, get_ipv4_broadcast_address

ETH0_ADDRESSES = {
    netifaces.AF_INET: [
        { "addr": "192.168.1.20", "netmask": "255.255.255.0", "broadcast": "192.168.1.255" }
    ]
}

LO_ADDRESSES = {
    netifaces.AF_INET: [
        { "addr": "127.0.0.1", "netmask": "255.0.0.0", "peer": "127.0.0.1" }
    ]
}

class TestInterfaceAddresses(unittest.TestCase):

    def test_get_ipv4_address(self):
        with mock.patch("mojo.wakeonlan.interfaces.netifaces.ifaddresses", return_value=ETH0_ADDRESSES):
            result = get_ipv4_address("eth0")
        assert result == "192.168.1.20", f"Unexpected interface address. found={result}"
        return

    def test_get_ipv4_broadcast_address(self):
        with mock.patch("mojo.wakeonlan.interfaces.netifaces.ifaddresses", return_value=ETH0_ADDRESSES):
            result = get_ipv4_broadcast_address("eth0")
        assert result == "192.168.1.255", f"Unexpected broadcast address. found={result}"
        return

    def test_get_ipv4_broadcast_address_missing(self):
        with mock.patch("mojo.wakeonlan.interfaces.netifaces.ifaddresses", return_value=LO_ADDRESSES):
            result = get_ipv4_broadcast_address("lo")
        assert result is None, f"The loopback interface should not have a broadcast address. found={result}"
        return

    def test_get_ipv4_address_no_ipv4(self):
        with mock.patch("mojo.wakeonlan.interfaces.netifaces.ifaddresses", return_value={}):
            result = get_ipv4_address("tun0")
        assert result is None
        return

    def test_get_ipv4_address_unknown_interface(self):
        with mock.patch("mojo.wakeonlan.interfaces.netifaces.ifaddresses", side_effect=ValueError("You must specify a valid interface name.")):
            with self.assertRaises(InterfaceAddressError):
                get_ipv4_address("nosuchif0")
        return


if __name__ == '__main__':
    unittest.main()
