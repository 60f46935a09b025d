import unittest

from mojo.wakeonlan.exceptions import InvalidAddressLengthError, InvalidHardwareAddressError
from mojo.wakeonlan.magicpacket import MagicPacket, format_hardware_address, parse_hardware_address

class TestHwaddrHelpersPositive(unittest.TestCase):

    def test_parse_hwaddr_upper(self):
        candidate = "00:11:22:33:44:AA"
        result = parse_hardware_address(candidate)
        assert result == bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0xAA]), f"The address={candidate} did not parse correctly."
        return

    def test_parse_hwaddr_lower(self):
        candidate = "00:11:22:33:44:aa"
        result = parse_hardware_address(candidate)
        assert result == bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0xAA]), f"The address={candidate} did not parse correctly."
        return

    def test_parse_hwaddr_dashes(self):
        candidate = "0f-1e-2d-3c-4b-5a"
        result = parse_hardware_address(candidate)
        assert result == bytes([0x0F, 0x1E, 0x2D, 0x3C, 0x4B, 0x5A]), f"The address={candidate} did not parse correctly."
        return

    def test_parse_hwaddr_single_digit_components(self):
        candidate = "0:1:2:3:4:5"
        result = parse_hardware_address(candidate)
        assert result == bytes([0, 1, 2, 3, 4, 5]), f"The address={candidate} did not parse correctly."
        return

    def test_format_hwaddr(self):
        result = format_hardware_address(bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0xAA]), sep="-")
        assert result == "00-11-22-33-44-AA", f"Unexpected formatted address. found={result}"
        return

    def test_magic_packet_from_string(self):
        packet = MagicPacket.from_string("00:11:22:33:44:AA")
        assert packet == MagicPacket(bytes([0x00, 0x11, 0x22, 0x33, 0x44, 0xAA]))
        return


class TestHwaddrHelpersNegative(unittest.TestCase):

    def test_parse_hwaddr_too_short(self):
        with self.assertRaises(InvalidAddressLengthError):
            parse_hardware_address("00:11:22:33:44")
        return

    def test_parse_hwaddr_too_long(self):
        with self.assertRaises(InvalidAddressLengthError):
            parse_hardware_address("00:11:22:33:44:55:66")
        return

    def test_parse_hwaddr_invalid_digit(self):
        with self.assertRaises(InvalidHardwareAddressError) as ctx:
            parse_hardware_address("00:11:22:33:44:XX")
        assert not isinstance(ctx.exception, InvalidAddressLengthError)
        return

    def test_parse_hwaddr_wide_component(self):
        with self.assertRaises(InvalidHardwareAddressError):
            parse_hardware_address("000:11:22:33:44:55")
        return

    def test_parse_hwaddr_empty(self):
        with self.assertRaises(InvalidHardwareAddressError):
            parse_hardware_address("")
        return


if __name__ == '__main__':
    unittest.main()
