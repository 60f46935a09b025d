"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module containing the :class:`MagicPacket` class along with the helper functions
               used to parse, format and lay out hardware addresses.

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

from typing import Iterable, Tuple, Union

from mojo.wakeonlan.constants import (
    DEFAULT_DESTINATION_ENDPOINT,
    DEFAULT_SOURCE_ENDPOINT,
    HARDWARE_ADDRESS_LENGTH,
    MAGIC_REPEAT_COUNT,
    MAGIC_SYNC_STREAM,
    REGEX_HWADDR_COMPONENT,
    REGEX_HWADDR_SEPARATORS
)
from mojo.wakeonlan.exceptions import InvalidAddressLengthError, InvalidHardwareAddressError
from mojo.wakeonlan.sender import send_magic_bytes

HardwareAddressLike = Union[bytes, bytearray, memoryview, Iterable[int]]


def normalize_hardware_address(hwaddr: HardwareAddressLike) -> bytes:
    """
        Normalizes a hardware address into an immutable six byte `bytes` object.

        :param hwaddr: The hardware address as a bytes-like object or an iterable of integer
                       byte values.

        :returns: The hardware address as `bytes`.

        :raises InvalidAddressLengthError: If the address is not exactly six bytes long.
    """
    if isinstance(hwaddr, str):
        errmsg = f"Hardware address strings must be parsed with 'parse_hardware_address'. hwaddr={hwaddr!r}"
        raise InvalidHardwareAddressError(errmsg)
    elif isinstance(hwaddr, int):
        errmsg = f"A hardware address must be a sequence of bytes not an integer. hwaddr={hwaddr!r}"
        raise InvalidHardwareAddressError(errmsg)

    try:
        normalized = bytes(hwaddr)
    except (TypeError, ValueError) as xcpt:
        errmsg = f"Unable to interpret the hardware address as a sequence of bytes. hwaddr={hwaddr!r}"
        raise InvalidHardwareAddressError(errmsg) from xcpt

    if len(normalized) != HARDWARE_ADDRESS_LENGTH:
        errmsg = "A hardware address must be exactly {} bytes long. found={}".format(
            HARDWARE_ADDRESS_LENGTH, len(normalized))
        raise InvalidAddressLengthError(errmsg, len(normalized))

    return normalized


def parse_hardware_address(text: str) -> bytes:
    """
        Parses a hardware address string like '00:11:22:33:44:AA' or '00-11-22-33-44-aa'.

        :param text: The hardware address string to parse.

        :returns: The six bytes of the hardware address.
    """
    components = REGEX_HWADDR_SEPARATORS.split(text.strip())

    for comp in components:
        if REGEX_HWADDR_COMPONENT.match(comp) is None:
            errmsg = f"Unable to parse hardware address. text={text!r} component={comp!r}"
            raise InvalidHardwareAddressError(errmsg)

    if len(components) != HARDWARE_ADDRESS_LENGTH:
        errmsg = "A hardware address must have exactly {} components. text={!r} found={}".format(
            HARDWARE_ADDRESS_LENGTH, text, len(components))
        raise InvalidAddressLengthError(errmsg, len(components))

    hwaddr = bytes(int(comp, 16) for comp in components)

    return hwaddr


def format_hardware_address(hwaddr: HardwareAddressLike, sep: str = ":") -> str:
    """
        Formats a hardware address as upper case hex components joined by `sep`.
    """
    hwaddr = normalize_hardware_address(hwaddr)
    return sep.join("{:02X}".format(bval) for bval in hwaddr)


def build_magic_bytes(hwaddr: HardwareAddressLike) -> bytes:
    '[FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )'
    hwaddr = normalize_hardware_address(hwaddr)
    return MAGIC_SYNC_STREAM + hwaddr * MAGIC_REPEAT_COUNT


class MagicPacket:
    """
        A Wake-on-LAN magic packet intended for the network interface with the specified
        hardware address.  Creating the packet does not send it, use :meth:`send` or
        :meth:`send_to` to put it on the wire, or use :attr:`magic_bytes` to send the payload
        over a socket of your own.
    """

    __slots__ = ("_magic_bytes",)

    def __init__(self, hardware_address: HardwareAddressLike):
        self._magic_bytes = build_magic_bytes(hardware_address)
        return

    @classmethod
    def from_string(cls, text: str) -> "MagicPacket":
        """
            Creates a :class:`MagicPacket` from a hardware address string.
        """
        hwaddr = parse_hardware_address(text)
        return cls(hwaddr)

    @property
    def hardware_address(self) -> bytes:
        """
            :returns: The six byte hardware address the magic packet was created for.
        """
        start = len(MAGIC_SYNC_STREAM)
        return self._magic_bytes[start:start + HARDWARE_ADDRESS_LENGTH]

    @property
    def magic_bytes(self) -> bytes:
        """
            The 102 byte payload, six 0xFF bytes followed by sixteen repetitions of the
            hardware address.
        """
        return self._magic_bytes

    def send(self):
        """
            Sends the magic packet via UDP to the broadcast address 255.255.255.255:9 and lets
            the operating system choose the source port and network interface.
        """
        send_magic_bytes(self._magic_bytes, DEFAULT_DESTINATION_ENDPOINT, DEFAULT_SOURCE_ENDPOINT)
        return

    def send_to(self, destination: Tuple[str, int], source: Tuple[str, int] = DEFAULT_SOURCE_ENDPOINT):
        """
            Sends the magic packet via UDP to and from the endpoints specified.

            :param destination: The (address, port) the datagram is sent to.
            :param source: The (address, port) the sending socket is bound to.
        """
        send_magic_bytes(self._magic_bytes, destination, source)
        return

    def __bytes__(self) -> bytes:
        return self._magic_bytes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MagicPacket):
            return NotImplemented
        return self._magic_bytes == other._magic_bytes

    def __hash__(self) -> int:
        return hash(self._magic_bytes)

    def __repr__(self) -> str:
        return "MagicPacket({})".format(format_hardware_address(self.hardware_address))
