"""
.. module:: broadcast
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains broadcast helper functions.

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

import logging

from mojo.wakeonlan.constants import WAKE_ON_LAN_PORT, WILDCARD_ADDRESS
from mojo.wakeonlan.exceptions import InterfaceAddressError
from mojo.wakeonlan.interfaces import get_ipv4_address, get_ipv4_broadcast_address
from mojo.wakeonlan.magicpacket import MagicPacket

logger = logging.getLogger()


def broadcast_wake_on_lan_magic_message(broadcast_addr: str, mac_addr: str, port: int = WAKE_ON_LAN_PORT) -> MagicPacket:
    """
        Creates a magic packet for the hardware address `mac_addr` and broadcasts it to
        `broadcast_addr` on `port`.

        :param broadcast_addr: The broadcast address to send the magic packet to.
        :param mac_addr: The hardware address string of the interface to wake.
        :param port: The UDP port to send the magic packet to.

        :returns: The :class:`MagicPacket` that was sent.
    """
    packet = MagicPacket.from_string(mac_addr)

    packet.send_to((broadcast_addr, port), (WILDCARD_ADDRESS, 0))
    logger.debug("Broadcast magic packet for mac=%s to %s:%d", mac_addr, broadcast_addr, port)

    return packet


def send_magic_packet_on_interface(packet: MagicPacket, ifname: str, port: int = WAKE_ON_LAN_PORT):
    """
        Sends a magic packet to the directed broadcast address of the network interface named
        `ifname`, from the IPv4 address of that interface.

        :param packet: The magic packet to send.
        :param ifname: The name of the local interface to send the packet on.
        :param port: The UDP port to send the magic packet to.
    """
    if_addr = get_ipv4_address(ifname)
    bcast_addr = get_ipv4_broadcast_address(ifname)

    if if_addr is None or bcast_addr is None:
        errmsg = f"The interface does not have an IPv4 broadcast address. ifname={ifname} addr={if_addr} broadcast={bcast_addr}"
        raise InterfaceAddressError(errmsg)

    packet.send_to((bcast_addr, port), (if_addr, 0))
    logger.debug("Sent %r on ifname=%s to %s:%d", packet, ifname, bcast_addr, port)

    return
