"""
.. module:: sender
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the functions used to resolve endpoints and to transmit magic packet
               payloads over a transient UDP socket.

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

from typing import Tuple

import logging
import socket

from mojo.wakeonlan.constants import (
    DEFAULT_DESTINATION_ENDPOINT,
    DEFAULT_SOURCE_ENDPOINT,
    MAGIC_PACKET_LENGTH,
    WILDCARD_ADDRESS,
    WILDCARD_ADDRESS6
)
from mojo.wakeonlan.exceptions import AddressFamilyMismatchError, TransmitError, TransmitStep

logger = logging.getLogger()


def resolve_endpoint(endpoint: Tuple[str, int], family: socket.AddressFamily = socket.AF_UNSPEC) -> Tuple[socket.AddressFamily, Tuple]:
    """
        Resolves an (address, port) endpoint to the address family and socket address that
        a datagram socket would use for it.  An empty host is the wildcard address.

        :param endpoint: The (address, port) tuple to resolve.
        :param family: The preferred address family.  When the host resolves to addresses
                       of more than one family, an address of this family is chosen.  The
                       wildcard address of this family is used for an empty host.

        :returns: A tuple of the address family and the resolved socket address.

        :raises TransmitError: If the endpoint cannot be resolved.
    """
    host, port = endpoint

    if host == "":
        host = WILDCARD_ADDRESS6 if family == socket.AF_INET6 else WILDCARD_ADDRESS

    try:
        addr_info = socket.getaddrinfo(host, port, type=socket.SOCK_DGRAM)
    except (OSError, UnicodeError) as res_err:
        errmsg = f"Unable to resolve endpoint. endpoint={endpoint!r}"
        raise TransmitError(errmsg, TransmitStep.RESOLVE, endpoint=endpoint,
                            errno=getattr(res_err, "errno", None)) from res_err

    found_family, _, _, _, sockaddr = addr_info[0]

    if family != socket.AF_UNSPEC:
        for ai_family, _, _, _, ai_sockaddr in addr_info:
            if ai_family == family:
                found_family, sockaddr = ai_family, ai_sockaddr
                break

    return found_family, sockaddr


def send_magic_bytes(payload: bytes, destination: Tuple[str, int] = DEFAULT_DESTINATION_ENDPOINT,
                     source: Tuple[str, int] = DEFAULT_SOURCE_ENDPOINT):
    """
        Sends a magic packet payload as a single UDP datagram.  A socket is created for the
        send, enabled for broadcast, bound to `source` and closed before returning.

        :param payload: The 102 byte magic packet payload.
        :param destination: The (address, port) the datagram is sent to.
        :param source: The (address, port) the sending socket is bound to.

        :raises AddressFamilyMismatchError: If the source and destination resolve to different
                                            address families.
        :raises TransmitError: If the operating system fails any step of the send.
    """
    if isinstance(payload, (int, str)):
        errmsg = f"A magic packet payload must be a sequence of bytes. payload={payload!r}"
        raise ValueError(errmsg)

    payload = bytes(payload)
    if len(payload) != MAGIC_PACKET_LENGTH:
        errmsg = "A magic packet payload must be exactly {} bytes long. found={}".format(
            MAGIC_PACKET_LENGTH, len(payload))
        raise ValueError(errmsg)

    dest_family, dest_sockaddr = resolve_endpoint(destination)
    src_family, src_sockaddr = resolve_endpoint(source, family=dest_family)

    # Names that resolve to both families can still be reached from the source family
    if src_family != dest_family:
        dest_family, dest_sockaddr = resolve_endpoint(destination, family=src_family)

    if src_family != dest_family:
        errmsg = "The source and destination endpoints must use the same address family. " \
                 f"source={source!r} family={src_family!r} destination={destination!r} family={dest_family!r}"
        raise AddressFamilyMismatchError(errmsg, src_family, dest_family)

    try:
        sock = socket.socket(dest_family, socket.SOCK_DGRAM)
    except OSError as os_err:
        errmsg = f"Unable to create a datagram socket. family={dest_family!r}"
        raise TransmitError(errmsg, TransmitStep.CREATE, errno=os_err.errno) from os_err

    with sock:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as os_err:
            errmsg = "Error attempting to set socket option 'SO_BROADCAST'. errno=%r" % os_err.errno
            raise TransmitError(errmsg, TransmitStep.CONFIGURE, errno=os_err.errno) from os_err

        try:
            sock.bind(src_sockaddr)
        except OSError as os_err:
            errmsg = f"Unable to bind the sending socket. source={source!r}"
            raise TransmitError(errmsg, TransmitStep.BIND, endpoint=source, errno=os_err.errno) from os_err

        logger.debug("Sending magic packet from=%r to=%r", src_sockaddr, dest_sockaddr)

        try:
            sent = sock.sendto(payload, dest_sockaddr)
        except OSError as os_err:
            errmsg = f"Unable to send the magic packet. destination={destination!r}"
            raise TransmitError(errmsg, TransmitStep.SEND, endpoint=destination, errno=os_err.errno) from os_err

        if sent != len(payload):
            errmsg = "Magic packet was only partially sent. sent={} expected={} destination={!r}".format(
                sent, len(payload), destination)
            raise TransmitError(errmsg, TransmitStep.SEND, endpoint=destination)

    return
