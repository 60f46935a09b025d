"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised for invalid hardware addresses and for
               failures encountered while transmitting magic packets.

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

from typing import Optional, Tuple

from enum import IntEnum

import socket

from mojo.errors.exceptions import SemanticError


class TransmitStep(IntEnum):
    """
        The step of a magic packet transmission that an OS level failure occured in.
    """
    RESOLVE = 1
    CREATE = 2
    CONFIGURE = 3
    BIND = 4
    SEND = 5


class InvalidHardwareAddressError(ValueError):
    """
        This error is raised when a hardware address cannot be interpreted.
    """


class InvalidAddressLengthError(InvalidHardwareAddressError):
    """
        This error is raised when a hardware address is not exactly six bytes long.
    """
    def __init__(self, message: str, length: int, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.length = length
        return


class AddressFamilyMismatchError(SemanticError):
    """
        This error is raised when the source and destination endpoints of a send do not share
        an address family.
    """
    def __init__(self, message: str, source_family: socket.AddressFamily,
                 destination_family: socket.AddressFamily, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.source_family = source_family
        self.destination_family = destination_family
        return


class ProtocolError(RuntimeError):
    """
        This error is raised when a communications protocol encounters an error.
    """


class TransmitError(ProtocolError):
    """
        This error is raised when the operating system reports a failure while sending a
        magic packet.  The originating :class:`OSError` is chained as the cause.
    """
    def __init__(self, message: str, step: TransmitStep, endpoint: Optional[Tuple] = None,
                 errno: Optional[int] = None, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.step = step
        self.endpoint = endpoint
        self.errno = errno
        return


class InterfaceAddressError(ProtocolError):
    """
        This error is raised when the addresses of a network interface cannot be determined.
    """
