"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the wire constants and default endpoints used for sending
               Wake-on-LAN magic packets.

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

import re

HARDWARE_ADDRESS_LENGTH = 6

MAGIC_SYNC_STREAM = b"\xff" * HARDWARE_ADDRESS_LENGTH

MAGIC_REPEAT_COUNT = 16

MAGIC_PACKET_LENGTH = len(MAGIC_SYNC_STREAM) + (HARDWARE_ADDRESS_LENGTH * MAGIC_REPEAT_COUNT)

WAKE_ON_LAN_PORT = 9

LIMITED_BROADCAST_ADDRESS = "255.255.255.255"
WILDCARD_ADDRESS = "0.0.0.0"
WILDCARD_ADDRESS6 = "::"

DEFAULT_DESTINATION_ENDPOINT = (LIMITED_BROADCAST_ADDRESS, WAKE_ON_LAN_PORT)
DEFAULT_SOURCE_ENDPOINT = (WILDCARD_ADDRESS, 0)

REGEX_HWADDR_SEPARATORS = re.compile(r"[:\-]")
REGEX_HWADDR_COMPONENT = re.compile(r"^[0-9a-fA-F]{1,2}$")
