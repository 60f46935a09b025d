"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for looking up the addresses of the local network
               interfaces that magic packets can be sent from.

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

from typing import Dict, List, Union

import netifaces

from mojo.wakeonlan.exceptions import InterfaceAddressError


def get_ipv4_address_info(ifname: str) -> List[Dict[str, str]]:
    """
        Gets the list of IPv4 address information entries for the specified interface name.

        :param ifname: The interface name to lookup the address information for.

        :returns: The list of address info dictionaries, empty if the interface has no IPv4
                  addresses.
    """
    try:
        address_info = netifaces.ifaddresses(ifname)
    except ValueError as val_err:
        errmsg = f"Unable to lookup addresses for unknown interface. ifname={ifname}"
        raise InterfaceAddressError(errmsg) from val_err

    addr_info_list = []
    if address_info is not None and netifaces.AF_INET in address_info:
        addr_info_list = address_info[netifaces.AF_INET]

    return addr_info_list


def get_ipv4_address(ifname: str) -> Union[str, None]:
    """
        Get the first IPv4 address associated with the specified interface name.

        :param ifname: The interface name to lookup the IP address for.

        :returns: The IPv4 address associated with the specified interface name or None
    """
    addr = None

    for addr_info in get_ipv4_address_info(ifname):
        if "addr" in addr_info:
            addr = addr_info["addr"]
            break

    return addr


def get_ipv4_broadcast_address(ifname: str) -> Union[str, None]:
    """
        Get the first IPv4 broadcast address associated with the specified interface name.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The IPv4 broadcast address of the specified interface name or None
    """
    bcast = None

    for addr_info in get_ipv4_address_info(ifname):
        if "broadcast" in addr_info:
            bcast = addr_info["broadcast"]
            break

    return bcast
