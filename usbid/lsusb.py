#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import logging

from .describe import classify, describe
from .sysfs import Device, iter_devices
from .types import Iterable, Optional, PathLike

log = logging.getLogger(__name__)


def device_lines(dev: Device, interfaces: bool = False) -> Iterable[str]:
    ident = f"{dev.idVendor:04x}:{dev.idProduct:04x}"
    yield f"Bus {dev.bus_number:03d} Device {dev.device_number:03d}: ID {ident} {describe(dev)}"
    if interfaces:
        for interface in dev.interfaces:
            yield f"  Interface {interface.bInterfaceNumber}: {classify(interface)}"


def lsusb(path: Optional[PathLike] = None, interfaces: bool = False):
    lines = []
    for dev in iter_devices(path):
        try:
            key = dev.bus_number, dev.device_number
            lines.append((key, list(device_lines(dev, interfaces))))
        except OSError as error:
            # device unplugged while listing
            log.warning("skipping %s: %s", dev.syspath, error)
    for _, dev_lines in sorted(lines):
        for line in dev_lines:
            print(line)


if __name__ == "__main__":
    lsusb()
