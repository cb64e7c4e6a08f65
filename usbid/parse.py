#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Loaders for the [usb.ids](http://www.linux-usb.org/usb.ids) database.

The `parse*` functions only build a [`Table`][usbid.table.Table]. The
`load*` functions also publish it, which replaces the table used by
[`describe`][usbid.describe.describe] and [`classify`][usbid.describe.classify].
A table is only published once it has been fully parsed so a failed load
leaves the current one in place.

Example:

```python
from usbid.parse import load_from_url

load_from_url()
```
"""

import io
import logging
import os
import pathlib
import string
import urllib.request

from .ids.base import Class, Product, Protocol, SubClass, Vendor
from .table import Table, set_table
from .types import Optional, PathLike, Stream
from .util import hex_code

log = logging.getLogger(__name__)

USB_IDS_URL = "http://www.linux-usb.org/usb.ids"

USB_IDS_PATHS = (
    pathlib.Path("/usr/share/hwdata/usb.ids"),
    pathlib.Path("/usr/share/misc/usb.ids"),
    pathlib.Path("/var/lib/usbutils/usb.ids"),
    pathlib.Path("/usr/share/usb.ids"),
)

# name of the environment variable pointing to the usb.ids used by default
IDS_ENV_VAR = "USBID_IDS"

DEFAULT_TIMEOUT = 30

VERSION_PREFIX = "# Version:"


class UsbIdError(Exception):
    """Malformed usb.ids data"""


def _decode(line) -> str:
    if isinstance(line, bytes):
        line = line.decode("utf-8", errors="replace")
    return line.rstrip("\r\n")


def _split(body: str, digits: int, lineno: int) -> tuple[int, str]:
    code, _, name = body.partition(" ")
    try:
        return hex_code(code, digits), name.strip()
    except ValueError:
        raise UsbIdError(f"line {lineno}: invalid code {code!r}") from None


def _is_vendor(body: str) -> bool:
    code = body.split(maxsplit=1)[0]
    return len(code) == 4 and all(c in string.hexdigits for c in code)


class _Parser:
    def __init__(self):
        self.vendors = {}
        self.classes = {}
        self.version = ""
        # current section: "vendor", "class", the name of a skipped section or None
        self.section = None
        self.parent = None
        self.child = None

    def feed(self, lineno: int, line: str):
        if not line.strip():
            return
        if line.startswith("#"):
            if not self.version and line.startswith(VERSION_PREFIX):
                self.version = line[len(VERSION_PREFIX) :].strip()
            return
        body = line.lstrip("\t")
        depth = len(line) - len(body)
        if depth == 0:
            self.top(lineno, body)
        elif self.section is None:
            raise UsbIdError(f"line {lineno}: indented entry without parent")
        elif self.section == "vendor":
            self.vendor_child(lineno, depth, body)
        elif self.section == "class":
            self.class_child(lineno, depth, body)

    def top(self, lineno: int, body: str):
        self.child = None
        if body.startswith("C "):
            cid, name = _split(body[2:], 2, lineno)
            self.section, self.parent = "class", Class(cid, name)
            self.classes[cid] = self.parent
        elif _is_vendor(body):
            vid, name = _split(body, 4, lineno)
            self.section, self.parent = "vendor", Vendor(vid, name)
            self.vendors[vid] = self.parent
        else:
            section = body.split(maxsplit=1)[0]
            if section != self.section:
                log.debug("line %d: skipping %r section", lineno, section)
            self.section, self.parent = section, None

    def vendor_child(self, lineno: int, depth: int, body: str):
        if depth == 1:
            pid, name = _split(body, 4, lineno)
            self.child = self.parent.add(Product(pid, name))
        elif depth == 2:
            # interfaces of the current product are not part of the table
            if self.child is None:
                raise UsbIdError(f"line {lineno}: interface without product")
        else:
            raise UsbIdError(f"line {lineno}: unexpected indentation")

    def class_child(self, lineno: int, depth: int, body: str):
        if depth == 1:
            sid, name = _split(body, 2, lineno)
            self.child = self.parent.add(SubClass(sid, name))
        elif depth == 2:
            if self.child is None:
                raise UsbIdError(f"line {lineno}: protocol without subclass")
            pid, name = _split(body, 2, lineno)
            self.child.add(Protocol(pid, name))
        else:
            raise UsbIdError(f"line {lineno}: unexpected indentation")


def parse(stream: Stream, source: str = "<stream>") -> Table:
    """
    Parse a usb.ids text or binary stream into a new table.
    Nothing is published.

    Raises:
        UsbIdError: if the data is malformed
    """
    parser = _Parser()
    for lineno, line in enumerate(stream, start=1):
        parser.feed(lineno, _decode(line))
    table = Table(parser.vendors, parser.classes, source=source, version=parser.version)
    log.debug("parsed %r", table)
    return table


def parse_bytes(data: bytes, source: str = "<bytes>") -> Table:
    return parse(io.BytesIO(data), source=source)


def parse_file(path: PathLike) -> Table:
    with open(path, "rb") as fobj:
        return parse(fobj, source=str(path))


def load(stream: Stream, source: str = "<stream>") -> Table:
    """Parse the given stream and publish the result"""
    table = parse(stream, source=source)
    set_table(table)
    return table


def load_from_file(path: PathLike) -> Table:
    """Parse the given usb.ids file and publish the result"""
    table = parse_file(path)
    set_table(table)
    return table


def parse_url(url: str = USB_IDS_URL, timeout: float = DEFAULT_TIMEOUT) -> Table:
    """
    Download usb.ids from the given URL and parse it. Nothing is published.

    Raises:
        OSError: on network errors (urllib.error.URLError is a subclass)
        UsbIdError: if the data is malformed
    """
    log.info("fetching %s", url)
    with urllib.request.urlopen(url, timeout=timeout) as response:
        data = response.read()
    return parse_bytes(data, source=url)


def load_from_url(url: str = USB_IDS_URL, timeout: float = DEFAULT_TIMEOUT) -> Table:
    """Download usb.ids from the given URL, parse it and publish the result"""
    table = parse_url(url, timeout=timeout)
    set_table(table)
    return table


def find_usb_ids_path() -> Optional[pathlib.Path]:
    """The first usb.ids installed on the system or None"""
    for path in USB_IDS_PATHS:
        if path.is_file():
            return path


def load_system() -> Table:
    """
    Parse the usb.ids installed on the system and publish the result.

    Raises:
        FileNotFoundError: if there is no usb.ids in any of the USB_IDS_PATHS
    """
    path = find_usb_ids_path()
    if path is None:
        raise FileNotFoundError(f"usb.ids not found in {', '.join(map(str, USB_IDS_PATHS))}")
    return load_from_file(path)


def embedded_table() -> Table:
    """The table shipped with the library"""
    from .ids.klass import klass
    from .ids.vendor import vendor, version

    return Table.from_dicts(vendor, klass, source="embedded", version=version)


def default_table() -> Table:
    """
    The table from the file named by the USBID_IDS environment variable or,
    when it is not set or cannot be read, the embedded one
    """
    path = os.environ.get(IDS_ENV_VAR)
    if path:
        try:
            return parse_file(path)
        except (OSError, UsbIdError) as error:
            log.warning("could not read %s=%s (%s). Using embedded table", IDS_ENV_VAR, path, error)
    return embedded_table()
