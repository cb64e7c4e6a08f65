#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

"""
Generates the usbid.ids.vendor and usbid.ids.klass modules (the embedded
table) from a usb.ids file or URL.

Run with `python -m usbid.codegen.usbids --help`
"""

import argparse
import datetime
import logging
import pathlib

import black

from usbid.parse import USB_IDS_URL, find_usb_ids_path, parse_file, parse_url
from usbid.table import Table
from usbid.util import hex_code

IDS_PATH = pathlib.Path(__file__).parent.parent / "ids"

HEADER = """\
#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

# This file has been generated by {name}
# Date: {date}
# Source: {source}
"""

VENDOR_TEMPLATE = (
    HEADER
    + """
version = {version!r}

vendor = {body}
"""
)

CLASS_TEMPLATE = (
    HEADER
    + """
klass = {body}
"""
)


def leaves_text(leaves: dict, digits: int) -> str:
    items = (f"0x{lid:0{digits}X}: {{'name': {leaf.name!r}}}," for lid, leaf in sorted(leaves.items()))
    return "{" + "".join(items) + "}"


def vendors_text(vendors: dict) -> str:
    items = (
        f"0x{vid:04X}: {{'name': {vendor.name!r}, 'children': {leaves_text(vendor, 4)}}},"
        for vid, vendor in sorted(vendors.items())
    )
    return "{" + "".join(items) + "}"


def classes_text(classes: dict) -> str:
    items = []
    for cid, klass in sorted(classes.items()):
        subclasses = (
            f"0x{sid:02X}: {{'name': {subclass.name!r}, 'children': {leaves_text(subclass, 2)}}},"
            for sid, subclass in sorted(klass.items())
        )
        items.append(f"0x{cid:02X}: {{'name': {klass.name!r}, 'children': {{{''.join(subclasses)}}}}},")
    return "{" + "".join(items) + "}"


def filter_vendors(table: Table, vendor_ids) -> Table:
    """A new table with only the given vendors (all classes are kept)"""
    missing = set(vendor_ids) - set(table.vendors)
    if missing:
        logging.warning("  Vendors not found: %s", ", ".join(f"{vid:04x}" for vid in sorted(missing)))
    vendors = {vid: vendor for vid, vendor in table.vendors.items() if vid in vendor_ids}
    return Table(vendors, table.classes, source=table.source, version=table.version)


def render(template: str, body: str, table: Table) -> str:
    fields = {
        "name": "usbid.codegen.usbids",
        "date": datetime.datetime.now(),
        "source": table.source,
        "version": table.version,
        "body": body,
    }
    text = template.format(**fields)
    return black.format_str(text, mode=black.FileMode(line_length=120))


def write(text: str, output: pathlib.Path):
    logging.info("  Writting %s...", output)
    with output.open("w", encoding="utf-8") as fobj:
        fobj.write(text)


def read_table(source: str) -> Table:
    if source.startswith(("http://", "https://")):
        return parse_url(source)
    return parse_file(source)


def run(source: str, output_dir=IDS_PATH, vendor_ids=None):
    logging.info("Starting usb ids from %s...", source)
    table = read_table(source)
    if vendor_ids:
        table = filter_vendors(table, vendor_ids)
    output_dir = pathlib.Path(output_dir)
    logging.info("  Applying black to vendors (%d)...", len(table.vendors))
    write(render(VENDOR_TEMPLATE, vendors_text(table.vendors), table), output_dir / "vendor.py")
    logging.info("  Applying black to classes (%d)...", len(table.classes))
    write(render(CLASS_TEMPLATE, classes_text(table.classes), table), output_dir / "klass.py")
    logging.info("Finished usb ids!")
    return table


def vendor_list(text: str) -> set[int]:
    try:
        return {hex_code(item, 4) for item in text.split(",") if item.strip()}
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from None


def cli():
    default_source = find_usb_ids_path() or USB_IDS_URL
    parser = argparse.ArgumentParser(prog="python -m usbid.codegen.usbids", description=__doc__)
    parser.add_argument("--source", default=str(default_source), help="usb.ids file or URL [default: %(default)s]")
    parser.add_argument("--vendors", type=vendor_list, help="comma separated vendor codes to keep (ex: 1d6b,046d)")
    parser.add_argument("--output-dir", type=pathlib.Path, default=IDS_PATH, help="[default: %(default)s]")
    return parser


def main(args=None):
    logging.basicConfig(level="INFO")
    args = cli().parse_args(args=args)
    run(args.source, args.output_dir, args.vendors)


if __name__ == "__main__":
    main()
