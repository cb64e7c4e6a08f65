#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

import argparse
import logging
import pathlib

from .describe import Descriptor, InterfaceSetup, classify, describe
from .lsusb import lsusb
from .parse import USB_IDS_URL, UsbIdError, load_from_file, load_from_url, load_system
from .util import hex_code


def vendor_product(text: str) -> Descriptor:
    try:
        vendor, product = text.split(":", 1)
        return Descriptor(hex_code(vendor, 4), hex_code(product, 4))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected VVVV:PPPP, got {text!r}") from None


def class_triple(text: str) -> InterfaceSetup:
    try:
        codes = [hex_code(code, 2) for code in text.split(".")]
        if not 1 <= len(codes) <= 3:
            raise ValueError
        return InterfaceSetup(*codes)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected CC[.SS[.PP]], got {text!r}") from None


def cli():
    parser = argparse.ArgumentParser(prog="usbid", description="human readable USB identification")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--ids", type=pathlib.Path, help="usb.ids file to load")
    source.add_argument("--url", help="download usb.ids from the given URL")
    source.add_argument("--download", action="store_true", help=f"download usb.ids from {USB_IDS_URL}")
    source.add_argument("--system", action="store_true", help="load the usb.ids installed on the system")
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug"],
        default="warning",
        help="log level [default: %(default)s]",
    )
    sub_parsers = parser.add_subparsers(
        title="sub-commands", description="valid sub-commands", help="select one command", required=True, dest="command"
    )
    describe_parser = sub_parsers.add_parser("describe", help="product and vendor of VVVV:PPPP code(s)")
    describe_parser.add_argument("codes", type=vendor_product, nargs="+", metavar="VVVV:PPPP")
    classify_parser = sub_parsers.add_parser("classify", help="class, subclass and protocol of CC.SS.PP code(s)")
    classify_parser.add_argument("codes", type=class_triple, nargs="+", metavar="CC.SS.PP")
    ls = sub_parsers.add_parser("ls", help="list USB devices")
    ls.add_argument("-i", "--interfaces", action="store_true", help="also list interfaces")
    ls.add_argument("--path", type=pathlib.Path, help="sysfs USB devices directory [default: /sys/bus/usb/devices]")
    return parser


def load(args):
    if args.ids:
        load_from_file(args.ids)
    elif args.url:
        load_from_url(args.url)
    elif args.download:
        load_from_url()
    elif args.system:
        load_system()


def run(args):
    load(args)
    if args.command == "describe":
        for code in args.codes:
            print(describe(code))
    elif args.command == "classify":
        for code in args.codes:
            print(classify(code))
    elif args.command == "ls":
        lsusb(args.path, args.interfaces)


def main(args=None):
    parser = cli()
    args = parser.parse_args(args=args)
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)-15s %(levelname)-5s %(name)s: %(message)s")
    try:
        run(args)
    except (OSError, UsbIdError) as error:
        parser.exit(1, f"usbid: {error}\n")
    except KeyboardInterrupt:
        print("\rCtrl-C pressed. Bailing out")


if __name__ == "__main__":
    main()
