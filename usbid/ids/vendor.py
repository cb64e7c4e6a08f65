#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

# This file has been generated by usbid.codegen.usbids
# Date: 2026-10-18 11:02:41.315702
# Source: /usr/share/hwdata/usb.ids

version = ""

vendor = {
    0x0403: {
        "name": "Future Technology Devices International, Ltd",
        "children": {
            0x6001: {"name": "FT232 Serial (UART) IC"},
            0x6010: {"name": "FT2232C/D/H Dual UART/FIFO IC"},
            0x6011: {"name": "FT4232H Quad HS USB-UART/FIFO IC"},
            0x6014: {"name": "FT232H Single HS USB-UART/FIFO IC"},
            0x6015: {"name": "Bridge(I2C/SPI/UART/FIFO)"},
        },
    },
    0x0424: {
        "name": "Microchip Technology, Inc. (formerly SMSC)",
        "children": {
            0x2514: {"name": "USB 2.0 Hub"},
            0xEC00: {"name": "SMSC9512/9514 Fast Ethernet Adapter"},
        },
    },
    0x046D: {
        "name": "Logitech, Inc.",
        "children": {
            0x0825: {"name": "Webcam C270"},
            0x082D: {"name": "HD Pro Webcam C920"},
            0xC077: {"name": "M105 Optical Mouse"},
            0xC31C: {"name": "Keyboard K120"},
            0xC52B: {"name": "Unifying Receiver"},
            0xC534: {"name": "Unifying Receiver"},
        },
    },
    0x0483: {
        "name": "STMicroelectronics",
        "children": {
            0x3748: {"name": "ST-LINK/V2"},
            0x5740: {"name": "Virtual COM Port"},
            0xDF11: {"name": "STM Device in DFU Mode"},
        },
    },
    0x04F9: {"name": "Brother Industries, Ltd", "children": {}},
    0x05AC: {
        "name": "Apple, Inc.",
        "children": {
            0x024F: {"name": "Aluminium Keyboard (ANSI)"},
        },
    },
    0x0781: {
        "name": "SanDisk Corp.",
        "children": {
            0x5567: {"name": "Cruzer Blade"},
            0x5581: {"name": "Ultra"},
        },
    },
    0x0951: {
        "name": "Kingston Technology",
        "children": {
            0x1666: {"name": "DataTraveler 100 G3/G4/SE9 G2/50"},
        },
    },
    0x0BDA: {
        "name": "Realtek Semiconductor Corp.",
        "children": {
            0x0129: {"name": "RTS5129 Card Reader Controller"},
            0x5411: {"name": "RTS5411 Hub"},
            0x8153: {"name": "RTL8153 Gigabit Ethernet Adapter"},
        },
    },
    0x10C4: {
        "name": "Silicon Labs",
        "children": {
            0xEA60: {"name": "CP210x UART Bridge"},
        },
    },
    0x18D1: {
        "name": "Google Inc.",
        "children": {
            0x4EE0: {"name": "Nexus/Pixel Device (fastboot)"},
        },
    },
    0x1A86: {
        "name": "QinHeng Electronics",
        "children": {
            0x7523: {"name": "CH340 serial converter"},
        },
    },
    0x1D6B: {
        "name": "Linux Foundation",
        "children": {
            0x0001: {"name": "1.1 root hub"},
            0x0002: {"name": "2.0 root hub"},
            0x0003: {"name": "3.0 root hub"},
            0x0100: {"name": "PTP Gadget"},
            0x0101: {"name": "Audio Gadget"},
            0x0102: {"name": "EEM Gadget"},
            0x0103: {"name": "NCM (Ethernet) Gadget"},
            0x0104: {"name": "Multifunction Composite Gadget"},
            0x0105: {"name": "FunctionFS Gadget"},
        },
    },
    0x2341: {
        "name": "Arduino SA",
        "children": {
            0x0043: {"name": "Uno R3 (CDC ACM)"},
        },
    },
    0x2E8A: {
        "name": "Raspberry Pi",
        "children": {
            0x0003: {"name": "RP2 Boot"},
        },
    },
    0x8087: {
        "name": "Intel Corp.",
        "children": {
            0x0024: {"name": "Integrated Rate Matching Hub"},
            0x0026: {"name": "AX201 Bluetooth"},
            0x0029: {"name": "AX200 Bluetooth"},
            0x0A2B: {"name": "Bluetooth wireless interface"},
        },
    },
}
