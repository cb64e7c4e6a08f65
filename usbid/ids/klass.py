#
# This file is part of the usbid project
#
# Copyright (c) 2023 Tiago Coutinho
# Distributed under the GPLv3 license. See LICENSE for more info.

# This file has been generated by usbid.codegen.usbids
# Date: 2026-10-18 11:02:41.315702
# Source: /usr/share/hwdata/usb.ids

klass = {
    0x00: {"name": "(Defined at Interface level)", "children": {}},
    0x01: {
        "name": "Audio",
        "children": {
            0x01: {"name": "Control Device", "children": {}},
            0x02: {"name": "Streaming", "children": {}},
            0x03: {"name": "MIDI Streaming", "children": {}},
        },
    },
    0x02: {
        "name": "Communications",
        "children": {
            0x01: {"name": "Direct Line", "children": {}},
            0x02: {
                "name": "Abstract (modem)",
                "children": {
                    0x00: {"name": "None"},
                    0x01: {"name": "AT-commands (v.25ter)"},
                    0x02: {"name": "AT-commands (PCCA101)"},
                    0x03: {"name": "AT-commands (PCCA101 + wakeup)"},
                    0x04: {"name": "AT-commands (GSM)"},
                    0x05: {"name": "AT-commands (3G)"},
                    0x06: {"name": "AT-commands (CDMA)"},
                    0xFE: {"name": "Defined by command set descriptor"},
                    0xFF: {"name": "Vendor Specific (MSFT RNDIS?)"},
                },
            },
            0x03: {"name": "Telephone", "children": {}},
            0x04: {"name": "Multi-Channel", "children": {}},
            0x05: {"name": "CAPI Control", "children": {}},
            0x06: {"name": "Ethernet Networking", "children": {}},
            0x07: {"name": "ATM Networking", "children": {}},
            0x08: {"name": "Wireless Handset Control", "children": {}},
            0x09: {"name": "Device Management", "children": {}},
            0x0A: {"name": "Mobile Direct Line", "children": {}},
            0x0B: {"name": "OBEX", "children": {}},
            0x0C: {
                "name": "Ethernet Emulation",
                "children": {
                    0x07: {"name": "Ethernet Emulation (EEM)"},
                },
            },
        },
    },
    0x03: {
        "name": "Human Interface Device",
        "children": {
            0x00: {
                "name": "No Subclass",
                "children": {
                    0x00: {"name": "None"},
                    0x01: {"name": "Keyboard"},
                    0x02: {"name": "Mouse"},
                },
            },
            0x01: {
                "name": "Boot Interface Subclass",
                "children": {
                    0x00: {"name": "None"},
                    0x01: {"name": "Keyboard"},
                    0x02: {"name": "Mouse"},
                },
            },
        },
    },
    0x05: {"name": "Physical Interface Device", "children": {}},
    0x06: {
        "name": "Imaging",
        "children": {
            0x01: {
                "name": "Still Image Capture",
                "children": {
                    0x01: {"name": "Picture Transfer Protocol (PIMA 15470)"},
                },
            },
        },
    },
    0x07: {
        "name": "Printer",
        "children": {
            0x01: {
                "name": "Printer",
                "children": {
                    0x00: {"name": "Reserved/Undefined"},
                    0x01: {"name": "Unidirectional"},
                    0x02: {"name": "Bidirectional"},
                    0x03: {"name": "IEEE 1284.4 compatible bidirectional"},
                    0xFF: {"name": "Vendor Specific"},
                },
            },
        },
    },
    0x08: {
        "name": "Mass Storage",
        "children": {
            0x01: {
                "name": "RBC (typically Flash)",
                "children": {
                    0x00: {"name": "Control/Bulk/Interrupt"},
                    0x01: {"name": "Control/Bulk"},
                    0x50: {"name": "Bulk-Only"},
                },
            },
            0x02: {"name": "SFF-8020i, MMC-2 (ATAPI)", "children": {}},
            0x03: {"name": "QIC-157", "children": {}},
            0x04: {
                "name": "Floppy (UFI)",
                "children": {
                    0x00: {"name": "Control/Bulk/Interrupt"},
                    0x01: {"name": "Control/Bulk"},
                    0x50: {"name": "Bulk-Only"},
                },
            },
            0x05: {"name": "SFF-8070i", "children": {}},
            0x06: {
                "name": "SCSI",
                "children": {
                    0x00: {"name": "Control/Bulk/Interrupt"},
                    0x01: {"name": "Control/Bulk"},
                    0x50: {"name": "Bulk-Only"},
                    0x62: {"name": "UAS"},
                },
            },
        },
    },
    0x09: {
        "name": "Hub",
        "children": {
            0x00: {
                "name": "Unused",
                "children": {
                    0x00: {"name": "Full speed (or root) hub"},
                    0x01: {"name": "Single TT"},
                    0x02: {"name": "TT per port"},
                },
            },
        },
    },
    0x0A: {
        "name": "CDC Data",
        "children": {
            0x00: {
                "name": "Unused",
                "children": {
                    0x30: {"name": "I.430 ISDN BRI"},
                    0x31: {"name": "HDLC"},
                    0x32: {"name": "Transparent"},
                    0x50: {"name": "Q.921M"},
                    0x51: {"name": "Q.921"},
                    0x52: {"name": "Q.921TM"},
                    0x90: {"name": "V.42bis"},
                    0x91: {"name": "Q.932 EuroISDN"},
                    0x92: {"name": "V.120 V.24 rate ISDN"},
                    0x93: {"name": "CAPI 2.0"},
                    0xFD: {"name": "Host Based Driver"},
                    0xFE: {"name": "CDC PUF"},
                    0xFF: {"name": "Vendor specific"},
                },
            },
        },
    },
    0x0B: {"name": "Chip/SmartCard", "children": {}},
    0x0D: {"name": "Content Security", "children": {}},
    0x0E: {
        "name": "Video",
        "children": {
            0x00: {"name": "Undefined", "children": {}},
            0x01: {"name": "Video Control", "children": {}},
            0x02: {"name": "Video Streaming", "children": {}},
            0x03: {"name": "Video Interface Collection", "children": {}},
        },
    },
    0x0F: {"name": "Personal Healthcare", "children": {}},
    0x10: {
        "name": "Audio/Video",
        "children": {
            0x01: {"name": "AVControl Interface", "children": {}},
            0x02: {"name": "AVData Video Stream", "children": {}},
            0x03: {"name": "AVData Audio Stream", "children": {}},
        },
    },
    0x58: {
        "name": "Xbox",
        "children": {
            0x42: {"name": "Controller", "children": {}},
        },
    },
    0xDC: {
        "name": "Diagnostic",
        "children": {
            0x01: {
                "name": "Reprogrammable Diagnostics",
                "children": {
                    0x01: {"name": "USB2 Compliance"},
                },
            },
        },
    },
    0xE0: {
        "name": "Wireless",
        "children": {
            0x01: {
                "name": "Radio Frequency",
                "children": {
                    0x01: {"name": "Bluetooth"},
                    0x02: {"name": "Ultra WideBand Radio Control"},
                    0x03: {"name": "RNDIS"},
                },
            },
            0x02: {
                "name": "Wireless USB Wire Adapter",
                "children": {
                    0x01: {"name": "Host Wire Adapter Control/Data Streaming"},
                    0x02: {"name": "Device Wire Adapter Control/Data Streaming"},
                    0x03: {"name": "Device Wire Adapter Isochronous Streaming"},
                },
            },
        },
    },
    0xEF: {
        "name": "Miscellaneous Device",
        "children": {
            0x01: {
                "name": "?",
                "children": {
                    0x01: {"name": "Microsoft ActiveSync"},
                    0x02: {"name": "Palm Sync"},
                },
            },
            0x02: {
                "name": "?",
                "children": {
                    0x01: {"name": "Interface Association"},
                    0x02: {"name": "Wire Adapter Multifunction Peripheral"},
                },
            },
            0x03: {
                "name": "?",
                "children": {
                    0x01: {"name": "Cable Based Association"},
                },
            },
            0x05: {"name": "USB3 Vision", "children": {}},
        },
    },
    0xFE: {
        "name": "Application Specific Interface",
        "children": {
            0x01: {"name": "Device Firmware Update", "children": {}},
            0x02: {"name": "IRDA Bridge", "children": {}},
            0x03: {
                "name": "Test and Measurement",
                "children": {
                    0x01: {"name": "TMC"},
                    0x02: {"name": "USB488"},
                },
            },
        },
    },
    0xFF: {
        "name": "Vendor Specific Class",
        "children": {
            0xFF: {
                "name": "Vendor Specific Subclass",
                "children": {
                    0xFF: {"name": "Vendor Specific Protocol"},
                },
            },
        },
    },
}
