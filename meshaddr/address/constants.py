"""
Mesh address constants.

Address Format (16-bit):
    0x0000          Unassigned
    0x0001-0x7FFF   Unicast      (top bit 0)
    0x8000-0xBFFF   Virtual      (top bits 10, low 14 bits = label hash)
    0xC000-0xFEFF   Group
    0xFF00-0xFFFB   Reserved for future use
    0xFFFC-0xFFFF   Fixed group addresses
"""

ADDRESS_MASK = 0xFFFF
ADDRESS_BYTES = 2

UNASSIGNED_ADDRESS = 0x0000

START_UNICAST_ADDRESS = 0x0001
END_UNICAST_ADDRESS = 0x7FFF

START_VIRTUAL_ADDRESS = 0x8000
END_VIRTUAL_ADDRESS = 0xBFFF

START_GROUP_ADDRESS = 0xC000
END_GROUP_ADDRESS = 0xFEFF

# Fixed group addresses
ALL_PROXIES_ADDRESS = 0xFFFC
ALL_FRIENDS_ADDRESS = 0xFFFD
ALL_RELAYS_ADDRESS = 0xFFFE
ALL_NODES_ADDRESS = 0xFFFF

# High/low byte bounds used by the group rule
GROUP_HIGH_BYTE_MIN = 0xC0
GROUP_HIGH_BYTE_MAX = 0xFF
RFU_HIGH_BYTE = 0xFF
RFU_LOW_BYTE_MIN = 0x00
RFU_LOW_BYTE_MAX = 0xFB

# Virtual address hash derivation
VTAD = b"vtad"
VIRTUAL_HASH_OFFSET = 12
VIRTUAL_HASH_MASK = 0x3FFF
