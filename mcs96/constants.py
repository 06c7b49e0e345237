"""Shared architecture constants for the MCS-96 (8XC196EA) decoder."""

# Opcode byte that selects the signed multiply/divide table. The real
# opcode follows it.
SIGNED_PREFIX = 0xFE

# The 8XC196EA has a 21-bit (2 MB) code address space. Extended 24-bit
# relative targets wrap inside it.
ADDRESS_MASK = 0x1FFFFF

# Register-file addresses at or below this value (the zero and ones
# registers) are never recorded as cross-references.
XREF_THRESHOLD = 0x02

# Reserved special-function registers at the bottom of the register file.
SFR_NAMES = {
    0x00: "Zero Register",
    0x02: "Ones Register",
    0x08: "INT_MASK",
    0x09: "INT_PEND",
    0x0A: "WATCHDOG",
    0x12: "INT_MASK1",
    0x13: "INT_PEND1",
    0x14: "WSR",
    0x15: "WSR1",
    0x18: "SP",
}

# Lowest register-file address holding general-purpose register RAM.
GP_RAM_START = 0x1A
GP_RAM_END = 0xFF
