"""
Opcode templates for the 8XC196EA.

`UNSIGNED_OPCODES` covers every first byte, including reserved slots and the
0xFE prefix marker. `SIGNED_OPCODES` holds the signed multiply/divide forms
selected by a leading 0xFE byte; their `length` excludes the prefix.

Templates are frozen and never modified; decoding copies them into fresh
`Instruction` records.
"""

from __future__ import annotations

from typing import Dict

from .bind import AddressingMode, OpcodeTemplate, Operand, VarType

UNSIGNED_OPCODES: Dict[int, OpcodeTemplate] = {
    0x00: OpcodeTemplate(
        mnemonic="SKIP",
        length=2,
        var_types=(VarType.BYTE_REG,),
        operands=(Operand.BREG,),
        mode=AddressingMode.DIRECT,
        description="TWO BYTE NO-OPERATION.",
        long_description="Does nothing. Control passes to the next sequentia instruction. This is actually a two-byte NOP i which the second byte can be any value an is simply ignored.",
        ignore=True,
    ),
    0x01: OpcodeTemplate(
        mnemonic="CLR",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.WREG,),
        mode=AddressingMode.DIRECT,
        description="CLEAR WORD.",
        long_description="Clears the value of the operand.",
    ),
    0x02: OpcodeTemplate(
        mnemonic="NOT",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.WREG,),
        mode=AddressingMode.DIRECT,
        description="COMPLEMENT WORD.",
        long_description="Complements the value of the word operand (replaces each “1” with a “0” and each “0” with a “1”).",
    ),
    0x03: OpcodeTemplate(
        mnemonic="NEG",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.WREG,),
        mode=AddressingMode.DIRECT,
        description="NEGATE INTEGER.",
        long_description="Negates the value of the integer operand.",
    ),
    0x04: OpcodeTemplate(
        mnemonic="XCH",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="EXCHANGE WORD.",
        long_description="Exchanges the value of the source word operand with that of the destination word operand.",
    ),
    0x05: OpcodeTemplate(
        mnemonic="DEC",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.BREG,),
        mode=AddressingMode.DIRECT,
        description="DECREMENT WORD.",
        long_description="Decrements the value of the operand by one.",
    ),
    0x06: OpcodeTemplate(
        mnemonic="EXT",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.LREG,),
        mode=AddressingMode.DIRECT,
        description="SIGN-EXTEND INTEGER INTO LONGINTEGER.",
        long_description="Sign-extends the low-order word of the operand throughout the high-order word of the operand.",
    ),
    0x07: OpcodeTemplate(
        mnemonic="INC",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.WREG,),
        mode=AddressingMode.DIRECT,
        description="INCREMENT WORD.",
        long_description="Increments the value of the word operand by 1.",
    ),
    0x08: OpcodeTemplate(
        mnemonic="SHR",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.WREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
        description="LOGICAL RIGHT SHIFT WORD.",
        long_description="Shifts the destination word operand to the right as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. The left bits of the result are filled with zeros. The last bit shifted out is saved in the carry flag.",
    ),
    0x09: OpcodeTemplate(
        mnemonic="SHL",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.WREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
        description="SHIFT WORD LEFT.",
        long_description="Shifts the destination word operand to the left as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. The right bits of the result are filled with zeros. The last bit shifted out is saved in the carry flag.",
    ),
    0x0A: OpcodeTemplate(
        mnemonic="SHRA",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.WREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
        description="ARITHMETIC RIGHT SHIFT WORD.",
        long_description="Shifts the destination word operand to the right as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. If the original high order bit value was “0,” zeros are shifted in. If the value was “1,” ones are shifted in. The last bit shifted out is saved in the carry flag.",
    ),
    0x0B: OpcodeTemplate(
        mnemonic="XCH",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="EXCHANGE WORD",
        long_description="Exchanges the value of the source word operand with that of the destination word operand.",
        variable_length=True,
    ),
    0x0C: OpcodeTemplate(
        mnemonic="SHRL",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.LREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
        description="LOGICAL RIGHT SHIFT DOUBLE-WORD.",
        long_description="Shifts the destination double-word operand to the right as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. The left bits of the result are filled with zeros. The last bit shifted out is saved in the carry flag.",
    ),
    0x0D: OpcodeTemplate(
        mnemonic="SHLL",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.LREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
        description="SHIFT DOUBLE-WORD LEFT.",
        long_description="Shifts the destination double-word operand to the left as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. The right bits of the result are filled with zeros. The last bit shifted out is saved in the carry flag.",
    ),
    0x0E: OpcodeTemplate(
        mnemonic="SHRAL",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.LREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
        description="ARITHMETIC RIGHT SHIFT DOUBLEWORD.",
        long_description="Shifts the destination double-word operand to the right as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. If the original high order bit value was “0,” zeros are shifted in. If the value was “1,” ones are shifted in.",
    ),
    0x0F: OpcodeTemplate(
        mnemonic="NORML",
        length=3,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.LREG, Operand.BREG),
        mode=AddressingMode.DIRECT,
        description="NORMALIZE LONG-INTEGER.",
        long_description="Normalizes the source (leftmost) long-integer operand. (That is, it shifts the operand to the left until its most significant bit is “1” or until it has performed 31 shifts). If the most significant bit is still “0” after 31 shifts, the instruction stops the process and sets the zero flag. The instruction stores the actual number of shifts performed in the destination (rightmost) operand.",
    ),
    0x10: OpcodeTemplate(
        mnemonic="Reserved",
        length=1,
        reserved=True,
    ),
    0x11: OpcodeTemplate(
        mnemonic="CLRB",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.BREG,),
        mode=AddressingMode.DIRECT,
        description="CLEAR BYTE.",
        long_description="Clears the value of the operand.",
    ),
    0x12: OpcodeTemplate(
        mnemonic="NOTB",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.BREG,),
        mode=AddressingMode.DIRECT,
        description="COMPLEMENT BYTE.",
        long_description="Complements the value of the byte operand (replaces each “1” with a “0” and each “0” with a “1”).",
    ),
    0x13: OpcodeTemplate(
        mnemonic="NEGB",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.BREG,),
        mode=AddressingMode.DIRECT,
        description="NEGATE SHORT-INTEGER.",
        long_description="Negates the value of the short-integer operand.",
    ),
    0x14: OpcodeTemplate(
        mnemonic="XCHB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="EXCHANGE BYTE.",
        long_description="Exchanges the value of the source byte operand with that of the destination byte operand.",
    ),
    0x15: OpcodeTemplate(
        mnemonic="DECB",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.BREG,),
        mode=AddressingMode.DIRECT,
        description="DECREMENT BYTE.",
        long_description="Decrements the value of the operand by one.",
    ),
    0x16: OpcodeTemplate(
        mnemonic="EXTB",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.WREG,),
        mode=AddressingMode.DIRECT,
        description="SIGN-EXTEND SHORT-INTEGER INTO INTEGER.",
        long_description="Sign-extends the low-order byte of the operand throughout the high-order byte of the operand.",
    ),
    0x17: OpcodeTemplate(
        mnemonic="INCB",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.BREG,),
        mode=AddressingMode.DIRECT,
        description="INCREMENT BYTE.",
        long_description="Increments the value of the byte operand by 1.",
    ),
    0x18: OpcodeTemplate(
        mnemonic="SHRB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.BREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
        description="LOGICAL RIGHT SHIFT BYTE.",
        long_description="Shifts the destination byte operand to the right as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. The left bits of the result are filled with zeros. The last bit shifted out is saved in the carry flag.",
    ),
    0x19: OpcodeTemplate(
        mnemonic="SHLB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.BREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
        description="SHIFT BYTE LEFT.",
        long_description="Shifts the destination byte operand to the left as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. The right bits of the result are filled with zeros. The last bit shifted out is saved in the carry flag.",
    ),
    0x1A: OpcodeTemplate(
        mnemonic="SHRAB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.BREG, Operand.COUNT),
        mode=AddressingMode.DIRECT,
    ),
    0x1B: OpcodeTemplate(
        mnemonic="XCHB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.COUNT),
        operands=(Operand.BREG, Operand.COUNT),
        mode=AddressingMode.INDEXED,
        description="ARITHMETIC RIGHT SHIFT BYTE.",
        long_description="Shifts the destination byte operand to the right as many times as specified by the count operand. The count may be specified either as an immediate value in the range of 0 to 15 (0FH), inclusive, or as the content of any register (10–0FFH) with a value in the range of 0 to 31 (1FH), inclusive. If the original high order bit value was “0,” zeros are shifted in. If the value was “1,” ones are shifted in. The last bit shifted out is saved in the carry flag.",
        variable_length=True,
    ),
    0x1C: OpcodeTemplate(
        mnemonic="EST",
        length=3,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.WREG, Operand.TREG),
        mode=AddressingMode.EXTENDED_INDIRECT,
        description="EXTENDED STORE WORD.",
        long_description="Stores the value of the source (leftmost) word operand into the destination (rightmost) operand. This instruction allows you to move data from the lower register file to anywhere in the 16-Mbyte address space.",
    ),
    0x1D: OpcodeTemplate(
        mnemonic="EST",
        length=6,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.WREG, Operand.TREG),
        mode=AddressingMode.EXTENDED_INDEXED,
        description="EXTENDED STORE WORD.",
        long_description="Stores the value of the source (leftmost) word operand into the destination (rightmost) operand. This instruction allows you to move data from the lower register file to anywhere in the 16-Mbyte address space.",
    ),
    0x1E: OpcodeTemplate(
        mnemonic="ESTB",
        length=3,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.BREG, Operand.TREG),
        mode=AddressingMode.EXTENDED_INDIRECT,
        description="EXTENDED STORE BYTE.",
        long_description="Stores the value of the source (leftmost) byte operand into the destination (rightmost) operand. This instruction allows you to move data from the lower register file to anywhere in the 16- Mbyte address space.",
    ),
    0x1F: OpcodeTemplate(
        mnemonic="ESTB",
        length=6,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.BREG, Operand.TREG),
        mode=AddressingMode.EXTENDED_INDEXED,
        description="EXTENDED STORE BYTE.",
        long_description="Stores the value of the source (leftmost) byte operand into the destination (rightmost) operand. This instruction allows you to move data from the lower register file to anywhere in the 16- Mbyte address space.",
    ),
    0x20: OpcodeTemplate(
        mnemonic="SJMP",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –1024 to +1023, inclusive.",
    ),
    0x21: OpcodeTemplate(
        mnemonic="SJMP",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –1024 to +1023, inclusive.",
    ),
    0x22: OpcodeTemplate(
        mnemonic="SJMP",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –1024 to +1023, inclusive.",
    ),
    0x23: OpcodeTemplate(
        mnemonic="SJMP",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –1024 to +1023, inclusive.",
    ),
    0x24: OpcodeTemplate(
        mnemonic="SJMP",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –1024 to +1023, inclusive.",
    ),
    0x25: OpcodeTemplate(
        mnemonic="SJMP",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –1024 to +1023, inclusive.",
    ),
    0x26: OpcodeTemplate(
        mnemonic="SJMP",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –1024 to +1023, inclusive.",
    ),
    0x27: OpcodeTemplate(
        mnemonic="SJMP",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –1024 to +1023, inclusive.",
    ),
    0x28: OpcodeTemplate(
        mnemonic="SCALL",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –1024 to +1023.",
    ),
    0x29: OpcodeTemplate(
        mnemonic="SCALL",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –1024 to +1023.",
    ),
    0x2A: OpcodeTemplate(
        mnemonic="SCALL",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –1024 to +1023.",
    ),
    0x2B: OpcodeTemplate(
        mnemonic="SCALL",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –1024 to +1023.",
    ),
    0x2C: OpcodeTemplate(
        mnemonic="SCALL",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –1024 to +1023.",
    ),
    0x2D: OpcodeTemplate(
        mnemonic="SCALL",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –1024 to +1023.",
    ),
    0x2E: OpcodeTemplate(
        mnemonic="SCALL",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –1024 to +1023.",
    ),
    0x2F: OpcodeTemplate(
        mnemonic="SCALL",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="SHORT CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –1024 to +1023.",
    ),
    0x30: OpcodeTemplate(
        mnemonic="JBC",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS CLEAR.",
        long_description="Tests the specified bit. If the bit is set, control passes to the next sequential instruction. If the bit is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x31: OpcodeTemplate(
        mnemonic="JBC",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS CLEAR.",
        long_description="Tests the specified bit. If the bit is set, control passes to the next sequential instruction. If the bit is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x32: OpcodeTemplate(
        mnemonic="JBC",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS CLEAR.",
        long_description="Tests the specified bit. If the bit is set, control passes to the next sequential instruction. If the bit is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x33: OpcodeTemplate(
        mnemonic="JBC",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS CLEAR.",
        long_description="Tests the specified bit. If the bit is set, control passes to the next sequential instruction. If the bit is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x34: OpcodeTemplate(
        mnemonic="JBC",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS CLEAR.",
        long_description="Tests the specified bit. If the bit is set, control passes to the next sequential instruction. If the bit is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x35: OpcodeTemplate(
        mnemonic="JBC",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS CLEAR.",
        long_description="Tests the specified bit. If the bit is set, control passes to the next sequential instruction. If the bit is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x36: OpcodeTemplate(
        mnemonic="JBC",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS CLEAR.",
        long_description="Tests the specified bit. If the bit is set, control passes to the next sequential instruction. If the bit is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x37: OpcodeTemplate(
        mnemonic="JBC",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS CLEAR.",
        long_description="Tests the specified bit. If the bit is set, control passes to the next sequential instruction. If the bit is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x38: OpcodeTemplate(
        mnemonic="JBS",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS SET.",
        long_description="Tests the specified bit. If the bit is clear, control passes to the next sequential instruction. If the bit is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x39: OpcodeTemplate(
        mnemonic="JBS",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS SET.",
        long_description="Tests the specified bit. If the bit is clear, control passes to the next sequential instruction. If the bit is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x3A: OpcodeTemplate(
        mnemonic="JBS",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS SET.",
        long_description="Tests the specified bit. If the bit is clear, control passes to the next sequential instruction. If the bit is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x3B: OpcodeTemplate(
        mnemonic="JBS",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS SET.",
        long_description="Tests the specified bit. If the bit is clear, control passes to the next sequential instruction. If the bit is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x3C: OpcodeTemplate(
        mnemonic="JBS",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS SET.",
        long_description="Tests the specified bit. If the bit is clear, control passes to the next sequential instruction. If the bit is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x3D: OpcodeTemplate(
        mnemonic="JBS",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS SET.",
        long_description="Tests the specified bit. If the bit is clear, control passes to the next sequential instruction. If the bit is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x3E: OpcodeTemplate(
        mnemonic="JBS",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS SET.",
        long_description="Tests the specified bit. If the bit is clear, control passes to the next sequential instruction. If the bit is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x3F: OpcodeTemplate(
        mnemonic="JBS",
        length=3,
        var_count=3,
        var_types=(VarType.BYTEREG, VarType.BITNO, VarType.ADDR),
        operands=(Operand.BREG, Operand.BITNO, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="JUMP IF BIT IS SET.",
        long_description="Tests the specified bit. If the bit is clear, control passes to the next sequential instruction. If the bit is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0x40: OpcodeTemplate(
        mnemonic="AND",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="LOGICAL AND WORDS.",
        long_description="ANDs the two source word operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x41: OpcodeTemplate(
        mnemonic="AND",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOGICAL AND WORDS.",
        long_description="ANDs the two source word operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x42: OpcodeTemplate(
        mnemonic="AND",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="LOGICAL AND WORDS.",
        long_description="ANDs the two source word operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x43: OpcodeTemplate(
        mnemonic="AND",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="LOGICAL AND WORDS.",
        long_description="ANDs the two source word operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
        variable_length=True,
    ),
    0x44: OpcodeTemplate(
        mnemonic="ADD",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="ADD WORDS.",
        long_description="Adds the two source word operands and stores the sum into the destination operand.",
    ),
    0x45: OpcodeTemplate(
        mnemonic="ADD",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="ADD WORDS.",
        long_description="Adds the two source word operands and stores the sum into the destination operand.",
    ),
    0x46: OpcodeTemplate(
        mnemonic="ADD",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="ADD WORDS.",
        long_description="Adds the two source word operands and stores the sum into the destination operand.",
    ),
    0x47: OpcodeTemplate(
        mnemonic="ADD",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="ADD WORDS.",
        long_description="Adds the two source word operands and stores the sum into the destination operand.",
        variable_length=True,
    ),
    0x48: OpcodeTemplate(
        mnemonic="SUB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="SUBTRACT WORDS.",
        long_description="Subtracts the first source word operand from the second, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x49: OpcodeTemplate(
        mnemonic="SUB",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="SUBTRACT WORDS.",
        long_description="Subtracts the first source word operand from the second, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x4A: OpcodeTemplate(
        mnemonic="SUB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="SUBTRACT WORDS.",
        long_description="Subtracts the first source word operand from the second, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x4B: OpcodeTemplate(
        mnemonic="SUB",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DWREG, Operand.SWREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="SUBTRACT WORDS.",
        long_description="Subtracts the first source word operand from the second, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
        variable_length=True,
    ),
    0x4C: OpcodeTemplate(
        mnemonic="MULU",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="MULTIPLY WORDS, UNSIGNED.",
        long_description="Multiplies the two source word operands, using unsigned arithmetic, and stores the 32-bit result into the destination double-word operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x4D: OpcodeTemplate(
        mnemonic="MULU",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="MULTIPLY WORDS, UNSIGNED.",
        long_description="Multiplies the two source word operands, using unsigned arithmetic, and stores the 32-bit result into the destination double-word operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x4E: OpcodeTemplate(
        mnemonic="MULU",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="MULTIPLY WORDS, UNSIGNED.",
        long_description="Multiplies the two source word operands, using unsigned arithmetic, and stores the 32-bit result into the destination double-word operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x4F: OpcodeTemplate(
        mnemonic="MULU",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="MULTIPLY WORDS, UNSIGNED.",
        long_description="Multiplies the two source word operands, using unsigned arithmetic, and stores the 32-bit result into the destination double-word operand. The sticky bit flag is undefined after the instruction is executed.",
        variable_length=True,
    ),
    0x50: OpcodeTemplate(
        mnemonic="ANDB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="LOGICAL AND BYTES.",
        long_description="ANDs the two source byte operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x51: OpcodeTemplate(
        mnemonic="ANDB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOGICAL AND BYTES.",
        long_description="ANDs the two source byte operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x52: OpcodeTemplate(
        mnemonic="ANDB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="LOGICAL AND BYTES.",
        long_description="ANDs the two source byte operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x53: OpcodeTemplate(
        mnemonic="ANDB",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="LOGICAL AND BYTES.",
        long_description="ANDs the two source byte operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
        variable_length=True,
    ),
    0x54: OpcodeTemplate(
        mnemonic="ADDB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="ADD BYTES.",
        long_description="Adds the two source byte operands and stores the sum into the destination operand.",
    ),
    0x55: OpcodeTemplate(
        mnemonic="ADDB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="ADD BYTES.",
        long_description="Adds the two source byte operands and stores the sum into the destination operand.",
    ),
    0x56: OpcodeTemplate(
        mnemonic="ADDB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="ADD BYTES.",
        long_description="Adds the two source byte operands and stores the sum into the destination operand.",
    ),
    0x57: OpcodeTemplate(
        mnemonic="ADDB",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="ADD BYTES.",
        long_description="Adds the two source byte operands and stores the sum into the destination operand.",
        variable_length=True,
    ),
    0x58: OpcodeTemplate(
        mnemonic="SUBB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="SUBTRACT BYTES.",
        long_description="Subtracts the second source byte operand from the first, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x59: OpcodeTemplate(
        mnemonic="SUBB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="SUBTRACT BYTES.",
        long_description="Subtracts the second source byte operand from the first, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x5A: OpcodeTemplate(
        mnemonic="SUBB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="SUBTRACT BYTES.",
        long_description="Subtracts the second source byte operand from the first, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x5B: OpcodeTemplate(
        mnemonic="SUBB",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.DBREG, Operand.SBREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="SUBTRACT BYTES.",
        long_description="Subtracts the second source byte operand from the first, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
        variable_length=True,
    ),
    0x5C: OpcodeTemplate(
        mnemonic="MULUB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.WREG, Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="MULTIPLY BYTES, UNSIGNED.",
        long_description="Multiplies the source and destination operands, using unsigned arithmetic, and stores the word result into the destination operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x5D: OpcodeTemplate(
        mnemonic="MULUB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.WREG, Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="MULTIPLY BYTES, UNSIGNED.",
        long_description="Multiplies the source and destination operands, using unsigned arithmetic, and stores the word result into the destination operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x5E: OpcodeTemplate(
        mnemonic="MULUB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.WREG, Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="MULTIPLY BYTES, UNSIGNED.",
        long_description="Multiplies the source and destination operands, using unsigned arithmetic, and stores the word result into the destination operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x5F: OpcodeTemplate(
        mnemonic="MULUB",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.WREG, Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="MULTIPLY BYTES, UNSIGNED.",
        long_description="Multiplies the source and destination operands, using unsigned arithmetic, and stores the word result into the destination operand. The sticky bit flag is undefined after the instruction is executed.",
        variable_length=True,
    ),
    0x60: OpcodeTemplate(
        mnemonic="AND",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="LOGICAL AND WORDS.",
        long_description="ANDs the source and destination word operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x61: OpcodeTemplate(
        mnemonic="AND",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOGICAL AND WORDS.",
        long_description="ANDs the source and destination word operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x62: OpcodeTemplate(
        mnemonic="AND",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="LOGICAL AND WORDS.",
        long_description="ANDs the source and destination word operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x63: OpcodeTemplate(
        mnemonic="AND",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="LOGICAL AND WORDS.",
        long_description="ANDs the source and destination word operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
        variable_length=True,
    ),
    0x64: OpcodeTemplate(
        mnemonic="ADD",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="ADD WORDS.",
        long_description="Adds the source and destination word operands and stores the sum into the destination operand.",
    ),
    0x65: OpcodeTemplate(
        mnemonic="ADD",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="ADD WORDS.",
        long_description="Adds the source and destination word operands and stores the sum into the destination operand.",
    ),
    0x66: OpcodeTemplate(
        mnemonic="ADD",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="ADD WORDS.",
        long_description="Adds the source and destination word operands and stores the sum into the destination operand.",
    ),
    0x67: OpcodeTemplate(
        mnemonic="ADD",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="ADD WORDS.",
        long_description="Adds the source and destination word operands and stores the sum into the destination operand.",
        variable_length=True,
    ),
    0x68: OpcodeTemplate(
        mnemonic="SUB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="SUBTRACT WORDS.",
        long_description="Subtracts the source word operand from the destination word operand, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x69: OpcodeTemplate(
        mnemonic="SUB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="SUBTRACT WORDS.",
        long_description="Subtracts the source word operand from the destination word operand, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x6A: OpcodeTemplate(
        mnemonic="SUB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="SUBTRACT WORDS.",
        long_description="Subtracts the source word operand from the destination word operand, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x6B: OpcodeTemplate(
        mnemonic="SUB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="SUBTRACT WORDS.",
        long_description="Subtracts the source word operand from the destination word operand, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
        variable_length=True,
    ),
    0x6C: OpcodeTemplate(
        mnemonic="MULU",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="MULTIPLY WORDS, UNSIGNED.",
        long_description="Multiplies the source and destination word operands, using unsigned arithmetic, and stores the 32- bit result into the destination double-word operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x6D: OpcodeTemplate(
        mnemonic="MULU",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="MULTIPLY WORDS, UNSIGNED.",
        long_description="Multiplies the source and destination word operands, using unsigned arithmetic, and stores the 32- bit result into the destination double-word operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x6E: OpcodeTemplate(
        mnemonic="MULU",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="MULTIPLY WORDS, UNSIGNED.",
        long_description="Multiplies the source and destination word operands, using unsigned arithmetic, and stores the 32- bit result into the destination double-word operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x6F: OpcodeTemplate(
        mnemonic="MULU",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="MULTIPLY WORDS, UNSIGNED.",
        long_description="Multiplies the source and destination word operands, using unsigned arithmetic, and stores the 32- bit result into the destination double-word operand. The sticky bit flag is undefined after the instruction is executed.",
        variable_length=True,
    ),
    0x70: OpcodeTemplate(
        mnemonic="ANDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="LOGICAL AND BYTES.",
        long_description="ANDs the source and destination byte operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x71: OpcodeTemplate(
        mnemonic="ANDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOGICAL AND BYTES.",
        long_description="ANDs the source and destination byte operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x72: OpcodeTemplate(
        mnemonic="ANDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="LOGICAL AND BYTES.",
        long_description="ANDs the source and destination byte operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
    ),
    0x73: OpcodeTemplate(
        mnemonic="ANDB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="LOGICAL AND BYTES.",
        long_description="ANDs the source and destination byte operands and stores the result into the destination operand. The result has ones in only the bit positions in which both operands had a “1” and zeros in all other bit positions.",
        variable_length=True,
    ),
    0x74: OpcodeTemplate(
        mnemonic="ADDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="ADD BYTES.",
        long_description="Adds the source and destination byte operands and stores the sum into the destination operand.",
    ),
    0x75: OpcodeTemplate(
        mnemonic="ADDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="ADD BYTES.",
        long_description="Adds the source and destination byte operands and stores the sum into the destination operand.",
    ),
    0x76: OpcodeTemplate(
        mnemonic="ADDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="ADD BYTES.",
        long_description="Adds the source and destination byte operands and stores the sum into the destination operand.",
    ),
    0x77: OpcodeTemplate(
        mnemonic="ADDB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="ADD BYTES.",
        long_description="Adds the source and destination byte operands and stores the sum into the destination operand.",
        variable_length=True,
    ),
    0x78: OpcodeTemplate(
        mnemonic="SUBB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="SUBTRACT BYTES.",
        long_description="Subtracts the source byte operand from the destination byte operand, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x79: OpcodeTemplate(
        mnemonic="SUBB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="SUBTRACT BYTES.",
        long_description="Subtracts the source byte operand from the destination byte operand, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x7A: OpcodeTemplate(
        mnemonic="SUBB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="SUBTRACT BYTES.",
        long_description="Subtracts the source byte operand from the destination byte operand, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
    ),
    0x7B: OpcodeTemplate(
        mnemonic="SUBB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="SUBTRACT BYTES.",
        long_description="Subtracts the source byte operand from the destination byte operand, stores the result in the destination operand, and sets the carry flag as the complement of borrow.",
        variable_length=True,
    ),
    0x7C: OpcodeTemplate(
        mnemonic="MULUB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="MULTIPLY BYTES",
        long_description="Multiplies the source and destination operands, using unsigned arithmetic, and stores the word result into the destination operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x7D: OpcodeTemplate(
        mnemonic="MULUB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="MULTIPLY BYTES",
        long_description="Multiplies the source and destination operands, using unsigned arithmetic, and stores the word result into the destination operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x7E: OpcodeTemplate(
        mnemonic="MULUB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="MULTIPLY BYTES",
        long_description="Multiplies the source and destination operands, using unsigned arithmetic, and stores the word result into the destination operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x7F: OpcodeTemplate(
        mnemonic="MULUB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="MULTIPLY BYTES",
        long_description="Multiplies the source and destination operands, using unsigned arithmetic, and stores the word result into the destination operand. The sticky bit flag is undefined after the instruction is executed.",
        variable_length=True,
    ),
    0x80: OpcodeTemplate(
        mnemonic="OR",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="LOGICAL OR WORDS.",
        long_description="ORs the source word operand with the destination word operand and replaces the original destination operand with the result. The result has a “1” in each bit position in which either the source or destination operand had a “1”.",
    ),
    0x81: OpcodeTemplate(
        mnemonic="OR",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOGICAL OR WORDS.",
        long_description="ORs the source word operand with the destination word operand and replaces the original destination operand with the result. The result has a “1” in each bit position in which either the source or destination operand had a “1”.",
    ),
    0x82: OpcodeTemplate(
        mnemonic="OR",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="LOGICAL OR WORDS.",
        long_description="ORs the source word operand with the destination word operand and replaces the original destination operand with the result. The result has a “1” in each bit position in which either the source or destination operand had a “1”.",
    ),
    0x83: OpcodeTemplate(
        mnemonic="OR",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="LOGICAL OR WORDS.",
        long_description="ORs the source word operand with the destination word operand and replaces the original destination operand with the result. The result has a “1” in each bit position in which either the source or destination operand had a “1”.",
        variable_length=True,
    ),
    0x84: OpcodeTemplate(
        mnemonic="XOR",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="LOGICAL EXCLUSIVE-OR WORDS",
        long_description="XORs the source word operand with the destination word operand and stores the result in the destination operand. The result has ones in the bit positions in which either operand (but not both) had a “1” and zeros in all other bit positions.",
    ),
    0x85: OpcodeTemplate(
        mnemonic="XOR",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOGICAL EXCLUSIVE-OR WORDS",
        long_description="XORs the source word operand with the destination word operand and stores the result in the destination operand. The result has ones in the bit positions in which either operand (but not both) had a “1” and zeros in all other bit positions.",
    ),
    0x86: OpcodeTemplate(
        mnemonic="XOR",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="LOGICAL EXCLUSIVE-OR WORDS",
        long_description="XORs the source word operand with the destination word operand and stores the result in the destination operand. The result has ones in the bit positions in which either operand (but not both) had a “1” and zeros in all other bit positions.",
    ),
    0x87: OpcodeTemplate(
        mnemonic="XOR",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="LOGICAL EXCLUSIVE-OR WORDS",
        long_description="XORs the source word operand with the destination word operand and stores the result in the destination operand. The result has ones in the bit positions in which either operand (but not both) had a “1” and zeros in all other bit positions.",
        variable_length=True,
    ),
    0x88: OpcodeTemplate(
        mnemonic="CMP",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="COMPARE WORDS.",
        long_description="Subtracts the source word operand from the destination word operand. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
    ),
    0x89: OpcodeTemplate(
        mnemonic="CMP",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="COMPARE WORDS.",
        long_description="Subtracts the source word operand from the destination word operand. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
    ),
    0x8A: OpcodeTemplate(
        mnemonic="CMP",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="COMPARE WORDS.",
        long_description="Subtracts the source word operand from the destination word operand. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
    ),
    0x8B: OpcodeTemplate(
        mnemonic="CMP",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="COMPARE WORDS.",
        long_description="Subtracts the source word operand from the destination word operand. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
        variable_length=True,
    ),
    0x8C: OpcodeTemplate(
        mnemonic="DIVU",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="DIVIDE WORDS, UNSIGNED.",
        long_description="Divides the contents of the destination double-word operand by the contents of the source word operand, using unsigned arithmetic. It stores the quotient into the low-order word (i.e., the word with the lower address) of the destination operand and the remainder into the high-order word. The following two statements are performed concurrently.",
    ),
    0x8D: OpcodeTemplate(
        mnemonic="DIVU",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="DIVIDE WORDS, UNSIGNED.",
        long_description="Divides the contents of the destination double-word operand by the contents of the source word operand, using unsigned arithmetic. It stores the quotient into the low-order word (i.e., the word with the lower address) of the destination operand and the remainder into the high-order word. The following two statements are performed concurrently.",
    ),
    0x8E: OpcodeTemplate(
        mnemonic="DIVU",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="DIVIDE WORDS, UNSIGNED.",
        long_description="Divides the contents of the destination double-word operand by the contents of the source word operand, using unsigned arithmetic. It stores the quotient into the low-order word (i.e., the word with the lower address) of the destination operand and the remainder into the high-order word. The following two statements are performed concurrently.",
    ),
    0x8F: OpcodeTemplate(
        mnemonic="DIVU",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="DIVIDE WORDS, UNSIGNED.",
        long_description="Divides the contents of the destination double-word operand by the contents of the source word operand, using unsigned arithmetic. It stores the quotient into the low-order word (i.e., the word with the lower address) of the destination operand and the remainder into the high-order word. The following two statements are performed concurrently.",
        variable_length=True,
    ),
    0x90: OpcodeTemplate(
        mnemonic="ORB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="LOGICAL OR BYTES.",
        long_description="ORs the source byte operand with the destination byte operand and replaces the original destination operand with the result. The result has a “1” in each bit position in which either the source or destination operand had a “1”.",
    ),
    0x91: OpcodeTemplate(
        mnemonic="ORB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOGICAL OR BYTES.",
        long_description="ORs the source byte operand with the destination byte operand and replaces the original destination operand with the result. The result has a “1” in each bit position in which either the source or destination operand had a “1”.",
    ),
    0x92: OpcodeTemplate(
        mnemonic="ORB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="LOGICAL OR BYTES.",
        long_description="ORs the source byte operand with the destination byte operand and replaces the original destination operand with the result. The result has a “1” in each bit position in which either the source or destination operand had a “1”.",
    ),
    0x93: OpcodeTemplate(
        mnemonic="ORB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="LOGICAL OR BYTES.",
        long_description="ORs the source byte operand with the destination byte operand and replaces the original destination operand with the result. The result has a “1” in each bit position in which either the source or destination operand had a “1”.",
        variable_length=True,
    ),
    0x94: OpcodeTemplate(
        mnemonic="XORB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="LOGICAL EXCLUSIVE-OR BYTES.",
        long_description="XORs the source byte operand with the destination byte operand and stores the result in the destination operand. The result has ones in the bit positions in which either operand (but not both) had a “1” and zeros in all other bit positions.",
    ),
    0x95: OpcodeTemplate(
        mnemonic="XORB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOGICAL EXCLUSIVE-OR BYTES.",
        long_description="XORs the source byte operand with the destination byte operand and stores the result in the destination operand. The result has ones in the bit positions in which either operand (but not both) had a “1” and zeros in all other bit positions.",
    ),
    0x96: OpcodeTemplate(
        mnemonic="XORB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="LOGICAL EXCLUSIVE-OR BYTES.",
        long_description="XORs the source byte operand with the destination byte operand and stores the result in the destination operand. The result has ones in the bit positions in which either operand (but not both) had a “1” and zeros in all other bit positions.",
    ),
    0x97: OpcodeTemplate(
        mnemonic="XORB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="LOGICAL EXCLUSIVE-OR BYTES.",
        long_description="XORs the source byte operand with the destination byte operand and stores the result in the destination operand. The result has ones in the bit positions in which either operand (but not both) had a “1” and zeros in all other bit positions.",
        variable_length=True,
    ),
    0x98: OpcodeTemplate(
        mnemonic="CMPB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="COMPARE BYTES.",
        long_description="Subtracts the source byte operand from the destination byte operand. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
    ),
    0x99: OpcodeTemplate(
        mnemonic="CMPB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="COMPARE BYTES.",
        long_description="Subtracts the source byte operand from the destination byte operand. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
    ),
    0x9A: OpcodeTemplate(
        mnemonic="CMPB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="COMPARE BYTES.",
        long_description="Subtracts the source byte operand from the destination byte operand. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
    ),
    0x9B: OpcodeTemplate(
        mnemonic="CMPB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="COMPARE BYTES.",
        long_description="Subtracts the source byte operand from the destination byte operand. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
        variable_length=True,
    ),
    0x9C: OpcodeTemplate(
        mnemonic="DIVUB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="DIVIDE BYTES, UNSIGNED.",
        long_description="This instruction divides the contents of the destination word operand by the contents of the source byte operand, using unsigned arithmetic. It stores the quotient into the low-order byte (i.e., the byte with the lower address) of the destination operand and the remainder into the high-order byte. The following two statements are performed concurrently.",
    ),
    0x9D: OpcodeTemplate(
        mnemonic="DIVUB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="DIVIDE BYTES, UNSIGNED.",
        long_description="This instruction divides the contents of the destination word operand by the contents of the source byte operand, using unsigned arithmetic. It stores the quotient into the low-order byte (i.e., the byte with the lower address) of the destination operand and the remainder into the high-order byte. The following two statements are performed concurrently.",
    ),
    0x9E: OpcodeTemplate(
        mnemonic="DIVUB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="DIVIDE BYTES, UNSIGNED.",
        long_description="This instruction divides the contents of the destination word operand by the contents of the source byte operand, using unsigned arithmetic. It stores the quotient into the low-order byte (i.e., the byte with the lower address) of the destination operand and the remainder into the high-order byte. The following two statements are performed concurrently.",
    ),
    0x9F: OpcodeTemplate(
        mnemonic="DIVUB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="DIVIDE BYTES, UNSIGNED.",
        long_description="This instruction divides the contents of the destination word operand by the contents of the source byte operand, using unsigned arithmetic. It stores the quotient into the low-order byte (i.e., the byte with the lower address) of the destination operand and the remainder into the high-order byte. The following two statements are performed concurrently.",
        variable_length=True,
    ),
    0xA0: OpcodeTemplate(
        mnemonic="LD",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="LOAD WORD.",
        long_description="Loads the value of the source word operand into the destination operand.",
    ),
    0xA1: OpcodeTemplate(
        mnemonic="LD",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOAD WORD.",
        long_description="Loads the value of the source word operand into the destination operand.",
    ),
    0xA2: OpcodeTemplate(
        mnemonic="LD",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="LOAD WORD.",
        long_description="Loads the value of the source word operand into the destination operand.",
    ),
    0xA3: OpcodeTemplate(
        mnemonic="LD",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="LOAD WORD.",
        long_description="Loads the value of the source word operand into the destination operand.",
        variable_length=True,
    ),
    0xA4: OpcodeTemplate(
        mnemonic="ADDC",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="ADD WORDS WITH CARRY.",
        long_description="Adds the source and destination word operands and the carry flag (0 or 1) and stores the sum into the destination operand.",
    ),
    0xA5: OpcodeTemplate(
        mnemonic="ADDC",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="ADD WORDS WITH CARRY.",
        long_description="Adds the source and destination word operands and the carry flag (0 or 1) and stores the sum into the destination operand.",
    ),
    0xA6: OpcodeTemplate(
        mnemonic="ADDC",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="ADD WORDS WITH CARRY.",
        long_description="Adds the source and destination word operands and the carry flag (0 or 1) and stores the sum into the destination operand.",
    ),
    0xA7: OpcodeTemplate(
        mnemonic="ADDC",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="ADD WORDS WITH CARRY.",
        long_description="Adds the source and destination word operands and the carry flag (0 or 1) and stores the sum into the destination operand.",
        variable_length=True,
    ),
    0xA8: OpcodeTemplate(
        mnemonic="SUBC",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="SUBTRACT WORDS WITH BORROW.",
        long_description="Subtracts the source word operand from the destination word operand. If the carry flag was clear, SUBC subtracts 1 from the result. It stores the result in the destination operand and sets the carry flag as the complement of borrow.",
    ),
    0xA9: OpcodeTemplate(
        mnemonic="SUBC",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="SUBTRACT WORDS WITH BORROW.",
        long_description="Subtracts the source word operand from the destination word operand. If the carry flag was clear, SUBC subtracts 1 from the result. It stores the result in the destination operand and sets the carry flag as the complement of borrow.",
    ),
    0xAA: OpcodeTemplate(
        mnemonic="SUBC",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="SUBTRACT WORDS WITH BORROW.",
        long_description="Subtracts the source word operand from the destination word operand. If the carry flag was clear, SUBC subtracts 1 from the result. It stores the result in the destination operand and sets the carry flag as the complement of borrow.",
    ),
    0xAB: OpcodeTemplate(
        mnemonic="SUBC",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="SUBTRACT WORDS WITH BORROW.",
        long_description="Subtracts the source word operand from the destination word operand. If the carry flag was clear, SUBC subtracts 1 from the result. It stores the result in the destination operand and sets the carry flag as the complement of borrow.",
        variable_length=True,
    ),
    0xAC: OpcodeTemplate(
        mnemonic="LDBZE",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="LOAD BYTE ZERO-EXTENDED.",
        long_description="Zeroextends the value of the source byte operand and loads it into the destination word operand.",
    ),
    0xAD: OpcodeTemplate(
        mnemonic="LDBZE",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOAD BYTE ZERO-EXTENDED.",
        long_description="Zeroextends the value of the source byte operand and loads it into the destination word operand.",
    ),
    0xAE: OpcodeTemplate(
        mnemonic="LDBZE",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="LOAD BYTE ZERO-EXTENDED.",
        long_description="Zeroextends the value of the source byte operand and loads it into the destination word operand.",
    ),
    0xAF: OpcodeTemplate(
        mnemonic="LDBZE",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="LOAD BYTE ZERO-EXTENDED.",
        long_description="Zeroextends the value of the source byte operand and loads it into the destination word operand.",
        variable_length=True,
    ),
    0xB0: OpcodeTemplate(
        mnemonic="LDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="LOAD BYTE.",
        long_description="Loads the value of the source byte operand into the destination operand.",
    ),
    0xB1: OpcodeTemplate(
        mnemonic="LDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOAD BYTE.",
        long_description="Loads the value of the source byte operand into the destination operand.",
    ),
    0xB2: OpcodeTemplate(
        mnemonic="LDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="LOAD BYTE.",
        long_description="Loads the value of the source byte operand into the destination operand.",
    ),
    0xB3: OpcodeTemplate(
        mnemonic="LDB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="LOAD BYTE.",
        long_description="Loads the value of the source byte operand into the destination operand.",
        variable_length=True,
    ),
    0xB4: OpcodeTemplate(
        mnemonic="ADDCB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="ADD BYTES WITH CARRY.",
        long_description="Adds the source and destination byte operands and the carry flag (0 or 1) and stores the sum into the destination operand.",
    ),
    0xB5: OpcodeTemplate(
        mnemonic="ADDCB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="ADD BYTES WITH CARRY.",
        long_description="Adds the source and destination byte operands and the carry flag (0 or 1) and stores the sum into the destination operand.",
    ),
    0xB6: OpcodeTemplate(
        mnemonic="ADDCB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="ADD BYTES WITH CARRY.",
        long_description="Adds the source and destination byte operands and the carry flag (0 or 1) and stores the sum into the destination operand.",
    ),
    0xB7: OpcodeTemplate(
        mnemonic="ADDCB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="ADD BYTES WITH CARRY.",
        long_description="Adds the source and destination byte operands and the carry flag (0 or 1) and stores the sum into the destination operand.",
        variable_length=True,
    ),
    0xB8: OpcodeTemplate(
        mnemonic="SUBCB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="SUBTRACT BYTES WITH BORROW.",
        long_description="Subtracts the source byte operand from the destination byte operand. If the carry flag was clear, SUBCB subtracts 1 from the result. It stores the result in the destination operand and sets the carry flag as the complement of borrow.",
    ),
    0xB9: OpcodeTemplate(
        mnemonic="SUBCB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="SUBTRACT BYTES WITH BORROW.",
        long_description="Subtracts the source byte operand from the destination byte operand. If the carry flag was clear, SUBCB subtracts 1 from the result. It stores the result in the destination operand and sets the carry flag as the complement of borrow.",
    ),
    0xBA: OpcodeTemplate(
        mnemonic="SUBCB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="SUBTRACT BYTES WITH BORROW.",
        long_description="Subtracts the source byte operand from the destination byte operand. If the carry flag was clear, SUBCB subtracts 1 from the result. It stores the result in the destination operand and sets the carry flag as the complement of borrow.",
    ),
    0xBB: OpcodeTemplate(
        mnemonic="SUBCB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="SUBTRACT BYTES WITH BORROW.",
        long_description="Subtracts the source byte operand from the destination byte operand. If the carry flag was clear, SUBCB subtracts 1 from the result. It stores the result in the destination operand and sets the carry flag as the complement of borrow.",
        variable_length=True,
    ),
    0xBC: OpcodeTemplate(
        mnemonic="LDBSE",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="LOAD BYTE SIGN-EXTENDED.",
        long_description="Signextends the value of the source shortinteger operand and loads it into the destination integer operand.",
    ),
    0xBD: OpcodeTemplate(
        mnemonic="LDBSE",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="LOAD BYTE SIGN-EXTENDED.",
        long_description="Signextends the value of the source shortinteger operand and loads it into the destination integer operand.",
    ),
    0xBE: OpcodeTemplate(
        mnemonic="LDBSE",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="LOAD BYTE SIGN-EXTENDED.",
        long_description="Signextends the value of the source shortinteger operand and loads it into the destination integer operand.",
    ),
    0xBF: OpcodeTemplate(
        mnemonic="LDBSE",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="LOAD BYTE SIGN-EXTENDED.",
        long_description="Signextends the value of the source shortinteger operand and loads it into the destination integer operand.",
        variable_length=True,
    ),
    0xC0: OpcodeTemplate(
        mnemonic="ST",
        length=3,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="STORE WORD.",
        long_description="Stores the value of the source (leftmost) word operand into the destination (rightmost) operand.",
    ),
    0xC1: OpcodeTemplate(
        mnemonic="BMOV",
        length=3,
        var_count=2,
        var_types=(VarType.PTRS, VarType.CNTREG),
        operands=(Operand.LREG, Operand.WREG),
        description="BLOCK MOVE.",
        long_description="Moves a block of word data from one location in memory to another. The source and destination addresses are calculated using indirect addressing with autoincrement.\n A long register (PTRS) addresses the source and destination pointers, which are stored in adjacent word registers. The source pointer (SRCPTR) is the low word and the destination pointer (DSTPTR) is the high word of PTRS.\n A word register (CNTREG) specifies thenumber of transfers. CNTREG must reside in the lower register file; it cannot be windowed. The blocks of word data can be located anywhere in page 00H, but should not overlap. Because the source (SRCPTR) and destination (DSTPTR) pointers are 16 bits wide, this instruction uses nonextended data moves. It cannot operate across page boundaries.",
    ),
    0xC2: OpcodeTemplate(
        mnemonic="ST",
        length=3,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="STORE WORD.",
        long_description="Stores the value of the source (leftmost) word operand into the destination (rightmost) operand.",
    ),
    0xC3: OpcodeTemplate(
        mnemonic="ST",
        length=4,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="STORE WORD.",
        long_description="Stores the value of the source (leftmost) word operand into the destination (rightmost) operand.",
        variable_length=True,
    ),
    0xC4: OpcodeTemplate(
        mnemonic="STB",
        length=3,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="STORE BYTE.",
        long_description="Stores the value of the source (leftmost) byte operand into the destination (rightmost) operand.",
    ),
    0xC5: OpcodeTemplate(
        mnemonic="CMPL",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.DLREG, Operand.SLREG),
        mode=AddressingMode.DIRECT,
        description="COMPARE LONG.",
        long_description="Compares the magnitudes of two double-word (long) operands. The operands are specified using the direct addressing mode. The flags are altered, but the operands remain unaffected. If a borrow occurs, the carry flag is cleared; otherwise, it is set.",
    ),
    0xC6: OpcodeTemplate(
        mnemonic="STB",
        length=3,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="STORE BYTE.",
        long_description="Stores the value of the source (leftmost) byte operand into the destination (rightmost) operand.",
    ),
    0xC7: OpcodeTemplate(
        mnemonic="STB",
        length=4,
        var_count=2,
        var_types=(VarType.SRC, VarType.DEST),
        operands=(Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="STORE BYTE.",
        long_description="Stores the value of the source (leftmost) byte operand into the destination (rightmost) operand.",
        variable_length=True,
    ),
    0xC8: OpcodeTemplate(
        mnemonic="PUSH",
        length=2,
        var_count=1,
        var_types=(VarType.SRC,),
        operands=(Operand.WAOP,),
        mode=AddressingMode.DIRECT,
        description="PUSH WORD.",
        long_description="Pushes the word operand onto the stack.",
    ),
    0xC9: OpcodeTemplate(
        mnemonic="PUSH",
        length=3,
        var_count=1,
        var_types=(VarType.SRC,),
        operands=(Operand.WAOP,),
        mode=AddressingMode.IMMEDIATE,
        description="PUSH WORD.",
        long_description="Pushes the word operand onto the stack.",
    ),
    0xCA: OpcodeTemplate(
        mnemonic="PUSH",
        length=2,
        var_count=1,
        var_types=(VarType.SRC,),
        operands=(Operand.WAOP,),
        mode=AddressingMode.INDIRECT,
        description="PUSH WORD.",
        long_description="Pushes the word operand onto the stack.",
    ),
    0xCB: OpcodeTemplate(
        mnemonic="PUSH",
        length=3,
        var_count=1,
        var_types=(VarType.SRC,),
        operands=(Operand.WAOP,),
        mode=AddressingMode.INDEXED,
        description="PUSH WORD.",
        long_description="Pushes the word operand onto the stack.",
        variable_length=True,
    ),
    0xCC: OpcodeTemplate(
        mnemonic="POP",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.WAOP,),
        mode=AddressingMode.DIRECT,
        description="POP WORD.",
        long_description="Pops the word on top of the stack and places it at the destination operand.",
    ),
    0xCD: OpcodeTemplate(
        mnemonic="BMOVI",
        length=3,
        var_count=2,
        var_types=(VarType.PTRS, VarType.CNTREG),
        operands=(Operand.LREG, Operand.WREG),
        mode=AddressingMode.INDIRECT,
        description="INTERRUPTIBLE BLOCK MOVE.",
        long_description="Moves a block of word data from one location in memory to another. The instruction is identical to BMOV, except that BMOVI is interruptible. The source and destination addresses are calculated using indirect addressing with autoincrement.\n A long register (PTRS) addresses the source and destination pointers, which are stored in adjacent word registers. The source pointer (SRCPTR) is the low word and the destination pointer (DSTPTR) is the high word of PTRS.\n A word register (CNTREG) specifies the number of transfers. CNTREG must reside in the lower register file; it cannot be windowed. The blocks of word data can be located anywhere in page 00H, but should not overlap. Because the source (SRCPTR) and destination (DSTPTR) pointers are 16 bits wide, this instruction uses nonexteneded data moves. It cannot operate across page boundaries. (If you need to cross page boundaries, use the EBMOVI instruction.)",
    ),
    0xCE: OpcodeTemplate(
        mnemonic="POP",
        length=2,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.WAOP,),
        mode=AddressingMode.INDIRECT,
        description="POP WORD.",
        long_description="Pops the word on top of the stack and places it at the destination operand.",
    ),
    0xCF: OpcodeTemplate(
        mnemonic="POP",
        length=3,
        var_count=1,
        var_types=(VarType.DEST,),
        operands=(Operand.WAOP,),
        mode=AddressingMode.INDEXED,
        description="POP WORD.",
        long_description="Pops the word on top of the stack and places it at the destination operand.",
        variable_length=True,
    ),
    0xD0: OpcodeTemplate(
        mnemonic="JNST",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF STICKY BIT FLAG IS CLEAR.",
        long_description="Tests the sticky bit flag. If the flag is set, control passes to the next sequential instruction. If the sticky bit flag is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in range of –128 to +127.",
    ),
    0xD1: OpcodeTemplate(
        mnemonic="JNH",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF NOT HIGHER (UNSIGNED).",
        long_description="Tests both the zero flag and the carry flag. If the carry flag is set and the zero flag is clear, control passes to the next sequential instruction. If either the carry flag is clear or the zero flag is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in range of –128 to +127.",
    ),
    0xD2: OpcodeTemplate(
        mnemonic="JGT",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF SIGNED GREATER THAN.",
        long_description="Tests both the zero flag and the negative flag. If either flag is set, control passes to the next sequential instruction. If both flags are clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xD3: OpcodeTemplate(
        mnemonic="JNC",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF CARRY FLAG IS CLEAR.",
        long_description="Tests the carry flag. If the flag is set, control passes to the next sequential instruction. If the carry flag is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xD4: OpcodeTemplate(
        mnemonic="JNVT",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF OVERFLOW-TRAP FLAG IS CLEAR.",
        long_description="Tests the overflow-trap flag. If the flag is set, this instruction clears the flag and passes control to the next sequential instruction. If the overflow-trap flag is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in range of –128 to +127.",
    ),
    0xD5: OpcodeTemplate(
        mnemonic="JNV",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF OVERFLOW FLAG IS CLEAR.",
        long_description="Tests the overflow flag. If the flag is set, control passes to the next sequential instruction. If the overflow flag is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in range of –128 to +127.",
    ),
    0xD6: OpcodeTemplate(
        mnemonic="JGE",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF SIGNED GREATER THAN OR EQUAL.",
        long_description="Tests the negative flag. If the negative flag is set, control passes to the next sequential instruction. If the negative flag is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xD7: OpcodeTemplate(
        mnemonic="JNE",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF NOT EQUAL.",
        long_description="Tests the zero flag. If the flag is set, control passes to the next sequential instruction. If the zero flag is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xD8: OpcodeTemplate(
        mnemonic="JST",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF STICKY BIT FLAG IS SET.",
        long_description="Tests the sticky bit flag. If the flag is clear, control passes to the next sequential instruction. If the sticky bit flag is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in range of –128 to +127.",
    ),
    0xD9: OpcodeTemplate(
        mnemonic="JH",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF HIGHER (UNSIGNED).",
        long_description="Tests both the zero flag and the carry flag. If either the carry flag is clear or the zero flag is set, control passes to the next sequential instruction. If the carry flag is set and the zero flag is clear, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in range of –128 to +127.",
    ),
    0xDA: OpcodeTemplate(
        mnemonic="JLE",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF SIGNED LESS THAN OR EQUAL.",
        long_description="Tests both the negative flag and the zero flag. If both flags are clear, control passes to the next sequential instruction. If either flag is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xDB: OpcodeTemplate(
        mnemonic="JC",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF CARRY FLAG IS SET.",
        long_description="Tests the carry flag. If the carry flag is clear, control passes to the next sequential instruction. If the carry flag is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xDC: OpcodeTemplate(
        mnemonic="JVT",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF OVERFLOW-TRAP FLAG IS SET.",
        long_description="Tests the overflow-trap flag. If the flag is clear, control passes to the next sequential instruction. If the overflow-trap flag is set, this instruction clears the flag and adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in range of –128 to +127.",
    ),
    0xDD: OpcodeTemplate(
        mnemonic="JV",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF OVERFLOW FLAG IS SET.",
        long_description="Tests the overflow flag. If the flag is clear, control passes to the next sequential instruction. If the overflow flag is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in range of –128 to +127.",
    ),
    0xDE: OpcodeTemplate(
        mnemonic="JLT",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF SIGNED LESS THAN.",
        long_description="Tests the negative flag. If the flag is clear, control passes to the next sequential instruction. If the negative flag is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xDF: OpcodeTemplate(
        mnemonic="JE",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.INDEXED,
        description="JUMP IF EQUAL.",
        long_description="Tests the zero flag. If the flag is clear, control passes to the next sequential instruction. If the zero flag is set, this instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xE0: OpcodeTemplate(
        mnemonic="DJNZ",
        length=3,
        var_count=1,
        var_types=(VarType.BREG, VarType.ADDR),
        operands=(Operand.BREG, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="DECREMENT AND JUMP IF NOT ZERO.",
        long_description="Decrements the value of the byte operand by 1. If the result is 0, control passes to the next sequential instruction. If the result is not 0, the instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xE1: OpcodeTemplate(
        mnemonic="DJNZW",
        length=3,
        var_count=1,
        var_types=(VarType.WREG, VarType.ADDR),
        operands=(Operand.WREG, Operand.CADD),
        mode=AddressingMode.INDEXED,
        description="DECREMENT AND JUMP IF NOT ZERO WORD.",
        long_description="Decrements the value of the word operand by 1. If the result is 0, control passes to the next sequential instruction. If the result is not 0, the instruction adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –128 to +127.",
    ),
    0xE2: OpcodeTemplate(
        mnemonic="TIJMP",
        length=4,
        var_count=3,
        var_types=(VarType.TBASE, VarType.INDEX, VarType.MASK),
        operands=(Operand.TBASE, Operand.INDEX, Operand.MASK),
        mode=AddressingMode.INDEXED,
        description="TABLE INDIRECT JUMP.",
        long_description="Causes execution to continue at an address selected from a table of addresses.\n The first word register, TBASE, contains the 16-bit address of the beginning of the jump table. TBASE can be located in RAM up to FEH without windowing or above FFH with windowing. The jump table itself can be placed at any nonreserved memory location on a word boundary in page FFH.\n The second word register, INDEX, contains the 16-bit address that points to a register containing a 7-bit value. This value is used to calculate the offset into the jump table. Like TBASE, INDEX can be located in RAM up to FEH without windowing or above FFH with windowing. Note that the 16-bit address contained in INDEX is absolute; it disregards any windowing that may be in effect when the TIJMP instruction is executed.\n The byte operand, #MASK, is 7-bit immediate data to mask INDEX. #MASK is ANDed with INDEX to determine the offset (OFFSET). OFFSET is multiplied by two, then added to the base address (TBASE) to determine the destination address (DEST X) in page FFH.",
    ),
    0xE3: OpcodeTemplate(
        mnemonic="EBR",
        length=2,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.EXTENDED_INDIRECT,
        description="EXTENDED BRANCH INDIRECT.",
        long_description="Continues execution at the address specified in the operand word register. This instruction is an unconditional indirect jump to anywhere in the 16-Mbyte address space.\n EBR shares its opcode (E3) with the BR instruction. To differentiate between the two, the compiler sets the least-significant bit of treg for the EBR instruction.",
    ),
    0xE4: OpcodeTemplate(
        mnemonic="EBMOVI",
        length=3,
        var_count=2,
        var_types=(VarType.PTRS, VarType.CNTREG),
        operands=(Operand.PTR2_REG, Operand.WREG),
        mode=AddressingMode.EXTENDED_INDIRECT,
        description="EXTENDED INTERRUPTIBLE BLOCK MOVE.",
        long_description="Moves a block of word data from one memory location to another. This instruction allows you to move blocks of up to 64K words between any two locations in the 16-Mbyte address space. This instruction is interruptible. The source and destination addresses are calculated using the extended indirect with autoincrement addressing mode. A quadword register (PTRS) addresses the 24-bit pointers, which are stored in adjacent doubleword registers. The source pointer (SRCPTR) is the low double-word and the destination pointer is the high double-word of PTRS. A word register (CNTREG) specifies the number of transfers. This register must reside in the lower register file; it cannot be windowed. The blocks of data can reside anywhere in memory, but should not overlap.",
    ),
    0xE5: OpcodeTemplate(
        mnemonic="Reserved",
        length=1,
        reserved=True,
    ),
    0xE6: OpcodeTemplate(
        mnemonic="EJMP",
        length=4,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.EXTENDED_INDEXED,
        description="EXTENDED JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The operand may be any address in the entire address space. The offset must be in the range of +8,388,607 to –8,388,608 for 24-bit addresses. This instruction is an unconditional, relative jump to anywhere in the 16-Mbyte address space. It functions only in extended addressing mode.",
    ),
    0xE7: OpcodeTemplate(
        mnemonic="LJMP",
        length=3,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.LONG_INDEXED,
        description="LONG JUMP.",
        long_description="Adds to the program counter the offset between the end of this instruction and the target label, effecting the jump. The offset must be in the range of –32,768 to +32,767.",
    ),
    0xE8: OpcodeTemplate(
        mnemonic="ELD",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.TREG),
        mode=AddressingMode.EXTENDED_INDIRECT,
        description="EXTENDED LOAD WORD.",
        long_description="Loads the value of the source word operand into the destination operand. This instruction allows you to move data from anywhere in the 16-Mbyte address space into the lower register file.",
    ),
    0xE9: OpcodeTemplate(
        mnemonic="ELD",
        length=6,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.TREG),
        mode=AddressingMode.EXTENDED_INDEXED,
        description="EXTENDED LOAD WORD.",
        long_description="Loads the value of the source word operand into the destination operand. This instruction allows you to move data from anywhere in the 16-Mbyte address space into the lower register file.",
    ),
    0xEA: OpcodeTemplate(
        mnemonic="ELDB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.TREG),
        mode=AddressingMode.EXTENDED_INDIRECT,
        description="EXTENDED LOAD BYTE.",
        long_description="Loads the value of the source byte operand into the destination operand. This instruction allows you to move data from anywhere in the 16-Mbyte address space into the lower register file.",
    ),
    0xEB: OpcodeTemplate(
        mnemonic="ELDB",
        length=6,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.BREG, Operand.TREG),
        mode=AddressingMode.EXTENDED_INDEXED,
        description="EXTENDED LOAD BYTE.",
        long_description="Loads the value of the source byte operand into the destination operand. This instruction allows you to move data from anywhere in the 16-Mbyte address space into the lower register file.",
    ),
    0xEC: OpcodeTemplate(
        mnemonic="DPTS",
        length=1,
        mode=AddressingMode.DIRECT,
        description="DISABLE PERIPHERAL TRANSACTION SERVER (PTS).",
        long_description="Disables the peripheral transaction server (PTS).",
    ),
    0xED: OpcodeTemplate(
        mnemonic="EPTS",
        length=1,
        mode=AddressingMode.DIRECT,
        description="ENABLE PERIPHERAL TRANSACTION SERVER (PTS).",
        long_description="Enables the peripheral transaction server (PTS).",
    ),
    0xEE: OpcodeTemplate(
        mnemonic="Reserved",
        length=1,
        reserved=True,
    ),
    0xEF: OpcodeTemplate(
        mnemonic="LCALL",
        length=3,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.LONG_INDEXED,
        description="LONG CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The offset must be in the range of –32,768 to +32,767.",
    ),
    0xF0: OpcodeTemplate(
        mnemonic="RET",
        length=1,
        mode=AddressingMode.INDIRECT,
        description="RETURN FROM SUBROUTINE.",
        long_description="Pops the PC off the top of the stack.",
    ),
    0xF1: OpcodeTemplate(
        mnemonic="ECALL",
        length=4,
        var_count=1,
        var_types=(VarType.ADDR,),
        operands=(Operand.CADD,),
        mode=AddressingMode.EXTENDED_INDEXED,
        description="EXTENDED CALL.",
        long_description="Pushes the contents of the program counter (the return address) onto the stack, then adds to the program counter the offset between the end of this instruction and the target label, effecting the call. The operand may be any address in the address space. \n This instruction is an unconditional relative call to anywhere in the 16-Mbyte address space. It functions only in extended addressing mode.",
    ),
    0xF2: OpcodeTemplate(
        mnemonic="PUSHF",
        length=1,
        mode=AddressingMode.DIRECT,
        description="PUSH FLAGS.",
        long_description="Pushes the PSW onto the top of the stack, then clears it. Clearing the PSW disables interrupt servicing. Interrupt calls cannot occur immediately following this instruction.",
    ),
    0xF3: OpcodeTemplate(
        mnemonic="POPF",
        length=1,
        mode=AddressingMode.DIRECT,
        description="POP FLAGS.",
        long_description="Pops the word on top of the stack and places it into the PSW. Interrupt calls cannot occur immediately following this instruction.",
    ),
    0xF4: OpcodeTemplate(
        mnemonic="PUSHA",
        length=1,
        mode=AddressingMode.DIRECT,
        description="PUSH ALL.",
        long_description="This instruction is used instead of PUSHF, to support the eight additional interrupts. It pushes two words — PSW/INT_MASK and INT_MASK1/WSR — onto the stack.\n This instruction clears the PSW, INT_MASK, and INT_MASK1 registers and decrements the SP by 4. Interrupt calls cannot occur immediately following this instruction.",
    ),
    0xF5: OpcodeTemplate(
        mnemonic="POPA",
        length=1,
        mode=AddressingMode.DIRECT,
        description="POP ALL.",
        long_description="This instruction is used instead of POPF, to support the eight additional interrupts. It pops two words off the stack and places the first word into the INT_MASK1/WSR register pair and the second word into the PSW/INT_MASK register-pair. This instruction increments the SP by 4. Interrupt calls cannot occur immediately following this instruction.",
    ),
    0xF6: OpcodeTemplate(
        mnemonic="IDLPD",
        length=1,
        mode=AddressingMode.IMMEDIATE,
        description="IDLE/POWERDOWN.",
        long_description="Depending on the 8-bit value of the KEY operand, this instruction causes the device to: \n • enter idle mode, if KEY=1, \n • enter powerdown mode, if KEY=2, \n • execute a reset sequence, \n if KEY > 3. \n The bus controller completes any prefetch cycle in progress before the CPU stops or resets.",
    ),
    0xF7: OpcodeTemplate(
        mnemonic="TRAP",
        length=1,
        mode=AddressingMode.DIRECT,
        description="SOFTWARE TRAP.",
        long_description="This instruction causes an interrupt call that is vectored through location FF2010H. The operation of this instruction is not affected by the state of the interrupt enable flag (I) in the PSW. Interrupt calls cannot occur immediately following this instruction.",
    ),
    0xF8: OpcodeTemplate(
        mnemonic="CLRC",
        length=1,
        mode=AddressingMode.DIRECT,
        description="CLEAR CARRY FLAG.",
        long_description="Clears the carry flag.",
    ),
    0xF9: OpcodeTemplate(
        mnemonic="SETC",
        length=1,
        mode=AddressingMode.DIRECT,
        description="SET CARRY FLAG.",
        long_description="Sets the carry flag.",
    ),
    0xFA: OpcodeTemplate(
        mnemonic="DI",
        length=1,
        mode=AddressingMode.DIRECT,
        description="DISABLE INTERRUPTS.",
        long_description="Disables maskable interrupts. Interrupt calls cannot occur after this instruction.",
    ),
    0xFB: OpcodeTemplate(
        mnemonic="EI",
        length=1,
        mode=AddressingMode.DIRECT,
        description="ENABLE INTERRUPTS.",
        long_description="Enables maskable interrupts following the execution of the next statement. Interrupt calls cannot occur immediately following this instruction.",
    ),
    0xFC: OpcodeTemplate(
        mnemonic="CLRVT",
        length=1,
        mode=AddressingMode.DIRECT,
        description="CLEAR OVERFLOW-TRAP FLAG.",
        long_description="Clears the overflow-trap flag.",
    ),
    0xFD: OpcodeTemplate(
        mnemonic="NOP",
        length=1,
        mode=AddressingMode.DIRECT,
        description="NO OPERATION.",
        long_description="Does nothing. Control passes to the next sequential instruction.",
    ),
    0xFE: OpcodeTemplate(
        mnemonic="(Note 2) Prefix for signed multiplication and division.",
        length=1,
        ignore=True,
    ),
    0xFF: OpcodeTemplate(
        mnemonic="RST",
        length=1,
        mode=AddressingMode.DIRECT,
        description="RESET SYSTEM.",
        long_description="Initializes the PSW to zero, the PC to FF2080H, and the pins and SFRs to their reset values. Executing this instruction causes the RESET# pin to be pulled low for 16 state times.",
    ),
}


SIGNED_OPCODES: Dict[int, OpcodeTemplate] = {
    0x1C: OpcodeTemplate(
        mnemonic="MYSTERY",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="MYSTERY.",
        long_description="MYSTERY",
    ),
    0x4C: OpcodeTemplate(
        mnemonic="MUL",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="MULTIPLY INTEGERS.",
        long_description="Multiplies the two source integer operands, using signed arithmetic, and stores the 32-bit result into the destination long-integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x4D: OpcodeTemplate(
        mnemonic="MUL",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="MULTIPLY INTEGERS.",
        long_description="Multiplies the two source integer operands, using signed arithmetic, and stores the 32-bit result into the destination long-integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x4E: OpcodeTemplate(
        mnemonic="MUL",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="MULTIPLY INTEGERS.",
        long_description="Multiplies the two source integer operands, using signed arithmetic, and stores the 32-bit result into the destination long-integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x4F: OpcodeTemplate(
        mnemonic="MUL",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.LREG, Operand.WREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="MULTIPLY INTEGERS.",
        long_description="Multiplies the two source integer operands, using signed arithmetic, and stores the 32-bit result into the destination long-integer operand. The sticky bit flag is undefined after the instruction is executed.",
        variable_length=True,
    ),
    0x5C: OpcodeTemplate(
        mnemonic="MULB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.WREG, Operand.BREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="MULTIPLY SHORT-INTEGERS.",
        long_description="Multiplies the two source short-integer operands, using signed arithmetic, and stores the 16-bit result into the destination integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x5D: OpcodeTemplate(
        mnemonic="MULB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.WREG, Operand.BREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="MULTIPLY SHORT-INTEGERS.",
        long_description="Multiplies the two source short-integer operands, using signed arithmetic, and stores the 16-bit result into the destination integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x5E: OpcodeTemplate(
        mnemonic="MULB",
        length=4,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.WREG, Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="MULTIPLY SHORT-INTEGERS.",
        long_description="Multiplies the two source short-integer operands, using signed arithmetic, and stores the 16-bit result into the destination integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x5F: OpcodeTemplate(
        mnemonic="MULB",
        length=5,
        var_count=3,
        var_types=(VarType.DEST, VarType.SRC1, VarType.SRC2),
        operands=(Operand.WREG, Operand.BREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="MULTIPLY SHORT-INTEGERS.",
        long_description="Multiplies the two source short-integer operands, using signed arithmetic, and stores the 16-bit result into the destination integer operand. The sticky bit flag is undefined after the instruction is executed.",
        variable_length=True,
    ),
    0x6C: OpcodeTemplate(
        mnemonic="MUL",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="MULTIPLY INTEGERS.",
        long_description="Multiplies the source and destination integer operands, using signed arithmetic, and stores the 32-bit result into the destination long-integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x6D: OpcodeTemplate(
        mnemonic="MUL",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="MULTIPLY INTEGERS.",
        long_description="Multiplies the source and destination integer operands, using signed arithmetic, and stores the 32-bit result into the destination long-integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x6E: OpcodeTemplate(
        mnemonic="MUL",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="MULTIPLY INTEGERS.",
        long_description="Multiplies the source and destination integer operands, using signed arithmetic, and stores the 32-bit result into the destination long-integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x6F: OpcodeTemplate(
        mnemonic="MUL",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="MULTIPLY INTEGERS.",
        long_description="Multiplies the source and destination integer operands, using signed arithmetic, and stores the 32-bit result into the destination long-integer operand. The sticky bit flag is undefined after the instruction is executed.",
        variable_length=True,
    ),
    0x7C: OpcodeTemplate(
        mnemonic="MULB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="MULTIPLY SHORT-INTEGERS.",
        long_description="Multiplies the source and destination short-integer operands, using signed arithmetic, and stores the 16-bit result into the destination integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x7D: OpcodeTemplate(
        mnemonic="MULB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="MULTIPLY SHORT-INTEGERS.",
        long_description="Multiplies the source and destination short-integer operands, using signed arithmetic, and stores the 16-bit result into the destination integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x7E: OpcodeTemplate(
        mnemonic="MULB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="MULTIPLY SHORT-INTEGERS.",
        long_description="Multiplies the source and destination short-integer operands, using signed arithmetic, and stores the 16-bit result into the destination integer operand. The sticky bit flag is undefined after the instruction is executed.",
    ),
    0x7F: OpcodeTemplate(
        mnemonic="MULB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="MULTIPLY SHORT-INTEGERS.",
        long_description="Multiplies the source and destination short-integer operands, using signed arithmetic, and stores the 16-bit result into the destination integer operand. The sticky bit flag is undefined after the instruction is executed.",
        variable_length=True,
    ),
    0x8C: OpcodeTemplate(
        mnemonic="DIV",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.DIRECT,
        description="DIVIDE INTEGERS.",
        long_description="Divides the contents of the destination long-integer operand by the contents of the source integer word operand, using signed arithmetic. It stores the quotient into the low-order word of the destination (i.e., the word with the lower address) and the remainder into the high-order word.",
    ),
    0x8D: OpcodeTemplate(
        mnemonic="DIV",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.IMMEDIATE,
        description="DIVIDE INTEGERS.",
        long_description="Divides the contents of the destination long-integer operand by the contents of the source integer word operand, using signed arithmetic. It stores the quotient into the low-order word of the destination (i.e., the word with the lower address) and the remainder into the high-order word.",
    ),
    0x8E: OpcodeTemplate(
        mnemonic="DIV",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.INDIRECT,
        description="DIVIDE INTEGERS.",
        long_description="Divides the contents of the destination long-integer operand by the contents of the source integer word operand, using signed arithmetic. It stores the quotient into the low-order word of the destination (i.e., the word with the lower address) and the remainder into the high-order word.",
    ),
    0x8F: OpcodeTemplate(
        mnemonic="DIV",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.LREG, Operand.WAOP),
        mode=AddressingMode.INDEXED,
        description="DIVIDE INTEGERS.",
        long_description="Divides the contents of the destination long-integer operand by the contents of the source integer word operand, using signed arithmetic. It stores the quotient into the low-order word of the destination (i.e., the word with the lower address) and the remainder into the high-order word.",
        variable_length=True,
    ),
    0x9C: OpcodeTemplate(
        mnemonic="DIVB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.DIRECT,
        description="DIVIDE SHORT-INTEGERS.",
        long_description="Divides the contents of the destination integer operand by the contents of the source short-integer operand, using signed arithmetic. It stores the quotient into the low-order byte of the destination (i.e., the word with the lower address) and the remainder into the highorder byte. ",
    ),
    0x9D: OpcodeTemplate(
        mnemonic="DIVB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.IMMEDIATE,
        description="DIVIDE SHORT-INTEGERS.",
        long_description="Divides the contents of the destination integer operand by the contents of the source short-integer operand, using signed arithmetic. It stores the quotient into the low-order byte of the destination (i.e., the word with the lower address) and the remainder into the highorder byte. ",
    ),
    0x9E: OpcodeTemplate(
        mnemonic="DIVB",
        length=3,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDIRECT,
        description="DIVIDE SHORT-INTEGERS.",
        long_description="Divides the contents of the destination integer operand by the contents of the source short-integer operand, using signed arithmetic. It stores the quotient into the low-order byte of the destination (i.e., the word with the lower address) and the remainder into the highorder byte. ",
    ),
    0x9F: OpcodeTemplate(
        mnemonic="DIVB",
        length=4,
        var_count=2,
        var_types=(VarType.DEST, VarType.SRC),
        operands=(Operand.WREG, Operand.BAOP),
        mode=AddressingMode.INDEXED,
        description="DIVIDE SHORT-INTEGERS.",
        long_description="Divides the contents of the destination integer operand by the contents of the source short-integer operand, using signed arithmetic. It stores the quotient into the low-order byte of the destination (i.e., the word with the lower address) and the remainder into the highorder byte. ",
        variable_length=True,
    ),
}


__all__ = ["SIGNED_OPCODES", "UNSIGNED_OPCODES"]
