from __future__ import annotations

import json
from typing import Any, Dict, List

from .bind import Instruction, Variable
from .flow import Edge


def _variable_to_dict(var: Variable) -> Dict[str, Any]:
    return {
        "value": var.value,
        "type": var.var_type.value if var.var_type is not None else None,
        "bits": var.bits,
    }


def _edges_to_list(edges: Dict[int, List[Edge]]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for bucket in edges.values():
        for edge in bucket:
            out.append(
                {
                    "text": edge.text,
                    "mnemonic": edge.mnemonic,
                    "from": edge.source,
                    "to": edge.target,
                }
            )
    return out


def instruction_to_dict(instr: Instruction) -> Dict[str, Any]:
    return {
        "address": instr.address,
        "opcode": instr.opcode,
        "mnemonic": instr.mnemonic,
        "length": instr.byte_length,
        "mode": instr.mode.value,
        "signed": instr.signed,
        "auto_increment": instr.auto_increment,
        "checked": instr.checked,
        "raw": instr.raw.hex(),
        "operands": {
            operand.value: _variable_to_dict(var) for operand, var in instr.vars.items()
        },
        "pseudocode": instr.pseudocode,
        "xrefs": _edges_to_list(instr.xrefs),
        "calls": _edges_to_list(instr.calls),
        "jumps": _edges_to_list(instr.jumps),
    }


def dumps(instr: Instruction, **kwargs: Any) -> str:
    return json.dumps(instruction_to_dict(instr), **kwargs)


__all__ = ["dumps", "instruction_to_dict"]
