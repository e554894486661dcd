"""The universal machine: decodes and executes 32-bit instruction words."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable
from typing import BinaryIO

from .bitpack import get_unsigned
from .memory import SegmentedMemory
from .registers import REGISTER_COUNT, Registers

WORD_SIZE = 32
OP_WIDTH = 4
R_WIDTH = 3
RA_LSB = 6
RB_LSB = 3
RC_LSB = 0
VALUE_WIDTH = WORD_SIZE - OP_WIDTH - R_WIDTH
_WORD_MASK = 0xFFFFFFFF


class Opcode(enum.IntEnum):
    """Instruction opcodes, taken from the top four bits of a word."""

    CMOV = 0
    SLOAD = 1
    SSTORE = 2
    ADD = 3
    MUL = 4
    DIV = 5
    NAND = 6
    HALT = 7
    MAP = 8
    UNMAP = 9
    OUT = 10
    IN = 11
    LOADP = 12
    LV = 13


class MachineError(RuntimeError):
    """Raised when the machine meets an instruction it cannot carry out."""


class UniversalMachine:
    """Eight registers and segmented memory, running the program in segment 0."""

    def __init__(
        self,
        length: int,
        stdin: BinaryIO | None = None,
        stdout: BinaryIO | None = None,
    ) -> None:
        self.registers = Registers()
        self.memory = SegmentedMemory(length)
        self._stdin = stdin if stdin is not None else sys.stdin.buffer
        self._stdout = stdout if stdout is not None else sys.stdout.buffer
        self.halted = False
        self._handlers: dict[Opcode, Callable[[int, int, int], None]] = {
            Opcode.CMOV: self._conditional_move,
            Opcode.SLOAD: self._segmented_load,
            Opcode.SSTORE: self._segmented_store,
            Opcode.ADD: self._add,
            Opcode.MUL: self._multiply,
            Opcode.DIV: self._divide,
            Opcode.NAND: self._nand,
            Opcode.HALT: self._halt,
            Opcode.MAP: self._map_segment,
            Opcode.UNMAP: self._unmap_segment,
            Opcode.OUT: self._output,
            Opcode.IN: self._input,
        }

    def populate(self, index: int, word: int) -> None:
        """Store instruction ``word`` at offset ``index`` of segment 0."""
        self.memory.put(0, index, word)

    def execute(self) -> None:
        """Run segment 0 until a halt or until the program counter runs off its end."""
        self.halted = False
        length = self.memory.segment_length(0)
        counter = 0
        try:
            while not self.halted and counter < length:
                word = self.memory.get(0, counter)
                counter += 1
                opcode = get_unsigned(word, OP_WIDTH, WORD_SIZE - OP_WIDTH)

                if opcode == Opcode.LV:
                    self.load_value(
                        get_unsigned(word, R_WIDTH, VALUE_WIDTH),
                        get_unsigned(word, VALUE_WIDTH, 0),
                    )
                    continue

                ra = get_unsigned(word, R_WIDTH, RA_LSB)
                rb = get_unsigned(word, R_WIDTH, RB_LSB)
                rc = get_unsigned(word, R_WIDTH, RC_LSB)

                if opcode == Opcode.LOADP:
                    counter = self.load_program(ra, rb, rc)
                    length = self.memory.segment_length(0)
                else:
                    self.instruction_call(opcode, ra, rb, rc)
        finally:
            self._stdout.flush()

    def instruction_call(self, op: int, ra: int, rb: int, rc: int) -> None:
        """Carry out one of the three-register instructions (opcodes 0 to 11)."""
        try:
            opcode = Opcode(op)
        except ValueError:
            raise MachineError(f"invalid opcode {op}") from None
        self._check_registers(ra, rb, rc)
        handler = self._handlers.get(opcode)
        if handler is not None:
            handler(ra, rb, rc)

    def load_program(self, ra: int, rb: int, rc: int) -> int:
        """Copy the segment named by $r[rb] into segment 0; return $r[rc]."""
        self._check_registers(ra, rb, rc)
        self.memory.load_into_zero(self.registers[rb])
        return self.registers[rc]

    def load_value(self, ra: int, value: int) -> None:
        """Put ``value`` into register ``ra``."""
        self._check_registers(ra)
        self.registers[ra] = value

    @staticmethod
    def _check_registers(*numbers: int) -> None:
        for number in numbers:
            if not 0 <= number < REGISTER_COUNT:
                raise MachineError(f"invalid register {number}")

    def _conditional_move(self, ra: int, rb: int, rc: int) -> None:
        if self.registers[rc] != 0:
            self.registers[ra] = self.registers[rb]

    def _segmented_load(self, ra: int, rb: int, rc: int) -> None:
        self.registers[ra] = self.memory.get(self.registers[rb], self.registers[rc])

    def _segmented_store(self, ra: int, rb: int, rc: int) -> None:
        self.memory.put(self.registers[ra], self.registers[rb], self.registers[rc])

    def _add(self, ra: int, rb: int, rc: int) -> None:
        self.registers[ra] = (self.registers[rb] + self.registers[rc]) & _WORD_MASK

    def _multiply(self, ra: int, rb: int, rc: int) -> None:
        self.registers[ra] = (self.registers[rb] * self.registers[rc]) & _WORD_MASK

    def _divide(self, ra: int, rb: int, rc: int) -> None:
        divisor = self.registers[rc]
        if divisor == 0:
            raise MachineError("division by zero")
        self.registers[ra] = self.registers[rb] // divisor

    def _nand(self, ra: int, rb: int, rc: int) -> None:
        self.registers[ra] = ~(self.registers[rb] & self.registers[rc]) & _WORD_MASK

    def _halt(self, ra: int, rb: int, rc: int) -> None:
        self.halted = True

    def _map_segment(self, ra: int, rb: int, rc: int) -> None:
        self.registers[rb] = self.memory.map(self.registers[rc])

    def _unmap_segment(self, ra: int, rb: int, rc: int) -> None:
        self.memory.unmap(self.registers[rc])

    def _output(self, ra: int, rb: int, rc: int) -> None:
        value = self.registers[rc]
        if value > 255:
            raise MachineError(f"cannot output value {value}: not a byte")
        self._stdout.write(bytes((value,)))

    def _input(self, ra: int, rb: int, rc: int) -> None:
        data = self._stdin.read(1)
        self.registers[rc] = data[0] if data else _WORD_MASK