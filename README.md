# umachine

An emulator for the Universal Machine: a small 32-bit virtual machine with
eight general-purpose registers, segmented memory and fourteen instructions.

## Installing

    pip install .

## Running a program

A program is a binary file of 32-bit big-endian words; any trailing bytes
that do not make up a whole word are ignored. Run it with:

    umachine program.um

Standard input feeds the machine's input instruction. The output instruction
writes one byte at a time to standard output. The machine stops when it
reaches a halt instruction or runs past the end of segment 0.

The command exits with status 0 when the program finishes. It prints a
usage line and exits with status 1 when not given exactly one file name,
and prints a message and exits with status 1 when the file cannot be read
or the program faults.

## Instruction set

Every instruction takes its opcode from the top four bits of the word.

| Opcode | Name  | Effect                                                 |
|-------:|-------|--------------------------------------------------------|
| 0      | CMOV  | if `$r[C] != 0` then `$r[A] := $r[B]`                  |
| 1      | SLOAD | `$r[A] := $m[$r[B]][$r[C]]`                            |
| 2      | SSTORE| `$m[$r[A]][$r[B]] := $r[C]`                            |
| 3      | ADD   | `$r[A] := ($r[B] + $r[C]) mod 2^32`                    |
| 4      | MUL   | `$r[A] := ($r[B] * $r[C]) mod 2^32`                    |
| 5      | DIV   | `$r[A] := $r[B] // $r[C]`; fault if `$r[C]` is 0       |
| 6      | NAND  | `$r[A] := ~($r[B] & $r[C])`                            |
| 7      | HALT  | stop the machine                                       |
| 8      | MAP   | map a new zeroed segment of `$r[C]` words into `$r[B]` |
| 9      | UNMAP | unmap segment `$r[C]`; segment 0 cannot be unmapped    |
| 10     | OUT   | write byte `$r[C]`; fault if it is above 255           |
| 11     | IN    | read a byte into `$r[C]`; all ones at end of input     |
| 12     | LOADP | copy segment `$r[B]` into segment 0, jump to `$r[C]`   |
| 13     | LV    | load the 25-bit value into the register in bits 25–27  |

For the three-register instructions, A, B and C are the 3-bit fields at bits
6, 3 and 0. Opcodes 14 and 15 are invalid.

## Using it as a library

    import io
    from umachine.machine import UniversalMachine

    out = io.BytesIO()
    machine = UniversalMachine(2, io.BytesIO(), out)
    machine.populate(0, (13 << 28) | (1 << 25) | ord("A"))  # r1 := 'A'
    machine.populate(1, (10 << 28) | 1)                      # output r1
    machine.execute()
    assert out.getvalue() == b"A"

`UniversalMachine` takes the length of segment 0 and optional binary input
and output streams (standard input and output by default). Its `registers`
and `memory` attributes give access to the machine state; `halted` is set
once a halt instruction runs. `instruction_call`, `load_program` and
`load_value` carry out single instructions directly.

`umachine.cli.load_machine` builds a machine from a program file, and
`umachine.cli.words_from_bytes` turns raw program bytes into words.

Faults such as division by zero, an invalid opcode or output of a value
above 255 raise `umachine.machine.MachineError`; reads and writes outside a
mapped segment, or unmapping segment 0, raise `umachine.memory.SegmentError`.

### Building blocks

- `umachine.registers.Registers`: eight 32-bit registers, indexed 0 to 7,
  starting at zero. Stored values are truncated to 32 bits; other indices
  raise `IndexError`.
- `umachine.memory.SegmentedMemory`: numbered segments of zeroed words with
  `get`, `put`, `map`, `unmap`, `segment_length` and `load_into_zero`.
  Segment 0 is mapped on creation, and unmapped segment numbers are reused.
- `umachine.bitpack`: bit-field helpers used by the decoder —
  `get_unsigned`, `get_signed`, `new_unsigned`, `new_signed`,
  `fits_unsigned` and `fits_signed`. The `new_*` functions raise
  `BitpackOverflow` when a value does not fit its field.