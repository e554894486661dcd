import pytest

from umachine.registers import REGISTER_COUNT, Registers


def test_new_registers_are_zero():
    regs = Registers()
    assert list(regs) == [0] * REGISTER_COUNT


def test_length_is_eight():
    assert len(Registers()) == 8


@pytest.mark.parametrize("index", range(REGISTER_COUNT))
def test_put_then_get(index):
    regs = Registers()
    regs[index] = 0xDEADBEEF
    assert regs[index] == 0xDEADBEEF
    others = [value for i, value in enumerate(regs) if i != index]
    assert others == [0] * (REGISTER_COUNT - 1)


def test_values_wrap_to_32_bits():
    regs = Registers()
    regs[0] = (1 << 32) + 7
    regs[1] = -1
    assert regs[0] == 7
    assert regs[1] == 0xFFFFFFFF


@pytest.mark.parametrize("index", [REGISTER_COUNT, 100, -1])
def test_invalid_register_get(index):
    with pytest.raises(IndexError):
        Registers()[index]


@pytest.mark.parametrize("index", [REGISTER_COUNT, -3])
def test_invalid_register_put(index):
    regs = Registers()
    with pytest.raises(IndexError):
        regs[index] = 1
    assert list(regs) == [0] * REGISTER_COUNT


def test_iteration_is_a_snapshot():
    regs = Registers()
    snapshot = iter(regs)
    regs[0] = 5
    assert next(snapshot) == 0
    assert regs[0] == 5


def test_independent_banks():
    first, second = Registers(), Registers()
    first[3] = 9
    assert second[3] == 0