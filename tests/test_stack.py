"""Tests for the call stack."""

import pytest
from octcore import STACK_SIZE, StackOverflow, StackUnderflow
from octcore.stack import push, pop, peek, reset
from octcore.state import create_stack


def test_push_pop():
    stack = create_stack()
    stack = push(stack, 7)
    stack = push(stack, 12)

    stack, value = pop(stack)
    assert value == 12
    stack, value = pop(stack)
    assert value == 7
    assert stack.pointer == 0


def test_peek():
    stack = push(create_stack(), 0x240)
    assert peek(stack) == 0x240
    assert stack.pointer == 1


def test_reset():
    stack = create_stack()
    stack = push(stack, 7)
    stack = push(stack, 10)
    stack = reset(stack)

    assert stack.pointer == 0
    assert int(stack.data.sum()) == 0


def test_fill_to_capacity():
    stack = create_stack()
    for address in range(STACK_SIZE):
        stack = push(stack, 0x200 + address * 2)
    assert stack.pointer == STACK_SIZE


def test_overflow():
    stack = create_stack()
    for address in range(STACK_SIZE):
        stack = push(stack, address)

    with pytest.raises(StackOverflow):
        push(stack, 0x300)


def test_underflow():
    with pytest.raises(StackUnderflow):
        pop(create_stack())


def test_push_is_immutable():
    stack = create_stack()
    push(stack, 0x222)
    assert stack.pointer == 0
