"""CHIP-8 stack operations."""

import jax.numpy as jnp
from octcore.constants import STACK_SIZE
from octcore.errors import StackOverflow, StackUnderflow
from octcore.state import StackState


def push(stack: StackState, address: int) -> StackState:
    """Push address onto stack."""
    if stack.pointer >= STACK_SIZE:
        raise StackOverflow()
    new_data = stack.data.at[stack.pointer].set(int(address) & 0xFFFF)
    return stack.replace(data=new_data, pointer=stack.pointer + 1)


def pop(stack: StackState) -> tuple[StackState, int]:
    """Pop address from stack."""
    if stack.pointer == 0:
        raise StackUnderflow()
    new_pointer = stack.pointer - 1
    popped_address = int(stack.data[new_pointer])
    new_data = stack.data.at[new_pointer].set(0)
    return stack.replace(data=new_data, pointer=new_pointer), popped_address


def peek(stack: StackState) -> int:
    """Return the top address without popping it."""
    if stack.pointer == 0:
        raise StackUnderflow()
    return int(stack.data[stack.pointer - 1])


def reset(stack: StackState) -> StackState:
    """Empty the stack."""
    return stack.replace(data=jnp.zeros_like(stack.data), pointer=0)
