"""Blank circuit descriptors."""

from dataclasses import dataclass


@dataclass(frozen=True, init=False)
class BlankCircuit:
    """Shape of a constraint system, sufficient to run a setup without a witness.

    Attributes:
        name (str): Name of the circuit.
        num_constraints (int): Number of constraints.
        num_variables (int): Number of variables, the constant one included.
        num_public_inputs (int): Number of public inputs, the constant one excluded.
        num_non_zero (int): Number of non-zero entries of the largest constraint matrix.
    """

    name: str
    num_constraints: int
    num_variables: int
    num_public_inputs: int
    num_non_zero: int

    def __init__(self, name: str, num_constraints: int, num_variables: int, num_public_inputs: int, num_non_zero: int):
        if num_constraints <= 0:
            msg = f"The number of constraints must be a positive integer: num_constraints: {num_constraints}"
            raise ValueError(msg)
        if num_public_inputs < 0:
            msg = f"The number of public inputs must be non-negative: num_public_inputs: {num_public_inputs}"
            raise ValueError(msg)
        if num_variables <= num_public_inputs:
            msg = f"The circuit must have private variables: num_variables: {num_variables}, \
                num_public_inputs: {num_public_inputs}"
            raise ValueError(msg)
        if num_non_zero <= 0:
            msg = f"The number of non-zero entries must be a positive integer: num_non_zero: {num_non_zero}"
            raise ValueError(msg)

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "num_constraints", num_constraints)
        object.__setattr__(self, "num_variables", num_variables)
        object.__setattr__(self, "num_public_inputs", num_public_inputs)
        object.__setattr__(self, "num_non_zero", num_non_zero)
