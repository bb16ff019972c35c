"""Degree bounds of the algebraic holographic proof underlying universal setups."""

from zkparams.errors import SynthesisError
from zkparams.util.utility_functions import next_power_of_two

ZK_BOUND = 1


def domain_size(n: int, two_adicity: int) -> int:
    """Size of the smallest radix-2 evaluation domain holding `n` elements.

    Raises:
        SynthesisError: If the domain exceeds the largest power-of-two subgroup of the field.
    """
    size = next_power_of_two(n)
    if size > 1 << two_adicity:
        msg = f"No evaluation domain of size {size}: the field only supports domains up to 2^{two_adicity}"
        raise SynthesisError(msg)
    return size


def max_degree(num_constraints: int, num_variables: int, num_non_zero: int, two_adicity: int) -> int:
    """Return the largest polynomial degree a circuit of the given shape requires from an SRS.

    Args:
        num_constraints (int): Number of constraints.
        num_variables (int): Number of variables.
        num_non_zero (int): Number of non-zero entries of the largest constraint matrix.
        two_adicity (int): Two-adicity of the scalar field.

    Returns:
        The maximum degree over the masking, first-round, second-round and matrix polynomials.

    Raises:
        SynthesisError: If one of the evaluation domains is too large for the field.

    Example:
        >>> max_degree(40000, 40000, 60000, 32)
        196607
    """
    h = domain_size(max(num_variables, num_constraints), two_adicity)
    k = domain_size(num_non_zero, two_adicity)
    return max(
        2 * h + ZK_BOUND - 2,
        3 * h + 2 * ZK_BOUND - 3,
        h,
        3 * k - 3,
    )
