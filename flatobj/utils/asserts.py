import jax.numpy as jnp


def assert_array(var, varname):
    r"""Assert that the variable is a JAX array (jnp.ndarray)."""
    if not isinstance(var, jnp.ndarray):
        raise TypeError(
            f"Expected {varname} of type jnp.ndarray. Got {type(var)} instead."
        )


def assert_flat(var, varname, components):
    r"""Assert that ``var`` is a 1-D JAX array holding whole ``components``-tuples.

    Returns:
        (int): Number of tuples stored in the array.
    """
    assert_array(var, varname)
    if var.ndim != 1 or var.shape[0] % components != 0:
        raise ValueError(
            f"{varname} must be a flat array with a multiple of {components} entries."
            f" Got shape {var.shape} instead."
        )
    return var.shape[0] // components
