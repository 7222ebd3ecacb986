"""
Errores de dominio

InvalidArgument is raised for missing inputs, negative price sums,
non-positive quantities and unknown mail templates. It is never retried;
model generation aborts and nothing partial is returned.
"""


class InvalidArgument(ValueError):
    """Required input missing or outside its allowed range"""
