"""Exception hierarchy for hc-sampler.

All exceptions derive from HCSamplerError, enabling broad catch patterns
at the load-balancer boundary while allowing fine-grained handling internally.
"""


class HCSamplerError(Exception):
    """Base exception for all hc-sampler errors."""


class InvalidArgumentError(HCSamplerError, ValueError):
    """A construction argument is outside its documented domain.

    Raised when a ratio falls outside ``(0.0, 1.0]``, a count is negative,
    or an endpoint address cannot be parsed. Never raised by ``select()``
    on a valid candidate pool.
    """


class ConfigValidationError(HCSamplerError):
    """Configuration field validation failed.

    Raised when overrides contain unknown keys, fail type validation, or
    name a selection strategy that is not registered.
    """
