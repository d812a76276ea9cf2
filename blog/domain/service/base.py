"""Base class for domain services."""


class Service:
    """Base class for blog domain services.

    A service holds the rules that span a repository call and an
    aggregate, or more than one aggregate.
    """

    pass
