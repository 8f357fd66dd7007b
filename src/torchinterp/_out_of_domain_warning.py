class OutOfDomainWarning(UserWarning):
    """Issued when a query point lies outside the sample domain.

    The query is still answered according to the model's extrapolation
    policy ("extrapolate" or "clamp").
    """

    pass
