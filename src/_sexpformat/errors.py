class InvalidConfig(ValueError):
    """
    Thrown when a formatting configuration is given a non-positive numeric
    parameter, an unusable indentation character or an empty or duplicated
    prefix. The configuration in use is left untouched.
    """

    pass
