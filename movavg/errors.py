class InvalidConfiguration(ValueError):
    pass


def require_positive_int(name: str, value: object) -> int:
    # bool is an int subclass but never a meaningful size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidConfiguration(f"{name} must be at least 1, got {value}")
    return value
