"""Validators referenced from olive.yaml by dotted path."""


def positive(value: int) -> None:
    if value <= 0:
        raise ValueError("must be a positive number")
