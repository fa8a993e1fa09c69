"""Interface adapters."""

__all__: list[str] = []
