"""Field naming exports."""

from .snake_caser import FieldNameTransformer, SnakeCaser

__all__ = ["FieldNameTransformer", "SnakeCaser"]
