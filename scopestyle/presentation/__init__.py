from .styled import Styled

__all__ = ["Styled"]
