from ..extensions import db
from .circle import Circle
from .member import Member, DEFAULT_AGE, DEFAULT_MAJOR

__all__ = ["db", "Circle", "Member", "DEFAULT_AGE", "DEFAULT_MAJOR"]
