from .models import Descriptor, FdKind, Group, Target, kind_to_str
from .grouping import group_descriptors, is_equivalent
from .resolver import resolve

__version__ = "0.1.0"
