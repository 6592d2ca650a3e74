from .generic import PsutilRegistry
from .linux import SnapshotError, kind_from_mode, list_descriptors
