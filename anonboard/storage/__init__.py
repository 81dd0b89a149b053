from anonboard.storage.base import ThreadCollection
from anonboard.storage.memory import MemoryThreadCollection
from anonboard.storage.sql import SqlThreadCollection
