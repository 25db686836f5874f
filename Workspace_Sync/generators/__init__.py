# Auto-generated __init__.py

from . import inventory
from .inventory import INVENTORY_FILE_NAME
from .inventory import ansible_inventory
from .inventory import create_inventory
from .inventory import load_generator
from . import keys
from .keys import key_pair_files

__all__ = [
    "inventory",
    "keys",
    "INVENTORY_FILE_NAME",
    "ansible_inventory",
    "create_inventory",
    "key_pair_files",
    "load_generator",
]
