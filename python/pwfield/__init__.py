"""
Password generator field for admin-panel forms.
"""

from .config import FieldDefaults, load_defaults
from .field import PasswordGeneratorField
from .hashing import PasswordHasher, make_hash
from .options import FieldOptions
from .request import FormRequest, MappingRequest

__all__ = [
    'FieldDefaults',
    'FieldOptions',
    'FormRequest',
    'MappingRequest',
    'PasswordGeneratorField',
    'PasswordHasher',
    'load_defaults',
    'make_hash',
]
