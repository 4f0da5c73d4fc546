from enum import Enum

class ResponseType(str, Enum):
    """Shape of the ``data`` field in a successful envelope"""
    ENTITY = "entity"
    COLLECTION = "collection"
